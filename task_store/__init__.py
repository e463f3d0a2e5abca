"""
Flask application factory module.

This module creates and configures the Task Store application using
the factory pattern, allowing for different configurations
(development, testing, production). Each application owns its own
``TaskStore``, reachable as ``app.extensions["task_store"]``.
"""

import logging

from flask import Flask, Response, jsonify

from config import get_config
from task_store.store import TaskStore

STORE_EXTENSION = "task_store"

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    """Configure root logging once for the process."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


def register_error_handlers(app: Flask) -> None:
    """
    Register application-wide JSON error handlers.

    Unmatched routes (including a known path with an unsupported method)
    answer 404, and anything that escapes a view answers a generic 500.
    """

    @app.errorhandler(404)
    @app.errorhandler(405)
    def route_not_found(error: Exception) -> tuple[Response, int]:
        return jsonify({"error": "Route not found"}), 404

    @app.errorhandler(500)
    def unhandled_error(error: Exception) -> tuple[Response, int]:
        original = getattr(error, "original_exception", None) or error
        logger.error("Unhandled error: %s", original, exc_info=original)
        return jsonify({"error": "Something went wrong!"}), 500


def create_app(config_name: str | None = None, store: TaskStore | None = None) -> Flask:
    """
    Create and configure the Flask application.

    Args:
        config_name: Configuration environment name.
                     If None, uses FLASK_ENV environment variable.
        store: Optional pre-built store. When omitted a new one is
               created, seeded according to ``SEED_TASKS``.

    Returns:
        Configured Flask application instance.
    """
    app = Flask(__name__)

    # Load configuration
    config_class = get_config(config_name)
    app.config.from_object(config_class)

    configure_logging(app.config["LOG_LEVEL"])
    logger.info("Creating app with config: %s", config_class.__name__)

    if store is None:
        store = TaskStore.seeded() if app.config["SEED_TASKS"] else TaskStore()
    app.extensions[STORE_EXTENSION] = store
    logger.info("Task store ready with %d tasks", len(store))

    # Register blueprints
    from task_store.routes.api import api_bp

    app.register_blueprint(api_bp)
    register_error_handlers(app)

    return app
