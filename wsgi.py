"""WSGI entry point for the task store service."""

import logging
import os

from task_store import create_app

app = create_app(os.getenv("FLASK_ENV", "production"))

logger = logging.getLogger(__name__)


if __name__ == "__main__":
    host = app.config["HOST"]
    port = app.config["PORT"]
    logger.info("Server is listening on %s", port)
    app.run(host=host, port=port, threaded=True)
