"""
REST API endpoints for Task management.

This module maps HTTP requests onto ``TaskStore`` operations. Handlers
read the request, call the store, and turn the returned ``(value, error)``
pair into a JSON response.

Endpoints:
    GET    /tasks          - List all tasks (optional ?completed= filter)
    GET    /tasks/<id>     - Get a single task by ID
    POST   /tasks          - Create a new task
    PUT    /tasks/<id>     - Update an existing task
    DELETE /tasks/<id>     - Delete a task
"""

import logging
from typing import Any

from flask import Blueprint, Response, current_app, jsonify, request

from task_store.errors import TaskError
from task_store.schemas import parse_completed_filter
from task_store.store import TaskStore

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)


# -----------------------------------------------------------------------------
# Helper Functions
# -----------------------------------------------------------------------------

def get_store() -> TaskStore:
    """Return the store owned by the running application."""
    return current_app.extensions["task_store"]


def request_payload() -> dict[str, Any]:
    """
    Read the request body as a dictionary.

    JSON bodies are preferred; form-encoded bodies are accepted as well.
    Anything else (no body, malformed JSON, a JSON array) yields an empty
    dictionary so the usual validation messages apply.
    """
    data = request.get_json(silent=True)
    if data is None and request.form:
        data = request.form.to_dict()
    if not isinstance(data, dict):
        return {}
    return data


def error_response(error: TaskError) -> tuple[Response, int]:
    """Build the JSON response for a store error."""
    if error.status_code == 404:
        logger.warning("%s %s - %s", request.method, request.path, error.message)
    else:
        logger.warning("Validation failed: %s", error.message)
    return jsonify(error.to_dict()), error.status_code


# -----------------------------------------------------------------------------
# API Endpoints
# -----------------------------------------------------------------------------

@api_bp.route("/tasks", methods=["GET"], strict_slashes=False)
def get_tasks() -> tuple[Response, int]:
    """
    List all tasks, optionally filtered by completion state.

    Query Parameters:
        completed: "true" for completed tasks; any other value for open ones.

    Returns:
        JSON array of tasks and 200 status code.
    """
    logger.info("GET /tasks - Fetching tasks")

    completed = parse_completed_filter(request.args.get("completed"))
    tasks = get_store().list_all(completed=completed)
    logger.info("Found %d tasks", len(tasks))

    return jsonify([task.to_dict() for task in tasks]), 200


@api_bp.route("/tasks/<task_id>", methods=["GET"])
def get_task(task_id: str) -> tuple[Response, int]:
    """
    Get a single task by ID.

    Returns:
        JSON task and 200, 400 for a malformed id, or 404 if not found.
    """
    logger.info("GET /tasks/%s - Fetching task", task_id)

    task, error = get_store().get(task_id)
    if error:
        return error_response(error)

    return jsonify(task.to_dict()), 200


@api_bp.route("/tasks", methods=["POST"], strict_slashes=False)
def create_task() -> tuple[Response, int]:
    """
    Create a new task.

    Request Body:
        title: Task title (required)
        description: Task description (required)
        completed: Completion flag (optional, default: false)

    Returns:
        JSON response with created task and 201 status code,
        or error message and 400 if validation fails.
    """
    logger.info("POST /tasks - Creating new task")

    task, error = get_store().create(request_payload())
    if error:
        return error_response(error)

    return jsonify(task.to_dict()), 201


@api_bp.route("/tasks/<task_id>", methods=["PUT"])
def update_task(task_id: str) -> tuple[Response, int]:
    """
    Update an existing task with any subset of its fields.

    Request Body:
        title: Task title
        description: Task description
        completed: Completion flag (must be a boolean)

    Returns:
        JSON response with updated task and 200 status code,
        or error message and 400/404.
    """
    logger.info("PUT /tasks/%s - Updating task", task_id)

    task, error = get_store().update(task_id, request_payload())
    if error:
        return error_response(error)

    return jsonify(task.to_dict()), 200


@api_bp.route("/tasks/<task_id>", methods=["DELETE"])
def delete_task(task_id: str) -> tuple[Response, int]:
    """
    Delete a task.

    Returns:
        JSON response with success message and 200 status code,
        or error message and 400/404.
    """
    logger.info("DELETE /tasks/%s - Deleting task", task_id)

    message, error = get_store().delete(task_id)
    if error:
        return error_response(error)

    return jsonify({"message": message}), 200


# -----------------------------------------------------------------------------
# Error Handlers
# -----------------------------------------------------------------------------

@api_bp.errorhandler(500)
def internal_error(error: Exception) -> tuple[Response, int]:
    """Handle unexpected failures inside task endpoints."""
    original = getattr(error, "original_exception", None) or error
    logger.error("Internal server error: %s", original, exc_info=original)
    return jsonify({"error": "Internal server error"}), 500
