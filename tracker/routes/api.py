"""
REST API endpoints for Task management.

This module exposes the application's task store over HTTP.
All endpoints return JSON responses and follow REST conventions.

Endpoints:
    GET    /api/health                - Health check
    GET    /api/tasks                 - List all tasks (optional reminder filter)
    GET    /api/tasks/<id>            - Get a single task by ID
    POST   /api/tasks                 - Create a new task
    DELETE /api/tasks/<id>            - Delete a task
    PATCH  /api/tasks/<id>/reminder   - Toggle a task's reminder
"""

import logging
import os
from flask import Blueprint, current_app, jsonify, request, Response
from werkzeug.exceptions import InternalServerError

from tracker import get_store
from tracker.errors import InvalidInput, NotFound

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)


# -----------------------------------------------------------------------------
# Helper Functions
# -----------------------------------------------------------------------------

def validate_task_data(data: dict) -> tuple[bool, str | None]:
    """
    Validate task data from request.

    Text emptiness is checked by the store itself; this only rejects
    fields of the wrong type before they reach it.

    Args:
        data: Dictionary containing task data.

    Returns:
        Tuple of (is_valid, error_message).
    """
    if not isinstance(data.get("text"), str):
        return False, "'text' is required"

    if data.get("day") is not None and not isinstance(data["day"], str):
        return False, "'day' must be a string"

    if "reminder" in data and not isinstance(data["reminder"], bool):
        return False, "'reminder' must be a boolean"

    return True, None


def parse_bool_arg(value: str) -> bool | None:
    """Parse a boolean query parameter; None if unrecognized."""
    lowered = value.strip().lower()
    if lowered in ("true", "1", "yes"):
        return True
    if lowered in ("false", "0", "no"):
        return False
    return None


# -----------------------------------------------------------------------------
# API Endpoints
# -----------------------------------------------------------------------------

@api_bp.route("/health", methods=["GET"])
def health_check() -> tuple[Response, int]:
    """Health check endpoint for deployment verification."""
    return jsonify({
        "status": "healthy",
        "title": current_app.config["APP_TITLE"],
        "environment": os.getenv("ENVIRONMENT", "unknown"),
        "version": os.getenv("APP_VERSION", "unknown")
    }), 200


@api_bp.route("/tasks", methods=["GET"])
def get_tasks() -> tuple[Response, int]:
    """
    List all tasks in insertion order.

    Query Parameters:
        reminder: Only return tasks whose reminder matches (true/false)

    Returns:
        JSON response with list of tasks and 200 status code,
        or error message and 400 if the filter is invalid.
    """
    logger.info("GET /api/tasks - Fetching all tasks")

    tasks = get_store().list()

    reminder_arg = request.args.get("reminder")
    if reminder_arg is not None:
        reminder = parse_bool_arg(reminder_arg)
        if reminder is None:
            return jsonify({"error": "Invalid reminder filter. Must be true or false"}), 400
        tasks = [task for task in tasks if task.reminder is reminder]

    logger.info(f"Found {len(tasks)} tasks")

    return jsonify({
        "tasks": [task.to_dict() for task in tasks],
        "count": len(tasks)
    }), 200


@api_bp.route("/tasks/<int:task_id>", methods=["GET"])
def get_task(task_id: int) -> tuple[Response, int]:
    """
    Get a single task by ID.

    Args:
        task_id: The unique identifier of the task.

    Returns:
        JSON response with task data and 200 status code,
        or error message and 404 if not found.
    """
    logger.info(f"GET /api/tasks/{task_id} - Fetching task")

    task = get_store().get(task_id)
    return jsonify(task.to_dict()), 200


@api_bp.route("/tasks", methods=["POST"])
def create_task() -> tuple[Response, int]:
    """
    Create a new task.

    Request Body (JSON):
        text: Task description (required, non-empty)
        day: Schedule label (optional, default: "")
        reminder: Reminder flag (optional, default: false)

    Returns:
        JSON response with created task and 201 status code,
        or error message and 400 if validation fails.
    """
    logger.info("POST /api/tasks - Creating new task")

    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({"error": "Request body must be a JSON object"}), 400

    is_valid, error = validate_task_data(data)
    if not is_valid:
        logger.warning(f"Validation failed: {error}")
        return jsonify({"error": error}), 400

    task = get_store().add(
        data["text"],
        day=data.get("day") or "",
        reminder=data.get("reminder", False)
    )

    logger.info(f"Created task with ID: {task.id}")
    return jsonify(task.to_dict()), 201


@api_bp.route("/tasks/<int:task_id>", methods=["DELETE"])
def delete_task(task_id: int) -> tuple[Response, int]:
    """
    Delete a task.

    Deleting a task that does not exist is not an error; the response
    reports whether anything was removed.

    Args:
        task_id: The unique identifier of the task.

    Returns:
        JSON response with a message and 200 status code.
    """
    logger.info(f"DELETE /api/tasks/{task_id} - Deleting task")

    deleted = get_store().remove(task_id)
    if deleted:
        logger.info(f"Deleted task {task_id}")
        message = "Task deleted successfully"
    else:
        logger.info(f"Task {task_id} was already absent")
        message = "Task not present"

    return jsonify({"message": message, "deleted": deleted}), 200


@api_bp.route("/tasks/<int:task_id>/reminder", methods=["PATCH"])
def toggle_reminder(task_id: int) -> tuple[Response, int]:
    """
    Flip the reminder flag of a task.

    Args:
        task_id: The unique identifier of the task.

    Returns:
        JSON response with updated task and 200 status code,
        or error message and 404 if not found.
    """
    logger.info(f"PATCH /api/tasks/{task_id}/reminder - Toggling reminder")

    # Flip and read back in one locked call
    task = get_store().toggle(task_id)
    if task is None:
        raise NotFound(task_id)

    logger.info(f"Task {task_id} reminder is now {task.reminder}")
    return jsonify(task.to_dict()), 200


# -----------------------------------------------------------------------------
# Error Handlers
# -----------------------------------------------------------------------------

@api_bp.errorhandler(InvalidInput)
def invalid_input(error: InvalidInput) -> tuple[Response, int]:
    """Handle rejected task data raised by the store."""
    logger.warning(f"Validation failed: {error}")
    return jsonify({"error": str(error)}), 400


@api_bp.errorhandler(NotFound)
def task_not_found(error: NotFound) -> tuple[Response, int]:
    """Handle lookups of tasks that do not exist."""
    logger.warning(f"Task {error.task_id} not found")
    return jsonify({"error": "Task not found"}), 404


# App-wide: routing failures (unknown URL, wrong method) answer in JSON too

@api_bp.app_errorhandler(400)
def bad_request(error: Exception) -> tuple[Response, int]:
    """Handle 400 Bad Request errors."""
    return jsonify({"error": "Bad request"}), 400


@api_bp.app_errorhandler(404)
def not_found(error: Exception) -> tuple[Response, int]:
    """Handle 404 Not Found errors."""
    return jsonify({"error": "Resource not found"}), 404


@api_bp.app_errorhandler(405)
def method_not_allowed(error: Exception) -> tuple[Response, int]:
    """Handle 405 Method Not Allowed errors."""
    return jsonify({"error": "Method not allowed"}), 405


@api_bp.app_errorhandler(500)
def internal_error(error: InternalServerError) -> tuple[Response, int]:
    """Handle 500 Internal Server errors."""
    original = getattr(error, "original_exception", None) or error
    logger.error(f"Internal server error: {original!r}")
    return jsonify({"error": "Internal server error"}), 500
