# src/todo_service/connectors/http_connector.py

"""
HTTP connector (Flask).

Thin transport over TaskRepo:
- parses query strings / JSON bodies,
- calls the store,
- maps TaskStoreError subclasses to status codes and JSON envelopes.

No task rules live here; the store owns them.
"""

from __future__ import annotations

import logging
from typing import Any

from flask import Flask, jsonify, request

from ..core.state import AppState
from ..tasks.task_errors import (
    DueDateInPastError,
    DuplicateTitleError,
    InvalidFilterError,
    InvalidSortKeyError,
    InvalidStatusError,
    TaskNotFoundError,
    TaskStoreError,
)

logger = logging.getLogger(__name__)

_STATUS_BY_ERROR: dict[type[TaskStoreError], int] = {
    DuplicateTitleError: 409,
    DueDateInPastError: 409,
    TaskNotFoundError: 404,
    InvalidStatusError: 400,
    InvalidFilterError: 400,
    InvalidSortKeyError: 400,
}


def _status_for(err: TaskStoreError) -> int:
    for cls, code in _STATUS_BY_ERROR.items():
        if isinstance(err, cls):
            return code
    return 400


def _envelope(result: Any = None, error_message: str | None = None):
    return jsonify({"result": result, "errorMessage": error_message})


def _parse_id(raw: str | None) -> int:
    """Query-string id -> int; anything non-integer can never match a task."""
    try:
        return int(str(raw).strip())
    except ValueError:
        raise TaskNotFoundError(raw) from None


def create_app(state: AppState) -> Flask:
    """Build the Flask app bound to state.task_store."""
    app = Flask(__name__)
    store = state.task_store

    @app.errorhandler(TaskStoreError)
    def _handle_store_error(err: TaskStoreError):
        code = _status_for(err)
        logger.info("Request rejected %s %s -> %s: %s", request.method, request.path, code, err)
        return _envelope(error_message=str(err)), code

    @app.get("/todo/health")
    def health():
        return "OK", 200, {"Content-Type": "text/plain; charset=utf-8"}

    @app.post("/todo")
    def create_todo():
        body = request.get_json(silent=True)
        if not isinstance(body, dict):
            return _envelope(error_message="Error: request body must be a JSON object"), 400

        title = body.get("title")
        if not isinstance(title, str) or not title:
            return _envelope(error_message="Error: title is required"), 400

        content = body.get("content")
        content = "" if content is None else str(content)

        task_id = store.create(title, content, body.get("dueDate"))
        logger.info("Created TODO id=%s title=%r", task_id, title)
        return _envelope(task_id), 200

    @app.get("/todo/size")
    def count_todos():
        try:
            n = store.count(request.args.get("status"))
        except InvalidFilterError:
            return "Bad Request: Invalid status filter", 400
        return jsonify({"result": n}), 200

    @app.get("/todo/content")
    def list_todos():
        try:
            views = store.list_tasks(request.args.get("status"), request.args.get("sortBy"))
        except InvalidFilterError:
            return jsonify({"error": "Invalid status parameter"}), 400
        except InvalidSortKeyError:
            return jsonify({"error": "Invalid sortBy parameter"}), 400
        return jsonify(views), 200

    @app.put("/todo")
    def update_todo_status():
        task_id = _parse_id(request.args.get("id"))
        previous = store.update_status(task_id, request.args.get("status"))
        logger.info("Updated TODO id=%s previous_status=%s", task_id, previous)
        return _envelope(str(previous)), 200

    @app.delete("/todo")
    def delete_todo():
        task_id = _parse_id(request.args.get("id"))
        remaining = store.delete(task_id)
        logger.info("Deleted TODO id=%s remaining=%s", task_id, remaining)
        return _envelope(remaining), 200

    return app


def run_http_server(state: AppState) -> None:
    """Serve the app with Flask's built-in (threaded) server until interrupted."""
    settings = state.settings
    host = str(getattr(settings, "host", "127.0.0.1"))
    port = int(getattr(settings, "port", 9285))
    debug = bool(getattr(settings, "debug", False))

    app = create_app(state)
    logger.info("Server is running on port %s (host=%s)", port, host)
    app.run(host=host, port=port, debug=debug, use_reloader=False, threaded=True)
