"""
Flask application factory module.

This module creates and configures the Flask application using
the factory pattern. Each application owns exactly one task store,
seeded at startup from the configured source and shared by all
request handlers through ``get_store()``.
"""

import logging
from typing import Any, Mapping

from flask import Flask, current_app

from config import get_config
from tracker.models import TaskEvent
from tracker.sources import load_seed
from tracker.store import LockedTaskStore

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

STORE_KEY = "task_store"


def log_task_event(event: TaskEvent) -> None:
    """Store observer that records every change in the application log."""
    if event.task is None:
        logger.info(f"Tasks {event.kind.value}: {len(event.tasks)} tasks")
    else:
        logger.info(f"Task {event.task.id} {event.kind.value} ({len(event.tasks)} tasks)")


def get_store() -> LockedTaskStore:
    """Return the task store of the current application."""
    return current_app.extensions[STORE_KEY]


def create_app(
    config_name: str | None = None,
    overrides: Mapping[str, Any] | None = None
) -> Flask:
    """
    Create and configure the Flask application.

    Args:
        config_name: Configuration environment name.
                     If None, uses FLASK_ENV environment variable.
        overrides: Settings applied on top of the configuration class.

    Returns:
        Configured Flask application instance.
    """
    app = Flask(__name__)

    # Load configuration
    config_class = get_config(config_name)
    app.config.from_object(config_class)
    if overrides:
        app.config.update(overrides)

    logger.info(f"Creating app with config: {config_class.__name__}")

    # One store per application, never a module-level singleton
    store = LockedTaskStore()
    store.subscribe(log_task_event)
    store.seed(load_seed(app.config))
    app.extensions[STORE_KEY] = store

    # Register blueprints
    from tracker.routes.api import api_bp

    app.register_blueprint(api_bp, url_prefix="/api")

    return app
