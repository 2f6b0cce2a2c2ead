"""
Seed sources for the TaskStore.

A seed source produces the initial list of tasks passed to
TaskStore.seed() at startup. Three sources are available:

- default: the built-in example tasks
- file:    a JSON document on disk
- remote:  a JSON endpoint fetched over HTTP

Both JSON sources accept either a bare list of task objects or the
API's own list shape, ``{"tasks": [...]}``.
"""

import json
import logging
from pathlib import Path
from typing import Any, Mapping

import requests

from tracker.errors import InvalidInput, SeedSourceError
from tracker.models import Task

logger = logging.getLogger(__name__)

SEED_SOURCES = ("default", "empty", "file", "remote")


def default_tasks() -> list[Task]:
    """Return the built-in example tasks."""
    return [
        Task(id=1, text="Doctors Appointment", day="Feb 5th at 2:30pm", reminder=False),
        Task(id=2, text="Meeting at School", day="Feb 6th at 1:30pm", reminder=False),
    ]


def parse_tasks(payload: Any) -> list[Task]:
    """
    Convert a decoded JSON payload into tasks.

    Args:
        payload: A list of task objects, or an object with a "tasks" list.

    Returns:
        List of Task instances in payload order.

    Raises:
        InvalidInput: If the payload or any record is malformed.
    """
    if isinstance(payload, Mapping):
        payload = payload.get("tasks")
    if not isinstance(payload, list):
        raise InvalidInput("Seed data must be a list of tasks")
    return [Task.from_dict(item) for item in payload]


def load_tasks_file(path: str | Path) -> list[Task]:
    """
    Read seed tasks from a JSON file.

    Args:
        path: Location of the JSON document.

    Returns:
        List of Task instances.

    Raises:
        SeedSourceError: If the file cannot be read or is not valid JSON.
        InvalidInput: If the document is not a valid task list.
    """
    path = Path(path)
    logger.info(f"Loading seed tasks from {path}")
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        raise SeedSourceError(f"Cannot read seed file {path}: {exc}") from exc
    return parse_tasks(payload)


def fetch_remote_tasks(url: str, timeout: float = 5) -> list[Task]:
    """
    Fetch seed tasks from a remote JSON endpoint.

    Args:
        url: Endpoint returning a task list.
        timeout: Request timeout in seconds.

    Returns:
        List of Task instances.

    Raises:
        SeedSourceError: On network errors, non-2xx responses or a
                         body that is not JSON.
        InvalidInput: If the body is not a valid task list.
    """
    logger.info(f"Fetching seed tasks from {url}")
    try:
        response = requests.get(url, timeout=timeout, headers={"Accept": "application/json"})
        response.raise_for_status()
        payload = response.json()
    except requests.RequestException as exc:
        raise SeedSourceError(f"Cannot fetch seed tasks from {url}: {exc}") from exc
    except ValueError as exc:
        raise SeedSourceError(f"Seed endpoint {url} did not return JSON") from exc
    return parse_tasks(payload)


def load_seed(config: Mapping[str, Any]) -> list[Task]:
    """
    Produce the initial tasks selected by configuration.

    Args:
        config: Mapping with TASKS_SEED and the settings of the chosen
                source (TASKS_SEED_PATH, TASKS_SEED_URL, TASKS_SEED_TIMEOUT).

    Returns:
        List of Task instances, possibly empty.

    Raises:
        SeedSourceError: If the source is unknown or misconfigured.
    """
    source = config.get("TASKS_SEED", "default")

    if source == "default":
        return default_tasks()
    if source == "empty":
        return []
    if source == "file":
        path = config.get("TASKS_SEED_PATH")
        if not path:
            raise SeedSourceError("TASKS_SEED_PATH is required for the 'file' seed source")
        return load_tasks_file(path)
    if source == "remote":
        url = config.get("TASKS_SEED_URL")
        if not url:
            raise SeedSourceError("TASKS_SEED_URL is required for the 'remote' seed source")
        return fetch_remote_tasks(url, timeout=config.get("TASKS_SEED_TIMEOUT", 5))

    raise SeedSourceError(f"Unknown seed source {source!r}. Must be one of: {list(SEED_SOURCES)}")
