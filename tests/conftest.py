"""
Shared pytest fixtures for the Task Tracker test suite.

This module contains fixtures that are shared across all test modules.
Fixtures follow the Arrange-Act-Assert (AAA) pattern and ensure
test isolation by providing a fresh application, and therefore a
fresh task store, for each test.

Key Concepts Demonstrated:
- Fixture dependencies
- Test data factories
- Observer recording
- Test client creation
"""

import os
import pytest
from typing import Any
from faker import Faker

# Set testing environment before importing app
os.environ["FLASK_ENV"] = "testing"

from tracker import create_app, get_store
from tracker.models import Task, TaskEvent
from tracker.store import TaskStore


# Initialize Faker for generating test data
fake = Faker()


# -----------------------------------------------------------------------------
# Application Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture(scope="function")
def app():
    """
    Create an application instance for one test.

    Every application owns its own store, so a function-scoped app
    is all the isolation the tests need.

    Yields:
        Flask application instance configured for testing.
    """
    application = create_app("testing")
    yield application


@pytest.fixture(scope="function")
def client(app):
    """
    Create a test client for making HTTP requests.

    Args:
        app: Flask application fixture.

    Yields:
        Flask test client for making HTTP requests.
    """
    with app.test_client() as test_client:
        yield test_client


@pytest.fixture
def app_store(app):
    """
    Provide the task store owned by the application under test.

    Args:
        app: Flask application fixture.

    Returns:
        The application's LockedTaskStore.
    """
    with app.app_context():
        return get_store()


@pytest.fixture
def store() -> TaskStore:
    """Provide a bare, empty TaskStore."""
    return TaskStore()


@pytest.fixture
def events(store) -> list[TaskEvent]:
    """
    Record every event the bare store emits.

    Returns:
        List that fills up with TaskEvent instances as the test runs.
    """
    received: list[TaskEvent] = []
    store.subscribe(received.append)
    return received


# -----------------------------------------------------------------------------
# Test Data Factory Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture
def task_factory(app_store):
    """
    Factory fixture for adding tasks to the application's store.

    Args:
        app_store: Application store fixture.

    Returns:
        Function that creates and returns Task instances.

    Example:
        def test_something(task_factory):
            task = task_factory(text="My Task")
            assert task.id is not None
    """
    def _create_task(
        text: str | None = None,
        day: str | None = None,
        reminder: bool = False
    ) -> Task:
        """
        Add a task with the given or default values.

        Args:
            text: Task text (defaults to random sentence).
            day: Schedule label (defaults to random date string).
            reminder: Reminder flag (defaults to False).

        Returns:
            Created Task instance with an ID.
        """
        return app_store.add(
            text or fake.sentence(nb_words=4),
            day=day if day is not None else fake.date(pattern="%b %d"),
            reminder=reminder
        )

    return _create_task


@pytest.fixture
def sample_task(task_factory) -> Task:
    """Create a single sample task for tests that need one task."""
    return task_factory(
        text="Sample Task",
        day="Feb 5th at 2:30pm",
        reminder=False
    )


@pytest.fixture
def multiple_tasks(task_factory) -> list[Task]:
    """
    Create several tasks, half of them with a reminder set.

    Returns:
        List of Task instances in creation order.
    """
    return [
        task_factory(text="Doctors Appointment", reminder=True),
        task_factory(text="Meeting at School", reminder=False),
        task_factory(text="Food Shopping", reminder=True),
        task_factory(text="Pay Rent", reminder=False),
    ]


# -----------------------------------------------------------------------------
# Test Data Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture
def valid_task_data() -> dict[str, Any]:
    """
    Provide valid task data for POST requests.

    Returns:
        Dictionary with valid task field values.
    """
    return {
        "text": "Test Task",
        "day": "Feb 7th at 9:00am",
        "reminder": True
    }


@pytest.fixture
def minimal_task_data() -> dict[str, str]:
    """Provide minimal valid task data (only required fields)."""
    return {"text": "Minimal Task"}


@pytest.fixture
def seed_records() -> list[dict[str, Any]]:
    """Provide two task records in the shape the seed sources accept."""
    return [
        {"id": 1, "text": "Doctor", "day": "Feb 5", "reminder": True},
        {"id": 2, "text": "Meeting", "day": "Feb 6", "reminder": True},
    ]


@pytest.fixture
def api_headers() -> dict[str, str]:
    """
    Provide common headers for API requests.

    Returns:
        Dictionary of HTTP headers.
    """
    return {
        "Content-Type": "application/json",
        "Accept": "application/json"
    }
