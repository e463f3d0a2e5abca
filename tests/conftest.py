"""
Shared pytest fixtures for the Task Store test suite.

This module contains fixtures that are shared across all test modules.
Fixtures follow the Arrange-Act-Assert (AAA) pattern and ensure
test isolation by resetting the in-memory store for each test.

Key Concepts Demonstrated:
- Fixture scopes (function, session)
- Fixture dependencies
- Test data factories
- Store reset between tests
- Test client creation
"""

import os
from typing import Any

import pytest
from faker import Faker

# Set testing environment before importing app
os.environ["FLASK_ENV"] = "testing"

from task_store import create_app
from task_store.models import Task
from task_store.store import TaskStore


# Initialize Faker for generating test data
fake = Faker()


# -----------------------------------------------------------------------------
# Application Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture(scope="session")
def app():
    """
    Create application instance for the test session.

    The 'session' scope means the same app instance is reused
    for all tests; the ``store`` fixture restores its data.

    Yields:
        Flask application instance configured for testing.
    """
    application = create_app("testing")
    yield application


@pytest.fixture(scope="function")
def store(app) -> TaskStore:
    """
    Provide the application's task store in its seeded state.

    The store is reset before and after each test so ids restart at 4
    and the three seed tasks are present.

    Args:
        app: Flask application fixture.

    Yields:
        The TaskStore owned by the app.
    """
    task_store = app.extensions["task_store"]
    task_store.reset()
    yield task_store
    task_store.reset()


@pytest.fixture(scope="function")
def client(app, store):
    """
    Create a test client for making HTTP requests.

    Args:
        app: Flask application fixture.
        store: Reset store fixture, so every test starts from seed data.

    Yields:
        Flask test client for making HTTP requests.
    """
    with app.test_client() as test_client:
        yield test_client


@pytest.fixture
def empty_store() -> TaskStore:
    """Provide a standalone store with no tasks, detached from the app."""
    return TaskStore()


# -----------------------------------------------------------------------------
# Test Data Factory Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture
def task_factory(store):
    """
    Factory fixture for creating Task instances through the store.

    Args:
        store: Task store fixture.

    Returns:
        Function that creates and returns Task instances.

    Example:
        def test_something(task_factory):
            task = task_factory(title="My Task")
            assert task.id >= 4
    """

    def _create_task(
        title: str | None = None,
        description: str | None = None,
        completed: bool = False
    ) -> Task:
        task, error = store.create({
            "title": title or fake.sentence(nb_words=4),
            "description": description or fake.paragraph(),
            "completed": completed,
        })
        assert error is None, error
        return task

    return _create_task


@pytest.fixture
def sample_task(task_factory) -> Task:
    """Create a single open task for tests that need one."""
    return task_factory(
        title="Sample Task",
        description="This is a sample task for testing"
    )


@pytest.fixture
def mixed_tasks(task_factory) -> list[Task]:
    """
    Create tasks with both completion states on top of the seed data.

    After this fixture the store holds 3 seeded completed tasks,
    1 more completed task and 2 open ones.
    """
    return [
        task_factory(title="Open task one"),
        task_factory(title="Finished task", completed=True),
        task_factory(title="Open task two"),
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
        "title": "Test Task",
        "description": "This is a test task description",
        "completed": False
    }


@pytest.fixture
def minimal_task_data() -> dict[str, str]:
    """Provide minimal valid task data (only required fields)."""
    return {"title": "Minimal Task", "description": "Only the required fields"}


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
