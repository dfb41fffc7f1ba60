"""Pytest fixtures and configuration for taskscore tests."""

import pytest
import uuid
from datetime import datetime
from fastapi.testclient import TestClient

from taskscore.models.task import Task, TaskStatus


# Friday morning: inferred energy is high when none is given
REFERENCE_NOW = datetime(2025, 1, 24, 10, 0, 0)


@pytest.fixture
def now():
    """Fixed reference instant so every score is deterministic."""
    return REFERENCE_NOW


@pytest.fixture
def sample_task_base():
    """Base task data for creating test tasks.

    Returns a dict with default task attributes that can be overridden.
    """
    return {
        "id": str(uuid.uuid4()),
        "user_id": "test-user-123",
        "title": "Test Task",
        "description": "Test description",
        "priority": 3,
        "due_date": None,
        "due_time": None,
        "scheduled_date": None,
        "estimated_minutes": None,
        "energy_level": None,
        "status": TaskStatus.PENDING,
    }


@pytest.fixture
def make_task(sample_task_base):
    """Factory for tasks with a fresh id and the given overrides."""
    def _make(**overrides):
        return Task(**{**sample_task_base, "id": str(uuid.uuid4()), **overrides})
    return _make


@pytest.fixture
def sample_task(sample_task_base):
    """Create a sample Task object for testing."""
    return Task(**sample_task_base)


@pytest.fixture
def task_a(sample_task_base):
    """Urgent, overdue, no estimate, no energy level (scores 90)."""
    return Task(**{**sample_task_base, "id": "task-a", "title": "A", "priority": 1, "due_date": "2025-01-20"})


@pytest.fixture
def task_b(sample_task_base):
    """Low priority, due in 8 days, 20 minutes, low energy (scores 30 at high energy)."""
    return Task(**{
        **sample_task_base,
        "id": "task-b",
        "title": "B",
        "priority": 4,
        "due_date": "2025-02-01",
        "estimated_minutes": 20,
        "energy_level": "low",
    })


@pytest.fixture
def task_c(sample_task_base):
    """Medium priority, due today, 90 minutes, high energy."""
    return Task(**{
        **sample_task_base,
        "id": "task-c",
        "title": "C",
        "priority": 3,
        "due_date": "2025-01-24",
        "estimated_minutes": 90,
        "energy_level": "high",
    })


@pytest.fixture
def completed_task(sample_task_base):
    """Create an urgent, overdue task that is already completed."""
    return Task(**{
        **sample_task_base,
        "id": "task-done",
        "title": "Done",
        "priority": 1,
        "due_date": "2025-01-01",
        "status": TaskStatus.COMPLETED,
    })


@pytest.fixture
def test_client():
    """Create a FastAPI test client."""
    from taskscore.api.app import app

    with TestClient(app) as client:
        yield client
