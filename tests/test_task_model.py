"""Tests for Task model normalization of malformed fields."""

import pytest

from taskscore.models.task import EnergyLevel, Task, TaskPriority, TaskStatus


class TestTaskPriority:
    """Priority is always one of the four tiers."""

    def test_default_is_medium(self):
        assert Task(id="t1").priority == 3

    @pytest.mark.parametrize("raw", [None, 0, 7, -2, "soon", 1.5])
    def test_out_of_range_becomes_medium(self, raw):
        assert Task(id="t1", priority=raw).priority == 3

    def test_numeric_string_is_accepted(self):
        assert Task(id="t1", priority="1").priority == 1

    def test_coerce_enum(self):
        assert TaskPriority.coerce(TaskPriority.LOW) == TaskPriority.LOW
        assert TaskPriority.coerce(2.0) == TaskPriority.HIGH


class TestEnergyLevel:
    """Energy levels are ordered and tolerant of bad input."""

    def test_ranks_are_ordered(self):
        assert EnergyLevel.LOW.rank < EnergyLevel.MEDIUM.rank < EnergyLevel.HIGH.rank

    def test_coerce_strings(self):
        assert EnergyLevel.coerce("HIGH") == EnergyLevel.HIGH
        assert EnergyLevel.coerce(" low ") == EnergyLevel.LOW

    @pytest.mark.parametrize("raw", [None, "", "extreme", 3])
    def test_coerce_unknown_is_none(self, raw):
        assert EnergyLevel.coerce(raw) is None

    def test_unknown_task_energy_becomes_none(self):
        assert Task(id="t1", energy_level="extreme").energy_level is None

    def test_task_energy_stored_as_value(self):
        assert Task(id="t1", energy_level=EnergyLevel.MEDIUM).energy_level == "medium"


class TestTaskDefaults:
    def test_minimal_task(self):
        task = Task(id="t1")

        assert task.status == TaskStatus.PENDING
        assert task.due_date is None
        assert task.estimated_minutes is None
        assert task.energy_level is None

    def test_requires_id(self):
        with pytest.raises(ValueError):
            Task(title="No id")
