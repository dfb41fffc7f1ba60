"""Task data model for taskscore."""

from datetime import date, datetime, time
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator


class TaskStatus(str, Enum):
    """Task status enumeration."""
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    ARCHIVED = "archived"


class TaskPriority(int, Enum):
    """Task priority tiers (lower number = more urgent)."""
    URGENT = 1
    HIGH = 2
    MEDIUM = 3
    LOW = 4

    @classmethod
    def coerce(cls, value: Any) -> "TaskPriority":
        """Map any raw priority value to a tier, falling back to MEDIUM."""
        if isinstance(value, bool):
            return cls.MEDIUM
        if isinstance(value, float) and not value.is_integer():
            return cls.MEDIUM
        try:
            return cls(int(value))
        except (TypeError, ValueError):
            return cls.MEDIUM


class EnergyLevel(str, Enum):
    """Energy level enumeration, ordered low < medium < high."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @property
    def rank(self) -> int:
        return _ENERGY_RANKS[self]

    @classmethod
    def coerce(cls, value: Any) -> Optional["EnergyLevel"]:
        """Return the matching level, or None for missing/unknown values."""
        if value is None:
            return None
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                return None
        return None


_ENERGY_RANKS = {
    EnergyLevel.LOW: 1,
    EnergyLevel.MEDIUM: 2,
    EnergyLevel.HIGH: 3,
}


class Task(BaseModel):
    """Task record as supplied by the storage layer.

    The scoring engine only reads these fields; it never mutates a Task.
    """

    id: str = Field(..., description="Unique task identifier")
    user_id: Optional[str] = Field(None, description="Owning user (storage concern, unused by scoring)")
    title: str = Field("", description="Task title")
    description: Optional[str] = Field(None, description="Task description")
    priority: int = Field(
        TaskPriority.MEDIUM.value,
        description="1=urgent, 2=high, 3=medium, 4=low (unknown values become 3)",
    )
    category: Optional[str] = Field(None, description="Free-form category label")
    due_date: Optional[date] = Field(None, description="Due date (date-only)")
    due_time: Optional[time] = Field(None, description="Due time of day, paired with due_date")
    scheduled_date: Optional[date] = Field(None, description="Date the user plans to work on the task")
    estimated_minutes: Optional[int] = Field(None, description="Estimated duration in minutes")
    energy_level: Optional[EnergyLevel] = Field(None, description="Energy required to do the task")
    status: TaskStatus = Field(TaskStatus.PENDING, description="Task status")
    parent_task_id: Optional[str] = Field(None, description="Parent task id for subtasks")
    completed_at: Optional[datetime] = Field(None, description="Completion timestamp")
    created_at: Optional[datetime] = Field(None, description="Creation timestamp")
    updated_at: Optional[datetime] = Field(None, description="Last update timestamp")

    @field_validator("priority", mode="before")
    @classmethod
    def _normalize_priority(cls, v):
        return TaskPriority.coerce(v).value

    @field_validator("energy_level", mode="before")
    @classmethod
    def _normalize_energy_level(cls, v):
        return EnergyLevel.coerce(v)

    class Config:
        """Pydantic configuration."""
        use_enum_values = True
