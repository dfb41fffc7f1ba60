"""Data models for taskscore."""

from taskscore.models.task import Task, TaskStatus, TaskPriority, EnergyLevel
from taskscore.models.scoring import ScoringContext, ScoreBreakdown, TaskScore
from taskscore.models.today_view import TodayView

__all__ = [
    "Task",
    "TaskStatus",
    "TaskPriority",
    "EnergyLevel",
    "ScoringContext",
    "ScoreBreakdown",
    "TaskScore",
    "TodayView",
]
