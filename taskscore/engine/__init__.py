"""Scoring engine for taskscore."""

from taskscore.engine.scoring import (
    priority_score,
    due_date_score,
    time_score,
    energy_score,
    infer_energy,
    score_task,
    score_tasks,
)
from taskscore.engine.ranking import get_top_tasks, get_contextual_tasks, get_task_score
from taskscore.engine.today import build_today_view

__all__ = [
    "priority_score",
    "due_date_score",
    "time_score",
    "energy_score",
    "infer_energy",
    "score_task",
    "score_tasks",
    "get_top_tasks",
    "get_contextual_tasks",
    "get_task_score",
    "build_today_view",
]
