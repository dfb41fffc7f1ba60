"""Task scoring for taskscore.

Each task gets a 0-100 score built from four independent factors:

- priority (0-40): the task's urgency tier
- due date (0-40): how close the due date is to today
- time fit (0-10): how well the estimate fits the available time
- energy fit (0-10): how well the required energy matches the current energy

Priority and due date dominate the ranking; time and energy act as tie-breakers.
Every function here is pure: the reference instant is always passed in, and only
the outermost entry points fill it with the current time when the caller leaves
it unset.
"""

import logging
from datetime import date, datetime
from typing import Any, Iterable, List, Optional, Tuple

from taskscore.models.constants import (
    DEFAULT_PRIORITY,
    DUE_DATE_LATER_POINTS,
    DUE_DATE_NONE_POINTS,
    DUE_DATE_OVERDUE_POINTS,
    DUE_DATE_THIS_WEEK_POINTS,
    DUE_DATE_TODAY_POINTS,
    DUE_DATE_TOMORROW_POINTS,
    DUE_DATE_WEEK_DAYS,
    ENERGY_BY_HOUR,
    ENERGY_EASIER_POINTS,
    ENERGY_FAR_SHORT_POINTS,
    ENERGY_MATCH_POINTS,
    ENERGY_ONE_STEP_SHORT_POINTS,
    ENERGY_OUTSIDE_HOURS,
    ENERGY_UNKNOWN_POINTS,
    FIT_RATIO_FALLBACK_POINTS,
    FIT_RATIO_THRESHOLDS,
    PRIORITY_POINTS,
    SHORT_TASK_FALLBACK_POINTS,
    SHORT_TASK_THRESHOLDS,
    TIME_OVER_BUDGET_POINTS,
    TIME_UNKNOWN_POINTS,
)
from taskscore.models.scoring import ScoreBreakdown, ScoringContext, TaskScore
from taskscore.models.task import EnergyLevel, Task, TaskPriority, TaskStatus

logger = logging.getLogger(__name__)


def priority_score(priority: Any) -> int:
    """Points for a priority tier (urgent=40, high=30, medium=20, low=10).

    Missing or unknown priorities score as medium.
    """
    tier = TaskPriority.coerce(priority)
    return PRIORITY_POINTS.get(tier, PRIORITY_POINTS[DEFAULT_PRIORITY])


def due_date_score(due_date: Optional[date], now: datetime) -> int:
    """Points for deadline proximity, compared on whole calendar days.

    Args:
        due_date: Task due date (a datetime is reduced to its date)
        now: Reference instant

    Returns:
        40 overdue, 35 today, 25 tomorrow, 15 within a week, 5 later, 10 without a due date
    """
    if due_date is None:
        return DUE_DATE_NONE_POINTS

    if isinstance(due_date, datetime):
        due_date = due_date.date()

    days_until_due = (due_date - now.date()).days

    if days_until_due < 0:
        return DUE_DATE_OVERDUE_POINTS
    if days_until_due == 0:
        return DUE_DATE_TODAY_POINTS
    if days_until_due == 1:
        return DUE_DATE_TOMORROW_POINTS
    if days_until_due <= DUE_DATE_WEEK_DAYS:
        return DUE_DATE_THIS_WEEK_POINTS
    return DUE_DATE_LATER_POINTS


def time_score(estimated_minutes: Optional[int], available_time_minutes: Optional[int] = None) -> int:
    """Points for how well a task's estimate fits the available time.

    Without a time budget, shorter tasks are preferred. With a budget, tasks that
    use most of the window score best and tasks that overrun it score 2.
    """
    if not estimated_minutes or estimated_minutes <= 0:
        return TIME_UNKNOWN_POINTS

    if not available_time_minutes or available_time_minutes <= 0:
        for max_minutes, points in SHORT_TASK_THRESHOLDS:
            if estimated_minutes <= max_minutes:
                return points
        return SHORT_TASK_FALLBACK_POINTS

    if estimated_minutes > available_time_minutes:
        return TIME_OVER_BUDGET_POINTS

    fit_ratio = estimated_minutes / available_time_minutes
    for min_ratio, points in FIT_RATIO_THRESHOLDS:
        if fit_ratio > min_ratio:
            return points
    return FIT_RATIO_FALLBACK_POINTS


def infer_energy(now: datetime) -> EnergyLevel:
    """Guess the user's energy from the local hour of the reference instant.

    Morning [6, 12) is high, afternoon [12, 18) is medium, anything else is low.
    """
    for start_hour, end_hour, level in ENERGY_BY_HOUR:
        if start_hour <= now.hour < end_hour:
            return level
    return ENERGY_OUTSIDE_HOURS


def energy_score(task_energy: Any, current_energy: Any, now: datetime) -> int:
    """Points for matching the task's required energy to the user's energy.

    Args:
        task_energy: Energy the task needs (None scores neutral)
        current_energy: User's energy; inferred from `now` when missing
        now: Reference instant

    Returns:
        10 exact match, 7 easier task, 4 one step harder, 2 two steps harder, 5 unknown
    """
    task_level = EnergyLevel.coerce(task_energy)
    if task_level is None:
        return ENERGY_UNKNOWN_POINTS

    current_level = EnergyLevel.coerce(current_energy)
    if current_level is None:
        current_level = infer_energy(now)

    if task_level == current_level:
        return ENERGY_MATCH_POINTS

    if current_level.rank > task_level.rank:
        return ENERGY_EASIER_POINTS

    if task_level.rank - current_level.rank == 1:
        return ENERGY_ONE_STEP_SHORT_POINTS
    return ENERGY_FAR_SHORT_POINTS


def resolve_context(context: Optional[ScoringContext] = None) -> ScoringContext:
    """Return a context with the reference instant filled in.

    The caller's context is never modified; a copy is returned when `now` has
    to be set.
    """
    if context is None:
        return ScoringContext(now=datetime.now())
    if context.now is None:
        return context.model_copy(update={"now": datetime.now()})
    return context


def score_task(task: Task, context: Optional[ScoringContext] = None) -> TaskScore:
    """Score a single task.

    The total is the unweighted sum of the four factor scores.
    """
    context = resolve_context(context)

    breakdown = ScoreBreakdown(
        priority_score=priority_score(task.priority),
        due_date_score=due_date_score(task.due_date, context.now),
        time_score=time_score(task.estimated_minutes, context.available_time_minutes),
        energy_score=energy_score(task.energy_level, context.current_energy, context.now),
    )
    total = (
        breakdown.priority_score
        + breakdown.due_date_score
        + breakdown.time_score
        + breakdown.energy_score
    )

    return TaskScore(task_id=task.id, total=total, breakdown=breakdown)


def is_completed(task: Task) -> bool:
    return task.status == TaskStatus.COMPLETED


def score_tasks(tasks: Iterable[Task], context: Optional[ScoringContext] = None) -> List[TaskScore]:
    """Score every non-completed task and sort by total, highest first.

    Python's sort is stable, so tasks with equal totals keep their input order.
    This function is deterministic - same tasks and reference instant always
    produce the same scores.

    Args:
        tasks: Tasks to score
        context: Optional scoring context (now, available time, current energy)

    Returns:
        List of TaskScore sorted by total descending
    """
    return [score for _, score in rank_tasks(tasks, context)]


def rank_tasks(tasks: Iterable[Task], context: Optional[ScoringContext] = None) -> List[Tuple[Task, TaskScore]]:
    """Pair each non-completed task with its score, sorted by total descending."""
    context = resolve_context(context)

    scored = [(task, score_task(task, context)) for task in tasks if not is_completed(task)]
    scored.sort(key=lambda pair: pair[1].total, reverse=True)

    logger.debug(f"Scored {len(scored)} tasks at {context.now.isoformat()}")
    return scored
