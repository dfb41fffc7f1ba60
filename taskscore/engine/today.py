"""Today view for taskscore.

Splits a task list into the sections of the "Today" screen:

1. Overdue - due before today
2. Scheduled - scheduled for today
3. Due today - due today, not already scheduled for today
4. High priority - urgent/high tasks with no schedule and no due date
5. Recommended - top-scoring active tasks that are in none of the sections above

Archived tasks never appear. Completed tasks stay visible in the first four
sections so they can be unchecked, but they are not scored and sort last.
"""

import logging
from datetime import date, datetime
from typing import Dict, List, Optional

from taskscore.engine.ranking import get_top_tasks
from taskscore.engine.scoring import resolve_context, score_tasks
from taskscore.models.constants import DEFAULT_TOP_LIMIT, HIGH_PRIORITY_TIERS
from taskscore.models.scoring import ScoringContext
from taskscore.models.task import Task, TaskStatus
from taskscore.models.today_view import TodayView

logger = logging.getLogger(__name__)


def _is_overdue(task: Task, today: date) -> bool:
    return task.due_date is not None and task.due_date < today


def _is_scheduled_today(task: Task, today: date) -> bool:
    return task.scheduled_date == today


def _is_due_today(task: Task, today: date) -> bool:
    return task.due_date == today


def _is_unplanned_high_priority(task: Task) -> bool:
    return (
        task.priority in HIGH_PRIORITY_TIERS
        and task.scheduled_date is None
        and task.due_date is None
    )


def is_today_task(task: Task, today: date) -> bool:
    """Check if a task belongs in one of today's sections.

    Args:
        task: Task to check
        today: Current calendar date

    Returns:
        True if the task is scheduled today, due today, overdue, or an
        unplanned urgent/high priority task (archived tasks never qualify)
    """
    if task.status == TaskStatus.ARCHIVED:
        return False

    return (
        _is_scheduled_today(task, today)
        or _is_due_today(task, today)
        or _is_overdue(task, today)
        or _is_unplanned_high_priority(task)
    )


def _sort_by_score(tasks: List[Task], task_scores: Dict[str, int]) -> List[Task]:
    # Unscored (completed) tasks sort as 0
    return sorted(tasks, key=lambda task: task_scores.get(task.id, 0), reverse=True)


def build_today_view(
    tasks: List[Task],
    now: Optional[datetime] = None,
    limit: int = DEFAULT_TOP_LIMIT,
) -> TodayView:
    """Build the Today view for a task list.

    Args:
        tasks: All of the user's tasks
        now: Reference instant (defaults to the current time)
        limit: Maximum number of recommended tasks

    Returns:
        TodayView with each section sorted by score, highest first
    """
    context = resolve_context(ScoringContext(now=now))
    today = context.now.date()

    today_tasks = [task for task in tasks if is_today_task(task, today)]
    task_scores = {score.task_id: score.total for score in score_tasks(today_tasks, context)}

    overdue = [task for task in today_tasks if _is_overdue(task, today)]
    scheduled = [task for task in today_tasks if _is_scheduled_today(task, today)]
    due_today = [
        task for task in today_tasks
        if _is_due_today(task, today) and not _is_scheduled_today(task, today)
    ]
    high_priority = [task for task in today_tasks if _is_unplanned_high_priority(task)]

    active_elsewhere = [
        task for task in tasks
        if task.status not in (TaskStatus.COMPLETED, TaskStatus.ARCHIVED)
        and not is_today_task(task, today)
    ]
    recommended = get_top_tasks(active_elsewhere, limit, context)

    logger.debug(
        f"Today view for {today.isoformat()}: {len(today_tasks)} today tasks, "
        f"{len(recommended)} recommended"
    )

    return TodayView(
        overdue=_sort_by_score(overdue, task_scores),
        scheduled=_sort_by_score(scheduled, task_scores),
        due_today=_sort_by_score(due_today, task_scores),
        high_priority=_sort_by_score(high_priority, task_scores),
        recommended=recommended,
        task_scores=task_scores,
        count=len(today_tasks),
        has_overdue=bool(overdue),
    )
