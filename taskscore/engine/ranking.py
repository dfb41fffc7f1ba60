"""Ranking and filtering views for taskscore.

Two different questions are answered here:
- "what SHOULD I do next": `get_top_tasks` ranks every open task by score
- "what CAN I do right now": `get_contextual_tasks` first drops tasks that do not fit
  the available time or energy, then ranks what is left by score
"""

import logging
from datetime import datetime
from typing import Any, Iterable, List, Optional

from taskscore.engine.scoring import is_completed, rank_tasks, resolve_context
from taskscore.models.constants import DEFAULT_TOP_LIMIT
from taskscore.models.scoring import ScoringContext, TaskScore
from taskscore.models.task import EnergyLevel, Task

logger = logging.getLogger(__name__)


def get_top_tasks(
    tasks: Iterable[Task],
    limit: int = DEFAULT_TOP_LIMIT,
    context: Optional[ScoringContext] = None,
) -> List[Task]:
    """Return the highest-scoring open tasks.

    Args:
        tasks: Tasks to rank
        limit: Maximum number of tasks to return (non-positive returns nothing)
        context: Optional scoring context

    Returns:
        Original Task records, highest score first
    """
    if limit <= 0:
        return []

    ranked = rank_tasks(tasks, context)
    return [task for task, _ in ranked[:limit]]


def fits_context(task: Task, available_minutes: int, current_energy: EnergyLevel) -> bool:
    """Check whether a task can be done in the given time at the given energy.

    Tasks without an estimate or an energy level are unconstrained on that axis.

    Args:
        task: Task to check
        available_minutes: Minutes available (non-positive means no time at all)
        current_energy: User's current energy level

    Returns:
        True if the task is not completed and fits both constraints
    """
    if is_completed(task):
        return False

    estimate = task.estimated_minutes
    if estimate and estimate > 0 and estimate > available_minutes:
        return False

    task_energy = EnergyLevel.coerce(task.energy_level)
    if task_energy is not None and task_energy.rank > current_energy.rank:
        return False

    return True


def get_contextual_tasks(
    tasks: Iterable[Task],
    available_minutes: int,
    current_energy: Any,
    now: Optional[datetime] = None,
) -> List[Task]:
    """Return the tasks that fit the available time and energy, best first.

    The available time is used twice: once as a hard filter and again in the
    time-fit score used for ordering.

    Args:
        tasks: Tasks to filter
        available_minutes: Minutes the user has available
        current_energy: User's current energy level (an unknown value is treated as low)
        now: Reference instant (defaults to the current time)

    Returns:
        Fitting Task records, highest score first
    """
    energy = EnergyLevel.coerce(current_energy)
    if energy is None:
        logger.warning(f"Unknown current energy {current_energy!r}; treating as low")
        energy = EnergyLevel.LOW

    context = resolve_context(
        ScoringContext(
            now=now,
            available_time_minutes=available_minutes,
            current_energy=energy,
        )
    )

    fitting = [task for task in tasks if fits_context(task, available_minutes, energy)]
    ranked = rank_tasks(fitting, context)

    logger.debug(f"{len(ranked)} tasks fit {available_minutes} min at {energy.value} energy")
    return [task for task, _ in ranked]


def get_task_score(scores: Iterable[TaskScore], task_id: str) -> Optional[TaskScore]:
    """Find a task's score in a `score_tasks` result.

    Args:
        scores: Scores to search
        task_id: Task id to look up

    Returns:
        The matching TaskScore, or None if the task was not scored
    """
    for score in scores:
        if score.task_id == task_id:
            return score
    return None
