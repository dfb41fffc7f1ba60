"""Constants for taskscore.

This module centralizes every point value and threshold used by the scoring engine.
"""

from taskscore.models.task import EnergyLevel, TaskPriority


# Priority points (0-40)
PRIORITY_POINTS = {
    TaskPriority.URGENT: 40,
    TaskPriority.HIGH: 30,
    TaskPriority.MEDIUM: 20,
    TaskPriority.LOW: 10,
}
DEFAULT_PRIORITY = TaskPriority.MEDIUM

# Due date points (0-40)
DUE_DATE_NONE_POINTS = 10
DUE_DATE_OVERDUE_POINTS = 40
DUE_DATE_TODAY_POINTS = 35
DUE_DATE_TOMORROW_POINTS = 25
DUE_DATE_THIS_WEEK_POINTS = 15
DUE_DATE_LATER_POINTS = 5
DUE_DATE_WEEK_DAYS = 7

# Time fit points (0-10)
TIME_UNKNOWN_POINTS = 5
TIME_OVER_BUDGET_POINTS = 2
# (max minutes, points) when no budget is given; anything longer gets the fallback
SHORT_TASK_THRESHOLDS = ((15, 10), (30, 8), (60, 6))
SHORT_TASK_FALLBACK_POINTS = 4
# (min fit ratio exclusive, points) when the task fits the budget
FIT_RATIO_THRESHOLDS = ((0.8, 10), (0.5, 8))
FIT_RATIO_FALLBACK_POINTS = 6

# Energy match points (0-10)
ENERGY_UNKNOWN_POINTS = 5
ENERGY_MATCH_POINTS = 10
ENERGY_EASIER_POINTS = 7
ENERGY_ONE_STEP_SHORT_POINTS = 4
ENERGY_FAR_SHORT_POINTS = 2

# Local-hour windows used to infer energy when the caller gives none: [start, end)
ENERGY_BY_HOUR = (
    (6, 12, EnergyLevel.HIGH),
    (12, 18, EnergyLevel.MEDIUM),
)
ENERGY_OUTSIDE_HOURS = EnergyLevel.LOW

# Ranking
DEFAULT_TOP_LIMIT = 5
HIGH_PRIORITY_TIERS = (TaskPriority.URGENT, TaskPriority.HIGH)
