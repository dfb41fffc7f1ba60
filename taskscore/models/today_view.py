"""TodayView data model for taskscore."""

from typing import Dict, List

from pydantic import BaseModel, Field

from taskscore.models.task import Task


class TodayView(BaseModel):
    """Tasks to show for today, split into display sections."""

    overdue: List[Task] = Field(default_factory=list, description="Due before today")
    scheduled: List[Task] = Field(default_factory=list, description="Scheduled for today")
    due_today: List[Task] = Field(default_factory=list, description="Due today but not scheduled for today")
    high_priority: List[Task] = Field(
        default_factory=list,
        description="Urgent/high priority tasks with no schedule or due date",
    )
    recommended: List[Task] = Field(
        default_factory=list,
        description="Top-scoring active tasks outside today's sections",
    )
    task_scores: Dict[str, int] = Field(default_factory=dict, description="Map of task id to total score")
    count: int = Field(0, description="Number of tasks in today's sections")
    has_overdue: bool = False
