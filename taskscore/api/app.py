"""FastAPI web application for taskscore.

Stateless: every request carries the task list and context, and gets the
ranked result back. Storage and authentication live elsewhere.
"""

import logging
from datetime import datetime
from typing import Dict, List, Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from taskscore import config
from taskscore.engine.ranking import get_contextual_tasks, get_top_tasks
from taskscore.engine.scoring import score_tasks
from taskscore.engine.today import build_today_view
from taskscore.models.scoring import ScoringContext, TaskScore
from taskscore.models.task import EnergyLevel, Task
from taskscore.models.today_view import TodayView

logger = logging.getLogger(__name__)

VERSION = "0.1.0"

# Initialize FastAPI app
app = FastAPI(
    title="taskscore API",
    description="Ranks open tasks by urgency, deadline, time fit and energy fit",
    version=VERSION,
)


# Request models
class ScoreRequest(BaseModel):
    """Request for scoring a task list."""
    tasks: List[Task]
    available_time_minutes: Optional[int] = Field(None, description="Minutes available")
    current_energy: Optional[EnergyLevel] = Field(None, description="Current energy level")
    now: Optional[datetime] = Field(None, description="Reference instant (defaults to now in the configured time zone)")


class TopTasksRequest(ScoreRequest):
    """Request for the top-N tasks."""
    limit: Optional[int] = Field(None, description="Number of tasks to return (defaults to TASKSCORE_TOP_LIMIT)")


class ContextualTasksRequest(BaseModel):
    """Request for tasks that fit the available time and energy."""
    tasks: List[Task]
    available_minutes: int = Field(..., description="Minutes available")
    current_energy: EnergyLevel = Field(..., description="Current energy level")
    now: Optional[datetime] = None


class TodayRequest(BaseModel):
    """Request for the Today view."""
    tasks: List[Task]
    now: Optional[datetime] = None
    limit: Optional[int] = Field(None, description="Number of recommended tasks")


# Response models
class ScoreResponse(BaseModel):
    """Response for task scoring."""
    scores: List[TaskScore]
    count: int
    task_titles: Dict[str, str] = Field(default_factory=dict, description="Map of task id to title")


class TaskListResponse(BaseModel):
    """Response for ranked task lists."""
    tasks: List[Task]
    count: int


def _reference_instant(now: Optional[datetime]) -> datetime:
    """Use the caller's instant, or the current time in the configured zone."""
    if now is not None:
        return now
    return config.current_instant()


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy", "version": VERSION}


@app.post("/score", response_model=ScoreResponse)
async def score(request: ScoreRequest):
    """Score non-completed tasks, highest first."""
    try:
        context = ScoringContext(
            now=_reference_instant(request.now),
            available_time_minutes=request.available_time_minutes,
            current_energy=request.current_energy,
        )
        scores = score_tasks(request.tasks, context)
    except Exception as e:
        logger.error(f"Failed to score tasks: {type(e).__name__}: {e}")
        raise HTTPException(status_code=500, detail=f"Failed to score tasks: {str(e)}")

    task_titles = {task.id: task.title for task in request.tasks}
    return ScoreResponse(
        scores=scores,
        count=len(scores),
        task_titles={s.task_id: task_titles[s.task_id] for s in scores},
    )


@app.post("/top", response_model=TaskListResponse)
async def top_tasks(request: TopTasksRequest):
    """Return the highest-scoring tasks."""
    try:
        limit = request.limit if request.limit is not None else config.get_default_top_limit()
        context = ScoringContext(
            now=_reference_instant(request.now),
            available_time_minutes=request.available_time_minutes,
            current_energy=request.current_energy,
        )
        tasks = get_top_tasks(request.tasks, limit, context)
    except Exception as e:
        logger.error(f"Failed to rank tasks: {type(e).__name__}: {e}")
        raise HTTPException(status_code=500, detail=f"Failed to rank tasks: {str(e)}")

    return TaskListResponse(tasks=tasks, count=len(tasks))


@app.post("/contextual", response_model=TaskListResponse)
async def contextual_tasks(request: ContextualTasksRequest):
    """Return tasks that fit the available time and energy, best first."""
    try:
        tasks = get_contextual_tasks(
            request.tasks,
            request.available_minutes,
            request.current_energy,
            now=_reference_instant(request.now),
        )
    except Exception as e:
        logger.error(f"Failed to filter tasks: {type(e).__name__}: {e}")
        raise HTTPException(status_code=500, detail=f"Failed to filter tasks: {str(e)}")

    return TaskListResponse(tasks=tasks, count=len(tasks))


@app.post("/today", response_model=TodayView)
async def today(request: TodayRequest):
    """Build the Today view."""
    try:
        limit = request.limit if request.limit is not None else config.get_default_top_limit()
        return build_today_view(request.tasks, now=_reference_instant(request.now), limit=limit)
    except Exception as e:
        logger.error(f"Failed to build today view: {type(e).__name__}: {e}")
        raise HTTPException(status_code=500, detail=f"Failed to build today view: {str(e)}")


if __name__ == "__main__":
    import uvicorn
    config.configure_logging()
    uvicorn.run(app, host="0.0.0.0", port=8000)
