"""Scoring context and result models for taskscore."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from taskscore.models.task import EnergyLevel


class ScoringContext(BaseModel):
    """Situational parameters for a single scoring call.

    `now` is left unset by most callers; the outermost engine entry point
    resolves it once and threads the same instant through every sub-score.
    """

    now: Optional[datetime] = Field(None, description="Reference instant (defaults to the current time)")
    available_time_minutes: Optional[int] = Field(None, description="Minutes the user has available")
    current_energy: Optional[EnergyLevel] = Field(None, description="User's current energy level")


class ScoreBreakdown(BaseModel):
    """Per-factor points behind a total score."""

    priority_score: int
    due_date_score: int
    time_score: int
    energy_score: int


class TaskScore(BaseModel):
    """Score for a single task."""

    task_id: str = Field(..., description="Scored task id")
    total: int = Field(..., ge=0, le=100, description="Sum of the breakdown (0-100)")
    breakdown: ScoreBreakdown
