"""Pydantic schemas for dashboard responses."""

from pydantic import BaseModel, ConfigDict, Field


class StudyProgress(BaseModel):
    """Distinct studied words against the catalog size."""

    model_config = ConfigDict(from_attributes=True)

    total_words_studied: int = Field(..., ge=0)
    total_available_words: int = Field(..., ge=0)


class QuickStats(BaseModel):
    """Headline dashboard numbers."""

    model_config = ConfigDict(from_attributes=True)

    success_rate: float = Field(..., ge=0.0, le=100.0, description="Percent of correct reviews")
    total_study_sessions: int = Field(..., ge=0)
    total_active_groups: int = Field(..., ge=0)
    study_streak_days: int = Field(..., ge=0)
