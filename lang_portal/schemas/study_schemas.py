"""Pydantic schemas for study activities, sessions and reviews."""

from datetime import datetime as dt

from pydantic import BaseModel, ConfigDict, Field


class StudyActivity(BaseModel):
    """Schema for StudyActivity response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    thumbnail_url: str
    description: str
    created_at: dt


class StudySessionCreate(BaseModel):
    """Schema for launching a study session."""

    group_id: int = Field(..., description="Group to practice")
    study_activity_id: int = Field(..., description="Activity used for practice")


class StudySession(BaseModel):
    """Schema for a newly created StudySession."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    group_id: int
    study_activity_id: int
    created_at: dt


class StudySessionDetail(BaseModel):
    """Study session with names and fields derived from its review items."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    activity_name: str
    group_name: str
    start_time: dt = Field(..., description="Session creation timestamp")
    end_time: dt | None = Field(
        None, description="Latest review timestamp, omitted when nothing was reviewed"
    )
    review_items_count: int = Field(..., ge=0)


class LastStudySession(StudySessionDetail):
    """Most recent study session shown on the dashboard."""

    group_id: int
    study_activity_id: int


class WordReviewCreate(BaseModel):
    """Schema for recording an answer."""

    correct: bool = Field(..., description="Whether the learner answered correctly")


class WordReviewItem(BaseModel):
    """Schema for WordReviewItem response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    study_session_id: int
    word_id: int
    correct: bool
    created_at: dt
