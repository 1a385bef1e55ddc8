"""StudyActivity repository for database operations."""

from collections.abc import Sequence

from sqlalchemy import select
from sqlalchemy.orm import Session

from lang_portal import models


class StudyActivityRepository:
    """Repository for StudyActivity database operations."""

    def __init__(self, db: Session) -> None:
        """Initialize repository with database session."""
        self.db = db

    def get_by_id(self, activity_id: int) -> models.StudyActivity | None:
        """Get a study activity by its ID, or None if it does not exist."""
        stmt = select(models.StudyActivity).where(models.StudyActivity.id == activity_id)
        return self.db.execute(stmt).scalar_one_or_none()

    def list_all(self) -> Sequence[models.StudyActivity]:
        """Get all study activities ordered by id."""
        stmt = select(models.StudyActivity).order_by(models.StudyActivity.id)
        return self.db.execute(stmt).scalars().all()

    def create(
        self, name: str, thumbnail_url: str = "", description: str = ""
    ) -> models.StudyActivity:
        """Add an activity to the catalog."""
        activity = models.StudyActivity(
            name=name, thumbnail_url=thumbnail_url, description=description
        )
        self.db.add(activity)
        self.db.flush()
        self.db.refresh(activity)
        return activity
