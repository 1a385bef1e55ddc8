"""Service layer for study activities and the sessions launched from them."""

from collections.abc import Sequence

import structlog

from lang_portal import models
from lang_portal.pagination import PaginatedResult, Pagination
from lang_portal.repositories import (
    StudyActivityRepository,
    StudySessionDetail,
    StudySessionRepository,
)
from lang_portal.unit_of_work import SqlAlchemyUnitOfWork

logger = structlog.get_logger(__name__)


class StudyActivityService:
    """Service for handling study activity operations."""

    def __init__(
        self,
        study_activity_repository: StudyActivityRepository,
        study_session_repository: StudySessionRepository,
        uow: SqlAlchemyUnitOfWork,
    ) -> None:
        self.study_activity_repository = study_activity_repository
        self.study_session_repository = study_session_repository
        self.uow = uow

    def list_study_activities(self) -> Sequence[models.StudyActivity]:
        """Get the full activity catalog."""
        return self.study_activity_repository.list_all()

    def get_study_activity(self, activity_id: int) -> models.StudyActivity | None:
        """Get an activity, or None if it does not exist."""
        return self.study_activity_repository.get_by_id(activity_id)

    def create_study_activity(
        self, name: str, thumbnail_url: str = "", description: str = ""
    ) -> models.StudyActivity:
        """Add an activity to the catalog."""
        with self.uow:
            activity = self.study_activity_repository.create(name, thumbnail_url, description)
            self.uow.commit()

        logger.info("created_study_activity", study_activity_id=activity.id)
        return activity

    def get_study_activity_sessions(
        self, activity_id: int, pagination: Pagination
    ) -> PaginatedResult[StudySessionDetail]:
        """Get a page of the activity's sessions, most recent first."""
        items = self.study_session_repository.list_details(
            pagination.offset, pagination.limit, study_activity_id=activity_id
        )
        total = self.study_session_repository.count(study_activity_id=activity_id)
        return PaginatedResult(items=items, total=total, pagination=pagination)

    def create_study_session(self, group_id: int, activity_id: int) -> models.StudySession:
        """
        Start a study session for a group with an activity.

        Raises:
            ConstraintViolationError: If the group or the activity does not exist
        """
        with self.uow:
            session = self.study_session_repository.create(group_id, activity_id)
            self.uow.commit()

        logger.info(
            "created_study_session",
            study_session_id=session.id,
            group_id=group_id,
            study_activity_id=activity_id,
        )
        return session
