"""Service layer for study sessions and word reviews."""

import structlog

from lang_portal import models
from lang_portal.exceptions import StudySessionNotFoundError, WordNotFoundError
from lang_portal.pagination import PaginatedResult, Pagination
from lang_portal.repositories import (
    StudySessionDetail,
    StudySessionRepository,
    WordRepository,
    WordWithStats,
)
from lang_portal.unit_of_work import SqlAlchemyUnitOfWork

logger = structlog.get_logger(__name__)


class StudySessionService:
    """Service for handling study session operations."""

    def __init__(
        self,
        study_session_repository: StudySessionRepository,
        word_repository: WordRepository,
        uow: SqlAlchemyUnitOfWork,
    ) -> None:
        self.study_session_repository = study_session_repository
        self.word_repository = word_repository
        self.uow = uow

    def list_study_sessions(self, pagination: Pagination) -> PaginatedResult[StudySessionDetail]:
        """Get a page of all sessions, most recent first."""
        items = self.study_session_repository.list_details(pagination.offset, pagination.limit)
        total = self.study_session_repository.count()
        return PaginatedResult(items=items, total=total, pagination=pagination)

    def get_study_session(self, session_id: int) -> StudySessionDetail | None:
        """Get a session detail, or None if the session does not exist."""
        return self.study_session_repository.get_detail(session_id)

    def get_study_session_words(
        self, session_id: int, pagination: Pagination
    ) -> PaginatedResult[WordWithStats]:
        """Get a page of the words reviewed in a session with per-session counts."""
        items = self.study_session_repository.list_session_words(
            session_id, pagination.offset, pagination.limit
        )
        total = self.study_session_repository.count_session_words(session_id)
        return PaginatedResult(items=items, total=total, pagination=pagination)

    def record_word_review(
        self, session_id: int, word_id: int, correct: bool
    ) -> models.WordReviewItem:
        """
        Record the learner's answer for a word in a session.

        Raises:
            StudySessionNotFoundError: If the session does not exist
            WordNotFoundError: If the word does not exist
        """
        if self.study_session_repository.get_by_id(session_id) is None:
            raise StudySessionNotFoundError(session_id)
        if self.word_repository.get_by_id(word_id) is None:
            raise WordNotFoundError(word_id)

        with self.uow:
            review_item = self.study_session_repository.create_review_item(
                session_id, word_id, correct
            )
            self.uow.commit()

        logger.info(
            "recorded_word_review",
            study_session_id=session_id,
            word_id=word_id,
            correct=correct,
        )
        return review_item
