"""StudySession repository for database operations."""

from dataclasses import dataclass
from datetime import UTC, date, datetime
from typing import Any

from sqlalchemy import Row, Select, case, distinct, func, select
from sqlalchemy.orm import Session

from lang_portal import models
from lang_portal.repositories.word_repository import (
    WordWithStats,
    review_count_columns,
    to_word_with_stats,
)


@dataclass(frozen=True)
class StudySessionDetail:
    """Study session with activity/group names and fields derived from its review items."""

    id: int
    group_id: int
    study_activity_id: int
    activity_name: str
    group_name: str
    created_at: datetime
    end_time: datetime | None
    review_items_count: int

    @property
    def start_time(self) -> datetime:
        """Sessions start when they are created."""
        return self.created_at


def to_utc_date(value: datetime) -> date:
    """
    Calendar date of a stored timestamp, taken in UTC.

    SQLite hands back naive values that were written as UTC; PostgreSQL
    hands back aware values in the connection's time zone.
    """
    if value.tzinfo is None:
        return value.date()
    return value.astimezone(UTC).date()


def _session_detail_query() -> Select[Any]:
    """
    Base query for session details.

    end_time is the latest review item timestamp and stays NULL for sessions
    without review items.
    """
    return (
        select(
            models.StudySession.id,
            models.StudySession.group_id,
            models.StudySession.study_activity_id,
            models.StudyActivity.name.label("activity_name"),
            models.Group.name.label("group_name"),
            models.StudySession.created_at,
            func.max(models.WordReviewItem.created_at).label("end_time"),
            func.count(models.WordReviewItem.id).label("review_items_count"),
        )
        .join(
            models.StudyActivity,
            models.StudySession.study_activity_id == models.StudyActivity.id,
        )
        .join(models.Group, models.StudySession.group_id == models.Group.id)
        .outerjoin(
            models.WordReviewItem,
            models.WordReviewItem.study_session_id == models.StudySession.id,
        )
        .group_by(models.StudySession.id, models.StudyActivity.id, models.Group.id)
    )


def _to_detail(row: Row[Any]) -> StudySessionDetail:
    return StudySessionDetail(
        id=row.id,
        group_id=row.group_id,
        study_activity_id=row.study_activity_id,
        activity_name=row.activity_name,
        group_name=row.group_name,
        created_at=row.created_at,
        end_time=row.end_time,
        review_items_count=row.review_items_count or 0,
    )


class StudySessionRepository:
    """Repository for StudySession and WordReviewItem database operations."""

    def __init__(self, db: Session) -> None:
        """Initialize repository with database session."""
        self.db = db

    def get_by_id(self, session_id: int) -> models.StudySession | None:
        """Get a study session row by its ID."""
        stmt = select(models.StudySession).where(models.StudySession.id == session_id)
        return self.db.execute(stmt).scalar_one_or_none()

    def create(self, group_id: int, study_activity_id: int) -> models.StudySession:
        """
        Create a study session starting now.

        Raises:
            IntegrityError: If the group or the activity does not exist
        """
        session = models.StudySession(group_id=group_id, study_activity_id=study_activity_id)
        self.db.add(session)
        self.db.flush()
        self.db.refresh(session)
        return session

    def get_detail(self, session_id: int) -> StudySessionDetail | None:
        """Get a single session detail, or None if the session does not exist."""
        stmt = _session_detail_query().where(models.StudySession.id == session_id)
        row = self.db.execute(stmt).one_or_none()
        if row is None:
            return None
        return _to_detail(row)

    def get_last_detail(self) -> StudySessionDetail | None:
        """Get the most recently created session, or None if there are no sessions."""
        stmt = _session_detail_query().order_by(
            models.StudySession.created_at.desc(), models.StudySession.id.desc()
        )
        row = self.db.execute(stmt.limit(1)).one_or_none()
        if row is None:
            return None
        return _to_detail(row)

    def list_details(
        self,
        offset: int = 0,
        limit: int = 10,
        study_activity_id: int | None = None,
        group_id: int | None = None,
    ) -> list[StudySessionDetail]:
        """
        Get session details ordered by creation time, most recent first.

        Args:
            offset: Number of sessions to skip
            limit: Maximum number of sessions to return
            study_activity_id: Only sessions of this activity
            group_id: Only sessions of this group

        Returns:
            List of session details
        """
        stmt = _session_detail_query()
        if study_activity_id is not None:
            stmt = stmt.where(models.StudySession.study_activity_id == study_activity_id)
        if group_id is not None:
            stmt = stmt.where(models.StudySession.group_id == group_id)

        stmt = (
            stmt.order_by(models.StudySession.created_at.desc(), models.StudySession.id.desc())
            .offset(offset)
            .limit(limit)
        )
        return [_to_detail(row) for row in self.db.execute(stmt).all()]

    def count(self, study_activity_id: int | None = None, group_id: int | None = None) -> int:
        """Count sessions, optionally restricted to an activity or a group."""
        stmt = select(func.count(models.StudySession.id))
        if study_activity_id is not None:
            stmt = stmt.where(models.StudySession.study_activity_id == study_activity_id)
        if group_id is not None:
            stmt = stmt.where(models.StudySession.group_id == group_id)
        return self.db.execute(stmt).scalar() or 0

    def list_session_words(
        self, session_id: int, offset: int = 0, limit: int = 100
    ) -> list[WordWithStats]:
        """Get the words reviewed in a session with counts scoped to that session."""
        correct_count, wrong_count = review_count_columns()
        stmt = (
            select(models.Word, correct_count, wrong_count)
            .join(models.WordReviewItem, models.WordReviewItem.word_id == models.Word.id)
            .where(models.WordReviewItem.study_session_id == session_id)
            .group_by(models.Word.id)
            .order_by(models.Word.id)
            .offset(offset)
            .limit(limit)
        )
        return [to_word_with_stats(row) for row in self.db.execute(stmt).all()]

    def count_session_words(self, session_id: int) -> int:
        """Count the distinct existing words reviewed in a session."""
        stmt = (
            select(func.count(distinct(models.WordReviewItem.word_id)))
            .join(models.Word, models.Word.id == models.WordReviewItem.word_id)
            .where(models.WordReviewItem.study_session_id == session_id)
        )
        return self.db.execute(stmt).scalar() or 0

    def create_review_item(
        self, session_id: int, word_id: int, correct: bool
    ) -> models.WordReviewItem:
        """Append a review item to a session."""
        review_item = models.WordReviewItem(
            study_session_id=session_id, word_id=word_id, correct=correct
        )
        self.db.add(review_item)
        self.db.flush()
        self.db.refresh(review_item)
        return review_item

    def count_distinct_words_studied(self) -> int:
        """Count distinct word ids across all review items."""
        stmt = select(func.count(distinct(models.WordReviewItem.word_id)))
        return self.db.execute(stmt).scalar() or 0

    def get_review_stats(self) -> tuple[int, int]:
        """
        Get global review counts.

        Returns:
            tuple[int, int]: (correct review count, total review count)
        """
        stmt = select(
            func.count(case((models.WordReviewItem.correct.is_(True), 1))),
            func.count(models.WordReviewItem.id),
        )
        correct, total = self.db.execute(stmt).one()
        return correct or 0, total or 0

    def count_active_groups(self) -> int:
        """Count distinct groups that have at least one session."""
        stmt = select(func.count(distinct(models.StudySession.group_id)))
        return self.db.execute(stmt).scalar() or 0

    def get_study_dates(self) -> list[date]:
        """Get the distinct UTC calendar dates on which sessions were created, newest first."""
        stmt = select(models.StudySession.created_at)
        study_dates = {to_utc_date(created_at) for created_at in self.db.execute(stmt).scalars()}
        return sorted(study_dates, reverse=True)
