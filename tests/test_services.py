"""Service-level tests for transactional guarantees and dashboard aggregation."""

from datetime import UTC, date, datetime, timedelta, timezone
from pathlib import Path
from typing import Any

import pytest
from sqlalchemy import func, select
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session
from sqlalchemy.pool import StaticPool

from lang_portal import models
from lang_portal.config import Settings
from lang_portal.core import container
from lang_portal.database import Base, Database
from lang_portal.exceptions import (
    ConstraintViolationError,
    StudySessionNotFoundError,
    WordNotFoundError,
)
from lang_portal.repositories import (
    GroupRepository,
    StudyActivityRepository,
    StudySessionRepository,
    WordRepository,
)
from lang_portal.repositories.study_session_repository import to_utc_date
from lang_portal.services import (
    DashboardService,
    GroupService,
    StudyActivityService,
    StudySessionService,
)
from lang_portal.services.dashboard_service import calculate_success_rate
from lang_portal.unit_of_work import SqlAlchemyUnitOfWork
from tests.conftest import (
    create_test_group,
    create_test_review_item,
    create_test_study_activity,
    create_test_study_session,
    create_test_word,
)


def build_group_service(db_session: Session) -> GroupService:
    return GroupService(
        group_repository=GroupRepository(db_session),
        study_session_repository=StudySessionRepository(db_session),
        uow=SqlAlchemyUnitOfWork(db_session),
    )


def member_ids(db_session: Session, group_id: int) -> list[int]:
    db_session.expire_all()
    stmt = (
        select(models.words_groups.c.word_id)
        .where(models.words_groups.c.group_id == group_id)
        .order_by(models.words_groups.c.word_id)
    )
    return list(db_session.scalars(stmt).all())


def fail_on_call(
    monkeypatch: pytest.MonkeyPatch, db_session: Session, failing_call: int
) -> None:
    """Make the nth statement executed on the session raise a storage error."""
    original_execute = db_session.execute
    calls = 0

    def execute(*args: Any, **kwargs: Any) -> Any:
        nonlocal calls
        calls += 1
        if calls == failing_call:
            raise OperationalError("simulated statement", {}, Exception("disk I/O error"))
        return original_execute(*args, **kwargs)

    monkeypatch.setattr(db_session, "execute", execute)


class TestGroupServiceTransactions:
    def test_failure_mid_deletion_leaves_group_and_memberships(
        self, db_session: Session, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        w1 = create_test_word(db_session, portuguese="pão", english="bread")
        w2 = create_test_word(db_session, portuguese="leite", english="milk")
        group = create_test_group(db_session, name="Breakfast", words=[w1, w2])
        group_id, word_ids = group.id, [w1.id, w2.id]
        service = build_group_service(db_session)

        # First statement removes memberships, second removes the group
        fail_on_call(monkeypatch, db_session, failing_call=2)
        with pytest.raises(OperationalError):
            service.delete_group(group_id)
        monkeypatch.undo()

        assert db_session.get(models.Group, group_id) is not None
        assert member_ids(db_session, group_id) == word_ids

    def test_delete_group_commits_both_statements(self, db_session: Session) -> None:
        w1 = create_test_word(db_session)
        group = create_test_group(db_session, words=[w1])
        group_id = group.id

        build_group_service(db_session).delete_group(group_id)

        db_session.expire_all()
        assert db_session.get(models.Group, group_id) is None
        assert member_ids(db_session, group_id) == []

    def test_add_words_failing_insert_rolls_back_earlier_ones(
        self, db_session: Session, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        words = [create_test_word(db_session, portuguese=f"p{i}", english=f"e{i}") for i in range(3)]
        group = create_test_group(db_session, name="Target")
        group_id = group.id
        word_ids = [w.id for w in words]
        service = build_group_service(db_session)

        fail_on_call(monkeypatch, db_session, failing_call=2)
        with pytest.raises(OperationalError):
            service.add_words_to_group(group_id, word_ids)
        monkeypatch.undo()

        assert member_ids(db_session, group_id) == []

    def test_add_words_constraint_failure_is_translated(self, db_session: Session) -> None:
        w1 = create_test_word(db_session)
        group = create_test_group(db_session)
        group_id, word_id = group.id, w1.id
        service = build_group_service(db_session)

        with pytest.raises(ConstraintViolationError):
            service.add_words_to_group(group_id, [word_id, 424242])

        assert member_ids(db_session, group_id) == []

    def test_add_same_word_twice_in_one_call(self, db_session: Session) -> None:
        w1 = create_test_word(db_session)
        group = create_test_group(db_session)
        group_id, word_id = group.id, w1.id

        with pytest.raises(ConstraintViolationError):
            build_group_service(db_session).add_words_to_group(group_id, [word_id, word_id])

        assert member_ids(db_session, group_id) == []


class TestStudySessionService:
    def test_record_review_validates_references(self, db_session: Session) -> None:
        word = create_test_word(db_session)
        group = create_test_group(db_session, words=[word])
        activity = create_test_study_activity(db_session)
        study_session = create_test_study_session(db_session, group, activity)
        service = StudySessionService(
            study_session_repository=StudySessionRepository(db_session),
            word_repository=WordRepository(db_session),
            uow=SqlAlchemyUnitOfWork(db_session),
        )

        with pytest.raises(StudySessionNotFoundError):
            service.record_word_review(study_session.id + 100, word.id, correct=True)
        with pytest.raises(WordNotFoundError):
            service.record_word_review(study_session.id, word.id + 100, correct=True)

        review_item = service.record_word_review(study_session.id, word.id, correct=False)
        assert review_item.id is not None
        assert review_item.correct is False


class TestStudyActivityService:
    def test_create_activity_and_launch_session(self, db_session: Session) -> None:
        group = create_test_group(db_session)
        service = StudyActivityService(
            study_activity_repository=StudyActivityRepository(db_session),
            study_session_repository=StudySessionRepository(db_session),
            uow=SqlAlchemyUnitOfWork(db_session),
        )

        activity = service.create_study_activity(
            "Matching", thumbnail_url="/thumbnails/matching.png", description="Pair words"
        )
        session = service.create_study_session(group.id, activity.id)

        assert [a.name for a in service.list_study_activities()] == ["Matching"]
        assert session.study_activity_id == activity.id
        assert session.group_id == group.id


class TestDashboardService:
    @pytest.mark.parametrize(
        ("correct", "total", "expected"),
        [(0, 0, 0.0), (0, 4, 0.0), (3, 4, 75.0), (4, 4, 100.0), (1, 3, 100 / 3)],
    )
    def test_calculate_success_rate(self, correct: int, total: int, expected: float) -> None:
        assert calculate_success_rate(correct, total) == pytest.approx(expected)

    def test_quick_stats_anchored_to_given_day(self, db_session: Session) -> None:
        word = create_test_word(db_session)
        group = create_test_group(db_session, words=[word])
        activity = create_test_study_activity(db_session)
        for day in (10, 11, 11, 12):
            study_session = create_test_study_session(
                db_session, group, activity, created_at=datetime(2025, 4, day, 23, 59, tzinfo=UTC)
            )
            create_test_review_item(db_session, study_session, word.id, correct=day != 11)
        service = DashboardService(
            study_session_repository=StudySessionRepository(db_session),
            word_repository=WordRepository(db_session),
        )

        stats = service.get_quick_stats(today=date(2025, 4, 12))

        assert stats.study_streak_days == 3
        assert stats.total_study_sessions == 4
        assert stats.total_active_groups == 1
        assert stats.success_rate == 50.0
        assert service.get_quick_stats(today=date(2025, 4, 13)).study_streak_days == 0

    def test_study_dates_are_distinct_and_newest_first(self, db_session: Session) -> None:
        group = create_test_group(db_session)
        activity = create_test_study_activity(db_session)
        for moment in (
            datetime(2025, 4, 10, 8, 0, tzinfo=UTC),
            datetime(2025, 4, 12, 7, 0, tzinfo=UTC),
            datetime(2025, 4, 12, 21, 0, tzinfo=UTC),
        ):
            create_test_study_session(db_session, group, activity, created_at=moment)

        dates = StudySessionRepository(db_session).get_study_dates()

        assert dates == [date(2025, 4, 12), date(2025, 4, 10)]

    @pytest.mark.parametrize(
        ("moment", "expected"),
        [
            (datetime(2025, 4, 12, 1, 30), date(2025, 4, 12)),
            (datetime(2025, 4, 12, 1, 30, tzinfo=UTC), date(2025, 4, 12)),
            (datetime(2025, 4, 12, 1, 30, tzinfo=timezone(timedelta(hours=3))), date(2025, 4, 11)),
            (datetime(2025, 4, 11, 21, 0, tzinfo=timezone(timedelta(hours=-5))), date(2025, 4, 12)),
        ],
    )
    def test_study_dates_are_taken_in_utc(self, moment: datetime, expected: date) -> None:
        assert to_utc_date(moment) == expected


class TestContainer:
    def test_services_are_built_around_the_overridden_session(self, db_session: Session) -> None:
        with container.db.override(db_session):
            service = container.group_service()

        assert service.group_repository.db is db_session
        assert service.uow.db is db_session
        assert service.study_session_repository.db is db_session


class TestDatabase:
    def count_rows(self, session: Session, model: type[Base]) -> int:
        return session.scalar(select(func.count()).select_from(model)) or 0

    def test_file_store_gives_each_session_its_own_transaction(self, tmp_path: Path) -> None:
        database = Database(Settings(DATABASE_URL=f"sqlite:///{tmp_path / 'store.db'}"))
        database.create_tables()
        session_a = database.session()
        session_b = database.session()
        try:
            session_a.add(models.Word(portuguese="gato", english="cat"))
            session_a.flush()

            assert self.count_rows(session_b, models.Word) == 0

            session_a.rollback()
            build_group_service(session_b).create_group("Animals")

            fresh = database.session()
            try:
                assert self.count_rows(fresh, models.Word) == 0
                assert self.count_rows(fresh, models.Group) == 1
            finally:
                fresh.close()
        finally:
            session_a.close()
            session_b.close()
            database.dispose()

    def test_memory_store_keeps_a_single_connection(self) -> None:
        database = Database(Settings(DATABASE_URL="sqlite:///:memory:"))
        try:
            assert isinstance(database.engine.pool, StaticPool)
        finally:
            database.dispose()
