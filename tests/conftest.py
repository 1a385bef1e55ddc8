"""Pytest configuration and fixtures."""

import os
from collections.abc import Generator, Iterable
from datetime import datetime
from typing import Any

# Settings are read once at import time; point the app at a throwaway store first.
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["ENVIRONMENT"] = "test"

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import Session, sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from lang_portal import models  # noqa: E402
from lang_portal.database import Base, enable_sqlite_foreign_keys, get_db  # noqa: E402
from lang_portal.main import app  # noqa: E402

# Test database URL (in-memory SQLite)
TEST_DATABASE_URL = "sqlite:///:memory:"

# Create test engine
test_engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
enable_sqlite_foreign_keys(test_engine)

# Create test session factory
TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    """Create a fresh database session for each test."""
    # Create all tables
    Base.metadata.create_all(bind=test_engine)

    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()
        # Drop all tables after test
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def client(db_session: Session) -> Generator[TestClient, Any, None]:
    """Create a test client with database session."""

    def override_get_db() -> Generator[Session, None, None]:
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


def create_test_word(
    db_session: Session,
    portuguese: str = "olá",
    english: str = "hello",
    created_at: datetime | None = None,
) -> models.Word:
    """Helper function to create a word."""
    word = models.Word(portuguese=portuguese, english=english)
    if created_at is not None:
        word.created_at = created_at
    db_session.add(word)
    db_session.commit()
    db_session.refresh(word)
    return word


def create_test_group(
    db_session: Session,
    name: str = "Basics",
    words: Iterable[models.Word] = (),
) -> models.Group:
    """Helper function to create a group, optionally with member words."""
    group = models.Group(name=name)
    group.words.extend(words)
    db_session.add(group)
    db_session.commit()
    db_session.refresh(group)
    return group


def create_test_study_activity(
    db_session: Session,
    name: str = "Flashcards",
    thumbnail_url: str = "/thumbnails/flashcards.png",
    description: str = "Flip cards and check your answer",
) -> models.StudyActivity:
    """Helper function to create a study activity."""
    activity = models.StudyActivity(
        name=name, thumbnail_url=thumbnail_url, description=description
    )
    db_session.add(activity)
    db_session.commit()
    db_session.refresh(activity)
    return activity


def create_test_study_session(
    db_session: Session,
    group: models.Group,
    activity: models.StudyActivity,
    created_at: datetime | None = None,
) -> models.StudySession:
    """Helper function to create a study session."""
    session = models.StudySession(group_id=group.id, study_activity_id=activity.id)
    if created_at is not None:
        session.created_at = created_at
    db_session.add(session)
    db_session.commit()
    db_session.refresh(session)
    return session


def create_test_review_item(
    db_session: Session,
    study_session: models.StudySession,
    word_id: int,
    correct: bool = True,
    created_at: datetime | None = None,
) -> models.WordReviewItem:
    """Helper function to record a review item."""
    review_item = models.WordReviewItem(
        study_session_id=study_session.id, word_id=word_id, correct=correct
    )
    if created_at is not None:
        review_item.created_at = created_at
    db_session.add(review_item)
    db_session.commit()
    db_session.refresh(review_item)
    return review_item
