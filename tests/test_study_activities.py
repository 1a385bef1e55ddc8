"""Tests for study activities API endpoints."""

from datetime import UTC, datetime, timedelta
from typing import NamedTuple

import pytest
from fastapi import status
from fastapi.testclient import TestClient
from sqlalchemy import func, select
from sqlalchemy.orm import Session

from lang_portal import models
from tests.conftest import (
    create_test_group,
    create_test_review_item,
    create_test_study_activity,
    create_test_study_session,
    create_test_word,
)


class ActivityCatalog(NamedTuple):
    flashcards: models.StudyActivity
    typing: models.StudyActivity


@pytest.fixture
def catalog(db_session: Session) -> ActivityCatalog:
    """Two study activities."""
    return ActivityCatalog(
        flashcards=create_test_study_activity(db_session, name="Flashcards"),
        typing=create_test_study_activity(
            db_session,
            name="Typing Tutor",
            thumbnail_url="/thumbnails/typing.png",
            description="Type the translation",
        ),
    )


class TestListStudyActivities:
    """Test suite for GET /study_activities endpoint."""

    def test_list_activities_ordered_by_id(
        self, client: TestClient, catalog: ActivityCatalog
    ) -> None:
        response = client.get("/api/study_activities")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert [item["name"] for item in data] == ["Flashcards", "Typing Tutor"]
        assert data[1]["thumbnail_url"] == "/thumbnails/typing.png"
        assert data[1]["description"] == "Type the translation"

    def test_list_activities_empty(self, client: TestClient) -> None:
        response = client.get("/api/study_activities")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == []


class TestGetStudyActivity:
    """Test suite for GET /study_activities/{id} endpoint."""

    def test_get_activity(self, client: TestClient, catalog: ActivityCatalog) -> None:
        activity_id = catalog.typing.id

        response = client.get(f"/api/study_activities/{activity_id}")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["id"] == activity_id
        assert data["name"] == "Typing Tutor"
        assert "created_at" in data

    def test_get_activity_not_found(self, client: TestClient) -> None:
        response = client.get("/api/study_activities/99999")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["detail"] == "Study activity with id 99999 not found"


class TestGetStudyActivitySessions:
    """Test suite for GET /study_activities/{id}/study_sessions endpoint."""

    def test_sessions_with_derived_fields(
        self, client: TestClient, db_session: Session, catalog: ActivityCatalog
    ) -> None:
        word = create_test_word(db_session)
        group = create_test_group(db_session, name="Greetings", words=[word])
        started = datetime(2025, 5, 10, 18, 0, tzinfo=UTC)
        reviewed = create_test_study_session(
            db_session, group, catalog.flashcards, created_at=started
        )
        create_test_review_item(
            db_session, reviewed, word.id, created_at=started + timedelta(minutes=2)
        )
        create_test_review_item(
            db_session, reviewed, word.id, correct=False, created_at=started + timedelta(minutes=5)
        )
        empty = create_test_study_session(
            db_session, group, catalog.flashcards, created_at=started + timedelta(days=1)
        )
        create_test_study_session(db_session, group, catalog.typing)

        response = client.get(f"/api/study_activities/{catalog.flashcards.id}/study_sessions")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["pagination"] == {
            "current_page": 1,
            "total_pages": 1,
            "total_items": 2,
            "items_per_page": 100,
        }

        latest, earliest = data["items"]
        assert latest["id"] == empty.id
        assert latest["review_items_count"] == 0
        assert "end_time" not in latest

        assert earliest["id"] == reviewed.id
        assert earliest["activity_name"] == "Flashcards"
        assert earliest["group_name"] == "Greetings"
        assert earliest["review_items_count"] == 2
        assert datetime.fromisoformat(earliest["start_time"]).replace(tzinfo=UTC) == started
        assert datetime.fromisoformat(earliest["end_time"]).replace(
            tzinfo=UTC
        ) == started + timedelta(minutes=5)

    def test_sessions_per_page(
        self, client: TestClient, db_session: Session, catalog: ActivityCatalog
    ) -> None:
        group = create_test_group(db_session)
        for _ in range(3):
            create_test_study_session(db_session, group, catalog.flashcards)

        response = client.get(
            f"/api/study_activities/{catalog.flashcards.id}/study_sessions",
            params={"per_page": 2, "page": 2},
        )

        data = response.json()
        assert len(data["items"]) == 1
        assert data["pagination"]["items_per_page"] == 2
        assert data["pagination"]["total_pages"] == 2


class TestCreateStudySession:
    """Test suite for POST /study_activities endpoint."""

    def test_launch_session(
        self, client: TestClient, db_session: Session, catalog: ActivityCatalog
    ) -> None:
        group = create_test_group(db_session)
        group_id = group.id
        activity_id = catalog.typing.id

        response = client.post(
            "/api/study_activities",
            json={"group_id": group_id, "study_activity_id": activity_id},
        )

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert data["group_id"] == group_id
        assert data["study_activity_id"] == activity_id
        assert "created_at" in data

        session = db_session.get(models.StudySession, data["id"])
        assert session is not None

    @pytest.mark.parametrize("missing", ["group", "activity"])
    def test_launch_session_with_unknown_reference(
        self,
        client: TestClient,
        db_session: Session,
        catalog: ActivityCatalog,
        missing: str,
    ) -> None:
        group = create_test_group(db_session)
        payload = {
            "group_id": 99999 if missing == "group" else group.id,
            "study_activity_id": 99999 if missing == "activity" else catalog.typing.id,
        }

        response = client.post("/api/study_activities", json=payload)

        assert response.status_code == status.HTTP_409_CONFLICT
        assert db_session.scalar(select(func.count(models.StudySession.id))) == 0

    def test_launch_session_requires_both_ids(self, client: TestClient) -> None:
        response = client.post("/api/study_activities", json={"group_id": 1})

        assert response.status_code == 422
