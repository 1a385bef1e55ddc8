"""API routes for study activities and launching study sessions."""

import structlog
from fastapi import APIRouter, Depends, HTTPException, status

from lang_portal import schemas
from lang_portal.core import container
from lang_portal.dependencies import StudySessionPagination
from lang_portal.di import inject_service
from lang_portal.exceptions import (
    UNEXPECTED_ERROR_DETAIL,
    LangPortalError,
    StudyActivityNotFoundError,
)
from lang_portal.services import StudyActivityService

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/study_activities", tags=["study_activities"])


@router.get("", response_model=list[schemas.StudyActivity], status_code=status.HTTP_200_OK)
def list_study_activities(
    service: StudyActivityService = Depends(inject_service(container.study_activity_service)),
) -> list[schemas.StudyActivity]:
    """Get the study activity catalog ordered by id."""
    try:
        activities = service.list_study_activities()
        return [schemas.StudyActivity.model_validate(activity) for activity in activities]
    except LangPortalError:
        raise
    except Exception as e:
        logger.error("failed_to_list_study_activities", error=str(e), exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=UNEXPECTED_ERROR_DETAIL,
        ) from e


@router.get(
    "/{activity_id}",
    response_model=schemas.StudyActivity,
    status_code=status.HTTP_200_OK,
)
def get_study_activity(
    activity_id: int,
    service: StudyActivityService = Depends(inject_service(container.study_activity_service)),
) -> schemas.StudyActivity:
    """
    Get a single study activity.

    Raises:
        StudyActivityNotFoundError: If the activity does not exist
    """
    try:
        activity = service.get_study_activity(activity_id)
        if activity is None:
            raise StudyActivityNotFoundError(activity_id)
        return schemas.StudyActivity.model_validate(activity)
    except LangPortalError:
        raise
    except Exception as e:
        logger.error(
            "failed_to_get_study_activity", activity_id=activity_id, error=str(e), exc_info=True
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=UNEXPECTED_ERROR_DETAIL,
        ) from e


@router.get(
    "/{activity_id}/study_sessions",
    response_model=schemas.PaginatedResponse[schemas.StudySessionDetail],
    response_model_exclude_none=True,
    status_code=status.HTTP_200_OK,
)
def get_study_activity_sessions(
    activity_id: int,
    pagination: StudySessionPagination,
    service: StudyActivityService = Depends(inject_service(container.study_activity_service)),
) -> schemas.PaginatedResponse[schemas.StudySessionDetail]:
    """
    Get the sessions launched with an activity, most recent first.

    Args:
        activity_id: ID of the study activity
        pagination: Normalized page and per_page query parameters (per_page defaults to 100)
        service: StudyActivityService injected via dependency container

    Returns:
        Paginated session details with review counts and end times
    """
    try:
        result = service.get_study_activity_sessions(activity_id, pagination)
        return schemas.to_paginated_response(result, schemas.StudySessionDetail.model_validate)
    except LangPortalError:
        raise
    except Exception as e:
        logger.error(
            "failed_to_get_study_activity_sessions",
            activity_id=activity_id,
            error=str(e),
            exc_info=True,
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=UNEXPECTED_ERROR_DETAIL,
        ) from e


@router.post("", response_model=schemas.StudySession, status_code=status.HTTP_201_CREATED)
def create_study_session(
    request: schemas.StudySessionCreate,
    service: StudyActivityService = Depends(inject_service(container.study_activity_service)),
) -> schemas.StudySession:
    """
    Launch a study session for a group with an activity.

    Raises:
        ConstraintViolationError: If the group or the activity does not exist
    """
    try:
        session = service.create_study_session(request.group_id, request.study_activity_id)
        return schemas.StudySession.model_validate(session)
    except LangPortalError:
        raise
    except Exception as e:
        logger.error("failed_to_create_study_session", error=str(e), exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=UNEXPECTED_ERROR_DETAIL,
        ) from e
