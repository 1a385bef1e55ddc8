"""API routes for dashboard statistics."""

import structlog
from fastapi import APIRouter, Depends, HTTPException, status

from lang_portal import schemas
from lang_portal.core import container
from lang_portal.di import inject_service
from lang_portal.exceptions import UNEXPECTED_ERROR_DETAIL
from lang_portal.services import DashboardService

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/dashboard", tags=["dashboard"])

NO_STUDY_SESSIONS_MESSAGE = "No study sessions found"


@router.get(
    "/last_study_session",
    response_model=schemas.LastStudySession | schemas.MessageResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_200_OK,
)
def get_last_study_session(
    service: DashboardService = Depends(inject_service(container.dashboard_service)),
) -> schemas.LastStudySession | schemas.MessageResponse:
    """
    Get the most recently created study session.

    An empty store is not an error: a message is returned instead of a session.
    """
    try:
        session = service.get_last_study_session()
        if session is None:
            return schemas.MessageResponse(message=NO_STUDY_SESSIONS_MESSAGE)
        return schemas.LastStudySession.model_validate(session)
    except Exception as e:
        logger.error("failed_to_get_last_study_session", error=str(e), exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=UNEXPECTED_ERROR_DETAIL,
        ) from e


@router.get("/study_progress", response_model=schemas.StudyProgress, status_code=status.HTTP_200_OK)
def get_study_progress(
    service: DashboardService = Depends(inject_service(container.dashboard_service)),
) -> schemas.StudyProgress:
    """Get the number of distinct words studied against the catalog size."""
    try:
        return schemas.StudyProgress.model_validate(service.get_study_progress())
    except Exception as e:
        logger.error("failed_to_get_study_progress", error=str(e), exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=UNEXPECTED_ERROR_DETAIL,
        ) from e


@router.get("/quick-stats", response_model=schemas.QuickStats, status_code=status.HTTP_200_OK)
def get_quick_stats(
    service: DashboardService = Depends(inject_service(container.dashboard_service)),
) -> schemas.QuickStats:
    """
    Get success rate, session totals and the current study streak.

    The streak is anchored to the current UTC date.
    """
    try:
        return schemas.QuickStats.model_validate(service.get_quick_stats())
    except Exception as e:
        logger.error("failed_to_get_quick_stats", error=str(e), exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=UNEXPECTED_ERROR_DETAIL,
        ) from e
