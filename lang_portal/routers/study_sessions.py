"""API routes for study sessions and word reviews."""

import structlog
from fastapi import APIRouter, Depends, HTTPException, status

from lang_portal import schemas
from lang_portal.core import container
from lang_portal.dependencies import DefaultPagination, StudySessionPagination
from lang_portal.di import inject_service
from lang_portal.exceptions import (
    UNEXPECTED_ERROR_DETAIL,
    LangPortalError,
    StudySessionNotFoundError,
)
from lang_portal.services import StudySessionService

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/study_sessions", tags=["study_sessions"])


@router.get(
    "",
    response_model=schemas.PaginatedResponse[schemas.StudySessionDetail],
    response_model_exclude_none=True,
    status_code=status.HTTP_200_OK,
)
def list_study_sessions(
    pagination: DefaultPagination,
    service: StudySessionService = Depends(inject_service(container.study_session_service)),
) -> schemas.PaginatedResponse[schemas.StudySessionDetail]:
    """Get the global session feed, most recent first."""
    try:
        result = service.list_study_sessions(pagination)
        return schemas.to_paginated_response(result, schemas.StudySessionDetail.model_validate)
    except LangPortalError:
        raise
    except Exception as e:
        logger.error("failed_to_list_study_sessions", error=str(e), exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=UNEXPECTED_ERROR_DETAIL,
        ) from e


@router.get(
    "/{session_id}",
    response_model=schemas.StudySessionDetail,
    response_model_exclude_none=True,
    status_code=status.HTTP_200_OK,
)
def get_study_session(
    session_id: int,
    service: StudySessionService = Depends(inject_service(container.study_session_service)),
) -> schemas.StudySessionDetail:
    """
    Get a study session with its derived fields.

    Raises:
        StudySessionNotFoundError: If the session does not exist
    """
    try:
        session = service.get_study_session(session_id)
        if session is None:
            raise StudySessionNotFoundError(session_id)
        return schemas.StudySessionDetail.model_validate(session)
    except LangPortalError:
        raise
    except Exception as e:
        logger.error(
            "failed_to_get_study_session", session_id=session_id, error=str(e), exc_info=True
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=UNEXPECTED_ERROR_DETAIL,
        ) from e


@router.get(
    "/{session_id}/words",
    response_model=schemas.PaginatedResponse[schemas.WordWithStats],
    status_code=status.HTTP_200_OK,
)
def get_study_session_words(
    session_id: int,
    pagination: StudySessionPagination,
    service: StudySessionService = Depends(inject_service(container.study_session_service)),
) -> schemas.PaginatedResponse[schemas.WordWithStats]:
    """
    Get the words reviewed in a session.

    Counts are scoped to the session, so a word answered twice in it shows
    two reviews here regardless of its history elsewhere.

    Raises:
        StudySessionNotFoundError: If the session does not exist
    """
    try:
        if service.get_study_session(session_id) is None:
            raise StudySessionNotFoundError(session_id)

        result = service.get_study_session_words(session_id, pagination)
        return schemas.to_paginated_response(result, schemas.WordWithStats.model_validate)
    except LangPortalError:
        raise
    except Exception as e:
        logger.error(
            "failed_to_get_study_session_words",
            session_id=session_id,
            error=str(e),
            exc_info=True,
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=UNEXPECTED_ERROR_DETAIL,
        ) from e


@router.post(
    "/{session_id}/words/{word_id}/review",
    response_model=schemas.WordReviewItem,
    status_code=status.HTTP_201_CREATED,
)
def review_word(
    session_id: int,
    word_id: int,
    request: schemas.WordReviewCreate,
    service: StudySessionService = Depends(inject_service(container.study_session_service)),
) -> schemas.WordReviewItem:
    """
    Record whether a word was answered correctly during a session.

    Raises:
        StudySessionNotFoundError: If the session does not exist
        WordNotFoundError: If the word does not exist
    """
    try:
        review_item = service.record_word_review(session_id, word_id, request.correct)
        return schemas.WordReviewItem.model_validate(review_item)
    except LangPortalError:
        raise
    except Exception as e:
        logger.error(
            "failed_to_record_word_review",
            session_id=session_id,
            word_id=word_id,
            error=str(e),
            exc_info=True,
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=UNEXPECTED_ERROR_DETAIL,
        ) from e
