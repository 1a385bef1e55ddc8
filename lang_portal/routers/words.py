"""API routes for word management."""

import structlog
from fastapi import APIRouter, Depends, HTTPException, Response, status

from lang_portal import schemas
from lang_portal.core import container
from lang_portal.dependencies import DefaultPagination
from lang_portal.di import inject_service
from lang_portal.exceptions import UNEXPECTED_ERROR_DETAIL, LangPortalError, WordNotFoundError
from lang_portal.services import WordService

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/words", tags=["words"])


@router.get(
    "",
    response_model=schemas.PaginatedResponse[schemas.WordWithStats],
    status_code=status.HTTP_200_OK,
)
def list_words(
    pagination: DefaultPagination,
    service: WordService = Depends(inject_service(container.word_service)),
) -> schemas.PaginatedResponse[schemas.WordWithStats]:
    """
    Get a page of words with their review statistics.

    Args:
        pagination: Normalized page and page_size query parameters
        service: WordService injected via dependency container

    Returns:
        Paginated words ordered by id, each with correct/wrong counts
    """
    try:
        result = service.list_words(pagination)
        return schemas.to_paginated_response(result, schemas.WordWithStats.model_validate)
    except LangPortalError:
        raise
    except Exception as e:
        logger.error("failed_to_list_words", error=str(e), exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=UNEXPECTED_ERROR_DETAIL,
        ) from e


@router.get("/{word_id}", response_model=schemas.WordDetail, status_code=status.HTTP_200_OK)
def get_word(
    word_id: int,
    service: WordService = Depends(inject_service(container.word_service)),
) -> schemas.WordDetail:
    """
    Get a word with its statistics and the groups it belongs to.

    Raises:
        WordNotFoundError: If the word does not exist
    """
    try:
        word = service.get_word_detail(word_id)
        if word is None:
            raise WordNotFoundError(word_id)

        return schemas.WordDetail(
            id=word.id,
            portuguese=word.portuguese,
            english=word.english,
            stats=schemas.WordStats(
                correct_count=word.correct_count,
                wrong_count=word.wrong_count,
            ),
            groups=[schemas.WordGroup.model_validate(group) for group in word.groups],
        )
    except LangPortalError:
        raise
    except Exception as e:
        logger.error("failed_to_get_word", word_id=word_id, error=str(e), exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=UNEXPECTED_ERROR_DETAIL,
        ) from e


@router.post("", response_model=schemas.Word, status_code=status.HTTP_201_CREATED)
def create_word(
    request: schemas.WordCreate,
    service: WordService = Depends(inject_service(container.word_service)),
) -> schemas.Word:
    """Create a word."""
    try:
        word = service.create_word(request.portuguese, request.english)
        return schemas.Word.model_validate(word)
    except LangPortalError:
        raise
    except Exception as e:
        logger.error("failed_to_create_word", error=str(e), exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=UNEXPECTED_ERROR_DETAIL,
        ) from e


@router.put("/{word_id}", response_model=schemas.Word, status_code=status.HTTP_200_OK)
def update_word(
    word_id: int,
    request: schemas.WordUpdate,
    service: WordService = Depends(inject_service(container.word_service)),
) -> schemas.Word:
    """
    Replace both text fields of a word.

    Raises:
        WordNotFoundError: If the word does not exist
    """
    try:
        word = service.update_word(word_id, request.portuguese, request.english)
        if word is None:
            raise WordNotFoundError(word_id)
        return schemas.Word.model_validate(word)
    except LangPortalError:
        raise
    except Exception as e:
        logger.error("failed_to_update_word", word_id=word_id, error=str(e), exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=UNEXPECTED_ERROR_DETAIL,
        ) from e


@router.delete("/{word_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_word(
    word_id: int,
    service: WordService = Depends(inject_service(container.word_service)),
) -> Response:
    """
    Delete a word and its group memberships.

    Deleting is unconditional: review items recorded for the word are kept.
    """
    try:
        service.delete_word(word_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    except LangPortalError:
        raise
    except Exception as e:
        logger.error("failed_to_delete_word", word_id=word_id, error=str(e), exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=UNEXPECTED_ERROR_DETAIL,
        ) from e
