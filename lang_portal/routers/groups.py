"""API routes for word groups and their memberships."""

from typing import Annotated

import structlog
from fastapi import APIRouter, Body, Depends, HTTPException, Response, status

from lang_portal import schemas
from lang_portal.core import container
from lang_portal.dependencies import DefaultPagination
from lang_portal.di import inject_service
from lang_portal.exceptions import UNEXPECTED_ERROR_DETAIL, GroupNotFoundError, LangPortalError
from lang_portal.services import GroupService

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/groups", tags=["groups"])


def _unexpected_error() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=UNEXPECTED_ERROR_DETAIL,
    )


@router.get(
    "",
    response_model=schemas.PaginatedResponse[schemas.GroupWithWordCount],
    status_code=status.HTTP_200_OK,
)
def list_groups(
    pagination: DefaultPagination,
    service: GroupService = Depends(inject_service(container.group_service)),
) -> schemas.PaginatedResponse[schemas.GroupWithWordCount]:
    """Get a page of groups, each with its member word count."""
    try:
        result = service.list_groups(pagination)
        return schemas.to_paginated_response(result, schemas.GroupWithWordCount.model_validate)
    except LangPortalError:
        raise
    except Exception as e:
        logger.error("failed_to_list_groups", error=str(e), exc_info=True)
        raise _unexpected_error() from e


@router.get("/{group_id}", response_model=schemas.GroupDetail, status_code=status.HTTP_200_OK)
def get_group(
    group_id: int,
    service: GroupService = Depends(inject_service(container.group_service)),
) -> schemas.GroupDetail:
    """
    Get a group with its total word count.

    Raises:
        GroupNotFoundError: If the group does not exist
    """
    try:
        group = service.get_group(group_id)
        if group is None:
            raise GroupNotFoundError(group_id)

        return schemas.GroupDetail(
            id=group.id,
            name=group.name,
            stats=schemas.GroupStats(total_word_count=group.total_word_count),
        )
    except LangPortalError:
        raise
    except Exception as e:
        logger.error("failed_to_get_group", group_id=group_id, error=str(e), exc_info=True)
        raise _unexpected_error() from e


@router.get(
    "/{group_id}/words",
    response_model=schemas.PaginatedResponse[schemas.WordWithStats],
    status_code=status.HTTP_200_OK,
)
def get_group_words(
    group_id: int,
    pagination: DefaultPagination,
    service: GroupService = Depends(inject_service(container.group_service)),
) -> schemas.PaginatedResponse[schemas.WordWithStats]:
    """
    Get a page of the group's words with their review statistics.

    Raises:
        GroupNotFoundError: If the group does not exist
    """
    try:
        if service.get_group(group_id) is None:
            raise GroupNotFoundError(group_id)

        result = service.get_group_words(group_id, pagination)
        return schemas.to_paginated_response(result, schemas.WordWithStats.model_validate)
    except LangPortalError:
        raise
    except Exception as e:
        logger.error(
            "failed_to_get_group_words", group_id=group_id, error=str(e), exc_info=True
        )
        raise _unexpected_error() from e


@router.get(
    "/{group_id}/study_sessions",
    response_model=schemas.PaginatedResponse[schemas.StudySessionDetail],
    response_model_exclude_none=True,
    status_code=status.HTTP_200_OK,
)
def get_group_study_sessions(
    group_id: int,
    pagination: DefaultPagination,
    service: GroupService = Depends(inject_service(container.group_service)),
) -> schemas.PaginatedResponse[schemas.StudySessionDetail]:
    """Get a page of the group's study sessions, most recent first."""
    try:
        result = service.get_group_study_sessions(group_id, pagination)
        return schemas.to_paginated_response(result, schemas.StudySessionDetail.model_validate)
    except LangPortalError:
        raise
    except Exception as e:
        logger.error(
            "failed_to_get_group_study_sessions", group_id=group_id, error=str(e), exc_info=True
        )
        raise _unexpected_error() from e


@router.post("", response_model=schemas.Group, status_code=status.HTTP_201_CREATED)
def create_group(
    request: schemas.GroupCreate,
    service: GroupService = Depends(inject_service(container.group_service)),
) -> schemas.Group:
    """Create a group."""
    try:
        group = service.create_group(request.name)
        return schemas.Group.model_validate(group)
    except LangPortalError:
        raise
    except Exception as e:
        logger.error("failed_to_create_group", error=str(e), exc_info=True)
        raise _unexpected_error() from e


@router.put("/{group_id}", response_model=schemas.Group, status_code=status.HTTP_200_OK)
def update_group(
    group_id: int,
    request: schemas.GroupUpdate,
    service: GroupService = Depends(inject_service(container.group_service)),
) -> schemas.Group:
    """
    Rename a group.

    Raises:
        GroupNotFoundError: If the group does not exist
    """
    try:
        group = service.update_group(group_id, request.name)
        if group is None:
            raise GroupNotFoundError(group_id)
        return schemas.Group.model_validate(group)
    except LangPortalError:
        raise
    except Exception as e:
        logger.error("failed_to_update_group", group_id=group_id, error=str(e), exc_info=True)
        raise _unexpected_error() from e


@router.delete("/{group_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_group(
    group_id: int,
    service: GroupService = Depends(inject_service(container.group_service)),
) -> Response:
    """
    Delete a group together with its word memberships.

    Raises:
        ConstraintViolationError: If study sessions still reference the group
    """
    try:
        service.delete_group(group_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    except LangPortalError:
        raise
    except Exception as e:
        logger.error("failed_to_delete_group", group_id=group_id, error=str(e), exc_info=True)
        raise _unexpected_error() from e


@router.post("/{group_id}/words", status_code=status.HTTP_204_NO_CONTENT)
def add_words_to_group(
    group_id: int,
    word_ids: Annotated[list[int], Body(description="Ids of the words to add")],
    service: GroupService = Depends(inject_service(container.group_service)),
) -> Response:
    """
    Add words to a group.

    Either every word is added or none is.

    Raises:
        ConstraintViolationError: If a word id is unknown or already a member,
            or the group does not exist
    """
    try:
        service.add_words_to_group(group_id, word_ids)
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    except LangPortalError:
        raise
    except Exception as e:
        logger.error(
            "failed_to_add_words_to_group", group_id=group_id, error=str(e), exc_info=True
        )
        raise _unexpected_error() from e


@router.delete("/{group_id}/words/{word_id}", status_code=status.HTTP_204_NO_CONTENT)
def remove_word_from_group(
    group_id: int,
    word_id: int,
    service: GroupService = Depends(inject_service(container.group_service)),
) -> Response:
    """Remove a word from a group. Removing a word that is not a member succeeds."""
    try:
        service.remove_word_from_group(group_id, word_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    except LangPortalError:
        raise
    except Exception as e:
        logger.error(
            "failed_to_remove_word_from_group",
            group_id=group_id,
            word_id=word_id,
            error=str(e),
            exc_info=True,
        )
        raise _unexpected_error() from e
