"""FastAPI dependencies for the application."""

from typing import Annotated

from fastapi import Depends, Query

from lang_portal.config import Settings, get_settings
from lang_portal.pagination import Pagination

PageQuery = Annotated[str | None, Query(description="Page number, 1-indexed")]
PageSizeQuery = Annotated[str | None, Query(description="Items per page (max 100)")]


def get_pagination(
    settings: Annotated[Settings, Depends(get_settings)],
    page: PageQuery = None,
    page_size: PageSizeQuery = None,
    per_page: PageSizeQuery = None,
) -> Pagination:
    """Pagination for word, group and session feeds."""
    return Pagination.from_query(page, page_size or per_page, settings.DEFAULT_PAGE_SIZE)


def get_study_session_pagination(
    settings: Annotated[Settings, Depends(get_settings)],
    page: PageQuery = None,
    per_page: PageSizeQuery = None,
    page_size: PageSizeQuery = None,
) -> Pagination:
    """Pagination for per-activity session listings and session words."""
    return Pagination.from_query(page, per_page or page_size, settings.STUDY_SESSION_PAGE_SIZE)


DefaultPagination = Annotated[Pagination, Depends(get_pagination)]
StudySessionPagination = Annotated[Pagination, Depends(get_study_session_pagination)]
