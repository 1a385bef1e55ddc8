"""Pydantic schemas for API request/response validation."""

from lang_portal.schemas.common_schemas import (
    MessageResponse,
    PaginatedResponse,
    PaginationMeta,
    to_paginated_response,
)
from lang_portal.schemas.dashboard_schemas import QuickStats, StudyProgress
from lang_portal.schemas.group_schemas import (
    Group,
    GroupCreate,
    GroupDetail,
    GroupStats,
    GroupUpdate,
    GroupWithWordCount,
)
from lang_portal.schemas.study_schemas import (
    LastStudySession,
    StudyActivity,
    StudySession,
    StudySessionCreate,
    StudySessionDetail,
    WordReviewCreate,
    WordReviewItem,
)
from lang_portal.schemas.word_schemas import (
    Word,
    WordCreate,
    WordDetail,
    WordGroup,
    WordStats,
    WordUpdate,
    WordWithStats,
)

__all__ = [
    "Group",
    "GroupCreate",
    "GroupDetail",
    "GroupStats",
    "GroupUpdate",
    "GroupWithWordCount",
    "LastStudySession",
    "MessageResponse",
    "PaginatedResponse",
    "PaginationMeta",
    "QuickStats",
    "StudyActivity",
    "StudyProgress",
    "StudySession",
    "StudySessionCreate",
    "StudySessionDetail",
    "Word",
    "WordCreate",
    "WordDetail",
    "WordGroup",
    "WordReviewCreate",
    "WordReviewItem",
    "WordStats",
    "WordUpdate",
    "WordWithStats",
    "to_paginated_response",
]
