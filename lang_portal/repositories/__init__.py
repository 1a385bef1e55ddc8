"""Repository layer for database operations using repository pattern."""

from lang_portal.repositories.group_repository import GroupRepository, GroupWithWordCount
from lang_portal.repositories.study_activity_repository import StudyActivityRepository
from lang_portal.repositories.study_session_repository import (
    StudySessionDetail,
    StudySessionRepository,
)
from lang_portal.repositories.word_repository import WordGroupRef, WordRepository, WordWithStats

__all__ = [
    "GroupRepository",
    "GroupWithWordCount",
    "StudyActivityRepository",
    "StudySessionDetail",
    "StudySessionRepository",
    "WordGroupRef",
    "WordRepository",
    "WordWithStats",
]
