"""Service layer for group-related business logic."""

from dataclasses import dataclass

import structlog

from lang_portal import models
from lang_portal.pagination import PaginatedResult, Pagination
from lang_portal.repositories import (
    GroupRepository,
    GroupWithWordCount,
    StudySessionDetail,
    StudySessionRepository,
    WordWithStats,
)
from lang_portal.unit_of_work import SqlAlchemyUnitOfWork

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class GroupDetail:
    """Group with its total member word count."""

    id: int
    name: str
    total_word_count: int


class GroupService:
    """Service for handling group and membership operations."""

    def __init__(
        self,
        group_repository: GroupRepository,
        study_session_repository: StudySessionRepository,
        uow: SqlAlchemyUnitOfWork,
    ) -> None:
        self.group_repository = group_repository
        self.study_session_repository = study_session_repository
        self.uow = uow

    def list_groups(self, pagination: Pagination) -> PaginatedResult[GroupWithWordCount]:
        """Get a page of groups with their word counts."""
        total = self.group_repository.count()
        items = self.group_repository.list_with_word_counts(pagination.offset, pagination.limit)
        return PaginatedResult(items=items, total=total, pagination=pagination)

    def get_group(self, group_id: int) -> GroupDetail | None:
        """
        Get a group with its member word count.

        Returns:
            GroupDetail, or None if the group does not exist
        """
        group = self.group_repository.get_by_id(group_id)
        if group is None:
            return None

        return GroupDetail(
            id=group.id,
            name=group.name,
            total_word_count=self.group_repository.count_words(group_id),
        )

    def get_group_words(
        self, group_id: int, pagination: Pagination
    ) -> PaginatedResult[WordWithStats]:
        """Get a page of the group's words with their correct/wrong counts."""
        total = self.group_repository.count_words(group_id)
        items = self.group_repository.list_words_with_stats(
            group_id, pagination.offset, pagination.limit
        )
        return PaginatedResult(items=items, total=total, pagination=pagination)

    def get_group_study_sessions(
        self, group_id: int, pagination: Pagination
    ) -> PaginatedResult[StudySessionDetail]:
        """Get a page of the group's study sessions, most recent first."""
        total = self.study_session_repository.count(group_id=group_id)
        items = self.study_session_repository.list_details(
            pagination.offset, pagination.limit, group_id=group_id
        )
        return PaginatedResult(items=items, total=total, pagination=pagination)

    def create_group(self, name: str) -> models.Group:
        """Create a group."""
        with self.uow:
            group = self.group_repository.create(name)
            self.uow.commit()

        logger.info("created_group", group_id=group.id)
        return group

    def update_group(self, group_id: int, name: str) -> models.Group | None:
        """Rename a group. Returns None if the group does not exist."""
        with self.uow:
            group = self.group_repository.update(group_id, name)
            if group is None:
                return None
            self.uow.commit()

        logger.info("updated_group", group_id=group_id)
        return group

    def delete_group(self, group_id: int) -> None:
        """
        Delete a group and its memberships atomically.

        Raises:
            ConstraintViolationError: If study sessions still reference the group;
                nothing is deleted in that case
        """
        with self.uow:
            self.group_repository.delete(group_id)
            self.uow.commit()

        logger.info("deleted_group", group_id=group_id)

    def add_words_to_group(self, group_id: int, word_ids: list[int]) -> None:
        """
        Add words to a group, all or nothing.

        Raises:
            ConstraintViolationError: If any word id is unknown, already a member,
                or the group does not exist; no membership is added in that case
        """
        with self.uow:
            self.group_repository.add_words(group_id, word_ids)
            self.uow.commit()

        logger.info("added_words_to_group", group_id=group_id, word_count=len(word_ids))

    def remove_word_from_group(self, group_id: int, word_id: int) -> None:
        """Remove a word from a group. Removing a non-member is a no-op."""
        with self.uow:
            self.group_repository.remove_word(group_id, word_id)
            self.uow.commit()

        logger.info("removed_word_from_group", group_id=group_id, word_id=word_id)
