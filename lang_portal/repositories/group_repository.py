"""Group repository for database operations."""

from dataclasses import dataclass
from datetime import datetime

from sqlalchemy import delete, func, insert, select
from sqlalchemy.orm import Session

from lang_portal import models
from lang_portal.repositories.word_repository import (
    WordWithStats,
    review_count_columns,
    to_word_with_stats,
)


@dataclass(frozen=True)
class GroupWithWordCount:
    """Group row with the number of member words."""

    id: int
    name: str
    created_at: datetime
    word_count: int


class GroupRepository:
    """Repository for Group and word membership database operations."""

    def __init__(self, db: Session) -> None:
        """Initialize repository with database session."""
        self.db = db

    def get_by_id(self, group_id: int) -> models.Group | None:
        """Get a group by its ID, or None if it does not exist."""
        stmt = select(models.Group).where(models.Group.id == group_id)
        return self.db.execute(stmt).scalar_one_or_none()

    def count(self) -> int:
        """Count all groups."""
        return self.db.execute(select(func.count(models.Group.id))).scalar() or 0

    def count_words(self, group_id: int) -> int:
        """Count the member words of a group."""
        stmt = (
            select(func.count())
            .select_from(models.words_groups)
            .where(models.words_groups.c.group_id == group_id)
        )
        return self.db.execute(stmt).scalar() or 0

    def list_with_word_counts(self, offset: int = 0, limit: int = 10) -> list[GroupWithWordCount]:
        """
        Get a page of groups with their word counts.

        Args:
            offset: Number of groups to skip
            limit: Maximum number of groups to return

        Returns:
            Groups ordered by id ascending
        """
        word_count_subq = (
            select(func.count())
            .select_from(models.words_groups)
            .where(models.words_groups.c.group_id == models.Group.id)
            .correlate(models.Group)
            .scalar_subquery()
            .label("word_count")
        )

        stmt = (
            select(models.Group, word_count_subq)
            .order_by(models.Group.id)
            .offset(offset)
            .limit(limit)
        )

        return [
            GroupWithWordCount(
                id=group.id,
                name=group.name,
                created_at=group.created_at,
                word_count=word_count or 0,
            )
            for group, word_count in self.db.execute(stmt).all()
        ]

    def list_words_with_stats(
        self, group_id: int, offset: int = 0, limit: int = 10
    ) -> list[WordWithStats]:
        """
        Get a page of a group's member words with their review counts.

        Args:
            group_id: ID of the group
            offset: Number of words to skip
            limit: Maximum number of words to return

        Returns:
            Member words ordered by id ascending
        """
        correct_count, wrong_count = review_count_columns()
        stmt = (
            select(models.Word, correct_count, wrong_count)
            .join(models.words_groups, models.words_groups.c.word_id == models.Word.id)
            .outerjoin(models.WordReviewItem, models.WordReviewItem.word_id == models.Word.id)
            .where(models.words_groups.c.group_id == group_id)
            .group_by(models.Word.id)
            .order_by(models.Word.id)
            .offset(offset)
            .limit(limit)
        )
        return [to_word_with_stats(row) for row in self.db.execute(stmt).all()]

    def create(self, name: str) -> models.Group:
        """Create a new group."""
        group = models.Group(name=name)
        self.db.add(group)
        self.db.flush()
        self.db.refresh(group)
        return group

    def update(self, group_id: int, name: str) -> models.Group | None:
        """Rename a group. Returns None if the group does not exist."""
        group = self.get_by_id(group_id)
        if group is None:
            return None

        group.name = name
        self.db.flush()
        self.db.refresh(group)
        return group

    def delete(self, group_id: int) -> None:
        """
        Delete a group's memberships, then the group itself.

        Must run inside a unit of work so both statements commit together.
        """
        self.db.execute(
            delete(models.words_groups).where(models.words_groups.c.group_id == group_id)
        )
        self.db.execute(delete(models.Group).where(models.Group.id == group_id))
        self.db.flush()

    def add_words(self, group_id: int, word_ids: list[int]) -> None:
        """
        Insert one membership row per word id.

        Must run inside a unit of work: a failing insert leaves the earlier
        ones pending until the rollback discards them.
        """
        for word_id in word_ids:
            self.db.execute(
                insert(models.words_groups).values(word_id=word_id, group_id=group_id)
            )
        self.db.flush()

    def remove_word(self, group_id: int, word_id: int) -> None:
        """Delete a single membership row. Missing memberships are ignored."""
        self.db.execute(
            delete(models.words_groups).where(
                models.words_groups.c.group_id == group_id,
                models.words_groups.c.word_id == word_id,
            )
        )
        self.db.flush()
