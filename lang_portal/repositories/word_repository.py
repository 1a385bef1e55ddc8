"""Word repository for database operations."""

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from sqlalchemy import Row, case, delete, func, select
from sqlalchemy.orm import Session

from lang_portal import models


@dataclass(frozen=True)
class WordWithStats:
    """Word row enriched with review counts aggregated from its review items."""

    id: int
    portuguese: str
    english: str
    created_at: datetime
    correct_count: int
    wrong_count: int


@dataclass(frozen=True)
class WordGroupRef:
    """Minimal group reference listed on a word."""

    id: int
    name: str


def review_count_columns() -> tuple[Any, Any]:
    """
    Conditional aggregates counting correct and wrong review items.

    COUNT ignores the NULLs produced by the CASE for non-matching rows and by
    the left join for words without reviews, so unreviewed words yield 0/0.
    """
    correct_count = func.count(case((models.WordReviewItem.correct.is_(True), 1))).label(
        "correct_count"
    )
    wrong_count = func.count(case((models.WordReviewItem.correct.is_(False), 1))).label(
        "wrong_count"
    )
    return correct_count, wrong_count


def to_word_with_stats(row: Row[Any]) -> WordWithStats:
    """Convert a (Word, correct_count, wrong_count) row."""
    word, correct_count, wrong_count = row
    return WordWithStats(
        id=word.id,
        portuguese=word.portuguese,
        english=word.english,
        created_at=word.created_at,
        correct_count=correct_count or 0,
        wrong_count=wrong_count or 0,
    )


class WordRepository:
    """Repository for Word database operations."""

    def __init__(self, db: Session) -> None:
        """Initialize repository with database session."""
        self.db = db

    def get_by_id(self, word_id: int) -> models.Word | None:
        """Get a word by its ID, or None if it does not exist."""
        stmt = select(models.Word).where(models.Word.id == word_id)
        return self.db.execute(stmt).scalar_one_or_none()

    def get_with_stats(self, word_id: int) -> WordWithStats | None:
        """Get a word with its correct/wrong review counts."""
        correct_count, wrong_count = review_count_columns()
        stmt = (
            select(models.Word, correct_count, wrong_count)
            .outerjoin(models.WordReviewItem, models.WordReviewItem.word_id == models.Word.id)
            .where(models.Word.id == word_id)
            .group_by(models.Word.id)
        )
        row = self.db.execute(stmt).one_or_none()
        if row is None:
            return None
        return to_word_with_stats(row)

    def list_with_stats(self, offset: int = 0, limit: int = 10) -> list[WordWithStats]:
        """
        Get a page of words with their review counts.

        Args:
            offset: Number of words to skip
            limit: Maximum number of words to return

        Returns:
            Words ordered by id ascending
        """
        correct_count, wrong_count = review_count_columns()
        stmt = (
            select(models.Word, correct_count, wrong_count)
            .outerjoin(models.WordReviewItem, models.WordReviewItem.word_id == models.Word.id)
            .group_by(models.Word.id)
            .order_by(models.Word.id)
            .offset(offset)
            .limit(limit)
        )
        return [to_word_with_stats(row) for row in self.db.execute(stmt).all()]

    def count(self) -> int:
        """Count all words."""
        return self.db.execute(select(func.count(models.Word.id))).scalar() or 0

    def get_groups(self, word_id: int) -> list[WordGroupRef]:
        """Get the groups a word belongs to, ordered by group id."""
        stmt = (
            select(models.Group.id, models.Group.name)
            .join(models.words_groups, models.words_groups.c.group_id == models.Group.id)
            .where(models.words_groups.c.word_id == word_id)
            .order_by(models.Group.id)
        )
        rows: Sequence[Row[Any]] = self.db.execute(stmt).all()
        return [WordGroupRef(id=group_id, name=name) for group_id, name in rows]

    def create(self, portuguese: str, english: str) -> models.Word:
        """Create a new word."""
        word = models.Word(portuguese=portuguese, english=english)
        self.db.add(word)
        self.db.flush()
        self.db.refresh(word)
        return word

    def update(self, word_id: int, portuguese: str, english: str) -> models.Word | None:
        """Replace both text fields of a word. Returns None if the word does not exist."""
        word = self.get_by_id(word_id)
        if word is None:
            return None

        word.portuguese = portuguese
        word.english = english
        self.db.flush()
        self.db.refresh(word)
        return word

    def delete(self, word_id: int) -> None:
        """
        Delete a word and its group memberships.

        Review items referencing the word are kept.
        """
        self.db.execute(
            delete(models.words_groups).where(models.words_groups.c.word_id == word_id)
        )
        self.db.execute(delete(models.Word).where(models.Word.id == word_id))
        self.db.flush()
