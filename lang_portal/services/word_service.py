"""Service layer for word-related business logic."""

from dataclasses import dataclass

import structlog

from lang_portal import models
from lang_portal.pagination import PaginatedResult, Pagination
from lang_portal.repositories import WordGroupRef, WordRepository, WordWithStats
from lang_portal.unit_of_work import SqlAlchemyUnitOfWork

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class WordDetail:
    """Word with its review stats and the groups it belongs to."""

    id: int
    portuguese: str
    english: str
    correct_count: int
    wrong_count: int
    groups: list[WordGroupRef]


class WordService:
    """Service for handling word-related operations."""

    def __init__(self, word_repository: WordRepository, uow: SqlAlchemyUnitOfWork) -> None:
        self.word_repository = word_repository
        self.uow = uow

    def list_words(self, pagination: Pagination) -> PaginatedResult[WordWithStats]:
        """Get a page of words with their correct/wrong counts."""
        total = self.word_repository.count()
        items = self.word_repository.list_with_stats(pagination.offset, pagination.limit)
        return PaginatedResult(items=items, total=total, pagination=pagination)

    def get_word_detail(self, word_id: int) -> WordDetail | None:
        """
        Get a word with stats and groups.

        Returns:
            WordDetail, or None if the word does not exist
        """
        word = self.word_repository.get_with_stats(word_id)
        if word is None:
            return None

        return WordDetail(
            id=word.id,
            portuguese=word.portuguese,
            english=word.english,
            correct_count=word.correct_count,
            wrong_count=word.wrong_count,
            groups=self.word_repository.get_groups(word_id),
        )

    def create_word(self, portuguese: str, english: str) -> models.Word:
        """Create a word."""
        with self.uow:
            word = self.word_repository.create(portuguese, english)
            self.uow.commit()

        logger.info("created_word", word_id=word.id)
        return word

    def update_word(self, word_id: int, portuguese: str, english: str) -> models.Word | None:
        """Replace a word's text fields. Returns None if the word does not exist."""
        with self.uow:
            word = self.word_repository.update(word_id, portuguese, english)
            if word is None:
                return None
            self.uow.commit()

        logger.info("updated_word", word_id=word_id)
        return word

    def delete_word(self, word_id: int) -> None:
        """Delete a word and its group memberships."""
        with self.uow:
            self.word_repository.delete(word_id)
            self.uow.commit()

        logger.info("deleted_word", word_id=word_id)
