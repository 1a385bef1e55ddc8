"""
Unit of Work for multi-statement writes.

The Unit of Work wraps a transaction: changes become visible only on an
explicit commit, and any exception raised inside the block rolls back
everything done since the block started.

Example:
    with uow:
        group_repository.add_words(group_id, word_ids)
        uow.commit()
"""

from types import TracebackType
from typing import Self

import structlog
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from lang_portal.exceptions import ConstraintViolationError

logger = structlog.get_logger(__name__)


class SqlAlchemyUnitOfWork:
    """Unit of Work backed by a SQLAlchemy session."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def commit(self) -> None:
        """Commit the current transaction."""
        self.db.commit()

    def rollback(self) -> None:
        """Rollback the current transaction."""
        self.db.rollback()

    def __enter__(self) -> Self:
        """Enter the unit of work context."""
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """
        Exit the unit of work context.

        If an exception occurred, rollback. Otherwise, do nothing
        (commit must be called explicitly). Store constraint failures
        surface as ConstraintViolationError.
        """
        if exc_type is None:
            return

        self.rollback()

        if isinstance(exc_val, IntegrityError):
            logger.info("write_rejected_by_constraint", error=str(exc_val.orig))
            raise ConstraintViolationError from exc_val
