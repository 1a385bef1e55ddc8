"""Database models."""

from datetime import UTC, datetime

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String, Table, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from lang_portal.database import Base


def utcnow() -> datetime:
    """Timezone-aware current time used for every created_at column."""
    return datetime.now(UTC)


# Word <-> Group membership. The composite primary key makes the relation a set.
words_groups = Table(
    "words_groups",
    Base.metadata,
    Column(
        "word_id",
        Integer,
        ForeignKey("words.id", ondelete="CASCADE"),
        primary_key=True,
        index=True,
    ),
    Column(
        "group_id",
        Integer,
        ForeignKey("groups.id", ondelete="CASCADE"),
        primary_key=True,
        index=True,
    ),
)


class Word(Base):
    """A vocabulary entry with its source and target language text."""

    __tablename__ = "words"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    portuguese: Mapped[str] = mapped_column(String(255), nullable=False)
    english: Mapped[str] = mapped_column(String(255), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, nullable=False
    )

    groups: Mapped[list["Group"]] = relationship(
        secondary=words_groups, back_populates="words", order_by="Group.id"
    )

    def __repr__(self) -> str:
        """String representation of Word."""
        return f"<Word(id={self.id}, portuguese='{self.portuguese}', english='{self.english}')>"


class Group(Base):
    """A thematic group of words."""

    __tablename__ = "groups"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, nullable=False
    )

    words: Mapped[list[Word]] = relationship(
        secondary=words_groups, back_populates="groups", order_by=Word.id
    )

    def __repr__(self) -> str:
        """String representation of Group."""
        return f"<Group(id={self.id}, name='{self.name}')>"


class StudyActivity(Base):
    """A kind of practice a learner can launch against a group."""

    __tablename__ = "study_activities"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    thumbnail_url: Mapped[str] = mapped_column(String(1024), nullable=False, default="")
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, nullable=False
    )

    def __repr__(self) -> str:
        """String representation of StudyActivity."""
        return f"<StudyActivity(id={self.id}, name='{self.name}')>"


class StudySession(Base):
    """One instance of practicing a group with an activity."""

    __tablename__ = "study_sessions"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    group_id: Mapped[int] = mapped_column(ForeignKey("groups.id"), nullable=False, index=True)
    study_activity_id: Mapped[int] = mapped_column(
        ForeignKey("study_activities.id"), nullable=False, index=True
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, nullable=False, index=True
    )

    group: Mapped[Group] = relationship()
    study_activity: Mapped[StudyActivity] = relationship()
    review_items: Mapped[list["WordReviewItem"]] = relationship(back_populates="study_session")

    def __repr__(self) -> str:
        """String representation of StudySession."""
        return (
            f"<StudySession(id={self.id}, group_id={self.group_id}, "
            f"study_activity_id={self.study_activity_id})>"
        )


class WordReviewItem(Base):
    """A single recorded answer for a word during a study session."""

    __tablename__ = "word_review_items"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    study_session_id: Mapped[int] = mapped_column(
        ForeignKey("study_sessions.id"), nullable=False, index=True
    )
    # No foreign key: review history outlives a deleted word.
    word_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    correct: Mapped[bool] = mapped_column(Boolean, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, nullable=False
    )

    study_session: Mapped[StudySession] = relationship(back_populates="review_items")

    def __repr__(self) -> str:
        """String representation of WordReviewItem."""
        return (
            f"<WordReviewItem(id={self.id}, study_session_id={self.study_session_id}, "
            f"word_id={self.word_id}, correct={self.correct})>"
        )
