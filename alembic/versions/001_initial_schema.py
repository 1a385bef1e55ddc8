"""Create words, groups, study activities, study sessions and review items.

Revision ID: 001
Revises:
Create Date: 2026-10-18

"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Create the vocabulary and study tables."""
    op.create_table(
        "words",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("portuguese", sa.String(255), nullable=False),
        sa.Column("english", sa.String(255), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_words_id"), "words", ["id"], unique=False)

    op.create_table(
        "groups",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_groups_id"), "groups", ["id"], unique=False)

    # Composite primary key: a word is in a group at most once
    op.create_table(
        "words_groups",
        sa.Column("word_id", sa.Integer(), nullable=False),
        sa.Column("group_id", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["word_id"], ["words.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["group_id"], ["groups.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("word_id", "group_id"),
    )
    op.create_index(op.f("ix_words_groups_word_id"), "words_groups", ["word_id"], unique=False)
    op.create_index(op.f("ix_words_groups_group_id"), "words_groups", ["group_id"], unique=False)

    op.create_table(
        "study_activities",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("thumbnail_url", sa.String(1024), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_study_activities_id"), "study_activities", ["id"], unique=False)

    op.create_table(
        "study_sessions",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("group_id", sa.Integer(), nullable=False),
        sa.Column("study_activity_id", sa.Integer(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["group_id"], ["groups.id"]),
        sa.ForeignKeyConstraint(["study_activity_id"], ["study_activities.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_study_sessions_id"), "study_sessions", ["id"], unique=False)
    op.create_index(
        op.f("ix_study_sessions_group_id"), "study_sessions", ["group_id"], unique=False
    )
    op.create_index(
        op.f("ix_study_sessions_study_activity_id"),
        "study_sessions",
        ["study_activity_id"],
        unique=False,
    )
    op.create_index(
        op.f("ix_study_sessions_created_at"), "study_sessions", ["created_at"], unique=False
    )

    # No foreign key on word_id: review history outlives deleted words
    op.create_table(
        "word_review_items",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("study_session_id", sa.Integer(), nullable=False),
        sa.Column("word_id", sa.Integer(), nullable=False),
        sa.Column("correct", sa.Boolean(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["study_session_id"], ["study_sessions.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_word_review_items_id"), "word_review_items", ["id"], unique=False)
    op.create_index(
        op.f("ix_word_review_items_study_session_id"),
        "word_review_items",
        ["study_session_id"],
        unique=False,
    )
    op.create_index(
        op.f("ix_word_review_items_word_id"), "word_review_items", ["word_id"], unique=False
    )


def downgrade() -> None:
    """Drop the vocabulary and study tables."""
    op.drop_index(op.f("ix_word_review_items_word_id"), table_name="word_review_items")
    op.drop_index(op.f("ix_word_review_items_study_session_id"), table_name="word_review_items")
    op.drop_index(op.f("ix_word_review_items_id"), table_name="word_review_items")
    op.drop_table("word_review_items")

    op.drop_index(op.f("ix_study_sessions_created_at"), table_name="study_sessions")
    op.drop_index(op.f("ix_study_sessions_study_activity_id"), table_name="study_sessions")
    op.drop_index(op.f("ix_study_sessions_group_id"), table_name="study_sessions")
    op.drop_index(op.f("ix_study_sessions_id"), table_name="study_sessions")
    op.drop_table("study_sessions")

    op.drop_index(op.f("ix_study_activities_id"), table_name="study_activities")
    op.drop_table("study_activities")

    op.drop_index(op.f("ix_words_groups_group_id"), table_name="words_groups")
    op.drop_index(op.f("ix_words_groups_word_id"), table_name="words_groups")
    op.drop_table("words_groups")

    op.drop_index(op.f("ix_groups_id"), table_name="groups")
    op.drop_table("groups")

    op.drop_index(op.f("ix_words_id"), table_name="words")
    op.drop_table("words")
