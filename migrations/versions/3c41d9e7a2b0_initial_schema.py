"""initial_schema

Create the StackIt schema:
- Users (email and password accounts, roles, bans)
- Questions (tags, views, acceptance state, full text search)
- Answers (one live answer per author and question)
- Comments (on a question or an answer, optionally threaded)
- Votes (one up or down entry per user and item)
- Notifications

Revision ID: 3c41d9e7a2b0
Revises:
Create Date: 2026-10-12 09:14:52.318204

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c41d9e7a2b0"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _id_column() -> sa.Column:
    return sa.Column(
        "id",
        sa.UUID(),
        server_default=sa.text("uuid_generate_v4()"),
        nullable=False,
    )


def _timestamp_column(name: str) -> sa.Column:
    return sa.Column(
        name,
        sa.TIMESTAMP(timezone=True),
        nullable=False,
        server_default=sa.text("NOW()"),
    )


def _content_columns() -> list:
    """Ownership, edit history and soft-delete columns of content tables."""
    return [
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column("is_edited", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column(
            "edit_history",
            postgresql.JSONB(),
            nullable=False,
            server_default=sa.text("'[]'::jsonb"),
        ),
        sa.Column("is_deleted", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("deleted_by", sa.UUID(), nullable=True),
        sa.Column("deleted_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.Column("delete_reason", sa.Text(), nullable=True),
        _timestamp_column("created_at"),
        _timestamp_column("updated_at"),
        sa.ForeignKeyConstraint(["author_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["deleted_by"], ["users.id"], ondelete="SET NULL"),
    ]


def upgrade() -> None:
    """Upgrade schema."""
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    # ========================================================================
    # USERS table
    # ========================================================================
    op.create_table(
        "users",
        _id_column(),
        sa.Column("username", sa.String(30), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("password_hash", sa.String(255), nullable=False),
        sa.Column("role", sa.String(20), nullable=False, server_default="member"),
        sa.Column("avatar_url", sa.Text(), nullable=True),
        sa.Column("bio", sa.String(500), nullable=True),
        sa.Column("reputation", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("is_banned", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("ban_reason", sa.Text(), nullable=True),
        _timestamp_column("last_seen"),
        _timestamp_column("created_at"),
        _timestamp_column("updated_at"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "role IN ('guest', 'member', 'admin')", name="user_role_valid"
        ),
    )
    op.execute("CREATE UNIQUE INDEX uq_users_username_lower ON users (lower(username))")
    op.create_index("uq_users_email", "users", ["email"], unique=True)
    op.create_index("idx_users_created_at", "users", ["created_at"])

    # ========================================================================
    # QUESTIONS table
    # ========================================================================
    op.create_table(
        "questions",
        _id_column(),
        sa.Column("title", sa.String(300), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column(
            "tags",
            postgresql.ARRAY(sa.String(20)),
            nullable=False,
            server_default="{}",
        ),
        sa.Column("views", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("is_answered", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("accepted_answer_id", sa.UUID(), nullable=True),
        sa.Column("status", sa.String(20), nullable=False, server_default="open"),
        sa.Column("bounty_amount", sa.Integer(), nullable=True),
        sa.Column("bounty_expires_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.Column("bounty_offered_by", sa.UUID(), nullable=True),
        *_content_columns(),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("views >= 0", name="views_non_negative"),
        sa.CheckConstraint(
            "is_answered = (accepted_answer_id IS NOT NULL)",
            name="answered_matches_accepted",
        ),
        sa.CheckConstraint(
            "status IN ('open', 'closed', 'duplicate', 'off-topic')",
            name="question_status_valid",
        ),
    )
    op.create_index("idx_questions_author_id", "questions", ["author_id"])
    op.create_index("idx_questions_created_at", "questions", ["created_at"])
    op.create_index(
        "idx_questions_tags", "questions", ["tags"], postgresql_using="gin"
    )
    op.execute(
        """
        CREATE INDEX idx_questions_search ON questions
        USING gin (to_tsvector('english', title || ' ' || description))
        """
    )

    # ========================================================================
    # ANSWERS table
    # ========================================================================
    op.create_table(
        "answers",
        _id_column(),
        sa.Column("question_id", sa.UUID(), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("is_accepted", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("accepted_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.Column("accepted_by", sa.UUID(), nullable=True),
        *_content_columns(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(
            ["question_id"], ["questions.id"], ondelete="CASCADE"
        ),
        sa.ForeignKeyConstraint(["accepted_by"], ["users.id"], ondelete="SET NULL"),
    )
    op.create_index("idx_answers_question_id", "answers", ["question_id"])
    op.create_index("idx_answers_author_id", "answers", ["author_id"])
    op.create_index(
        "uq_answers_question_author_live",
        "answers",
        ["question_id", "author_id"],
        unique=True,
        postgresql_where=sa.text("NOT is_deleted"),
    )

    # ========================================================================
    # COMMENTS table
    # ========================================================================
    op.create_table(
        "comments",
        _id_column(),
        sa.Column("content", sa.String(500), nullable=False),
        sa.Column("question_id", sa.UUID(), nullable=True),
        sa.Column("answer_id", sa.UUID(), nullable=True),
        sa.Column("parent_comment_id", sa.UUID(), nullable=True),
        *_content_columns(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(
            ["question_id"], ["questions.id"], ondelete="CASCADE"
        ),
        sa.ForeignKeyConstraint(["answer_id"], ["answers.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(
            ["parent_comment_id"], ["comments.id"], ondelete="SET NULL"
        ),
        sa.CheckConstraint(
            "(question_id IS NULL) <> (answer_id IS NULL)",
            name="comment_single_target",
        ),
    )
    op.create_index("idx_comments_question_id", "comments", ["question_id"])
    op.create_index("idx_comments_answer_id", "comments", ["answer_id"])

    # ========================================================================
    # VOTES table
    # ========================================================================
    op.create_table(
        "votes",
        _id_column(),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("votable_type", sa.String(20), nullable=False),
        sa.Column("votable_id", sa.UUID(), nullable=False),
        sa.Column("direction", sa.String(4), nullable=False),
        _timestamp_column("created_at"),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.UniqueConstraint(
            "user_id", "votable_type", "votable_id", name="uq_votes_user_votable"
        ),
        sa.CheckConstraint(
            "votable_type IN ('question', 'answer', 'comment')",
            name="votable_type_valid",
        ),
        sa.CheckConstraint("direction IN ('up', 'down')", name="vote_direction_valid"),
    )
    op.create_index("idx_votes_votable", "votes", ["votable_type", "votable_id"])

    # ========================================================================
    # NOTIFICATIONS table
    # ========================================================================
    op.create_table(
        "notifications",
        _id_column(),
        sa.Column("recipient_id", sa.UUID(), nullable=False),
        sa.Column("sender_id", sa.UUID(), nullable=True),
        sa.Column("type", sa.String(30), nullable=False),
        sa.Column("title", sa.String(100), nullable=False),
        sa.Column("message", sa.String(500), nullable=False),
        sa.Column("question_id", sa.UUID(), nullable=True),
        sa.Column("answer_id", sa.UUID(), nullable=True),
        sa.Column("comment_id", sa.UUID(), nullable=True),
        sa.Column("is_read", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("read_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.Column(
            "meta",
            postgresql.JSONB(),
            nullable=False,
            server_default=sa.text("'{}'::jsonb"),
        ),
        _timestamp_column("created_at"),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["recipient_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["sender_id"], ["users.id"], ondelete="SET NULL"),
    )
    op.create_index(
        "idx_notifications_recipient_created",
        "notifications",
        ["recipient_id", "created_at"],
    )
    op.create_index(
        "idx_notifications_recipient_unread",
        "notifications",
        ["recipient_id"],
        postgresql_where=sa.text("NOT is_read"),
    )


def downgrade() -> None:
    """Downgrade schema."""
    # Drop tables (in reverse order of dependencies)
    op.drop_table("notifications")
    op.drop_table("votes")
    op.drop_table("comments")
    op.drop_table("answers")
    op.drop_table("questions")
    op.drop_table("users")
