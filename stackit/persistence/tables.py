"""SQLAlchemy table definitions for StackIt.

These table definitions are used by the Core queries in the repositories.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
    func,
    literal_column,
)
from sqlalchemy.dialects.postgresql import ARRAY, JSONB, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()


def content_columns() -> list[Column]:
    """Columns shared by questions, answers and comments.

    Ownership, edit history and the soft-delete marker. Returns fresh
    Column objects on every call since a Column belongs to one table.
    """
    return [
        Column(
            "author_id",
            UUID,
            ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
        ),
        Column("is_edited", Boolean, nullable=False, server_default="false"),
        Column("edit_history", JSONB, nullable=False, server_default="[]"),
        Column("is_deleted", Boolean, nullable=False, server_default="false"),
        Column(
            "deleted_by",
            UUID,
            ForeignKey("users.id", ondelete="SET NULL"),
            nullable=True,
        ),
        Column("deleted_at", TIMESTAMP(timezone=True), nullable=True),
        Column("delete_reason", Text, nullable=True),
        Column(
            "created_at",
            TIMESTAMP(timezone=True),
            nullable=False,
            server_default="NOW()",
        ),
        Column(
            "updated_at",
            TIMESTAMP(timezone=True),
            nullable=False,
            server_default="NOW()",
        ),
    ]


# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("username", String(30), nullable=False),
    Column("email", String(255), nullable=False),
    Column("password_hash", String(255), nullable=False),
    Column("role", String(20), nullable=False, server_default="member"),
    Column("avatar_url", Text, nullable=True),
    Column("bio", String(500), nullable=True),
    Column("reputation", Integer, nullable=False, server_default="0"),
    Column("is_banned", Boolean, nullable=False, server_default="false"),
    Column("ban_reason", Text, nullable=True),
    Column(
        "last_seen", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("role IN ('guest', 'member', 'admin')", name="user_role_valid"),
)

# Usernames are unique regardless of case
Index("uq_users_username_lower", func.lower(users_table.c.username), unique=True)
Index("uq_users_email", users_table.c.email, unique=True)
Index("idx_users_created_at", users_table.c.created_at)

# ============================================================================
# QUESTIONS TABLE
# ============================================================================
questions_table = Table(
    "questions",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("title", String(300), nullable=False),
    Column("description", Text, nullable=False),
    Column("tags", ARRAY(String(20)), nullable=False, server_default="{}"),
    Column("views", Integer, nullable=False, server_default="0"),
    Column("is_answered", Boolean, nullable=False, server_default="false"),
    # Weak reference: answers reference questions, not the other way round
    Column("accepted_answer_id", UUID, nullable=True),
    Column("status", String(20), nullable=False, server_default="open"),
    Column("bounty_amount", Integer, nullable=True),
    Column("bounty_expires_at", TIMESTAMP(timezone=True), nullable=True),
    Column("bounty_offered_by", UUID, nullable=True),
    *content_columns(),
    CheckConstraint("views >= 0", name="views_non_negative"),
    CheckConstraint(
        "is_answered = (accepted_answer_id IS NOT NULL)",
        name="answered_matches_accepted",
    ),
    CheckConstraint(
        "status IN ('open', 'closed', 'duplicate', 'off-topic')",
        name="question_status_valid",
    ),
)

Index("idx_questions_author_id", questions_table.c.author_id)
Index("idx_questions_created_at", questions_table.c.created_at)
Index("idx_questions_tags", questions_table.c.tags, postgresql_using="gin")


def question_search_vector():
    """Full text search document of a question: title and description."""
    return func.to_tsvector(
        literal_column("'english'"),
        questions_table.c.title + " " + questions_table.c.description,
    )


Index("idx_questions_search", question_search_vector(), postgresql_using="gin")

# ============================================================================
# ANSWERS TABLE
# ============================================================================
answers_table = Table(
    "answers",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "question_id",
        UUID,
        ForeignKey("questions.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("content", Text, nullable=False),
    Column("is_accepted", Boolean, nullable=False, server_default="false"),
    Column("accepted_at", TIMESTAMP(timezone=True), nullable=True),
    Column(
        "accepted_by", UUID, ForeignKey("users.id", ondelete="SET NULL"), nullable=True
    ),
    *content_columns(),
)

Index("idx_answers_question_id", answers_table.c.question_id)
Index("idx_answers_author_id", answers_table.c.author_id)
# One live answer per author per question
Index(
    "uq_answers_question_author_live",
    answers_table.c.question_id,
    answers_table.c.author_id,
    unique=True,
    postgresql_where=answers_table.c.is_deleted.is_(False),
)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("content", String(500), nullable=False),
    Column(
        "question_id",
        UUID,
        ForeignKey("questions.id", ondelete="CASCADE"),
        nullable=True,
    ),
    Column(
        "answer_id", UUID, ForeignKey("answers.id", ondelete="CASCADE"), nullable=True
    ),
    Column(
        "parent_comment_id",
        UUID,
        ForeignKey("comments.id", ondelete="SET NULL"),
        nullable=True,
    ),
    *content_columns(),
    CheckConstraint(
        "(question_id IS NULL) <> (answer_id IS NULL)",
        name="comment_single_target",
    ),
)

Index("idx_comments_question_id", comments_table.c.question_id)
Index("idx_comments_answer_id", comments_table.c.answer_id)

# ============================================================================
# VOTES TABLE
# ============================================================================
votes_table = Table(
    "votes",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column("votable_type", String(20), nullable=False),
    Column("votable_id", UUID, nullable=False),
    Column("direction", String(4), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint(
        "user_id", "votable_type", "votable_id", name="uq_votes_user_votable"
    ),
    CheckConstraint(
        "votable_type IN ('question', 'answer', 'comment')",
        name="votable_type_valid",
    ),
    CheckConstraint("direction IN ('up', 'down')", name="vote_direction_valid"),
)

Index("idx_votes_votable", votes_table.c.votable_type, votes_table.c.votable_id)

# ============================================================================
# NOTIFICATIONS TABLE
# ============================================================================
notifications_table = Table(
    "notifications",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "recipient_id",
        UUID,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "sender_id", UUID, ForeignKey("users.id", ondelete="SET NULL"), nullable=True
    ),
    Column("type", String(30), nullable=False),
    Column("title", String(100), nullable=False),
    Column("message", String(500), nullable=False),
    Column("question_id", UUID, nullable=True),
    Column("answer_id", UUID, nullable=True),
    Column("comment_id", UUID, nullable=True),
    Column("is_read", Boolean, nullable=False, server_default="false"),
    Column("read_at", TIMESTAMP(timezone=True), nullable=True),
    Column("meta", JSONB, nullable=False, server_default="{}"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index(
    "idx_notifications_recipient_created",
    notifications_table.c.recipient_id,
    notifications_table.c.created_at,
)
Index(
    "idx_notifications_recipient_unread",
    notifications_table.c.recipient_id,
    postgresql_where=notifications_table.c.is_read.is_(False),
)
