"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict, Optional
from uuid import UUID

from stackit.domain.model import Answer, Comment, Notification, Question, User, Vote
from stackit.domain.model.common import ContentRecord
from stackit.domain.value import (
    AnswerId,
    Bounty,
    CommentId,
    EditRecord,
    EmailAddress,
    NotificationId,
    NotificationType,
    QuestionId,
    QuestionStatus,
    SoftDeletion,
    TagName,
    UserId,
    UserRole,
    Username,
    VotableType,
    VoteDirection,
    VoteId,
)


def _uuid(value: Any) -> Optional[UUID]:
    """Normalize a UUID column value (drivers may return str or UUID)."""
    if value is None:
        return None
    return UUID(value) if isinstance(value, str) else value


def _content_from_row(row: Dict[str, Any]) -> Dict[str, Any]:
    """Extract the shared content envelope fields from a row."""
    deletion = None
    if row["is_deleted"]:
        deletion = SoftDeletion(
            deleted_by=UserId(_uuid(row["deleted_by"])),
            deleted_at=row["deleted_at"],
            reason=row.get("delete_reason") or "No reason provided",
        )
    return {
        "author_id": UserId(_uuid(row["author_id"])),
        "is_edited": row["is_edited"],
        "edit_history": [
            EditRecord.model_validate(entry) for entry in row["edit_history"] or []
        ],
        "deletion": deletion,
        "created_at": row["created_at"],
        "updated_at": row["updated_at"],
    }


def _content_to_dict(record: ContentRecord) -> Dict[str, Any]:
    """Flatten the shared content envelope into column values."""
    deletion = record.deletion
    return {
        "author_id": record.author_id,
        "is_edited": record.is_edited,
        "edit_history": [
            entry.model_dump(mode="json") for entry in record.edit_history
        ],
        "is_deleted": deletion is not None,
        "deleted_by": deletion.deleted_by if deletion else None,
        "deleted_at": deletion.deleted_at if deletion else None,
        "delete_reason": deletion.reason if deletion else None,
        "created_at": record.created_at,
        "updated_at": record.updated_at,
    }


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        username=Username(row["username"]),
        email=EmailAddress(row["email"]),
        password_hash=row["password_hash"],
        role=UserRole(row["role"]),
        avatar_url=row.get("avatar_url"),
        bio=row.get("bio"),
        reputation=row["reputation"],
        is_banned=row["is_banned"],
        ban_reason=row.get("ban_reason"),
        last_seen=row["last_seen"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict.

    Args:
        user: User domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return {
        **user.model_dump(exclude={"username", "email", "role"}),
        "username": user.username.root,
        "email": user.email.root,
        "role": user.role.value,
    }


def row_to_question(row: Dict[str, Any]) -> Question:
    """Convert database row to Question domain model.

    Args:
        row: Database row as dict

    Returns:
        Question domain model
    """
    bounty = None
    if row.get("bounty_amount") is not None:
        offered_by = _uuid(row.get("bounty_offered_by"))
        bounty = Bounty(
            amount=row["bounty_amount"],
            expires_at=row.get("bounty_expires_at"),
            offered_by=UserId(offered_by) if offered_by else None,
        )
    accepted_answer_id = _uuid(row.get("accepted_answer_id"))
    return Question(
        id=QuestionId(_uuid(row["id"])),
        title=row["title"],
        description=row["description"],
        tags=[TagName(tag) for tag in row["tags"]],
        views=row["views"],
        is_answered=row["is_answered"],
        accepted_answer_id=AnswerId(accepted_answer_id) if accepted_answer_id else None,
        status=QuestionStatus(row["status"]),
        bounty=bounty,
        **_content_from_row(row),
    )


def question_to_dict(question: Question) -> Dict[str, Any]:
    """Convert Question domain model to database dict."""
    bounty = question.bounty
    return {
        "id": question.id,
        "title": question.title,
        "description": question.description,
        "tags": [tag.root for tag in question.tags],
        "views": question.views,
        "is_answered": question.is_answered,
        "accepted_answer_id": question.accepted_answer_id,
        "status": question.status.value,
        "bounty_amount": bounty.amount if bounty else None,
        "bounty_expires_at": bounty.expires_at if bounty else None,
        "bounty_offered_by": bounty.offered_by if bounty else None,
        **_content_to_dict(question),
    }


def row_to_answer(row: Dict[str, Any]) -> Answer:
    """Convert database row to Answer domain model."""
    accepted_by = _uuid(row.get("accepted_by"))
    return Answer(
        id=AnswerId(_uuid(row["id"])),
        question_id=QuestionId(_uuid(row["question_id"])),
        content=row["content"],
        is_accepted=row["is_accepted"],
        accepted_at=row.get("accepted_at"),
        accepted_by=UserId(accepted_by) if accepted_by else None,
        **_content_from_row(row),
    )


def answer_to_dict(answer: Answer) -> Dict[str, Any]:
    """Convert Answer domain model to database dict."""
    return {
        "id": answer.id,
        "question_id": answer.question_id,
        "content": answer.content,
        "is_accepted": answer.is_accepted,
        "accepted_at": answer.accepted_at,
        "accepted_by": answer.accepted_by,
        **_content_to_dict(answer),
    }


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model."""
    question_id = _uuid(row.get("question_id"))
    answer_id = _uuid(row.get("answer_id"))
    parent_id = _uuid(row.get("parent_comment_id"))
    return Comment(
        id=CommentId(_uuid(row["id"])),
        content=row["content"],
        question_id=QuestionId(question_id) if question_id else None,
        answer_id=AnswerId(answer_id) if answer_id else None,
        parent_comment_id=CommentId(parent_id) if parent_id else None,
        **_content_from_row(row),
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict."""
    return {
        "id": comment.id,
        "content": comment.content,
        "question_id": comment.question_id,
        "answer_id": comment.answer_id,
        "parent_comment_id": comment.parent_comment_id,
        **_content_to_dict(comment),
    }


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model.

    Args:
        row: Database row as dict

    Returns:
        Vote domain model
    """
    return Vote(
        id=VoteId(_uuid(row["id"])),
        user_id=UserId(_uuid(row["user_id"])),
        votable_type=VotableType(row["votable_type"]),
        votable_id=_uuid(row["votable_id"]),
        direction=VoteDirection(row["direction"]),
        created_at=row["created_at"],
    )


def row_to_notification(row: Dict[str, Any]) -> Notification:
    """Convert database row to Notification domain model."""
    sender_id = _uuid(row.get("sender_id"))
    question_id = _uuid(row.get("question_id"))
    answer_id = _uuid(row.get("answer_id"))
    comment_id = _uuid(row.get("comment_id"))
    return Notification(
        id=NotificationId(_uuid(row["id"])),
        recipient_id=UserId(_uuid(row["recipient_id"])),
        sender_id=UserId(sender_id) if sender_id else None,
        type=NotificationType(row["type"]),
        title=row["title"],
        message=row["message"],
        question_id=QuestionId(question_id) if question_id else None,
        answer_id=AnswerId(answer_id) if answer_id else None,
        comment_id=CommentId(comment_id) if comment_id else None,
        is_read=row["is_read"],
        read_at=row.get("read_at"),
        metadata=row.get("meta") or {},
        created_at=row["created_at"],
    )


def notification_to_dict(notification: Notification) -> Dict[str, Any]:
    """Convert Notification domain model to database dict."""
    return {
        **notification.model_dump(exclude={"type", "metadata"}),
        "type": notification.type.value,
        "meta": notification.metadata,
    }
