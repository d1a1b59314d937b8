"""Response models shared by the use cases.

API payloads use camelCase keys. Use cases build these models from domain
records together with the vote summaries and author lookups they need.
"""

import math
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from stackit.domain.model import Answer, Comment, Notification, Question, User
from stackit.domain.model.common import ContentRecord
from stackit.domain.service import VoteSummary
from stackit.domain.value import UserId


class CamelModel(BaseModel):
    """Base for payloads exchanged with API clients."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Pagination(CamelModel):
    """Page window of a paginated listing."""

    current_page: int
    total_pages: int
    has_next_page: bool
    has_prev_page: bool


class QuestionPagination(Pagination):
    total_questions: int


class AnswerPagination(Pagination):
    total_answers: int


class UserPagination(Pagination):
    total_users: int


class NotificationPagination(Pagination):
    total_notifications: int


def page_window(page: int, limit: int, total: int) -> dict[str, Any]:
    """Compute the shared pagination fields for a 1-based page."""
    total_pages = math.ceil(total / limit) if limit else 0
    return {
        "current_page": page,
        "total_pages": total_pages,
        "has_next_page": page < total_pages,
        "has_prev_page": page > 1,
    }


def page_offset(page: int, limit: int) -> int:
    """Row offset of a 1-based page."""
    return (page - 1) * limit


class UserSummary(CamelModel):
    """Author information embedded in content payloads."""

    id: str
    username: str
    avatar_url: str | None
    reputation: int

    @classmethod
    def from_user(cls, user: User | None) -> "UserSummary | None":
        if user is None:
            return None
        return cls(
            id=str(user.id),
            username=user.username.root,
            avatar_url=user.avatar_url,
            reputation=user.reputation,
        )


class UserProfile(CamelModel):
    """Public profile of a user."""

    id: str
    username: str
    role: str
    avatar_url: str | None
    bio: str | None
    reputation: int
    last_seen: datetime
    created_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserProfile":
        return cls(
            id=str(user.id),
            username=user.username.root,
            role=user.role.value,
            avatar_url=user.avatar_url,
            bio=user.bio,
            reputation=user.reputation,
            last_seen=user.last_seen,
            created_at=user.created_at,
        )


class AccountResponse(UserProfile):
    """Profile including private fields, for the owner and admins."""

    email: str
    is_banned: bool
    ban_reason: str | None

    @classmethod
    def from_user(cls, user: User) -> "AccountResponse":
        return cls(
            **UserProfile.from_user(user).model_dump(),
            email=user.email.root,
            is_banned=user.is_banned,
            ban_reason=user.ban_reason,
        )


class EditRecordResponse(CamelModel):
    editor_id: str
    edited_at: datetime
    previous_content: dict[str, Any]
    reason: str | None


class VoteState(CamelModel):
    """Vote ledger fields embedded in content payloads."""

    vote_count: int = 0
    upvotes: int = 0
    downvotes: int = 0
    user_vote: str | None = None


def vote_fields(summary: VoteSummary | None) -> dict[str, Any]:
    """Flatten a vote summary into payload fields."""
    if summary is None:
        return VoteState().model_dump()
    return VoteState(
        vote_count=summary.vote_count,
        upvotes=summary.upvotes,
        downvotes=summary.downvotes,
        user_vote=summary.user_vote.value if summary.user_vote else None,
    ).model_dump()


def content_fields(record: ContentRecord, authors: dict[UserId, User]) -> dict:
    """Payload fields shared by questions, answers and comments."""
    return {
        "author": UserSummary.from_user(authors.get(record.author_id)),
        "is_edited": record.is_edited,
        "edit_history": [
            EditRecordResponse(
                editor_id=str(entry.editor_id),
                edited_at=entry.edited_at,
                previous_content=entry.previous_content,
                reason=entry.reason,
            )
            for entry in record.edit_history
        ],
        "created_at": record.created_at,
        "updated_at": record.updated_at,
    }


class ContentResponse(VoteState):
    author: UserSummary | None
    is_edited: bool
    edit_history: list[EditRecordResponse]
    created_at: datetime
    updated_at: datetime


class AnswerResponse(ContentResponse):
    """Answer payload."""

    id: str
    question_id: str
    content: str
    is_accepted: bool
    accepted_at: datetime | None

    @classmethod
    def build(
        cls,
        answer: Answer,
        authors: dict[UserId, User],
        summary: VoteSummary | None = None,
    ) -> "AnswerResponse":
        return cls(
            id=str(answer.id),
            question_id=str(answer.question_id),
            content=answer.content,
            is_accepted=answer.is_accepted,
            accepted_at=answer.accepted_at,
            **content_fields(answer, authors),
            **vote_fields(summary),
        )


class QuestionResponse(ContentResponse):
    """Question payload, with its answers on the detail view."""

    id: str
    title: str
    description: str
    tags: list[str]
    views: int
    is_answered: bool
    accepted_answer_id: str | None
    status: str
    answers: list[AnswerResponse] | None = None

    @classmethod
    def build(
        cls,
        question: Question,
        authors: dict[UserId, User],
        summary: VoteSummary | None = None,
        answers: list[AnswerResponse] | None = None,
    ) -> "QuestionResponse":
        return cls(
            id=str(question.id),
            title=question.title,
            description=question.description,
            tags=[tag.root for tag in question.tags],
            views=question.views,
            is_answered=question.is_answered,
            accepted_answer_id=(
                str(question.accepted_answer_id)
                if question.accepted_answer_id
                else None
            ),
            status=question.status.value,
            answers=answers,
            **content_fields(question, authors),
            **vote_fields(summary),
        )


class CommentResponse(ContentResponse):
    """Comment payload."""

    id: str
    content: str
    question_id: str | None
    answer_id: str | None
    parent_comment_id: str | None

    @classmethod
    def build(
        cls,
        comment: Comment,
        authors: dict[UserId, User],
        summary: VoteSummary | None = None,
    ) -> "CommentResponse":
        return cls(
            id=str(comment.id),
            content=comment.content,
            question_id=str(comment.question_id) if comment.question_id else None,
            answer_id=str(comment.answer_id) if comment.answer_id else None,
            parent_comment_id=(
                str(comment.parent_comment_id) if comment.parent_comment_id else None
            ),
            **content_fields(comment, authors),
            **vote_fields(summary),
        )


class NotificationResponse(CamelModel):
    """Notification payload."""

    id: str
    type: str
    title: str
    message: str
    sender: UserSummary | None
    question_id: str | None
    answer_id: str | None
    comment_id: str | None
    is_read: bool
    read_at: datetime | None
    metadata: dict[str, Any]
    created_at: datetime

    @classmethod
    def build(
        cls, notification: Notification, senders: dict[UserId, User] | None = None
    ) -> "NotificationResponse":
        sender = None
        if senders and notification.sender_id:
            sender = UserSummary.from_user(senders.get(notification.sender_id))
        return cls(
            id=str(notification.id),
            type=notification.type.value,
            title=notification.title,
            message=notification.message,
            sender=sender,
            question_id=_str(notification.question_id),
            answer_id=_str(notification.answer_id),
            comment_id=_str(notification.comment_id),
            is_read=notification.is_read,
            read_at=notification.read_at,
            metadata=notification.metadata,
            created_at=notification.created_at,
        )


class MessageResponse(CamelModel):
    """Plain acknowledgement."""

    message: str


def _str(value: Any) -> str | None:
    return str(value) if value is not None else None
