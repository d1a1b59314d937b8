"""Domain services."""

from .acceptance_service import AcceptanceService
from .access_service import AccessService
from .answer_service import AnswerService
from .auth_service import AuthService
from .base import Service
from .comment_service import CommentService
from .jwt_service import JWTService
from .notification_service import (
    Connection,
    ConnectionDirectory,
    NotificationService,
)
from .question_service import QuestionService
from .user_service import UserService
from .vote_service import VoteService, VoteSummary

__all__ = [
    "AcceptanceService",
    "AccessService",
    "AnswerService",
    "AuthService",
    "CommentService",
    "Connection",
    "ConnectionDirectory",
    "JWTService",
    "NotificationService",
    "QuestionService",
    "Service",
    "UserService",
    "VoteService",
    "VoteSummary",
]
