"""Domain layer DI providers."""

from dishka import Scope, provide

from stackit.config import AuthSettings, ContentSettings
from stackit.domain.repository import (
    AnswerRepository,
    CommentRepository,
    NotificationRepository,
    QuestionRepository,
    UserRepository,
    VoteRepository,
)
from stackit.domain.service import (
    AcceptanceService,
    AccessService,
    AnswerService,
    AuthService,
    CommentService,
    ConnectionDirectory,
    JWTService,
    NotificationService,
    QuestionService,
    UserService,
    VoteService,
)
from stackit.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_access_service(
        self, jwt_service: JWTService, user_repository: UserRepository
    ) -> AccessService:
        """Provide access control gate."""
        return AccessService(jwt_service=jwt_service, user_repository=user_repository)

    @provide
    def get_auth_service(
        self,
        user_repository: UserRepository,
        jwt_service: JWTService,
        auth_settings: AuthSettings,
    ) -> AuthService:
        """Provide registration and login domain service."""
        return AuthService(
            user_repository=user_repository,
            jwt_service=jwt_service,
            auth_settings=auth_settings,
        )

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_question_service(
        self, question_repository: QuestionRepository
    ) -> QuestionService:
        """Provide question domain service."""
        return QuestionService(question_repository=question_repository)

    @provide
    def get_answer_service(self, answer_repository: AnswerRepository) -> AnswerService:
        """Provide answer domain service."""
        return AnswerService(answer_repository=answer_repository)

    @provide
    def get_comment_service(
        self, comment_repository: CommentRepository
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(comment_repository=comment_repository)

    @provide
    def get_vote_service(
        self, vote_repository: VoteRepository, content_settings: ContentSettings
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(
            vote_repository=vote_repository, content_settings=content_settings
        )

    @provide
    def get_notification_service(
        self,
        notification_repository: NotificationRepository,
        connection_directory: ConnectionDirectory,
    ) -> NotificationService:
        """Provide notification fan-out service."""
        return NotificationService(
            notification_repository=notification_repository,
            connection_directory=connection_directory,
        )

    @provide
    def get_acceptance_service(
        self,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
        notification_service: NotificationService,
    ) -> AcceptanceService:
        """Provide answer acceptance service."""
        return AcceptanceService(
            question_repository=question_repository,
            answer_repository=answer_repository,
            notification_service=notification_service,
        )
