"""Application layer DI providers."""

from dishka import Scope, provide

from stackit.application.usecase.answer import (
    AcceptAnswerUseCase,
    CreateAnswerUseCase,
    DeleteAnswerUseCase,
    UnacceptAnswerUseCase,
    UpdateAnswerUseCase,
)
from stackit.application.usecase.auth import (
    GetCurrentUserUseCase,
    LoginUseCase,
    RegisterUseCase,
)
from stackit.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    ListCommentsUseCase,
    UpdateCommentUseCase,
)
from stackit.application.usecase.notification import (
    ClearNotificationsUseCase,
    DeleteNotificationUseCase,
    ListNotificationsUseCase,
    MarkAllReadUseCase,
    MarkNotificationUseCase,
    UnreadCountUseCase,
)
from stackit.application.usecase.question import (
    CreateQuestionUseCase,
    DeleteQuestionUseCase,
    GetQuestionUseCase,
    ListQuestionsUseCase,
    PopularTagsUseCase,
    UpdateQuestionUseCase,
)
from stackit.application.usecase.user import (
    BanUserUseCase,
    ChangeRoleUseCase,
    GetUserProfileUseCase,
    ListUserAnswersUseCase,
    ListUserQuestionsUseCase,
    ListUsersUseCase,
    SearchUsersUseCase,
    StatsOverviewUseCase,
    UnbanUserUseCase,
    UpdateProfileUseCase,
)
from stackit.application.usecase.vote import CastVoteUseCase
from stackit.domain.service import AccessService, AuthService
from stackit.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed.

    Use cases are REQUEST-scoped. Most are built by dishka straight from their
    constructor signatures.
    """

    scope = Scope.REQUEST

    # Auth use cases
    @provide
    def get_register_use_case(self, auth_service: AuthService) -> RegisterUseCase:
        """Provide register use case."""
        return RegisterUseCase(auth_service=auth_service)

    @provide
    def get_login_use_case(self, auth_service: AuthService) -> LoginUseCase:
        """Provide login use case."""
        return LoginUseCase(auth_service=auth_service)

    @provide
    def get_current_user_use_case(
        self, access_service: AccessService
    ) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(access_service=access_service)

    # Question use cases
    list_questions = provide(ListQuestionsUseCase)
    get_question = provide(GetQuestionUseCase)
    create_question = provide(CreateQuestionUseCase)
    update_question = provide(UpdateQuestionUseCase)
    delete_question = provide(DeleteQuestionUseCase)
    popular_tags = provide(PopularTagsUseCase)

    # Answer use cases
    create_answer = provide(CreateAnswerUseCase)
    update_answer = provide(UpdateAnswerUseCase)
    delete_answer = provide(DeleteAnswerUseCase)
    accept_answer = provide(AcceptAnswerUseCase)
    unaccept_answer = provide(UnacceptAnswerUseCase)

    # Comment use cases
    create_comment = provide(CreateCommentUseCase)
    list_comments = provide(ListCommentsUseCase)
    update_comment = provide(UpdateCommentUseCase)
    delete_comment = provide(DeleteCommentUseCase)

    # Vote use cases
    cast_vote = provide(CastVoteUseCase)

    # Notification use cases
    list_notifications = provide(ListNotificationsUseCase)
    unread_count = provide(UnreadCountUseCase)
    mark_notification = provide(MarkNotificationUseCase)
    mark_all_read = provide(MarkAllReadUseCase)
    delete_notification = provide(DeleteNotificationUseCase)
    clear_notifications = provide(ClearNotificationsUseCase)

    # User use cases
    get_user_profile = provide(GetUserProfileUseCase)
    update_profile = provide(UpdateProfileUseCase)
    list_user_questions = provide(ListUserQuestionsUseCase)
    list_user_answers = provide(ListUserAnswersUseCase)
    search_users = provide(SearchUsersUseCase)

    # Admin use cases
    list_users = provide(ListUsersUseCase)
    ban_user = provide(BanUserUseCase)
    unban_user = provide(UnbanUserUseCase)
    change_role = provide(ChangeRoleUseCase)
    stats_overview = provide(StatsOverviewUseCase)
