"""Use case providers."""

from dishka import Scope, provide

from atelier.application.usecase.account import (
    CreateAccountUseCase,
    GetAccountStatsUseCase,
    GetAccountUseCase,
)
from atelier.application.usecase.comment import AddCommentUseCase, GetCommentsUseCase
from atelier.application.usecase.content import (
    GetContentStatsUseCase,
    RegisterContentUseCase,
)
from atelier.application.usecase.follow import (
    ListConnectionsUseCase,
    ToggleFollowUseCase,
)
from atelier.application.usecase.like import GetLikeStatesUseCase, ToggleLikeUseCase
from atelier.application.usecase.notification import (
    GetUnreadCountUseCase,
    ListNotificationsUseCase,
    MarkReadUseCase,
    NotifyUseCase,
)
from atelier.config import NotificationSettings
from atelier.domain.service import (
    AccountService,
    CommentService,
    ContentService,
    FollowService,
    LedgerService,
    NotificationService,
)
from atelier.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Use cases, one instance per request."""

    # Account use cases
    @provide(scope=Scope.REQUEST)
    def get_create_account_use_case(
        self, account_service: AccountService
    ) -> CreateAccountUseCase:
        """Provide create account use case."""
        return CreateAccountUseCase(account_service=account_service)

    @provide(scope=Scope.REQUEST)
    def get_get_account_use_case(
        self, account_service: AccountService
    ) -> GetAccountUseCase:
        """Provide get account use case."""
        return GetAccountUseCase(account_service=account_service)

    @provide(scope=Scope.REQUEST)
    def get_get_account_stats_use_case(
        self, account_service: AccountService
    ) -> GetAccountStatsUseCase:
        """Provide get account stats use case."""
        return GetAccountStatsUseCase(account_service=account_service)

    # Content use cases
    @provide(scope=Scope.REQUEST)
    def get_register_content_use_case(
        self, content_service: ContentService, account_service: AccountService
    ) -> RegisterContentUseCase:
        """Provide register content use case."""
        return RegisterContentUseCase(
            content_service=content_service, account_service=account_service
        )

    @provide(scope=Scope.REQUEST)
    def get_get_content_stats_use_case(
        self, content_service: ContentService
    ) -> GetContentStatsUseCase:
        """Provide get content stats use case."""
        return GetContentStatsUseCase(content_service=content_service)

    # Like use cases
    @provide(scope=Scope.REQUEST)
    def get_toggle_like_use_case(
        self,
        ledger_service: LedgerService,
        content_service: ContentService,
        account_service: AccountService,
    ) -> ToggleLikeUseCase:
        """Provide toggle like use case."""
        return ToggleLikeUseCase(
            ledger_service=ledger_service,
            content_service=content_service,
            account_service=account_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_like_states_use_case(
        self, ledger_service: LedgerService
    ) -> GetLikeStatesUseCase:
        """Provide get like states use case."""
        return GetLikeStatesUseCase(ledger_service=ledger_service)

    # Follow use cases
    @provide(scope=Scope.REQUEST)
    def get_toggle_follow_use_case(
        self, follow_service: FollowService
    ) -> ToggleFollowUseCase:
        """Provide toggle follow use case."""
        return ToggleFollowUseCase(follow_service=follow_service)

    @provide(scope=Scope.REQUEST)
    def get_list_connections_use_case(
        self, follow_service: FollowService, account_service: AccountService
    ) -> ListConnectionsUseCase:
        """Provide list connections use case."""
        return ListConnectionsUseCase(
            follow_service=follow_service, account_service=account_service
        )

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_add_comment_use_case(
        self,
        comment_service: CommentService,
        content_service: ContentService,
        account_service: AccountService,
    ) -> AddCommentUseCase:
        """Provide add comment use case."""
        return AddCommentUseCase(
            comment_service=comment_service,
            content_service=content_service,
            account_service=account_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_comments_use_case(
        self,
        comment_service: CommentService,
        content_service: ContentService,
        account_service: AccountService,
    ) -> GetCommentsUseCase:
        """Provide get comments use case."""
        return GetCommentsUseCase(
            comment_service=comment_service,
            content_service=content_service,
            account_service=account_service,
        )

    # Notification use cases
    @provide(scope=Scope.REQUEST)
    def get_notify_use_case(
        self, notification_service: NotificationService
    ) -> NotifyUseCase:
        """Provide notify use case."""
        return NotifyUseCase(notification_service=notification_service)

    @provide(scope=Scope.REQUEST)
    def get_mark_read_use_case(
        self, notification_service: NotificationService
    ) -> MarkReadUseCase:
        """Provide mark read use case."""
        return MarkReadUseCase(notification_service=notification_service)

    @provide(scope=Scope.REQUEST)
    def get_get_unread_count_use_case(
        self,
        notification_service: NotificationService,
        notification_settings: NotificationSettings,
    ) -> GetUnreadCountUseCase:
        """Provide get unread count use case."""
        return GetUnreadCountUseCase(
            notification_service=notification_service,
            notification_settings=notification_settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_list_notifications_use_case(
        self,
        notification_service: NotificationService,
        account_service: AccountService,
    ) -> ListNotificationsUseCase:
        """Provide list notifications use case."""
        return ListNotificationsUseCase(
            notification_service=notification_service,
            account_service=account_service,
        )
