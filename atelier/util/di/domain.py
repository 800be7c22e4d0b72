"""Domain service providers."""

from dishka import Scope, provide

from atelier.config import AuthSettings, LedgerSettings, NotificationSettings
from atelier.domain.repository import (
    AccountRepository,
    CommentRepository,
    ContentRepository,
    FollowRepository,
    LikeRepository,
    NotificationRepository,
)
from atelier.domain.service import (
    AccountService,
    CommentService,
    ContentService,
    FollowService,
    JWTService,
    LedgerService,
    NotificationService,
)
from atelier.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Domain services, built per request over that request's repositories."""

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_notification_service(
        self,
        notification_repository: NotificationRepository,
        notification_settings: NotificationSettings,
    ) -> NotificationService:
        """Provide notification dispatcher."""
        return NotificationService(
            notification_repository=notification_repository,
            page_size=notification_settings.page_size,
        )

    @provide
    def get_ledger_service(
        self,
        account_repository: AccountRepository,
        like_repository: LikeRepository,
        notification_service: NotificationService,
    ) -> LedgerService:
        """Provide like ledger domain service."""
        return LedgerService(
            account_repository=account_repository,
            like_repository=like_repository,
            notification_service=notification_service,
        )

    @provide
    def get_follow_service(
        self,
        follow_repository: FollowRepository,
        account_repository: AccountRepository,
        notification_service: NotificationService,
    ) -> FollowService:
        """Provide follow domain service."""
        return FollowService(
            follow_repository=follow_repository,
            account_repository=account_repository,
            notification_service=notification_service,
        )

    @provide
    def get_account_service(
        self,
        account_repository: AccountRepository,
        content_repository: ContentRepository,
        like_repository: LikeRepository,
        follow_repository: FollowRepository,
        ledger_settings: LedgerSettings,
    ) -> AccountService:
        """Provide account domain service."""
        return AccountService(
            account_repository=account_repository,
            content_repository=content_repository,
            like_repository=like_repository,
            follow_repository=follow_repository,
            initial_like_credit=ledger_settings.initial_like_credit,
        )

    @provide
    def get_content_service(
        self,
        content_repository: ContentRepository,
        like_repository: LikeRepository,
        comment_repository: CommentRepository,
    ) -> ContentService:
        """Provide content catalog domain service."""
        return ContentService(
            content_repository=content_repository,
            like_repository=like_repository,
            comment_repository=comment_repository,
        )

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        notification_service: NotificationService,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            notification_service=notification_service,
        )
