"""Settings provider, shared by every container."""

from dishka import Scope, provide

from atelier.config import AuthSettings, LedgerSettings, NotificationSettings, Settings
from atelier.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Settings are read once per container from the environment and ``.env``.

    Services depend on the section they need rather than on ``Settings``.
    """

    scope = Scope.APP

    @provide
    def get_settings(self) -> Settings:
        return Settings()

    @provide
    def get_auth_settings(self, settings: Settings) -> AuthSettings:
        return settings.auth

    @provide
    def get_ledger_settings(self, settings: Settings) -> LedgerSettings:
        return settings.ledger

    @provide
    def get_notification_settings(self, settings: Settings) -> NotificationSettings:
        return settings.notifications
