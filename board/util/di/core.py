"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from board.config import (
    AuthSettings,
    RequestSettings,
    Settings,
    ensure_production_ready,
)
from board.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        settings = Settings()
        ensure_production_ready(settings)
        return settings

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Provide auth settings."""
        return settings.auth

    @provide(scope=Scope.APP)
    def provide_request_settings(self, settings: Settings) -> RequestSettings:
        """Provide feature request settings."""
        return settings.requests
