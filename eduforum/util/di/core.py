"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from eduforum.config import SessionSettings, Settings
from eduforum.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_session_settings(self, settings: Settings) -> SessionSettings:
        """Provide session settings."""
        return settings.session
