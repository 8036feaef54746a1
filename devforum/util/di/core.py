"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from devforum.config import (
    AuthSettings,
    RankingSettings,
    ReputationSettings,
    Settings,
)
from devforum.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Provide auth settings."""
        return settings.auth

    @provide(scope=Scope.APP)
    def provide_ranking_settings(self, settings: Settings) -> RankingSettings:
        """Provide question ranking settings."""
        return settings.ranking

    @provide(scope=Scope.APP)
    def provide_reputation_settings(self, settings: Settings) -> ReputationSettings:
        """Provide reputation award settings."""
        return settings.reputation
