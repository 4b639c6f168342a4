"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from commentstreams.config import AuthSettings, CommentStreamsSettings, Settings
from commentstreams.util.di.base import ProviderBase
from commentstreams.util.error import ConfigurationError

DEFAULT_SECRET = "CHANGE_ME_IN_PRODUCTION"


def validated_auth_settings(settings: Settings) -> AuthSettings:
    """Return auth settings, refusing the placeholder secret in production.

    Raises:
        ConfigurationError: If production runs with the default CSRF secret
    """
    if (
        settings.environment == "production"
        and settings.auth.csrf_secret == DEFAULT_SECRET
    ):
        raise ConfigurationError(
            "AUTH__CSRF_SECRET", "the default secret cannot be used in production"
        )
    return settings.auth


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_comment_settings(self, settings: Settings) -> CommentStreamsSettings:
        """Provide comment streams settings."""
        return settings.comments

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Provide auth settings."""
        return validated_auth_settings(settings)
