"""Unit tests for settings."""

import pytest

from commentstreams.config import CommentStreamsSettings, Settings
from commentstreams.util.di.core import validated_auth_settings
from commentstreams.util.error import ConfigurationError


class TestCommentStreamsSettings:
    """Tests for comment behaviour settings."""

    def test_defaults(self):
        """Defaults match a stock wiki setup."""
        settings = CommentStreamsSettings()

        assert settings.namespace_index == 844
        assert settings.talk_namespace_index == 845
        assert settings.allowed_namespace_set == frozenset({0})
        assert settings.enable_talk is False
        assert settings.newest_streams_on_top is True
        assert settings.suppress_logs_from_rcs is True

    def test_explicit_allowed_namespaces_replace_content_namespaces(self):
        """An explicit list wins over the content namespaces."""
        settings = CommentStreamsSettings(content_namespaces=[0], allowed_namespaces=[2, 4])

        assert settings.allowed_namespace_set == frozenset({2, 4})

    def test_nested_environment_variables(self, monkeypatch):
        """Nested values are read with the double underscore delimiter."""
        monkeypatch.setenv("COMMENTS__NAMESPACE_INDEX", "900")
        monkeypatch.setenv("COMMENTS__ENABLE_TALK", "true")

        settings = Settings()

        assert settings.comments.namespace_index == 900
        assert settings.comments.enable_talk is True


class TestAuthSettingsProvider:
    """Tests for the CSRF secret guard."""

    def test_default_secret_refused_in_production(self):
        """Production must not run with the placeholder secret."""
        settings = Settings(environment="production")

        with pytest.raises(ConfigurationError):
            validated_auth_settings(settings)

    def test_default_secret_allowed_in_development(self):
        """Development may use the placeholder secret."""
        settings = Settings(environment="development")

        assert validated_auth_settings(settings) is settings.auth
