"""Unit tests for Settings."""

from devforum.config import Settings


class TestAPISettings:
    """API settings derived from host and environment."""

    def test_local_frontend_url(self):
        """Local development allows the dev server origin."""
        settings = Settings(environment="development", frontend_host="localhost")

        assert settings.api.frontend_url == "http://localhost:3000"

    def test_production_frontend_url_uses_https(self):
        """Deployed environments allow the frontend host over https."""
        settings = Settings(
            environment="production", frontend_host="devforum.example"
        )

        assert settings.api.frontend_url == "https://devforum.example"

    def test_api_settings_expose_only_cors_origin(self):
        """No URL other than the CORS origin is derived from the hosts."""
        dumped = Settings(environment="test").api.model_dump()

        assert set(dumped) == {
            "host",
            "port",
            "protocol",
            "frontend_host",
            "frontend_url",
        }
