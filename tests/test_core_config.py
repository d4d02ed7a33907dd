import pytest
from unittest.mock import patch
from pydantic import HttpUrl, ValidationError

from eventhub.core.config import Settings, get_settings, parse_comma_separated_origins


class TestSettings:
    """Test the Settings class."""

    @patch.dict("os.environ", {}, clear=True)
    def test_settings_defaults(self):
        settings = Settings(_env_file=None)
        assert settings.PROJECT_NAME == "EventHub Admin"
        assert settings.DASHBOARD_LOADING_DELAY == 1.0
        assert settings.CURRENCY_LOCALE == "en_IN"
        assert settings.CURRENCY_CODE == "INR"
        assert settings.LOG_LEVEL == "INFO"
        assert settings.BACKEND_CORS_ORIGINS == ""
        assert settings.OTEL_EXPORTER_OTLP_ENDPOINT is None
        assert settings.OTEL_EXPORTER_OTLP_INSECURE is False

    @patch.dict("os.environ", {"DASHBOARD_LOADING_DELAY": "2.5", "CURRENCY_CODE": "USD"})
    def test_settings_read_from_environment(self):
        settings = Settings(_env_file=None)
        assert settings.DASHBOARD_LOADING_DELAY == 2.5
        assert settings.CURRENCY_CODE == "USD"

    @patch.dict(
        "os.environ",
        {
            "OTEL_EXPORTER_OTLP_ENDPOINT": "http://collector:4317",
            "OTEL_EXPORTER_OTLP_INSECURE": "true",
            "ENVIRONMENT": "production",
        },
    )
    def test_telemetry_settings_read_from_environment(self):
        settings = Settings(_env_file=None)
        assert settings.OTEL_EXPORTER_OTLP_ENDPOINT == "http://collector:4317"
        assert settings.OTEL_EXPORTER_OTLP_INSECURE is True
        assert settings.ENVIRONMENT == "production"

    def test_negative_loading_delay_rejected(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, DASHBOARD_LOADING_DELAY=-1)


class TestGetSettings:
    """Test the cached settings accessor."""

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()

    def test_cache_clear_reloads(self):
        first = get_settings()
        get_settings.cache_clear()
        assert get_settings() is not first


class TestParseCommaSeparatedOrigins:
    """Test CORS origin parsing."""

    def test_empty_string_returns_empty_list(self):
        assert parse_comma_separated_origins("") == []

    def test_parses_and_strips_origins(self):
        origins = parse_comma_separated_origins(
            "http://localhost:3000, https://example.com,"
        )
        assert len(origins) == 2
        assert all(isinstance(o, HttpUrl) for o in origins)
        assert str(origins[1]).startswith("https://example.com")

    def test_invalid_origin_raises(self):
        with pytest.raises(ValueError, match="Invalid CORS origin 'not a url'"):
            parse_comma_separated_origins("not a url")
