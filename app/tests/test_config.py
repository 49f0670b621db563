import pytest

from src.core.config import Settings
from src.core.cors import CORS_HEADERS, build_cors_headers


class TestSettings:
    """Test settings defaults and validation."""

    def test_defaults_preserve_literal_status_codes(self):
        config = Settings()
        assert config.DUPLICATE_SIGNUP_STATUS_CODE == 500
        assert config.MALFORMED_JSON_STATUS_CODE == 500

    def test_conflict_status_override(self):
        config = Settings(DUPLICATE_SIGNUP_STATUS_CODE=409)
        assert config.DUPLICATE_SIGNUP_STATUS_CODE == 409

    def test_invalid_conflict_status_rejected(self):
        with pytest.raises(ValueError):
            Settings(DUPLICATE_SIGNUP_STATUS_CODE=418)

    def test_invalid_malformed_status_rejected(self):
        with pytest.raises(ValueError):
            Settings(MALFORMED_JSON_STATUS_CODE=422)

    def test_environment_variables_are_read(self, monkeypatch):
        monkeypatch.setenv("CORS_ALLOW_ORIGIN", "https://onmercator.com")
        config = Settings()
        assert config.CORS_ALLOW_ORIGIN == "https://onmercator.com"


class TestCorsHeaders:
    """Test the shared CORS header set."""

    def test_default_headers(self):
        assert dict(CORS_HEADERS) == {
            "Access-Control-Allow-Origin": "*",
            "Access-Control-Allow-Methods": "POST, OPTIONS",
            "Access-Control-Allow-Headers": "Content-Type",
        }

    def test_headers_are_read_only(self):
        with pytest.raises(TypeError):
            CORS_HEADERS["Access-Control-Allow-Origin"] = "https://evil.example"

    def test_headers_follow_settings(self):
        headers = build_cors_headers(Settings(CORS_ALLOW_ORIGIN="https://onmercator.com"))
        assert headers["Access-Control-Allow-Origin"] == "https://onmercator.com"
        assert headers["Access-Control-Allow-Methods"] == "POST, OPTIONS"
