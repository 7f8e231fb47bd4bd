"""Unit tests for Settings parsing and derived properties."""

import pytest

from papershare.core.config import Settings
from papershare.core.enums import Environment


def _settings(**overrides) -> Settings:
    return Settings(_env_file=None, **overrides)


@pytest.mark.unit
class TestSettings:
    def test_store_id_switches_graph_on(self):
        assert _settings(fga_store_id="01HSTORE").fga_enabled is True
        assert _settings(fga_store_id=None).fga_enabled is False

    def test_blank_store_id_is_unset(self):
        settings = _settings(fga_store_id="   ", fga_model_id="")

        assert settings.fga_store_id is None
        assert settings.fga_model_id is None
        assert settings.fga_enabled is False

    def test_trailing_slash_stripped_from_urls(self):
        settings = _settings(
            api_base_url="https://papers.example.org/", fga_api_url="https://api.us1.fga.dev/"
        )

        assert settings.api_base_url == "https://papers.example.org"
        assert settings.fga_api_url == "https://api.us1.fga.dev"

    def test_comma_separated_lists(self):
        settings = _settings(
            cors_origins="http://localhost:5173, https://papers.example.org,",
            auth_algorithms="RS256,ES256",
        )

        assert settings.cors_origin_list == [
            "http://localhost:5173",
            "https://papers.example.org",
        ]
        assert settings.auth_algorithm_list == ["RS256", "ES256"]

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("FGA_STORE_ID", "01HFROMENV")
        monkeypatch.setenv("ENVIRONMENT", "testing")

        settings = _settings()

        assert settings.fga_store_id == "01HFROMENV"
        assert settings.environment == Environment.TESTING
        assert settings.is_testing is True


@pytest.mark.unit
class TestEnvironment:
    @pytest.mark.parametrize(
        ("environment", "expected"),
        [
            (Environment.DEVELOPMENT, False),
            (Environment.TESTING, True),
            (Environment.CI, True),
            (Environment.PRODUCTION, True),
        ],
    )
    def test_json_logs_outside_development(self, environment, expected):
        assert environment.uses_json_logs is expected
