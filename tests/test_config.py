"""Settings: environment-driven configuration.

Tests cover:
    - Defaults when the environment is empty
    - NODE_ENV / API_TOKEN / PORT / CORS_ORIGINS read from the environment
    - Unknown NODE_ENV values fall back to development
    - get_settings() is cached
"""

import pytest

from cardlist.config import Settings, get_settings
from cardlist.core.domain_types import RuntimeMode

_VARS = (
    "NODE_ENV", "API_TOKEN", "PORT", "HOST", "LOG_LEVEL", "LOG_FILE",
    "CORS_ORIGINS", "PUBLIC_BASE_URL",
)


@pytest.fixture
def clean_env(monkeypatch):
    for name in _VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_defaults(clean_env):
    settings = Settings(_env_file=None)
    assert settings.node_env is RuntimeMode.DEVELOPMENT
    assert not settings.is_production
    assert settings.api_token == ""
    assert settings.port == 8000
    assert settings.log_file == "info.log"
    assert settings.cors_origins == ["*"]


def test_reads_environment(clean_env):
    clean_env.setenv("NODE_ENV", "production")
    clean_env.setenv("API_TOKEN", "abc123")
    clean_env.setenv("PORT", "9000")
    clean_env.setenv("CORS_ORIGINS", '["http://a.example", "http://b.example"]')
    settings = Settings(_env_file=None)
    assert settings.is_production
    assert settings.api_token == "abc123"
    assert settings.port == 9000
    assert settings.cors_origins == ["http://a.example", "http://b.example"]


@pytest.mark.parametrize("value, expected", [
    ("Production", RuntimeMode.PRODUCTION),
    ("test", RuntimeMode.DEVELOPMENT),
    ("staging", RuntimeMode.DEVELOPMENT),
])
def test_node_env_normalized(clean_env, value, expected):
    clean_env.setenv("NODE_ENV", value)
    assert Settings(_env_file=None).node_env is expected


def test_public_base_url_trailing_slash_stripped(clean_env):
    settings = Settings(_env_file=None, public_base_url="https://api.example.com/")
    assert settings.public_base_url == "https://api.example.com"


def test_get_settings_is_cached():
    assert get_settings() is get_settings()
