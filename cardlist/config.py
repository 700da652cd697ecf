"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - The API secret comes from the environment (never hardcoded)
    - get_settings() is cached (lru_cache): single instance per process
    - NODE_ENV == "production" is the only value that enables production mode

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for all non-secret settings: works out-of-the-box locally
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from cardlist.core.domain_types import RuntimeMode


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Runtime mode
    node_env: RuntimeMode = RuntimeMode.DEVELOPMENT

    @field_validator("node_env", mode="before")
    @classmethod
    def normalize_node_env(cls, v):
        """Unknown modes fall back to development, like any non-"production" value."""
        if isinstance(v, str):
            v = v.strip().lower()
            if v not in {m.value for m in RuntimeMode}:
                return RuntimeMode.DEVELOPMENT
        return v

    # Auth
    api_token: str = ""

    # Server
    host: str = "127.0.0.1"
    port: int = 8000
    public_base_url: str = "http://localhost:8000"

    @field_validator("public_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    # API
    cors_origins: list[str] = ["*"]

    # Observability
    log_level: str = "INFO"
    log_file: str = "info.log"

    @property
    def is_production(self) -> bool:
        return self.node_env is RuntimeMode.PRODUCTION


@lru_cache
def get_settings() -> Settings:
    return Settings()
