"""Application configuration with environment validation.

Usage:
    from swimbarriers.config import get_settings

    settings = get_settings()
    print(settings.supabase_url)
    print(settings.environment)

Settings come from environment variables or a ``.env`` file in the
working directory or the project root.
"""

from enum import StrEnum
from functools import lru_cache
from pathlib import Path

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


def _find_env_file() -> Path | None:
    """Find .env in the current directory, then in the project root."""
    if Path(".env").exists():
        return Path(".env")
    # config.py -> swimbarriers -> src -> project_root
    env_file = Path(__file__).parent.parent.parent / ".env"
    if env_file.exists():
        return env_file
    return None


class Environment(StrEnum):
    """Application environment."""

    LOCAL = "local"
    DEVELOPMENT = "development"
    PRODUCTION = "production"


class LogFormat(StrEnum):
    """Log output format."""

    CONSOLE = "console"
    JSON = "json"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=_find_env_file(),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    environment: Environment = Environment.LOCAL

    # Supabase (the local CLI stack listens on 54321)
    supabase_url: str = Field(
        default="http://127.0.0.1:54321", description="Supabase project URL"
    )
    supabase_key: SecretStr | None = Field(
        default=None, description="Supabase anon/public key"
    )
    supabase_service_role_key: SecretStr | None = Field(
        default=None, description="Supabase service role key (bypasses RLS, for admin tasks)"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Log level")
    log_format: LogFormat | None = Field(
        default=None, description="Log output format (json in production, console elsewhere)"
    )

    @property
    def is_local(self) -> bool:
        return self.environment == Environment.LOCAL

    @property
    def is_development(self) -> bool:
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_production(self) -> bool:
        return self.environment == Environment.PRODUCTION

    def database_key(self) -> str:
        """Key used for database access, preferring the service role key.

        Raises:
            RuntimeError: If no Supabase key is configured
        """
        key = self.supabase_service_role_key or self.supabase_key
        if key is None:
            raise RuntimeError(
                "SUPABASE_KEY (or SUPABASE_SERVICE_ROLE_KEY) must be set to access the database"
            )
        return key.get_secret_value()


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings.

    To reload, clear the cache: ``get_settings.cache_clear()``
    """
    return Settings()
