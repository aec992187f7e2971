"""Configuration management for the application."""

from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_SESSION_SECRET = "dev-secret-change-in-production-please"  # noqa: S105


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Database
    database_url: str = Field(default="sqlite:///./data/database.db")
    sqlite_busy_timeout_ms: int = Field(default=5000)

    # Sessions
    session_secret: str = Field(default=DEFAULT_SESSION_SECRET)
    session_algorithm: str = Field(default="HS256")
    session_ttl_minutes: int = Field(default=1440)  # 24 hours
    session_cookie_name: str = Field(default="recipebox_session")

    # Passwords
    password_hash_rounds: int = Field(default=10, ge=4, le=31)

    # API
    environment: str = Field(default="development")
    log_level: str = Field(default="INFO")

    @model_validator(mode="after")
    def validate_production_settings(self) -> "Settings":
        """Validate that production has secure settings."""
        if self.environment == "production":
            if self.session_secret == DEFAULT_SESSION_SECRET:
                raise ValueError("SESSION_SECRET must be changed in production")
        return self

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == "development"

    @property
    def is_sqlite(self) -> bool:
        """Check if the configured store is SQLite."""
        return self.database_url.startswith("sqlite")

    @property
    def session_secret_is_default(self) -> bool:
        return self.session_secret == DEFAULT_SESSION_SECRET

    @property
    def cookie_secure(self) -> bool:
        """Session cookies are only sent over HTTPS in production."""
        return self.is_production


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
