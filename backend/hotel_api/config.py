"""Application configuration using pydantic-settings."""

import warnings

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # App
    app_name: str = "Hotel Rooms API"
    app_version: str = "0.1.0"
    debug: bool = False
    environment: str = "development"  # development, staging, production

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    # Database credentials (PostgreSQL)
    db_user: str = "postgres"
    db_password: str = ""
    db_name: str = "hotel"
    db_host: str = "localhost"
    db_port: int = 5432

    # Full URL override, takes precedence over the credentials above
    database_url: str = ""

    @model_validator(mode="after")
    def _validate_credentials(self) -> "Settings":
        """Reject an empty database password in production and warn in development."""
        if self.database_url or self.db_password:
            return self
        if self.environment == "production":
            raise ValueError("DB_PASSWORD (or DATABASE_URL) must be set in production.")
        warnings.warn(
            "DB_PASSWORD is empty; only acceptable against a local trust-auth database.",
            UserWarning,
            stacklevel=1,
        )
        return self

    @property
    def async_database_url(self) -> str:
        """Return the connection URL, ensuring PostgreSQL uses the asyncpg driver."""
        if self.database_url:
            url = self.database_url
            if url.startswith("postgresql://"):
                url = url.replace("postgresql://", "postgresql+asyncpg://", 1)
            return url

        return URL.create(
            "postgresql+asyncpg",
            username=self.db_user,
            password=self.db_password or None,
            host=self.db_host,
            port=self.db_port,
            database=self.db_name,
        ).render_as_string(hide_password=False)

    @property
    def is_sqlite(self) -> bool:
        return self.async_database_url.startswith("sqlite")


settings = Settings()
