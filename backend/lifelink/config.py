"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - All credentials come from environment variables (never hardcoded)
    - get_settings() is cached (lru_cache): single instance per process
    - DATABASE_URL, when set, wins over the DB_* parts

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - NODE_ENV accepted next to APP_ENV: deployments of the earlier gateway already set it
"""

from functools import lru_cache

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env", case_sensitive=False, extra="ignore",
    )

    # Database
    db_host: str = "localhost"
    db_user: str = "root"
    db_password: str = ""
    db_name: str = "lifelink"
    db_port: int = 3306
    db_driver: str = "mysql+aiomysql"
    database_url: str | None = None

    @field_validator("database_url", mode="before")
    @classmethod
    def blank_url_is_unset(cls, v: str | None) -> str | None:
        if isinstance(v, str) and not v.strip():
            return None
        return v

    db_connection_limit: int = 10
    db_pool_timeout: float = 30.0

    # Server
    host: str = "0.0.0.0"
    port: int = 5000
    app_env: str = Field(
        "development", validation_alias=AliasChoices("APP_ENV", "NODE_ENV"),
    )

    # API
    cors_origins: list[str] = ["*"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @property
    def is_production(self) -> bool:
        return self.app_env.lower() == "production"

    @property
    def sqlalchemy_url(self) -> str | URL:
        if self.database_url:
            return self.database_url
        return URL.create(
            drivername=self.db_driver,
            username=self.db_user,
            password=self.db_password or None,
            host=self.db_host,
            port=self.db_port,
            database=self.db_name,
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()
