"""
Configuration management for LightBnB.

This module provides environment-based configuration using Pydantic BaseSettings,
allowing the data-access layer to run against development, testing and
production databases without code changes.
"""

import os
from functools import lru_cache
from pathlib import Path
from typing import Literal, Optional

import structlog
from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = structlog.get_logger(__name__)

# Determine project root for resolving .env by default
PROJECT_ROOT = Path(__file__).resolve().parents[3]
DEFAULT_ENV_FILE = PROJECT_ROOT / ".env"
ENV_FILE_OVERRIDE = os.getenv("LIGHTBNB_ENV_FILE")
if ENV_FILE_OVERRIDE:
    env_file_candidate = Path(ENV_FILE_OVERRIDE).expanduser()
    if not env_file_candidate.is_absolute():
        env_file_candidate = PROJECT_ROOT / env_file_candidate
    SETTINGS_ENV_FILE = env_file_candidate
else:
    SETTINGS_ENV_FILE = DEFAULT_ENV_FILE

ASYNC_DRIVER_SCHEME = "postgresql+asyncpg://"
_SYNC_SCHEMES = ("postgres://", "postgresql://", "postgresql+psycopg2://")

StoreErrorPolicy = Literal["log", "raise"]


class DatabaseSettings:
    """
    Database settings compatibility layer for unified DSN retrieval.

    Supports both component-based and URI-based connection strings.
    """

    def __init__(
        self,
        host: str,
        port: int = 5432,
        user: str = "",
        password: str = "",
        db: str = "",
        uri: Optional[str] = None,
    ):
        self.host = host
        self.port = port
        self.user = user
        self.password = password
        self.db = db
        self.uri = uri

    def get_connection_string(self) -> str:
        """
        Get PostgreSQL connection string.

        Returns:
            Database connection string (DSN)
        """
        if self.uri:
            return self.uri
        if self.password:
            credentials = f"{self.user}:{self.password}"
        else:
            credentials = self.user
        return f"postgresql://{credentials}@{self.host}:{self.port}/{self.db}"


def to_async_dsn(dsn: str) -> str:
    """
    Rewrite a PostgreSQL DSN so SQLAlchemy selects the asyncpg driver.

    Examples:
        >>> to_async_dsn("postgres://vagrant@localhost/lightbnb")
        'postgresql+asyncpg://vagrant@localhost/lightbnb'
        >>> to_async_dsn("postgresql+asyncpg://localhost/lightbnb")
        'postgresql+asyncpg://localhost/lightbnb'
    """
    for scheme in _SYNC_SCHEMES:
        if dsn.startswith(scheme):
            return ASYNC_DRIVER_SCHEME + dsn[len(scheme):]
    return dsn


class Settings(BaseSettings):
    """
    Application settings with environment variable support.

    Environment variables are loaded with the LIGHTBNB_ prefix. For example,
    LIGHTBNB_DB_POOL_SIZE overrides db_pool_size.

    Unprefixed fields:
    - ENVIRONMENT: Deployment environment (dev, staging, prod)
    - LOG_LEVEL: Logging level (uppercase)
    """

    ENVIRONMENT: Literal["dev", "staging", "prod"] = Field(
        default="dev",
        validation_alias="ENVIRONMENT",
        description="Deployment environment",
    )
    LOG_LEVEL: str = Field(
        default="INFO",
        validation_alias="LOG_LEVEL",
        description="Logging level (uppercase)",
    )

    # Database configuration
    database_host: str = Field(default="localhost", description="Database host")
    database_port: int = Field(default=5432, description="Database port")
    database_user: str = Field(default="vagrant", description="Database user")
    database_password: str = Field(default="", description="Database password")
    database_db: str = Field(default="lightbnb", description="Database name")
    database_uri: Optional[str] = Field(
        default=None,
        description="Complete database URI (LIGHTBNB_DATABASE_URI)",
    )

    # Pool and execution settings
    db_pool_size: int = Field(
        default=10, ge=1, description="Database connection pool size"
    )
    db_echo: bool = Field(
        default=False, description="Echo every statement through SQLAlchemy logging"
    )

    # Data-access behaviour
    default_result_limit: int = Field(
        default=10,
        ge=1,
        description="Row limit used when a listing accessor is called without one",
    )
    store_error_policy: StoreErrorPolicy = Field(
        default="log",
        description=(
            "'log' logs store errors and resolves accessors to None; "
            "'raise' logs and then raises StoreError"
        ),
    )

    @model_validator(mode="before")
    @classmethod
    def _inject_database_uri(cls, values: dict[str, object]) -> dict[str, object]:
        """
        Accept LIGHTBNB_DATABASE__URI as well as LIGHTBNB_DATABASE_URI.

        An explicitly passed or already loaded database_uri wins.
        """
        env_uri = os.getenv("LIGHTBNB_DATABASE__URI")
        if env_uri and isinstance(values, dict) and not values.get("database_uri"):
            values["database_uri"] = env_uri
        return values

    @property
    def database(self) -> DatabaseSettings:
        """Get database settings assembled from individual configuration fields."""
        return DatabaseSettings(
            host=self.database_host,
            port=self.database_port,
            user=self.database_user,
            password=self.database_password,
            db=self.database_db,
            uri=self.database_uri,
        )

    def get_database_connection_string(self) -> str:
        """
        Get the SQLAlchemy URL for the async engine.

        Uses database_uri when set, otherwise assembles a DSN from the
        individual fields, then switches the scheme to asyncpg.
        """
        return to_async_dsn(self.database.get_connection_string())

    @model_validator(mode="after")
    def validate_production_database_url(self) -> "Settings":
        """
        Validate that production environment uses PostgreSQL.

        Raises:
            ValueError: If ENVIRONMENT is 'prod' and database URL is not PostgreSQL
        """
        db_url = self.get_database_connection_string()

        if self.ENVIRONMENT == "prod" and not db_url.startswith(ASYNC_DRIVER_SCHEME):
            db_url_preview = db_url[:20]
            logger.error(
                "configuration.invalid_database_url",
                environment=self.ENVIRONMENT,
                url_preview=db_url_preview,
            )
            raise ValueError(
                "Production environment requires PostgreSQL database. "
                f"got: {db_url_preview}..."
            )

        return self

    model_config = SettingsConfigDict(
        env_prefix="LIGHTBNB_",
        env_file=str(SETTINGS_ENV_FILE),
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_nested_delimiter="__",
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings instance with loaded configuration
    """
    return Settings()
