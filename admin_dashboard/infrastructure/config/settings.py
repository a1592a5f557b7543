"""
Configuration module using Pydantic Settings.

All settings are loaded from environment variables or a ``.env`` file.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, PostgresDsn, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Settings are validated using Pydantic with type hints.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # -------------------------------------------------------------------------
    # Application Settings
    # -------------------------------------------------------------------------
    app_name: str = Field(default="Admin Dashboard")
    version: str = Field(default="0.1.0")
    environment: Literal["development", "staging", "production", "test"] = Field(
        default="development"
    )
    debug: bool = Field(default=False)

    # -------------------------------------------------------------------------
    # Storage Configuration
    # -------------------------------------------------------------------------
    storage_backend: Literal["memory", "postgresql"] = Field(default="memory")
    database_url: PostgresDsn | None = Field(
        default=None,
        description="PostgreSQL connection string with asyncpg driver",
    )
    db_echo: bool = Field(default=False)
    db_pool_size: int = Field(default=5, ge=1, le=50)
    db_max_overflow: int = Field(default=10, ge=0, le=100)
    db_pool_recycle: int = Field(default=3600, ge=300)  # Seconds
    db_pool_pre_ping: bool = Field(default=True)

    # -------------------------------------------------------------------------
    # RBAC Limits
    # -------------------------------------------------------------------------
    rbac_max_roles_per_user: int = Field(default=10, ge=1)
    rbac_max_permissions_per_role: int = Field(default=100, ge=1)
    rbac_default_user_role: str = Field(default="USER")

    # -------------------------------------------------------------------------
    # Logging Configuration
    # -------------------------------------------------------------------------
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO"
    )
    log_format: Literal["json", "console"] = Field(default="console")
    log_file_enabled: bool = Field(default=False)
    log_file_path: str = Field(default="logs/app.log")
    log_file_max_bytes: int = Field(default=10485760)  # 10 MB
    log_file_backup_count: int = Field(default=5)

    @model_validator(mode="after")
    def check_database_url(self) -> "Settings":
        """A database URL is mandatory for the PostgreSQL backend."""
        if self.storage_backend == "postgresql" and self.database_url is None:
            raise ValueError("database_url is required when storage_backend is 'postgresql'")
        return self

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------
    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == "development"

    @property
    def database_url_str(self) -> str:
        """Get database URL as string."""
        return str(self.database_url)


@lru_cache
def get_settings() -> Settings:
    """Get the process-wide settings instance (loaded once)."""
    return Settings()
