"""
Configuration module using Pydantic Settings.

All settings are loaded from environment variables or a ``.env`` file and
validated once at startup. Core code receives the values it needs through
constructor arguments and never reads the environment itself.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from authcore.domain.value_objects.duration import parse_duration

DEFAULT_TOKEN_LIFETIME_SECONDS = 86400
DEFAULT_LOCKOUT_SECONDS = 900


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    ``jwt_secret`` has no default: startup fails when it is missing.
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
    app_name: str = Field(default="authcore")
    version: str = Field(default="0.1.0")
    environment: Literal["development", "staging", "production"] = Field(default="development")
    debug: bool = Field(default=False)
    api_prefix: str = Field(default="/api")

    # -------------------------------------------------------------------------
    # Server Configuration
    # -------------------------------------------------------------------------
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000, ge=1, le=65535)
    reload: bool = Field(default=False)

    # -------------------------------------------------------------------------
    # Token Settings
    # -------------------------------------------------------------------------
    jwt_secret: str = Field(
        ...,
        min_length=32,
        description="Secret key for token signing. Must be at least 32 characters.",
    )
    jwt_algorithm: Literal["HS256", "HS384", "HS512"] = Field(default="HS256")
    jwt_expires_in: str = Field(
        default="24h",
        description="Token lifetime as <digits><s|m|h|d>; invalid values mean 24h",
    )

    # -------------------------------------------------------------------------
    # Login Lockout
    # -------------------------------------------------------------------------
    max_login_attempts: int = Field(default=5, ge=1, le=100)
    lockout_duration: str = Field(default="15m", description="Lock length as <digits><s|m|h|d>")

    # Argon2id Password Hashing Configuration
    argon2_time_cost: int = Field(default=2, ge=1, le=10)
    argon2_memory_cost: int = Field(default=65536, ge=8192)  # 64 MB
    argon2_parallelism: int = Field(default=4, ge=1, le=16)

    # -------------------------------------------------------------------------
    # Roles
    # -------------------------------------------------------------------------
    default_role_name: str = Field(default="usuario", min_length=1, max_length=50)
    require_default_role: bool = Field(default=False)
    seed_role_names: str = Field(
        default="superadmin,admin,usuario",
        description="Comma-separated roles created at startup when missing",
    )
    superadmin_role_name: str = Field(default="superadmin")
    admin_role_name: str = Field(default="admin")

    # First superadmin (created at startup when both are set and the email is free)
    bootstrap_admin_email: str | None = Field(default=None)
    bootstrap_admin_password: str | None = Field(default=None, min_length=8)

    # -------------------------------------------------------------------------
    # Storage
    # -------------------------------------------------------------------------
    storage_backend: Literal["postgresql", "memory"] = Field(default="postgresql")
    database_url: str | None = Field(
        default=None,
        description="PostgreSQL connection string with asyncpg driver",
    )

    # Connection Pool Settings
    db_echo: bool = Field(default=False)
    db_pool_size: int = Field(default=5, ge=1, le=50)
    db_max_overflow: int = Field(default=10, ge=0, le=100)
    db_pool_recycle: int = Field(default=3600, ge=300)  # Seconds
    db_pool_pre_ping: bool = Field(default=True)

    # -------------------------------------------------------------------------
    # CORS Settings
    # -------------------------------------------------------------------------
    cors_origins: str = Field(
        default="http://localhost:3000,http://localhost:8000",
        description="Comma-separated list of allowed CORS origins",
    )
    cors_allow_credentials: bool = Field(default=True)

    # -------------------------------------------------------------------------
    # Logging Configuration
    # -------------------------------------------------------------------------
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO"
    )
    log_format: Literal["json", "console"] = Field(default="console")
    log_file_enabled: bool = Field(default=True)
    log_file_path: str = Field(default="logs/app.log")
    log_file_max_bytes: int = Field(default=10485760)  # 10 MB
    log_file_backup_count: int = Field(default=5)

    @field_validator("database_url")
    @classmethod
    def require_async_driver(cls, v: str | None) -> str | None:
        """Point plain postgresql:// URLs at the asyncpg driver."""
        if v and v.startswith("postgresql://"):
            return "postgresql+asyncpg://" + v[len("postgresql://"):]
        return v

    @model_validator(mode="after")
    def check_storage(self) -> "Settings":
        if self.storage_backend == "postgresql" and not self.database_url:
            raise ValueError("DATABASE_URL is required when STORAGE_BACKEND=postgresql")
        return self

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------
    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def token_lifetime_seconds(self) -> int:
        """Token lifetime, falling back to 24h for malformed values."""
        return parse_duration(self.jwt_expires_in, DEFAULT_TOKEN_LIFETIME_SECONDS)

    @property
    def lockout_seconds(self) -> int:
        return parse_duration(self.lockout_duration, DEFAULT_LOCKOUT_SECONDS)

    @property
    def cors_origins_list(self) -> list[str]:
        """Get parsed CORS origins as list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    @property
    def seed_role_names_list(self) -> list[str]:
        return [name.strip() for name in self.seed_role_names.split(",") if name.strip()]


@lru_cache
def get_settings() -> Settings:
    """Build the settings once per process."""
    return Settings()
