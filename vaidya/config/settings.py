from typing import Any
from urllib.parse import quote_plus

from pydantic import Field, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables and ``.env``.
    """

    # API Configuration
    API_V1_STR: str = "/api/v1"
    PROJECT_NAME: str = "Vaidya Scheduling API"
    PROJECT_DESCRIPTION: str = "Clinic slot generation, booking and patient records"
    VERSION: str = "0.1.0"
    CORS_ORIGINS: list[str] = Field(
        default=["http://localhost:5173"], description="Origins allowed to call the API from a browser"
    )

    # PostgreSQL Database Settings
    DB_HOST: str = Field("localhost", description="PostgreSQL host")
    DB_PORT: int = Field(5432, description="PostgreSQL port")
    DB_NAME: str = Field("vaidya", description="Database name")
    DB_USER: str = Field("postgres", description="Database user")
    DB_PASSWORD: str | None = Field(None, description="Database password")
    DB_ECHO: bool = Field(False, description="Log SQL queries (debug only)")

    # Database connection pool settings
    DB_POOL_SIZE: int = Field(20, description="Connection pool size")
    DB_MAX_OVERFLOW: int = Field(30, description="Maximum pool overflow")
    DB_POOL_RECYCLE: int = Field(3600, description="Recycle connections every N seconds")
    DB_POOL_TIMEOUT: int = Field(30, description="Seconds to wait for a pooled connection")
    DB_CREATE_TABLES: bool = Field(False, description="Create missing tables on startup")

    # Application settings
    DEBUG: bool = Field(False, description="Debug mode")
    ENVIRONMENT: str = Field("production", description="Execution environment")
    LOG_LEVEL: str = Field("INFO", description="Root logging level")
    SENTRY_DSN: str | None = Field(None, description="Sentry DSN; error tracking is off when unset")

    # Doctor lookup cache
    DOCTOR_CACHE_MAX_SIZE: int = Field(500, description="Maximum cached doctor entries")
    DOCTOR_CACHE_TTL_SECONDS: int = Field(600, description="Seconds a cached doctor stays valid")

    # Scheduling
    SLOT_DEFAULT_RANGE: str = Field("10 minutes", description="Slot length used when a request omits it")

    model_config = SettingsConfigDict(
        case_sensitive=True,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    def __init__(self, **data: Any):
        super().__init__(**data)

    @field_validator("CORS_ORIGINS", mode="before")
    @classmethod
    def parse_cors_origins(cls, value):
        if isinstance(value, str) and not value.strip().startswith("["):
            return [origin.strip() for origin in value.split(",") if origin.strip()]
        return value

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v):
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unsupported LOG_LEVEL: {v}")
        return level

    @field_validator("DB_POOL_SIZE")
    @classmethod
    def validate_pool_size(cls, v):
        if v < 1:
            raise ValueError("DB_POOL_SIZE must be at least 1")
        if v > 100:
            raise ValueError("DB_POOL_SIZE should not exceed 100")
        return v

    @field_validator("DB_MAX_OVERFLOW")
    @classmethod
    def validate_max_overflow(cls, v):
        if v < 0:
            raise ValueError("DB_MAX_OVERFLOW must be 0 or greater")
        if v > 200:
            raise ValueError("DB_MAX_OVERFLOW should not exceed 200")
        return v

    @field_validator("DOCTOR_CACHE_MAX_SIZE", "DOCTOR_CACHE_TTL_SECONDS")
    @classmethod
    def validate_cache_bounds(cls, v):
        if v < 1:
            raise ValueError("Doctor cache size and TTL must be positive")
        return v

    def _credentials(self) -> str:
        user = quote_plus(self.DB_USER)
        if self.DB_PASSWORD:
            return f"{user}:{quote_plus(self.DB_PASSWORD)}"
        return user

    @computed_field
    @property
    def database_url(self) -> str:
        """Synchronous PostgreSQL URL, used by Alembic."""
        return f"postgresql://{self._credentials()}@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"

    @computed_field
    @property
    def async_database_url(self) -> str:
        """asyncpg URL used by the application engine."""
        return f"postgresql+asyncpg://{self._credentials()}@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"

    @computed_field
    @property
    def is_development(self) -> bool:
        """Whether the app runs in a development-like environment."""
        return self.DEBUG or self.ENVIRONMENT.lower() in ["development", "dev", "local"]


# Settings singleton
_settings_instance = None


def get_settings() -> Settings:
    """
    Return the cached settings instance.

    Environment variables are read only once per process.
    """
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance
