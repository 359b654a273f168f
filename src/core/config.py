"""Communities API settings, read from environment variables.

DATABASE_URL, API_BASE_URL and CORS_ORIGINS have no defaults; everything
else does. Import the module-level `settings`:

    from src.core.config import settings

    page_size = page_size or settings.default_page_size
"""

from functools import lru_cache

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.core.enums import Environment


class Settings(BaseSettings):
    """Flat settings model; field names match the environment variables."""

    environment: Environment = Environment.DEVELOPMENT
    debug: bool = Field(default=False, description="FastAPI debug tracebacks")
    log_level: str = Field(default="INFO", description="Lowest level logged")

    app_name: str = "Communities API"
    app_version: str = "0.1.0"

    # Store
    database_url: str = Field(
        description="SQLAlchemy async URL, postgresql+asyncpg:// or sqlite+aiosqlite://",
    )
    db_echo: bool = Field(default=False, description="Echo every SQL statement")
    db_pool_size: int = Field(default=20, description="Ignored for SQLite")
    db_create_tables: bool = Field(
        default=True,
        description="Run create_all on startup; there are no migrations",
    )

    # HTTP surface
    api_base_url: str = Field(
        description="Prefix of Problem Details type URIs, e.g. https://communities.local",
    )
    api_v1_prefix: str = "/api/v1"
    cors_origins: str = Field(description="Comma-separated allowed origins")
    cors_allow_credentials: bool = True

    # Community listing
    default_page_size: int = Field(
        default=10, description="Used when pageSize is not sent"
    )
    max_page_size: int = Field(
        default=100, description="Larger pageSize values are rejected with 422"
    )

    model_config = SettingsConfigDict(
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("api_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @field_validator("cors_origins")
    @classmethod
    def split_cors_origins(cls, v: str) -> list[str]:
        return [origin.strip() for origin in v.split(",")]

    @field_validator("default_page_size", "max_page_size")
    @classmethod
    def validate_page_size(cls, v: int) -> int:
        if v < 1:
            raise ValueError("page sizes must be at least 1")
        return v

    @model_validator(mode="after")
    def validate_page_size_bounds(self) -> "Settings":
        """A default page larger than the maximum would reject itself."""
        if self.default_page_size > self.max_page_size:
            raise ValueError("default_page_size cannot exceed max_page_size")
        return self

    @property
    def is_development(self) -> bool:
        """Enables /config and the coloured console log format."""
        return self.environment == Environment.DEVELOPMENT


@lru_cache
def get_settings() -> Settings:
    return Settings()  # type: ignore[call-arg]


settings = get_settings()
