"""Application configuration from environment variables."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # HTTP
    host: str = Field(default="0.0.0.0", description="Bind address")
    port: int = Field(default=3002, description="Listening port")
    service_name: str = Field(
        default="catalog-service",
        description="Service name reported by the health endpoint",
    )

    # MongoDB
    mongo_uri: str = Field(
        default="mongodb://localhost:27017",
        description="MongoDB connection URI",
    )
    mongo_db: str = Field(default="catalogdb", description="MongoDB database name")
    mongo_collection: str = Field(default="books", description="Book collection name")
    request_timeout: float = Field(
        default=5.0,
        gt=0,
        description="Per-call store timeout in seconds",
    )
    connect_timeout: float = Field(
        default=10.0,
        gt=0,
        description="Startup store ping timeout in seconds",
    )

    # Application
    log_level: str = Field(default="INFO", description="Logging level")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
