"""Environment-based library settings. Read-only; no business logic."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from environment variables (prefix CHUNKFORGE_)."""

    model_config = SettingsConfigDict(
        env_prefix="CHUNKFORGE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = Field(default="chunkforge", description="Name used in log records")
    environment: Literal["development", "staging", "production"] = Field(
        default="development", description="Runtime environment"
    )
    log_level: str = Field(default="INFO", description="Log level name")

    # Profiles (see config/chunking/static.json and config/embedding/static.json)
    default_chunking_profile: str = Field(default="active", description="Chunking profile used when none is given")
    default_embedding_profile: str = Field(default="active", description="Embedding profile used when none is given")

    # OpenAI (for embedding strategy)
    openai_api_key: str = Field(default="", description="OpenAI API key for embeddings")

    # AWS Bedrock (for embedding strategy)
    aws_region: str = Field(default="us-east-1", description="AWS region for Bedrock")


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance."""
    return Settings()
