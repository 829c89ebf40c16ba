"""Application settings loaded from environment variables."""

from functools import lru_cache
from typing import Literal

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .models import DEFAULT_BATCH_SIZE


class Settings(BaseSettings):
    """Settings for gh-starred. Read from the environment only."""

    model_config = SettingsConfigDict(
        env_prefix="GH_STARRED_",
        extra="ignore",
        populate_by_name=True,
    )

    github_token: str | None = Field(
        default=None,
        validation_alias=AliasChoices("GITHUB_TOKEN", "GH_TOKEN"),
    )
    batch_size: int = Field(default=DEFAULT_BATCH_SIZE, ge=1)
    # "gh" shells out to the GitHub CLI, "http" calls the REST API with httpx
    api_client: Literal["gh", "http"] = "gh"
    gh_path: str = "gh"
    api_base: str = "https://api.github.com"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
