"""Configuration management for SFM."""

from pathlib import Path

from pydantic import AliasChoices, Field, SecretStr, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from sfm.core.constants import CacheLimits, GenerationConstants
from sfm.exceptions import ConfigurationError


class Config(BaseSettings):
    """Application configuration."""

    # LLM Configuration
    llm_provider: str = Field(
        default="gemini",
        alias="SFM_LLM_PROVIDER",
        description="LLM provider (gemini, openai, anthropic, etc.)",
    )
    llm_model: str = Field(
        default="gemini-2.5-flash",
        alias="SFM_LLM_MODEL",
        description="LLM model used to generate posts",
    )
    llm_api_key: SecretStr | None = Field(
        default=None,
        validation_alias=AliasChoices("SFM_LLM_API_KEY", "API_KEY", "llm_api_key"),
        description="LLM API key (defaults to provider's env var)",
    )
    llm_temperature: float = Field(
        default=0.9,
        alias="SFM_LLM_TEMPERATURE",
        description="LLM temperature for responses",
    )

    # Feed generation
    min_posts: int = Field(default=GenerationConstants.MIN_POSTS, alias="SFM_MIN_POSTS", ge=1)
    max_posts: int = Field(default=GenerationConstants.MAX_POSTS, alias="SFM_MAX_POSTS", ge=1)

    # Proxy and cache
    server_url: str | None = Field(
        default=None,
        alias="SFM_SERVER_URL",
        description="Proxy URL the feed command uses when --server is not given",
    )
    cache_dir: Path = Field(
        default_factory=lambda: Path.home() / ".sfm" / "cache",
        alias="SFM_CACHE_DIR",
        description="Directory for cached feeds",
    )
    cache_ttl_hours: float = Field(
        default=CacheLimits.FEED_TTL_HOURS,
        alias="SFM_CACHE_TTL_HOURS",
        description="How long generated feeds stay cached",
    )

    model_config = SettingsConfigDict(
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        populate_by_name=True,
        extra="ignore",
    )


def load_config() -> Config:
    """Load configuration from environment and .env file.

    Raises:
        ConfigurationError: If a setting has an invalid value
    """
    try:
        return Config()
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e
