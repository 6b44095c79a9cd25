"""
Configuration management for comention_graph.

Uses pydantic-settings for type-safe configuration with automatic
environment variable loading and validation. Variables are prefixed with
COMENTION_ (e.g. COMENTION_CORPUS_PATH).
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from comention_graph.constants import DEFAULT_MIN_EDGE_SENTENCES, DEFAULT_MIN_EDGE_WEIGHT


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables and `.env`.

    Command-line flags take precedence over these values.
    """

    model_config = SettingsConfigDict(
        env_prefix="COMENTION_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # Ignore extra env vars
    )

    # Input
    corpus_path: Path | None = Field(
        default=None,
        description="Parsed corpus (.json or .jsonl)",
    )

    # Cache
    comentions_cache: Path | None = Field(
        default=None,
        description="Co-mention cache file (XML)",
    )
    aliases_cache: Path | None = Field(
        default=None,
        description="Alias cache file (XML)",
    )

    # Edge filtering
    min_edge_sentences: int = Field(
        default=DEFAULT_MIN_EDGE_SENTENCES,
        ge=0,
        description="Drop edges co-mentioned in fewer sentences",
    )
    min_edge_weight: float | None = Field(
        default=DEFAULT_MIN_EDGE_WEIGHT,
        ge=-1.0,
        le=1.0,
        description="Drop edges with a lower NPMI weight",
    )

    log_dir: Path = Field(
        default=Path("logs"),
        description="Directory for log files written with --execute",
    )

    @field_validator("corpus_path", "comentions_cache", "aliases_cache", "min_edge_weight", mode="before")
    @classmethod
    def empty_string_to_none(cls, v):
        """Convert empty strings to None for optional fields."""
        if isinstance(v, str):
            v = v.strip()
            return v if v else None
        return v


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
