"""Centralized configuration for search-server using Pydantic Settings."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


_LOG_LEVELS = frozenset({"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"})


class Settings(BaseSettings):
    """Strictly typed configuration loaded from environment variables.

    Every field can be overridden with a ``SEARCH_SERVER_`` prefixed variable,
    e.g. ``SEARCH_SERVER_MAX_RESULT_DOCUMENT_COUNT=10``.
    """

    model_config = SettingsConfigDict(
        env_prefix="SEARCH_SERVER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        validate_default=True,
        extra="ignore",  # Ignore extra env vars not defined in model
    )

    # Ranking
    max_result_document_count: int = Field(default=5, ge=1, description="Maximum documents returned per query")
    relevance_epsilon: float = Field(
        default=1e-6,
        gt=0.0,
        description="Relevances closer than this are treated as equal and ordered by rating",
    )

    # Metrics
    metrics_window_size: int = Field(default=1000, ge=1, description="Number of recent queries kept for stats")
    slow_query_ms: float = Field(default=10.0, ge=0.0, description="Queries slower than this count as slow")

    # Logging
    log_level: str = Field(default="info", description="Logging level")
    log_json: bool = Field(default=False, description="Emit structured JSON logs")

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        normalized = value.strip().upper()
        if normalized not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level '{value}'")
        return normalized.lower()
