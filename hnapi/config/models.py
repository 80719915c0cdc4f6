"""Configuration models."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..version import __version__

DEFAULT_BASE_URL = "https://hacker-news.firebaseio.com/v0"


class ClientConfig(BaseModel):
    """Settings for one API client. Immutable once built."""

    model_config = ConfigDict(frozen=True)

    base_url: str = Field(DEFAULT_BASE_URL, description="API root, including the version path")
    user_agent: str = Field(f"hnapi/{__version__}", description="User-Agent header sent with every request")
    base_url_env: Optional[str] = Field(
        "HN_API_URL", description="Environment variable that overrides base_url"
    )

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Paths are joined with '/', so keep a single separator."""
        v = v.strip().rstrip("/")
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"base_url must be an http(s) URL, got {v!r}")
        return v


class LoggingConfig(BaseModel):
    """Logging configuration for the command line front end."""

    level: str = Field("WARNING", description="Log level (DEBUG, INFO, WARNING, ERROR)")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Accept level names in any case."""
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level


class ConfigModel(BaseModel):
    """Main configuration model."""

    api: ClientConfig = Field(default_factory=ClientConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
