"""Application settings — Pydantic-based configuration with YAML and env var support.

Configuration is loaded from (in order of precedence):
  1. Environment variables (SAMPLE_GALLERIES_ prefix)
  2. YAML config file (if specified)
  3. Default values
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings


class SamplesApiSettings(BaseModel):
    """Upstream samples search API configuration."""

    base_url: str = Field(
        default="",
        description="Samples search endpoint; required before the first search",
    )
    timeout: float = Field(default=30.0, gt=0, description="Outbound request timeout in seconds")


class ServerSettings(BaseModel):
    """MCP server configuration."""

    transport: Literal["stdio", "http"] = Field(default="stdio", description="MCP transport binding")
    host: str = Field(default="0.0.0.0", description="Server bind address (http transport)")
    port: int = Field(default=8080, description="Server port (http transport)")
    cors_origins: list[str] = Field(default=["*"], description="Allowed CORS origins (http transport)")


class ObservabilitySettings(BaseModel):
    """Observability configuration."""

    log_level: str = Field(default="info", description="Log level: debug, info, warning, error")
    log_format: str = Field(default="json", description="Log format: json, console")


class Settings(BaseSettings):
    """Root application settings.

    Configuration is loaded from environment variables with the
    SAMPLE_GALLERIES_ prefix. Nested settings use double underscores.

    Example:
        SAMPLE_GALLERIES_SAMPLES_API__BASE_URL=https://samples.example.com/api/samples
        SAMPLE_GALLERIES_SERVER__TRANSPORT=http
        SAMPLE_GALLERIES_SERVER__PORT=9090
    """

    model_config = {
        "env_prefix": "SAMPLE_GALLERIES_",
        "env_nested_delimiter": "__",
        "case_sensitive": False,
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }

    app_name: str = Field(default="sample-galleries", description="Application name")
    debug: bool = Field(default=False, description="Debug mode")

    samples_api: SamplesApiSettings = Field(default_factory=SamplesApiSettings)
    server: ServerSettings = Field(default_factory=ServerSettings)
    observability: ObservabilitySettings = Field(default_factory=ObservabilitySettings)

    @classmethod
    def from_yaml(cls, path: str | Path) -> Settings:
        """Load settings from a YAML configuration file.

        Values from the YAML file are used as defaults; environment variables
        still take precedence.

        Args:
            path: Path to the YAML config file.

        Returns:
            Populated Settings instance.
        """
        import yaml  # type: ignore[import-untyped]

        config_path = Path(path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(config_path) as f:
            data = yaml.safe_load(f) or {}

        return cls(**data)
