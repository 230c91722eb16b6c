import sys
from pathlib import Path
from typing import Optional

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.exceptions.base import GatewayError
from src.exceptions.openai.openai_key_error import OpenAIKeyError


class Config(BaseSettings):
    """
    Application settings loaded from environment variables and .env files.

    Only the OpenAI API key is mandatory; everything else has a default that
    matches a local development setup.
    """

    # API Keys
    openai_api_key: str = Field(..., description="OpenAI API key used for all upstream calls")

    # OpenAI Configuration
    openai_base_url: str = Field(
        default="https://api.openai.com/v1", description="OpenAI REST API base URL"
    )
    chat_model: str = Field(default="gpt-4o", description="Model used by the chat endpoint")
    reasoning_model: str = Field(
        default="o3-mini", description="Model used by the reasoning endpoint"
    )
    realtime_model: str = Field(
        default="gpt-4o-realtime-preview-2024-12-17",
        description="Model requested for realtime sessions",
    )
    realtime_voice: str = Field(default="echo", description="Voice requested for realtime sessions")
    upstream_timeout: Optional[float] = Field(
        default=None, gt=0, description="Upstream request timeout in seconds (unset: no timeout)"
    )

    # Static Content
    static_dir: str = Field(default=".", description="Directory holding the HTML page")
    index_file: str = Field(default="index.html", description="HTML page served on /")

    # API Configuration
    api_host: str = Field(default="0.0.0.0", description="FastAPI host")
    api_port: int = Field(default=8080, ge=1, le=65535, description="FastAPI port")

    # Logging Configuration
    environment: str = Field(default="development", description="Environment name")
    log_level: str = Field(default="INFO", description="Logging level")

    @field_validator("openai_api_key")
    def validate_openai_api_key(cls, v):
        if not v:
            raise OpenAIKeyError("OPENAI_API_KEY is not set")
        return v

    @field_validator("log_level")
    def validate_log_level(cls, v):
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return v.upper()

    def get_index_path(self) -> Path:
        """Get the path of the HTML page served on the root route."""
        return Path(self.static_dir) / self.index_file

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


def load_config(env_file: Optional[str] = ".env") -> Config:
    """
    Load the application settings or terminate the process.

    Args:
        env_file: Optional .env file to read in addition to the environment

    Returns:
        Validated Config instance
    """
    try:
        return Config(_env_file=env_file)
    except (ValidationError, GatewayError) as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        sys.exit(1)


config = load_config()
