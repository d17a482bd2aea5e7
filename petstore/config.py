# petstore/config.py
"""
Application settings, read from the environment (prefix ``PETSTORE_``)
or from a ``.env`` file in the project root.

Usage:
    from petstore.config import get_settings
    settings = get_settings()
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    DEBUG: bool = Field(
        default=False,
        description="Log at DEBUG level (every request is logged)",
    )

    # Server

    API_PREFIX: str = Field(
        default="",
        description="Path the pets router is mounted under, e.g. /openapi/code_first.php",
    )

    DOCS_ENABLED: bool = Field(
        default=False,
        description="Serve /docs and /openapi.json (otherwise they are unknown paths like any other)",
    )

    API_HOST: str = Field(default="127.0.0.1", description="Host to bind the API server to")

    API_PORT: int = Field(default=8000, ge=1, le=65535, description="Port for the API server")

    # Client

    CLIENT_BASE_URL: str = Field(
        default="https://api.example.com",
        description="Remote pet store the client talks to",
    )

    CLIENT_API_KEY: str = Field(
        default="your-api-key-here",
        description="Sent as the api-key header on every client request",
    )

    model_config = SettingsConfigDict(
        env_prefix="PETSTORE_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
    )

    @property
    def log_level(self) -> str:
        return "DEBUG" if self.DEBUG else "INFO"

    @property
    def api_prefix(self) -> str:
        """API_PREFIX normalised to ``/segment`` form, or empty."""
        prefix = self.API_PREFIX.strip().rstrip("/")
        if prefix and not prefix.startswith("/"):
            prefix = f"/{prefix}"
        return prefix


@lru_cache
def get_settings() -> Settings:
    return Settings()
