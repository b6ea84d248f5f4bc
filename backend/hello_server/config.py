"""
Hello Server — Application Configuration
==========================================

What:  Centralized configuration management using Pydantic Settings.
How:   Pydantic Settings reads from environment variables (or .env file),
       validates types/ranges, and provides a singleton `settings` object.
Who:   Imported by the application factory, the lifespan handler and the CLI.
When:  Loaded once at module import time; tests build their own instances.
"""

from typing import List, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Every setting has a development default, so the server starts with no
    environment at all. Attributes are grouped by concern.
    """

    # ── Server ────────────────────────────────────────────────────────────
    backend_host: str = Field(default="127.0.0.1")
    backend_port: int = Field(default=8080, ge=1, le=65535)

    # Valid: DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensures log level is a valid Python logging level name."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log_level '{v}'. Must be one of: {valid_levels}")
        return upper

    # ── Static Files ──────────────────────────────────────────────────────
    # Directory served under static_url_path; created on startup if missing
    static_root: str = Field(default="./static")
    static_url_path: str = Field(default="/static")

    @field_validator("static_url_path")
    @classmethod
    def validate_static_url_path(cls, v: str) -> str:
        """Mount paths must be absolute and carry no trailing slash."""
        if not v.startswith("/"):
            raise ValueError(f"static_url_path '{v}' must start with '/'")
        stripped = v.rstrip("/")
        if not stripped:
            raise ValueError("static_url_path cannot be the site root")
        return stripped

    # ── Middleware ────────────────────────────────────────────────────────
    # dispatch: BaseHTTPMiddleware subclass; asgi: raw ASGI wrapper
    middleware_style: Literal["dispatch", "asgi"] = Field(default="dispatch")

    # ── CORS ──────────────────────────────────────────────────────────────
    # Format: Comma-separated URLs (split by cors_origins_list)
    cors_origins: str = Field(default="http://localhost:3000")

    @property
    def cors_origins_list(self) -> List[str]:
        """Splits comma-separated CORS origins into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    # ── Pydantic Settings Config ──────────────────────────────────────────
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }


# Singleton instance — imported throughout the application
settings = Settings()
