"""
Notes API — Application Configuration
======================================

What:  Centralized configuration management using Pydantic Settings.
Why:   Type-safe environment variable loading with validation on startup.
How:   Pydantic Settings reads from environment variables (or .env file),
       validates types/ranges, and provides a singleton `settings` object.
Who:   Imported by main.py; create_app() accepts an override for tests.
When:  Loaded once at module import time.
"""

from enum import Enum
from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class OwnershipPolicy(str, Enum):
    """
    How strictly note ownership is enforced.

    STRICT: every route that touches a single note checks the owner.
            Notes of other users look exactly like missing notes (404),
            and replace/patch may not hand a note to somebody else (403).
    LEGACY: the older route table. Only create (403) and get-by-id (404)
            check ownership; replace, patch and delete accept any caller.
    """

    STRICT = "strict"
    LEGACY = "legacy"


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings have defaults suitable for local development.
    """

    # ── Application ───────────────────────────────────────────────────────
    app_name: str = Field(default="Notes API")

    # What: Which ownership rules the notes routes apply
    # Default strict: the legacy table lets any caller rewrite any note
    ownership_policy: OwnershipPolicy = Field(default=OwnershipPolicy.STRICT)

    # ── CORS ──────────────────────────────────────────────────────────────
    # Format: Comma-separated URLs
    cors_origins: str = Field(default="http://localhost:3000")

    @property
    def cors_origins_list(self) -> List[str]:
        """Splits comma-separated CORS origins into a list, dropping blanks."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    # ── Server ────────────────────────────────────────────────────────────
    backend_host: str = Field(default="0.0.0.0")
    backend_port: int = Field(default=8000, ge=1024, le=65535)

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

    @field_validator("ownership_policy", mode="before")
    @classmethod
    def normalize_policy(cls, v):
        """Accepts STRICT/Strict/strict from the environment."""
        if isinstance(v, str):
            return v.strip().lower()
        return v

    # ── Pydantic Settings Config ──────────────────────────────────────────
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
    }


# Singleton instance used by the module-level app in main.py
settings = Settings()
