"""
HelloUsers Backend — Application Configuration
===============================================

What:  Bind address and log level, loaded with Pydantic Settings.
How:   Every field has a default matching the fixed deployment
       (127.0.0.1:3000, INFO). Environment variables prefixed with
       HELLOUSERS_ (or a .env file) may override them; none are required.
Who:   Imported by main.py (logging, lifespan) and __main__.py (uvicorn bind).
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Application settings.

    Attributes:
        host:      Interface the listener binds to.
        port:      TCP port the listener binds to.
        log_level: Root logger level name.
    """

    # ── Server ────────────────────────────────────────────────────────────
    host: str = Field(default="127.0.0.1")
    port: int = Field(default=3000, ge=1, le=65535)

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

    # ── Pydantic Settings Config ──────────────────────────────────────────
    model_config = {
        "env_prefix": "HELLOUSERS_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }

    @property
    def public_url(self) -> str:
        """Address announced on startup."""
        return f"http://localhost:{self.port}"


# Singleton instance — imported throughout the application
settings = Settings()
