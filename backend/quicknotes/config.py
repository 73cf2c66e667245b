"""
QuickNotes Backend: Application Configuration
================================================

What:  Centralized configuration management using Pydantic Settings.
How:   Pydantic Settings reads from environment variables (or .env file),
       validates types, and provides a singleton `settings` object.
Who:   Imported by the app factory, middleware and the CLI entry point.
When:  Loaded once at module import time.

The only setting that shapes behaviour is the bind address (`ADDR`, default
":80", host:port where an empty host means every interface). The rest
are operational knobs: log verbosity and CORS origins for the browser client.
"""

from typing import List, Tuple

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

DEFAULT_ADDR = ":80"


def split_addr(addr: str) -> Tuple[str, int]:
    """
    Split a "host:port" bind address into its parts.

    Examples:
        ":80"            → ("0.0.0.0", 80)
        "localhost:4000" → ("localhost", 4000)
        "[::1]:8080"     → ("::1", 8080)

    Raises:
        ValueError: No port separator, or the port is not an integer in 0..65535.
    """
    host, sep, port = addr.rpartition(":")
    if not sep:
        raise ValueError(f"Invalid bind address '{addr}': expected host:port")
    if not port.isdigit():
        raise ValueError(f"Invalid bind address '{addr}': port must be a number")
    port_number = int(port)
    if port_number > 65535:
        raise ValueError(f"Invalid bind address '{addr}': port out of range")

    if host.startswith("[") and host.endswith("]"):
        host = host[1:-1]
    return host or "0.0.0.0", port_number


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings have defaults suitable for running the API locally.
    """

    # ── Server ────────────────────────────────────────────────────────────
    # Format: host:port, e.g. ":80", "127.0.0.1:4000"
    addr: str = Field(default=DEFAULT_ADDR, description="Address to run API HTTP server on")

    @field_validator("addr")
    @classmethod
    def validate_addr(cls, v: str) -> str:
        """Rejects bind addresses uvicorn could not listen on."""
        split_addr(v)
        return v

    @property
    def bind_host(self) -> str:
        return split_addr(self.addr)[0]

    @property
    def bind_port(self) -> int:
        return split_addr(self.addr)[1]

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

    # ── CORS ──────────────────────────────────────────────────────────────
    # The web and mobile clients call the API from another origin.
    # Format: Comma-separated URLs, or "*" for any origin
    cors_origins: str = Field(default="*")

    @property
    def cors_origins_list(self) -> List[str]:
        """Splits comma-separated CORS origins into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    # ── Pydantic Settings Config ──────────────────────────────────────────
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
    }


# Singleton instance: imported throughout the application
settings = Settings()
