"""Shared settings loaded from environment / .env file."""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configuration for the orbitgate CLI.

    Values are read from environment variables and from a ``.env`` file
    in the working directory.  Unset overrides defer to the gate config file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Shared
    log_level: str = "WARNING"

    # Gate
    gate_config: str = "gate.yaml"
    warning_threshold: int | None = None  # overrides warningThreshold in the config file
    analyzer: str | None = None  # overrides analysis.tool in the config file
