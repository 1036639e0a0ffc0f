"""Configuration management for pg-check-conn.

Everything that must not appear on the command line (the password) or
that only tunes diagnostics comes from the environment or a ``.env`` file.
"""

import sys
from typing import Optional

from dotenv import find_dotenv, load_dotenv
from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class Settings(BaseSettings):
    """Environment settings for a probe run."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    pgpassword: Optional[SecretStr] = Field(
        description="Password handed to the driver at connect time",
        default=None,
    )

    pgdebug: str = Field(
        description="Set to 1 to echo the connection string before connecting",
        default="",
    )

    log_level: str = Field(
        description="Logging level",
        default="WARNING",
    )

    @field_validator("pgpassword", mode="before")
    @classmethod
    def validate_password(cls, v):
        """Treat an empty PGPASSWORD as unset so libpq falls back to ~/.pgpass."""
        if v is None or (isinstance(v, str) and v == ""):
            return None
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        if not v:
            return "WARNING"

        if v.upper() not in VALID_LOG_LEVELS:
            print(f"⚠️ Invalid LOG_LEVEL '{v}', using WARNING", file=sys.stderr)
            return "WARNING"
        return v.upper()

    @property
    def debug_echo(self) -> bool:
        return self.pgdebug == "1"

    def password(self) -> Optional[str]:
        """Plain-text password, for the driver call only."""
        if self.pgpassword is None:
            return None
        return self.pgpassword.get_secret_value()

    @classmethod
    def from_env(cls) -> "Settings":
        """Load ``.env`` from the working directory into the environment, then read settings.

        Exporting the file lets libpq pick up any other PG* variables it holds.
        """
        load_dotenv(find_dotenv(usecwd=True))
        return cls()
