"""
settings.py

This module provides configuration management for the tokenbind engine and its
command-line front end.

Features:
- Centralized configuration using Pydantic settings
- Environment overrides with the TKB_ prefix
- A shared Rich console for the command-line front end

Usage:
Import appsettings for configuration values.
"""

from typing import Final
from pydantic_settings import BaseSettings, SettingsConfigDict
from rich.console import Console

# Console instance for rich output
console: Final[Console] = Console()


class App(BaseSettings):
    """
    Engine settings model.

    Settings can be overridden through environment variables with TKB_ prefix.

    Attributes:
        beQuiet: Suppress debug logging output
        detailedOutput: Render the full binding error record in the CLI
        enumCaseSensitive: Match enum member names case-sensitively
        rejectLeftover: Fail a binding pass that leaves tokens unconsumed
    """

    beQuiet: bool = False
    detailedOutput: bool = False
    enumCaseSensitive: bool = False
    rejectLeftover: bool = False

    model_config = SettingsConfigDict(
        env_prefix="TKB_",  # Environment variables with this prefix override settings
        case_sensitive=False,  # Allow case-insensitive environment variables
        extra="ignore",
    )


# Create the application settings instance
appsettings: Final[App] = App()
