"""Core module providing configuration, logging, and base exceptions.

Exports:
    Exceptions:
        ByteClickerError: Base exception for all application errors.
        ConfigurationError: Invalid settings or enemy pool.
        ValidationError: Out-of-domain caller input.
        GameEngineError: Base for simulation errors.
        CombatError: Invalid damage resolution.

    Configuration:
        Settings: Main application settings class.
        GameSettings: Simulation tuning values.
        get_settings: Get the settings singleton.
        clear_settings_cache: Force settings reload.

    Logging:
        configure_logging: Set up application logging.
        get_logger: Get a configured logger instance.
        bind_context: Add context to log entries.
        clear_context: Clear logging context.
"""

from __future__ import annotations

from byteclicker.core.config import (
    GameSettings,
    Settings,
    clear_settings_cache,
    get_settings,
)
from byteclicker.core.exceptions import (
    ByteClickerError,
    CombatError,
    ConfigurationError,
    GameEngineError,
    ValidationError,
)
from byteclicker.core.logging import (
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
)


__all__ = [
    # Exceptions
    "ByteClickerError",
    "ConfigurationError",
    "ValidationError",
    "GameEngineError",
    "CombatError",
    # Configuration
    "Settings",
    "GameSettings",
    "get_settings",
    "clear_settings_cache",
    # Logging
    "configure_logging",
    "get_logger",
    "bind_context",
    "clear_context",
]
