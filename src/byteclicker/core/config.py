"""Configuration management for the ByteClicker simulation core.

Settings are loaded with pydantic-settings, so every tuning value can be
overridden from environment variables or a .env file while the defaults in
``byteclicker.core.constants`` match the shipped game balance.

Example:
    >>> from byteclicker.core.config import get_settings
    >>> settings = get_settings()
    >>> settings.game.tick_interval
    0.6

Environment Variables:
    BYTECLICKER_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    BYTECLICKER_JSON_LOGS: Emit JSON log lines instead of console output
    BYTECLICKER_GAME_TICK_INTERVAL: Seconds between automatic attacks
    BYTECLICKER_GAME_ROSTER_CAPACITY: Number of team slots
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from byteclicker.core import constants
from byteclicker.core.exceptions import ConfigurationError


class GameSettings(BaseSettings):
    """Tuning values for the simulation.

    Attributes:
        tick_interval: Seconds of frame time per automatic attack.
        max_level: Level cap for every combatant.
        base_experience_needed: Base term of the level-up threshold.
        growth_multiplier: Threshold grows by (growth_multiplier + 1) ** level.
        stat_growth_strength: Strength gained per level.
        stat_growth_defense: Defense gained per level.
        stat_growth_speed: Speed gained per level.
        experience_reward_divisor: Divisor applied to the threshold for rewards.
        reward_reference_level: Level the reward is computed against.
        roster_capacity: Number of team slots.
        hp_roll_min: Inclusive lower bound for rolled max HP.
        hp_roll_max: Exclusive upper bound for rolled max HP.
        stat_roll_min: Inclusive lower bound for each rolled base stat.
        stat_roll_max: Exclusive upper bound for each rolled base stat.
    """

    model_config = SettingsConfigDict(
        env_prefix="BYTECLICKER_GAME_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    tick_interval: float = Field(
        default=constants.DEFAULT_TICK_INTERVAL,
        gt=0,
        description="Seconds between automatic attacks",
    )
    max_level: int = Field(
        default=constants.MAX_LEVEL,
        ge=constants.MIN_LEVEL,
        description="Level cap",
    )
    base_experience_needed: int = Field(
        default=constants.BASE_EXPERIENCE_NEEDED,
        ge=1,
        description="Base experience needed for a level",
    )
    growth_multiplier: int = Field(
        default=constants.GROWTH_MULTIPLIER,
        ge=0,
        description="Threshold growth multiplier",
    )
    stat_growth_strength: int = Field(default=constants.STAT_GROWTH_STRENGTH, ge=0)
    stat_growth_defense: int = Field(default=constants.STAT_GROWTH_DEFENSE, ge=0)
    stat_growth_speed: int = Field(default=constants.STAT_GROWTH_SPEED, ge=0)
    experience_reward_divisor: int = Field(
        default=constants.EXPERIENCE_REWARD_DIVISOR,
        ge=1,
        description="Divisor applied to the defeated combatant's threshold",
    )
    reward_reference_level: int = Field(
        default=constants.REWARD_REFERENCE_LEVEL,
        ge=constants.MIN_LEVEL,
        description="Reference level for experience rewards",
    )
    roster_capacity: int = Field(
        default=constants.ROSTER_CAPACITY,
        ge=1,
        description="Number of team slots",
    )
    hp_roll_min: int = Field(default=constants.HP_ROLL_MIN, ge=1)
    hp_roll_max: int = Field(default=constants.HP_ROLL_MAX, ge=2)
    stat_roll_min: int = Field(default=constants.STAT_ROLL_MIN, ge=0)
    stat_roll_max: int = Field(default=constants.STAT_ROLL_MAX, ge=1)

    @model_validator(mode="after")
    def validate_roll_ranges(self) -> "GameSettings":
        """Ensure both random ranges contain at least one value.

        Returns:
            Self if validation passes.

        Raises:
            ConfigurationError: If a lower bound is not below its upper bound.
        """
        if self.hp_roll_min >= self.hp_roll_max:
            raise ConfigurationError(
                f"hp_roll_min ({self.hp_roll_min}) must be less than "
                f"hp_roll_max ({self.hp_roll_max})",
                config_key="hp_roll_min",
            )
        if self.stat_roll_min >= self.stat_roll_max:
            raise ConfigurationError(
                f"stat_roll_min ({self.stat_roll_min}) must be less than "
                f"stat_roll_max ({self.stat_roll_max})",
                config_key="stat_roll_min",
            )
        return self


class Settings(BaseSettings):
    """Main application settings.

    Attributes:
        log_level: Application logging level.
        json_logs: Render logs as JSON lines.
        game: Simulation tuning values.
    """

    model_config = SettingsConfigDict(
        env_prefix="BYTECLICKER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_nested_delimiter="__",
    )

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )
    json_logs: bool = Field(default=False, description="Render logs as JSON")

    game: GameSettings = Field(default_factory=GameSettings)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the application settings singleton.

    Returns:
        The cached Settings instance.

    Raises:
        ConfigurationError: If configuration is missing or invalid.
    """
    try:
        return Settings()
    except ConfigurationError:
        raise
    except Exception as exc:
        raise ConfigurationError(
            f"Failed to load application settings: {exc}",
            details={"original_error": str(exc)},
        ) from exc


def clear_settings_cache() -> None:
    """Clear the settings cache, forcing a reload on next access."""
    get_settings.cache_clear()


__all__ = [
    "GameSettings",
    "Settings",
    "get_settings",
    "clear_settings_cache",
]
