"""Game-wide constants for the ByteClicker simulation core.

These are the default tuning values; GameSettings exposes each of them as
an overridable setting.
"""

from __future__ import annotations

# =============================================================================
# Timing
# =============================================================================

DEFAULT_TICK_INTERVAL = 0.6
"""Seconds of accumulated frame time per automatic attack."""

# =============================================================================
# Progression
# =============================================================================

MIN_LEVEL = 1
"""Level every combatant starts at."""

MAX_LEVEL = 999
"""Level cap. Experience keeps accumulating past it, levels do not."""

BASE_EXPERIENCE_NEEDED = 30
"""Base term of the level-up threshold formula."""

GROWTH_MULTIPLIER = 1
"""Threshold grows by (GROWTH_MULTIPLIER + 1) ** level."""

STAT_GROWTH_STRENGTH = 5
STAT_GROWTH_DEFENSE = 4
STAT_GROWTH_SPEED = 2

EXPERIENCE_REWARD_DIVISOR = 2
"""The defeated combatant's threshold is divided by this before scaling."""

REWARD_REFERENCE_LEVEL = 1
"""Fixed level the experience reward is computed against."""

# =============================================================================
# Team
# =============================================================================

ROSTER_CAPACITY = 3
"""Number of roster slots a player owns."""

# =============================================================================
# Random Generation (half-open ranges)
# =============================================================================

HP_ROLL_MIN = 100
HP_ROLL_MAX = 1000

STAT_ROLL_MIN = 5
STAT_ROLL_MAX = 25

# =============================================================================
# Placeholder Creature
# =============================================================================

PLACEHOLDER_NAME = "PHoldermon"
PLACEHOLDER_HP = 200
PLACEHOLDER_STRENGTH = 20
PLACEHOLDER_DEFENSE = 10
PLACEHOLDER_SPEED = 10

DEFAULT_AREA_NAME = "Test1"


__all__ = [
    # Timing
    "DEFAULT_TICK_INTERVAL",
    # Progression
    "MIN_LEVEL",
    "MAX_LEVEL",
    "BASE_EXPERIENCE_NEEDED",
    "GROWTH_MULTIPLIER",
    "STAT_GROWTH_STRENGTH",
    "STAT_GROWTH_DEFENSE",
    "STAT_GROWTH_SPEED",
    "EXPERIENCE_REWARD_DIVISOR",
    "REWARD_REFERENCE_LEVEL",
    # Team
    "ROSTER_CAPACITY",
    # Random generation
    "HP_ROLL_MIN",
    "HP_ROLL_MAX",
    "STAT_ROLL_MIN",
    "STAT_ROLL_MAX",
    # Placeholder
    "PLACEHOLDER_NAME",
    "PLACEHOLDER_HP",
    "PLACEHOLDER_STRENGTH",
    "PLACEHOLDER_DEFENSE",
    "PLACEHOLDER_SPEED",
    "DEFAULT_AREA_NAME",
]
