"""ByteClicker - idle creature-battling simulation core.

The core owns all game truth: hit points, experience, levels, team stats
and the enemy rotation. Windowing, drawing and input polling live outside
it and talk to it through two calls and one query.

Example:
    >>> from byteclicker import create_session
    >>>
    >>> session = create_session(seed=42)
    >>> session.recruit("Gabumon")  # fill a second team slot
    >>>
    >>> # once per click
    >>> outcome = session.manual_attack()
    >>>
    >>> # once per frame
    >>> session.tick(dt=0.016)
    >>> frame = session.snapshot()
    >>> print(frame.enemy.current_hp, frame.total_defeated)

Modules:
    core: Configuration, logging, and base exceptions.
    models: Pydantic V2 components, combatants and the team roster.
    engine: Encounters, the auto-attack clock and the game session.
"""

from __future__ import annotations

# Core
from byteclicker.core.config import GameSettings, Settings, get_settings
from byteclicker.core.exceptions import ByteClickerError, ConfigurationError
from byteclicker.core.logging import configure_logging, get_logger

# Models
from byteclicker.models import (
    Attribute,
    Combatant,
    HitPointTracker,
    LevelTier,
    PlayerState,
    ProgressionTracker,
    StatBlock,
    TeamRoster,
    placeholder_combatant,
)

# Engine
from byteclicker.engine import (
    AttackOutcome,
    EncounterManager,
    GameSession,
    SessionSnapshot,
    SimulationClock,
    StatRoller,
    create_session,
)


__version__ = "0.1.0"
__all__ = [
    "__version__",
    # Core
    "ByteClickerError",
    "ConfigurationError",
    "GameSettings",
    "Settings",
    "get_settings",
    "configure_logging",
    "get_logger",
    # Models
    "Attribute",
    "LevelTier",
    "StatBlock",
    "HitPointTracker",
    "ProgressionTracker",
    "Combatant",
    "placeholder_combatant",
    "TeamRoster",
    "PlayerState",
    # Engine
    "StatRoller",
    "EncounterManager",
    "SimulationClock",
    "AttackOutcome",
    "GameSession",
    "SessionSnapshot",
    "create_session",
]
