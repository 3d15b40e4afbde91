"""Simulation engine for the ByteClicker core.

Submodules:
    rolls: Injected random source and stat rolling for new combatants
    encounter: Active enemy, template pool and damage resolution
    clock: Fixed-interval accumulator for automatic attacks
    session: GameSession, the container the input/render layer drives
    views: Frozen snapshots for display

Example:
    >>> from byteclicker.engine import create_session
    >>> session = create_session(seed=1)
    >>> session.manual_attack().damage
    25
"""

from __future__ import annotations

# =============================================================================
# Random Generation
# =============================================================================
from byteclicker.engine.rolls import RandomSource, StatRoller

# =============================================================================
# Encounter & Clock
# =============================================================================
from byteclicker.engine.clock import SimulationClock
from byteclicker.engine.encounter import EncounterManager

# =============================================================================
# Views
# =============================================================================
from byteclicker.engine.views import (
    EnemyView,
    RosterSlotView,
    SessionSnapshot,
    build_snapshot,
)

# =============================================================================
# Session
# =============================================================================
from byteclicker.engine.session import (
    AttackOutcome,
    GameEvent,
    GameSession,
    SessionEventType,
    create_session,
)


__all__ = [
    # Random generation
    "RandomSource",
    "StatRoller",
    # Encounter & clock
    "EncounterManager",
    "SimulationClock",
    # Views
    "EnemyView",
    "RosterSlotView",
    "SessionSnapshot",
    "build_snapshot",
    # Session
    "AttackOutcome",
    "GameEvent",
    "GameSession",
    "SessionEventType",
    "create_session",
]
