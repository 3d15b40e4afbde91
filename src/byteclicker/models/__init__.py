"""Data models for the ByteClicker simulation core.

Components (StatBlock, HitPointTracker, ProgressionTracker) compose into
Combatant entities, which the player owns through a TeamRoster.
"""

from __future__ import annotations

from byteclicker.models.components import (
    Component,
    HitPointTracker,
    ProgressionTracker,
    StatBlock,
    StatValue,
)
from byteclicker.models.entities import Combatant, placeholder_combatant
from byteclicker.models.enums import Attribute, LevelTier
from byteclicker.models.roster import PlayerState, TeamRoster


__all__ = [
    # Enums
    "LevelTier",
    "Attribute",
    # Components
    "StatValue",
    "Component",
    "StatBlock",
    "HitPointTracker",
    "ProgressionTracker",
    # Entities
    "Combatant",
    "placeholder_combatant",
    # Roster
    "TeamRoster",
    "PlayerState",
]
