"""Enumeration types for ByteClicker combatants."""

from __future__ import annotations

from enum import StrEnum


class LevelTier(StrEnum):
    """Evolution stage of a creature."""

    ROOKIE = "rookie"
    CHAMPION = "champion"
    ULTIMATE = "ultimate"

    @property
    def display_name(self) -> str:
        """Get the capitalized name shown to players.

        Returns:
            Display name (e.g., 'Rookie').
        """
        return self.value.capitalize()


class Attribute(StrEnum):
    """Elemental attribute of a creature."""

    VACCINE = "vaccine"
    DATA = "data"
    VIRUS = "virus"
    FREE = "free"

    @property
    def display_name(self) -> str:
        """Get the upper-case label shown on the enemy panel.

        Returns:
            Display label (e.g., 'VIRUS').
        """
        return self.name


__all__ = [
    "LevelTier",
    "Attribute",
]
