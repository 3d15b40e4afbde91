"""Combatant entity and its factories.

A Combatant composes a HitPointTracker, a ProgressionTracker and a base
StatBlock with its identity fields. Allies and enemies are the same type;
ownership (roster slot or encounter) is what tells them apart.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field

from byteclicker.core import constants
from byteclicker.models.components import HitPointTracker, ProgressionTracker, StatBlock
from byteclicker.models.enums import Attribute, LevelTier


if TYPE_CHECKING:
    from byteclicker.core.config import GameSettings


class Combatant(BaseModel):
    """Any creature with hit points, stats and a progression track.

    Effective power is derived on every call from the base stats and the
    current level; it is never stored.

    Example:
        >>> pet = placeholder_combatant()
        >>> pet.effective_power()
        StatBlock(strength=25, defense=14, speed=12)
    """

    model_config = ConfigDict(
        validate_assignment=True,
        extra="forbid",
    )

    uid: UUID = Field(default_factory=uuid4, description="Unique combatant ID")
    name: str = Field(min_length=1, description="Display name")
    level_tier: LevelTier = Field(default=LevelTier.ROOKIE)
    attribute: Attribute = Field(default=Attribute.FREE)

    hit_points: HitPointTracker
    progression: ProgressionTracker = Field(default_factory=ProgressionTracker)
    base_stats: StatBlock = Field(default_factory=StatBlock)

    @property
    def level(self) -> int:
        return self.progression.level

    def is_alive(self) -> bool:
        return self.hit_points.is_alive()

    def effective_power(self) -> StatBlock:
        """Base stats plus the stat growth of the current level."""
        return self.base_stats.add(self.progression.effective_stat_bonus())

    def clone(self) -> Combatant:
        """Create an independent deep copy with its own uid.

        Mutating the clone never affects the original, and vice versa.
        """
        return self.model_copy(deep=True, update={"uid": uuid4()})


def placeholder_combatant(
    settings: GameSettings | None = None,
    *,
    name: str = constants.PLACEHOLDER_NAME,
) -> Combatant:
    """Create the stock creature used as starter pet and default enemy.

    Args:
        settings: Optional tuning values for the progression track.
        name: Display name.

    Returns:
        A level 1 Rookie/Free combatant with 200 HP and 20/10/10 base stats.
    """
    progression = (
        ProgressionTracker.from_settings(settings) if settings is not None else ProgressionTracker()
    )
    return Combatant(
        name=name,
        level_tier=LevelTier.ROOKIE,
        attribute=Attribute.FREE,
        hit_points=HitPointTracker.full(constants.PLACEHOLDER_HP),
        progression=progression,
        base_stats=StatBlock(
            strength=constants.PLACEHOLDER_STRENGTH,
            defense=constants.PLACEHOLDER_DEFENSE,
            speed=constants.PLACEHOLDER_SPEED,
        ),
    )


__all__ = [
    "Combatant",
    "placeholder_combatant",
]
