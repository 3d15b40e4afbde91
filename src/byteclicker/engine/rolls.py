"""Random stat generation for new combatants.

Randomness is an injected capability: a StatRoller draws from any object
with a ``randrange(start, stop)`` method, so a seeded ``random.Random``
makes every roll (and therefore every fight) reproducible.
"""

from __future__ import annotations

import random
from typing import TYPE_CHECKING, Protocol

from byteclicker.core.config import get_settings
from byteclicker.core.exceptions import ConfigurationError
from byteclicker.core.logging import get_logger
from byteclicker.models.components import HitPointTracker, ProgressionTracker, StatBlock
from byteclicker.models.entities import Combatant
from byteclicker.models.enums import Attribute, LevelTier


if TYPE_CHECKING:
    from byteclicker.core.config import GameSettings


logger = get_logger(__name__)


class RandomSource(Protocol):
    """Supplier of bounded random integers."""

    def randrange(self, start: int, stop: int) -> int:
        """Return an integer in ``[start, stop)``."""
        ...


class StatRoller:
    """Rolls hit points and base stats for new combatants.

    Example:
        >>> roller = StatRoller(seed=42)
        >>> pet = roller.roll_combatant("Agumon", attribute=Attribute.VACCINE)
        >>> 100 <= pet.hit_points.max_hp < 1000
        True
    """

    def __init__(
        self,
        *,
        seed: int | None = None,
        rng: RandomSource | None = None,
        settings: GameSettings | None = None,
    ) -> None:
        """Initialize the stat roller.

        Args:
            seed: Seed for a private ``random.Random``.
            rng: Random source to draw from instead of a seeded one.
            settings: Tuning values; defaults to the application settings.

        Raises:
            ConfigurationError: If both ``seed`` and ``rng`` are given.
        """
        if seed is not None and rng is not None:
            raise ConfigurationError(
                "Pass either a seed or a random source, not both",
                config_key="seed",
            )
        self._rng: RandomSource = rng if rng is not None else random.Random(seed)
        self._settings = settings if settings is not None else get_settings().game
        logger.debug("StatRoller initialized", seed=seed, injected=rng is not None)

    @property
    def settings(self) -> GameSettings:
        return self._settings

    def roll_max_hp(self) -> int:
        """Roll a maximum HP in ``[hp_roll_min, hp_roll_max)``."""
        return self._rng.randrange(self._settings.hp_roll_min, self._settings.hp_roll_max)

    def roll_base_stats(self) -> StatBlock:
        """Roll each base stat independently in ``[stat_roll_min, stat_roll_max)``."""
        low, high = self._settings.stat_roll_min, self._settings.stat_roll_max
        return StatBlock(
            strength=self._rng.randrange(low, high),
            defense=self._rng.randrange(low, high),
            speed=self._rng.randrange(low, high),
        )

    def roll_combatant(
        self,
        name: str,
        *,
        level_tier: LevelTier = LevelTier.ROOKIE,
        attribute: Attribute = Attribute.FREE,
    ) -> Combatant:
        """Create a level 1 combatant at full health with rolled stats.

        Args:
            name: Display name.
            level_tier: Evolution stage.
            attribute: Elemental attribute.

        Returns:
            The new Combatant.
        """
        combatant = Combatant(
            name=name,
            level_tier=level_tier,
            attribute=attribute,
            hit_points=HitPointTracker.full(self.roll_max_hp()),
            progression=ProgressionTracker.from_settings(self._settings),
            base_stats=self.roll_base_stats(),
        )
        logger.info(
            "Combatant rolled",
            name=name,
            max_hp=combatant.hit_points.max_hp,
            base_stats=combatant.base_stats.as_tuple(),
        )
        return combatant


__all__ = [
    "RandomSource",
    "StatRoller",
]
