"""Enemy encounter management.

The EncounterManager owns the active enemy and the pool it is replaced
from. It has two states: an enemy is alive, or it has just been defeated
and a replacement is spawned before ``apply_damage`` returns.
"""

from __future__ import annotations

from collections.abc import Sequence

from byteclicker.core import constants
from byteclicker.core.exceptions import CombatError, ConfigurationError
from byteclicker.core.logging import get_logger
from byteclicker.models.entities import Combatant


logger = get_logger(__name__)


class EncounterManager:
    """Active enemy plus the template pool replacements come from.

    Replacements are always fresh full-health copies of the first template.

    Attributes:
        area_name: Name of the area shown in the status header.
        enemy_templates: Read-only enemy pool.
        active_enemy: The enemy currently being attacked.
    """

    def __init__(
        self,
        enemy_templates: Sequence[Combatant],
        *,
        area_name: str = constants.DEFAULT_AREA_NAME,
        active_enemy: Combatant | None = None,
    ) -> None:
        """Initialize the encounter.

        Args:
            enemy_templates: Enemy pool; copied, so later changes to the
                caller's combatants do not leak in.
            area_name: Name of the area.
            active_enemy: Starting enemy, copied like the templates; spawned
                from the pool if omitted.

        Raises:
            ConfigurationError: If the template pool is empty.
        """
        if not enemy_templates:
            raise ConfigurationError(
                "Enemy template pool must not be empty",
                config_key="enemy_templates",
            )

        self._area_name = area_name
        self._templates: tuple[Combatant, ...] = tuple(t.clone() for t in enemy_templates)
        self._active_enemy = (
            active_enemy.clone() if active_enemy is not None else self._spawn_next()
        )

        logger.info(
            "Encounter initialized",
            area=area_name,
            templates=len(self._templates),
            enemy=self._active_enemy.name,
        )

    @property
    def area_name(self) -> str:
        return self._area_name

    @property
    def enemy_templates(self) -> tuple[Combatant, ...]:
        return self._templates

    @property
    def active_enemy(self) -> Combatant:
        return self._active_enemy

    def apply_damage(self, amount: int) -> Combatant | None:
        """Damage the active enemy and replace it if it falls.

        Args:
            amount: Non-negative damage.

        Returns:
            A snapshot of the defeated enemy, or None if it survived.

        Raises:
            CombatError: If amount is negative.
        """
        if amount < 0:
            raise CombatError(
                f"Damage must be non-negative, got {amount}",
                combatant_name=self._active_enemy.name,
            )

        dealt = self._active_enemy.hit_points.damage(amount)
        logger.debug(
            "Damage applied",
            enemy=self._active_enemy.name,
            damage=dealt,
            hp=self._active_enemy.hit_points.current_hp,
        )

        if self._active_enemy.is_alive():
            return None

        defeated = self._active_enemy.clone()
        self._active_enemy = self._spawn_next()

        logger.info(
            "Enemy defeated",
            enemy=defeated.name,
            level=defeated.level,
            next_enemy=self._active_enemy.name,
        )
        return defeated

    def _spawn_next(self) -> Combatant:
        """Create the next enemy from the first template.

        Raises:
            ConfigurationError: If the template pool is empty.
        """
        if not self._templates:
            raise ConfigurationError(
                "Cannot spawn an enemy from an empty template pool",
                config_key="enemy_templates",
            )
        enemy = self._templates[0].clone()
        enemy.hit_points.restore()
        return enemy


__all__ = [
    "EncounterManager",
]
