"""Read-only session snapshots for the render layer.

The render layer never touches live models; it receives frozen views built
from the session once per frame.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field

from byteclicker.models.enums import Attribute, LevelTier


if TYPE_CHECKING:
    from byteclicker.engine.session import GameSession
    from byteclicker.models.entities import Combatant


class View(BaseModel):
    """Base class for immutable display views."""

    model_config = ConfigDict(frozen=True, extra="forbid")


class EnemyView(View):
    """Enemy panel contents."""

    name: str
    level: int
    level_tier: LevelTier
    attribute: Attribute
    current_hp: int
    max_hp: int
    hp_percentage: float


class RosterSlotView(View):
    """One occupied roster slot."""

    name: str
    level: int
    total_experience: int
    experience_to_next_level: int
    strength: int
    defense: int
    speed: int


class SessionSnapshot(View):
    """Everything the render layer draws in one frame."""

    area_name: str
    manual_action_count: int
    total_defeated: int
    attack_power: int
    enemy: EnemyView
    roster: list[RosterSlotView | None] = Field(default_factory=list)


def enemy_view(enemy: Combatant) -> EnemyView:
    return EnemyView(
        name=enemy.name,
        level=enemy.level,
        level_tier=enemy.level_tier,
        attribute=enemy.attribute,
        current_hp=enemy.hit_points.current_hp,
        max_hp=enemy.hit_points.max_hp,
        hp_percentage=enemy.hit_points.hp_percentage,
    )


def roster_slot_view(member: Combatant) -> RosterSlotView:
    power = member.effective_power()
    return RosterSlotView(
        name=member.name,
        level=member.level,
        total_experience=member.progression.total_experience,
        experience_to_next_level=member.progression.experience_to_next_level(),
        strength=power.strength,
        defense=power.defense,
        speed=power.speed,
    )


def build_snapshot(session: GameSession) -> SessionSnapshot:
    """Capture the session state for display.

    Args:
        session: The live session.

    Returns:
        A frozen SessionSnapshot, one roster entry per slot.
    """
    player = session.player
    return SessionSnapshot(
        area_name=session.encounter.area_name,
        manual_action_count=player.manual_action_count,
        total_defeated=player.total_defeated,
        attack_power=player.attack_power(),
        enemy=enemy_view(session.encounter.active_enemy),
        roster=[
            roster_slot_view(slot) if slot is not None else None for slot in player.team.slots
        ],
    )


__all__ = [
    "View",
    "EnemyView",
    "RosterSlotView",
    "SessionSnapshot",
    "enemy_view",
    "roster_slot_view",
    "build_snapshot",
]
