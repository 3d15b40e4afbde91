"""Team roster and player state.

TeamRoster holds a fixed number of optional combatant slots. Slots fill in
order and never empty, so a combatant's position is stable for the whole
game.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from byteclicker.core import constants
from byteclicker.models.components import StatBlock
from byteclicker.models.entities import Combatant


class TeamRoster(BaseModel):
    """Fixed-capacity ordered collection of optional combatants.

    Attributes:
        capacity: Number of slots.
        slots: One entry per slot, ``None`` when empty.
    """

    model_config = ConfigDict(extra="forbid")

    capacity: int = Field(default=constants.ROSTER_CAPACITY, ge=1)
    slots: list[Combatant | None] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def fill_empty_slots(cls, data: Any) -> Any:
        """Pad ``slots`` with empty entries up to ``capacity``."""
        if not isinstance(data, dict):
            return data

        capacity = data.get("capacity", constants.ROSTER_CAPACITY)
        slots = list(data.get("slots") or [])
        if len(slots) > capacity:
            msg = f"{len(slots)} slots given for a roster of capacity {capacity}"
            raise ValueError(msg)

        uids = [slot.uid for slot in slots if isinstance(slot, Combatant)]
        if len(uids) != len(set(uids)):
            msg = "a combatant can occupy only one roster slot"
            raise ValueError(msg)
        return {**data, "slots": slots + [None] * (capacity - len(slots))}

    @property
    def is_full(self) -> bool:
        return all(slot is not None for slot in self.slots)

    def members(self) -> list[Combatant]:
        """Occupied slots in slot order."""
        return [slot for slot in self.slots if slot is not None]

    def __contains__(self, combatant: object) -> bool:
        if not isinstance(combatant, Combatant):
            return False
        return any(member.uid == combatant.uid for member in self.members())

    def add(self, combatant: Combatant) -> bool:
        """Place a combatant in the first empty slot.

        A combatant occupies at most one slot.

        Args:
            combatant: The combatant to add. The roster takes ownership.

        Returns:
            True if a slot was filled, False if the roster is full or the
            combatant already holds a slot.
        """
        if combatant in self:
            return False

        for index, slot in enumerate(self.slots):
            if slot is None:
                self.slots[index] = combatant
                return True
        return False

    def aggregate_power(self) -> StatBlock:
        """Sum of every member's effective power."""
        total = StatBlock.zero()
        for member in self.members():
            total = total.add(member.effective_power())
        return total

    def award_experience_to_all(self, amount: int) -> list[Combatant]:
        """Award the same experience to every member.

        Args:
            amount: Non-negative experience per member.

        Returns:
            Members that gained a level, in slot order.
        """
        return [member for member in self.members() if member.progression.award_experience(amount)]

    def __len__(self) -> int:
        return len(self.members())


class PlayerState(BaseModel):
    """The player's team and lifetime counters.

    Attributes:
        team: The player's roster.
        manual_action_count: Attacks performed, manual or automatic.
        total_defeated: Enemies defeated.
    """

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    team: TeamRoster = Field(default_factory=TeamRoster)
    manual_action_count: int = Field(default=0, ge=0)
    total_defeated: int = Field(default=0, ge=0)

    def add_combatant(self, combatant: Combatant) -> bool:
        """Add a combatant to the team; False if full or already a member."""
        return self.team.add(combatant)

    def attack_power(self) -> int:
        """Damage dealt per attack: the team's combined strength."""
        return self.team.aggregate_power().strength


__all__ = [
    "TeamRoster",
    "PlayerState",
]
