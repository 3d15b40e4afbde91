"""Component models composed into every ByteClicker combatant.

Components:
    StatBlock: Immutable (strength, defense, speed) triple.
    HitPointTracker: Current and maximum hit points with saturating updates.
    ProgressionTracker: Level, experience and the level-up formula.

All hit point and experience arithmetic is saturating or validated, so a
component can never leave its documented bounds.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Annotated, Self

from pydantic import BaseModel, ConfigDict, Field, computed_field, model_validator

from byteclicker.core import constants
from byteclicker.core.exceptions import ValidationError


if TYPE_CHECKING:
    from byteclicker.core.config import GameSettings


StatValue = Annotated[int, Field(ge=0, description="Non-negative stat value")]


# =============================================================================
# Base Component
# =============================================================================


class Component(BaseModel):
    """Base class for mutable combatant components.

    Assignment is validated so that field bounds hold after every mutation.
    """

    model_config = ConfigDict(
        validate_assignment=True,
        extra="forbid",
    )


# =============================================================================
# Stat Block
# =============================================================================


class StatBlock(BaseModel):
    """Additive triple of combat stats.

    Example:
        >>> StatBlock(strength=5, defense=4, speed=2) + StatBlock(strength=1)
        StatBlock(strength=6, defense=4, speed=2)
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    strength: StatValue = 0
    defense: StatValue = 0
    speed: StatValue = 0

    @classmethod
    def zero(cls) -> Self:
        """Identity element for addition."""
        return cls()

    def add(self, other: StatBlock) -> StatBlock:
        """Element-wise sum of two stat blocks.

        Args:
            other: The stat block to add.

        Returns:
            A new StatBlock; neither operand is modified.
        """
        return StatBlock(
            strength=self.strength + other.strength,
            defense=self.defense + other.defense,
            speed=self.speed + other.speed,
        )

    def scaled(self, factor: int) -> StatBlock:
        """Multiply every stat by a non-negative integer factor."""
        if factor < 0:
            raise ValidationError(
                "Stat scale factor must be non-negative",
                field_name="factor",
                invalid_value=factor,
            )
        return StatBlock(
            strength=self.strength * factor,
            defense=self.defense * factor,
            speed=self.speed * factor,
        )

    def __add__(self, other: object) -> StatBlock:
        if not isinstance(other, StatBlock):
            return NotImplemented
        return self.add(other)

    def as_tuple(self) -> tuple[int, int, int]:
        """Return the stats as a (strength, defense, speed) tuple."""
        return (self.strength, self.defense, self.speed)


# =============================================================================
# Hit Points
# =============================================================================


class HitPointTracker(Component):
    """Current and maximum hit points for one combatant.

    Invariant: ``0 <= current_hp <= max_hp``. Damage and healing saturate at
    the bounds instead of raising.

    Example:
        >>> hp = HitPointTracker.full(200)
        >>> hp.damage(50)
        50
        >>> hp.current_hp
        150
    """

    max_hp: int = Field(ge=1, description="Maximum hit points")
    current_hp: int = Field(ge=0, description="Current hit points")

    @model_validator(mode="after")
    def validate_current_within_max(self) -> Self:
        """Reject a current HP above the maximum."""
        if self.current_hp > self.max_hp:
            msg = f"current_hp ({self.current_hp}) exceeds max_hp ({self.max_hp})"
            raise ValueError(msg)
        return self

    @classmethod
    def full(cls, max_hp: int) -> Self:
        """Create a tracker at full health.

        Args:
            max_hp: Maximum (and starting) hit points.

        Returns:
            A new HitPointTracker with ``current_hp == max_hp``.
        """
        return cls(max_hp=max_hp, current_hp=max_hp)

    @computed_field(description="HP as percentage of max")
    @property
    def hp_percentage(self) -> float:
        return (self.current_hp / self.max_hp) * 100

    def is_alive(self) -> bool:
        """Check whether any hit points remain."""
        return self.current_hp > 0

    def heal(self, amount: int) -> int:
        """Restore hit points up to the maximum.

        Negative amounts are ignored.

        Args:
            amount: Hit points to restore.

        Returns:
            Hit points actually restored.
        """
        if amount < 0:
            return 0

        before = self.current_hp
        self.current_hp = min(self.current_hp + amount, self.max_hp)
        return self.current_hp - before

    def damage(self, amount: int) -> int:
        """Remove hit points, stopping at zero.

        Negative amounts are ignored.

        Args:
            amount: Hit points to remove.

        Returns:
            Hit points actually removed.
        """
        if amount < 0:
            return 0

        before = self.current_hp
        self.current_hp = max(self.current_hp - amount, 0)
        return before - self.current_hp

    def restore(self) -> None:
        """Refill to maximum hit points."""
        self.current_hp = self.max_hp


# =============================================================================
# Progression
# =============================================================================


def _default_stat_growth() -> StatBlock:
    return StatBlock(
        strength=constants.STAT_GROWTH_STRENGTH,
        defense=constants.STAT_GROWTH_DEFENSE,
        speed=constants.STAT_GROWTH_SPEED,
    )


class ProgressionTracker(Component):
    """Level, accumulated experience and the level-up formula.

    The experience needed to leave ``level`` is
    ``base_experience_needed * (growth_multiplier + 1) ** level``.

    Each award checks that threshold once, so a single award gains at most
    one level even when the experience would cover several.

    Attributes:
        level: Current level, between 1 and ``max_level``.
        total_experience: Experience accumulated over the creature's life.
        base_experience_needed: Base term of the threshold formula.
        growth_multiplier: Growth term of the threshold formula.
        per_level_stat_growth: Stats gained for every level.
        max_level: Level cap.
        experience_reward_divisor: Divides the threshold when computing the
            experience this combatant is worth.
    """

    level: int = Field(default=constants.MIN_LEVEL, ge=constants.MIN_LEVEL)
    total_experience: int = Field(default=0, ge=0)
    base_experience_needed: int = Field(default=constants.BASE_EXPERIENCE_NEEDED, ge=1)
    growth_multiplier: int = Field(default=constants.GROWTH_MULTIPLIER, ge=0)
    per_level_stat_growth: StatBlock = Field(default_factory=_default_stat_growth)
    max_level: int = Field(default=constants.MAX_LEVEL, ge=constants.MIN_LEVEL)
    experience_reward_divisor: int = Field(default=constants.EXPERIENCE_REWARD_DIVISOR, ge=1)

    @model_validator(mode="after")
    def validate_level_cap(self) -> Self:
        """Reject a level above the cap."""
        if self.level > self.max_level:
            msg = f"level ({self.level}) exceeds max_level ({self.max_level})"
            raise ValueError(msg)
        return self

    @classmethod
    def from_settings(cls, settings: GameSettings) -> Self:
        """Create a level 1 tracker using the configured tuning values."""
        return cls(
            base_experience_needed=settings.base_experience_needed,
            growth_multiplier=settings.growth_multiplier,
            per_level_stat_growth=StatBlock(
                strength=settings.stat_growth_strength,
                defense=settings.stat_growth_defense,
                speed=settings.stat_growth_speed,
            ),
            max_level=settings.max_level,
            experience_reward_divisor=settings.experience_reward_divisor,
        )

    @property
    def is_max_level(self) -> bool:
        return self.level >= self.max_level

    def level_up_threshold(self) -> int:
        """Total experience that must be exceeded to leave the current level."""
        return self.base_experience_needed * (self.growth_multiplier + 1) ** self.level

    def experience_to_next_level(self) -> int:
        """Experience still missing for the next level.

        The value is not clamped: it is negative when the total already
        exceeds the threshold but the level-up has not happened yet.

        Returns:
            Remaining experience, or 0 at the level cap.
        """
        if self.is_max_level:
            return 0
        return self.level_up_threshold() - self.total_experience

    def award_experience(self, amount: int) -> bool:
        """Add experience and gain at most one level.

        Args:
            amount: Non-negative experience to add.

        Returns:
            True if a level was gained.

        Raises:
            ValidationError: If amount is negative.
        """
        if amount < 0:
            raise ValidationError(
                "Experience award must be non-negative",
                field_name="amount",
                invalid_value=amount,
            )

        self.total_experience += amount
        if not self.is_max_level and self.total_experience > self.level_up_threshold():
            self.level += 1
            return True
        return False

    def experience_reward(self, relative_to_level: int) -> int:
        """Experience granted for defeating this combatant.

        Scales with how far this combatant's level is above
        ``relative_to_level``, with a multiplier of at least 1.

        Args:
            relative_to_level: Level the reward is measured against.

        Returns:
            ``threshold // divisor * clamp(level - relative_to_level, 1, max_level) + 1``
        """
        multiplier = min(max(self.level - relative_to_level, 1), self.max_level)
        return self.level_up_threshold() // self.experience_reward_divisor * multiplier + 1

    def effective_stat_bonus(self) -> StatBlock:
        """Stats granted by the current level."""
        return self.per_level_stat_growth.scaled(self.level)


__all__ = [
    "StatValue",
    "Component",
    "StatBlock",
    "HitPointTracker",
    "ProgressionTracker",
]
