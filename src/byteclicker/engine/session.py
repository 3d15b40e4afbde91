"""Game session: the top-level simulation container.

A GameSession owns the player state, the encounter and the clock, and
exposes the two driving operations the input/render layer calls:
``manual_attack()`` for a click and ``tick(dt)`` once per frame.

Example:
    >>> session = create_session(seed=7)
    >>> outcome = session.manual_attack()
    >>> outcome.damage
    25
    >>> outcomes = session.tick(1.2)
    >>> len(outcomes)
    2
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

from byteclicker.core import constants
from byteclicker.core.config import GameSettings, get_settings
from byteclicker.core.logging import get_logger
from byteclicker.engine.clock import SimulationClock
from byteclicker.engine.encounter import EncounterManager
from byteclicker.engine.rolls import RandomSource, StatRoller
from byteclicker.engine.views import SessionSnapshot, build_snapshot
from byteclicker.models.entities import Combatant, placeholder_combatant
from byteclicker.models.enums import Attribute, LevelTier
from byteclicker.models.roster import PlayerState, TeamRoster


logger = get_logger(__name__)


# =============================================================================
# Events
# =============================================================================


class SessionEventType(StrEnum):
    """Events a session emits to registered handlers."""

    ENEMY_DEFEATED = "enemy_defeated"
    """An enemy reached 0 HP; data carries the defeated snapshot."""

    LEVEL_UP = "level_up"
    """A roster member gained a level; data carries the member."""


class GameEvent:
    """An event emitted by the session.

    Attributes:
        event_type: Type of the event.
        data: Event data payload.
    """

    def __init__(self, event_type: SessionEventType, data: dict[str, Any] | None = None) -> None:
        self.event_type = event_type
        self.data = data or {}


# =============================================================================
# Attack Outcome
# =============================================================================


@dataclass
class AttackOutcome:
    """Result of resolving one attack.

    Attributes:
        damage: Damage the team dealt.
        automatic: Whether the attack came from the clock.
        defeated_enemy: Snapshot of the enemy if this attack defeated it.
        experience_awarded: Experience given to each roster member.
        leveled_up: Names of members that gained a level.
    """

    damage: int
    automatic: bool = False
    defeated_enemy: Combatant | None = None
    experience_awarded: int = 0
    leveled_up: list[str] = field(default_factory=list)

    @property
    def enemy_defeated(self) -> bool:
        return self.defeated_enemy is not None


# =============================================================================
# Game Session
# =============================================================================


class GameSession:
    """Owns and mutates all simulation state.

    There is no global session: the driving loop creates one and passes it
    around explicitly.

    Attributes:
        player: The player's team and counters.
        encounter: Active enemy and enemy pool.
        clock: Auto-attack accumulator.
    """

    def __init__(
        self,
        player: PlayerState,
        encounter: EncounterManager,
        clock: SimulationClock,
        *,
        roller: StatRoller | None = None,
        reward_reference_level: int = constants.REWARD_REFERENCE_LEVEL,
    ) -> None:
        """Initialize the session.

        Args:
            player: The player's state.
            encounter: The encounter to fight.
            clock: The auto-attack clock.
            roller: Stat roller used by ``recruit``.
            reward_reference_level: Level experience rewards are measured against.
        """
        self._player = player
        self._encounter = encounter
        self._clock = clock
        self._roller = roller if roller is not None else StatRoller()
        self._reward_reference_level = reward_reference_level
        self._event_handlers: dict[SessionEventType, list[Callable[[GameEvent], Any]]] = {}

    @property
    def player(self) -> PlayerState:
        return self._player

    @property
    def encounter(self) -> EncounterManager:
        return self._encounter

    @property
    def clock(self) -> SimulationClock:
        return self._clock

    # -------------------------------------------------------------------------
    # Driving operations
    # -------------------------------------------------------------------------

    def manual_attack(self) -> AttackOutcome:
        """Resolve one attack requested by the player.

        Returns:
            The AttackOutcome.
        """
        return self._resolve_attack(automatic=False)

    def tick(self, dt: float) -> list[AttackOutcome]:
        """Advance the clock and fire every automatic attack that is due.

        Attacks resolve in order, each one completely before the next.

        Args:
            dt: Non-negative seconds since the last frame.

        Returns:
            One AttackOutcome per automatic attack, oldest first.

        Raises:
            ValidationError: If dt is negative or not finite.
        """
        self._clock.advance(dt)

        outcomes: list[AttackOutcome] = []
        while self._clock.consume_interval():
            outcomes.append(self._resolve_attack(automatic=True))

        if len(outcomes) > 1:
            logger.debug("Auto-attack burst", attacks=len(outcomes), dt=dt)
        return outcomes

    # -------------------------------------------------------------------------
    # Team management
    # -------------------------------------------------------------------------

    def recruit(
        self,
        name: str,
        *,
        level_tier: LevelTier = LevelTier.ROOKIE,
        attribute: Attribute = Attribute.FREE,
    ) -> Combatant | None:
        """Roll a new creature and add it to the team.

        Returns:
            The new member, or None if the team was full and it was discarded.
        """
        combatant = self._roller.roll_combatant(name, level_tier=level_tier, attribute=attribute)
        if not self._player.add_combatant(combatant):
            logger.info("Team full, recruit discarded", name=name)
            return None
        return combatant

    def snapshot(self) -> SessionSnapshot:
        """Capture the state the render layer displays."""
        return build_snapshot(self)

    # -------------------------------------------------------------------------
    # Events
    # -------------------------------------------------------------------------

    def on_event(self, event_type: SessionEventType, handler: Callable[[GameEvent], Any]) -> None:
        """Register an event handler.

        Args:
            event_type: Type of event to handle.
            handler: Callback invoked with the GameEvent.
        """
        self._event_handlers.setdefault(event_type, []).append(handler)

    def _emit_event(self, event: GameEvent) -> None:
        for handler in self._event_handlers.get(event.event_type, []):
            try:
                handler(event)
            except Exception:
                logger.exception("Event handler error", event_type=event.event_type)

    # -------------------------------------------------------------------------
    # Resolution
    # -------------------------------------------------------------------------

    def _resolve_attack(self, *, automatic: bool) -> AttackOutcome:
        damage = self._player.attack_power()
        defeated = self._encounter.apply_damage(damage)
        self._player.manual_action_count += 1

        outcome = AttackOutcome(damage=damage, automatic=automatic)
        if defeated is None:
            return outcome

        reward = defeated.progression.experience_reward(self._reward_reference_level)
        leveled = self._player.team.award_experience_to_all(reward)
        self._player.total_defeated += 1

        outcome.defeated_enemy = defeated
        outcome.experience_awarded = reward
        outcome.leveled_up = [member.name for member in leveled]

        logger.info(
            "Experience awarded",
            enemy=defeated.name,
            experience=reward,
            total_defeated=self._player.total_defeated,
        )
        self._emit_event(GameEvent(SessionEventType.ENEMY_DEFEATED, {"enemy": defeated}))
        for member in leveled:
            logger.info("Level up", name=member.name, level=member.level)
            self._emit_event(GameEvent(SessionEventType.LEVEL_UP, {"member": member}))

        return outcome


# =============================================================================
# Factory
# =============================================================================


def create_session(
    settings: GameSettings | None = None,
    *,
    seed: int | None = None,
    rng: RandomSource | None = None,
    enemy_templates: Sequence[Combatant] | None = None,
    starters: Sequence[Combatant] | None = None,
    area_name: str = constants.DEFAULT_AREA_NAME,
) -> GameSession:
    """Build a ready-to-play session.

    With no arguments this matches the stock game start: one placeholder
    pet on the team and the placeholder creature as the only enemy.

    Args:
        settings: Tuning values; defaults to the application settings.
        seed: Seed for the session's stat roller.
        rng: Random source for the stat roller instead of a seed.
        enemy_templates: Enemy pool; must not be empty.
        starters: Initial team members; repeats and extras beyond capacity
            are discarded.
        area_name: Name of the area.

    Returns:
        The new GameSession.

    Raises:
        ConfigurationError: If the enemy pool is empty or settings are invalid.
    """
    game = settings if settings is not None else get_settings().game

    templates = (
        list(enemy_templates) if enemy_templates is not None else [placeholder_combatant(game)]
    )
    encounter = EncounterManager(templates, area_name=area_name)

    player = PlayerState(team=TeamRoster(capacity=game.roster_capacity))
    for starter in starters if starters is not None else [placeholder_combatant(game)]:
        if not player.add_combatant(starter):
            logger.warning("Starter discarded", name=starter.name, team_full=player.team.is_full)

    session = GameSession(
        player,
        encounter,
        SimulationClock(game.tick_interval),
        roller=StatRoller(seed=seed, rng=rng, settings=game),
        reward_reference_level=game.reward_reference_level,
    )
    logger.info(
        "Session created",
        area=area_name,
        team_size=len(player.team),
        tick_interval=game.tick_interval,
    )
    return session


__all__ = [
    "SessionEventType",
    "GameEvent",
    "AttackOutcome",
    "GameSession",
    "create_session",
]
