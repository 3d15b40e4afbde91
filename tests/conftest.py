"""Pytest configuration and shared fixtures.

This module provides common fixtures for all tests in the ByteClicker
test suite.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest


if TYPE_CHECKING:
    from collections.abc import Generator

    from byteclicker.core.config import GameSettings
    from byteclicker.engine.rolls import StatRoller
    from byteclicker.engine.session import GameSession
    from byteclicker.models.entities import Combatant


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_settings_cache() -> Generator[None, None, None]:
    """Reset the settings cache before and after each test."""
    from byteclicker.core.config import clear_settings_cache

    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def game_settings() -> GameSettings:
    """Default tuning values.

    Returns:
        GameSettings with the shipped defaults.
    """
    from byteclicker.core.config import GameSettings

    return GameSettings()


# =============================================================================
# Model Fixtures
# =============================================================================


@pytest.fixture
def striker() -> Combatant:
    """A level 1 ally whose effective strength is exactly 50.

    Returns:
        Combatant with base stats 45/10/10 and 300 HP.
    """
    from byteclicker.models import Combatant, HitPointTracker, StatBlock

    return Combatant(
        name="Striker",
        hit_points=HitPointTracker.full(300),
        base_stats=StatBlock(strength=45, defense=10, speed=10),
    )


@pytest.fixture
def training_dummy() -> Combatant:
    """A level 1 enemy with 200 HP.

    Returns:
        Combatant with 200 HP and 20/10/10 base stats.
    """
    from byteclicker.models import placeholder_combatant

    return placeholder_combatant(name="Training Dummy")


# =============================================================================
# Engine Fixtures
# =============================================================================


@pytest.fixture
def stat_roller(game_settings: GameSettings) -> StatRoller:
    """Create a StatRoller with a fixed seed for reproducible tests.

    Returns:
        StatRoller seeded with 42.
    """
    from byteclicker.engine.rolls import StatRoller

    return StatRoller(seed=42, settings=game_settings)


@pytest.fixture
def session(
    game_settings: GameSettings,
    striker: Combatant,
    training_dummy: Combatant,
) -> GameSession:
    """A session where each attack deals 50 damage to a 200 HP enemy.

    Returns:
        GameSession with the striker as the only team member.
    """
    from byteclicker.engine.session import create_session

    return create_session(
        game_settings,
        seed=42,
        enemy_templates=[training_dummy],
        starters=[striker],
    )
