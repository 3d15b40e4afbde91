"""Tests for component models."""

from __future__ import annotations

import pydantic
import pytest

from byteclicker.core.config import GameSettings
from byteclicker.core.exceptions import ValidationError
from byteclicker.models import HitPointTracker, ProgressionTracker, StatBlock


class TestStatBlock:
    """Tests for StatBlock."""

    def test_default_is_zero(self) -> None:
        """Test default stats are all zero."""
        assert StatBlock() == StatBlock.zero() == StatBlock(strength=0, defense=0, speed=0)

    def test_add(self) -> None:
        """Test element-wise addition."""
        total = StatBlock(strength=1, defense=2, speed=3).add(
            StatBlock(strength=10, defense=20, speed=30)
        )
        assert total == StatBlock(strength=11, defense=22, speed=33)

    def test_plus_operator(self) -> None:
        """Test the + operator matches add."""
        a = StatBlock(strength=5, defense=4, speed=2)
        b = StatBlock(strength=20, defense=10, speed=10)
        assert a + b == a.add(b)

    def test_zero_is_identity(self) -> None:
        """Test adding zero leaves stats unchanged."""
        stats = StatBlock(strength=7, defense=8, speed=9)
        assert stats + StatBlock.zero() == stats

    def test_scaled(self) -> None:
        """Test integer scaling."""
        assert StatBlock(strength=5, defense=4, speed=2).scaled(3).as_tuple() == (15, 12, 6)

    def test_negative_scale_rejected(self) -> None:
        """Test that negative scale factors are rejected."""
        with pytest.raises(ValidationError):
            StatBlock(strength=1).scaled(-1)

    def test_negative_stat_rejected(self) -> None:
        """Test that stats must be non-negative."""
        with pytest.raises(pydantic.ValidationError):
            StatBlock(strength=-1)

    def test_immutability(self) -> None:
        """Test that StatBlock is frozen."""
        stats = StatBlock(strength=16)
        with pytest.raises(pydantic.ValidationError):
            stats.strength = 18  # type: ignore[misc]


class TestHitPointTracker:
    """Tests for HitPointTracker."""

    def test_full(self) -> None:
        """Test trackers start at full health."""
        hp = HitPointTracker.full(250)
        assert hp.current_hp == hp.max_hp == 250
        assert hp.is_alive()

    def test_damage(self) -> None:
        """Test damage reduces current HP."""
        hp = HitPointTracker.full(200)
        assert hp.damage(50) == 50
        assert hp.current_hp == 150

    def test_overkill_stops_at_zero(self) -> None:
        """Test damage beyond current HP leaves exactly zero."""
        hp = HitPointTracker(max_hp=200, current_hp=30)
        assert hp.damage(500) == 30
        assert hp.current_hp == 0
        assert not hp.is_alive()

    def test_exact_lethal_damage(self) -> None:
        """Test damage equal to current HP leaves exactly zero."""
        hp = HitPointTracker(max_hp=200, current_hp=30)
        hp.damage(30)
        assert hp.current_hp == 0

    def test_heal(self) -> None:
        """Test healing."""
        hp = HitPointTracker(max_hp=30, current_hp=10)
        assert hp.heal(15) == 15
        assert hp.current_hp == 25

    def test_heal_cannot_exceed_max(self) -> None:
        """Test that healing cannot exceed max HP."""
        hp = HitPointTracker(max_hp=30, current_hp=25)
        assert hp.heal(20) == 5
        assert hp.current_hp == 30

    def test_negative_heal_is_ignored(self) -> None:
        """Test that negative healing is a no-op."""
        hp = HitPointTracker(max_hp=30, current_hp=10)
        assert hp.heal(-5) == 0
        assert hp.current_hp == 10

    def test_negative_damage_is_ignored(self) -> None:
        """Test that negative damage is a no-op."""
        hp = HitPointTracker(max_hp=30, current_hp=10)
        assert hp.damage(-5) == 0
        assert hp.current_hp == 10

    def test_zero_is_idempotent(self) -> None:
        """Test damage(0) and heal(0) never change HP."""
        hp = HitPointTracker(max_hp=30, current_hp=12)
        hp.damage(0)
        hp.heal(0)
        assert hp.current_hp == 12

    @pytest.mark.parametrize("start", [0, 1, 99, 200])
    @pytest.mark.parametrize("amount", [0, 1, 50, 199, 200, 10_000])
    def test_damage_and_heal_stay_in_bounds(self, start: int, amount: int) -> None:
        """Test damage and heal match the saturating formulas."""
        damaged = HitPointTracker(max_hp=200, current_hp=start)
        damaged.damage(amount)
        assert damaged.current_hp == max(start - amount, 0)
        assert 0 <= damaged.current_hp <= damaged.max_hp

        healed = HitPointTracker(max_hp=200, current_hp=start)
        healed.heal(amount)
        assert healed.current_hp == min(start + amount, 200)

    def test_restore(self) -> None:
        """Test restore refills to max."""
        hp = HitPointTracker(max_hp=80, current_hp=0)
        hp.restore()
        assert hp.current_hp == 80

    def test_hp_percentage(self) -> None:
        """Test HP percentage calculation."""
        assert HitPointTracker(max_hp=200, current_hp=50).hp_percentage == 25.0

    def test_current_above_max_rejected(self) -> None:
        """Test that current HP above max is rejected."""
        with pytest.raises(pydantic.ValidationError):
            HitPointTracker(max_hp=10, current_hp=11)

    def test_negative_assignment_rejected(self) -> None:
        """Test that assignments are validated."""
        hp = HitPointTracker.full(10)
        with pytest.raises(pydantic.ValidationError):
            hp.current_hp = -1


class TestProgressionTracker:
    """Tests for ProgressionTracker."""

    def test_defaults(self) -> None:
        """Test a new tracker is level 1 with no experience."""
        progression = ProgressionTracker()
        assert progression.level == 1
        assert progression.total_experience == 0
        assert progression.per_level_stat_growth == StatBlock(strength=5, defense=4, speed=2)

    @pytest.mark.parametrize("level,expected", [(1, 60), (2, 120), (3, 240), (10, 30 * 2**10)])
    def test_level_up_threshold(self, level: int, expected: int) -> None:
        """Test the threshold formula base * (growth + 1) ** level."""
        assert ProgressionTracker(level=level).level_up_threshold() == expected

    def test_threshold_with_growth_multiplier(self) -> None:
        """Test a larger growth multiplier steepens the curve."""
        progression = ProgressionTracker(level=2, growth_multiplier=2)
        assert progression.level_up_threshold() == 30 * 9

    def test_experience_to_next_level(self) -> None:
        """Test remaining experience before the next level."""
        progression = ProgressionTracker(total_experience=25)
        assert progression.experience_to_next_level() == 35

    def test_experience_to_next_level_can_be_negative(self) -> None:
        """Test the remaining experience is reported unclamped."""
        progression = ProgressionTracker()
        progression.award_experience(1000)
        assert progression.level == 2
        assert progression.experience_to_next_level() == 120 - 1000

    def test_experience_to_next_level_at_cap(self) -> None:
        """Test remaining experience is zero at the level cap."""
        assert ProgressionTracker(level=999).experience_to_next_level() == 0

    def test_award_below_threshold(self) -> None:
        """Test reaching the threshold exactly does not level up."""
        progression = ProgressionTracker()
        assert progression.award_experience(60) is False
        assert progression.level == 1

    def test_award_above_threshold(self) -> None:
        """Test exceeding the threshold gains a level."""
        progression = ProgressionTracker()
        assert progression.award_experience(61) is True
        assert progression.level == 2
        assert progression.total_experience == 61

    def test_award_gains_at_most_one_level(self) -> None:
        """Test a huge award still gains only one level."""
        progression = ProgressionTracker()
        progression.award_experience(1_000_000)
        assert progression.level == 2

    def test_level_and_experience_never_decrease(self) -> None:
        """Test monotonicity across a sequence of awards."""
        progression = ProgressionTracker()
        previous = (progression.level, progression.total_experience)
        for amount in [0, 31, 31, 0, 500, 7, 10_000, 3]:
            progression.award_experience(amount)
            current = (progression.level, progression.total_experience)
            assert current[0] >= previous[0]
            assert current[1] >= previous[1]
            previous = current

    def test_level_cap(self) -> None:
        """Test experience accumulates at the cap but the level does not."""
        progression = ProgressionTracker(level=999)
        assert progression.is_max_level
        assert progression.award_experience(1_000_000) is False
        assert progression.level == 999
        assert progression.total_experience == 1_000_000

    def test_custom_level_cap(self) -> None:
        """Test a configured cap is honored."""
        progression = ProgressionTracker(level=3, max_level=3)
        progression.award_experience(10_000)
        assert progression.level == 3

    def test_level_above_cap_rejected(self) -> None:
        """Test that level cannot exceed the cap."""
        with pytest.raises(pydantic.ValidationError):
            ProgressionTracker(level=1000)

    def test_level_zero_rejected(self) -> None:
        """Test that level starts at 1."""
        with pytest.raises(pydantic.ValidationError):
            ProgressionTracker(level=0)

    def test_negative_award_rejected(self) -> None:
        """Test that negative experience raises ValidationError."""
        progression = ProgressionTracker()
        with pytest.raises(ValidationError):
            progression.award_experience(-1)
        assert progression.total_experience == 0

    def test_experience_reward_same_level(self) -> None:
        """Test a level 1 enemy against reference level 1."""
        assert ProgressionTracker().experience_reward(relative_to_level=1) == 31

    def test_experience_reward_scales_with_level_gap(self) -> None:
        """Test the reward multiplier is the level difference."""
        progression = ProgressionTracker(level=5)
        assert progression.experience_reward(relative_to_level=1) == 960 // 2 * 4 + 1

    def test_experience_reward_minimum_multiplier(self) -> None:
        """Test a lower-level enemy still grants a multiplier of 1."""
        progression = ProgressionTracker(level=2)
        assert progression.experience_reward(relative_to_level=10) == 120 // 2 + 1

    def test_experience_reward_truncates(self) -> None:
        """Test integer division truncates the halved threshold."""
        progression = ProgressionTracker(base_experience_needed=7, growth_multiplier=0)
        assert progression.experience_reward(relative_to_level=1) == 7 // 2 + 1

    def test_effective_stat_bonus(self) -> None:
        """Test stat growth scales with level."""
        bonus = ProgressionTracker(level=3).effective_stat_bonus()
        assert bonus == StatBlock(strength=15, defense=12, speed=6)

    def test_from_settings(self) -> None:
        """Test tuning values flow from settings."""
        settings = GameSettings(
            base_experience_needed=10,
            growth_multiplier=2,
            stat_growth_strength=1,
            stat_growth_defense=1,
            stat_growth_speed=1,
            max_level=50,
        )
        progression = ProgressionTracker.from_settings(settings)

        assert progression.level_up_threshold() == 30
        assert progression.effective_stat_bonus() == StatBlock(strength=1, defense=1, speed=1)
        assert progression.max_level == 50
