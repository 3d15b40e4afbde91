"""Fixed-interval accumulator driving automatic attacks."""

from __future__ import annotations

import math

from byteclicker.core import constants
from byteclicker.core.exceptions import ConfigurationError, ValidationError


class SimulationClock:
    """Accumulates frame time and releases it in interval-sized chunks.

    Time is never discarded: a long frame leaves several pending intervals,
    and the remainder below one interval carries over to the next frame.

    Example:
        >>> clock = SimulationClock(0.6)
        >>> clock.advance(1.3)
        >>> clock.pending_intervals
        2
    """

    def __init__(self, tick_interval: float = constants.DEFAULT_TICK_INTERVAL) -> None:
        if not tick_interval > 0:
            raise ConfigurationError(
                f"tick_interval must be positive, got {tick_interval}",
                config_key="tick_interval",
            )
        self._tick_interval = tick_interval
        self._accumulated_time = 0.0

    @property
    def tick_interval(self) -> float:
        return self._tick_interval

    @property
    def accumulated_time(self) -> float:
        return self._accumulated_time

    @property
    def pending_intervals(self) -> int:
        """Number of whole intervals waiting to be consumed."""
        return int(self._accumulated_time // self._tick_interval)

    def advance(self, dt: float) -> None:
        """Add elapsed frame time.

        Args:
            dt: Non-negative, finite seconds since the last frame.

        Raises:
            ValidationError: If dt is negative or not finite.
        """
        if not math.isfinite(dt) or dt < 0:
            raise ValidationError(
                "Elapsed time must be a non-negative finite number",
                field_name="dt",
                invalid_value=dt,
            )
        self._accumulated_time += dt

    def consume_interval(self) -> bool:
        """Take one interval off the accumulator if a whole one is pending.

        Returns:
            True if an interval was consumed.
        """
        if self._accumulated_time >= self._tick_interval:
            self._accumulated_time -= self._tick_interval
            return True
        return False


__all__ = [
    "SimulationClock",
]
