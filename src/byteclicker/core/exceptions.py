"""Custom exception hierarchy for the ByteClicker simulation core.

All exceptions inherit from ByteClickerError, enabling unified error handling
at the boundary with the input/render layer while preserving domain-specific
context in a ``details`` dictionary.

Example:
    >>> from byteclicker.core.exceptions import ConfigurationError
    >>> raise ConfigurationError("No enemy templates", config_key="enemy_templates")
"""

from __future__ import annotations

from typing import Any


class ByteClickerError(Exception):
    """Base exception for all ByteClicker errors.

    Attributes:
        message: Human-readable error description.
        details: Optional dictionary containing additional error context.
    """

    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        """Initialize the base exception.

        Args:
            message: Human-readable error description.
            details: Optional dictionary containing additional error context.
        """
        self.message = message
        self.details = details or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the exception message with optional details.

        Returns:
            Formatted error message including any provided details.
        """
        if self.details:
            detail_str = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
            return f"{self.message} [{detail_str}]"
        return self.message

    def __repr__(self) -> str:
        """Return a detailed string representation of the exception."""
        return f"{self.__class__.__name__}(message={self.message!r}, details={self.details!r})"


# =============================================================================
# Configuration & Validation Exceptions
# =============================================================================


class ConfigurationError(ByteClickerError):
    """Raised when the game is configured in a way it cannot run with.

    This includes invalid settings values and an empty enemy template pool,
    both of which are detected when the session is built rather than
    during play.
    """

    def __init__(
        self,
        message: str,
        *,
        config_key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize configuration error with config key context.

        Args:
            message: Human-readable error description.
            config_key: The configuration key that caused the error.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if config_key:
            combined_details["config_key"] = config_key
        super().__init__(message, details=combined_details)


class ValidationError(ByteClickerError):
    """Raised when a caller hands the core an out-of-domain value.

    Examples are a negative elapsed time or a negative experience award.
    """

    def __init__(
        self,
        message: str,
        *,
        field_name: str | None = None,
        invalid_value: Any | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize validation error with field context.

        Args:
            message: Human-readable error description.
            field_name: Name of the field that failed validation.
            invalid_value: The value that failed validation.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if field_name:
            combined_details["field_name"] = field_name
        if invalid_value is not None:
            combined_details["invalid_value"] = invalid_value
        super().__init__(message, details=combined_details)


# =============================================================================
# Game Engine Domain Exceptions
# =============================================================================


class GameEngineError(ByteClickerError):
    """Base exception for all simulation engine errors."""


class CombatError(GameEngineError):
    """Raised when damage resolution is asked to do something invalid."""

    def __init__(
        self,
        message: str,
        *,
        combatant_name: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize combat error with combatant context.

        Args:
            message: Human-readable error description.
            combatant_name: Name of the combatant involved.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if combatant_name:
            combined_details["combatant_name"] = combatant_name
        super().__init__(message, details=combined_details)


__all__ = [
    "ByteClickerError",
    "ConfigurationError",
    "ValidationError",
    "GameEngineError",
    "CombatError",
]
