"""Decorator option validation errors."""
from __future__ import annotations

from ridlog.errors.base import RidLogError


class ConfigError(RidLogError):
    """Raised when decorator configuration is invalid."""
    default_code = "config_error"


class InvalidOptionError(ConfigError, TypeError):
    """An option was given a value of the wrong type.

    Also a :class:`TypeError`, so ``except TypeError`` keeps working for
    callers that do not know about the ridlog hierarchy.
    """
    default_code = "invalid_option"

    def __init__(self, option: str, value: object, reason: str) -> None:
        super().__init__(
            f"the {option!r} option {reason}. You passed in a {type(value).__name__}.",
            detail={"option": option, "type": type(value).__name__},
        )
        self.option = option
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidOptionError"]
