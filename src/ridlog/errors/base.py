"""Root error class for ridlog."""

from __future__ import annotations

from typing import Any


class RidLogError(Exception):
    """Base for every error ridlog raises.

    ``code`` is a stable slug for log filters; ``detail`` carries the
    offending option so handlers need not parse the message.
    """

    default_code: str = "ridlog_error"

    def __init__(self, message: str, *, code: str | None = None, detail: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = dict(detail or {})

    def to_dict(self) -> dict[str, Any]:
        return {"code": self.code, "message": self.message, **self.detail}


__all__ = ["RidLogError"]
