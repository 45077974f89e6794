"""Correlation – ContextStore protocol."""
from __future__ import annotations

from collections.abc import Hashable
from typing import Any, Protocol


class ContextStore(Protocol):
    """Port: read-only lookup into request-scoped storage.

    Implementations must scope values to the unit of work that is currently
    executing (one inbound request, one task, one job).
    """

    def get(self, key: Hashable) -> Any | None: ...


__all__ = ["ContextStore"]
