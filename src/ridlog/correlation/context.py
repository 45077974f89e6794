"""Correlation – request-scoped store backed by ``structlog.contextvars``."""
from __future__ import annotations

from collections.abc import Hashable, Iterator
from contextlib import contextmanager
from typing import Any
from uuid import uuid4

import structlog

DEFAULT_ATTRIBUTE = "rid"


class ContextVarsStore:
    """Ambient correlation store reading values bound via structlog.

    Every key bound with :func:`structlog.contextvars.bind_contextvars` lives
    in its own ``ContextVar``, so threads and asyncio tasks each see their
    own values.  Because the same variables feed
    ``structlog.contextvars.merge_contextvars``, a bound ``rid`` also shows up
    as a structured field in structlog output.
    """

    def get(self, key: Hashable) -> Any | None:
        return structlog.contextvars.get_contextvars().get(key)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


default_store = ContextVarsStore()


@contextmanager
def bind_request_id(rid: str | None = None, *, attribute: str = DEFAULT_ATTRIBUTE) -> Iterator[str]:
    """Bind a correlation value for the duration of a unit of work.

    A fresh ``uuid4`` string is generated when *rid* is not supplied.  The
    previous binding (if any) is restored on exit, so scopes nest::

        with bind_request_id() as rid:
            log.info("handling request")   # -> "[<rid>] - handling request"
    """
    if rid is None:
        rid = str(uuid4())
    tokens = structlog.contextvars.bind_contextvars(**{attribute: rid})
    try:
        yield rid
    finally:
        structlog.contextvars.reset_contextvars(**tokens)


def get_request_id(attribute: str = DEFAULT_ATTRIBUTE) -> Any | None:
    """Return the correlation value bound in the current context, or ``None``."""
    return default_store.get(attribute)


__all__ = [
    "DEFAULT_ATTRIBUTE",
    "ContextVarsStore",
    "bind_request_id",
    "default_store",
    "get_request_id",
]
