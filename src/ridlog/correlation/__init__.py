"""Correlation – request-scoped context store."""
from ridlog.correlation.context import (
    DEFAULT_ATTRIBUTE,
    ContextVarsStore,
    bind_request_id,
    default_store,
    get_request_id,
)
from ridlog.correlation.provider import ContextStore

__all__ = [
    "DEFAULT_ATTRIBUTE",
    "ContextStore",
    "ContextVarsStore",
    "bind_request_id",
    "default_store",
    "get_request_id",
]
