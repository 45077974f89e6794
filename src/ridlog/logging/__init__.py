"""Logging – request id decoration and setup helpers."""
from ridlog.logging.adapter import RequestIdLogger
from ridlog.logging.decorator import (
    ADAPTER_METHODS,
    DEFAULT_METHODS,
    STDLIB_METHODS,
    DecoratorConfig,
    decorate,
    default_format,
)
from ridlog.logging.factory import configure_logging, get_logger

__all__ = [
    "ADAPTER_METHODS",
    "DEFAULT_METHODS",
    "STDLIB_METHODS",
    "DecoratorConfig",
    "RequestIdLogger",
    "configure_logging",
    "decorate",
    "default_format",
    "get_logger",
]
