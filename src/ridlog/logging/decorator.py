"""Logging – decorate a logger's output methods with the request id.

``decorate`` patches the selected methods of an existing logger object *in
place*: every holder of a reference to that logger sees the prefixed output.
Call it once at application start-up, before requests are served::

    import structlog
    from ridlog import bind_request_id, decorate

    log = structlog.get_logger()
    decorate(logger=log, methods=("info", "error"))

    with bind_request_id("abc123"):
        log.info("hello")          # event == "[abc123] - hello"

Decorating the same method twice wraps the wrapper and compounds the prefix;
nothing guards against that.
"""
from __future__ import annotations

import dataclasses
import functools
import logging
from collections.abc import Callable, Hashable, Sequence
from collections.abc import Set as AbstractSet
from typing import Any

from ridlog.correlation import DEFAULT_ATTRIBUTE, ContextStore, default_store
from ridlog.errors import InvalidOptionError

_log = logging.getLogger(__name__)

DEFAULT_METHODS: tuple[str, ...] = ("log", "info", "debug", "error", "warn")

# ``exception`` is left out: on ``logging.Logger`` it delegates to
# ``self.error``, which is already wrapped.
STDLIB_METHODS: tuple[str, ...] = ("debug", "info", "warning", "error", "critical", "log")

# Every level method of ``logging.LoggerAdapter`` routes through ``self.log``.
ADAPTER_METHODS: tuple[str, ...] = ("log",)

# Stdlib methods that emit a record and so accept ``stacklevel``.
_EMITTING_METHODS = frozenset(STDLIB_METHODS) | {"exception", "warn", "fatal"}


def default_format(value: Any = None) -> str:
    """Render *value* as ``[value]``, or ``[undefined-rid]`` when missing."""
    if value is None:
        value = "undefined-rid"
    return f"[{value}]"


@dataclasses.dataclass(frozen=True)
class DecoratorConfig:
    """Options for a single :func:`decorate` call.

    Attributes
    ----------
    logger:
        Object whose methods are replaced in place.
    attribute:
        Key the correlation value is looked up under.
    format:
        Renders the correlation value into the message prefix.
    methods:
        A single method name or a sequence of names to wrap.  Names the
        logger does not have are skipped.
    store:
        Context store to read from; ``None`` means the structlog
        contextvars store.
    message_index:
        Position of the message among the positional arguments.  ``-1``
        (the last one) suits loggers called as ``log.info(msg)`` or
        ``log.log(level, msg)``; use ``0`` for stdlib loggers called with
        ``%``-style arguments.
    """

    logger: Any
    attribute: Hashable = DEFAULT_ATTRIBUTE
    format: Callable[[Any], str] = default_format
    methods: str | Sequence[str] | AbstractSet[str] = DEFAULT_METHODS
    store: ContextStore | None = None
    message_index: int = -1


def check_format(format: Any) -> None:
    if not callable(format):
        raise InvalidOptionError("format", format, "must be callable")


def normalise_methods(methods: Any) -> tuple[str, ...]:
    """Return *methods* as an ordered tuple of names.

    A lone string becomes a one-element tuple.  Raises
    :class:`InvalidOptionError` for anything that is not a string, a
    sequence of strings or a set of strings.
    """
    if isinstance(methods, str):
        return (methods,)
    if isinstance(methods, (bytes, bytearray)) or not isinstance(methods, (Sequence, AbstractSet)):
        raise InvalidOptionError("methods", methods, "must be a string or a sequence of strings")
    names = tuple(methods)
    for name in names:
        if not isinstance(name, str):
            raise InvalidOptionError("methods", name, "must only contain strings")
    return names


def check_message_index(message_index: Any) -> None:
    if isinstance(message_index, bool) or not isinstance(message_index, int):
        raise InvalidOptionError("message_index", message_index, "must be an int")


def drop_adapter_levels(logger: Any, names: tuple[str, ...]) -> tuple[str, ...]:
    """Keep only ``log`` when an adapter would otherwise be wrapped twice.

    ``LoggerAdapter.info`` and friends call ``self.log``; wrapping both
    would prefix one call twice.
    """
    if not isinstance(logger, logging.LoggerAdapter) or "log" not in names:
        return names
    return tuple(name for name in names if name == "log" or name not in _EMITTING_METHODS)


def prefix_message(args: tuple[Any, ...], prefix: str, index: int = -1) -> tuple[Any, ...]:
    """Rewrite ``args[index]`` as ``"{prefix} - {args[index]}"``.

    Calls without a message at *index* (including zero-argument calls) are
    returned unchanged.
    """
    if not -len(args) <= index < len(args):
        return args
    index %= len(args)
    return (*args[:index], f"{prefix} - {args[index]}", *args[index + 1:])


def stacklevel_offset(logger: Any) -> int:
    """Extra frames a wrapper adds in front of a stdlib logger call."""
    return 1 if isinstance(logger, (logging.Logger, logging.LoggerAdapter)) else 0


def _wrap(
    method: Callable[..., Any],
    attribute: Hashable,
    format: Callable[[Any], str],
    store: ContextStore,
    message_index: int,
    offset: int,
) -> Callable[..., None]:
    @functools.wraps(method)
    def wrapper(*args: Any, **kwargs: Any) -> None:
        rid = store.get(attribute)
        if rid:
            args = prefix_message(args, format(rid), message_index)
        if offset:
            kwargs["stacklevel"] = kwargs.get("stacklevel", 1) + offset
        method(*args, **kwargs)

    return wrapper


def decorate(config: DecoratorConfig | None = None, /, **options: Any) -> None:
    """Prefix the output of *logger*'s methods with the current request id.

    Accepts a :class:`DecoratorConfig` or its fields as keyword arguments.
    The logger is mutated in place; nothing is returned.

    Raises
    ------
    InvalidOptionError
        When ``format`` is not callable, ``methods`` is neither a string
        nor a sequence of strings, or ``message_index`` is not an int.
        Raised before any method is replaced.
    """
    if config is None:
        config = DecoratorConfig(**options)
    elif options:
        raise TypeError("pass either a DecoratorConfig or keyword options, not both")

    check_format(config.format)
    check_message_index(config.message_index)
    logger = config.logger
    names = drop_adapter_levels(logger, normalise_methods(config.methods))

    store = config.store if config.store is not None else default_store
    stdlib_offset = stacklevel_offset(logger)

    wrapped: list[str] = []
    skipped: list[str] = []
    for name in names:
        method = getattr(logger, name, None)
        if not callable(method):
            skipped.append(name)
            continue
        offset = stdlib_offset if name in _EMITTING_METHODS else 0
        setattr(
            logger,
            name,
            _wrap(method, config.attribute, config.format, store, config.message_index, offset),
        )
        wrapped.append(name)

    _log.debug(
        "decorated %s with request id prefix: wrapped=%s skipped=%s",
        type(logger).__name__,
        wrapped,
        skipped,
    )


__all__ = [
    "ADAPTER_METHODS",
    "DEFAULT_METHODS",
    "STDLIB_METHODS",
    "DecoratorConfig",
    "decorate",
    "default_format",
]
