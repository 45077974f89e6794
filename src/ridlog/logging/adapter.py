"""Logging – RequestIdLogger.

A logger wrapper that prefixes the event with the current request id
without touching the wrapped logger.
"""
from __future__ import annotations

from collections.abc import Callable, Hashable
from typing import Any

from ridlog.correlation import DEFAULT_ATTRIBUTE, ContextStore, default_store
from ridlog.logging.decorator import check_format, default_format, stacklevel_offset


class RequestIdLogger:
    """Wraps any logger, prefixing each event with the current request id.

    Unlike :func:`~ridlog.logging.decorator.decorate` the inner logger is
    left as it is; callers that should see the prefix use this object
    instead.

    Parameters
    ----------
    logger:
        The underlying logger (stdlib, structlog or anything with the
        usual level methods).
    attribute:
        Key the correlation value is looked up under.
    format:
        Renders the correlation value into the prefix.
    store:
        Context store to read from.  Defaults to the structlog contextvars
        store.

    Example
    -------
    ::

        import structlog
        from ridlog import RequestIdLogger, bind_request_id

        log = RequestIdLogger(structlog.get_logger("orders"))
        with bind_request_id("abc123"):
            log.info("order_created", order_id=42)
            # event == "[abc123] - order_created", order_id=42
    """

    def __init__(
        self,
        logger: Any,
        *,
        attribute: Hashable = DEFAULT_ATTRIBUTE,
        format: Callable[[Any], str] = default_format,
        store: ContextStore | None = None,
    ) -> None:
        check_format(format)
        self._logger = logger
        self._attribute = attribute
        self._format = format
        self._store = store if store is not None else default_store
        # public method -> _emit -> stdlib logger
        self._stacklevel = 2 * stacklevel_offset(logger)

    @property
    def wrapped(self) -> Any:
        return self._logger

    def _prefix(self, event: Any) -> Any:
        rid = self._store.get(self._attribute)
        if rid:
            return f"{self._format(rid)} - {event}"
        return event

    def _emit(
        self,
        method_name: str,
        head: tuple[Any, ...],
        event: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> None:
        method = getattr(self._logger, method_name, None)
        if method is None:
            return
        if self._stacklevel:
            kwargs["stacklevel"] = kwargs.get("stacklevel", 1) + self._stacklevel
        method(*head, self._prefix(event), *args, **kwargs)

    def debug(self, event: Any, *args: Any, **kwargs: Any) -> None:
        self._emit("debug", (), event, args, kwargs)

    def info(self, event: Any, *args: Any, **kwargs: Any) -> None:
        self._emit("info", (), event, args, kwargs)

    def warning(self, event: Any, *args: Any, **kwargs: Any) -> None:
        self._emit("warning", (), event, args, kwargs)

    # common alias
    warn = warning

    def error(self, event: Any, *args: Any, **kwargs: Any) -> None:
        self._emit("error", (), event, args, kwargs)

    def exception(self, event: Any, *args: Any, **kwargs: Any) -> None:
        self._emit("exception", (), event, args, kwargs)

    def critical(self, event: Any, *args: Any, **kwargs: Any) -> None:
        self._emit("critical", (), event, args, kwargs)

    def log(self, level: Any, event: Any, *args: Any, **kwargs: Any) -> None:
        self._emit("log", (level,), event, args, kwargs)

    def bind(self, **kwargs: Any) -> "RequestIdLogger":
        """Return a new :class:`RequestIdLogger` around ``logger.bind(**kwargs)``."""
        try:
            bound_logger = self._logger.bind(**kwargs)
        except AttributeError:
            bound_logger = self._logger
        return RequestIdLogger(
            bound_logger,
            attribute=self._attribute,
            format=self._format,
            store=self._store,
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._logger!r}, attribute={self._attribute!r})"


__all__ = ["RequestIdLogger"]
