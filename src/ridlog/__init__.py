"""
ridlog – prefix log messages with the current request id.

Import path convention::

    from ridlog.logging import decorate, RequestIdLogger
    from ridlog.correlation import bind_request_id
    from ridlog.errors import InvalidOptionError

The most used names are re-exported here.
"""

from ridlog.correlation import bind_request_id, get_request_id
from ridlog.errors import InvalidOptionError
from ridlog.logging import DecoratorConfig, RequestIdLogger, decorate, default_format

__version__ = "0.1.0"
__all__ = [
    "DecoratorConfig",
    "InvalidOptionError",
    "RequestIdLogger",
    "__version__",
    "bind_request_id",
    "decorate",
    "default_format",
    "get_request_id",
]
