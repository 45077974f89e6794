"""Error hierarchy — public re-export surface.

Hierarchy::

    RidLogError
    └── ConfigError
        └── InvalidOptionError   (also a TypeError)
"""

from ridlog.errors.base import RidLogError
from ridlog.errors.config import ConfigError, InvalidOptionError

__all__ = ["ConfigError", "InvalidOptionError", "RidLogError"]
