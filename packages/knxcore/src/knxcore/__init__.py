# packages/knxcore/src/knxcore/__init__.py
from __future__ import annotations

"""knxcore - socle partagé des translators KNX (erreurs, config, logging)."""

__version__ = "0.1.0"

from .config import KnxConfig
from .errors import (
    KNXError,
    KNXFormatError,
    OutOfRangeError,
    InvalidTokenError,
    UnsupportedSubtypeError,
    UnknownSubtypeError,
    UnknownFlagError,
    BufferTooShortError,
)

__all__ = [
    "__version__",
    "KnxConfig",
    "KNXError", "KNXFormatError", "OutOfRangeError", "InvalidTokenError",
    "UnsupportedSubtypeError", "UnknownSubtypeError", "UnknownFlagError",
    "BufferTooShortError",
]
