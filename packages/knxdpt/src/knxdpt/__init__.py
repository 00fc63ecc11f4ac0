# packages/knxdpt/src/knxdpt/__init__.py
from __future__ import annotations

"""knxdpt - translators KNX DPT 21.xxx "8-bit set" (public surface).

L'import du package remplit le catalogue des subtypes (une seule fois) ;
ensuite le catalogue est en lecture seule pour les appelants.
"""

__version__ = "0.1.0"

from .dpt import MAIN_NUMBER, BitSetDpt, max_value
from .registry import register, lookup, get, subtypes, list_subtypes
from .catalog import (
    register_all,
    GeneralStatus, DeviceControl,
    DptGeneralStatus, DptDeviceControl,
)
from .bitset import BitSetTranslator

register_all()

__all__ = [
    "__version__",
    "MAIN_NUMBER", "BitSetDpt", "max_value",
    "register", "lookup", "get", "subtypes", "list_subtypes",
    "GeneralStatus", "DeviceControl", "DptGeneralStatus", "DptDeviceControl",
    "BitSetTranslator",
]
