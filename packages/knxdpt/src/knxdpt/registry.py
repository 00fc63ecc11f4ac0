from __future__ import annotations
import logging
from types import MappingProxyType
from typing import Mapping, Optional

from knxcore.errors import UnknownSubtypeError
from .dpt import BitSetDpt

log = logging.getLogger(__name__)

# Rempli une fois à l'import de `knxdpt` (register_all), lu seulement ensuite.
_REG: dict[str, BitSetDpt] = {}


def register(dpt: BitSetDpt) -> None:
    if dpt.id in _REG:
        log.debug("DPT %s re-registered (%s replaces %s)", dpt.id, dpt.description, _REG[dpt.id].description)
    _REG[dpt.id] = dpt


def lookup(dpt_id: str) -> Optional[BitSetDpt]:
    return _REG.get(dpt_id)


def get(dpt_id: str) -> BitSetDpt:
    try:
        return _REG[dpt_id]
    except KeyError as exc:
        raise UnknownSubtypeError("DPT not supported", repr(dpt_id)) from exc


def subtypes() -> Mapping[str, BitSetDpt]:
    return MappingProxyType(_REG)


def list_subtypes() -> list[BitSetDpt]:
    return [_REG[k] for k in sorted(_REG, key=_id_key)]


def _id_key(dpt_id: str) -> tuple:
    # "21.1000" après "21.601" : tri numérique sur les deux parties
    main, _, sub = dpt_id.partition(".")
    try:
        return (int(main), int(sub), dpt_id)
    except ValueError:
        return (1 << 31, 0, dpt_id)
