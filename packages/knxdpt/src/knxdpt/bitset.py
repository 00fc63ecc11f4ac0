# packages/knxdpt/src/knxdpt/bitset.py
# -----------------------------------------------------------------------------
# Translator DPT 21.xxx (Bit Array of Length 8, B8) - 1 octet par item.
# Conversions : octet brut <-> valeur numérique <-> ensemble de flags <-> texte.
from __future__ import annotations

import enum
import numbers
from typing import Iterable, Mapping, Union

import numpy as np

from knxcore.errors import (
    InvalidTokenError,
    OutOfRangeError,
    UnsupportedSubtypeError,
)
from .dpt import BitSetDpt
from .literal import parse_int_literal
from .translator import Translator
from . import registry

__all__ = ["BitSetTranslator"]

_ONE = ("1", "true")
_ZERO = ("0", "false")

FlagLike = Union[str, enum.Flag]


class BitSetTranslator(Translator):
    """
    Translator pour les subtypes "8-bit set" (DPT 21.xxx).

    Un item est soit une valeur unique (ex. "0x15", "3", "017"), soit une suite
    de bits/booléens séparés par un espace (ex. "0 1 1 0", "false true true
    false"), lue de droite à gauche : le dernier token est le bit 0. Dans une
    suite, un nom de flag du subtype pose son propre bit quelle que soit sa
    position.

    Préfixes d'une valeur unique :
      - aucun            → décimal
      - `0x`, `0X`, `#`  → hexadécimal
      - `0`              → octal

    Validation
    ----------
    Les setters numériques/texte/flags valident immédiatement. `set_data`
    copie les octets sans contrôle ; un octet hors `[0..upper_value]` n'est
    rejeté (OutOfRangeError) qu'à la lecture.

    Exemple
    -------
    >>> t = BitSetTranslator("21.001")
    >>> t.set_value("1 1 0 1")
    >>> t.get_numeric_value(), t.get_value()
    (13, 'InAlarm Overridden OutOfService')
    """

    type_size = 1

    def __init__(self, dpt: Union[BitSetDpt, str]) -> None:
        super().__init__()
        if isinstance(dpt, str):
            dpt = registry.get(dpt)
        self._dpt = _check_subtype(dpt)

    @property
    def dpt(self) -> BitSetDpt:
        return self._dpt

    @staticmethod
    def subtypes() -> Mapping[str, BitSetDpt]:
        return registry.subtypes()

    # ------------------------------------------------------------------
    # Setters (un seul item, remplacent les items existants)
    # ------------------------------------------------------------------
    def set_numeric_value(self, value: int) -> None:
        """Bit-array en valeur non signée, 0 <= value <= upper_value du subtype."""
        self._data = self._data_of([self._validate(_as_int(value))])

    def set_flags(self, flags: Iterable[FlagLike]) -> None:
        """
        Bit-array depuis un ensemble de flags (noms, ou membres d'un IntFlag
        typé dont les noms appartiennent au subtype).

        UnknownFlagError si un nom n'existe pas dans le subtype.
        """
        self._data = self._data_of([self._dpt.mask_of(_flag_names(flags))])

    # ------------------------------------------------------------------
    # Getters (validation paresseuse des octets bruts)
    # ------------------------------------------------------------------
    def get_numeric_value(self) -> int:
        return self._item(0)

    def get_flags(self) -> frozenset[str]:
        return frozenset(self._dpt.names_in(self._item(0)))

    def _text_of(self, index: int) -> str:
        return " ".join(self._dpt.names_in(self._item(index)))

    # ------------------------------------------------------------------
    # Texte → item
    # ------------------------------------------------------------------
    def _to_item(self, text: str) -> int:
        if not isinstance(text, str):
            raise TypeError(f"{self._dpt.id}: item text must be str, got {type(text).__name__}")
        try:
            value = parse_int_literal(text)
        except ValueError:
            value = self._parse_sequence(text)
        return self._validate(value)

    def _parse_sequence(self, text: str) -> int:
        tokens = text.split(" ")
        # tokens vides en fin de chaîne ignorés ("1 0 " == "1 0")
        while tokens and tokens[-1] == "":
            tokens.pop()
        result = 0
        for i, tok in enumerate(reversed(tokens)):
            low = tok.lower()
            if low in _ONE:
                result |= 1 << i
            elif low in _ZERO:
                continue
            else:
                idx = self._dpt.index_of(tok)
                if idx is None:
                    raise InvalidTokenError(
                        f"{self._dpt.id}: value is no element of {self._dpt.description}", tok, text)
                result |= 1 << idx
        return result

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------
    def _validate(self, value: int) -> int:
        d = self._dpt
        if not d.in_range(value):
            raise OutOfRangeError(d.id, value, d.lower_value, d.upper_value)
        return value

    def _item(self, index: int) -> int:
        return self._validate(int(self._data[index]))

    @staticmethod
    def _data_of(items: list[int]) -> np.ndarray:
        return np.array(items, dtype=np.uint8)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _check_subtype(dpt: object) -> BitSetDpt:
    # le nombre de flags (1..8) est garanti par BitSetDpt.__post_init__
    if not isinstance(dpt, BitSetDpt):
        raise UnsupportedSubtypeError("not an 8-bit set datapoint type", repr(dpt))
    return dpt


def _as_int(value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise TypeError(f"value must be an integer, got {type(value).__name__}")
    return int(value)


def _flag_names(flags: Iterable[FlagLike]) -> list[str]:
    if isinstance(flags, (str, enum.Flag)):
        flags = [flags]
    names: list[str] = []
    for f in flags:
        if isinstance(f, enum.Flag):
            # un membre composé (A | B) se décompose en ses bits nommés
            names.extend(m.name for m in f)
        else:
            names.append(f)
    return names
