# packages/knxdpt/src/knxdpt/dpt.py
# -----------------------------------------------------------------------------
# Descripteurs de subtypes DPT 21.xxx (Bit Array of Length 8, B8)
# Un flag = un bit ; la position du bit est l'index du nom dans `flag_names`.
from __future__ import annotations

import enum
import re
from dataclasses import dataclass, field
from typing import Iterable, Optional, Sequence

from knxcore.errors import UnknownFlagError, UnsupportedSubtypeError

__all__ = ["MAIN_NUMBER", "MAX_FLAGS", "BitSetDpt", "max_value", "describe"]

#: Numéro principal KNX de la famille "8-bit set"
MAIN_NUMBER: int = 21
#: Largeur du format : 1 octet ⇒ 8 flags au plus
MAX_FLAGS: int = 8


def max_value(flag_names: Sequence[str]) -> int:
    """Plus grande valeur brute représentable avec `len(flag_names)` flags."""
    return (1 << len(flag_names)) - 1


def describe(name: str) -> str:
    """`GeneralStatus` → `"General Status"` (coupure sur les majuscules internes)."""
    return re.sub(r"\B([A-Z])", r" \1", name)


@dataclass(frozen=True, slots=True)
class BitSetDpt:
    """
    Description **immuable** d'un subtype du format bit-array 8 bits.

    Champs
    ------
    id : str
        Clé unique du subtype, ex. "21.001".
    description : str
        Libellé lisible.
    flag_names : tuple[str, ...]
        Noms des flags ; l'index `i` est le bit `i` (0 = LSB). 1 <= n <= 8,
        noms uniques et non vides.

    Bornes dérivées : `lower_value == 0`, `upper_value == 2**n - 1`.
    """

    id: str
    description: str
    flag_names: tuple[str, ...]
    _index: dict[str, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        names = tuple(self.flag_names)
        object.__setattr__(self, "flag_names", names)
        if not isinstance(self.id, str) or not self.id:
            raise UnsupportedSubtypeError("DPT id must be a non-empty string", repr(self.id))
        if not (1 <= len(names) <= MAX_FLAGS):
            raise UnsupportedSubtypeError(
                f"{self.id}: an 8-bit set needs 1..{MAX_FLAGS} flags", str(len(names)))
        if any(not isinstance(n, str) or not n for n in names):
            raise UnsupportedSubtypeError(f"{self.id}: flag names must be non-empty strings", repr(names))
        if len(set(names)) != len(names):
            raise UnsupportedSubtypeError(f"{self.id}: duplicate flag names", repr(names))
        object.__setattr__(self, "_index", {n: i for i, n in enumerate(names)})

    @classmethod
    def from_flag(cls, dpt_id: str, flag_cls: type[enum.IntFlag],
                  description: Optional[str] = None) -> "BitSetDpt":
        """
        Construit le descripteur à partir d'un `IntFlag` typé.

        Les membres doivent être déclarés dans l'ordre des bits (1, 2, 4, ...),
        sinon `UnsupportedSubtypeError`.
        """
        members = list(flag_cls.__members__.values())
        for i, m in enumerate(members):
            if int(m) != 1 << i:
                raise UnsupportedSubtypeError(
                    f"{dpt_id}: {flag_cls.__name__}.{m.name} must have value {1 << i}", str(int(m)))
        return cls(dpt_id, description or describe(flag_cls.__name__), tuple(m.name for m in members))

    # Bornes
    @property
    def lower_value(self) -> int:
        return 0

    @property
    def upper_value(self) -> int:
        return max_value(self.flag_names)

    @property
    def flag_count(self) -> int:
        return len(self.flag_names)

    def in_range(self, value: int) -> bool:
        return self.lower_value <= value <= self.upper_value

    # Nom <-> bit
    def index_of(self, name: str) -> Optional[int]:
        return self._index.get(name)

    def name_of(self, bit_value: int) -> Optional[str]:
        """Nom du flag pour `bit_value == 1 << i`, None si ce n'est pas un bit défini."""
        if bit_value <= 0 or bit_value & (bit_value - 1):
            return None
        i = bit_value.bit_length() - 1
        return self.flag_names[i] if i < len(self.flag_names) else None

    def value_of(self, name: str) -> int:
        i = self.index_of(name)
        if i is None:
            raise UnknownFlagError(f"{self.id} {self.description} has no element {name!r}")
        return 1 << i

    def text_of(self, bit_value: int) -> str:
        name = self.name_of(bit_value)
        if name is None:
            raise UnknownFlagError(f"{self.id} {self.description} has no element {bit_value} specified")
        return name

    def mask_of(self, names: Iterable[str]) -> int:
        v = 0
        for n in names:
            v |= self.value_of(n)
        return v

    def names_in(self, value: int) -> list[str]:
        """Noms des bits posés dans `value`, du bit de poids fort vers le bit 0."""
        return [self.text_of(b) for b in (0x80 >> k for k in range(MAX_FLAGS)) if value & b]

    def __str__(self) -> str:
        return f"{self.id} {self.description}"
