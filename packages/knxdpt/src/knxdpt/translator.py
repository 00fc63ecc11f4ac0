# packages/knxdpt/src/knxdpt/translator.py
# -----------------------------------------------------------------------------
# Stockage générique des items d'un translator DPT (tableau uint8 numpy) et
# copie avec offset depuis/vers des buffers d'octets.
from __future__ import annotations

from typing import Any, Sequence

import numpy as np

from knxcore.errors import BufferTooShortError

__all__ = ["Translator", "as_u8"]


def as_u8(data: Any) -> np.ndarray:
    """
    Vue 1-D `uint8` d'un buffer d'octets.

    Accepte bytes/bytearray/memoryview, une séquence d'entiers 0..255 ou un
    ndarray numpy (`int8` est réinterprété bit à bit, comme des octets signés).
    """
    if isinstance(data, (bytes, bytearray, memoryview)):
        return np.frombuffer(data, dtype=np.uint8)
    arr = np.asarray(data)
    if arr.size == 0:
        return np.zeros(0, dtype=np.uint8)
    if arr.dtype == np.int8:
        return arr.reshape(-1).view(np.uint8)
    if arr.dtype != np.uint8:
        if arr.dtype.kind not in "iu":
            raise TypeError(f"data must contain integers, got dtype {arr.dtype}")
        if arr.size and (int(arr.min()) < 0 or int(arr.max()) > 0xFF):
            raise ValueError("data items must be in [0..255]")
        arr = arr.astype(np.uint8)
    return arr.reshape(-1)


class Translator:
    """
    Base des translators DPT : garde une suite d'items bruts (1 item =
    `type_size` octets) et implémente la partie "données" (set/get avec offset).

    Les sous-classes fournissent `_to_item(text)` (texte → item validé) et
    `_text_of(index)` (item → texte).
    """

    #: largeur d'un item en octets
    type_size: int = 1

    def __init__(self) -> None:
        self._data = np.zeros(1, dtype=np.uint8)

    @property
    def item_count(self) -> int:
        return len(self._data) // self.type_size

    # ------------------------------------------------------------------
    # Texte
    # ------------------------------------------------------------------
    def set_value(self, value: str) -> None:
        """Un seul item depuis son texte, remplace les items existants."""
        self.set_values([value])

    def set_values(self, values: Sequence[str]) -> None:
        """
        Un item par chaîne, remplace les items existants.

        Toutes les chaînes sont traduites avant de toucher à l'état : en cas
        d'erreur les items précédents restent en place. Séquence vide ⇒ no-op.
        """
        if isinstance(values, str):
            raise TypeError("set_values expects a sequence of strings, use set_value for one item")
        if not values:
            return
        buf = np.empty(len(values), dtype=np.uint8)
        for i, v in enumerate(values):
            buf[i] = self._to_item(v)
        self._data = buf

    def get_value(self) -> str:
        return self._text_of(0)

    def get_all_values(self) -> list[str]:
        return [self._text_of(i) for i in range(self.item_count)]

    # ------------------------------------------------------------------
    # Données brutes
    # ------------------------------------------------------------------
    def set_data(self, data: Any, offset: int = 0) -> None:
        """
        Items depuis `data[offset:]` : autant d'items entiers que disponibles,
        copiés tels quels (aucune validation de plage ici).
        """
        src = as_u8(data)
        if offset < 0:
            raise ValueError(f"illegal offset {offset}")
        size = self.type_size
        available = max(0, len(src) - offset)
        length = available // size * size
        if length == 0:
            raise BufferTooShortError(size, available)
        self._data = src[offset:offset + length].copy()

    def get_data(self, dst: Any = None, offset: int = 0) -> Any:
        """
        Sans `dst` : les items en `bytes`.
        Avec `dst` (bytearray, memoryview inscriptible, ndarray uint8) : copie
        les items à partir de `dst[offset]`, le reste de `dst` est intact.
        """
        if dst is None:
            return self._data.tobytes()
        if offset < 0:
            raise ValueError(f"illegal offset {offset}")
        n = len(self._data)
        available = max(0, len(dst) - offset)
        if available < n:
            raise BufferTooShortError(n, available)
        if isinstance(dst, np.ndarray):
            dst[offset:offset + n] = self._data
        else:
            dst[offset:offset + n] = self._data.tobytes()
        return dst

    # ------------------------------------------------------------------
    # Hooks
    # ------------------------------------------------------------------
    def _to_item(self, text: str) -> int:
        raise NotImplementedError

    def _text_of(self, index: int) -> str:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}(items={self._data.tolist()})"
