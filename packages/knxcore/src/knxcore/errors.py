# packages/knxcore/src/knxcore/errors.py
from __future__ import annotations

__all__ = [
    "KNXError",
    "KNXFormatError",
    "OutOfRangeError",
    "InvalidTokenError",
    "UnsupportedSubtypeError",
    "UnknownSubtypeError",
    "UnknownFlagError",
    "BufferTooShortError",
]


class KNXError(Exception):
    """Racine de toutes les erreurs levées par les translators KNX."""


class KNXFormatError(KNXError, ValueError):
    """
    Entrée mal formée ou hors domaine pour un datapoint type.

    `item` garde la valeur/le token fautif (str) pour que l'appelant puisse
    corriger et réessayer.
    """

    def __init__(self, msg: str, item: str | None = None) -> None:
        super().__init__(msg if item is None else f"{msg}: {item}")
        self.item = item


class OutOfRangeError(KNXFormatError):
    def __init__(self, dpt_id: str, value: int, lower: int, upper: int) -> None:
        super().__init__(f"{dpt_id}: value is out of range [{lower}..{upper}]", str(value))
        self.value = value
        self.lower = lower
        self.upper = upper


class InvalidTokenError(KNXFormatError):
    def __init__(self, msg: str, token: str, text: str | None = None) -> None:
        super().__init__(msg, repr(token) if text is None else f"{token!r} in {text!r}")
        self.token = token
        self.text = text


class UnsupportedSubtypeError(KNXFormatError):
    """Le descripteur ne décrit pas un bit-array 8 bits valide."""


class UnknownSubtypeError(UnsupportedSubtypeError, LookupError):
    """Aucun subtype enregistré sous cet id."""


class UnknownFlagError(KNXError, LookupError):
    """
    Flag absent du subtype.

    Erreur de programmation (nom passé par le code appelant, ou donnée stockée
    incohérente avec le subtype), pas une erreur de format d'entrée texte.
    """


class BufferTooShortError(KNXError, ValueError):
    def __init__(self, needed: int, available: int) -> None:
        super().__init__(f"buffer too short: need {needed} byte(s), {available} available")
        self.needed = needed
        self.available = available
