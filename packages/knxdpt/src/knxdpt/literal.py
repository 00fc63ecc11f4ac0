from __future__ import annotations
import re

__all__ = ["parse_int_literal"]

# [sign] (0x|0X|#)hex | 0 octal | decimal ; pas d'espace, pas de "_"
_LITERAL = re.compile(
    r"(?P<sign>[+-]?)(?:"
    r"(?:0[xX]|#)(?P<hex>[0-9a-fA-F]+)"
    r"|0(?P<oct>[0-7]+)"
    r"|(?P<dec>0|[1-9][0-9]*)"
    r")"
)


def parse_int_literal(text: str) -> int:
    """
    Entier signé avec base déduite du préfixe : `0x`/`0X`/`#` → hexa,
    `0` suivi d'au moins un chiffre → octal, sinon décimal.

    Lève ValueError si `text` n'est pas entièrement un tel littéral
    (ex. "1 1 0 1", "08", "0x", " 3").
    """
    m = _LITERAL.fullmatch(text)
    if m is None:
        raise ValueError(f"not an integer literal: {text!r}")
    if m["hex"] is not None:
        v = int(m["hex"], 16)
    elif m["oct"] is not None:
        v = int(m["oct"], 8)
    else:
        v = int(m["dec"], 10)
    return -v if m["sign"] == "-" else v
