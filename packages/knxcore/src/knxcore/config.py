# packages/knxcore/src/knxcore/config.py
from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
import os

__all__ = ["KnxConfig"]

_TRUTHY = ("1", "true", "yes", "on")


@dataclass(frozen=True, slots=True)
class KnxConfig:
    """
    Configuration des outils KNX B8 (CLI + logging).

    ENV keys
    --------
    KNX_B8_DEFAULT_DPT → subtype utilisé quand `--dpt` est omis (défaut "21.001")
    KNX_B8_LOG_FILE    → fichier de log additionnel (append)
    KNX_B8_VERBOSE     → "1"/"true"/"yes" active le niveau DEBUG

    Notes
    -----
    - Immuable (`frozen=True`) : une config = un run.
    - Les options explicites de la CLI priment sur l'ENV (voir `override`).
    """

    default_dpt: str = "21.001"
    log_file: Path | None = None
    verbose: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.default_dpt, str) or not self.default_dpt:
            raise ValueError("KnxConfig.default_dpt must be a non-empty string")

    @staticmethod
    def from_env() -> "KnxConfig":
        return KnxConfig(
            default_dpt=os.getenv("KNX_B8_DEFAULT_DPT") or "21.001",
            log_file=_opt_path("KNX_B8_LOG_FILE"),
            verbose=os.getenv("KNX_B8_VERBOSE", "0").strip().lower() in _TRUTHY,
        )

    def override(self, *, default_dpt: str | None = None, log_file: Path | None = None,
                 verbose: bool | None = None) -> "KnxConfig":
        """Nouvelle config où seules les valeurs non-None remplacent celles-ci."""
        return KnxConfig(
            default_dpt=default_dpt or self.default_dpt,
            log_file=log_file or self.log_file,
            verbose=self.verbose if verbose is None else verbose,
        )


def _opt_path(name: str) -> Path | None:
    v = os.getenv(name)
    return Path(v) if v else None
