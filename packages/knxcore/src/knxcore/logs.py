from __future__ import annotations
import logging, sys
from pathlib import Path
from typing import Optional

LOG_FMT = "[%(asctime)s] %(levelname)s: %(message)s"
DATE_FMT = "%Y-%m-%d %H:%M:%S"


def setup_logging(log_file: Optional[Path], verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
    # force=True : la CLI peut être relancée dans le même process (tests)
    logging.basicConfig(level=level, format=LOG_FMT, datefmt=DATE_FMT, handlers=handlers, force=True)
