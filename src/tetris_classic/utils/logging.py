# src/tetris_classic/utils/logging.py
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

_PLAIN_FORMAT = "[%(asctime)s] %(levelname)s %(name)s %(message)s"


def setup_logger(
        *,
        name: str,
        use_rich: bool = True,
        level: str = "info",
        log_file: Optional[Path] = None,
) -> logging.Logger:
    """
    Configure the package logger once per process.

    Console output goes to stderr (rich or plain); log_file, if given, gets a
    plain copy of every record. asyncio's own logger is raised to WARNING
    unless we are debugging.
    """
    logger = logging.getLogger(str(name))
    logger.handlers.clear()
    logger.propagate = False

    lvl = getattr(logging, str(level).upper(), logging.INFO)
    logger.setLevel(lvl)

    handler: logging.Handler
    if use_rich:
        handler = RichHandler(
            console=Console(stderr=True),
            rich_tracebacks=True,
            show_time=True,
            show_level=True,
            show_path=False,
            markup=False,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
    else:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_PLAIN_FORMAT))
    logger.addHandler(handler)

    if log_file is not None:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(path, encoding="utf-8")
        fh.setFormatter(logging.Formatter(_PLAIN_FORMAT))
        logger.addHandler(fh)

    logging.getLogger("asyncio").setLevel(logging.DEBUG if lvl <= logging.DEBUG else logging.WARNING)
    return logger


__all__ = ["setup_logger"]
