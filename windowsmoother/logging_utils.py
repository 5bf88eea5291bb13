from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

from windowsmoother.config import LoggingSettings


def setup_logger(
    name: str = "windowsmoother",
    level: str = "INFO",
    log_file: Optional[str] = None,
) -> logging.Logger:
    logger = logging.getLogger(name)
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    fmt = logging.Formatter("[%(asctime)s] %(levelname)s %(name)s %(message)s", datefmt="%Y-%m-%d %H:%M:%S")

    sh = logging.StreamHandler(sys.stdout)
    sh.setFormatter(fmt)
    logger.addHandler(sh)

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        fh.setFormatter(fmt)
        logger.addHandler(fh)

    logger.propagate = False
    return logger


def setup_from_settings(settings: LoggingSettings, name: str = "windowsmoother") -> logging.Logger:
    return setup_logger(name=name, level=settings.level, log_file=settings.file)
