from __future__ import annotations

import logging
from typing import Optional

import colorlog

from ..settings import get_settings

BASE_LOGGER = "memory_records"


def _configure_base() -> logging.Logger:
    base = logging.getLogger(BASE_LOGGER)
    if base.handlers:
        return base

    handler = logging.StreamHandler()
    handler.setFormatter(
        colorlog.ColoredFormatter(
            fmt=(
                "%(log_color)s%(asctime)s [%(levelname)s] "
                "%(name)s:%(lineno)d:%(reset)s %(message)s"
            ),
            datefmt="%Y-%m-%d %H:%M:%S",
            log_colors={
                "DEBUG": "cyan",
                "INFO": "green",
                "WARNING": "yellow",
                "ERROR": "red",
                "CRITICAL": "bold_red",
            },
            style="%",
        )
    )
    base.addHandler(handler)

    level_name = get_settings().log_level
    base.setLevel(getattr(logging, level_name, logging.INFO))
    base.propagate = False
    return base


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Logger under the package namespace. Accepts a module ``__name__``
    (already prefixed) or a short suffix such as ``"cli"``.
    """
    _configure_base()
    if not name or name == BASE_LOGGER:
        return logging.getLogger(BASE_LOGGER)
    if name.startswith(BASE_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{BASE_LOGGER}.{name}")
