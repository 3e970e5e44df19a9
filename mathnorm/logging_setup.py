from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path

from .config import settings

LOG_FORMAT = "%(asctime)s | %(levelname)-7s | %(name)s:%(lineno)d | %(message)s"


def setup_logging(level: str | None = None, log_file: str | None = None) -> None:
    """Configure the root logger with a console and optional rotating file handler.

    Guarded against adding handlers twice (uvicorn reload, repeated CLI calls).
    """
    root = logging.getLogger()
    if getattr(root, "_mathnorm_configured", False):
        return
    root._mathnorm_configured = True  # type: ignore[attr-defined]

    level_name = (level or settings.log_level).upper()
    log_level = getattr(logging, level_name, logging.INFO)
    fmt = logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    root.setLevel(log_level)

    console = logging.StreamHandler()
    console.setLevel(log_level)
    console.setFormatter(fmt)
    root.addHandler(console)

    log_file = log_file or settings.log_file
    if log_file:
        # Rotate at 5 MB, keep 3 backups
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_h = logging.handlers.RotatingFileHandler(
            log_path, maxBytes=5 * 1024 * 1024, backupCount=3, encoding="utf-8"
        )
        file_h.setLevel(log_level)
        file_h.setFormatter(fmt)
        root.addHandler(file_h)

    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
