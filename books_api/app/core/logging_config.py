"""
Logging setup for the Books API.

Application loggers all live under the ``books_api`` namespace (the
store logs creates, updates and deletes at INFO, handlers log missing
books at DEBUG).  ``setup_logging`` sets that namespace to the
configured level and makes uvicorn's loggers share the root handlers,
so server and application lines come out in one format.  ``run.py``
starts uvicorn with ``log_config=None`` for this to take effect; when
uvicorn is launched from its own CLI it keeps its handlers and is left
alone.
"""

import logging
from pathlib import Path
from typing import Optional

APP_LOGGER = "books_api"
UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def resolve_level(level: str) -> int:
    """Map a level name such as ``"debug"`` to its number; unknown names give INFO."""
    value = logging.getLevelName(level.upper())
    return value if isinstance(value, int) else logging.INFO


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the ``books_api`` and uvicorn loggers.

    Root handlers (console, plus ``logfile`` when given) are installed
    only if the root logger has none yet, so repeated ``create_app``
    calls and test runners that capture logs are not disturbed.  The
    level of the ``books_api`` logger is applied every time.
    """
    numeric_level = resolve_level(level)
    logging.getLogger(APP_LOGGER).setLevel(numeric_level)

    for name in UVICORN_LOGGERS:
        server_logger = logging.getLogger(name)
        if not server_logger.handlers:
            server_logger.propagate = True

    root = logging.getLogger()
    if root.handlers:
        return
    root.setLevel(numeric_level)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
