"""
Logging configuration for the Customer API.

``setup_logging`` owns two handlers on the root logger, a console
handler and an optional file handler (``LOG_FILE``).  Both are tagged
with a handler name so repeated calls from ``create_app`` neither
duplicate them nor touch handlers installed by someone else (uvicorn,
pytest).  The level is applied on every call.
"""

import logging
from pathlib import Path
from typing import Optional

CONSOLE_HANDLER_NAME = "customer_api.console"
FILE_HANDLER_NAME = "customer_api.file"

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger.

    Parameters
    ----------
    level : str
        Logging level name, case insensitive.  Unknown names fall back
        to ``INFO``.
    logfile : Optional[str]
        File to copy log records to.  A file handler pointing at another
        path is replaced; ``None`` leaves an existing file handler alone.
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    owned = {handler.get_name(): handler for handler in root.handlers}

    if CONSOLE_HANDLER_NAME not in owned:
        console_handler = logging.StreamHandler()
        console_handler.set_name(CONSOLE_HANDLER_NAME)
        console_handler.setFormatter(formatter)
        root.addHandler(console_handler)

    if not logfile:
        return

    log_path = str(Path(logfile).resolve())
    current = owned.get(FILE_HANDLER_NAME)
    if current is not None:
        if getattr(current, "baseFilename", None) == log_path:
            return
        root.removeHandler(current)
        current.close()

    file_handler = logging.FileHandler(log_path, encoding="utf-8")
    file_handler.set_name(FILE_HANDLER_NAME)
    file_handler.setFormatter(formatter)
    root.addHandler(file_handler)
