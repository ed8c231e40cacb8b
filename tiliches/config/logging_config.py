# tiliches/config/logging_config.py

"""Logging setup for a Tiliches session.

Every launch writes a ``logs/run_<timestamp>.log`` file that receives all
``tiliches.*`` records at DEBUG. Warnings and errors are also echoed to
the console, but how depends on who owns the terminal:

* ``--list`` (headless): a plain stderr stream handler. stdout carries the
  JSON or table output, so stderr is free.
* TUI: Textual draws the screen on the real stderr, so console records go
  through :class:`textual.logging.TextualHandler`, which hands them to the
  running app's log (visible with ``textual console``) instead of writing
  over the interface.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path

from textual.logging import TextualHandler

from tiliches.config.settings import Settings

_FILE_FORMAT = (
    "%(asctime)s | %(levelname)-8s | %(name)s | "
    "%(module)s:%(funcName)s:%(lineno)d | %(message)s"
)
_CONSOLE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

ROOT_LOGGER = "tiliches"


def _run_log_path() -> Path:
    Settings.LOGS_DIR.mkdir(parents=True, exist_ok=True)
    stamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    return Settings.LOGS_DIR / f"run_{stamp}.log"


def _file_handler(path: Path) -> logging.Handler:
    handler = logging.FileHandler(path, encoding="utf-8")
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(_FILE_FORMAT, datefmt=_DATE_FORMAT))
    return handler


def _console_handler(tui: bool) -> logging.Handler:
    """WARNING+ echo that never draws over a running Textual app."""
    handler: logging.Handler
    if tui:
        handler = TextualHandler()
    else:
        handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(logging.WARNING)
    handler.setFormatter(
        logging.Formatter(_CONSOLE_FORMAT, datefmt=_DATE_FORMAT)
    )
    return handler


def setup_logging(tui: bool = False) -> Path:
    """Attach the run-file and console handlers to the ``tiliches`` logger.

    Args:
        tui: ``True`` when the Textual interface will own the terminal.

    Returns:
        Path of this run's log file. When handlers are already attached
        (a second call in the same process) nothing is added and the
        existing file handler's path is returned.
    """
    root_logger = logging.getLogger(ROOT_LOGGER)
    root_logger.setLevel(logging.DEBUG)

    for existing in root_logger.handlers:
        if isinstance(existing, logging.FileHandler):
            return Path(existing.baseFilename)

    log_file = _run_log_path()
    root_logger.addHandler(_file_handler(log_file))
    root_logger.addHandler(_console_handler(tui))
    root_logger.info(
        "Logging to %s (%s console)", log_file, "textual" if tui else "stderr"
    )
    return log_file
