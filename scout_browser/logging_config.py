from __future__ import annotations

import logging
import os
import sys
from typing import Optional

from pythonjsonlogger import jsonlogger

LOG_FORMAT_ENV = "SCOUT_BROWSER_LOG_FORMAT"
PACKAGE_LOGGER = "scout_browser"


def configure_logging(
        level: int = logging.INFO,
        force_format: Optional[str] = None,
        library_level: int = logging.WARNING,
) -> None:
    """
    Configure logging for the shell

    `level` applies to the scout_browser package loggers; the root logger (pandas,
    numpy and anything else) is held at `library_level` so only our own
    INFO/DEBUG records reach the terminal.

    Logs go to stderr so they never interleave with command responses on stdout.

    Modes:
    - JSON (default), every record tagged with "app": "scout_browser"
    - plain text (dev mode)

    Selection Order:
        1) force_format argument ("json" or "plain") if provided
        2) env var SCOUT_BROWSER_LOG_FORMAT
        3) default = "json"
    """

    if force_format is not None:
        format_mode = force_format.lower()
    else:
        format_mode = os.getenv(LOG_FORMAT_ENV, "json").lower()

    root = logging.getLogger()
    root.setLevel(library_level)
    logging.getLogger(PACKAGE_LOGGER).setLevel(level)

    handler = logging.StreamHandler(sys.stderr)

    if format_mode == "plain":
        formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
        )
    else:
        formatter = jsonlogger.JsonFormatter(
            "%(asctime)s %(levelname)s %(name)s %(message)s",
            static_fields={"app": PACKAGE_LOGGER},
        )

    handler.setFormatter(formatter)

    # Replace any existing handlers to avoid duplicate logs
    root.handlers.clear()
    root.addHandler(handler)

