"""Logging setup for the assetcheck command line.

The association report goes to stdout and error messages go to stderr, so
``assetcheck site.example > report.txt`` still shows what went wrong.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

REPORT_FORMAT = "%(message)s"


class _BelowLevelFilter(logging.Filter):
    """Let through only records strictly below ``level``."""

    def __init__(self, level: int) -> None:
        super().__init__()
        self.level = level

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < self.level


def _report_handler(stream: TextIO, level: int, below: int | None = None) -> logging.Handler:
    handler = logging.StreamHandler(stream=stream)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(REPORT_FORMAT))
    if below is not None:
        handler.addFilter(_BelowLevelFilter(below))
    return handler


def configure_report_logging(
    *,
    debug: bool = False,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> None:
    """Route report lines to stdout and errors to stderr on the root logger.

    Args:
        debug: Also show the linked websites and apps.
        stdout: Stream for the report, defaults to ``sys.stdout``.
        stderr: Stream for warnings and errors, defaults to ``sys.stderr``.
    """
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(logging.DEBUG if debug else logging.INFO)

    root.addHandler(_report_handler(stdout or sys.stdout, logging.DEBUG, below=logging.WARNING))
    root.addHandler(_report_handler(stderr or sys.stderr, logging.WARNING))
