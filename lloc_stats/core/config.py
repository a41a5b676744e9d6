from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from lloc_stats.report.renderer import OutputFormat, select_output_format

from .errors import ArgumentError
from .models import DEFAULT_METRIC

PACKAGE_LOGGER = "lloc_stats"
HANDLER_NAME = "lloc_stats.stderr"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass
class ReportConfiguration:
    source_path: Path
    dest_path: Optional[Path] = None
    metric_field: str = DEFAULT_METRIC
    verbose: bool = False

    @property
    def output_format(self) -> OutputFormat:
        return select_output_format(str(self.dest_path) if self.dest_path else None)

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "ReportConfiguration":
        if not args.source:
            raise ArgumentError()

        return cls(
            source_path=Path(args.source),
            dest_path=Path(args.dest) if args.dest else None,
            verbose=bool(getattr(args, "verbose", False)),
        )


def _package_loggers() -> List[logging.Logger]:
    names = [
        name
        for name in logging.root.manager.loggerDict
        if name.startswith(PACKAGE_LOGGER + ".")
    ]
    return [logging.getLogger(PACKAGE_LOGGER)] + [logging.getLogger(n) for n in names]


def configure_logging(verbose: bool) -> None:
    """
    Send package logs to stderr so stdout carries only the report.

    ``verbose`` lowers every package logger to DEBUG and attaches a
    stderr handler. Otherwise module loggers stay at INFO and only
    warnings and errors reach stderr, through the logging module's
    last-resort handler.
    """
    root = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(root.handlers):
        if handler.get_name() == HANDLER_NAME:
            root.removeHandler(handler)

    level = logging.DEBUG if verbose else logging.INFO
    for package_logger in _package_loggers():
        package_logger.setLevel(level)

    if not verbose:
        return

    # bound to the current stderr, replaced on every call
    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
