import argparse
import logging
from pathlib import Path

import pytest

from lloc_stats.core.config import HANDLER_NAME, ReportConfiguration, configure_logging
from lloc_stats.core.errors import USAGE_MESSAGE, ArgumentError
from lloc_stats.report.renderer import OutputFormat


def test_from_args_text():
    args = argparse.Namespace(source="report.xml", dest=None, verbose=False)
    config = ReportConfiguration.from_args(args)

    assert config.source_path == Path("report.xml")
    assert config.dest_path is None
    assert config.metric_field == "lloc"
    assert config.output_format is OutputFormat.TEXT


def test_from_args_csv():
    args = argparse.Namespace(source="report.xml", dest="out.csv", verbose=True)
    config = ReportConfiguration.from_args(args)

    assert config.output_format is OutputFormat.CSV
    assert config.verbose is True


def test_from_args_missing_source():
    args = argparse.Namespace(source=None, dest=None, verbose=False)
    with pytest.raises(ArgumentError) as info:
        ReportConfiguration.from_args(args)
    assert str(info.value) == USAGE_MESSAGE


# =============================================================================
# Logging
# =============================================================================

def test_configure_logging_verbose_enables_debug():
    try:
        configure_logging(True)

        source_logger = logging.getLogger("lloc_stats.source")
        assert source_logger.isEnabledFor(logging.DEBUG)
        names = [h.get_name() for h in logging.getLogger("lloc_stats").handlers]
        assert names.count(HANDLER_NAME) == 1

        configure_logging(True)
        names = [h.get_name() for h in logging.getLogger("lloc_stats").handlers]
        assert names.count(HANDLER_NAME) == 1
    finally:
        configure_logging(False)


def test_configure_logging_quiet_removes_handler():
    configure_logging(True)
    configure_logging(False)

    assert not logging.getLogger("lloc_stats.metrics").isEnabledFor(logging.DEBUG)
    names = [h.get_name() for h in logging.getLogger("lloc_stats").handlers]
    assert HANDLER_NAME not in names
