import logging

from lloc_stats.core.config import ReportConfiguration
from lloc_stats.core.models import ReportBuffer
from lloc_stats.metrics.aggregator import MetricAggregator, append_aggregates
from lloc_stats.report.renderer import render
from lloc_stats.source.pdepend_xml import load_collections

ERROR_LABEL = "The following error occurred"

logger = logging.getLogger("lloc_stats.cli")
logger.setLevel(logging.INFO)

def run_report(config: ReportConfiguration) -> ReportBuffer:
    files, functions = load_collections(config.source_path)

    buffer = ReportBuffer()
    for collection in (files, functions):
        append_aggregates(buffer, MetricAggregator(collection, config.metric_field))
    return buffer

def run_and_render(config: ReportConfiguration) -> str:
    buffer = run_report(config)
    logger.info("Rendering %d report lines as %s", len(buffer), config.output_format.value)
    return render(buffer, config.output_format)

def error_report(exc: Exception) -> ReportBuffer:
    buffer = ReportBuffer()
    buffer.line(ERROR_LABEL, str(exc))
    return buffer
