"""
Metric Aggregator

Computes the fixed set of summary statistics reported for one
population of items (files or functions) over a single numeric
attribute, by default logical lines of code.

Every aggregate is an independent pass over the source. Nothing is
cached between calls.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Tuple

from lloc_stats.core.errors import EmptyCollectionError
from lloc_stats.core.models import (
    DEFAULT_METRIC,
    AggregateResult,
    MetricSource,
    ReportBuffer,
)

LOGGER_NAME = "lloc_stats.metrics"
logger = logging.getLogger(LOGGER_NAME)
logger.setLevel(logging.INFO)

NO_NAME = "none"


# =============================================================================
# Aggregator
# =============================================================================

class MetricAggregator:
    def __init__(self, source: MetricSource, metric: str = DEFAULT_METRIC):
        self.source = source
        self.metric = metric

    @property
    def label(self) -> str:
        return self.source.label

    def _entries(self) -> List[Tuple[str, int]]:
        return self.source.entries(self.metric)

    def _values(self) -> List[int]:
        return [value for _, value in self._entries()]

    def count(self) -> int:
        return len(self._entries())

    def max(self) -> int:
        """
        Largest metric value, 0 when there are no items.
        """
        lines = 0
        for value in self._values():
            lines = max(value, lines)
        return lines

    def all(self) -> Dict[str, int]:
        """
        Every name mapped to its metric, ascending by metric.

        A repeated name keeps its first position and its last value.
        Equal metrics keep their input order.
        """
        lines: Dict[str, int] = {}
        for name, value in self._entries():
            lines[name] = value
        return dict(sorted(lines.items(), key=lambda pair: pair[1]))

    def max_name(self) -> str:
        """
        Name of the item holding the largest metric.

        Only a strictly greater value replaces the running maximum, which
        starts at 0: ties go to the first item and an all-zero population
        has no name.
        """
        lines = 0
        name = NO_NAME
        for item_name, value in self._entries():
            if value > lines:
                lines = value
                name = item_name
        return name

    def average(self) -> int:
        """
        Floor of the arithmetic mean.
        """
        values = self._values()
        if not values:
            raise EmptyCollectionError(
                f"Cannot average {self.metric} over zero {self.label} items"
            )
        return sum(values) // len(values)

    def mean(self) -> int:
        """
        Median-like value: the element at index count // 2 of the metrics
        sorted in descending order. For an even count this is the lower of
        the two middle values.
        """
        values = sorted(self._values(), reverse=True)
        if not values:
            raise EmptyCollectionError(
                f"Cannot take the mean {self.metric} of zero {self.label} items"
            )
        return values[len(values) // 2]

    def aggregate(self) -> AggregateResult:
        return AggregateResult(
            max=self.max(),
            all=self.all(),
            max_name=self.max_name(),
            average=self.average(),
            mean=self.mean(),
        )


# =============================================================================
# Report lines
# =============================================================================

def report_labels(kind: str) -> Dict[str, str]:
    """
    Output label of each aggregate for a population named ``kind``.
    """
    return {
        "max": f"Max logical lines of code per {kind}",
        "all": f"All logical lines of code per {kind}",
        "max_name": f"{kind} with the most lines of code",
        "average": f"Average logical lines of code per {kind}",
        "mean": f"Mean logical lines of code per {kind}",
    }


def append_aggregates(buffer: ReportBuffer, aggregator: MetricAggregator) -> None:
    """
    Append the aggregates of one population to ``buffer`` in report order.
    """
    result = aggregator.aggregate()
    labels = report_labels(aggregator.label)
    for key, label in labels.items():
        buffer.line(label, getattr(result, key))

    logger.debug(
        "Aggregated %d %s items on %s",
        aggregator.count(),
        aggregator.label,
        aggregator.metric,
    )
