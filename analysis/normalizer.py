"""Metric normalization for status-colored line charts.

The normalizer groups readings by metric name, parses their values and sorts
each series by timestamp. It never raises for malformed readings: bad values
become NaN and non-object readings were already dropped when the records were
parsed.
"""

from __future__ import annotations

import logging
import math
import re
from collections.abc import Iterable

from .dto import MetricSeries, NormalizedMetrics, NormalizedSample, RawRecord

logger = logging.getLogger(__name__)

_NUMERIC_PREFIX_RE = re.compile(r"[+-]?(?:Infinity|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)")


def parse_metric_value(raw: object) -> float:
    """Parse a raw reading value the way a browser `parseFloat` would.

    Args:
        raw: Numeric text (or an already-numeric JSON value).

    Returns:
        The parsed float. Text is parsed from its longest numeric prefix, so
        "10abc" parses as 10.0. Anything without a numeric prefix is NaN.
    """

    if isinstance(raw, bool) or raw is None:
        return math.nan
    if isinstance(raw, int | float):
        try:
            return float(raw)
        except OverflowError:
            return math.inf if raw > 0 else -math.inf

    match = _NUMERIC_PREFIX_RE.match(str(raw).lstrip())
    if match is None:
        return math.nan
    text = match.group(0)
    if text.lstrip("+-") == "Infinity":
        return -math.inf if text.startswith("-") else math.inf
    return float(text)


def normalize_metrics(records: Iterable[RawRecord] | None) -> NormalizedMetrics:
    """Group readings into per-metric series sorted by timestamp.

    Args:
        records: Parsed input records. None is treated like an empty input.

    Returns:
        Mapping of metric name to its samples, in first-seen metric order.
        An empty mapping means there is no data to chart.
    """

    if records is None:
        return {}

    grouped: dict[str, list[NormalizedSample]] = {}
    for record in records:
        for metric_name, reading in record.readings:
            value = parse_metric_value(reading.value)
            if math.isnan(value):
                logger.debug("Unparseable value for metric %r at %s: %r", metric_name, reading.timestamp, reading.value)
            grouped.setdefault(metric_name, []).append(
                NormalizedSample(timestamp=reading.timestamp, value=value, status=reading.status)
            )

    return {name: _sorted_series(samples) for name, samples in grouped.items()}


def _sorted_series(samples: list[NormalizedSample]) -> MetricSeries:
    """Sort samples by timestamp, keeping arrival order for ties."""

    return tuple(sorted(samples, key=lambda sample: sample.timestamp))
