"""Unified timeline helpers shared by every series in a chart."""

from __future__ import annotations

from .dto import MetricSeries, NormalizedMetrics, NormalizedSample, Timestamp


def unified_timeline(metrics: NormalizedMetrics) -> tuple[Timestamp, ...]:
    """Return the distinct timestamps across all metrics, ascending."""

    return tuple(sorted({sample.timestamp for series in metrics.values() for sample in series}))


def align_samples(series: MetricSeries, timeline: tuple[Timestamp, ...]) -> list[NormalizedSample | None]:
    """Align a series to the unified timeline.

    Args:
        series: Samples for one metric.
        timeline: Unified timeline the chart axis is built from.

    Returns:
        One entry per timeline position: the sample at that exact timestamp,
        or None for a gap. When several samples share a timestamp the last
        one in series order is used.
    """

    by_timestamp = {sample.timestamp: sample for sample in series}
    return [by_timestamp.get(timestamp) for timestamp in timeline]
