"""Chart spec builder for status-colored multi-metric line charts.

The builder is a pure function of the normalized metrics mapping: it derives
the unified timeline, aligns every series to it, colors each point by its own
status and precomputes tooltip content for every axis position.
"""

from __future__ import annotations

import math

from analysis.dto import NormalizedMetrics, NormalizedSample, Timestamp
from analysis.timeline import align_samples, unified_timeline

from .colors import color_for_status
from .formatting import format_timestamp, format_value
from .schema import (
    CategoryAxis,
    ChartSeries,
    ChartSpec,
    Legend,
    SeriesPoint,
    TooltipContent,
    TooltipLine,
    ValueAxis,
)
from .style import DEFAULT_CHART_STYLE, ChartStyle


def build_chart_spec(metrics: NormalizedMetrics, *, style: ChartStyle = DEFAULT_CHART_STYLE) -> ChartSpec:
    """Build a ChartSpec from normalized metrics.

    Args:
        metrics: Metric name → samples sorted by timestamp, in legend order.
        style: Presentation configuration (colors, time zone, formats).

    Returns:
        ChartSpec describing axes, series, legend and tooltips.

    Raises:
        ValueError: If `metrics` is empty. Callers render a "no data" state
            instead of an empty chart.
    """

    if not metrics:
        raise ValueError("build_chart_spec requires at least one metric; render the no-data state instead.")

    timeline = unified_timeline(metrics)
    aligned = {name: align_samples(series, timeline) for name, series in metrics.items()}

    series = tuple(_build_series(name, samples, style=style) for name, samples in aligned.items())
    labels = tuple(
        format_timestamp(timestamp, fmt=style.axis_label_format, time_zone=style.time_zone) for timestamp in timeline
    )
    tooltips = tuple(
        _build_tooltip(timestamp, index, aligned, style=style) for index, timestamp in enumerate(timeline)
    )

    return ChartSpec(
        category_axis=CategoryAxis(timestamps=timeline, labels=labels),
        value_axis=ValueAxis(),
        series=series,
        legend=Legend(names=tuple(metrics.keys())),
        tooltips=tooltips,
        height=style.height,
    )


def _build_series(name: str, samples: list[NormalizedSample | None], *, style: ChartStyle) -> ChartSeries:
    """Build one aligned series with per-point colors."""

    values: list[float | None] = []
    points: list[SeriesPoint | None] = []
    for sample in samples:
        if sample is None:
            values.append(None)
            points.append(None)
            continue
        values.append(None if math.isnan(sample.value) else sample.value)
        points.append(SeriesPoint(status=sample.status, color=_point_color(sample.status, style=style)))
    return ChartSeries(name=name, values=tuple(values), points=tuple(points))


def _build_tooltip(
    timestamp: Timestamp,
    index: int,
    aligned: dict[str, list[NormalizedSample | None]],
    *,
    style: ChartStyle,
) -> TooltipContent:
    """Build tooltip content for one axis position."""

    lines: list[TooltipLine] = []
    for name, samples in aligned.items():
        sample = samples[index]
        if sample is None:
            continue
        lines.append(
            TooltipLine(
                metric=name,
                value=sample.value,
                value_text=format_value(sample.value),
                status=sample.status,
                color=_point_color(sample.status, style=style),
            )
        )
    title = format_timestamp(timestamp, fmt=style.tooltip_datetime_format, time_zone=style.time_zone)
    return TooltipContent(timestamp=timestamp, title=title, lines=tuple(lines))


def _point_color(status: str, *, style: ChartStyle) -> str:
    return color_for_status(status, palette=style.status_colors, default=style.default_color)
