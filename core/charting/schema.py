"""Schema types for declarative status-colored line charts.

A ChartSpec is the full, renderer-agnostic description of one chart: the
shared time axis, one series per metric with per-point colors, the legend and
the tooltip content for every axis position. It is rebuilt from scratch on
every input change and never mutated.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from analysis.dto import Timestamp

ChartType = Literal["line"]
TooltipTrigger = Literal["axis", "item"]
ChartState = Literal["no_data", "ready"]


@dataclass(frozen=True, slots=True)
class CategoryAxis:
    """Shared time axis built from the unified timeline.

    Args:
        timestamps: Unified timeline (epoch millis), ascending and distinct.
        labels: Short date/time labels aligned to `timestamps`.
        boundary_gap: Whether points sit between ticks rather than on them.
        label_rotate: Label rotation in degrees.
        label_font_size: Label font size in pixels.
    """

    timestamps: tuple[Timestamp, ...]
    labels: tuple[str, ...]
    boundary_gap: bool = False
    label_rotate: int = 45
    label_font_size: int = 11


@dataclass(frozen=True, slots=True)
class ValueAxis:
    """Plain numeric value axis."""

    label_formatter: str = "{value}"


@dataclass(frozen=True, slots=True)
class SeriesPoint:
    """Styling for one plotted point.

    Args:
        status: Status label of the sample.
        color: Color derived from `status`.
    """

    status: str
    color: str


@dataclass(frozen=True, slots=True)
class ChartSeries:
    """One metric's series aligned to the category axis.

    Args:
        name: Metric name (also the legend entry).
        values: Values aligned to the axis; None marks a gap or invalid value.
        points: Per-point styling aligned to the axis; None at gaps.
        chart_type: Series type.
        smooth: Whether the line is smoothed.
        symbol: Point marker shape.
        symbol_size: Point marker size in pixels.
        line_width: Line width in pixels.
    """

    name: str
    values: tuple[float | None, ...]
    points: tuple[SeriesPoint | None, ...]
    chart_type: ChartType = "line"
    smooth: bool = True
    symbol: str = "circle"
    symbol_size: int = 6
    line_width: int = 2


@dataclass(frozen=True, slots=True)
class Legend:
    """Legend entries in series order."""

    names: tuple[str, ...]
    top: int = 0


@dataclass(frozen=True, slots=True)
class ChartGrid:
    """Plot area margins."""

    left: str = "3%"
    right: str = "4%"
    bottom: str = "3%"
    top: str = "40px"
    contain_label: bool = True


@dataclass(frozen=True, slots=True)
class TooltipLine:
    """A tooltip line for one metric sampled at the hovered timestamp."""

    metric: str
    value: float
    value_text: str
    status: str
    color: str


@dataclass(frozen=True, slots=True)
class TooltipContent:
    """Tooltip content for one unified timestamp.

    Args:
        timestamp: Unified timestamp the tooltip describes.
        title: Full date/time string.
        lines: One line per metric with an exact sample at `timestamp`.
    """

    timestamp: Timestamp
    title: str
    lines: tuple[TooltipLine, ...]

    def as_text(self) -> str:
        """Return the tooltip as plain text, one line per row."""

        rows = [self.title]
        rows.extend(f"{line.metric}: {line.value_text} ({line.status})" for line in self.lines)
        return "\n".join(rows)


@dataclass(frozen=True, slots=True)
class ChartSpec:
    """Declarative definition of a status-colored multi-metric line chart.

    Args:
        category_axis: Shared time axis.
        value_axis: Numeric value axis.
        series: One series per metric, in legend order.
        legend: Legend entries.
        tooltips: Tooltip content aligned to `category_axis.timestamps`.
        grid: Plot area margins.
        tooltip_trigger: How the renderer triggers tooltips.
        height: Chart height in pixels.
    """

    category_axis: CategoryAxis
    value_axis: ValueAxis
    series: tuple[ChartSeries, ...]
    legend: Legend
    tooltips: tuple[TooltipContent, ...]
    grid: ChartGrid = ChartGrid()
    tooltip_trigger: TooltipTrigger = "axis"
    height: int = 400

    @property
    def timeline(self) -> tuple[Timestamp, ...]:
        """Return the unified timeline backing the category axis."""

        return self.category_axis.timestamps

    def tooltip_for(self, timestamp: Timestamp) -> TooltipContent | None:
        """Return tooltip content for a unified timestamp, or None when absent."""

        for content in self.tooltips:
            if content.timestamp == timestamp:
                return content
        return None
