"""Encode ChartSpec values into ECharts option payloads.

The browser owns the ECharts instance; it receives a JSON-safe option dict plus
pre-rendered tooltip HTML aligned to the category axis. Gaps and non-finite
values are encoded as `null` so the renderer leaves the point out
and the payload stays strict JSON.
"""

from __future__ import annotations

import math
from typing import Any

from django.utils.html import format_html, format_html_join

from .pipeline import ChartPanel
from .schema import ChartSeries, ChartSpec, TooltipContent

_MARKER_STYLE = (
    "display:inline-block;margin-right:4px;border-radius:10px;width:10px;height:10px;background-color:{};"
)


def encode_chart_option(spec: ChartSpec) -> dict[str, Any]:
    """Encode a ChartSpec into an ECharts option dictionary.

    Args:
        spec: ChartSpec to encode.

    Returns:
        Dict payload safe for `json.dumps` and `echarts.setOption`.
    """

    axis = spec.category_axis
    return {
        "tooltip": {"trigger": spec.tooltip_trigger},
        "legend": {"data": list(spec.legend.names), "top": spec.legend.top},
        "grid": {
            "left": spec.grid.left,
            "right": spec.grid.right,
            "bottom": spec.grid.bottom,
            "top": spec.grid.top,
            "containLabel": spec.grid.contain_label,
        },
        "xAxis": {
            "type": "category",
            "boundaryGap": axis.boundary_gap,
            "data": list(axis.labels),
            "axisLabel": {"rotate": axis.label_rotate, "fontSize": axis.label_font_size},
        },
        "yAxis": {"type": "value", "axisLabel": {"formatter": spec.value_axis.label_formatter}},
        "series": [_encode_series(series) for series in spec.series],
    }


def encode_tooltips(spec: ChartSpec) -> list[str]:
    """Render tooltip HTML for every category axis position."""

    return [render_tooltip_html(content) for content in spec.tooltips]


def render_tooltip_html(content: TooltipContent) -> str:
    """Render one tooltip as escaped HTML.

    Args:
        content: Tooltip content for a unified timestamp.

    Returns:
        The title followed by one `<br/>`-terminated line per sampled metric.
    """

    lines = format_html_join(
        "",
        '<span style="' + _MARKER_STYLE + '"></span> {}: {} ({})<br/>',
        ((line.color, line.metric, line.value_text, line.status) for line in content.lines),
    )
    return str(format_html("{}<br/>{}", content.title, lines))


def encode_chart_panel(panel: ChartPanel) -> dict[str, Any]:
    """Encode a ChartPanel into the JSON payload served to the browser.

    Args:
        panel: Pipeline outcome.

    Returns:
        `{"state": "no_data", "message": ...}` or a ready payload with option,
        tooltips and height.
    """

    if panel.spec is None:
        return {"state": "no_data", "message": panel.message}
    return {
        "state": "ready",
        "option": encode_chart_option(panel.spec),
        "tooltips": encode_tooltips(panel.spec),
        "height": panel.spec.height,
    }


def _encode_series(series: ChartSeries) -> dict[str, Any]:
    """Encode one series with per-point item colors."""

    data: list[dict[str, Any] | None] = []
    for value, point in zip(series.values, series.points, strict=True):
        if value is None or point is None or not math.isfinite(value):
            data.append(None)
            continue
        data.append({"value": value, "status": point.status, "itemStyle": {"color": point.color}})
    return {
        "name": series.name,
        "type": series.chart_type,
        "smooth": series.smooth,
        "symbol": series.symbol,
        "symbolSize": series.symbol_size,
        "data": data,
        "lineStyle": {"width": series.line_width},
    }
