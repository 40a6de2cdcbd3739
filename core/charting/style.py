"""Fixed presentation settings for status-colored line charts.

`ChartStyle` carries the parts of the chart that are configuration rather than
data: the status color table, the time zone and formats used for labels, and
the chart height. Django settings can override any of them through the
`METRIC_CHARTS` dict.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from .colors import DEFAULT_STATUS_COLOR, STATUS_COLORS


@dataclass(frozen=True, slots=True)
class ChartStyle:
    """Presentation configuration used by the chart builder.

    Args:
        status_colors: Status → hex color table.
        default_color: Color for statuses missing from `status_colors`.
        time_zone: IANA zone name used to render timestamps.
        tooltip_datetime_format: strftime format for tooltip titles.
        axis_label_format: strftime format for category axis labels.
        height: Chart height in pixels.
    """

    status_colors: Mapping[str, str] = field(default_factory=lambda: dict(STATUS_COLORS))
    default_color: str = DEFAULT_STATUS_COLOR
    time_zone: str = "UTC"
    tooltip_datetime_format: str = "%Y/%m/%d %H:%M:%S"
    axis_label_format: str = "%m/%d %H:%M"
    height: int = 400


DEFAULT_CHART_STYLE = ChartStyle()


def chart_style_from_settings(config: Mapping[str, Any] | None = None) -> ChartStyle:
    """Build a ChartStyle from a `METRIC_CHARTS` settings dict.

    Args:
        config: Settings mapping. When None, `settings.METRIC_CHARTS` is read.

    Returns:
        ChartStyle with missing keys taken from `DEFAULT_CHART_STYLE`.
    """

    if config is None:
        from django.conf import settings

        config = getattr(settings, "METRIC_CHARTS", {}) or {}

    base = DEFAULT_CHART_STYLE
    return ChartStyle(
        status_colors=dict(config.get("STATUS_COLORS") or base.status_colors),
        default_color=str(config.get("DEFAULT_COLOR") or base.default_color),
        time_zone=str(config.get("TIME_ZONE") or base.time_zone),
        tooltip_datetime_format=str(config.get("TOOLTIP_DATETIME_FORMAT") or base.tooltip_datetime_format),
        axis_label_format=str(config.get("AXIS_LABEL_FORMAT") or base.axis_label_format),
        height=int(config.get("HEIGHT") or base.height),
    )
