"""Tests for building ChartSpec values from normalized metrics."""

from __future__ import annotations

import math

import pytest

from analysis.normalizer import normalize_metrics
from analysis.records import parse_raw_records
from core.charting.builder import build_chart_spec
from core.charting.colors import DEFAULT_STATUS_COLOR
from core.charting.pipeline import NO_DATA_MESSAGE, build_chart_panel
from core.charting.schema import SeriesPoint
from core.charting.style import ChartStyle

pytestmark = pytest.mark.unit


def _reading(value: object, timestamp: int, status: str = "GOOD") -> dict[str, object]:
    return {"value": value, "timestamp": timestamp, "status": status}


def _spec_for(payload: list[dict[str, object]], **kwargs):
    return build_chart_spec(normalize_metrics(parse_raw_records(payload)), **kwargs)


def test_single_reading_builds_one_series_and_tooltip() -> None:
    """One cpu reading yields a one-point timeline with one tooltip line."""

    spec = _spec_for([{"category": 1, "cpu": _reading("10", 1000)}])

    assert spec.timeline == (1000,)
    assert spec.category_axis.labels == ("01/01 00:00",)
    assert [series.name for series in spec.series] == ["cpu"]
    assert spec.series[0].values == (10.0,)

    tooltip = spec.tooltip_for(1000)
    assert tooltip is not None
    assert tooltip.title == "1970/01/01 00:00:01"
    assert [(line.metric, line.value_text, line.status) for line in tooltip.lines] == [("cpu", "10", "GOOD")]
    assert tooltip.as_text() == "1970/01/01 00:00:01\ncpu: 10 (GOOD)"


def test_missing_metric_sample_becomes_gap(two_metric_records) -> None:
    """`mem` has no sample at 2000, so its second position is a gap."""

    spec = build_chart_spec(normalize_metrics(two_metric_records))
    by_name = {series.name: series for series in spec.series}

    assert spec.timeline == (1000, 2000)
    assert by_name["cpu"].values == (10.0, 20.0)
    assert by_name["mem"].values == (40.0, None)
    assert by_name["mem"].points[1] is None


def test_tooltip_skips_metrics_with_gaps(two_metric_records) -> None:
    """Only metrics sampled exactly at the timestamp contribute lines."""

    spec = build_chart_spec(normalize_metrics(two_metric_records))

    assert [line.metric for line in spec.tooltip_for(1000).lines] == ["cpu", "mem"]
    assert [line.metric for line in spec.tooltip_for(2000).lines] == ["cpu"]
    assert spec.tooltip_for(1500) is None


def test_point_colors_follow_each_points_status(two_metric_records) -> None:
    """Two points in one series with different statuses get different colors."""

    spec = build_chart_spec(normalize_metrics(two_metric_records))
    cpu = spec.series[0]

    assert cpu.points == (
        SeriesPoint(status="GOOD", color="#52c41a"),
        SeriesPoint(status="ERROR", color="#f5222d"),
    )
    assert spec.series[1].points[0] == SeriesPoint(status="WARNING", color="#faad14")


def test_point_colors_use_unified_axis_position() -> None:
    """A metric starting later is colored by its own sample at each position."""

    spec = _spec_for(
        [
            {"category": 1, "cpu": _reading("1", 1000, "GOOD")},
            {"category": 2, "cpu": _reading("2", 2000, "GOOD"), "mem": _reading("9", 2000, "ERROR")},
        ]
    )
    mem = spec.series[1]

    assert mem.points == (None, SeriesPoint(status="ERROR", color="#f5222d"))


def test_unknown_status_uses_default_color() -> None:
    """Statuses outside the color table fall back to the default color."""

    spec = _spec_for([{"category": 1, "cpu": _reading("1", 1000, "UNKNOWN_STATUS")}])

    assert spec.series[0].points[0] == SeriesPoint(status="UNKNOWN_STATUS", color=DEFAULT_STATUS_COLOR)
    assert spec.tooltip_for(1000).lines[0].color == DEFAULT_STATUS_COLOR


def test_unparseable_value_renders_as_gap_without_affecting_others() -> None:
    """A NaN sample is plotted as a gap but still listed in its tooltip."""

    spec = _spec_for(
        [
            {"category": 1, "cpu": _reading("abc", 1000, "ERROR"), "mem": _reading("40", 1000)},
            {"category": 2, "cpu": _reading("20", 2000)},
        ]
    )
    cpu, mem = spec.series

    assert cpu.values == (None, 20.0)
    assert cpu.points[0] == SeriesPoint(status="ERROR", color="#f5222d")
    assert mem.values == (40.0, None)

    line = spec.tooltip_for(1000).lines[0]
    assert line.metric == "cpu"
    assert math.isnan(line.value)
    assert line.value_text == "NaN"


def test_duplicate_timestamps_plot_last_arrival() -> None:
    """Aligned data and tooltip agree on the last sample for a repeated timestamp."""

    spec = _spec_for(
        [
            {"category": 1, "cpu": _reading("1", 1000, "GOOD")},
            {"category": 2, "cpu": _reading("2", 1000, "ERROR")},
        ]
    )

    assert spec.timeline == (1000,)
    assert spec.series[0].values == (2.0,)
    assert spec.tooltip_for(1000).lines[0].value_text == "2"


def test_legend_and_series_follow_metric_order() -> None:
    """Legend entries are the metric names in first-seen order."""

    spec = _spec_for(
        [
            {"category": 1, "mem": _reading("1", 2000)},
            {"category": 2, "cpu": _reading("1", 1000), "disk": _reading("1", 1000)},
        ]
    )

    assert spec.legend.names == ("mem", "cpu", "disk")
    assert tuple(series.name for series in spec.series) == spec.legend.names


def test_series_presentation_defaults() -> None:
    """Series are smoothed lines with circle markers."""

    series = _spec_for([{"category": 1, "cpu": _reading("1", 1000)}]).series[0]

    assert (series.chart_type, series.smooth, series.symbol, series.symbol_size, series.line_width) == (
        "line",
        True,
        "circle",
        6,
        2,
    )


def test_build_chart_spec_is_deterministic(two_metric_payload) -> None:
    """Running the pipeline twice on the same input yields equal outputs."""

    first_metrics = normalize_metrics(parse_raw_records(two_metric_payload))
    second_metrics = normalize_metrics(parse_raw_records(two_metric_payload))

    assert first_metrics == second_metrics
    assert build_chart_spec(first_metrics) == build_chart_spec(second_metrics)


def test_build_chart_spec_rejects_empty_metrics() -> None:
    """The builder is not meant to produce zero-series charts."""

    with pytest.raises(ValueError, match="at least one metric"):
        build_chart_spec({})


def test_custom_style_changes_colors_formats_and_height() -> None:
    """Presentation settings come from the ChartStyle."""

    style = ChartStyle(
        status_colors={"OK": "#000000"},
        default_color="#ffffff",
        axis_label_format="%H:%M:%S",
        tooltip_datetime_format="%Y-%m-%d",
        height=250,
    )

    spec = _spec_for(
        [{"category": 1, "cpu": _reading("1", 61_000, "OK"), "mem": _reading("1", 61_000, "GOOD")}],
        style=style,
    )

    assert spec.category_axis.labels == ("00:01:01",)
    assert spec.tooltip_for(61_000).title == "1970-01-01"
    assert [series.points[0].color for series in spec.series] == ["#000000", "#ffffff"]
    assert spec.height == 250


def test_build_chart_panel_short_circuits_without_data() -> None:
    """Empty input produces the no-data state and no spec."""

    panel = build_chart_panel([])

    assert panel.state == "no_data"
    assert panel.spec is None
    assert panel.metrics == {}
    assert panel.message == NO_DATA_MESSAGE


def test_build_chart_panel_ready_state(two_metric_records) -> None:
    """Records with readings produce a ready panel carrying the spec."""

    panel = build_chart_panel(two_metric_records)

    assert panel.state == "ready"
    assert panel.message is None
    assert panel.spec is not None
    assert panel.spec.legend.names == ("cpu", "mem")
