"""Records → chart panel pipeline used by views and render surfaces."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from analysis.dto import NormalizedMetrics, RawRecord
from analysis.normalizer import normalize_metrics

from .builder import build_chart_spec
from .schema import ChartSpec, ChartState
from .style import DEFAULT_CHART_STYLE, ChartStyle

NO_DATA_MESSAGE = "No data available"


@dataclass(frozen=True, slots=True)
class ChartPanel:
    """Outcome of running the chart pipeline over one record collection.

    Args:
        state: "no_data" when nothing can be charted, else "ready".
        metrics: Normalized metrics the spec was built from.
        spec: ChartSpec when `state == "ready"`.
    """

    state: ChartState
    metrics: NormalizedMetrics
    spec: ChartSpec | None = None

    @property
    def message(self) -> str | None:
        """Return placeholder text for the no-data state."""

        return NO_DATA_MESSAGE if self.state == "no_data" else None


def build_chart_panel(
    records: Iterable[RawRecord] | None,
    *,
    style: ChartStyle = DEFAULT_CHART_STYLE,
) -> ChartPanel:
    """Normalize records and build a chart spec unless there is no data.

    Args:
        records: Parsed records, or None.
        style: Presentation configuration for the chart.

    Returns:
        ChartPanel in the "no_data" state (no spec built) or the "ready" state.
    """

    metrics = normalize_metrics(records)
    if not metrics:
        return ChartPanel(state="no_data", metrics=metrics)
    return ChartPanel(state="ready", metrics=metrics, spec=build_chart_spec(metrics, style=style))
