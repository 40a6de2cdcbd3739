"""Validation for built ChartSpec values.

The builder is expected to produce aligned, well-formed specs. Validation runs
before a spec leaves the server so a structural bug surfaces as an explicit
error instead of a silently misdrawn chart.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from .schema import ChartSpec


@dataclass(frozen=True, slots=True)
class ChartSpecValidationResult:
    """Result of validating a ChartSpec.

    Args:
        is_valid: True when no errors exist.
        errors: Structural violations.
        warnings: Non-fatal notes intended for UI display.
    """

    is_valid: bool
    errors: tuple[str, ...] = ()
    warnings: tuple[str, ...] = ()


def validate_chart_spec(spec: ChartSpec) -> ChartSpecValidationResult:
    """Validate the structural invariants of a ChartSpec.

    Args:
        spec: ChartSpec produced by the chart builder.

    Returns:
        ChartSpecValidationResult containing errors and warnings.
    """

    errors: list[str] = []
    warnings: list[str] = []

    timeline = spec.category_axis.timestamps
    size = len(timeline)

    if not spec.series:
        errors.append("ChartSpec.series must contain at least one series.")

    if any(later <= earlier for earlier, later in zip(timeline, timeline[1:])):
        errors.append("ChartSpec.category_axis.timestamps must be strictly ascending.")

    if len(spec.category_axis.labels) != size:
        errors.append(
            f"ChartSpec.category_axis.labels has {len(spec.category_axis.labels)} entries; expected {size}."
        )

    if len(spec.tooltips) != size:
        errors.append(f"ChartSpec.tooltips has {len(spec.tooltips)} entries; expected {size}.")
    elif tuple(content.timestamp for content in spec.tooltips) != timeline:
        errors.append("ChartSpec.tooltips must follow the category axis timestamps.")

    names = [series.name for series in spec.series]
    duplicates = sorted({name for name in names if names.count(name) > 1})
    if duplicates:
        errors.append(f"Duplicate series names: {duplicates}.")

    if tuple(names) != spec.legend.names:
        errors.append("ChartSpec.legend.names must match series names in order.")

    for series in spec.series:
        if len(series.values) != size or len(series.points) != size:
            errors.append(f"ChartSeries[{series.name}] is not aligned to the category axis ({size} positions).")
            continue
        for index, (value, point) in enumerate(zip(series.values, series.points)):
            if value is not None and point is None:
                errors.append(f"ChartSeries[{series.name}] has a value without point styling at position {index}.")
                break
        if all(value is None or not math.isfinite(value) for value in series.values):
            warnings.append(f"ChartSeries[{series.name}] has no plottable values.")

    return ChartSpecValidationResult(is_valid=not errors, errors=tuple(errors), warnings=tuple(warnings))
