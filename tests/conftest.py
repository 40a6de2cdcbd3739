"""Pytest fixtures shared across the chart pipeline tests."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import pytest

from analysis.dto import RawRecord
from analysis.records import parse_raw_records


def reading(value: object, timestamp: int, status: str = "GOOD") -> dict[str, Any]:
    """Return a reading object in the producer's JSON shape."""

    return {"value": value, "timestamp": timestamp, "status": status}


@pytest.fixture
def two_metric_payload() -> list[dict[str, Any]]:
    """Return records where `cpu` has two samples and `mem` only the first."""

    return [
        {"category": 1, "cpu": reading("10", 1000), "mem": reading("40", 1000, "WARNING")},
        {"category": 2, "cpu": reading("20", 2000, "ERROR")},
    ]


@pytest.fixture
def two_metric_records(two_metric_payload: list[dict[str, Any]]) -> tuple[RawRecord, ...]:
    """Return parsed RawRecord values for `two_metric_payload`."""

    return parse_raw_records(two_metric_payload)


def pytest_collection_modifyitems(items: Sequence[pytest.Item]) -> None:
    """Enforce that every test has exactly one speed marker.

    The suite is runnable by intent:
    - `unit`: pure, fast tests over the analysis and charting layers.
    - `integration`: tests touching Django views, templates, or settings.

    Each test must have exactly one of these markers.
    """

    invalid: list[str] = []
    for item in items:
        has_unit = item.get_closest_marker("unit") is not None
        has_integration = item.get_closest_marker("integration") is not None
        if has_unit == has_integration:
            markers = []
            if has_unit:
                markers.append("unit")
            if has_integration:
                markers.append("integration")
            invalid.append(f"{item.nodeid} (markers={markers or 'none'})")

    if invalid:
        joined = "\n".join(f"- {nodeid}" for nodeid in invalid)
        raise pytest.UsageError(
            "Each test must have exactly one speed marker: `@pytest.mark.unit` or "
            "`@pytest.mark.integration`.\n"
            f"Offending tests:\n{joined}"
        )
