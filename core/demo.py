"""Deterministic demo records for the chart page.

The demo payload exercises every rendering path: mixed statuses inside one
series, a metric missing at some timestamps, an unparseable value and a status
outside the color table.
"""

from __future__ import annotations

from typing import Any, Final

DEMO_START_MS: Final[int] = 1_735_689_600_000  # 2025-01-01T00:00:00Z
DEMO_STEP_MS: Final[int] = 5 * 60 * 1000

_CPU = (("42.5", "GOOD"), ("55.1", "GOOD"), ("78.9", "WARNING"), ("93.2", "ERROR"), ("61.0", "GOOD"), ("48.7", "GOOD"))
_MEM = (("61", "GOOD"), ("64", "GOOD"), (None, None), ("88", "WARNING"), ("n/a", "ERROR"), ("70", "GOOD"))
_DISK = (("12.0", "GOOD"), (None, None), ("12.4", "GOOD"), (None, None), ("13.1", "MAINTENANCE"), ("13.3", "GOOD"))


def demo_records_payload() -> list[dict[str, Any]]:
    """Return demo records in the JSON shape producers send.

    Returns:
        A list of record objects, one per timestamp, each with a `category`
        marker and up to three metric readings.
    """

    payload: list[dict[str, Any]] = []
    for index, samples in enumerate(zip(_CPU, _MEM, _DISK)):
        timestamp = DEMO_START_MS + index * DEMO_STEP_MS
        record: dict[str, Any] = {"category": index + 1}
        for name, (value, status) in zip(("cpu", "mem", "disk"), samples):
            if value is None:
                continue
            record[name] = {"value": value, "timestamp": timestamp, "status": status}
        payload.append(record)
    return payload
