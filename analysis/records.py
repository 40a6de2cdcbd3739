"""Coerce decoded JSON payloads into RawRecord values.

Producers send records as JSON objects where every key other than `category`
names a metric. This module is the only place that walks those keys; the rest
of the pipeline works on the explicit `RawRecord.readings` pairs.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from typing import Any

from .dto import MetricReading, RawRecord, Timestamp

logger = logging.getLogger(__name__)

CATEGORY_KEY = "category"


class RecordPayloadError(ValueError):
    """Raised when a payload does not have the documented top-level shape."""


def parse_raw_records(payload: object) -> tuple[RawRecord, ...]:
    """Parse a decoded JSON payload into RawRecord values.

    Args:
        payload: A list of record objects, or None.

    Returns:
        Parsed records in input order. None yields an empty tuple.

    Raises:
        RecordPayloadError: When the payload is not a list of objects.
    """

    if payload is None:
        return ()
    if not isinstance(payload, list | tuple):
        raise RecordPayloadError(f"Expected a list of records, got {type(payload).__name__}.")

    records: list[RawRecord] = []
    for index, item in enumerate(payload):
        if not isinstance(item, Mapping):
            raise RecordPayloadError(f"Record {index} must be an object, got {type(item).__name__}.")
        records.append(parse_raw_record(item))
    return tuple(records)


def parse_raw_record(item: Mapping[str, Any]) -> RawRecord:
    """Parse one record object, skipping malformed readings.

    Args:
        item: Decoded JSON object for a single record.

    Returns:
        RawRecord with readings in key order.
    """

    readings: list[tuple[str, MetricReading]] = []
    for key, raw in item.items():
        if key == CATEGORY_KEY:
            continue
        reading = _parse_reading(raw)
        if reading is None:
            logger.debug("Skipping malformed reading for metric %r: %r", key, raw)
            continue
        readings.append((str(key), reading))

    return RawRecord(category=_as_number(item.get(CATEGORY_KEY)), readings=tuple(readings))


def _parse_reading(raw: object) -> MetricReading | None:
    """Return a MetricReading for object-shaped readings, else None."""

    if not isinstance(raw, Mapping):
        return None
    timestamp = _as_number(raw.get("timestamp"))
    if timestamp is None:
        return None
    status = raw.get("status")
    return MetricReading(
        value=raw.get("value"),
        timestamp=timestamp,
        status="" if status is None else str(status),
    )


def _as_number(value: object) -> Timestamp | None:
    """Return finite int/float values unchanged; reject booleans and everything else."""

    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and math.isfinite(value):
        return value
    return None
