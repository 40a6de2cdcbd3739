"""DTO types for the metric normalization pipeline.

DTOs are plain data containers passed between the normalizer and the chart
builder. They intentionally avoid any Django dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

Timestamp = int | float


@dataclass(frozen=True, slots=True)
class MetricReading:
    """A single raw reading for one metric inside a record.

    Attributes:
        value: Numeric text as supplied by the producer (parsed later).
        timestamp: Epoch milliseconds.
        status: Health label (e.g. "GOOD", "WARNING", "ERROR"); not validated.
    """

    value: object
    timestamp: Timestamp
    status: str


@dataclass(frozen=True, slots=True)
class RawRecord:
    """One input record: a reserved category plus ordered metric readings.

    Attributes:
        category: Reserved numeric marker. Accepted but never read downstream.
        readings: Ordered `(metric_name, reading)` pairs.
    """

    category: Timestamp | None
    readings: tuple[tuple[str, MetricReading], ...] = ()


@dataclass(frozen=True, slots=True)
class NormalizedSample:
    """A parsed point for one metric.

    Attributes:
        timestamp: Epoch milliseconds.
        value: Parsed float value; NaN when the raw value was unparseable.
        status: Status label passed through from the reading.
    """

    timestamp: Timestamp
    value: float
    status: str


MetricSeries = tuple[NormalizedSample, ...]
NormalizedMetrics = dict[str, MetricSeries]
