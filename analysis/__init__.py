"""Pure analysis package for statusCharts.

This package contains deterministic, testable computations that operate on
in-memory inputs and return DTOs. It must not import Django or perform any
database I/O.
"""

from .normalizer import normalize_metrics

__all__ = ["normalize_metrics"]
