"""Status-to-color lookup for chart points."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Final

STATUS_COLORS: Final[Mapping[str, str]] = MappingProxyType(
    {
        "GOOD": "#52c41a",
        "WARNING": "#faad14",
        "ERROR": "#f5222d",
    }
)

DEFAULT_STATUS_COLOR: Final[str] = "#1890ff"


def color_for_status(
    status: str,
    *,
    palette: Mapping[str, str] = STATUS_COLORS,
    default: str = DEFAULT_STATUS_COLOR,
) -> str:
    """Return the point color for a status label.

    Args:
        status: Status label attached to a sample.
        palette: Status → hex color table.
        default: Color used for statuses missing from the table.

    Returns:
        A hex color string.
    """

    return palette.get(status) or default
