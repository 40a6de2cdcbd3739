"""Render surface lifecycle for an externally rendered chart.

A ChartSurface owns one renderer instance bound to one mount point. The
renderer is created on the first chart that has data, updated in place on
every later input change and released exactly once on dispose. Resize
listeners are registered together with the renderer and removed on dispose.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import Any, Protocol

from analysis.dto import RawRecord

from .option_codec import encode_chart_option, encode_tooltips
from .pipeline import ChartPanel, build_chart_panel
from .style import DEFAULT_CHART_STYLE, ChartStyle

logger = logging.getLogger(__name__)


class ChartRenderer(Protocol):
    """Minimal interface of the external rendering library."""

    def set_option(self, option: dict[str, Any], tooltips: list[str]) -> None:
        """Apply a full chart option."""

    def resize(self) -> None:
        """Re-layout after the mount surface changed size."""

    def dispose(self) -> None:
        """Release the renderer and its drawing resources."""


RendererFactory = Callable[[object], ChartRenderer]
ResizeListener = Callable[[], None]


class ChartSurfaceDisposedError(RuntimeError):
    """Raised when a disposed ChartSurface is used again."""


class ResizeEvents:
    """Registry of resize listeners, standing in for a window resize event."""

    def __init__(self) -> None:
        self._listeners: list[ResizeListener] = []

    def add(self, listener: ResizeListener) -> None:
        self._listeners.append(listener)

    def remove(self, listener: ResizeListener) -> None:
        self._listeners.remove(listener)

    def dispatch(self) -> None:
        for listener in list(self._listeners):
            listener()

    def __len__(self) -> int:
        return len(self._listeners)


class ChartSurface:
    """Scoped owner of one renderer instance.

    Args:
        mount: Opaque drawable surface handed to the renderer factory.
        renderer_factory: Creates a renderer bound to `mount`.
        resize_events: Event source the surface listens to for resizes.
        style: Presentation configuration for built charts.
    """

    def __init__(
        self,
        mount: object,
        *,
        renderer_factory: RendererFactory,
        resize_events: ResizeEvents | None = None,
        style: ChartStyle = DEFAULT_CHART_STYLE,
    ) -> None:
        self.mount = mount
        self.style = style
        self.resize_events = resize_events if resize_events is not None else ResizeEvents()
        self._renderer_factory = renderer_factory
        self._renderer: ChartRenderer | None = None
        self._disposed = False
        self.last_panel: ChartPanel | None = None

    @property
    def renderer(self) -> ChartRenderer | None:
        """Return the live renderer, if one has been created."""

        return self._renderer

    @property
    def disposed(self) -> bool:
        return self._disposed

    def update(self, records: Iterable[RawRecord] | None) -> ChartPanel:
        """Rebuild the chart from a new record collection.

        Args:
            records: Parsed records, or None.

        Returns:
            The ChartPanel that was produced. In the "no_data" state the
            renderer is left untouched and the caller shows a placeholder.

        Raises:
            ChartSurfaceDisposedError: If the surface was already disposed.
        """

        if self._disposed:
            raise ChartSurfaceDisposedError("ChartSurface.update called after dispose().")

        panel = build_chart_panel(records, style=self.style)
        self.last_panel = panel
        if panel.spec is None:
            return panel

        if self._renderer is None:
            logger.debug("Creating chart renderer for mount %r", self.mount)
            self._renderer = self._renderer_factory(self.mount)
            self.resize_events.add(self.resize)
        self._renderer.set_option(encode_chart_option(panel.spec), encode_tooltips(panel.spec))
        return panel

    def resize(self) -> None:
        """Forward a resize notification to the renderer, if any."""

        if self._renderer is not None:
            self._renderer.resize()

    def dispose(self) -> None:
        """Release the renderer and resize listener. Safe to call repeatedly."""

        if self._disposed:
            return
        self._disposed = True
        if self._renderer is not None:
            self.resize_events.remove(self.resize)
            logger.debug("Disposing chart renderer for mount %r", self.mount)
            try:
                self._renderer.dispose()
            finally:
                self._renderer = None

    def __enter__(self) -> ChartSurface:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.dispose()
