"""App configuration for the core chart app."""

from __future__ import annotations

from django.apps import AppConfig


class CoreConfig(AppConfig):
    """Configuration for the `core` app (chart pipeline views and assets)."""

    name = "core"
    verbose_name = "Metric status charts"
