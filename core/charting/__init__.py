"""Declarative chart specification and rendering helpers.

The chart page is driven by `ChartSpec` values built from normalized metrics
rather than bespoke view logic. This package contains the schema, builder,
validation, option encoding, and render-surface lifecycle used by the views.
"""
