"""URL configuration for core views."""

from __future__ import annotations

from django.urls import path

from core import views

app_name = "core"

urlpatterns = [
    path("", views.line_chart, name="line_chart"),
    path("api/line-chart/", views.line_chart_api, name="line_chart_api"),
]
