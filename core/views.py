"""Views for the status-colored metric line chart."""

from __future__ import annotations

import json
import logging
from typing import Any

from django.http import HttpRequest, HttpResponse, JsonResponse
from django.shortcuts import render
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_http_methods, require_POST

from analysis.records import RecordPayloadError, parse_raw_records
from core.charting.option_codec import encode_chart_panel
from core.charting.pipeline import ChartPanel, build_chart_panel
from core.charting.style import chart_style_from_settings
from core.charting.validator import validate_chart_spec
from core.demo import demo_records_payload
from core.forms import MetricRecordsForm

logger = logging.getLogger(__name__)


class ChartSpecInvalidError(RuntimeError):
    """Raised when a built ChartSpec fails structural validation."""


@require_http_methods(["GET", "POST"])
def line_chart(request: HttpRequest) -> HttpResponse:
    """Render the chart page for demo records or pasted records."""

    style = chart_style_from_settings()
    if request.method == "POST":
        form = MetricRecordsForm(request.POST)
    else:
        demo_payload = demo_records_payload()
        form = MetricRecordsForm({"records": json.dumps(demo_payload, indent=2)})

    if not form.is_valid():
        logger.warning("Rejected chart records: %s", form.errors.get_json_data())
        context = {"form": form, "chart_payload": None, "height": style.height}
        return render(request, "core/line_chart.html", context, status=400)

    panel = build_chart_panel(form.cleaned_data["records"], style=style)
    try:
        payload = _panel_payload(panel)
    except ChartSpecInvalidError as exc:
        context = {"form": form, "chart_payload": None, "height": style.height, "chart_error": str(exc)}
        return render(request, "core/line_chart.html", context, status=500)

    context = {
        "form": form,
        "chart_payload": payload,
        "height": style.height,
        "no_data_message": panel.message,
    }
    return render(request, "core/line_chart.html", context)


@csrf_exempt
@require_POST
def line_chart_api(request: HttpRequest) -> JsonResponse:
    """Return the chart payload for a JSON array of records."""

    try:
        payload = json.loads(request.body or b"null")
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        logger.warning("Rejected chart API body: %s", exc)
        return JsonResponse({"ok": False, "error": "Request body must be valid JSON."}, status=400)

    try:
        records = parse_raw_records(payload)
    except RecordPayloadError as exc:
        logger.warning("Rejected chart API payload: %s", exc)
        return JsonResponse({"ok": False, "error": str(exc)}, status=400)

    panel = build_chart_panel(records, style=chart_style_from_settings())
    try:
        return JsonResponse(_panel_payload(panel))
    except ChartSpecInvalidError as exc:
        return JsonResponse({"ok": False, "error": str(exc)}, status=500)


def _panel_payload(panel: ChartPanel) -> dict[str, Any]:
    """Validate a ready panel and encode it for the browser.

    Raises:
        ChartSpecInvalidError: If the built spec fails validation.
    """

    payload = encode_chart_panel(panel)
    if panel.spec is None:
        return payload

    result = validate_chart_spec(panel.spec)
    if not result.is_valid:
        logger.error("Built chart spec failed validation: %s", "; ".join(result.errors))
        raise ChartSpecInvalidError("Chart could not be built from these records.")
    payload["warnings"] = list(result.warnings)
    return payload
