"""Forms for the metric chart page."""

from __future__ import annotations

from django import forms

from analysis.dto import RawRecord
from analysis.records import RecordPayloadError, parse_raw_records


class MetricRecordsForm(forms.Form):
    """Validate a pasted JSON array of metric records."""

    records = forms.JSONField(
        required=False,
        label="Records",
        widget=forms.Textarea(attrs={"rows": 14, "cols": 80, "spellcheck": "false"}),
        help_text=(
            'JSON array of records, e.g. [{"category": 1, "cpu": '
            '{"value": "10", "timestamp": 1000, "status": "GOOD"}}].'
        ),
    )

    def clean_records(self) -> tuple[RawRecord, ...]:
        """Parse the decoded JSON into RawRecord values.

        Returns:
            Parsed records; an empty field yields an empty tuple.
        """

        payload = self.cleaned_data.get("records")
        try:
            return parse_raw_records(payload)
        except RecordPayloadError as exc:
            raise forms.ValidationError(str(exc), code="invalid_shape") from exc

