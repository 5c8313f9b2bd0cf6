"""Tests for record-store export."""

from __future__ import annotations

import pytest
from structlog.testing import capture_logs

from job_fit_engine.engine import ScoringEngine
from job_fit_engine.export import RECORD_FIT_LABELS, coerce_fit_label, to_record_fields
from tests.mocks.mock_factories import make_job_payload, make_profile_dict


@pytest.mark.unit
class TestCoerceFitLabel:
    """Tests for coerce_fit_label."""

    @pytest.mark.parametrize("label", RECORD_FIT_LABELS)
    def test_valid_labels_pass(self, label: str) -> None:
        """Allowed labels are returned unchanged."""
        with capture_logs() as logs:
            assert coerce_fit_label(label) == label
        assert logs == []

    @pytest.mark.parametrize(
        ("label", "expected"),
        [
            ("Strong Match", "STRONG FIT"),
            ("Very Good", "GOOD FIT"),
            ("Fair", "FAIR FIT"),
            ("moderate", "MODERATE FIT"),
            ("weak-ish", "WEAK FIT"),
            ("POOR", "POOR FIT"),
            ("hard pass", "HARD NO"),
            ("NO", "HARD NO"),
            ("EXCELLENT", "MODERATE FIT"),
        ],
    )
    def test_nearest_member(self, label: str, expected: str) -> None:
        """Unrecognized labels map to the nearest allowed member."""
        with capture_logs() as logs:
            assert coerce_fit_label(label) == expected
        assert logs[0]["event"] == "fit_label_coerced"
        assert logs[0]["original"] == label


@pytest.mark.unit
class TestToRecordFields:
    """Tests for to_record_fields."""

    def test_job_fields_only(self) -> None:
        """Absent optional values are omitted."""
        fields = to_record_fields(make_job_payload(source=None, salary_max="$180,000"))
        assert fields["Job Title"] == "Analytics Lead"
        assert fields["Source"] == "LinkedIn"
        assert fields["Status"] == "Captured"
        assert fields["Salary Max"] == 180_000
        assert "Salary Min" not in fields
        assert "Equity Mentioned" not in fields
        assert "Overall Fit Score" not in fields

    def test_with_score(self) -> None:
        """Scores, skills and the coerced label are flattened."""
        job = make_job_payload()
        result = ScoringEngine().score(job, make_profile_dict())
        fields = to_record_fields(job, result)
        assert fields["Overall Fit Score"] == 48
        assert fields["Fit Recommendation"] == "WEAK FIT"
        assert fields["Preference Fit Score"] == 20
        assert fields["Role Fit Score"] == 28
        assert fields["Matched Skills"] == "sql, python"
        assert fields["Missing Skills"] == "tableau"
        assert "Triggered Dealbreakers" not in fields

    def test_deal_breaker_recorded(self) -> None:
        """A triggered deal-breaker is recorded with a HARD NO label."""
        job = make_job_payload(workplace_type="on-site", equity_mentioned=False)
        profile = make_profile_dict({"deal_breakers": ["on_site"]})
        fields = to_record_fields(job, ScoringEngine().score(job, profile))
        assert fields["Fit Recommendation"] == "HARD NO"
        assert fields["Triggered Dealbreakers"] == "Position is on-site only (deal-breaker)"
        assert fields["Equity Mentioned"] is False
