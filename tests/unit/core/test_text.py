"""Tests for job_fit_core.text helpers."""

from __future__ import annotations

import pytest

from job_fit_core.text import (
    contains_keyword,
    first_keyword,
    format_salary,
    format_workplace_type,
    normalize_workplace_type,
    parse_number,
    parse_percentage,
    round_half_up,
)


@pytest.mark.unit
class TestRoundHalfUp:
    """Tests for round_half_up."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [(37.5, 38), (33.333, 33), (0.5, 1), (2.5, 3), (49.49, 49), (0.0, 0)],
    )
    def test_rounds_halves_up(self, value: float, expected: int) -> None:
        """Halves round up, unlike banker's rounding."""
        assert round_half_up(value) == expected


@pytest.mark.unit
class TestParseNumber:
    """Tests for parse_number."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("$150,000", 150_000.0),
            ("150k", 150_000.0),
            ("1.5M", 1_500_000.0),
            (175000, 175_000.0),
            ("  200000 USD", 200_000.0),
        ],
    )
    def test_parses_lenient_text(self, raw: object, expected: float) -> None:
        """Currency symbols, separators and k/M suffixes are understood."""
        assert parse_number(raw) == expected

    @pytest.mark.parametrize("raw", [None, "", "competitive", True, float("nan"), ["1"]])
    def test_unparseable_is_none(self, raw: object) -> None:
        """Text without a number is absent, never zero."""
        assert parse_number(raw) is None


@pytest.mark.unit
class TestParsePercentage:
    """Tests for parse_percentage."""

    def test_signed_growth(self) -> None:
        """An explicit sign is kept."""
        assert parse_percentage("+12% over 2 years") == 12.0
        assert parse_percentage("-3.5% headcount") == -3.5

    def test_decline_word_makes_negative(self) -> None:
        """An unsigned figure next to a decline word reads as negative."""
        assert parse_percentage("Headcount declined 8% this year") == -8.0

    def test_no_percentage(self) -> None:
        """Text without a percentage gives None."""
        assert parse_percentage("growing fast") is None
        assert parse_percentage(None) is None


@pytest.mark.unit
class TestWorkplaceType:
    """Tests for workplace normalization and display."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("Remote (US)", "remote"),
            ("Hybrid", "hybrid"),
            ("On-site", "on_site"),
            ("onsite", "on_site"),
            ("Flexible", "flexible"),
            (None, ""),
        ],
    )
    def test_normalize(self, raw: object, expected: str) -> None:
        """Known variants map to remote/hybrid/on_site; others pass through."""
        assert normalize_workplace_type(raw) == expected

    def test_format(self) -> None:
        """Normalized values get display names."""
        assert format_workplace_type("on_site") == "On-site"
        assert format_workplace_type("flexible") == "flexible"


@pytest.mark.unit
class TestFormatSalary:
    """Tests for format_salary."""

    def test_thousands_and_millions(self) -> None:
        """Thousands round to K, millions keep one decimal."""
        assert format_salary(150_000) == "150K"
        assert format_salary(1_500_000) == "1.5M"
        assert format_salary(950) == "950"


@pytest.mark.unit
class TestKeywords:
    """Tests for word-bounded keyword search."""

    def test_word_boundaries(self) -> None:
        """Keywords do not match inside longer words."""
        assert contains_keyword("we are a seed stage company", "seed")
        assert not contains_keyword("we exceed expectations", "seed")
        assert contains_keyword("series-a funded", "series-a")

    def test_first_keyword_in_list_order(self) -> None:
        """The first keyword in list order wins, not the first in the text."""
        text = "a startup backed by series b investors"
        assert first_keyword(text, ("series b", "startup")) == "series b"
        assert first_keyword(text, ("ipo",)) is None
