"""Tests for top city extraction."""

import pytest

from insights_ocr.metrics.cities import (
    KNOWN_CITIES,
    extract_top_cities,
    is_rejected_name,
    normalize_name,
)
from insights_ocr.metrics.config import CityConfig
from insights_ocr.metrics.models import CityShare


def _as_pairs(cities: list[CityShare]) -> list[tuple[str, float]]:
    return [(c.name, c.percentage) for c in cities]


class TestNormalizeName:
    """Tests for normalize_name function."""

    def test_whitespace(self) -> None:
        assert normalize_name("  Quebec \t City ") == "Quebec City"

    def test_trailing_hyphen(self) -> None:
        assert normalize_name("Saint -") == "Saint"


class TestIsRejectedName:
    """Tests for is_rejected_name function."""

    def test_plausible_names(self) -> None:
        assert not is_rejected_name("Toronto")
        assert not is_rejected_name("Saint-Jean-sur-Richelieu")

    @pytest.mark.parametrize(
        "name",
        [
            "X",
            "A" * 36,
            "Followers",
            "non-followers",
            "Women",
            "Area 51",
            "Saint-",
            "Indie Films",
            "Reels Toronto",
            "Calgary li",
        ],
    )
    def test_rejected(self, name: str) -> None:
        assert is_rejected_name(name)

    def test_length_limits_from_config(self) -> None:
        config = CityConfig(max_name_length=5)
        assert is_rejected_name("Toronto", config)


class TestExtractTopCities:
    """Tests for extract_top_cities function."""

    def test_known_cities_sorted(self) -> None:
        text = "Top cities\nNew York 10%\nLos Angeles 24.5%"
        assert _as_pairs(extract_top_cities(text)) == [
            ("Los Angeles", 24.5),
            ("New York", 10.0),
        ]

    def test_generic_cities(self) -> None:
        text = "Top locations\nKelowna 12%\nSaint-Jerome 3,5%"
        assert _as_pairs(extract_top_cities(text)) == [
            ("Kelowna", 12.0),
            ("Saint-Jerome", 3.5),
        ]

    def test_rejects_ui_rows(self) -> None:
        text = "Top locations\nToronto 40%\nIndie Films 5%\nAll 3%\nMen 45%"
        assert _as_pairs(extract_top_cities(text)) == [("Toronto", 40.0)]

    def test_zero_percent_rejected(self) -> None:
        assert extract_top_cities("Top cities\nToronto 0%") == []

    def test_dedup_by_name_and_percentage(self) -> None:
        text = "Top cities\nToronto 40%\ntoronto 40%"
        assert _as_pairs(extract_top_cities(text)) == [("Toronto", 40.0)]

    def test_section_ends_at_age_range(self) -> None:
        text = "Top cities\nToronto 40%\n" + "." * 100 + "\nAge range\nKelowna 12%"
        assert _as_pairs(extract_top_cities(text)) == [("Toronto", 40.0)]

    def test_extra_cities(self) -> None:
        # " li" makes the generic pass reject this name
        text = "Top cities\nPort Lincoln 8%"
        assert extract_top_cities(text) == []

        config = CityConfig(extra_cities=("Port Lincoln",))
        assert _as_pairs(extract_top_cities(text, config)) == [("Port Lincoln", 8.0)]

    def test_no_cities(self) -> None:
        assert extract_top_cities("") == []
        assert extract_top_cities("Views 100") == []

    def test_gazetteer_longest_first(self) -> None:
        lengths = [len(city) for city in KNOWN_CITIES]
        assert lengths == sorted(lengths, reverse=True)
