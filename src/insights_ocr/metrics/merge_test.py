"""Tests for merging records from several screenshots."""

from insights_ocr.metrics.merge import dedupe_shares, merge_records
from insights_ocr.metrics.models import (
    AgeRangeShare,
    CityShare,
    Gender,
    Growth,
    MetricsRecord,
)


class TestDedupeShares:
    """Tests for dedupe_shares function."""

    def test_keeps_highest_share(self) -> None:
        cities = [
            CityShare(name="Toronto", percentage=20),
            CityShare(name="Ottawa", percentage=10),
            CityShare(name="Toronto", percentage=30),
        ]
        result = dedupe_shares(cities, lambda c: c.name)
        assert [(c.name, c.percentage) for c in result] == [
            ("Toronto", 30.0),
            ("Ottawa", 10.0),
        ]

    def test_empty(self) -> None:
        assert dedupe_shares([], lambda c: c.name) == ()


class TestMergeRecords:
    """Tests for merge_records function."""

    def test_empty(self) -> None:
        assert merge_records([]).is_empty()

    def test_single_record_unchanged(self) -> None:
        record = MetricsRecord(views=10, date_range="Mar 4 - Mar 10, 2024")
        assert merge_records([record]) == record

    def test_numbers_keep_maximum(self) -> None:
        records = [
            MetricsRecord(views=100, follower_change_percent=-2.0),
            MetricsRecord(views=250, reach=40, follower_change_percent=1.5),
        ]
        merged = merge_records(records)
        assert merged.views == 250
        assert merged.reach == 40
        assert merged.follower_change_percent == 1.5

    def test_strings_keep_first(self) -> None:
        records = [
            MetricsRecord(accounts_reached_change="+5%"),
            MetricsRecord(accounts_reached_change="-3%", date_range="Jan 1 - Jan 30"),
        ]
        merged = merge_records(records)
        assert merged.accounts_reached_change == "+5%"
        assert merged.date_range == "Jan 1 - Jan 30"

    def test_later_string_sorting_higher_does_not_win(self) -> None:
        records = [
            MetricsRecord(date_range="Jan 1 - Jan 30"),
            MetricsRecord(date_range="Mar 1 - Mar 30"),
        ]
        assert merge_records(records).date_range == "Jan 1 - Jan 30"

    def test_lists_concatenated_and_deduplicated(self) -> None:
        records = [
            MetricsRecord(
                top_cities=(CityShare(name="Toronto", percentage=20),),
                age_ranges=(AgeRangeShare(range="18-24", percentage=30),),
            ),
            MetricsRecord(
                top_cities=(
                    CityShare(name="Toronto", percentage=30),
                    CityShare(name="Ottawa", percentage=10),
                ),
            ),
        ]
        merged = merge_records(records)
        assert merged.top_cities == (
            CityShare(name="Toronto", percentage=30),
            CityShare(name="Ottawa", percentage=10),
        )
        assert merged.age_ranges == (AgeRangeShare(range="18-24", percentage=30),)
        assert merged.content_breakdown is None

    def test_gender_later_record_wins(self) -> None:
        records = [
            MetricsRecord(gender=Gender(men=40)),
            MetricsRecord(gender=Gender(men=45, women=55)),
        ]
        assert merge_records(records).gender == Gender(men=45, women=55)

    def test_growth_merged_by_field(self) -> None:
        records = [
            MetricsRecord(growth=Growth(overall=5, follows=10)),
            MetricsRecord(growth=Growth(unfollows=2)),
            MetricsRecord(growth=Growth(overall=7)),
        ]
        assert merge_records(records).growth == Growth(
            overall=7, follows=10, unfollows=2
        )
