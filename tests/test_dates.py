"""
Tests for report date bound parsing.
"""

import datetime

from django.utils import timezone

from apps.reports.dates import DateRange, end_of_day, parse_bound

from tests.helpers import aware


class TestParseBound:
    """Tests for parse_bound."""

    def test_empty_values(self):
        assert parse_bound(None) is None
        assert parse_bound('') is None

    def test_date_becomes_start_of_day(self):
        assert parse_bound(datetime.date(2024, 1, 31)) == aware(2024, 1, 31)

    def test_date_string(self):
        assert parse_bound('2024-01-31') == aware(2024, 1, 31)

    def test_naive_datetime_is_made_aware(self):
        result = parse_bound(datetime.datetime(2024, 1, 31, 12, 30))
        assert timezone.is_aware(result)
        assert result == aware(2024, 1, 31, 12, 30)

    def test_aware_datetime_is_kept(self):
        value = datetime.datetime(2024, 1, 31, 6, 0, tzinfo=datetime.timezone.utc)
        assert parse_bound(value) is value

    def test_iso_string_with_offset(self):
        result = parse_bound('2024-01-31T06:00:00+00:00')
        assert result == datetime.datetime(2024, 1, 31, 6, 0, tzinfo=datetime.timezone.utc)

    def test_unparseable_values(self):
        assert parse_bound('yesterday') is None
        assert parse_bound('2024-13-01') is None
        assert parse_bound(12345) is None


class TestDateRange:
    """Tests for DateRange."""

    def test_unbounded(self):
        date_range = DateRange()
        assert not date_range.is_bounded
        assert date_range.start is None

    def test_half_open_is_not_bounded(self):
        assert not DateRange('2024-01-01', None).is_bounded
        assert not DateRange(None, '2024-01-01').is_bounded

    def test_bounded_but_invalid(self):
        date_range = DateRange('2024-01-01', 'soon')
        assert date_range.is_bounded
        assert not date_range.is_valid

    def test_bounded_and_valid(self):
        date_range = DateRange('2024-01-01', '2024-01-31')
        assert date_range.is_valid
        assert date_range.start < date_range.end

    def test_end_of_day(self):
        assert end_of_day(datetime.date(2024, 1, 31)) == aware(2024, 1, 31, 23, 59, 59, 999999)

    def test_str(self):
        assert str(DateRange('2024-01-01', None)) == '2024-01-01 .. -'
