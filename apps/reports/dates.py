"""
Date range helpers for reports.

Report bounds arrive as dates from the report form, as ISO strings from
query parameters, or as datetimes from callers. Everything is normalised to
timezone-aware datetimes; values that cannot be parsed become None so that
any comparison against them fails instead of raising.
"""

import datetime
from dataclasses import dataclass
from typing import Any, Optional

from django.utils import timezone
from django.utils.dateparse import parse_date, parse_datetime


def parse_bound(value: Any) -> Optional[datetime.datetime]:
    """
    Convert a report bound into an aware datetime.

    - datetime: made aware in the current time zone if naive
    - date / date-only string: midnight at the start of that day
    - ISO datetime string: parsed, made aware if naive
    - None, empty or unparseable: None
    """
    if value is None or value == '':
        return None

    if isinstance(value, datetime.datetime):
        result = value
    elif isinstance(value, datetime.date):
        result = datetime.datetime.combine(value, datetime.time.min)
    elif isinstance(value, str):
        try:
            result = parse_datetime(value.strip())
            if result is None:
                day = parse_date(value.strip())
                result = datetime.datetime.combine(day, datetime.time.min) if day else None
        except ValueError:
            # Well formed but invalid, e.g. "2024-02-30"
            return None
        if result is None:
            return None
    else:
        return None

    if timezone.is_naive(result):
        result = timezone.make_aware(result)
    return result


def end_of_day(value: datetime.date) -> datetime.datetime:
    """Return the last instant of the given day as an aware datetime."""
    return timezone.make_aware(datetime.datetime.combine(value, datetime.time.max))


@dataclass(frozen=True)
class DateRange:
    """Inclusive [from_date, to_date] window; either side may be missing."""

    from_date: Any = None
    to_date: Any = None

    @property
    def is_bounded(self) -> bool:
        """True when both bounds were supplied (parseable or not)."""
        return bool(self.from_date) and bool(self.to_date)

    @property
    def start(self) -> Optional[datetime.datetime]:
        return parse_bound(self.from_date)

    @property
    def end(self) -> Optional[datetime.datetime]:
        return parse_bound(self.to_date)

    @property
    def is_valid(self) -> bool:
        """True when both bounds parse."""
        return self.start is not None and self.end is not None

    def __str__(self):
        return f"{self.from_date or '-'} .. {self.to_date or '-'}"
