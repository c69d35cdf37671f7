# Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
# All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
# See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
# Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.

"""
Date and time helpers for SEMS.
Parsing of directory date fields and the instants the engine compares against.
"""

from datetime import date, datetime, time, timezone
from typing import Optional, Union


TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

_DATE_FORMATS = [
    "%Y-%m-%d",
    "%Y/%m/%d",
    "%m/%d/%Y",
    "%d.%m.%Y",
]


def parse_date(value: Union[str, date, datetime, None]) -> Optional[date]:
    """
    Parse a directory date field into a date.

    Accepts ``date`` and ``datetime`` objects as-is (a datetime keeps only
    its date part), ISO strings, and a few common date-only formats.
    Empty values yield None.
    """
    if value is None:
        return None

    if isinstance(value, datetime):
        return value.date()

    if isinstance(value, date):
        return value

    if not isinstance(value, str):
        raise ValueError(f"Unable to parse date: {value!r}")

    value = value.strip()
    if not value:
        return None

    try:
        return datetime.fromisoformat(value.replace('Z', '+00:00')).date()
    except ValueError:
        pass

    for fmt in _DATE_FORMATS:
        try:
            return datetime.strptime(value, fmt).date()
        except ValueError:
            continue

    raise ValueError(f"Unable to parse date: {value}")


def start_of_day(day: date, like: Optional[datetime] = None) -> datetime:
    """
    Midnight at the start of ``day``.

    When ``like`` is timezone-aware the result carries the same tzinfo so it
    can be compared with it; otherwise the result is naive.
    """
    tzinfo = like.tzinfo if like is not None else None
    return datetime.combine(day, time.min, tzinfo=tzinfo)


def utcnow() -> datetime:
    """Current wall-clock time in UTC."""
    return datetime.now(timezone.utc)


def format_timestamp(moment: datetime) -> str:
    """
    Format an instant to second precision, e.g. ``2025-12-24 08:30:00``.
    Aware instants are rendered in UTC; naive ones are taken as given.
    """
    if moment.tzinfo is not None:
        moment = moment.astimezone(timezone.utc)
    return moment.strftime(TIMESTAMP_FORMAT)


def parse_timestamp(value: str) -> datetime:
    """Inverse of :func:`format_timestamp`."""
    return datetime.strptime(value, TIMESTAMP_FORMAT)
