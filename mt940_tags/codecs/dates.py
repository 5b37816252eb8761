"""
Date codecs for mt940-tags.

SWIFT statements carry dates as fixed-width digit groups:
- YYMMDD for value dates (tags 60/62/64/65, 61),
- MMDD for the entry date of a statement line (year borrowed from the line),
- YYMMDDHHmm plus a signed hhmm zone offset for tag 13D.

Two-digit years are read relative to a configurable century base
(2000 by default, so "23" is 2023).

Out-of-range days and months are not rejected by default: they roll over
into the following period the way a UTC calendar constructor does
(2023-02-29 becomes 2023-03-01). Pass ``strict=True`` to reject them.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

from mt940_tags.exceptions import FieldValueError


def _to_int(value: str | int, what: str) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        raise FieldValueError(f"Non-numeric {what}: {value!r}") from None


def _full_year(year: int, year_base: int) -> int:
    return year + year_base if year < 100 else year


def parse_date(
    year: str | int,
    month: str | int,
    day: str | int,
    *,
    year_base: int = 2000,
    strict: bool = False,
) -> date:
    """Build a calendar date from year/month/day digit groups.

    Args:
        year: 2-digit or 4-digit year. Values below 100 are offset by
            *year_base*.
        month: Month number, 1 = January.
        day: Day of month.
        year_base: Century used for 2-digit years.
        strict: If True, reject days/months outside the calendar instead
            of rolling them over.

    Returns:
        A ``datetime.date``.

    Raises:
        FieldValueError: If a component is not numeric, or (strict mode)
            the date does not exist.
    """
    full_year = _full_year(_to_int(year, "year"), year_base)
    month_no = _to_int(month, "month")
    day_no = _to_int(day, "day")

    if strict:
        try:
            return date(full_year, month_no, day_no)
        except ValueError as e:
            raise FieldValueError(
                f"Invalid date {full_year:04d}-{month_no:02d}-{day_no:02d}: {e}"
            ) from e

    # Roll over like Date.UTC: month overflow carries into the year,
    # day overflow (or day 0) carries into the neighbouring month.
    months = month_no - 1
    try:
        first = date(full_year + months // 12, months % 12 + 1, 1)
        return first + timedelta(days=day_no - 1)
    except (ValueError, OverflowError) as e:
        raise FieldValueError(
            f"Date out of range: {year}-{month}-{day}"
        ) from e


def parse_offset_datetime(
    date6: str,
    time4: str,
    offset: str,
    *,
    year_base: int = 2000,
) -> datetime:
    """Combine YYMMDD, HHmm and a ``+hhmm``/``-hhmm`` offset into an instant.

    The result is timezone-aware and normalized to UTC, i.e. the local
    time with the offset subtracted (``+0200`` means two hours ahead of
    UTC). An unsigned offset is read as positive.

    Raises:
        FieldValueError: If any part is malformed or out of range.
    """
    if len(date6) != 6 or not date6.isdecimal():
        raise FieldValueError(f"Expected YYMMDD date: {date6!r}")
    if len(time4) != 4 or not time4.isdecimal():
        raise FieldValueError(f"Expected HHmm time: {time4!r}")

    sign = 1
    digits = offset
    if offset[:1] in ("+", "-"):
        sign = -1 if offset[0] == "-" else 1
        digits = offset[1:]
    if len(digits) != 4 or not digits.isdecimal():
        raise FieldValueError(f"Expected [+-]hhmm zone offset: {offset!r}")

    minutes = sign * (int(digits[:2]) * 60 + int(digits[2:]))
    try:
        tz = timezone(timedelta(minutes=minutes))
        local = datetime(
            _full_year(int(date6[:2]), year_base),
            int(date6[2:4]),
            int(date6[4:]),
            int(time4[:2]),
            int(time4[2:]),
            tzinfo=tz,
        )
        return local.astimezone(timezone.utc)
    except (ValueError, OverflowError) as e:
        raise FieldValueError(
            f"Invalid date-time {date6}{time4}{offset}: {e}"
        ) from e
