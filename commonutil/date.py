"""Date processing utilities.

Provides calendar arithmetic, token based formatting and lenient parsing of
compact date strings such as "20171018" or "20171018153834".

Key functions:
- add: Shift a date by "<amount><unit>" (e.g. "1Y", "-2m", "1.5d")
- format_date: Render a date with single-character tokens (Y-m-d H:i:s)
- string2dtl: Expand compact numeric strings into dashed display strings
- string2date: Parse display or compact strings into datetime objects
- diff_time / calc_age / compare_date_time: Compare two instants

Format tokens:
- Y: 4-digit year, y: 2-digit year
- m: month with leading zero, n: month without leading zero
- d: day with leading zero, j: day without leading zero
- H: hour, i: minute, s: second (all with leading zero)
- M: milliseconds (3 digits)
- N: weekday name of the instant's UTC weekday (日, 一 ... 六)
Any other character is copied as-is.
"""

from __future__ import annotations

import logging
from datetime import UTC, date, datetime, time, timedelta

import pendulum
from dateutil.relativedelta import relativedelta

logger = logging.getLogger(__name__)

DateLike = str | date | datetime

DEFAULT_FORMAT = "Y-m-d H:i:s"
WEEKDAY_NAMES_CN = ("日", "一", "二", "三", "四", "五", "六")  # Sunday first
DATETIME_FORMATS = [
    "%Y-%m-%d %H:%M:%S",
    "%Y-%m-%d %H:%M:%S:%f",
    "%Y-%m-%d %H:%M:%S.%f",
    "%Y-%m-%dT%H:%M:%S",
]


def to_datetime(value: DateLike) -> datetime | None:
    """Convert DateLike input to datetime; strings go through string2date (None if unparseable)."""
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time())
    return string2date(value)


def _aligned(first: datetime, second: datetime) -> tuple[datetime, datetime]:
    """Give a naive side the local timezone when the other side is aware."""
    if (first.tzinfo is None) != (second.tzinfo is None):
        if first.tzinfo is None:
            first = first.astimezone()
        else:
            second = second.astimezone()
    return first, second


def add(date_input: DateLike, shift: str, format_str: str | None = None) -> datetime | str | None:
    """
    Shift a date by an amount of calendar units without touching the input.

    Args:
        date_input: Date to shift (date/datetime object or parseable string)
        shift: "<amount><unit>", amount is a signed float, unit one of
            Y (years), m (months), d (days), H (hours), i (minutes), s (seconds)
        format_str: When given, return format_date(result, format_str) instead of the datetime

    Returns:
        Shifted datetime, its formatted string, or None if date_input cannot be
        parsed, the amount part of shift is not a number or the result falls
        outside the supported range

    Notes:
        - Year and month amounts are truncated toward zero; the day of month is
          clamped to the last day of the resulting month (Jan 31 + 1m -> Feb 28/29)
        - Day and time units accept fractions ("1.5d" adds 36 hours)
        - An unknown unit returns the date unchanged

    Examples:
        >>> add(datetime(2012, 2, 29, 16, 4), "1Y")
        datetime.datetime(2013, 2, 28, 16, 4)

        >>> add(datetime(2017, 10, 18, 16, 4), "-2m", "Y-m-d H:i:s")
        '2017-08-18 16:04:00'
    """
    base = to_datetime(date_input)
    if base is None:
        return None

    shift = shift.strip()
    unit = shift[-1:]
    try:
        amount = float(shift[:-1])
    except ValueError:
        logger.debug("Invalid amount in date shift %r", shift)
        return None

    try:
        match unit:
            case "Y":
                result = base + relativedelta(years=int(amount))
            case "m":
                result = base + relativedelta(months=int(amount))
            case "d":
                result = base + timedelta(days=amount)
            case "H":
                result = base + timedelta(hours=amount)
            case "i":
                result = base + timedelta(minutes=amount)
            case "s":
                result = base + timedelta(seconds=amount)
            case _:
                logger.debug("Unknown date shift unit %r in %r; date left unchanged", unit, shift)
                result = base
    except (OverflowError, ValueError):
        # inf/nan amounts or a result outside datetime's year range
        logger.debug("Date shift %r out of range for %s", shift, base)
        return None

    return format_date(result, format_str) if format_str else result


def diff_time(date_start: DateLike, date_end: DateLike) -> str:
    """
    Elapsed time between two instants as HH:MM:SS.

    Hours keep growing past 24; fractions of a second are dropped. Returns an
    empty string when date_end precedes date_start or either side cannot be parsed.
    When only one side is timezone-aware, the naive side is taken as local time.

    Examples:
        >>> diff_time(datetime(2018, 7, 6, 9, 29, 57), datetime(2018, 7, 6, 18, 15, 32))
        '08:45:35'
        >>> diff_time(datetime(2018, 7, 6, 18, 15, 32), datetime(2018, 7, 6, 9, 29, 57))
        ''
    """
    start, end = to_datetime(date_start), to_datetime(date_end)
    if start is None or end is None:
        return ""
    start, end = _aligned(start, end)

    elapsed = (end - start).total_seconds()
    if elapsed < 0:
        return ""

    hours, rest = divmod(int(elapsed), 3600)
    minutes, seconds = divmod(rest, 60)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"


def calc_age(now: DateLike, birthday: DateLike) -> int | None:
    """
    Age in whole years at `now`.

    Both instants are rendered as YYYYMMDDHHMMSS numbers and subtracted, so a
    birthday counts only once its month, day and time of day have been reached.

    Returns:
        Age in years, or None when either date cannot be parsed

    Examples:
        >>> calc_age(datetime(2024, 6, 15), "2000-06-15")
        24
        >>> calc_age(datetime(2024, 6, 14, 23, 59, 59), "2000-06-15")
        23
    """
    now_dt, birthday_dt = to_datetime(now), to_datetime(birthday)
    if now_dt is None or birthday_dt is None:
        return None

    diff = int(format_date(now_dt, "YmdHis")) - int(format_date(birthday_dt, "YmdHis"))
    return diff // 10**10


def format_date(date_input: DateLike | None = None, format_str: str = DEFAULT_FORMAT) -> str:
    """
    Render a date using single-character tokens (see module docstring).

    For a plain date object the N token names that calendar day's weekday;
    datetimes use their UTC weekday.

    Args:
        date_input: Date to render. If None, uses the current time. If a string,
            it is taken as format_str and the current time is rendered
        format_str: Token string (default "Y-m-d H:i:s")

    Returns:
        Formatted string

    Examples:
        >>> format_date(datetime(2017, 10, 18, 15, 38, 34))
        '2017-10-18 15:38:34'

        >>> format_date(datetime(2017, 10, 18, 15, 38, 34), "y/n/j")
        '17/10/18'
    """
    if not date_input:
        date_obj = pendulum.now()
    elif isinstance(date_input, str):
        # Date omitted, first argument is the format
        format_str = date_input
        date_obj = pendulum.now()
    else:
        date_obj = to_datetime(date_input)

    weekday_source = date_obj
    if isinstance(date_input, date) and not isinstance(date_input, datetime):
        # A plain date names its own weekday, not that of local midnight in UTC
        weekday_source = date_input

    parts: list[str] = []
    for c in format_str:
        match c:
            case "Y":
                parts.append(str(date_obj.year))
            case "y":
                parts.append(str(date_obj.year)[2:])
            case "m":
                parts.append(f"{date_obj.month:02d}")
            case "n":
                parts.append(str(date_obj.month))
            case "d":
                parts.append(f"{date_obj.day:02d}")
            case "j":
                parts.append(str(date_obj.day))
            case "H":
                parts.append(f"{date_obj.hour:02d}")
            case "i":
                parts.append(f"{date_obj.minute:02d}")
            case "s":
                parts.append(f"{date_obj.second:02d}")
            case "M":
                parts.append(f"{date_obj.microsecond // 1000:03d}")
            case "N":
                parts.append(get_utc_day_cn(weekday_source))
            case _:
                parts.append(c)
    return "".join(parts)


def is_leap_year(value: date | int) -> bool:
    """Check the Gregorian leap-year rule for a date or a bare year."""
    year = value.year if isinstance(value, date) else value
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def get_day_num(date_input: date) -> int:
    """
    Number of days in the month of date_input.

    Examples:
        >>> get_day_num(date(2024, 2, 10))
        29
        >>> get_day_num(date(2023, 4, 1))
        30
    """
    month = date_input.month
    if month == 2:
        return 29 if is_leap_year(date_input) else 28
    if month in (4, 6, 9, 11):
        return 30
    return 31


def get_utc_day_cn(date_input: date) -> str:
    """
    Weekday name of the instant's UTC weekday.

    Naive datetimes are treated as local time and converted to UTC first, so
    late-evening or early-morning instants may land on the neighbouring day.
    Plain date objects are used as-is.
    """
    if isinstance(date_input, datetime):
        date_input = date_input.astimezone(UTC)
    # isoweekday: Monday=1 ... Sunday=7
    return WEEKDAY_NAMES_CN[date_input.isoweekday() % 7]


def string2dtl(value: object) -> str:
    """
    Expand a compact numeric date/time string into a display string.

    Lengths handled:
        17 -> YYYY-MM-DD HH:II:SS:MMM
        14 -> YYYY-MM-DD HH:II:SS
        12 -> YYYY-MM-DD HH:II
        8  -> YYYY-MM-DD
        6  -> HH:II:SS
        4  -> HH:II
    Any other length is returned unchanged.

    Examples:
        >>> string2dtl("20171018153834")
        '2017-10-18 15:38:34'
        >>> string2dtl(1538)
        '15:38'
        >>> string2dtl("2017-10-18")
        '2017-10-18'
    """
    text = str(value)
    size = len(text)

    if size in (17, 14, 12):
        result = f"{text[:4]}-{text[4:6]}-{text[6:8]} {text[8:10]}:{text[10:12]}"
        if size >= 14:
            result += ":" + text[12:14]
        if size >= 17:
            result += ":" + text[14:17]
        return result
    if size == 8:
        return f"{text[:4]}-{text[4:6]}-{text[6:8]}"
    if size in (6, 4):
        result = f"{text[:2]}:{text[2:4]}"
        if size == 6:
            result += ":" + text[4:6]
        return result
    return text


def string2date(value: object) -> datetime | None:
    """
    Parse a date string into a naive datetime.

    Accepts YYYY-MM-DD, YYYY/MM/DD, YYYY-MM-DD HH:II[:SS[:MMM]] and the compact
    forms handled by string2dtl (YYYYMMDD, YYYYMMDDHHIISS, ...). A missing time
    of day defaults to midnight.

    Returns:
        Parsed datetime, or None if the string holds no complete date or cannot be parsed

    Examples:
        >>> string2date("20171018")
        datetime.datetime(2017, 10, 18, 0, 0)
        >>> string2date("2017/10/18 15:38")
        datetime.datetime(2017, 10, 18, 15, 38)
        >>> string2date("1538") is None
        True
    """
    text = string2dtl(value).strip()
    if len(text) < 10:
        # No complete date part
        return None

    text = text.replace("/", "-")
    if len(text) < 19:
        # Fill in the missing tail of " 00:00:00"
        text += " 00:00:00"[len(text) - 19 :]

    for fmt in DATETIME_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue

    logger.debug("Unable to parse date string %r", value)
    return None


def compare_date_time(first: DateLike, second: DateLike) -> bool:
    """
    Check whether first is strictly later than second.

    Strings are parsed with string2date. Returns False for equal instants and
    when either side cannot be parsed.
    A naive side is taken as local time when the other side is timezone-aware.

    Examples:
        >>> compare_date_time("2024-01-02", "2024-01-01 23:59:59")
        True
        >>> compare_date_time("2024-01-01", "2024-01-01")
        False
    """
    first_dt, second_dt = to_datetime(first), to_datetime(second)
    if first_dt is None or second_dt is None:
        return False
    first_dt, second_dt = _aligned(first_dt, second_dt)
    return first_dt > second_dt
