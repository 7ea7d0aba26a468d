"""Normalization of hand-written and client-specific Date headers.

Archived mail carries every Date format ever produced by a mail client:
missing weekday commas, two-digit years, spelled-out zone names, 12-hour
clocks, ctime strings and plain ``M/D/YYYY`` dates. ``normalize_date`` turns
them into ``YYYY-MM-DD HH:MM:SS`` in two stages:

1. ``REWRITES`` - ordered text repairs. Structural repairs run first because
   the numeric padding rules assume zone names are already gone.
2. ``PARSE_ATTEMPTS`` - ordered format attempts, the first success wins.

The result is the wall-clock time written in the header, in the header's own
offset. Nothing is converted to UTC.
"""

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

CANONICAL_FORMAT = "%Y-%m-%d %H:%M:%S"

# Stage A patterns

_OFFSET_WITH_TAIL = re.compile(r"^(.*\s[+-]\d{4})(.*)$", re.DOTALL)
_GMT_OFFSET = re.compile(r"GMT([+-])(\d{2}):?(\d{2})")
_THREE_DIGIT_OFFSET = re.compile(r"([+-])(\d{3})\s*$")
_SINGLE_DIGIT_HOUR = re.compile(r"\b(\d):(\d{2}):(\d{2})\b")
_SINGLE_DIGIT_MIN_SEC = re.compile(r":(\d)\b")

# Long forms must come before the abbreviations they contain.
ZONE_NAMES: tuple[tuple[str, str], ...] = (
    ("Eastern Daylight Time", "-0400"),
    ("Eastern Standard Time", "-0500"),
    ("Pacific Daylight Time", "-0700"),
    ("Pacific Standard Time", "-0800"),
    ("Central Daylight Time", "-0500"),
    ("Central Standard Time", "-0600"),
    ("Mountain Daylight Time", "-0600"),
    ("Mountain Standard Time", "-0700"),
    (" UTC", " +0000"),
    (" GMT", " +0000"),
    (" EDT", " -0400"),
    (" EST", " -0500"),
    (" CDT", " -0500"),
    (" CST", " -0600"),
    (" PDT", " -0700"),
    (" PST", " -0800"),
    (" CET", " +0100"),
)

_MERIDIEM_MARKERS: tuple[tuple[str, str], ...] = (
    ("PM+", " +"),
    ("PM-", " -"),
    ("AM+", " +"),
    ("AM-", " -"),
    (" PM ", " "),
    (" AM ", " "),
)

_WEEKDAY_NAMES: tuple[tuple[str, str], ...] = (
    ("Monday", "Mon"),
    ("Tuesday", "Tue"),
    ("Wednesday", "Wed"),
    ("Thursday", "Thu"),
    ("Thurs,", "Thu,"),
    ("Friday", "Fri"),
    ("Saturday", "Sat"),
    ("Sunday", "Sun"),
)

_MONTH_NAMES: tuple[tuple[str, str], ...] = (
    ("January", "Jan"),
    ("February", "Feb"),
    ("March", "Mar"),
    ("April", "Apr"),
    ("June", "Jun"),
    ("July", "Jul"),
    ("August", "Aug"),
    ("September", "Sep"),
    ("October", "Oct"),
    ("November", "Nov"),
    ("December", "Dec"),
)


def _replace_literals(text: str, pairs: tuple[tuple[str, str], ...]) -> str:
    for old, new in pairs:
        text = text.replace(old, new)
    return text


def collapse_double_sign(text: str) -> str:
    """``--0400`` -> ``-0400``"""
    return text.replace("--", "-")


def truncate_after_offset(text: str) -> str:
    """``+0000.395-508222`` -> ``+0000``: drop anything after the last offset."""
    match = _OFFSET_WITH_TAIL.match(text)
    if match and match.group(2).strip():
        return match.group(1)
    return text


def drop_parenthetical(text: str) -> str:
    """``-0400 (Eastern Daylight Time)`` -> ``-0400``"""
    if "(" in text:
        return text.split("(", 1)[0].strip()
    return text


def rewrite_gmt_offset(text: str) -> str:
    """``GMT-07:00`` / ``GMT-0700`` -> ``-0700``"""
    return _GMT_OFFSET.sub(r"\1\2\3", text)


def substitute_zone_names(text: str) -> str:
    return _replace_literals(text, ZONE_NAMES)


def pad_three_digit_offset(text: str) -> str:
    """``-600`` -> ``-0600``"""
    return _THREE_DIGIT_OFFSET.sub(r"\g<1>0\2", text)


def pad_single_digit_hour(text: str) -> str:
    """``9:47:11`` -> ``09:47:11``"""
    return _SINGLE_DIGIT_HOUR.sub(r"0\1:\2:\3", text)


def pad_single_digit_min_sec(text: str) -> str:
    """``21:9:7`` -> ``21:09:07``"""
    return _SINGLE_DIGIT_MIN_SEC.sub(r":0\1", text)


def collapse_am_pm(text: str) -> str:
    # The hour is kept as written, no 12 to 24 hour conversion happens here.
    return _replace_literals(text, _MERIDIEM_MARKERS)


def abbreviate_weekdays(text: str) -> str:
    return _replace_literals(text, _WEEKDAY_NAMES)


def abbreviate_months(text: str) -> str:
    return _replace_literals(text, _MONTH_NAMES)


REWRITES: tuple[Callable[[str], str], ...] = (
    collapse_double_sign,
    truncate_after_offset,
    drop_parenthetical,
    rewrite_gmt_offset,
    substitute_zone_names,
    pad_three_digit_offset,
    pad_single_digit_hour,
    pad_single_digit_min_sec,
    collapse_am_pm,
    abbreviate_weekdays,
    abbreviate_months,
)


def repair_date_text(text: str) -> str:
    """Apply every rewrite in order."""
    for rewrite in REWRITES:
        text = rewrite(text)
    return text.strip()


# Stage B

_RFC2822 = re.compile(
    r"""
    ^\s*
    (?:(?P<weekday>[A-Za-z]{3})\s*,\s*)?
    (?P<day>\d{1,2})\s+
    (?P<month>[A-Za-z]{3})\s+
    (?P<year>\d{4})\s+
    (?P<hour>\d{1,2}):(?P<minute>\d{2})(?::(?P<second>\d{2}))?\s+
    (?P<zone>[+-]\d{4}|[A-Za-z]{1,3})
    \s*$
    """,
    re.VERBOSE | re.ASCII,
)
_TWO_DIGIT_YEAR = re.compile(r"\d{2}", re.ASCII)

_WEEKDAYS = frozenset({"mon", "tue", "wed", "thu", "fri", "sat", "sun"})
_MONTHS = {
    name: number
    for number, name in enumerate(
        ("jan", "feb", "mar", "apr", "may", "jun", "jul", "aug", "sep", "oct", "nov", "dec"),
        start=1,
    )
}
# RFC 822 zone names, in hours east of UTC
_RFC822_ZONES = {
    "ut": 0, "gmt": 0, "z": 0,
    "est": -5, "edt": -4,
    "cst": -6, "cdt": -5,
    "mst": -7, "mdt": -6,
    "pst": -8, "pdt": -7,
}

_SLASH_FORMATS = (
    "%m/%d/%Y %I:%M:%S %p",
    "%m/%d/%Y %H:%M:%S",
    "%m/%d/%Y",
)


def _parse_zone(zone: str) -> Optional[timezone]:
    if zone[0] in "+-":
        sign = -1 if zone[0] == "-" else 1
        offset = timedelta(hours=int(zone[1:3]), minutes=int(zone[3:5]))
        try:
            return timezone(sign * offset)
        except ValueError:
            return None
    hours = _RFC822_ZONES.get(zone.lower())
    if hours is None:
        return None
    return timezone(timedelta(hours=hours))


def _strptime(text: str, fmt: str) -> Optional[datetime]:
    try:
        return datetime.strptime(text, fmt)
    except ValueError:
        return None


def parse_rfc2822(text: str) -> Optional[datetime]:
    """Strict internet-mail date: ``[Www, ]D Mon YYYY H:MM[:SS] zone``.

    The year must have four digits so that two-digit years go through the
    pivot rule of ``attempt_two_digit_year``. The weekday is not checked
    against the date.
    """
    match = _RFC2822.match(text)
    if not match:
        return None

    weekday = match.group("weekday")
    if weekday and weekday.lower() not in _WEEKDAYS:
        return None
    month = _MONTHS.get(match.group("month").lower())
    if month is None:
        return None
    tz = _parse_zone(match.group("zone"))
    if tz is None:
        return None

    try:
        return datetime(
            int(match.group("year")),
            month,
            int(match.group("day")),
            int(match.group("hour")),
            int(match.group("minute")),
            int(match.group("second") or 0),
            tzinfo=tz,
        )
    except ValueError:
        return None


def attempt_weekday_comma(text: str) -> Optional[datetime]:
    """``Tue 02 Mar 2021 ...`` -> ``Tue, 02 Mar 2021 ...``"""
    tokens = text.split()
    if not tokens or len(tokens[0]) != 3:
        return None
    first = tokens[0]
    if text[len(first):].lstrip().startswith(","):
        return None
    return parse_rfc2822(text.replace(first, first + ",", 1))


def attempt_two_digit_year(text: str) -> Optional[datetime]:
    """``Thu, 11 Jun 09 ...`` -> ``Thu, 11 Jun 2009 ...`` (pivot at 50)."""
    tokens = text.split()
    if len(tokens) < 4 or not _TWO_DIGIT_YEAR.fullmatch(tokens[3]):
        return None
    value = int(tokens[3])
    tokens[3] = str(1900 + value if value > 50 else 2000 + value)
    return parse_rfc2822(" ".join(tokens))


def attempt_ctime(text: str) -> Optional[datetime]:
    """``Thu Jul 20 11:39:51 2006``; no offset, taken as written."""
    tokens = text.split()
    if len(tokens) != 5:
        return None
    return _strptime(" ".join(tokens), "%a %b %d %H:%M:%S %Y")


def attempt_slash_date(text: str) -> Optional[datetime]:
    """``7/19/2005 8:11:52 AM``, ``7/19/2005 20:11:52`` or ``7/19/2005``."""
    if "/" not in text:
        return None
    for fmt in _SLASH_FORMATS:
        parsed = _strptime(text, fmt)
        if parsed is not None:
            return parsed
    return None


def attempt_canonical(text: str) -> Optional[datetime]:
    return _strptime(text, CANONICAL_FORMAT)


PARSE_ATTEMPTS: tuple[Callable[[str], Optional[datetime]], ...] = (
    parse_rfc2822,
    attempt_weekday_comma,
    attempt_two_digit_year,
    attempt_ctime,
    attempt_slash_date,
    attempt_canonical,
)


def format_canonical(value: datetime) -> str:
    """Wall-clock fields of ``value`` as ``YYYY-MM-DD HH:MM:SS``."""
    return value.replace(tzinfo=None, microsecond=0).isoformat(sep=" ")


def normalize_date(raw: Optional[str]) -> Optional[str]:
    """Normalize a raw Date header, or return None when no format fits."""
    cleaned = (raw or "").strip()
    if not cleaned:
        return None

    cleaned = repair_date_text(cleaned)
    for attempt in PARSE_ATTEMPTS:
        parsed = attempt(cleaned)
        if parsed is not None:
            return format_canonical(parsed)
    return None
