import logging
import re
from datetime import date as GDate, timedelta
from functools import lru_cache
from typing import Any, Callable, Mapping, Optional, Tuple

from pydantic import ValidationError

from sambat.errors import (
    InvalidComponentError,
    MalformedInputError,
    OutOfRangeYearError,
    SambatError,
)
from sambat.types.date_types import BSDate, CalendarName, ConversionResultTD
from sambat.types.tool_args import ADDateArgs, BSDateArgs
from sambat.utils.calendar_table import (
    FIRST_BS_YEAR,
    LAST_BS_YEAR,
    month_length,
    year_total_days,
)
from sambat.utils.text_utils import parse_bs_month_token, to_ascii_digits

logger = logging.getLogger(__name__)

'''
Conversion between the Gregorian calendar (AD) and Bikram Sambat (BS).

Both directions pivot on a single reference pair:

    AD 1944-01-01  ==  BS 2000-09-18

AD -> BS walks month by month from the BS reference, consuming the signed day
distance. BS -> AD sums whole years and months from the start of the reference
year, so it does not walk.
'''

AD_REFERENCE = GDate(1944, 1, 1)
BS_REFERENCE = (2000, 9, 18)

# Day number of the BS reference inside its own year (1-based).
_BS_REFERENCE_OFFSET = (
    sum(month_length(BS_REFERENCE[0], m) for m in range(1, BS_REFERENCE[1]))
    + BS_REFERENCE[2]
)

STANDARD_FORMAT = "yyyy-mm-dd"

_ISO_RE = re.compile(r"^\s*(\d{4})[-/](\d{1,2})[-/](\d{1,2})\s*$")
_BS_NAMED_RE = re.compile(r"^\s*(\d{4})[-/\s]+([^\d\s/-]+)[-/\s]+(\d{1,2})\s*$")

_AD_NAMES = {"ad", "a.d.", "gregorian", "greg", "english", "ईस्वी", "इस्वी"}
_BS_NAMES = {"bs", "b.s.", "bikram sambat", "bikram samvat", "vikram samvat", "nepali", "वि.सं.", "विक्रम संवत्"}


# -----------------------------
# Calendar primitives
# -----------------------------

def _require_ad(value: Any) -> GDate:
    # datetime is a date subclass; keep only the civil date part.
    if isinstance(value, GDate):
        return GDate(value.year, value.month, value.day)
    raise TypeError(f"expected a datetime.date (AD), got {type(value).__name__}")


def _require_bs(value: Any) -> BSDate:
    if isinstance(value, BSDate):
        return value
    raise TypeError(f"expected a BSDate, got {type(value).__name__}")


def _walk_from_reference(total_days: int) -> Tuple[int, int, int]:
    """
    Move the BS reference cursor by ``total_days`` (signed), month by month.

    Each step looks the current month up in the table, so the walk stops with
    OutOfRangeYearError as soon as it leaves the supported years.
    """
    year, month, day = BS_REFERENCE

    while total_days > 0:
        remaining_in_month = month_length(year, month) - day
        if total_days <= remaining_in_month:
            day += total_days
            total_days = 0
        else:
            total_days -= remaining_in_month + 1
            month += 1
            day = 1
            if month > 12:
                month = 1
                year += 1

    while total_days < 0:
        if -total_days < day:
            day += total_days
            total_days = 0
        else:
            total_days += day
            month -= 1
            if month < 1:
                month = 12
                year -= 1
            day = month_length(year, month)

    return year, month, day


def _bs_day_number(year: int, month: int, day: int) -> int:
    """Days from the start of BS ``FIRST_BS_YEAR`` to the given date (1-based)."""
    total = 0
    for y in range(FIRST_BS_YEAR, year):
        total += year_total_days(y)
    for m in range(1, month):
        total += month_length(year, m)
    return total + day


@lru_cache(maxsize=1)
def supported_ad_range() -> Tuple[GDate, GDate]:
    """First and last AD dates that have a BS equivalent in the table."""
    first = bs_to_ad(BSDate(FIRST_BS_YEAR, 1, 1))
    last = bs_to_ad(BSDate(LAST_BS_YEAR, 12, month_length(LAST_BS_YEAR, 12)))
    return first, last


# Public API

def ad_to_bs(ad_date: GDate) -> BSDate:
    """Convert a Gregorian date to its Bikram Sambat equivalent."""
    ad_date = _require_ad(ad_date)
    first, last = supported_ad_range()
    if not first <= ad_date <= last:
        raise OutOfRangeYearError(
            f"AD {ad_date.isoformat()} is outside the supported range "
            f"{first.isoformat()}..{last.isoformat()} (BS {FIRST_BS_YEAR}–{LAST_BS_YEAR})"
        )

    total_days = (ad_date - AD_REFERENCE).days
    year, month, day = _walk_from_reference(total_days)
    result = BSDate(year, month, day)
    logger.debug("📅 ad_to_bs: %s → %s (offset=%s)", ad_date, result, total_days)
    return result


def bs_to_ad(bs_date: BSDate) -> GDate:
    """Convert a Bikram Sambat date to its Gregorian equivalent."""
    bs_date = _require_bs(bs_date)
    total_days = _bs_day_number(bs_date.year, bs_date.month, bs_date.day) - _BS_REFERENCE_OFFSET
    result = AD_REFERENCE + timedelta(days=total_days)
    logger.debug("📅 bs_to_ad: %s → %s (offset=%s)", bs_date, result, total_days)
    return result


def parse_iso_date(text: str) -> GDate:
    """Parse ``YYYY-MM-DD`` (either digit script) into a Gregorian date."""
    if not isinstance(text, str):
        raise MalformedInputError(f"expected an ISO date string, got {type(text).__name__}")
    match = _ISO_RE.match(to_ascii_digits(text))
    if not match:
        raise MalformedInputError(f"not a YYYY-MM-DD date: {text!r}")
    y, m, d = map(int, match.groups())
    try:
        return GDate(y, m, d)
    except ValueError as exc:
        raise MalformedInputError(f"not a valid Gregorian date: {text!r} ({exc})") from exc


def parse_bs_text(text: str) -> BSDate:
    """Parse a BS date written as ``YYYY-MM-DD`` or ``YYYY <month name> DD``."""
    if not isinstance(text, str):
        raise MalformedInputError(f"expected a BS date string, got {type(text).__name__}")
    normalized = to_ascii_digits(text)
    match = _ISO_RE.match(normalized)
    if match:
        y, m, d = map(int, match.groups())
        return BSDate(y, m, d)
    match = _BS_NAMED_RE.match(normalized)
    if match:
        month = parse_bs_month_token(match.group(2))
        if month is None:
            raise MalformedInputError(f"unknown BS month name {match.group(2)!r}")
        return BSDate(int(match.group(1)), month, int(match.group(3)))
    raise MalformedInputError(f"not a BS date: {text!r}")


def iso_to_bs(iso_date: str) -> BSDate:
    return ad_to_bs(parse_iso_date(iso_date))


def bs_to_iso(bs_date: BSDate) -> str:
    return bs_to_ad(bs_date).isoformat()


def days_in_bs_month(year: int, month: int) -> int:
    return month_length(year, month)


def current_bs_date(clock: Callable[[], GDate] = GDate.today) -> BSDate:
    """Today's BS date according to ``clock``."""
    return ad_to_bs(clock())


# Collaborator-facing conversion with a tagged result

def normalize_calendar_name(name: Optional[str]) -> Optional[CalendarName]:
    if not name:
        return None
    key = str(name).strip().lower()
    if key in _AD_NAMES:
        return "ad"
    if key in _BS_NAMES:
        return "bs"
    return None


def _ascii_payload(date_input: Mapping) -> dict:
    return {k: to_ascii_digits(v).strip() if isinstance(v, str) else v for k, v in date_input.items()}


def _coerce_input(calendar: CalendarName, date_input: Any):
    """Turn any accepted input shape into a date (AD) or BSDate (BS)."""
    if calendar == "ad":
        if isinstance(date_input, BSDate):
            raise TypeError("got a BSDate where an AD date was expected")
        if isinstance(date_input, GDate):
            return _require_ad(date_input)
        if isinstance(date_input, str):
            return parse_iso_date(date_input)
        if isinstance(date_input, Mapping):
            try:
                args = ADDateArgs.model_validate(_ascii_payload(date_input))
            except ValidationError as exc:
                raise MalformedInputError(f"invalid AD date fields: {exc.errors()}") from exc
            try:
                return GDate(args.year, args.month, args.day)
            except ValueError as exc:
                raise InvalidComponentError(str(exc)) from exc
    else:
        if isinstance(date_input, BSDate):
            return date_input
        if isinstance(date_input, GDate):
            raise TypeError("got an AD date where a BSDate was expected")
        if isinstance(date_input, str):
            return parse_bs_text(date_input)
        if isinstance(date_input, Mapping):
            payload = _ascii_payload(date_input)
            if isinstance(payload.get("month"), str):
                month = parse_bs_month_token(payload["month"])
                if month is not None:
                    payload["month"] = month
            try:
                args = BSDateArgs.model_validate(payload)
            except ValidationError as exc:
                raise MalformedInputError(f"invalid BS date fields: {exc.errors()}") from exc
            return BSDate(args.year, args.month, args.day)
    raise MalformedInputError(f"unsupported date input type {type(date_input).__name__}")


def _invalid(src, tgt, parsed: str, reason: str, code: str) -> ConversionResultTD:
    return {
        "kind": "invalid",
        "source_calendar": src,
        "target_calendar": tgt,
        "parsed": parsed,
        "date": {"reason": reason, "error": code},
        "standard_format": STANDARD_FORMAT,
    }


def convert_calendar(source_calendar: str, target_calendar: str, date_input: Any) -> ConversionResultTD:
    """
    Convert ``date_input`` from the source calendar to the target calendar.

    Never raises for bad input: failures come back as ``kind == "invalid"``
    with a reason and an error code.
    """
    src = normalize_calendar_name(source_calendar)
    tgt = normalize_calendar_name(target_calendar)
    if src is None or tgt is None:
        return _invalid(
            src or source_calendar,
            tgt or target_calendar,
            "",
            "source/target must be AD or BS",
            "unknown_calendar",
        )

    try:
        value = _coerce_input(src, date_input)
        parsed = value.isoformat()
        if src == tgt:
            out = parsed
        elif src == "ad":
            out = ad_to_bs(value).isoformat()
        else:
            out = bs_to_ad(value).isoformat()
    except SambatError as exc:
        logger.debug("⚠️ convert_calendar: %s→%s %r rejected: %s", src, tgt, date_input, exc)
        return _invalid(src, tgt, "", str(exc), exc.code)
    except TypeError as exc:
        logger.debug("⚠️ convert_calendar: %s→%s %r rejected: %s", src, tgt, date_input, exc)
        return _invalid(src, tgt, "", str(exc), "wrong_calendar_type")

    logger.debug("🔁 convert_calendar: %s %s → %s %s", src, parsed, tgt, out)
    return {
        "kind": "exact",
        "source_calendar": src,
        "target_calendar": tgt,
        "parsed": parsed,
        "date": out,
        "standard_format": STANDARD_FORMAT,
    }
