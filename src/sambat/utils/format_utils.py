import calendar
import logging
from datetime import date as GDate
from typing import Optional, Union

from sambat.errors import SambatError
from sambat.types.date_types import BSDate, DualDateTD
from sambat.utils.date_utils import ad_to_bs, bs_to_ad, parse_iso_date
from sambat.utils.text_utils import (
    NEPALI_DAYS,
    NEPALI_MONTHS,
    NEPALI_MONTHS_ENGLISH,
    to_ascii_digits,
    to_local_digits,
)

logger = logging.getLogger(__name__)

__all__ = [
    "NEPALI_DAYS",
    "NEPALI_MONTHS",
    "NEPALI_MONTHS_ENGLISH",
    "to_ascii_digits",
    "to_local_digits",
    "weekday_index",
    "nepali_weekday_name",
    "format_bs_date_nepali",
    "format_bs_date_english",
    "format_ad_date",
    "get_dual_date_display",
    "get_dual_date",
    "format_dual_date",
]

DateInput = Union[str, GDate, None]


def weekday_index(value: Union[GDate, BSDate]) -> int:
    """Sunday-first weekday ordinal (0 = Sunday) of an AD or BS date."""
    ad = bs_to_ad(value) if isinstance(value, BSDate) else value
    return ad.isoweekday() % 7


def nepali_weekday_name(value: Union[GDate, BSDate]) -> str:
    return NEPALI_DAYS[weekday_index(value)]


def format_bs_date_nepali(bs_date: BSDate) -> str:
    """``"१ पौष, २०८१"``"""
    return (
        f"{to_local_digits(bs_date.day)} {NEPALI_MONTHS[bs_date.month - 1]}, "
        f"{to_local_digits(bs_date.year)}"
    )


def format_bs_date_english(bs_date: BSDate) -> str:
    """``"1 Poush, 2081"``"""
    return f"{bs_date.day} {NEPALI_MONTHS_ENGLISH[bs_date.month - 1]}, {bs_date.year}"


def format_ad_date(ad_date: GDate) -> str:
    """``"1 January 1944"``"""
    return f"{ad_date.day} {calendar.month_name[ad_date.month]} {ad_date.year}"


def _resolve(date_input: DateInput) -> Optional[tuple]:
    """(AD date, BS date) for display, or None when the input cannot be shown."""
    if not date_input:
        return None
    try:
        if isinstance(date_input, str):
            ad = parse_iso_date(date_input)
        elif isinstance(date_input, GDate):
            ad = GDate(date_input.year, date_input.month, date_input.day)
        else:
            logger.debug("🖨️ format: unsupported input type %s", type(date_input).__name__)
            return None
        return ad, ad_to_bs(ad)
    except SambatError as exc:
        logger.debug("🖨️ format: cannot display %r: %s", date_input, exc)
        return None


def get_dual_date_display(date_input: DateInput) -> DualDateTD:
    """AD, BS (English) and BS (Nepali) strings; all empty when invalid."""
    resolved = _resolve(date_input)
    if resolved is None:
        return {"ad": "", "bs": "", "bs_nepali": ""}
    ad, bs = resolved
    return {
        "ad": format_ad_date(ad),
        "bs": format_bs_date_english(bs),
        "bs_nepali": format_bs_date_nepali(bs),
    }


def get_dual_date(date_input: DateInput) -> str:
    """``"1 January 1944 (18 Poush, 2000)"``, or ``""`` when invalid."""
    resolved = _resolve(date_input)
    if resolved is None:
        return ""
    ad, bs = resolved
    return f"{format_ad_date(ad)} ({format_bs_date_english(bs)})"


def format_dual_date(date_input: DateInput) -> str:
    """Compact form: ``"Jan 1 (Poush 18)"``, or ``""`` when invalid."""
    resolved = _resolve(date_input)
    if resolved is None:
        return ""
    ad, bs = resolved
    return f"{calendar.month_abbr[ad.month]} {ad.day} ({NEPALI_MONTHS_ENGLISH[bs.month - 1]} {bs.day})"
