# test_format_utils.py

from datetime import date, datetime

import pytest

from sambat.types.date_types import BSDate
from sambat.utils.format_utils import (
    NEPALI_DAYS,
    NEPALI_MONTHS,
    NEPALI_MONTHS_ENGLISH,
    format_ad_date,
    format_bs_date_english,
    format_bs_date_nepali,
    format_dual_date,
    get_dual_date,
    get_dual_date_display,
    nepali_weekday_name,
    to_ascii_digits,
    to_local_digits,
    weekday_index,
)
from sambat.utils.text_utils import parse_bs_month_token


# --------------------------- DIGITS ---------------------------

def test_digit_round_trip():
    assert to_ascii_digits(to_local_digits("2081")) == "2081"
    assert to_local_digits("0123456789") == "०१२३४५६७८९"


def test_local_digits_accept_ints():
    assert to_local_digits(2081) == "२०८१"


def test_non_digits_pass_through():
    assert to_local_digits("2081-09-01 BS") == "२०८१-०९-०१ BS"
    assert to_ascii_digits("पौष १८, २०००") == "पौष 18, 2000"
    assert to_ascii_digits("abc") == "abc"


# --------------------------- NAME TABLES ---------------------------

def test_name_tables_shape():
    assert len(NEPALI_MONTHS) == 12
    assert len(NEPALI_MONTHS_ENGLISH) == 12
    assert len(NEPALI_DAYS) == 7
    assert NEPALI_MONTHS_ENGLISH[8] == "Poush"
    assert NEPALI_MONTHS[8] == "पौष"
    assert NEPALI_DAYS[0] == "आइतबार"


@pytest.mark.parametrize(
    "token, expected",
    [("Poush", 9), ("poush", 9), ("पौष", 9), ("Saun", 4), ("chaitra", 12), ("०९", 9), ("13", None), ("", None), (None, None), ("xyz", None)],
)
def test_parse_bs_month_token(token, expected):
    assert parse_bs_month_token(token) == expected


# --------------------------- WEEKDAYS ---------------------------

def test_weekday_of_reference_is_saturday():
    assert weekday_index(date(1944, 1, 1)) == 6
    assert nepali_weekday_name(date(1944, 1, 1)) == "शनिबार"
    assert nepali_weekday_name(BSDate(2000, 9, 18)) == "शनिबार"


def test_weekday_is_sunday_first():
    assert weekday_index(date(2024, 9, 1)) == 0  # a Sunday
    assert weekday_index(date(2024, 9, 2)) == 1


# --------------------------- SINGLE CALENDAR ---------------------------

def test_format_bs_english():
    assert format_bs_date_english(BSDate(2081, 9, 1)) == "1 Poush, 2081"


def test_format_bs_nepali():
    assert format_bs_date_nepali(BSDate(2081, 9, 1)) == "१ पौष, २०८१"


def test_format_ad():
    assert format_ad_date(date(1944, 1, 1)) == "1 January 1944"
    assert format_ad_date(date(2024, 12, 15)) == "15 December 2024"


# --------------------------- DUAL ---------------------------

def test_dual_date_long():
    assert get_dual_date("1944-01-01") == "1 January 1944 (18 Poush, 2000)"
    assert get_dual_date(date(1944, 1, 1)) == "1 January 1944 (18 Poush, 2000)"


def test_dual_date_compact():
    assert format_dual_date(date(1944, 1, 1)) == "Jan 1 (Poush 18)"
    assert format_dual_date("1944-01-13") == "Jan 13 (Magh 1)"


def test_dual_date_display():
    assert get_dual_date_display("1944-01-13") == {
        "ad": "13 January 1944",
        "bs": "1 Magh, 2000",
        "bs_nepali": "१ माघ, २०००",
    }


def test_dual_date_from_datetime():
    assert get_dual_date(datetime(1944, 1, 1, 18, 30)) == "1 January 1944 (18 Poush, 2000)"


# --------------------------- FAIL CLOSED ---------------------------

@pytest.mark.parametrize(
    "value",
    ["", None, "garbage", "2023-02-30", "2200-01-01", "1900-01-01", 12345, BSDate(2081, 1, 1)],
    ids=["empty", "none", "garbage", "impossible", "after_window", "before_window", "int", "bs_value"],
)
def test_formatters_fail_closed(value):
    assert get_dual_date(value) == ""
    assert format_dual_date(value) == ""
    assert get_dual_date_display(value) == {"ad": "", "bs": "", "bs_nepali": ""}
