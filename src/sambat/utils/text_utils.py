from typing import Dict, Optional

# Language & digit normalization

NEPALI_DIGITS = "०१२३४५६७८९"
_TO_LOCAL = str.maketrans("0123456789", NEPALI_DIGITS)
_TO_ASCII = str.maketrans(NEPALI_DIGITS, "0123456789")

NEPALI_MONTHS = (
    "बैशाख",
    "जेठ",
    "असार",
    "श्रावण",
    "भदौ",
    "आश्विन",
    "कार्तिक",
    "मंसिर",
    "पौष",
    "माघ",
    "फाल्गुन",
    "चैत्र",
)

NEPALI_MONTHS_ENGLISH = (
    "Baishakh",
    "Jestha",
    "Ashar",
    "Shrawan",
    "Bhadra",
    "Ashwin",
    "Kartik",
    "Mangsir",
    "Poush",
    "Magh",
    "Falgun",
    "Chaitra",
)

# Sunday first, matching the Gregorian day-of-week ordinal used by date pickers.
NEPALI_DAYS = (
    "आइतबार",
    "सोमबार",
    "मंगलबार",
    "बुधबार",
    "बिहीबार",
    "शुक्रबार",
    "शनिबार",
)

# Common alternate spellings seen in user input.
_EN_MONTH_ALIASES: Dict[str, int] = {
    "baisakh": 1, "baishak": 1, "vaisakh": 1,
    "jeth": 2, "jyestha": 2,
    "asar": 3, "ashadh": 3, "asadh": 3,
    "saun": 4, "sawan": 4,
    "bhadau": 5, "bhado": 5,
    "asoj": 6, "ashoj": 6,
    "kattik": 7,
    "marga": 8,
    "push": 9, "paush": 9,
    "fagun": 11, "phalgun": 11,
    "chait": 12, "chaite": 12,
}

BS_MONTH_LOOKUP: Dict[str, int] = {
    **{name.lower(): i for i, name in enumerate(NEPALI_MONTHS_ENGLISH, start=1)},
    **_EN_MONTH_ALIASES,
    **{name: i for i, name in enumerate(NEPALI_MONTHS, start=1)},
}


def to_local_digits(value) -> str:
    """ASCII digits → Devanagari digits; every other character is kept."""
    return str(value).translate(_TO_LOCAL)


def to_ascii_digits(text: str) -> str:
    """Devanagari digits → ASCII digits; every other character is kept."""
    return str(text).translate(_TO_ASCII)


def parse_bs_month_token(token: Optional[str]) -> Optional[int]:
    """Month number from a numeric token or a BS month name (either script)."""
    if token is None:
        return None
    t = to_ascii_digits(str(token)).strip()
    if not t:
        return None
    if t.isdigit():
        v = int(t)
        return v if 1 <= v <= 12 else None
    return BS_MONTH_LOOKUP.get(t.lower()) or BS_MONTH_LOOKUP.get(t)
