from dataclasses import dataclass
from typing import Literal, Tuple, TypedDict, Union

from sambat.utils.calendar_table import check_bs_date


@dataclass(frozen=True, order=True)
class BSDate:
    """A civil date in the Bikram Sambat calendar. Validated on construction."""

    year: int
    month: int
    day: int

    def __post_init__(self):
        check_bs_date(self.year, self.month, self.day)

    def as_tuple(self) -> Tuple[int, int, int]:
        return (self.year, self.month, self.day)

    def isoformat(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"

    def __str__(self) -> str:
        return self.isoformat()


class DualDateTD(TypedDict):
    ad: str
    bs: str
    bs_nepali: str


class InvalidDateTD(TypedDict):
    reason: str
    error: str


class ConversionResultTD(TypedDict):
    kind: Literal["exact", "invalid"]
    source_calendar: str
    target_calendar: str
    parsed: str
    date: Union[str, InvalidDateTD]
    standard_format: str


CalendarName = Literal["ad", "bs"]
