import calendar
import logging
from datetime import date as GDate
from typing import Callable, List, Optional, Tuple

from sambat.config import Settings
from sambat.errors import OutOfRangeYearError
from sambat.types.date_types import BSDate
from sambat.utils.calendar_table import FIRST_BS_YEAR, LAST_BS_YEAR, month_length
from sambat.utils.date_utils import current_bs_date
from sambat.utils.format_utils import weekday_index

logger = logging.getLogger(__name__)


def bs_year_range(
    first: Optional[int] = None,
    last: Optional[int] = None,
    settings: Optional[Settings] = None,
) -> List[int]:
    """
    Years a BS year selector should offer.

    Missing ends come from ``settings`` (the built-in picker defaults when
    none are given); both ends are clamped to the calendar table. Callers
    load settings once at their entry point and pass them in.
    """
    if first is None or last is None:
        settings = settings or Settings()
        first = settings.picker_first_year if first is None else first
        last = settings.picker_last_year if last is None else last
    first = max(first, FIRST_BS_YEAR)
    last = min(last, LAST_BS_YEAR)
    return list(range(first, last + 1))


def shift_bs_month(year: int, month: int, step: int = 1) -> Tuple[int, int]:
    """(year, month) ``step`` months away, wrapping across year boundaries."""
    index = year * 12 + (month - 1) + step
    new_year, new_month = divmod(index, 12)
    new_month += 1
    if not FIRST_BS_YEAR <= new_year <= LAST_BS_YEAR:
        raise OutOfRangeYearError(
            f"BS {new_year}-{new_month:02d} is outside the supported range {FIRST_BS_YEAR}–{LAST_BS_YEAR}"
        )
    return new_year, new_month


def _grid(first_weekday: int, days_in_month: int) -> List[Optional[int]]:
    cells: List[Optional[int]] = [None] * first_weekday
    cells.extend(range(1, days_in_month + 1))
    return cells


def bs_month_grid(year: int, month: int) -> List[Optional[int]]:
    """
    Sunday-first cells for a BS month view: ``None`` padding up to the weekday
    of day 1, then the day numbers.
    """
    first = BSDate(year, month, 1)
    cells = _grid(weekday_index(first), month_length(year, month))
    logger.debug("🗓️ bs_month_grid: %s-%02d → %s cells", year, month, len(cells))
    return cells


def ad_month_grid(year: int, month: int) -> List[Optional[int]]:
    first_weekday = weekday_index(GDate(year, month, 1))
    return _grid(first_weekday, calendar.monthrange(year, month)[1])


def is_today_bs(bs_date: BSDate, clock: Callable[[], GDate] = GDate.today) -> bool:
    return current_bs_date(clock) == bs_date
