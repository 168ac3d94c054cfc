import argparse
import sys
from datetime import date
from typing import Callable, List, Optional

from pydantic import ValidationError

from sambat.config import load_settings
from sambat.errors import SambatError
from sambat.logging_setup import get_logger, setup_logging
from sambat.types.tool_args import ConvertArgs
from sambat.utils.date_utils import convert_calendar, current_bs_date, normalize_calendar_name
from sambat.utils.format_utils import (
    format_bs_date_english,
    format_bs_date_nepali,
    nepali_weekday_name,
)

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Convert dates between Gregorian (AD) and Bikram Sambat (BS)."
    )
    parser.add_argument("date", nargs="?", help="Date as YYYY-MM-DD; omit for interactive mode")
    parser.add_argument(
        "--from", dest="source", default="ad", help="Calendar of the input date: ad (default) or bs"
    )
    parser.add_argument("--today", action="store_true", help="Print today's BS date and exit")
    parser.add_argument("--log-level", default=None, help="Override SAMBAT_LOG_LEVEL")
    parser.add_argument("--log-file", default=None, help="Override SAMBAT_LOG_FILE")
    return parser


def render(source: str, date_text: str) -> str:
    """One line describing the conversion of ``date_text``, or why it failed."""
    target = "ad" if normalize_calendar_name(source) == "bs" else "bs"
    try:
        args = ConvertArgs(source_calendar=source, target_calendar=target, date=date_text)
    except ValidationError as exc:
        return f"Invalid: {exc.errors()[0]['msg']}"

    res = convert_calendar(args.source_calendar, args.target_calendar, args.date)
    if res["kind"] == "invalid":
        return f"Invalid: {res['date']['reason']}"
    return f"{res['source_calendar'].upper()} {res['parsed']} → {res['target_calendar'].upper()} {res['date']}"


def interactive(source: str) -> None:
    print(f"Enter {source.upper()} dates as YYYY-MM-DD. Type 'exit' or 'quit' to leave.")
    while True:
        try:
            text = input("\nDate> ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\nBye!")
            break
        if text.lower() in {"exit", "quit"}:
            break
        if not text:
            continue
        print(render(source, text))


def today_line(clock: Callable[[], date] = date.today) -> str:
    """Today's BS date in English and Nepali, or why it cannot be shown."""
    try:
        today = current_bs_date(clock)
    except SambatError as exc:
        return f"Invalid: {exc}"
    return f"{format_bs_date_english(today)} | {format_bs_date_nepali(today)} {nepali_weekday_name(today)}"


def main(argv: Optional[List[str]] = None, clock: Callable[[], date] = date.today) -> int:
    args = build_parser().parse_args(argv)
    settings = load_settings()
    setup_logging(
        level=args.log_level or settings.log_level,
        log_file=args.log_file or settings.log_file,
    )
    logger.debug("🧭 main: source=%s date=%s today=%s", args.source, args.date, args.today)

    if args.today:
        line = today_line(clock)
        print(line)
        return 1 if line.startswith("Invalid:") else 0

    if args.date is None:
        interactive(args.source)
        return 0

    line = render(args.source, args.date)
    print(line)
    return 1 if line.startswith("Invalid:") else 0


if __name__ == "__main__":
    sys.exit(main())
