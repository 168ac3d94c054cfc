import logging
from logging.handlers import RotatingFileHandler
from typing import Iterable, Optional, Union


DEFAULT_FORMAT = "%(asctime)s  [%(levelname)s]  %(name)s › %(message)s"
DEFAULT_DATEFMT = "%H:%M:%S"

# Third-party loggers kept at WARNING.
NOISY_LOGGERS: tuple[str, ...] = (
    "dotenv",
    "dotenv.main",
)


class TruncateLongMsgs(logging.Filter):
    """Cuts console messages (e.g. pydantic error dumps) down to ``max_len``."""

    def __init__(self, max_len: int = 300):
        super().__init__()
        self.max_len = max_len

    def filter(self, record: logging.LogRecord) -> bool:
        msg = record.getMessage()
        if self.max_len and len(msg) > self.max_len:
            record.msg = msg[: self.max_len] + " …(truncated)"
            record.args = ()
        return True


_configured = False


def _as_level(level: Union[int, str]) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return resolved


def setup_logging(
    *,
    level: Union[int, str] = logging.INFO,
    console: bool = True,
    console_truncate_len: int = 300,
    fmt: str = DEFAULT_FORMAT,
    datefmt: str = DEFAULT_DATEFMT,
    log_file: Optional[str] = None,
    file_level: Optional[Union[int, str]] = None,
    file_max_bytes: int = 1_000_000,
    file_backup_count: int = 3,
    quiet: Iterable[str] = NOISY_LOGGERS,
    force: bool = False,
) -> None:
    """
    Configure root logging once. Only the entry point calls this; library
    modules just use `logging.getLogger(__name__)`.

    - Console handler with optional truncation of long messages.
    - Optional rotating file handler (untruncated).
    - `force=True` re-applies the configuration (used by tests).
    """
    global _configured
    if _configured and not force:
        return

    numeric_level = _as_level(level)
    root = logging.getLogger()
    for h in list(root.handlers):
        root.removeHandler(h)
    root.setLevel(numeric_level)

    formatter = logging.Formatter(fmt=fmt, datefmt=datefmt)

    if console:
        ch = logging.StreamHandler()
        ch.setLevel(numeric_level)
        ch.setFormatter(formatter)
        if console_truncate_len and console_truncate_len > 0:
            ch.addFilter(TruncateLongMsgs(console_truncate_len))
        root.addHandler(ch)

    if log_file:
        fh = RotatingFileHandler(
            log_file, maxBytes=file_max_bytes, backupCount=file_backup_count, encoding="utf-8"
        )
        fh.setLevel(_as_level(file_level) if file_level is not None else numeric_level)
        fh.setFormatter(formatter)
        root.addHandler(fh)

    for name in quiet:
        logging.getLogger(name).setLevel(logging.WARNING)

    _configured = True
    logging.getLogger(__name__).debug("🚀 Logging initialised (level=%s)", logging.getLevelName(numeric_level))


def get_logger(name: Optional[str] = None) -> logging.Logger:
    return logging.getLogger(name if name else "sambat")
