# util/logger.py
import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from config.settings import settings

logging.captureWarnings(True)

_INIT_FLAG = "_do_viewer_inited"


class ColoredFormatter(logging.Formatter):
    COLORS = {
        "DEBUG": "\033[37m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[41m",
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        # Colorize a copy so file handlers sharing the record keep a plain levelname
        if getattr(record, "_colorize", False):
            record = logging.makeLogRecord(record.__dict__)
            lvl = record.levelname
            record.levelname = f"{self.COLORS.get(lvl, self.RESET)}{lvl}{self.RESET}"
        return super().format(record)


class _ConsoleHandler(logging.StreamHandler):
    def emit(self, record: logging.LogRecord) -> None:
        record._colorize = True  # type: ignore[attr-defined]
        try:
            super().emit(record)
        finally:
            record._colorize = False  # type: ignore[attr-defined]


def _resolve_level(name: str | None) -> int:
    level = logging.getLevelName((name or "INFO").upper())
    return level if isinstance(level, int) else logging.INFO


def init_logger() -> logging.Logger:
    """
    Idempotent logger init:
    - Console handler on stdout, colored levelnames.
    - Size-rotated file under LOG_DIR only when LOG_TO_FILE is set.
    - httpx request lines are kept at WARNING; the listing client logs its own.
    """
    root = logging.getLogger()
    if getattr(root, _INIT_FLAG, False):
        return logging.getLogger(settings.LOGGER_NAME)

    level = _resolve_level(settings.LOG_LEVEL)
    root.setLevel(level)

    for h in list(root.handlers):
        root.removeHandler(h)

    text_fmt = "%(asctime)s %(levelname)s %(name)s - %(message)s"
    date_fmt = "%Y-%m-%dT%H:%M:%S%z"

    ch = _ConsoleHandler(sys.stdout)
    ch.setLevel(level)
    ch.setFormatter(ColoredFormatter(text_fmt, datefmt=date_fmt))
    root.addHandler(ch)

    if settings.LOG_TO_FILE:
        os.makedirs(settings.LOG_DIR, exist_ok=True)
        fh = RotatingFileHandler(
            os.path.join(settings.LOG_DIR, settings.LOG_FILE_NAME),
            maxBytes=settings.LOG_MAX_BYTES,
            backupCount=settings.LOG_BACKUP_COUNT,
            encoding="utf-8",
        )
        fh.setLevel(level)
        fh.setFormatter(logging.Formatter(text_fmt, datefmt=date_fmt))
        root.addHandler(fh)

    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.error").setLevel(logging.INFO)
    logging.getLogger("uvicorn.access").setLevel(logging.INFO)

    setattr(root, _INIT_FLAG, True)
    logger = logging.getLogger(settings.LOGGER_NAME)
    logger.debug("logger.init level=%s file=%s", logging.getLevelName(level), settings.LOG_TO_FILE)
    return logger
