"""Logging setup for the API process."""

import logging
import sys

from hrms_api.config import get_settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
HANDLER_NAME = "hrms_api.console"

LEVEL_COLORS = {
    logging.DEBUG: "\x1b[36m",
    logging.INFO: "\x1b[34m",
    logging.WARNING: "\x1b[33m",
    logging.ERROR: "\x1b[31m",
    logging.CRITICAL: "\x1b[31;1m",
}
RESET = "\x1b[0m"


class ColorFormatter(logging.Formatter):
    """Formatter that colours the whole line by level."""

    def __init__(self, use_color: bool = True) -> None:
        super().__init__(LOG_FORMAT, datefmt=DATE_FORMAT)
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        if not self.use_color:
            return message
        color = LEVEL_COLORS.get(record.levelno, "")
        return f"{color}{message}{RESET}" if color else message


def setup_logging(level: int | None = None) -> None:
    """Install a console handler on the root logger.

    Args:
        level: Log level; defaults to INFO in production and DEBUG elsewhere
    """
    settings = get_settings()
    if level is None:
        level = logging.INFO if settings.environment == "production" else logging.DEBUG

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(ColorFormatter(use_color=sys.stderr.isatty()))

    root = logging.getLogger()
    # Replace only our own handler so repeated calls do not duplicate lines
    for existing in [h for h in root.handlers if h.get_name() == HANDLER_NAME]:
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(level)

    # SQL echo and per-request access lines are too chatty at DEBUG
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)
