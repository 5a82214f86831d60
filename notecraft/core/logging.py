import logging
import sys
from typing import Optional

from notecraft.core.config import settings


DEFAULT_LEVEL = (settings.log_level or "INFO").upper()
DEFAULT_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(source)s | %(message)s"

# Provider SDK loggers that are chatty at INFO
NOISY_LOGGERS = ("httpx", "httpcore", "google_genai", "openai")


class ContextFilter(logging.Filter):
    """Defaults the `source` context field so the formatter never misses it."""

    def filter(self, record: logging.LogRecord) -> bool:  # type: ignore[override]
        if not hasattr(record, "source"):
            record.source = "-"
        return True


def setup_logging(level: Optional[str] = None, fmt: Optional[str] = None) -> None:
    """Install a single stderr handler on the root logger.

    Output goes to stderr so CLI results on stdout stay machine readable.
    """
    resolved_level = getattr(logging, (level or DEFAULT_LEVEL).upper(), logging.INFO)
    formatter = logging.Formatter(fmt or DEFAULT_FORMAT)

    root = logging.getLogger()
    root.setLevel(resolved_level)

    # Clear existing handlers to avoid duplicate logs on re-init
    for h in list(root.handlers):
        root.removeHandler(h)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)
    handler.addFilter(ContextFilter())
    root.addHandler(handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(resolved_level, logging.WARNING))


def get_logger(name: str) -> logging.Logger:
    """Get a module logger; ensure root is initialized."""
    if not logging.getLogger().handlers:
        setup_logging()
    return logging.getLogger(name)
