"""
core/logger_setup.py - Logging configuration for the plugin and its host bot.

setup_logging() installs a JSON (or rich) console handler and, optionally, a
rotating log file. log_context() tags every record emitted inside it with the
chat subject and user being checked.
"""

import collections
import contextlib
import contextvars
import logging
import logging.config
import os
from collections.abc import Iterator
from typing import Any

JSON_FIELDS = "%(asctime)s %(levelname)s %(subject_id)s %(user_id)s %(name)s %(message)s"
DEFAULT_LOG_FILE = "logs/lolicon.log"

_ctx_subject_id: contextvars.ContextVar[str] = contextvars.ContextVar("subject_id", default="-")
_ctx_user_id: contextvars.ContextVar[str] = contextvars.ContextVar("user_id", default="-")


@contextlib.contextmanager
def log_context(*, subject_id: Any = None, user_id: Any = None) -> Iterator[None]:
    """Attach subject/user ids to records logged inside the block; restored on exit."""
    subject_token = _ctx_subject_id.set("-" if subject_id is None else str(subject_id))
    user_token = _ctx_user_id.set("-" if user_id is None else str(user_id))
    try:
        yield
    finally:
        _ctx_user_id.reset(user_token)
        _ctx_subject_id.reset(subject_token)


class _ContextFilter(logging.Filter):
    """Adds subject_id/user_id fields to every LogRecord."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.subject_id = _ctx_subject_id.get()
        record.user_id = _ctx_user_id.get()
        return True


class _DuplicateFilter(logging.Filter):
    """Drops a record whose (msg, exc_text) was seen in the last *window* records."""

    def __init__(self, window: int = 20) -> None:
        super().__init__()
        self._recent: collections.deque[tuple[str, str]] = collections.deque(maxlen=window)

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: D401
        key = (record.getMessage(), record.exc_text or "")
        if key in self._recent:
            return False
        self._recent.append(key)
        return True


def _handler(name: str, **options: Any) -> dict[str, Any]:
    # Each handler gets its own dedupe filter; a shared one would let the first
    # handler swallow the record for the rest.
    return {**options, "filters": [f"dedupe_{name}", "context"]}


def build_logging_config(
    *,
    level: str = "INFO",
    pretty: bool = False,
    log_file: str | None = None,
) -> dict[str, Any]:
    """Return a dictConfig mapping for the given console style and optional file."""
    handlers: dict[str, Any] = {}
    if pretty:
        handlers["console"] = _handler(
            "console",
            **{
                "class": "rich.logging.RichHandler",
                "formatter": "rich",
                "markup": True,
                "show_path": False,
                "rich_tracebacks": True,
            },
        )
    else:
        handlers["console"] = _handler(
            "console",
            **{"class": "logging.StreamHandler", "formatter": "json", "stream": "ext://sys.stdout"},
        )
    if log_file:
        handlers["file"] = _handler(
            "file",
            **{
                "class": "logging.handlers.RotatingFileHandler",
                "formatter": "json",
                "filename": log_file,
                "maxBytes": 5_000_000,
                "backupCount": 3,
                "encoding": "utf-8",
            },
        )

    filters: dict[str, Any] = {"context": {"()": "lolicon.core.logger_setup._ContextFilter"}}
    for name in handlers:
        filters[f"dedupe_{name}"] = {"()": "lolicon.core.logger_setup._DuplicateFilter"}

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "rich": {"datefmt": "%Y-%m-%d %H:%M:%S"},
            "json": {
                "()": "pythonjsonlogger.json.JsonFormatter",
                "fmt": JSON_FIELDS,
                "datefmt": "%Y-%m-%dT%H:%M:%S%z",
            },
        },
        "filters": filters,
        "handlers": handlers,
        "root": {"handlers": list(handlers), "level": level.upper()},
    }


_CONFIGURED: bool = False


def setup_logging(*, level: str | None = None, force: bool = False) -> None:
    """
    Configure root logging once per process.

    Environment:
        LOG_LEVEL      root level when *level* is not given (default INFO)
        LOG_FORMAT     ``json`` (default) or ``pretty``
        LOG_TO_FILE    when set, also write JSON lines to LOG_FILE_PATH
    """
    global _CONFIGURED
    if _CONFIGURED and not force:
        return

    log_file = None
    if os.getenv("LOG_TO_FILE"):
        log_file = os.getenv("LOG_FILE_PATH", DEFAULT_LOG_FILE)
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)

    config = build_logging_config(
        level=level or os.getenv("LOG_LEVEL", "INFO"),
        pretty=os.getenv("LOG_FORMAT", "json").lower() == "pretty",
        log_file=log_file,
    )
    logging.config.dictConfig(config)
    _CONFIGURED = True


# End of core/logger_setup.py
