from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
import logging

LOG_FORMAT = "%(levelname)s %(indent)s%(message)s"

_DEPTH: ContextVar[int] = ContextVar("systemcnf_log_depth", default=0)


class IndentFilter(logging.Filter):
    """Stamp each record with the current nesting as `indent`."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.indent = "  " * _DEPTH.get()
        return True


@contextmanager
def log_indent():
    token = _DEPTH.set(_DEPTH.get() + 1)
    try:
        yield
    finally:
        _DEPTH.reset(token)


def configure_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level)
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    formatter = logging.Formatter(LOG_FORMAT)
    for handler in root_logger.handlers:
        if not any(isinstance(f, IndentFilter) for f in handler.filters):
            handler.addFilter(IndentFilter())
        handler.setFormatter(formatter)
