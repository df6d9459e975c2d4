"""Key=value logging for the migration difficulty engine.

Engine modules call ``get_logger(__name__)`` and, when a message concerns one
ecosystem pair, ``log_with_context`` so the pair ids land in fixed columns:

    timestamp=... level=DEBUG module=score function=compute_migration
    message=Computed migration report source_id=ethereum destination_id=solana overall=0.645
"""

import logging
import sys
from typing import Any

from pydantic import ValidationError

from app.core.config import get_settings

# Record attributes rendered right after the message, in this order
CONTEXT_FIELDS = ("source_id", "destination_id")


class StructuredFormatter(logging.Formatter):
    """Renders a record as space-separated ``key=value`` pairs."""

    def format(self, record: logging.LogRecord) -> str:
        fields: list[tuple[str, Any]] = [
            ("timestamp", self.formatTime(record, self.datefmt)),
            ("level", record.levelname),
            ("module", record.module),
            ("function", record.funcName),
            ("message", record.getMessage()),
        ]
        fields.extend(
            (name, getattr(record, name)) for name in CONTEXT_FIELDS if hasattr(record, name)
        )
        fields.extend(getattr(record, "extra_data", {}).items())
        return " ".join(f"{key}={value}" for key, value in fields)


def _configured_level() -> int:
    try:
        return get_settings().log_level
    except ValidationError:
        return logging.INFO


def get_logger(name: str) -> logging.Logger:
    """
    Return the named logger, attaching a stdout handler the first time.

    Args:
        name: Logger name (typically __name__)
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(StructuredFormatter())
    logger.addHandler(handler)
    logger.setLevel(_configured_level())
    return logger


def log_with_context(logger: logging.Logger, level: int, msg: str, **kwargs: Any) -> None:
    """
    Log ``msg`` on behalf of the caller.

    ``source_id`` and ``destination_id`` become record attributes; any other
    keyword is rendered from ``extra_data``. The record points at the
    function that called this helper, not at the helper itself.
    """
    extra: dict[str, Any] = {name: kwargs.pop(name) for name in CONTEXT_FIELDS if name in kwargs}
    extra["extra_data"] = kwargs
    logger.log(level, msg, extra=extra, stacklevel=2)
