import logging
import sys
from typing import Optional, TextIO, Union


class DetailsFormatter(logging.Formatter):
    """Appends the ``details`` mapping passed through ``extra`` as ``key=value`` pairs."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        details = getattr(record, "details", None) or {}
        if not details:
            return message
        context = " ".join(f"{key}={value}" for key, value in details.items())
        return f"{message} | {context}"


def create_logger(
    name: str,
    level: Union[str, int] = logging.WARNING,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    logger = logging.getLogger(name)
    logger.setLevel(level.upper() if isinstance(level, str) else level)
    if logger.handlers:
        return logger
    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    formatter = DetailsFormatter("%(asctime)s %(levelname)s %(message)s")
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.propagate = False
    return logger
