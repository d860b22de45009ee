"""
Logging setup for scripts built on the client.

The package itself only creates module loggers; applications call
configure_logging() once at startup.
"""

import logging
import sys
from typing import List, Optional, Union

from ghactions.config import APP_LOG_FILE, LOG_FORMAT, LOG_LEVEL


def configure_logging(
    level: Optional[Union[str, int]] = None,
    log_file: Optional[str] = None,
) -> None:
    """Configure root logging to stdout and, optionally, a file.

    Args:
        level: Log level name or number (defaults to LOG_LEVEL)
        log_file: File to append logs to (defaults to APP_LOG_FILE)
    """
    level = level or LOG_LEVEL
    if isinstance(level, str):
        level = level.upper()
    log_file = log_file or APP_LOG_FILE

    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode="a"))

    logging.basicConfig(level=level, format=LOG_FORMAT, handlers=handlers, force=True)

    # httpx logs every request at INFO; the client already does
    logging.getLogger("httpx").setLevel(logging.WARNING)
