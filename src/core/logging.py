"""Logging setup (loguru). Modules simply do `from loguru import logger`; this only decides where it ends up."""

import sys
from contextlib import suppress
from typing import Optional

from loguru import logger

LOG_FORMAT = "{time:HH:mm:ss} | {level: <8} | {name}:{function} - {message}"

# loguru starts out with a stderr handler with id 0. We replace that one, and only ever our own afterwards
_handler_id: Optional[int] = 0


def configure_logging(level: str = "INFO") -> None:
    """(Re)install the stderr handler at the requested level. Handlers added by others are left alone."""
    global _handler_id
    if _handler_id is not None:
        # somebody may have removed every handler already (logger.remove())
        with suppress(ValueError):
            logger.remove(_handler_id)
    _handler_id = logger.add(sys.stderr, level=level.upper(), format=LOG_FORMAT)
