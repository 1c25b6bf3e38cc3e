# SPDX-License-Identifier: MIT

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "worklog"


def configure_logging(level: str = "WARNING") -> logging.Logger:
    """Attach a rich handler writing to stderr to the application logger.

    Safe to call more than once: the handler is only added the first time,
    later calls just update the level.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level.upper())

    if not any(isinstance(handler, RichHandler) for handler in logger.handlers):
        handler = RichHandler(
            console=Console(stderr=True),
            show_path=False,
            rich_tracebacks=True,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)

    return logger
