"""Logging setup."""

import logging

from rich.console import Console
from rich.logging import RichHandler

from mmove.constants import DEFAULT_LOG_LEVEL


def setup_logging(level: int = DEFAULT_LOG_LEVEL) -> None:
    """Configure the root logger with a RichHandler writing to stderr.

    Safe to call more than once; previously installed handlers are replaced.

    Args:
        level: Logging level, e.g. ``logging.DEBUG``.
    """
    root = logging.getLogger()
    root.setLevel(level)

    for handler in root.handlers[:]:
        root.removeHandler(handler)

    rich_handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        markup=False,
        rich_tracebacks=True,
    )
    rich_handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    root.addHandler(rich_handler)
