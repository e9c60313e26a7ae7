"""
Console logging for the command-line entry points.
"""
import logging
from typing import Optional, Union

from rich.console import Console
from rich.logging import RichHandler


def configure_logging(level: Union[int, str] = "INFO", console: Optional[Console] = None) -> None:
    """
    Route all WikiRetriever log records through a rich console handler.

    Args:
        level: Log level name or number
        console: Console to write to (defaults to a new stderr console)
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))

    root = logging.getLogger()
    # Replace handlers installed by an earlier call
    for existing in list(root.handlers):
        if isinstance(existing, RichHandler):
            root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(level)

    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
