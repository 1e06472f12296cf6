# ABOUTME: Logging setup for the tuimdb command line.
# ABOUTME: Routes the package logger through a Rich handler on stderr.

import logging

from rich.console import Console
from rich.logging import RichHandler


def configure_logging(verbose: bool = False, console: Console | None = None) -> logging.Logger:
    """Attach a RichHandler to the tuimdb logger.

    Verbose mode logs resolution steps at DEBUG; otherwise only warnings
    from the catalog client get through. Calling again replaces the handler.
    """
    level = logging.DEBUG if verbose else logging.WARNING
    logger = logging.getLogger("tuimdb")
    logger.handlers.clear()
    logger.setLevel(level)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=verbose,
        markup=False,
        rich_tracebacks=True,
        log_time_format="[%H:%M:%S]",
    )
    handler.setLevel(level)
    logger.addHandler(handler)
    return logger
