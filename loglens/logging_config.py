"""LogLens - Logging configuration"""

import logging

from rich.logging import RichHandler


def setup_logging(debug: bool = False, console=None) -> None:
    """Send log records through a RichHandler on the root logger.

    Library modules only create loggers; the command line calls this once.
    """
    handler = RichHandler(console=console, show_path=debug, markup=False)
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.DEBUG if debug else logging.INFO)
