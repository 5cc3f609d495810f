# Logging setup for the CLI: route the standard logging tree through rich.
# Library modules only call logging.getLogger(__name__); handlers are installed here, once.

import logging
import os
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

# Log output goes to stderr so modernized source printed to stdout stays clean.
console = Console(stderr=True)


def setup_logging(level: str = "WARNING", log_file: Optional[str] = None) -> None:
    """
    Configure the root logger with a RichHandler.

    LOG_LEVEL in the environment overrides `level`. With log_file, records are
    also written there with timestamps.
    """
    level = os.getenv("LOG_LEVEL", level).upper()

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    # Replace a previous setup, keep foreign handlers (e.g. pytest's capture).
    for handler in list(root_logger.handlers):
        if isinstance(handler, (RichHandler, logging.FileHandler)):
            root_logger.removeHandler(handler)

    rich_handler = RichHandler(
        console=console,
        show_time=False,
        show_path=False,
        rich_tracebacks=True,
        markup=False,
    )
    rich_handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(rich_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(
            logging.Formatter(
                fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        root_logger.addHandler(file_handler)
