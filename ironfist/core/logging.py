"""
Logging for the battle engine.

The engine reports through catchery, which writes to the standard
``logging`` module; ``setup_logging`` routes those records to stderr through
rich so they never mix with the printed battle log.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(level: int = logging.WARNING, width: int = 120) -> None:
    """
    Installs a rich handler on the root logger.

    Args:
        level (int):
            Minimum level shown, WARNING by default; the CLI lowers it to
            DEBUG with ``--verbose``.
        width (int):
            Width of the stderr console.

    """
    handler = RichHandler(
        console=Console(width=width, stderr=True),
        show_path=False,
        markup=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s", datefmt="[%X]"))
    logging.basicConfig(level=level, handlers=[handler], force=True)
