"""
Console helpers, shared exceptions and small patterns used across the engine.
"""

from __future__ import annotations

from typing import Any, Generic

from rich.console import Console
from rich.rule import Rule
from typing_extensions import TypeVar

# Every printed line of the CLI goes through this console.
_console = Console(markup=True, width=120)


def cprint(*args: Any, **kwargs: Any) -> None:
    """Prints rich markup to the shared console."""
    _console.print(*args, **kwargs)


def crule(title: str = "", **kwargs: Any) -> None:
    """Prints a horizontal rule, optionally titled."""
    _console.print(Rule(title, **kwargs))


def ccapture(content: Any) -> str:
    """
    Renders content with the shared console and returns the plain text.

    Args:
        content (Any):
            Markup string or rich renderable.

    Returns:
        str:
            What would have been printed, without a trailing newline.

    """
    with _console.capture() as captured:
        _console.print(content, end="")
    return captured.get()


class GameException(Exception):
    """Base class for the errors raised by the engine's calling layers."""


class ContentError(GameException):
    """Raised when a content file is missing or malformed."""


_T = TypeVar("_T")


class Singleton(type, Generic[_T]):
    """Metaclass that builds a class's instance once and reuses it."""

    _instances: dict[Singleton[_T], _T] = {}

    def __call__(cls, *args: Any, **kwargs: Any) -> _T:
        instance = cls._instances.get(cls)
        if instance is None:
            instance = super().__call__(*args, **kwargs)
            cls._instances[cls] = instance
        else:
            # Later calls may still pass a data directory to reload from.
            instance.__init__(*args, **kwargs)
        return instance


def make_bar(current: int, maximum: int, length: int = 10, color: str = "white") -> str:
    """
    Builds a markup gauge of ``length`` cells, filled in proportion to
    ``current / maximum``.
    """
    ratio = current / maximum if maximum > 0 else 0.0
    filled = max(0, min(length, int(ratio * length)))
    bar = f"[{color}]{'█' * filled}[/]"
    if filled < length:
        bar += f"[dim]{'░' * (length - filled)}[/]"
    return bar
