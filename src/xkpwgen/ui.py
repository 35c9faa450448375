"""UI module: stderr diagnostics and colouring of passphrase lines."""

from __future__ import annotations

import sys
from collections.abc import Callable

import click


class Console:
    """Output wrapper that respects quiet/verbose modes."""

    def __init__(self, quiet: bool = False, verbose: bool = False):
        self._quiet = quiet
        self._verbose = verbose

    def info(self, message: str, file=None) -> None:
        if self._quiet:
            return
        dest = file if file is not None else sys.stderr
        print(message, file=dest)

    def error(self, message: str, file=None) -> None:
        dest = file if file is not None else sys.stderr
        print(message, file=dest)

    def debug(self, message: str, file=None) -> None:
        if not self._verbose:
            return
        dest = file if file is not None else sys.stderr
        print(message, file=dest)


def _plain(text: str) -> str:
    return text


def line_styles(colour: str, isatty: bool) -> tuple[Callable[[str], str], Callable[[str], str]]:
    """Return (even, odd) line stylers for the given colour mode.

    'yes' always colours, 'no' never does, 'auto' colours when
    stdout is a terminal.
    """
    enabled = colour == "yes" or (colour == "auto" and isatty)
    if not enabled:
        return _plain, _plain
    return (
        lambda text: click.style(text, fg="cyan"),
        lambda text: click.style(text, fg="magenta"),
    )


def style_lines(lines: list[str], colour: str, isatty: bool) -> list[str]:
    """Apply alternating line styles to lines."""
    even, odd = line_styles(colour, isatty)
    return [(even if i % 2 == 0 else odd)(line) for i, line in enumerate(lines)]
