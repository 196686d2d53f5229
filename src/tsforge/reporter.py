"""Coloured progress lines printed while a project is initialised."""

from __future__ import annotations

from rich.console import Console


class Reporter:
    """Print user-facing status messages through a :class:`rich.console.Console`."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console(highlight=False)

    def info(self, message: str) -> None:
        self.console.print(message, style="blue", markup=False)

    def success(self, message: str) -> None:
        self.console.print(message, style="green", markup=False)


__all__ = ["Reporter"]
