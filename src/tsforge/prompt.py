"""Selection of optional extras."""

from __future__ import annotations

import logging
import sys
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable
from typing import TextIO

import readchar
from rich.console import Console
from rich.live import Live
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .extras import Extra, ExtrasSelection

LOGGER = logging.getLogger(__name__)

PROMPT_MESSAGE = "Select optional extras:"

_SUBMIT_KEYS = {readchar.key.ENTER, readchar.key.CR}
_CANCEL_KEYS = {readchar.key.ESC, readchar.key.CTRL_C}


class ExtrasSelector(ABC):
    """Source of the user's extras selection."""

    @abstractmethod
    def select(self) -> ExtrasSelection:
        """Return the extras to install."""


class StaticExtrasSelector(ExtrasSelector):
    """Return a selection fixed at construction time."""

    def __init__(self, extras: Iterable[Extra | str] = ()) -> None:
        self._selection = ExtrasSelection.of(extras)

    def select(self) -> ExtrasSelection:
        return self._selection


class InteractiveExtrasSelector(ExtrasSelector):
    """Checkbox prompt rendered with :mod:`rich` and driven by :mod:`readchar`.

    Up/down move the cursor, space toggles the highlighted extra and enter
    submits. Escape or Ctrl+C raise :class:`KeyboardInterrupt`.

    When ``stdin`` is not attached to a terminal no prompt is shown and the
    selection is empty.
    """

    def __init__(
        self,
        console: Console | None = None,
        *,
        stdin: TextIO | None = None,
        read_key: Callable[[], str] = readchar.readkey,
    ) -> None:
        self.console = console or Console()
        self._stdin = stdin
        self._read_key = read_key
        self._options = list(Extra)

    def is_interactive(self) -> bool:
        stream = self._stdin if self._stdin is not None else sys.stdin
        return stream is not None and stream.isatty()

    def select(self) -> ExtrasSelection:
        if not self.is_interactive():
            LOGGER.warning("stdin is not a terminal; no optional extras will be installed")
            return ExtrasSelection()

        cursor = 0
        chosen: set[Extra] = set()

        with Live(self._render(cursor, chosen), console=self.console, transient=True, auto_refresh=False) as live:
            while True:
                key = self._read_key()
                if key == readchar.key.UP:
                    cursor = (cursor - 1) % len(self._options)
                elif key == readchar.key.DOWN:
                    cursor = (cursor + 1) % len(self._options)
                elif key == readchar.key.SPACE:
                    chosen ^= {self._options[cursor]}
                elif key in _SUBMIT_KEYS:
                    break
                elif key in _CANCEL_KEYS:
                    raise KeyboardInterrupt
                live.update(self._render(cursor, chosen), refresh=True)

        selection = ExtrasSelection(frozenset(chosen))
        LOGGER.debug("selected extras: %s", [extra.value for extra in selection])
        return selection

    def _render(self, cursor: int, chosen: set[Extra]) -> Panel:
        table = Table.grid(padding=(0, 1))
        table.add_column(style="cyan", width=2)
        table.add_column(width=3)
        table.add_column()

        for index, extra in enumerate(self._options):
            pointer = "❯" if index == cursor else " "
            mark = "[x]" if extra in chosen else "[ ]"
            style = "cyan" if index == cursor else "white"
            table.add_row(pointer, Text(mark), Text(extra.label, style=style))

        table.add_row("", "", "")
        table.add_row("", "", "[dim]↑/↓ to move, space to toggle, enter to confirm[/dim]")
        return Panel(table, title=f"[bold]{PROMPT_MESSAGE}[/bold]", border_style="cyan", padding=(1, 2))


__all__ = [
    "ExtrasSelector",
    "InteractiveExtrasSelector",
    "PROMPT_MESSAGE",
    "StaticExtrasSelector",
]
