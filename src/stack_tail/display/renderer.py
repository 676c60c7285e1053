"""Terminal renderer that repaints the latest batch of records in place."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from datetime import tzinfo

from rich.console import Console
from rich.control import Control, ControlType
from rich.text import Text

from stack_tail.domain import StatusRecord
from stack_tail.runtime import FollowEngine, Tick

from .formatter import render_columns

COLUMN_PADDING = 2

logger = logging.getLogger(__name__)


def align_columns(rows: Sequence[Sequence[Text]], *, padding: int = COLUMN_PADDING) -> list[Text]:
    """Join cells into lines, padding each column to its widest cell."""

    widths: list[int] = []
    for cells in rows:
        for index, cell in enumerate(cells):
            if index == len(widths):
                widths.append(0)
            widths[index] = max(widths[index], cell.cell_len)

    lines: list[Text] = []
    for cells in rows:
        line = Text()
        for index, cell in enumerate(cells):
            line.append_text(cell)
            if index < len(cells) - 1:
                line.append(" " * (widths[index] - cell.cell_len + padding))
        lines.append(line)
    return lines


class TerminalRenderer:
    """Owns the console and redraws the table on every tick."""

    def __init__(
        self,
        console: Console,
        *,
        timezone: tzinfo | None = None,
        include_reason: bool = True,
    ) -> None:
        self._console = console
        self._timezone = timezone
        self._include_reason = include_reason

    def clear(self, count: int) -> None:
        """Erase the ``count`` lines drawn above the cursor."""

        if count <= 0:
            return
        erase = ((ControlType.CURSOR_UP, 1), (ControlType.ERASE_IN_LINE, 2)) * count
        try:
            self._console.control(Control(ControlType.CARRIAGE_RETURN, *erase))
        except OSError as exc:
            logger.debug("Unable to clear %d lines: %s", count, exc)

    def write(self, records: Iterable[StatusRecord]) -> None:
        rows = [
            render_columns(record, self._timezone, include_reason=self._include_reason)
            for record in records
        ]
        for line in align_columns(rows):
            if self._console.is_terminal:
                # One screen line per record, so clear() can count them.
                self._console.print(line, no_wrap=True, overflow="ellipsis", soft_wrap=False)
            else:
                self._console.print(line, soft_wrap=True)

    def flush(self) -> None:
        try:
            self._console.file.flush()
        except OSError as exc:
            logger.debug("Unable to flush console: %s", exc)

    def draw(self, tick: Tick) -> None:
        self.clear(tick.previous_count)
        self.flush()
        self.write(tick.records)
        self.flush()


async def drive(engine: FollowEngine, renderer: TerminalRenderer) -> int:
    """Draw every tick the engine produces and return how many were drawn."""

    drawn = 0
    async for tick in engine.ticks():
        renderer.draw(tick)
        drawn += 1
    return drawn


__all__ = ["TerminalRenderer", "align_columns", "drive"]
