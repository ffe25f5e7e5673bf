"""A small keyboard-driven menu drawn in its own curses window."""

from __future__ import annotations

import curses
import time
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, replace
from typing import Any

ENTER_KEYS = frozenset({curses.KEY_ENTER, ord("\n"), ord("\r")})


@dataclass(frozen=True)
class Geometry:
    """Window size and position, in curses order: rows, columns, top, left."""

    rows: int
    cols: int
    row_offset: int
    col_offset: int


def step_selection(index: int, key: int, count: int) -> int:
    """Return the highlighted entry after pressing key; arrows stop at the ends."""
    if key == curses.KEY_UP:
        return index - 1 if index > 0 else index
    if key == curses.KEY_DOWN:
        return index + 1 if index < count - 1 else index
    return index


class Menu:
    """A vertical list of choices; render() returns the index the user picks.

    The menu does not follow terminal resizes on its own; call resize().
    """

    def __init__(
        self,
        choices: Sequence[str],
        geometry: Geometry,
        new_window: Callable[[int, int, int, int], Any] = curses.newwin,
        delay: float = 0.03,
    ) -> None:
        if not choices:
            raise ValueError("a menu needs at least one choice")
        self.choices = tuple(choices)
        self.geometry = geometry
        self.delay = delay
        try:
            self._window = new_window(
                geometry.rows, geometry.cols, geometry.row_offset, geometry.col_offset
            )
        except curses.error as exc:
            raise RuntimeError("can't create a menu window") from exc
        if self._window is None:
            raise RuntimeError("can't create a menu window")
        self._window.keypad(True)
        self._window.nodelay(True)
        self._window.timeout(0)

    @property
    def window(self) -> Any:
        return self._window

    def resize(self, geometry: Geometry) -> bool:
        """Resize, then move the window; return False on the first step that fails."""
        try:
            self._window.resize(geometry.rows, geometry.cols)
        except curses.error:
            return False
        self.geometry = replace(self.geometry, rows=geometry.rows, cols=geometry.cols)

        try:
            self._window.mvwin(geometry.row_offset, geometry.col_offset)
        except curses.error:
            return False
        self.geometry = replace(
            self.geometry,
            row_offset=geometry.row_offset,
            col_offset=geometry.col_offset,
        )
        return True

    def render(self, clear: Iterable[Any] = ()) -> int:
        """Clear the given background windows, then run the menu until Enter is pressed."""
        for window in clear:
            window.clear()
            window.refresh()

        index = 0
        self._window.refresh()
        while True:
            key = self._window.getch()
            if key in ENTER_KEYS:
                self._window.clear()
                self._window.refresh()
                return index

            index = step_selection(index, key, len(self.choices))
            self._draw(index)
            if self.delay:
                time.sleep(self.delay)
            self._window.refresh()

    def _draw(self, index: int) -> None:
        self._window.box()
        for row, choice in enumerate(self.choices, start=1):
            attr = curses.A_REVERSE if row - 1 == index else curses.A_NORMAL
            self._window.addstr(row, 1, choice, attr)