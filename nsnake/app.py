"""Terminal front end: key handling, pause menu, stage loop and checkpoints."""

from __future__ import annotations

import argparse
import curses
import locale
import sys
import termios
from enum import Enum
from typing import Any

from nsnake.engine import GameStatus, Movement, SnakeEngine
from nsnake.menu import Geometry, Menu
from nsnake.savegame import SaveGame

BOARD_ROWS = 20
BOARD_COLS = 40
WIN_ROWS = BOARD_ROWS + 5
WIN_COLS = BOARD_COLS * 2 + 5
MENU_ROWS = BOARD_ROWS
MENU_COLS = BOARD_COLS * 2

MENU_CHOICES = ("Resume", "New game", "Exit")
MENU_KEYS = frozenset({ord("q"), ord(" "), ord("\r"), ord("\n")})

_PREFERRED_SPEEDS = ("B230400", "B115200", "B57600", "B38400", "B19200", "B9600")

_KEY_MOVES = {
    curses.KEY_UP: Movement.UP,
    curses.KEY_DOWN: Movement.DOWN,
    curses.KEY_LEFT: Movement.LEFT,
    curses.KEY_RIGHT: Movement.RIGHT,
}


def set_max_baudrate(fd: int, baud: int | None = None) -> list[Any] | None:
    """Raise the terminal speed; return the previous attributes, or None on failure.

    With no baud the fastest supported rate is tried first.
    """
    try:
        backup = termios.tcgetattr(fd)
    except termios.error:
        return None

    if baud is None:
        speeds = [getattr(termios, name) for name in _PREFERRED_SPEEDS if hasattr(termios, name)]
    else:
        speeds = [baud]

    for speed in speeds:
        attrs = [*backup[:4], speed, speed, list(backup[6])]
        try:
            termios.tcsetattr(fd, termios.TCSANOW, attrs)
        except termios.error:
            continue
        return backup
    return None


def restore_terminal(fd: int, attrs: list[Any] | None) -> None:
    """Put back attributes saved by set_max_baudrate; None is ignored."""
    if attrs:
        termios.tcsetattr(fd, termios.TCSANOW, attrs)


def key_to_movement(key: int) -> Movement | None:
    """Map an arrow key to a movement; other keys give None."""
    return _KEY_MOVES.get(key)


def status_line(level: int, score: int, food: int) -> str:
    return f"stage: ({level})\tscore: {score}\tfood: {food}\n"


class Jump(Enum):
    """Outcome of a key poll; the first three match the menu entries."""

    MOVE = 0
    NEW_GAME = 1
    EXIT = 2
    PAUSED = 3


class JumpHandler:
    """Polls the keyboard, tracks the last arrow pressed and opens the pause menu."""

    def __init__(self, screen: Any, menu: Menu) -> None:
        self._screen = screen
        self._menu = menu
        self._movement: Movement | None = None
        self.paused = True

    @property
    def movement(self) -> Movement | None:
        return self._movement

    def receive_key(self) -> Jump:
        key = self._screen.getch()
        while self._screen.getch() != curses.ERR:
            pass

        movement = key_to_movement(key)
        if movement is not None:
            self._movement = movement
            self.paused = False
            return Jump.MOVE

        if key in MENU_KEYS:
            jump = Jump(self._menu.render([self._screen]))
            self.paused = jump is Jump.MOVE
            return Jump.PAUSED if self.paused else jump

        return Jump.PAUSED if self.paused else Jump.MOVE


def _draw_stage(screen: Any, stage: SnakeEngine, level: int) -> None:
    try:
        screen.addstr(0, 0, stage.render())
        screen.addstr(status_line(level, stage.score, stage.food_left))
    except curses.error:
        pass
    screen.refresh()


def _end_of_stage(screen: Any, message: str, level: int, score: int) -> None:
    curses.napms(300)
    while screen.getch() != curses.ERR:
        pass
    screen.clear()
    try:
        screen.addstr(f"{message}\n\tscore: {score}\n\tlevel: " + "\u2605 " * level)
    except curses.error:
        pass
    screen.refresh()
    while screen.getch() == curses.ERR:
        curses.napms(10)
    curses.napms(500)


def _setup_screen(screen: Any) -> tuple[int, int]:
    top = curses.LINES // 2 - BOARD_ROWS // 2
    left = curses.COLS // 2 - BOARD_COLS
    try:
        screen.resize(WIN_ROWS, WIN_COLS)
        screen.mvwin(top, left)
    except curses.error:
        pass
    screen.keypad(True)
    screen.nodelay(True)
    screen.timeout(0)
    try:
        curses.curs_set(0)
    except curses.error:
        pass
    curses.noecho()
    curses.cbreak()
    return top, left


def _play_game(screen: Any, geometry: Geometry) -> bool:
    """Run one game; return True to start a new game, False to quit."""
    save = SaveGame()
    handler = JumpHandler(screen, Menu(MENU_CHOICES, geometry))
    stage = SnakeEngine(BOARD_ROWS, BOARD_COLS, save.food, save.score)

    while True:
        jump = handler.receive_key()
        if jump is Jump.NEW_GAME:
            save.delete()
            return True
        if jump is Jump.EXIT:
            return False
        if jump is Jump.PAUSED or handler.movement is None:
            _draw_stage(screen, stage, save.level)
            curses.napms(130)
            continue

        status = stage.move(handler.movement)
        _draw_stage(screen, stage, save.level)
        if status is GameStatus.LOST:
            _end_of_stage(screen, "YOU LOST", save.level, save.score)
            return False
        if status is GameStatus.WIN:
            save.next_level()
            save.save()
            _end_of_stage(screen, "YOU WIN", save.level, save.score)
            stage = SnakeEngine(BOARD_ROWS, BOARD_COLS, save.food, save.score)

        curses.napms(save.speed)


def _run(screen: Any) -> None:
    top, left = _setup_screen(screen)
    geometry = Geometry(MENU_ROWS, MENU_COLS, top, left)
    while _play_game(screen, geometry):
        pass


def main(argv: list[str] | None = None) -> int:
    """Start the game in the current terminal."""
    parser = argparse.ArgumentParser(prog="nsnake", description="Snake for the terminal.")
    parser.parse_args(argv)

    fd = sys.stdin.fileno()
    saved = set_max_baudrate(fd)
    locale.setlocale(locale.LC_ALL, "")
    try:
        curses.wrapper(_run)
    except KeyboardInterrupt:
        pass
    finally:
        restore_terminal(fd, saved)
    return 0


if __name__ == "__main__":
    sys.exit(main())