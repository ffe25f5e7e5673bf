import curses
import os
import termios

import pytest

from nsnake.app import (
    Jump,
    JumpHandler,
    key_to_movement,
    restore_terminal,
    set_max_baudrate,
    status_line,
)
from nsnake.engine import Movement


class FakeScreen:
    def __init__(self, keys=()):
        self.keys = list(keys)

    def getch(self):
        return self.keys.pop(0) if self.keys else curses.ERR


class FakeMenu:
    def __init__(self, choice):
        self.choice = choice
        self.cleared = []

    def render(self, clear):
        self.cleared.append(list(clear))
        return self.choice


@pytest.mark.parametrize(
    "key, movement",
    [
        (curses.KEY_UP, Movement.UP),
        (curses.KEY_DOWN, Movement.DOWN),
        (curses.KEY_LEFT, Movement.LEFT),
        (curses.KEY_RIGHT, Movement.RIGHT),
    ],
)
def test_key_to_movement_arrows(key, movement):
    assert key_to_movement(key) is movement


def test_key_to_movement_other_keys():
    assert key_to_movement(ord("a")) is None
    assert key_to_movement(curses.ERR) is None


def test_status_line_format():
    assert status_line(3, 7, 2) == "stage: (3)\tscore: 7\tfood: 2\n"


def test_starts_paused():
    handler = JumpHandler(FakeScreen(), FakeMenu(0))
    assert handler.receive_key() is Jump.PAUSED
    assert handler.movement is None


def test_arrow_unpauses_and_sets_movement():
    handler = JumpHandler(FakeScreen([curses.KEY_LEFT]), FakeMenu(0))
    assert handler.receive_key() is Jump.MOVE
    assert handler.movement is Movement.LEFT
    assert handler.receive_key() is Jump.MOVE
    assert handler.movement is Movement.LEFT


def test_pending_keys_are_drained():
    screen = FakeScreen([curses.KEY_UP, curses.KEY_DOWN, curses.KEY_RIGHT])
    handler = JumpHandler(screen, FakeMenu(0))
    assert handler.receive_key() is Jump.MOVE
    assert handler.movement is Movement.UP
    assert screen.keys == []


def test_menu_resume_pauses():
    screen = FakeScreen([curses.KEY_DOWN])
    menu = FakeMenu(Jump.MOVE.value)
    handler = JumpHandler(screen, menu)
    handler.receive_key()
    screen.keys = [ord("q")]
    assert handler.receive_key() is Jump.PAUSED
    assert menu.cleared == [[screen]]
    assert handler.receive_key() is Jump.PAUSED
    assert handler.movement is Movement.DOWN


@pytest.mark.parametrize("key", [ord("q"), ord(" "), ord("\r"), ord("\n")])
def test_menu_keys_open_menu(key):
    menu = FakeMenu(Jump.NEW_GAME.value)
    handler = JumpHandler(FakeScreen([key]), menu)
    assert handler.receive_key() is Jump.NEW_GAME
    assert len(menu.cleared) == 1


def test_menu_exit():
    handler = JumpHandler(FakeScreen([ord(" ")]), FakeMenu(Jump.EXIT.value))
    assert handler.receive_key() is Jump.EXIT
    assert handler.paused is False


def test_unknown_key_keeps_state():
    screen = FakeScreen([curses.KEY_RIGHT])
    handler = JumpHandler(screen, FakeMenu(0))
    handler.receive_key()
    screen.keys = [ord("z")]
    assert handler.receive_key() is Jump.MOVE
    assert handler.movement is Movement.RIGHT


def test_set_max_baudrate_on_non_terminal():
    read_fd, write_fd = os.pipe()
    try:
        assert set_max_baudrate(read_fd) is None
    finally:
        os.close(read_fd)
        os.close(write_fd)


def test_set_and_restore_on_pty():
    master, slave = os.openpty()
    try:
        original = termios.tcgetattr(slave)
        backup = set_max_baudrate(slave, termios.B9600)
        assert backup == original
        assert termios.tcgetattr(slave)[4] == termios.B9600
        restore_terminal(slave, backup)
        assert termios.tcgetattr(slave) == original
    finally:
        os.close(master)
        os.close(slave)