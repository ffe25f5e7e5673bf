"""Checkpoint of game progress between stages."""

from __future__ import annotations

import os
from pathlib import Path

DEFAULT_PATH = "checkpoint.sav"

_USHORT = 0xFFFF
_UCHAR = 0xFF


class SaveGame:
    """Speed, score, food quota and level, loaded from a checkpoint file if present."""

    def __init__(self, path: str | os.PathLike[str] = DEFAULT_PATH) -> None:
        self.path = Path(path)
        self.speed = 150
        self.score = 0
        self.food = 5
        self.level = 1
        self.load()

    def next_level(self) -> None:
        """Bank the stage's food into the score and make the next stage harder."""
        self.score = (self.score + self.food) & _USHORT
        if self.speed - 2 > 0:
            self.speed -= 2
        if self.food + 5 < _UCHAR:
            self.food += 5
        self.level = (self.level + 1) & _UCHAR

    def load(self) -> bool:
        """Read the checkpoint; return False if there is none."""
        try:
            text = self.path.read_text()
        except FileNotFoundError:
            return False

        values: list[int] = []
        for token in text.split()[:4]:
            try:
                values.append(int(token))
            except ValueError:
                break

        fields = ("speed", "score", "food", "level")
        masks = (_USHORT, _USHORT, _UCHAR, _UCHAR)
        for name, mask, value in zip(fields, masks, values):
            setattr(self, name, value & _USHORT & mask)
        return True

    def save(self) -> None:
        """Write the checkpoint, replacing any earlier one."""
        self.path.write_text(f"{self.speed}\t{self.score}\t{self.food}\t{self.level}")

    def delete(self) -> None:
        """Remove the checkpoint if it exists."""
        self.path.unlink(missing_ok=True)