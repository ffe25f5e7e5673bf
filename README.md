# nsnake

A classic snake game for the terminal.

You steer the snake around a 20 × 40 board. Eat the food (`●`) and avoid the
walls and your own body. Each stage asks for a set amount of food, and eating
all of it takes you to the next stage. Each later stage asks for five more
pieces of food, and the snake moves a little faster.

It needs a POSIX terminal, because it uses `curses` and `termios` from the
standard library. It has no third-party dependencies.

## Installing

```
pip install .
```

## Playing

```
nsnake
```

You can also start it with `python -m nsnake.app`.

| Key                 | Action                      |
|---------------------|-----------------------------|
| Arrow keys          | Change direction            |
| `q`, space or Enter | Open the menu (pauses game) |

- **The game starts paused.** Press an arrow key to start moving.
- **Turning back.** You can't reverse into yourself. Pressing the opposite direction keeps your current heading.
- **The menu.** It offers **Resume**, **New game** and **Exit**. Move through it with the up and down arrows and press Enter to pick an entry.
- **Quitting.** Ctrl-C quits at any time, and the terminal settings are restored.

The status line under the board shows the stage, your score and how much food
is left in the stage. When you lose, a summary appears. Press any key to
leave the game.

## Checkpoints

Each time you finish a stage, the game writes your speed, score, food quota
and stage number to `checkpoint.sav` in the current directory. These are
saved as four tab-separated numbers. The next game started from that
directory picks up from the checkpoint.

Choosing **New game** deletes the checkpoint and starts over from stage 1.
Losing does not delete it, so you resume from the last finished stage.

The `nsnake.savegame.SaveGame` class handles this file. It takes an optional
path and loads the file on creation if the file exists. Its methods are
`next_level()`, `load()`, `save()` and `delete()`.

## Using the engine

The game rules in `nsnake.engine` don't depend on the terminal:

```python
from nsnake.engine import GameStatus, Movement, SnakeEngine

engine = SnakeEngine(20, 40, 5, 0)   # rows, cols, food to eat, starting score
status = engine.move(Movement.LEFT)
print(engine.render())
if status is GameStatus.LOST:
    print("crashed")
```

- **`move()`** returns `GameStatus.NONE`, `GameStatus.WIN` (the stage's food quota is eaten) or `GameStatus.LOST` (the snake hit a wall or itself).
- **`render()`** returns the framed board as text, two characters per cell.
- **Board size.** Boards smaller than 9 × 9 raise `ValueError`, and so does a food quota below 1.
- **Food placement.** Food goes on a random free cell, chosen by `rand_in_range`. You can pass your own `rand` callable for predictable play.

`nsnake.menu.Menu` is the curses menu used for pausing. `step_selection()`
holds its arrow-key logic separately from the drawing.

## Limitations

- **Terminal resizing.** The game does not follow terminal resizes; the board and menu stay where they were placed at start-up.
- **Scoring.** There is no high-score table. The only thing kept between runs is the single checkpoint file.

## Running the tests

```
pip install .[test]
pytest
```