"""A terminal snake game: engine, pause menu, checkpoint saves and curses front end."""

__version__ = "1.0.0"