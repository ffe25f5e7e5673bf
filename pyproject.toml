[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "nsnake"
version = "1.0.0"
description = "A classic snake game for the terminal, with stages and a checkpoint save file"
requires-python = ">=3.10"
dependencies = []
keywords = ["snake", "game", "terminal", "curses", "arcade"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console :: Curses",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
nsnake = "nsnake.app:main"

[tool.setuptools.packages.find]
include = ["nsnake*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
