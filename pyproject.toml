[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cursetris"
version = "0.1.0"
description = "A terminal Tetris game drawn with curses, with configurable keys and tetrimino files"
requires-python = ">=3.10"
dependencies = []
keywords = ["tetris", "game", "curses", "terminal", "puzzle"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console :: Curses",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cursetris = "cursetris.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["cursetris"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
