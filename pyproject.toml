[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pockettetris"
version = "0.1.0"
description = "A small falling-block puzzle game on a 10x18 board, with a turn-based terminal front end"
requires-python = ">=3.10"
dependencies = []
keywords = ["tetris", "tetromino", "puzzle", "game", "terminal"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
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
pockettetris = "pockettetris.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["pockettetris"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"
