[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mazerun"
version = "0.1.0"
description = "Watch a maze carve itself, then steer a ball through it to the exit"
requires-python = ">=3.10"
dependencies = ["pygame"]
keywords = ["maze", "game", "backtracking", "pygame", "puzzle"]
classifiers = [
    "Development Status :: 3 - Alpha",
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
mazerun = "mazerun.game:main"

[tool.hatch.build.targets.wheel]
packages = ["mazerun"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
