[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "machikoro"
version = "1.0.0"
description = "Core game logic for the Machi Koro board game: cards, players, card stores, dice, commands and game state"
requires-python = ">=3.10"
dependencies = []
keywords = ["machi koro", "board game", "card game", "game engine"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["machikoro"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
