[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wordgrid"
version = "0.1.0"
description = "A two-player terminal crossword tile game with save and load support"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "board-game", "word-game", "terminal", "tiles"]
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
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
wordgrid = "wordgrid.game:main"

[tool.hatch.build.targets.wheel]
packages = ["wordgrid"]

[tool.pytest.ini_options]
addopts = "-ra"
