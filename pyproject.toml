[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sudokuseek"
version = "0.1.0"
description = "Sudoku grids, validity checking and a backtracking solver that picks the most constrained cell first"
requires-python = ">=3.10"
dependencies = []
keywords = ["sudoku", "puzzle", "solver", "backtracking"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
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
sudokuseek = "sudokuseek.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["sudokuseek"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
