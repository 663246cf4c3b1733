[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aocsolutions"
version = "0.1.0"
description = "Solutions to Advent of Code puzzles for 2023 and 2024, with a command-line runner"
requires-python = ">=3.10"
dependencies = []
keywords = ["advent-of-code", "puzzles", "solutions", "cli"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
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
advent-of-code-solutions = "aocsolutions.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["aocsolutions"]

[tool.pytest.ini_options]
addopts = "-ra"
