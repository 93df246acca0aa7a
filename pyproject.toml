[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "holdem-table"
version = "0.1.0"
description = "Texas Hold'em in the console against computer opponents, with a hand evaluator and equity-driven bots"
requires-python = ">=3.10"
keywords = ["poker", "texas-holdem", "card-game", "hand-evaluator", "bot"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
holdem-table = "holdem_table.app:main"

[tool.hatch.build.targets.wheel]
packages = ["holdem_table"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
