[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kchess"
version = "0.1.0"
description = "A two-player console chess game with castling, en passant and promotion, plus a small text car race animation"
requires-python = ">=3.10"
dependencies = []
keywords = ["chess", "board game", "console", "terminal"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Korean",
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
kchess = "kchess.cli:main"
kchess-race = "kchess.race:main"

[tool.hatch.build.targets.wheel]
packages = ["kchess"]

[tool.pytest.ini_options]
addopts = "-ra"
