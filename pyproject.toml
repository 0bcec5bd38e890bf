[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aiapawn"
version = "0.1.0"
description = "Hexapawn on a 3x3 board with a computer opponent that learns from its losses"
requires-python = ">=3.10"
dependencies = []
keywords = ["hexapawn", "game", "board-game", "machine-learning", "terminal"]
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
aiapawn = "aiapawn.menu:main"

[tool.hatch.build.targets.wheel]
packages = ["aiapawn"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
