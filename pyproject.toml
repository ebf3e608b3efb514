[build-system]
requires = ["setuptools>=61.0"]
build-backend = "setuptools.build_meta"

[project]
name = "zoork"
version = "0.1.0"
description = "A small text adventure: explore a house room by room, pick up items and unlock a locked room with a key."
requires-python = ">=3.10"
dependencies = []
keywords = ["text adventure", "interactive fiction", "game", "zork"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Multi-User Dungeons (MUD)",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
zoork = "zoork.game:main"

[tool.setuptools.packages.find]
include = ["zoork*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
