[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "markoff"
version = "0.1.0"
description = "A turn-based, team-coloured cellular automaton game with stamps and a Life-like rule"
requires-python = ">=3.10"
dependencies = []
keywords = ["cellular-automaton", "game-of-life", "simulation", "game"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Environment :: Console",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
markoff = "markoff.cli:main"

[tool.setuptools.packages.find]
include = ["markoff*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
