[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "spartyboots"
version = "0.1.0"
description = "Game model for a conveyor-sorting logic puzzle: products, conveyor, sensor, scoring, badges and wires."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "puzzle", "logic", "conveyor", "visitor", "simulation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["spartyboots"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
