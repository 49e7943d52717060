[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "onemax_search"
version = "0.1.0"
description = "Exhaustive search and hill climbing on the OneMax problem, with tools for averaging runs and writing cooling schedules"
requires-python = ">=3.10"
dependencies = []
keywords = ["onemax", "hill-climbing", "exhaustive-search", "metaheuristics", "optimization"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
onemax-exhaustive = "onemax_search.exhaustive:main"
onemax-hill-climb = "onemax_search.hill_climbing:main"
onemax-average = "onemax_search.average:main"
onemax-temperature = "onemax_search.temperature:main"

[tool.hatch.build.targets.wheel]
packages = ["onemax_search"]

[tool.pytest.ini_options]
addopts = "-ra"
