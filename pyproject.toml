[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gearsmith"
version = "0.1.0"
description = "Stat heuristics and weaker-item filtering for the gear of a dual-wield melee character"
requires-python = ">=3.10"
dependencies = []
keywords = ["gear", "heuristics", "items", "stats", "filtering"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Role-Playing",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["gearsmith"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
