[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pcclub"
version = "0.1.0"
description = "Event log processor for a computer club: seating, waiting queue, revenue and table usage"
requires-python = ">=3.10"
keywords = ["computer club", "event processing", "billing", "bimap", "queue"]
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
    "Topic :: Office/Business",
]
dependencies = [
    "sortedcontainers",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[project.scripts]
pc-club = "pcclub.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["pcclub"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]
