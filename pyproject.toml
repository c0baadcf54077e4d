[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "playerdb"
version = "0.1.0"
description = "SQLite-backed player accounts, sessions, reports and game statistics for game servers"
requires-python = ">=3.10"
dependencies = []
keywords = ["sqlite", "accounts", "sessions", "game", "statistics"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["playerdb"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
