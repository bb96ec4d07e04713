[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ledgercore"
version = "0.1.0"
description = "Building blocks for a ledger database: LRU cache, skip list, self-keyed dictionary, configuration, role strategies, SQLite-backed key-value storage, framed protobuf codec and health tracking."
requires-python = ">=3.10"
dependencies = [
    "protobuf",
]
keywords = [
    "ledger",
    "database",
    "key-value",
    "skip-list",
    "lru-cache",
    "protobuf",
    "codec",
    "rbac",
    "health-check",
]
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
    "Topic :: Database :: Database Engines/Servers",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["ledgercore"]

[tool.hatch.build.targets.sdist]
include = [
    "ledgercore",
    "tests",
]

[tool.pytest.ini_options]
addopts = "-ra"
