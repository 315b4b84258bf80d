[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minichain"
version = "0.1.0"
description = "A small blockchain of transactions with a pure-Python SHA-256 and binary persistence"
requires-python = ">=3.10"
dependencies = []
keywords = ["blockchain", "sha256", "transactions", "ledger"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
minichain = "minichain.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["minichain"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
