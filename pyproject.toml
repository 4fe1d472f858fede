[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "myth"
version = "0.1.0"
description = "Ethereum consensus (phase 0) constants, SSZ collection types and beacon chain containers."
requires-python = ">=3.10"
dependencies = []
keywords = ["ethereum", "consensus", "beacon-chain", "ssz", "phase0"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
myth = "myth.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["myth"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
