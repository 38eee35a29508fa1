[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cmmcore"
version = "0.1.0"
description = "Core helpers for a JSON web service: typed errors, API response envelopes, configuration, math, random, list, conversion, encryption and time utilities."
requires-python = ">=3.10"
keywords = ["errors", "api", "config", "utilities", "encryption", "time"]
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
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]
dependencies = [
    "pycryptodome",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["cmmcore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
