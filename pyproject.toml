[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "daycount"
version = "0.1.0"
description = "Day count conventions (Actual/360, Actual/365 Fixed, 30/360 Bond Basis) for interest accrual calculations"
requires-python = ">=3.10"
dependencies = []
keywords = ["finance", "day count", "year fraction", "fixed income", "bonds", "interest"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Financial and Insurance Industry",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["daycount"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
