[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "metriclib"
version = "1.0.0"
description = "Metrics with typed text values, properties, groups and an in-memory metric database"
requires-python = ">=3.10"
dependencies = []
keywords = ["metric", "signal", "measurement", "properties", "groups"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["metriclib"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
