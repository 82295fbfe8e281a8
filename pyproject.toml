[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sparklog"
version = "0.4.3"
description = "Configurable logging with loggers, sinks, level filters and automatic flushing policies"
requires-python = ">=3.10"
keywords = ["log", "logging", "logger", "sink"]
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
    "Topic :: System :: Logging",
    "Typing :: Typed",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["sparklog"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
