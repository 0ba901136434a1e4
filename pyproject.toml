[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aatargs"
version = "0.1.0"
description = "Typed command-line option analysis with defaults, ranges, value sets and IPv4 addresses"
requires-python = ">=3.10"
dependencies = []
keywords = ["command line", "arguments", "options", "parser", "cli", "ipv4"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
aatargs-demo = "aatargs.parser:main"

[tool.hatch.build.targets.wheel]
packages = ["aatargs"]

[tool.pytest.ini_options]
addopts = "-ra"
