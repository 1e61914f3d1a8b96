[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "loghttpd"
version = "0.1.0"
description = "A small routing HTTP server that logs every request to a rotating log file"
requires-python = ">=3.10"
dependencies = []
keywords = ["http", "server", "routing", "logging", "log-rotation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
loghttpd = "loghttpd.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["loghttpd"]

[tool.pytest.ini_options]
addopts = "-ra"
