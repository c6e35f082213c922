[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aspellkit"
version = "0.1.0"
description = "Support utilities for a spell checker: ASCII text helpers, byte regions and memory streams, directory listing and install-path resolution"
requires-python = ">=3.10"
dependencies = []
keywords = ["spelling", "ascii", "memory stream", "dirent", "paths", "gettext"]
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
    "Topic :: Text Processing :: Linguistic",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["aspellkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
