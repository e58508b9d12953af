[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ftshell"
version = "0.1.0"
description = "Environment store and builtin commands for a small POSIX-style shell"
requires-python = ">=3.10"
dependencies = []
keywords = ["shell", "builtins", "environment", "export", "cd", "echo"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Shells",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ftshell"]

[tool.pytest.ini_options]
addopts = "-ra"
