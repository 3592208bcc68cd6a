[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gophervm"
version = "0.1.0"
description = "Building blocks of a Go version manager: structured errors, validation, error logging and recovery, environment providers"
requires-python = ">=3.10"
dependencies = []
keywords = ["go", "golang", "version-manager", "validation", "errors"]
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
    "Topic :: Software Development :: Build Tools",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["gophervm"]

[tool.pytest.ini_options]
addopts = "-ra"
