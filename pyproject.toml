[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "runes"
version = "0.1.0"
description = "Run named shell recipes (spells) declared in a Runescript file"
requires-python = ">=3.10"
dependencies = []
keywords = ["build", "task-runner", "make", "recipes", "shell"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Build Tools",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
runes = "runes.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["runes"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
