[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "linedit"
version = "0.1.0"
description = "A small menu-driven line editor with undo and redo"
requires-python = ">=3.10"
dependencies = []
keywords = ["editor", "text", "lines", "undo", "redo"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Editors",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
linedit = "linedit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["linedit"]

[tool.pytest.ini_options]
addopts = "-ra"
