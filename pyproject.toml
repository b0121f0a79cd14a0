[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kpltools"
version = "0.1.0"
description = "Building blocks for a KPL language front end (character classes, a source reader, a symbol table) and supporting data structures"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "kpl",
    "compiler",
    "symbol table",
    "character classes",
    "binary search tree",
    "linked list",
    "word index",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Compilers",
    "Topic :: Education",
    "Topic :: Text Processing :: Indexing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
kpl-wordindex = "kpltools.wordindex:main"
kpl-symtab-demo = "kpltools.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["kpltools"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
