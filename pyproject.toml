[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mgparse"
version = "0.1.0"
description = "Minimalist Grammar derivations: features, lexical items, merge, move, phases, workspaces and a search-based parser"
requires-python = ">=3.10"
dependencies = []
keywords = ["linguistics", "syntax", "minimalist grammar", "parsing", "derivation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Linguistic",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["mgparse"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
