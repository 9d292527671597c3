[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "referee"
version = "0.1.0"
description = "Syntax tree, type model and canonicalisation for a temporal-logic specification language"
requires-python = ">=3.10"
dependencies = []
keywords = ["temporal logic", "ltl", "specification", "compiler", "syntax tree"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["referee"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
