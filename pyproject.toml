[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mshparse"
version = "0.1.0"
description = "Tokenizer, syntax checker, variable expander and pipeline parser for shell command lines"
requires-python = ">=3.10"
dependencies = []
keywords = ["shell", "parser", "lexer", "pipeline", "redirection", "expansion"]
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
    "Topic :: System :: Shells",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
mshparse = "mshparse.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["mshparse"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
