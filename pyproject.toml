[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "potato_regex"
version = "0.1.0"
description = "A small Thompson-NFA regular expression engine with a command-line matcher"
requires-python = ">=3.10"
dependencies = []
keywords = ["regex", "regular-expression", "nfa", "thompson", "postfix"]
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
    "Environment :: Console",
    "Topic :: Text Processing :: General",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
potato-regex = "potato_regex.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["potato_regex"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
