[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "langstore"
version = "0.1.0"
description = "Keep records of programming languages and programmers in CSV, XML or SQLite storage"
requires-python = ">=3.10"
dependencies = []
keywords = ["storage", "csv", "xml", "sqlite", "console", "crud"]
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
    "Topic :: Database :: Front-Ends",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
langstore = "langstore.cui:main"

[tool.hatch.build.targets.wheel]
packages = ["langstore"]

[tool.pytest.ini_options]
addopts = "-ra"
