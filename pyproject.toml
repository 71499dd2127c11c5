[build-system]
requires = ["setuptools>=61.0"]
build-backend = "setuptools.build_meta"

[project]
name = "rucmeta"
version = "0.1.0"
description = "Catalog metadata, DDL management and transaction bookkeeping for a small relational database engine"
requires-python = ">=3.10"
dependencies = []
keywords = ["database", "catalog", "metadata", "ddl", "transactions", "locking"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database :: Database Engines/Servers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools.packages.find]
include = ["rucmeta*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
