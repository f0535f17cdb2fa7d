[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "shopfront"
version = "0.1.0"
description = "Product catalogue with SQLite storage and purchase use cases"
requires-python = ">=3.10"
dependencies = [
    "aiosqlite",
]
keywords = ["sqlite", "products", "catalogue", "asyncio", "repository"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Framework :: AsyncIO",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
    "Topic :: Database",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[tool.hatch.build.targets.wheel]
packages = ["shopfront"]

[tool.pytest.ini_options]
addopts = "-ra"
