[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "layeredconf"
version = "0.1.0"
description = "Layered application configuration from files, environment variables and defaults, with validation."
requires-python = ">=3.10"
dependencies = [
    "pyyaml>=6.0",
]
keywords = ["configuration", "config", "settings", "yaml", "json", "environment", "validation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
]

[tool.hatch.build.targets.wheel]
packages = ["layeredconf"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
