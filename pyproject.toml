[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "servicekit"
version = "1.0.0"
description = "A small HTTP service skeleton with YAML profiles, logging setup, Redis helpers and file/time utilities"
requires-python = ">=3.10"
keywords = ["http", "service", "flask", "yaml", "configuration", "redis"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Web Environment",
    "Framework :: Flask",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
]
dependencies = [
    "pyyaml>=5.1",
    "flask>=2.0",
    "redis>=4.0",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
servicekit = "servicekit.app:main"

[tool.hatch.build.targets.wheel]
packages = ["servicekit"]

[tool.pytest.ini_options]
addopts = "-ra"
