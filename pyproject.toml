[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "meshkitutils"
version = "0.1.0"
description = "Helpers for Kubernetes manifests, Service endpoints, chart directories and compose files, with structured errors"
requires-python = ">=3.10"
dependencies = [
    "pyyaml",
    "jsonschema",
]
keywords = ["kubernetes", "helm", "docker-compose", "manifests", "errors", "services"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: System :: Systems Administration",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["meshkitutils"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
