[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "symposium"
version = "0.1.0"
description = "A dining philosophers simulation with a per-fork-lock table and a shared-fork-pool variant"
requires-python = ">=3.10"
dependencies = []
keywords = ["dining philosophers", "concurrency", "simulation", "threads", "synchronisation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
symposium = "symposium.cli:main"
symposium-shared = "symposium.cli:main_shared"

[tool.hatch.build.targets.wheel]
packages = ["symposium"]

[tool.pytest.ini_options]
addopts = "-ra"
