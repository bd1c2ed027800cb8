[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "meritkit"
version = "0.1.0"
description = "Climate data, demand profiles and demand scenarios for energy supply and demand matching"
requires-python = ">=3.10"
dependencies = []
keywords = ["energy", "demand", "climate", "weather", "profiles", "scenarios", "sqlite"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["meritkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
