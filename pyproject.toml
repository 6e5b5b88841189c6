[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vcid_spice"
version = "0.1.0"
description = "Circuit simulator library with an iterative operating-point solver"
requires-python = ">=3.10"
dependencies = []
keywords = ["circuit", "simulation", "spice", "electronics", "operating point"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Electronic Design Automation (EDA)",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
vcid-spice = "vcid_spice.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["vcid_spice"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
