[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dualdiff"
version = "0.1.0"
description = "Forward-mode automatic differentiation with nested dual numbers of any order"
requires-python = ">=3.10"
dependencies = []
keywords = ["automatic differentiation", "dual numbers", "forward mode", "derivatives"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dualdiff"]

[tool.pytest.ini_options]
addopts = "-ra"
