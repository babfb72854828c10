[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "scatsig"
version = "0.1.0"
description = "Gaussian light-scattering signals from opaque particles crossing a laser beam, with console colour helpers"
requires-python = ">=3.10"
keywords = ["scattering", "laser", "particle", "signal", "simulation", "gaussian", "console", "colour"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Physics",
]
dependencies = [
    "numpy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["scatsig"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
