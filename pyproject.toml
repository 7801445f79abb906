[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "uno_nlp"
version = "0.1.0"
description = "Building blocks for nonlinear optimization: models, iterates, scaling, options, iteration statistics and timing"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "optimization",
    "nonlinear programming",
    "constrained optimization",
    "scaling",
    "slack variables",
    "complementarity",
]
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
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["uno_nlp"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
