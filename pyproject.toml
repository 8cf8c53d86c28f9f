[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "matrixgames"
version = "0.1.0"
description = "Solvers for matrix, bimatrix, continuous, cooperative and influence games"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "game theory",
    "operations research",
    "simplex",
    "brown-robinson",
    "fictitious play",
    "nash equilibrium",
    "pareto",
    "shapley vector",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
matrixgames = "matrixgames.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["matrixgames"]

[tool.pytest.ini_options]
addopts = "-ra"
