[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "linmath"
version = "0.1.0"
description = "Pure-Python linear algebra on nested lists, with matrix decompositions and numerical calculus helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["linear algebra", "matrix", "tensor", "eigenvalues", "numerical analysis", "derivatives"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
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
packages = ["linmath"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
