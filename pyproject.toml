[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gf2bits"
version = "2.0.0"
description = "Bit-arrays, bit iterators and linear algebra over GF(2)"
requires-python = ">=3.10"
dependencies = []
keywords = ["bit-array", "bit-vector", "bit-matrix", "linear-algebra", "gf2", "lu-decomposition", "gaussian-elimination"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["gf2bits"]

[tool.pytest.ini_options]
addopts = "-ra"
