[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lambda_calculus"
version = "0.1.0"
description = "A small implementation of the untyped lambda calculus with De Bruijn indices"
requires-python = ">=3.10"
dependencies = []
keywords = ["lambda calculus", "de bruijn", "beta reduction", "parser"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
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

[tool.hatch.build.targets.wheel]
packages = ["lambda_calculus"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
