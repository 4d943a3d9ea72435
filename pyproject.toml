[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cliph"
version = "0.1.0"
description = "Parse, simplify, differentiate and plot single-variable mathematical expressions"
requires-python = ">=3.10"
keywords = ["math", "symbolic", "algebra", "derivative", "latex", "plotting", "calculator"]
classifiers = [
    "Development Status :: 3 - Alpha",
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
]
dependencies = [
    "matplotlib",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
cliph = "cliph.app:main"

[tool.hatch.build.targets.wheel]
packages = ["cliph"]

[tool.pytest.ini_options]
addopts = "-ra"
