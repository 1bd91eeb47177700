[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "signalsim"
version = "0.1.0"
description = "Composable signal generators, a PID controller and SISO block composites with an interactive terminal interface"
requires-python = ">=3.10"
dependencies = []
keywords = ["signal", "generator", "pid", "control", "simulation", "siso"]
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
    "Topic :: Scientific/Engineering",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
signalsim = "signalsim.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["signalsim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
