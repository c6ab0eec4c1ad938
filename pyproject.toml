[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "threebody"
version = "0.1.0"
description = "Building blocks for three-body decay amplitudes: Clebsch-Gordan coefficients, lineshapes, recouplings, kinematics and decay trees"
requires-python = ">=3.10"
dependencies = []
keywords = ["physics", "three-body decay", "helicity", "Clebsch-Gordan", "lineshape", "Lorentz boost"]
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

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["threebody"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
