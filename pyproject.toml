[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "qcircsim"
version = "0.1.0"
description = "A small state-vector quantum circuit simulator driven by plain-text input files"
requires-python = ">=3.10"
dependencies = []
keywords = ["quantum", "circuit", "simulator", "qubit", "state vector"]
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
    "Topic :: Scientific/Engineering :: Quantum Computing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
qcircsim = "qcircsim.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["qcircsim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
