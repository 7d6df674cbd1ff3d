[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "excitable-net"
version = "0.1.0"
description = "Cellular-automaton simulation of excitable neural networks on lattice, small-world and random topologies"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "neural network",
    "cellular automaton",
    "excitable media",
    "small-world",
    "simulation",
    "neuroscience",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Life",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["excitable_net"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
