[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pbasim"
version = "0.1.0"
description = "Particle-based animation building blocks: 3D vectors and matrices, particle state, neighbour search, plane collisions, forces and explicit integration steps"
requires-python = ">=3.10"
dependencies = []
keywords = ["physics", "simulation", "particles", "collision", "animation", "linear-algebra"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["pbasim"]

[tool.pytest.ini_options]
addopts = "-ra"
