[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "worldgen"
version = "0.1.0"
description = "Building blocks for procedural Earth-like planets: depression filling, rivers, coast distance, temperature and viewer helpers"
requires-python = ">=3.10"
keywords = [
    "procedural generation",
    "planet",
    "terrain",
    "rivers",
    "climate",
    "priority flood",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics",
    "Topic :: Scientific/Engineering :: Visualization",
]
dependencies = [
    "numpy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["worldgen"]

[tool.pytest.ini_options]
addopts = "-ra"
