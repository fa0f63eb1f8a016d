[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zombiesim"
version = "0.1.0"
description = "A cellular-automaton zombie outbreak simulation on Perlin-noise terrain"
requires-python = ">=3.10"
dependencies = []
keywords = ["cellular automaton", "simulation", "zombies", "perlin noise", "terrain"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
zombiesim = "zombiesim.simulation:main"

[tool.hatch.build.targets.wheel]
packages = ["zombiesim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
