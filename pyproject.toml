[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "meowengine"
version = "0.1.0"
description = "A small tile-map and menu engine for grey-scale, two-plane screens, with a viewfinder demo game"
requires-python = ">=3.10"
dependencies = []
keywords = ["tile map", "menu", "viewfinder", "sprites", "grey scale", "game engine"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
meowengine = "meowengine.game:main"

[tool.hatch.build.targets.wheel]
packages = ["meowengine"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
