[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "scopeasteroids"
version = "0.1.0"
description = "Vector Asteroids game that draws on an oscilloscope through the sound card, or in a window"
requires-python = ">=3.10"
keywords = ["asteroids", "oscilloscope", "vector graphics", "game", "xy mode"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
scopeasteroids = "scopeasteroids.app:main"

[tool.hatch.build.targets.wheel]
packages = ["scopeasteroids"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
