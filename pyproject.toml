[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zombieshooter"
version = "0.1.0"
description = "A top-down zombie shooter with animated sprites, several weapons and swarming zombies"
requires-python = ">=3.10"
keywords = ["game", "shooter", "zombies", "top-down", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
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
zombieshooter = "zombieshooter.game:main"

[tool.hatch.build.targets.wheel]
packages = ["zombieshooter"]

[tool.pytest.ini_options]
addopts = "-ra"
