[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sansrpg"
version = "0.1.0"
description = "A small full-screen role-playing game: farm mobs, buy upgrades, finish the quest and beat the boss."
requires-python = ">=3.10"
keywords = ["game", "rpg", "pygame", "role-playing"]
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
    "Topic :: Games/Entertainment :: Role-Playing",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
sansrpg = "sansrpg.app:main"

[tool.hatch.build.targets.wheel]
packages = ["sansrpg"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
