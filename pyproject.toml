[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "terra_media"
version = "1.0.0"
description = "A small text adventure: carry the ring across Middle-earth to Mount Doom."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "text-adventure", "rpg", "terminal"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Portuguese (Brazilian)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
terra-media = "terra_media.game:main"

[tool.hatch.build.targets.wheel]
packages = ["terra_media"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
