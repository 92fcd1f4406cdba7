[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chickensaw"
version = "0.1.0"
description = "A small arcade game: a chicken jumps over bouncing sawblades."
requires-python = ">=3.10"
keywords = ["game", "arcade", "pygame", "chicken", "sawblade"]
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
chickensaw = "chickensaw.game:main"

[tool.hatch.build.targets.wheel]
packages = ["chickensaw"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
