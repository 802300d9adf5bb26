[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "quizmaster"
version = "1.0.0"
description = "A terminal multiple-choice quiz game with five categories and a session ranking"
requires-python = ">=3.10"
dependencies = []
keywords = ["quiz", "game", "trivia", "terminal"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
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
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
quizmaster = "quizmaster.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["quizmaster"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
