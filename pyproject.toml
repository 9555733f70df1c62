[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "crispsubs"
version = "0.1.0"
description = "Subtitle and sound-caption toolkit: timing, line breaking, direction tracking, layout and styling"
requires-python = ">=3.10"
dependencies = []
keywords = ["subtitles", "captions", "accessibility", "games", "indicators"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Video :: Display",
    "Topic :: Adaptive Technologies",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["crispsubs"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
