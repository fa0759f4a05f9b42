[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pixeltint"
version = "0.1.0"
description = "Apply desaturation, sepia and inversion filters to images and pick pixel colours"
requires-python = ">=3.10"
keywords = ["image", "filter", "sepia", "desaturation", "inversion", "color-picker"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Editors :: Raster-Based",
]
dependencies = [
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
pixeltint = "pixeltint.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["pixeltint"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
