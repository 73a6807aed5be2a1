[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fpitools"
version = "0.1.0"
description = "Basic raster image processing: greyscale, quantization, tone adjustment, histograms, geometry and 3x3 convolution"
requires-python = ">=3.10"
keywords = [
    "image-processing",
    "histogram",
    "equalization",
    "histogram-matching",
    "convolution",
    "quantization",
    "greyscale",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Editors :: Raster-Based",
    "Topic :: Scientific/Engineering :: Image Processing",
]
dependencies = [
    "numpy",
    "pillow",
    "matplotlib",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
fpitools = "fpitools.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["fpitools"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
