[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rasterkit"
version = "0.1.0"
description = "Image processing on NumPy arrays: binary morphology, non-maximum suppression, pixel blending and small geometry helpers."
requires-python = ">=3.10"
dependencies = ["numpy"]
keywords = ["image", "image-processing", "morphology", "dilation", "erosion", "non-maximum-suppression", "union-find", "numpy"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Image Processing",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["rasterkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
