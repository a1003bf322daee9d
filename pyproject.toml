[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "partiview"
version = "0.1.0"
description = "Vector and matrix math, particle grid generation and an orbit camera model for particle system viewers"
requires-python = ">=3.10"
dependencies = []
keywords = ["particles", "visualization", "camera", "geometry", "linear-algebra", "quaternion"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Visualization",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["partiview"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
