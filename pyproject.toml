[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "patina"
version = "0.1.0"
description = "Triangle-mesh geometry: vectors, primitives, bounding-volume hierarchies, mesh cutting and binary STL output"
requires-python = ">=3.10"
dependencies = []
keywords = ["cad", "mesh", "geometry", "stl", "bvh", "icosphere", "intersection"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Modeling",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
patina-face = "patina.face:main"

[tool.hatch.build.targets.wheel]
packages = ["patina"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
