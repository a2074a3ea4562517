[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "voxelchunk"
version = "0.1.0"
description = "Marching-cubes mesh generation for chunks of a noise-driven voxel terrain"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "marching-cubes",
    "voxel",
    "terrain",
    "isosurface",
    "mesh",
    "chunk",
    "procedural-generation",
]
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
    "Topic :: Multimedia :: Graphics :: 3D Modeling",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["voxelchunk"]

[tool.hatch.build.targets.sdist]
include = ["voxelchunk", "tests"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
