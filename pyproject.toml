[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "voxelkit"
version = "0.1.0"
description = "Voxel world building blocks: seeded Perlin terrain, chunk streaming, face-culled chunk meshes, camera matrices and bitmap text layout."
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["voxel", "perlin", "noise", "chunk", "mesh", "terrain", "game"]
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
    "Topic :: Games/Entertainment :: Simulation",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["voxelkit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
