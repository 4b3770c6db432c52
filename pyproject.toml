[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sandbox3d"
version = "0.1.0"
description = "Small building blocks for a 3D engine: fixed-size matrices, entity ids, an entity-component store, delegates, rigid-body physics, procedural meshes, buffer flags and descriptor layouts"
requires-python = ">=3.10"
dependencies = []
keywords = ["3d", "ecs", "physics", "collision", "mesh", "matrix", "delegate", "descriptor"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Topic :: Games/Entertainment :: Simulation",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["sandbox3d"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
