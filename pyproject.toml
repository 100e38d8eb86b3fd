[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "multitask"
version = "0.1.0"
description = "Background and frame-sliced tasks, error-diffusion dithering, HTTP fetching and dual marching cubes voxel helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["tasks", "threads", "game loop", "dithering", "http", "voxels", "dual marching cubes", "isosurface"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["multitask"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
