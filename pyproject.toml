[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "quadtree32"
version = "0.5.0"
description = "Dependency-free, ID-based quadtree for points and rectangles, with DBSCAN clustering"
requires-python = ">=3.10"
dependencies = []
keywords = ["tree", "algorithms", "spatial", "quadtree", "dbscan", "clustering"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["quadtree32"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
