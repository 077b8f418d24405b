[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "parallel"
version = "0.1.0"
description = "Run functions concurrently in queues and child groups, collecting their results into slots."
requires-python = ">=3.10"
keywords = ["parallel", "concurrency", "threads", "task queue", "fan-out"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
parallel-demo = "parallel.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["parallel"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
