[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dispatchkit"
version = "0.1.0"
description = "Dispatch time encoding, object type tags, queue width resolution and timer schedule arithmetic"
requires-python = ">=3.10"
dependencies = []
keywords = ["dispatch", "time", "timer", "queue", "timeout"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dispatchkit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
