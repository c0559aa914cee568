[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "newstdlib"
version = "0.1.0"
description = "Small utility toolkit: a double-precision 3D vector, integer maths helpers, a string type, an object pool, a mutex and message-passing threads"
requires-python = ">=3.10"
dependencies = []
keywords = ["vector", "maths", "threading", "mutex", "pool", "string", "utilities"]
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
packages = ["newstdlib"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
