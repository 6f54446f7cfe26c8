[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "victorsdk"
version = "0.1.0"
description = "HTTP client for a Victor vector search server: create indexes, insert, search and delete vectors"
requires-python = ">=3.10"
keywords = ["vector", "search", "index", "similarity", "client", "sdk"]
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
    "Topic :: Database :: Front-Ends",
]
dependencies = [
    "requests>=2.28",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
    "responses>=0.23",
]

[project.scripts]
victorsdk-demo = "victorsdk.usage:main"

[tool.hatch.build.targets.wheel]
packages = ["victorsdk"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
