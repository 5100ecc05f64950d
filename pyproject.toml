[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tinkerworks"
version = "0.1.0"
description = "Three small tools: BLAS-style linear algebra in plain Python, a snake game, and a tiny in-memory JSON posts service."
requires-python = ">=3.10"
keywords = ["blas", "linear-algebra", "matrix", "vector", "snake", "game", "flask", "json-api"]
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
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Games/Entertainment :: Arcade",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
]
dependencies = [
    "pygame",
    "flask",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
tinkerworks-snake = "tinkerworks.snake_app:main"
tinkerworks-webapi = "tinkerworks.webapi:main"

[tool.hatch.build.targets.wheel]
packages = ["tinkerworks"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
