[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "krok"
version = "0.1.0"
description = "Window-independent pieces of a small 2D game engine: colours, animations, resource caches, render layers, colliders, swept collision tests, input state and a physics scene."
requires-python = ">=3.10"
dependencies = []
keywords = ["game engine", "2d", "physics", "collision", "animation", "sprite sheet"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Typing :: Typed",
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["krok"]

[tool.pytest.ini_options]
addopts = "-ra"
