[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cubkit"
version = "0.1.0"
description = "XPM texture loading, X11 colour names, buffered line reading and small text helpers for a raycasting game"
requires-python = ">=3.10"
dependencies = []
keywords = ["xpm", "textures", "raycasting", "colors", "parsing", "text"]
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
    "Topic :: Multimedia :: Graphics",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cubkit"]

[tool.hatch.build.targets.sdist]
include = ["cubkit", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
