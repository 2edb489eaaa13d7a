[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gameframe"
version = "0.1.0"
description = "A small level-based game framework with prototypes, layers, components, render groups and a recording software graphics device"
requires-python = ">=3.10"
keywords = ["game", "engine", "framework", "transform", "terrain", "renderer", "prototype"]
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
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: Application Frameworks",
]
dependencies = [
    "numpy",
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
gameframe = "gameframe.client.app:main"

[tool.hatch.build.targets.wheel]
packages = ["gameframe"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
