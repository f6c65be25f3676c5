[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "secondbrain"
version = "0.1.0"
description = "A small weekly to-do planner with task lists stored in SQLite and served over the web"
requires-python = ">=3.10"
keywords = ["todo", "tasks", "weekly planner", "sqlite", "flask"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Web Environment",
    "Framework :: Flask",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Scheduling",
]
dependencies = [
    "flask",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
secondbrain = "secondbrain.web:main"

[tool.hatch.build.targets.wheel]
packages = ["secondbrain"]

[tool.pytest.ini_options]
addopts = "-ra"
