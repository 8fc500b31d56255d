[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dfengine"
version = "0.1.0"
description = "Core building blocks of a small game engine: singletons, named events, input state, transforms, timers, colours and render callbacks."
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["game engine", "events", "input", "transform", "singleton", "timer"]
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
    "Topic :: Software Development :: Libraries :: Application Frameworks",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["dfengine"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
