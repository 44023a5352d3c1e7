[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "miniblog"
version = "0.1.0"
description = "An in-memory blog post store, service rules and JSON request handlers"
requires-python = ">=3.10"
dependencies = []
keywords = ["blog", "json", "api", "in-memory", "handlers"]
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
    "Topic :: Internet :: WWW/HTTP :: WSGI :: Application",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["miniblog"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
