[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "objectdi"
version = "0.1.0"
description = "A small dependency injection container with lifetimes, nested containers, factories and injection on construction."
requires-python = ">=3.10"
dependencies = []
keywords = ["dependency injection", "inversion of control", "container", "ioc", "di"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Application Frameworks",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["objectdi"]

[tool.pytest.ini_options]
addopts = "-ra"
