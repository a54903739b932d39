[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "festkit"
version = "0.3.0"
description = "Read the package catalogue of FEST drug XML files from the Norwegian Medicines Agency"
requires-python = ">=3.10"
dependencies = []
keywords = ["fest", "xml", "pharmacy", "medicines", "legemiddel", "legemiddelpakning"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Healthcare Industry",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Text Processing :: Markup :: XML",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
festkit-generic = "festkit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["festkit"]

[tool.pytest.ini_options]
addopts = "-ra"
