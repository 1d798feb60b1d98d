[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fungus"
version = "0.1.0"
description = "Everyday helpers for files, permissions, tarballs, strings and system information."
requires-python = ">=3.10"
dependencies = []
keywords = ["files", "chmod", "chown", "tar", "gzip", "utilities"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["fungus"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
