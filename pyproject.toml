[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "favexplorer"
version = "0.1.0"
description = "Favorites tree and directory listing model for a file explorer panel"
requires-python = ">=3.10"
dependencies = []
keywords = ["favorites", "bookmarks", "file-manager", "explorer", "directory-listing"]
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
    "Topic :: Desktop Environment :: File Managers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["favexplorer"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
