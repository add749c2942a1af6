[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mobuild"
version = "0.1.0"
description = "Source layout, download URLs and a threaded downloader for building Mod Organizer's third-party libraries"
requires-python = ">=3.10"
dependencies = []
keywords = ["build", "dependencies", "downloader", "modorganizer", "boost", "openssl", "pyqt"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Build Tools",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["mobuild"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
