[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "mic1sim"
version = "0.1.0"
description = "A MIC-1 microarchitecture simulator with a small IJVM-subset compiler"
requires-python = ">=3.10"
dependencies = []
keywords = ["mic-1", "ijvm", "microarchitecture", "simulator", "emulator", "education"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Emulators",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
mic1sim = "mic1sim.cli:main"

[tool.setuptools.packages.find]
include = ["mic1sim*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
