[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "hwlab"
version = "0.1.0"
description = "A tiny 16-bit processor emulator plus small operating-systems exercises"
requires-python = ">=3.10"
dependencies = []
keywords = ["emulator", "cpu", "instruction-set", "education", "operating-systems", "threads"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Operating System :: POSIX",
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
hwlab-tpu = "hwlab.machine:main"
hwlab-adt = "hwlab.menu:main"
hwlab-shell = "hwlab.shell:main"
hwlab-counter = "hwlab.counter:main"
hwlab-matmul = "hwlab.matmul:main"
hwlab-memtouch = "hwlab.memtouch:main"
hwlab-stackdepth = "hwlab.stackdepth:main"

[tool.setuptools.packages.find]
include = ["hwlab*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
