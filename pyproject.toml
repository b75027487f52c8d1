[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rvld"
version = "0.1.0"
description = "Linker front end that reads RISC-V 64-bit ELF relocatable object files"
requires-python = ">=3.10"
dependencies = []
keywords = ["linker", "elf", "riscv", "object-file", "toolchain"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
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

[project.scripts]
rvld = "rvld.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["rvld"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
