"""Linker front end that reads RISC-V 64-bit ELF relocatable object files."""

__version__ = "0.1.0"