"""Syntax tree, semantic checking and LLVM IR text generation for a small integer language."""

__version__ = "0.1.0"