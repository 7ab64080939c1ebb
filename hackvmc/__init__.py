"""Translator from Hack stack-machine push and pop commands to Hack assembly."""

__version__ = "0.1.0"
__all__ = ["cli", "codegen", "segments"]