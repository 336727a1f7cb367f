"""Anvil: detect project tooling and generate agent configuration."""

__version__ = "0.1.0"
