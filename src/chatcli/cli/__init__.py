"""Command-line entry point."""

from .app import main

__all__ = ["main"]
