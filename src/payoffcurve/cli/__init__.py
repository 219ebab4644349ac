"""Command-line interface for payoffcurve."""

from .commands import main

__all__ = ["main"]
