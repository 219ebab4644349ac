"""HTTP interface for payoffcurve."""

from .app import create_app

__all__ = ["create_app"]
