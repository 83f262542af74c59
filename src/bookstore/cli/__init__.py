"""Command-line interface for the catalog service."""

from .main import app

__all__ = ["app"]
