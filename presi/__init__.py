"""Presentation content parsing and projection service."""

__version__ = "1.0.0"
