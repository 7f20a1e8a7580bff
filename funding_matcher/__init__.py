"""Funding program qualification matcher."""

__version__ = "1.0.0"
