"""Licence compliance checking for project directories."""

__version__ = "0.1.0"
