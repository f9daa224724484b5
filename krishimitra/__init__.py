"""Krishimitra: farming-advisory API."""

__version__ = "0.1.0"
