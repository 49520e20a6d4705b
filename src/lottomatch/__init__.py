"""Parallel lottery pick matcher."""

__version__ = "0.1.0"
