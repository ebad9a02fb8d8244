"""Importer for Daily Coding Problem email archives."""

__version__ = "0.1.0"
