"""Runnable low-level design examples built from plain Python classes."""

__version__ = "0.1.0"