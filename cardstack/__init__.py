"""Scroll-driven layout engine for stacked card interfaces."""

__version__ = "1.0.0"
