"""Adapters for external systems.

This module contains implementations of the surface protocols.
"""

from cardstack.adapters.memory import MemoryScrollSurface, StaticExtentProvider

__all__ = [
    "MemoryScrollSurface",
    "StaticExtentProvider",
]
