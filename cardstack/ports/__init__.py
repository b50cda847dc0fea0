"""Ports (interfaces) for the card stack engine.

This module contains Protocol definitions that define the boundary between
the layout core and the rendering layer that hosts it.
"""

from cardstack.ports.surfaces import ContentExtentProvider, ScrollSurface

__all__ = [
    "ContentExtentProvider",
    "ScrollSurface",
]
