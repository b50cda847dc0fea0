"""In-memory implementations of the surface protocols.

This module provides list-backed implementations of ContentExtentProvider and
ScrollSurface. They are used by the preview entry point and by tests: fast,
deterministic, and free of any rendering toolkit.
"""

from collections.abc import Sequence


class StaticExtentProvider:
    """ContentExtentProvider backed by a list of content sizes.

    Example:
        provider = StaticExtentProvider([120, 900, 40])
        provider.intrinsic_extent(1)  # 900
        provider.set_extent(1, 300)   # simulate content shrinking
    """

    def __init__(self, extents: Sequence[float]) -> None:
        self._extents = list(extents)
        self.call_count = 0

    def intrinsic_extent(self, index: int) -> float:
        self.call_count += 1
        return self._extents[index]

    def set_extent(self, index: int, extent: float) -> None:
        """Change one card's content size."""
        self._extents[index] = extent


class MemoryScrollSurface:
    """ScrollSurface that records what the engine asks of it.

    Scrolling is applied immediately and clamped to ``[0, content_length]``;
    there is no animation.

    Attributes:
        content_length: Last length published by the engine.
        offset: Current scroll offset.
        history: Every scroll_to request as ``(offset, smooth)``.
    """

    def __init__(self, offset: float = 0) -> None:
        self.content_length: float = 0
        self.offset: float = offset
        self.history: list[tuple[float, bool]] = []

    def set_content_length(self, length: float) -> None:
        self.content_length = length

    def scroll_to(self, offset: float, smooth: bool = True) -> None:
        self.history.append((offset, smooth))
        self.offset = min(max(0, offset), self.content_length)
