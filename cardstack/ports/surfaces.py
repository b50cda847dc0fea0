"""Capability protocols for the environment around the layout engine.

The engine never touches a rendering technology directly. It reads card
content sizes through a ContentExtentProvider and publishes scroll lengths
and navigation targets through a ScrollSurface. Implementations may wrap a
browser DOM, a terminal UI, a Qt widget, or plain in-memory values.
"""

from typing import Protocol


class ContentExtentProvider(Protocol):
    """Source of each card's intrinsic content size.

    The engine calls this whenever it rebuilds its segment table (on resize
    or when content changes), never during scroll interpretation.
    """

    def intrinsic_extent(self, index: int) -> float:
        """Return the full size of card ``index``'s scrollable content.

        Args:
            index: Card index in ``0..N-1``.

        Returns:
            The content extent, in the same unit as the container extent.
        """
        ...


class ScrollSurface(Protocol):
    """The external scroll container that drives the stack."""

    def set_content_length(self, length: float) -> None:
        """Resize the scrollable area to exactly ``length``.

        Args:
            length: Total scroll length reported by the segment table.
        """
        ...

    def scroll_to(self, offset: float, smooth: bool = True) -> None:
        """Move the scroll position to ``offset``.

        Any animation is the surface's responsibility. The surface reports
        the resulting offsets back through its normal scroll notifications.

        Args:
            offset: Target scroll offset.
            smooth: Whether the surface should animate the move.
        """
        ...
