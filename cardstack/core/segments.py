"""Partitioning of the scroll coordinate into layout segments.

The whole scrollable distance is split into an ordered, gapless sequence of
segments. Walking the cards in order, each card after the first contributes a
transition segment (the previous card collapses while this one slides open),
followed by a content segment if the open card's content overflows its
visible window.

Example:
    table = build_segments(constants, [0, 500, 0])
    table.total_length           # scroll length to publish to the surface
    table.find_segment(300.0)    # segment that owns offset 300
"""

from bisect import bisect_right
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field

from cardstack.core.geometry import LayoutConstants, scrollable_extents
from cardstack.core.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class TransitionSegment:
    """Offsets over which card ``from_index`` collapses and ``to_index`` opens.

    Attributes:
        from_index: The card that is open when the segment starts.
        to_index: The card that is open when the segment ends
            (always ``from_index + 1``).
        start: First offset of the segment.
        end: First offset past the segment.
    """

    from_index: int
    to_index: int
    start: float
    end: float


@dataclass(frozen=True)
class ContentSegment:
    """Offsets over which an open card scrolls its own content.

    Attributes:
        card_index: The open card.
        start: First offset of the segment; content offset 0.
        end: First offset past the segment.
    """

    card_index: int
    start: float
    end: float


Segment = TransitionSegment | ContentSegment


@dataclass(frozen=True)
class SegmentTable:
    """Ordered, contiguous segments covering ``[0, total_length)``.

    Attributes:
        segments: Segments sorted by ascending start.
        total_length: End of the last segment (0 for a single card with no
            overflowing content).
        scrollable: Hidden content extent of every card, by index.
    """

    segments: tuple[Segment, ...]
    total_length: float
    scrollable: tuple[float, ...]
    _ends: tuple[float, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_ends", tuple(s.end for s in self.segments))

    def __len__(self) -> int:
        return len(self.segments)

    def __iter__(self) -> Iterator[Segment]:
        return iter(self.segments)

    def find_segment(self, offset: float) -> Segment | None:
        """Return the first segment whose end lies beyond ``offset``.

        This is a binary search over segment ends, O(log n). Zero-length
        segments never own an offset. Returns None when ``offset`` is at or
        past ``total_length``.
        """
        position = bisect_right(self._ends, offset)
        if position >= len(self.segments):
            return None
        return self.segments[position]

    def transitions(self) -> list[TransitionSegment]:
        return [s for s in self.segments if isinstance(s, TransitionSegment)]


def build_segments(
    constants: LayoutConstants, intrinsic_extents: Sequence[float]
) -> SegmentTable:
    """Build the segment table for the given geometry and card content.

    Pure and deterministic: identical inputs always yield an identical table.

    Args:
        constants: Layout constants from measure().
        intrinsic_extents: Content extent of every card, by index.

    Returns:
        The SegmentTable; its total_length is the length to publish to the
        scroll surface.

    Raises:
        ValueError: If the number of extents differs from the card count.
    """
    if len(intrinsic_extents) != constants.card_count:
        raise ValueError(
            f"Expected {constants.card_count} content extents, "
            f"got {len(intrinsic_extents)}"
        )

    scrollable = scrollable_extents(constants, intrinsic_extents)
    segments: list[Segment] = []
    pos: float = 0

    for i in range(constants.card_count):
        if i > 0:
            end = pos + constants.transition_distance
            segments.append(TransitionSegment(i - 1, i, pos, end))
            pos = end

        cs = scrollable[i]
        if cs > 0:
            segments.append(ContentSegment(i, pos, pos + cs))
            pos += cs

    logger.debug("segments_built", segments=len(segments), total_length=pos)
    return SegmentTable(segments=tuple(segments), total_length=pos, scrollable=scrollable)
