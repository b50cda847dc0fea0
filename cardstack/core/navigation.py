"""Mappings between card indices and scroll offsets."""

from cardstack.core.segments import SegmentTable, TransitionSegment


def target_offset_for(index: int, table: SegmentTable) -> float:
    """Return the offset at which card ``index`` has just fully opened.

    This is the end of the transition into the card, which is also where the
    card's own content segment (if any) starts. Card 0, and any index with no
    transition into it, maps to 0.
    """
    for segment in table:
        if isinstance(segment, TransitionSegment) and segment.to_index == index:
            return segment.end
    return 0


def settled_active_index(offset: float, table: SegmentTable) -> int:
    """Return the last card whose transition completed at or before ``offset``.

    Partially completed transitions are ignored, so discrete navigation
    always steps from a fully settled card.
    """
    active = 0
    for segment in table:
        if isinstance(segment, TransitionSegment) and offset >= segment.end:
            active = segment.to_index
    return active


def step_target(offset: float, table: SegmentTable, step: int, card_count: int) -> int:
    """Return the card ``step`` positions away from the settled card.

    The result is clamped to ``[0, card_count - 1]``.
    """
    current = settled_active_index(offset, table)
    return min(max(current + step, 0), card_count - 1)
