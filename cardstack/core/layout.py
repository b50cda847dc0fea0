"""Scroll offset to card layout interpretation.

Given a scroll offset and the segment table, interpret() reconstructs the
position, size, paint order and inner content offset of every card. Nothing
is stored between calls except the inner content offsets of cards that are
not currently driven by the scroll; those are passed in and returned
explicitly.

States:
    NO_SEGMENT: offset at or past the end; the last card is open with its
        content fully scrolled.
    IN_CONTENT: one card is open and its content follows the offset 1:1.
    IN_TRANSITION: the ``from`` card collapses while the ``to`` card slides
        up from its resting position below and expands.

Example:
    frame = interpret(136, table, constants)
    frame.cards[0].size      # 192
    frame.cards[1].position  # 172
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum

from cardstack.core.geometry import LayoutConstants
from cardstack.core.segments import ContentSegment, Segment, SegmentTable


class LayoutState(Enum):
    """Which kind of segment owns the current offset."""

    NO_SEGMENT = "no_segment"
    IN_CONTENT = "in_content"
    IN_TRANSITION = "in_transition"


@dataclass(frozen=True)
class CardPlacement:
    """Position and size of a card along the stack axis."""

    position: float
    size: float


@dataclass(frozen=True)
class CardLayout:
    """Everything the rendering layer needs to draw one card.

    Attributes:
        index: Card index.
        position: Offset of the card's leading edge within the container.
        size: Extent of the card along the stack axis.
        z_order: Paint order; always ``index + 1``.
        inner_offset: Scroll offset of the card's own content.
    """

    index: int
    position: float
    size: float
    z_order: int
    inner_offset: float = 0


@dataclass(frozen=True)
class LayoutFrame:
    """The full visual state of the stack at one scroll offset.

    Attributes:
        offset: The (clamped) offset that was interpreted.
        state: Which kind of segment owns the offset.
        active_index: The card treated as open. During a transition this is
            the card being collapsed; it stays active until the transition
            completes.
        segment: The owning segment, or None in the terminal state.
        cards: Layout of every card, by index.
        inner_offset_updates: Inner content offsets the renderer must apply
            for this frame. Cards absent here keep their current offset.
        inner_offsets: Inner content offset of every card after this frame;
            pass it to the next interpret() call.
    """

    offset: float
    state: LayoutState
    active_index: int
    segment: Segment | None
    cards: tuple[CardLayout, ...]
    inner_offset_updates: dict[int, float] = field(default_factory=dict)
    inner_offsets: dict[int, float] = field(default_factory=dict)

    def inner_offset(self, index: int) -> float:
        return self.inner_offsets.get(index, 0)


def below_position(index: int, constants: LayoutConstants) -> float:
    """Resting position of a collapsed card below the open card."""
    return (
        constants.container_extent
        - constants.overlap
        - (constants.card_count - index) * constants.net_step
    )


def pinned_position(
    index: int, active_index: int, constants: LayoutConstants
) -> CardPlacement:
    """Return the resting placement of a card for a given open card.

    Cards above the open card stack their tabs from the leading edge, cards
    below it stack their tabs against the far edge.
    """
    if index < active_index:
        return CardPlacement(index * constants.net_step, constants.tab_size)
    if index == active_index:
        return CardPlacement(active_index * constants.net_step, constants.open_extent)
    return CardPlacement(below_position(index, constants), constants.tab_size)


def _pinned_cards(
    active_index: int, constants: LayoutConstants, inner_offsets: Mapping[int, float]
) -> tuple[CardLayout, ...]:
    cards = []
    for i in range(constants.card_count):
        placement = pinned_position(i, active_index, constants)
        cards.append(
            CardLayout(
                index=i,
                position=placement.position,
                size=placement.size,
                z_order=i + 1,
                inner_offset=inner_offsets.get(i, 0),
            )
        )
    return tuple(cards)


def interpret(
    offset: float,
    table: SegmentTable,
    constants: LayoutConstants,
    inner_offsets: Mapping[int, float] | None = None,
) -> LayoutFrame:
    """Compute the layout of every card at a scroll offset.

    Args:
        offset: Raw scroll offset. Negative values are treated as 0.
        table: Segment table built for ``constants``.
        constants: Current layout constants.
        inner_offsets: Inner content offsets carried over from the previous
            frame. Only cards not driven by this offset keep these values.

    Returns:
        The LayoutFrame for ``offset``.
    """
    offset = max(0, offset)
    carried = dict(inner_offsets or {})
    n = constants.card_count
    segment = table.find_segment(offset)

    if segment is None:
        last = n - 1
        updates = {last: table.scrollable[last]}
        carried.update(updates)
        return LayoutFrame(
            offset=offset,
            state=LayoutState.NO_SEGMENT,
            active_index=last,
            segment=None,
            cards=_pinned_cards(last, constants, carried),
            inner_offset_updates=updates,
            inner_offsets=carried,
        )

    if isinstance(segment, ContentSegment):
        idx = segment.card_index
        inner = min(max(0, offset - segment.start), table.scrollable[idx])
        updates = {idx: inner}
        carried.update(updates)
        return LayoutFrame(
            offset=offset,
            state=LayoutState.IN_CONTENT,
            active_index=idx,
            segment=segment,
            cards=_pinned_cards(idx, constants, carried),
            inner_offset_updates=updates,
            inner_offsets=carried,
        )

    src, dst = segment.from_index, segment.to_index
    delta = offset - segment.start
    updates = {src: 0, dst: 0}
    carried.update(updates)

    cards = []
    for i in range(n):
        if i == src:
            position = src * constants.net_step
            size = max(constants.tab_size, constants.open_extent - delta)
        elif i == dst:
            position = below_position(dst, constants) - delta
            size = min(constants.open_extent, constants.tab_size + delta)
        else:
            # Cards above src or below dst keep their pinned resting places
            placement = pinned_position(i, src, constants)
            position, size = placement.position, placement.size
        cards.append(
            CardLayout(
                index=i,
                position=position,
                size=size,
                z_order=i + 1,
                inner_offset=carried.get(i, 0),
            )
        )

    return LayoutFrame(
        offset=offset,
        state=LayoutState.IN_TRANSITION,
        active_index=src,
        segment=segment,
        cards=tuple(cards),
        inner_offset_updates=updates,
        inner_offsets=carried,
    )
