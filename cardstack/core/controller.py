"""Card stack session controller.

The controller owns one scroll session: the current layout constants, the
segment table, the last known scroll offset and the carried inner content
offsets. It is driven by the host's scroll, resize and navigation events and
returns a LayoutFrame for the renderer to apply.

Example:
    controller = CardStackController(config, provider, surface)
    frame = controller.relayout(container_extent=400)
    frame = controller.on_scroll(136)
    controller.next_card()  # asks the surface to scroll to the next card
"""

from enum import Enum

from cardstack.core.geometry import (
    LayoutConstants,
    StackConfig,
    measure,
    resolve_extents,
)
from cardstack.core.layout import LayoutFrame, interpret
from cardstack.core.logging import get_logger
from cardstack.core.navigation import (
    settled_active_index,
    step_target,
    target_offset_for,
)
from cardstack.core.segments import SegmentTable, build_segments
from cardstack.ports.surfaces import ContentExtentProvider, ScrollSurface

logger = get_logger(__name__)


class ResizePolicy(Enum):
    """What happens to the scroll offset when the segment table is rebuilt."""

    # Keep the raw offset; the visible card may change after a resize
    PRESERVE_OFFSET = "preserve_offset"
    # Move to the new target offset of the card that was settled before
    REANCHOR_SETTLED = "reanchor_settled"


class CardStackController:
    """Connects the layout functions to a host's extent provider and surface."""

    def __init__(
        self,
        config: StackConfig,
        extent_provider: ContentExtentProvider,
        surface: ScrollSurface | None = None,
        resize_policy: ResizePolicy = ResizePolicy.PRESERVE_OFFSET,
    ) -> None:
        """Initialize the controller.

        Args:
            config: Stack configuration from configure().
            extent_provider: Source of each card's content extent.
            surface: Scroll surface to size and navigate. Optional for
                hosts that only need frames.
            resize_policy: Offset handling when the layout is rebuilt.
        """
        self._config = config
        self._extent_provider = extent_provider
        self._surface = surface
        self._resize_policy = resize_policy
        self._constants: LayoutConstants | None = None
        self._table: SegmentTable | None = None
        self._container_extent: float = 0
        self._offset: float = 0
        self._inner_offsets: dict[int, float] = {}

    @property
    def constants(self) -> LayoutConstants:
        if self._constants is None:
            raise RuntimeError("relayout() must be called before using the stack")
        return self._constants

    @property
    def table(self) -> SegmentTable:
        if self._table is None:
            raise RuntimeError("relayout() must be called before using the stack")
        return self._table

    @property
    def offset(self) -> float:
        return self._offset

    @property
    def card_count(self) -> int:
        return self._config.card_count

    def relayout(self, container_extent: float) -> LayoutFrame:
        """Re-measure the container, rebuild segments and re-interpret.

        Call once after the host's first layout pass and again on every
        container resize.

        Args:
            container_extent: Current size of the stack container.

        Returns:
            The frame for the current offset under the new layout.
        """
        self._container_extent = container_extent
        return self._rebuild()

    def refresh_content(self) -> LayoutFrame:
        """Rebuild after card content changed size, keeping the container.

        Raises:
            RuntimeError: If relayout() has not measured the container yet.
        """
        if self._constants is None:
            raise RuntimeError("relayout() must be called before using the stack")
        return self._rebuild()

    def on_scroll(self, offset: float) -> LayoutFrame:
        """Interpret a new scroll offset reported by the surface."""
        self._offset = max(0, offset)
        return self._interpret()

    def active_card(self) -> int:
        """Return the settled active card for the current offset."""
        return settled_active_index(self._offset, self.table)

    def scroll_to_card(self, index: int, smooth: bool = True) -> float:
        """Ask the surface to scroll to the offset where ``index`` is open.

        Out-of-range indices are ignored and the current offset is returned.

        Args:
            index: Card to open.
            smooth: Whether the surface should animate the move.

        Returns:
            The requested target offset.
        """
        if not 0 <= index < self.card_count:
            logger.warning(
                "card_index_ignored", index=index, card_count=self.card_count
            )
            return self._offset

        target = target_offset_for(index, self.table)
        if self._surface is not None:
            self._surface.scroll_to(target, smooth=smooth)
        return target

    def next_card(self) -> float:
        """Navigate one card forward from the settled card."""
        return self.scroll_to_card(
            step_target(self._offset, self.table, 1, self.card_count)
        )

    def previous_card(self) -> float:
        """Navigate one card back from the settled card."""
        return self.scroll_to_card(
            step_target(self._offset, self.table, -1, self.card_count)
        )

    def _rebuild(self) -> LayoutFrame:
        previous_table = self._table
        constants = measure(self._config, self._container_extent)
        extents = resolve_extents(self._extent_provider, self.card_count)
        table = build_segments(constants, extents)

        self._constants = constants
        self._table = table
        # Content that shrank can no longer be scrolled as far
        self._inner_offsets = {
            i: min(inner, table.scrollable[i])
            for i, inner in self._inner_offsets.items()
        }

        if self._surface is not None:
            self._surface.set_content_length(table.total_length)

        logger.info(
            "stack_relayout",
            container_extent=self._container_extent,
            segments=len(table),
            total_length=table.total_length,
        )

        if (
            self._resize_policy is ResizePolicy.REANCHOR_SETTLED
            and previous_table is not None
        ):
            settled = settled_active_index(self._offset, previous_table)
            target = target_offset_for(settled, table)
            if target != self._offset:
                logger.info(
                    "offset_reanchored",
                    card=settled,
                    old_offset=self._offset,
                    new_offset=target,
                )
                self._offset = target
                if self._surface is not None:
                    self._surface.scroll_to(target, smooth=False)

        return self._interpret()

    def _interpret(self) -> LayoutFrame:
        frame = interpret(self._offset, self.table, self.constants, self._inner_offsets)
        self._inner_offsets = frame.inner_offsets
        return frame
