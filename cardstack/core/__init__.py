"""Core layout logic.

This module contains the platform-agnostic geometry, segment, layout and
navigation functions, plus the session controller that drives them.
"""

from cardstack.core.controller import CardStackController, ResizePolicy
from cardstack.core.errors import CardStackError, ConfigurationError, ErrorCategory
from cardstack.core.geometry import (
    LayoutConstants,
    StackConfig,
    configure,
    configure_from_env,
    content_scrollable,
    measure,
    resolve_extents,
)
from cardstack.core.layout import (
    CardLayout,
    CardPlacement,
    LayoutFrame,
    LayoutState,
    interpret,
    pinned_position,
)
from cardstack.core.logging import (
    bind_contextvars,
    clear_contextvars,
    configure_logging,
    get_logger,
    unbind_contextvars,
)
from cardstack.core.navigation import (
    settled_active_index,
    step_target,
    target_offset_for,
)
from cardstack.core.segments import (
    ContentSegment,
    Segment,
    SegmentTable,
    TransitionSegment,
    build_segments,
)

__all__ = [
    # Controller
    "CardStackController",
    "ResizePolicy",
    # Errors
    "CardStackError",
    "ConfigurationError",
    "ErrorCategory",
    # Geometry
    "LayoutConstants",
    "StackConfig",
    "configure",
    "configure_from_env",
    "content_scrollable",
    "measure",
    "resolve_extents",
    # Layout
    "CardLayout",
    "CardPlacement",
    "LayoutFrame",
    "LayoutState",
    "interpret",
    "pinned_position",
    # Logging
    "bind_contextvars",
    "clear_contextvars",
    "configure_logging",
    "get_logger",
    "unbind_contextvars",
    # Navigation
    "settled_active_index",
    "step_target",
    "target_offset_for",
    # Segments
    "ContentSegment",
    "Segment",
    "SegmentTable",
    "TransitionSegment",
    "build_segments",
]
