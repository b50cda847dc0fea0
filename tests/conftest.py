"""Shared pytest fixtures for cardstack tests."""

import pytest

from cardstack.adapters import MemoryScrollSurface, StaticExtentProvider
from cardstack.core.controller import CardStackController
from cardstack.core.geometry import LayoutConstants, StackConfig, configure, measure
from cardstack.core.segments import SegmentTable, build_segments

# Three cards, tab 56, overlap 20, in a 400 tall container:
# net_step 36, open_extent 328, transition_distance 272, visible window 272.
CONTAINER_EXTENT = 400

# Card 0 overflows by 128, card 1 by 228, card 2 fits.
OVERFLOW_EXTENTS = [400, 500, 0]


@pytest.fixture
def config() -> StackConfig:
    """Provide the three card configuration used throughout the tests."""
    return configure(tab_size=56, overlap=20, card_count=3)


@pytest.fixture
def constants(config: StackConfig) -> LayoutConstants:
    """Provide layout constants for a 400 tall container."""
    return measure(config, CONTAINER_EXTENT)


@pytest.fixture
def plain_table(constants: LayoutConstants) -> SegmentTable:
    """Provide a table where no card content overflows.

    Segments: Transition(0, 1, 0, 272), Transition(1, 2, 272, 544).
    """
    return build_segments(constants, [0, 0, 0])


@pytest.fixture
def overflow_table(constants: LayoutConstants) -> SegmentTable:
    """Provide a table with content segments.

    Segments: Content(0, 0, 128), Transition(0, 1, 128, 400),
    Content(1, 400, 628), Transition(1, 2, 628, 900).
    """
    return build_segments(constants, OVERFLOW_EXTENTS)


@pytest.fixture
def provider() -> StaticExtentProvider:
    return StaticExtentProvider(OVERFLOW_EXTENTS)


@pytest.fixture
def surface() -> MemoryScrollSurface:
    return MemoryScrollSurface()


@pytest.fixture
def controller(
    config: StackConfig,
    provider: StaticExtentProvider,
    surface: MemoryScrollSurface,
) -> CardStackController:
    """Provide a controller that has already been laid out."""
    controller = CardStackController(config, provider, surface)
    controller.relayout(CONTAINER_EXTENT)
    return controller
