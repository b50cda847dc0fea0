"""Stack configuration and derived layout constants.

A stack of N cards overlaps like folder tabs. Each collapsed card shows a tab
of ``tab_size`` and the next card covers ``overlap`` of it, so every collapsed
card advances the stack by ``net_step = tab_size - overlap``. The remaining
room in the container goes to the single open card.

Usage:
    config = configure(tab_size=56, overlap=20, card_count=3)
    constants = measure(config, container_extent=400)
    constants.open_extent          # 328
    constants.transition_distance  # 272
"""

from collections.abc import Sequence
from dataclasses import dataclass
from os import getenv

from cardstack.core.errors import ConfigurationError, ErrorCategory
from cardstack.core.logging import get_logger
from cardstack.ports.surfaces import ContentExtentProvider

logger = get_logger(__name__)

DEFAULT_TAB_SIZE = 56.0
DEFAULT_OVERLAP = 20.0


@dataclass(frozen=True)
class StackConfig:
    """Fixed parameters of a card stack.

    Attributes:
        tab_size: Size of a collapsed card (its visible tab).
        overlap: How much of each tab the following card covers.
        card_count: Number of cards in the stack.
    """

    tab_size: float
    overlap: float
    card_count: int

    @property
    def net_step(self) -> float:
        return self.tab_size - self.overlap


@dataclass(frozen=True)
class LayoutConstants:
    """Geometry derived from a StackConfig and the measured container.

    Attributes:
        tab_size: Size of a collapsed card.
        overlap: Overlap between consecutive tabs.
        card_count: Number of cards in the stack.
        net_step: Space each collapsed card adds to the stack.
        container_extent: Total size of the stack container.
        transition_distance: Scroll distance consumed while one card slides
            over another.
        open_extent: Size of the fully open card.
    """

    tab_size: float
    overlap: float
    card_count: int
    net_step: float
    container_extent: float
    transition_distance: float
    open_extent: float

    @property
    def visible_window(self) -> float:
        """Room left for an open card's content below its own tab."""
        return self.open_extent - self.tab_size

    @property
    def is_degenerate(self) -> bool:
        return self.transition_distance < 0 or self.open_extent < self.tab_size


def configure(
    tab_size: float = DEFAULT_TAB_SIZE,
    overlap: float = DEFAULT_OVERLAP,
    *,
    card_count: int,
) -> StackConfig:
    """Validate and freeze the parameters of a stack.

    Args:
        tab_size: Size of a collapsed card's tab.
        overlap: Amount of each tab covered by the next card.
        card_count: Number of cards; fixed for the lifetime of the stack.

    Returns:
        The immutable stack configuration.

    Raises:
        ConfigurationError: If a parameter can never produce a layout.
    """
    if card_count < 1:
        raise ConfigurationError(
            f"card_count must be at least 1, got {card_count}",
            ErrorCategory.INVALID_INPUT,
        )
    if tab_size <= 0:
        raise ConfigurationError(
            f"tab_size must be positive, got {tab_size}",
            ErrorCategory.INVALID_INPUT,
        )
    if not 0 <= overlap <= tab_size:
        raise ConfigurationError(
            f"overlap must be within [0, {tab_size}], got {overlap}",
            ErrorCategory.INVALID_INPUT,
        )
    return StackConfig(tab_size=tab_size, overlap=overlap, card_count=card_count)


def configure_from_env(card_count: int) -> StackConfig:
    """Build a StackConfig from CARDSTACK_TAB_SIZE and CARDSTACK_OVERLAP.

    Unset variables fall back to the default tab size and overlap.

    Raises:
        ConfigurationError: If a variable is set but not a number, or the
            resulting parameters are invalid.
    """
    raw_tab = getenv("CARDSTACK_TAB_SIZE", str(DEFAULT_TAB_SIZE))
    raw_overlap = getenv("CARDSTACK_OVERLAP", str(DEFAULT_OVERLAP))
    try:
        tab_size = float(raw_tab)
        overlap = float(raw_overlap)
    except ValueError as ex:
        raise ConfigurationError.from_exception(ex, ErrorCategory.CONFIGURATION) from ex
    return configure(tab_size, overlap, card_count=card_count)


def measure(config: StackConfig, container_extent: float) -> LayoutConstants:
    """Derive the layout constants for the current container size.

    Must run before segments are built, and again whenever the container
    resizes. A container too small for its cards yields a negative
    transition distance or an open card smaller than a tab; this is logged
    but not corrected.

    Args:
        config: The stack configuration.
        container_extent: Measured size of the stack container.

    Returns:
        The derived LayoutConstants.
    """
    n = config.card_count
    net_step = config.net_step
    constants = LayoutConstants(
        tab_size=config.tab_size,
        overlap=config.overlap,
        card_count=n,
        net_step=net_step,
        container_extent=container_extent,
        transition_distance=container_extent - config.overlap - n * net_step,
        open_extent=container_extent - (n - 1) * net_step,
    )

    if constants.is_degenerate:
        logger.warning(
            "degenerate_geometry",
            container_extent=container_extent,
            card_count=n,
            transition_distance=constants.transition_distance,
            open_extent=constants.open_extent,
        )
    else:
        logger.debug(
            "geometry_measured",
            container_extent=container_extent,
            transition_distance=constants.transition_distance,
            open_extent=constants.open_extent,
        )
    return constants


def content_scrollable(constants: LayoutConstants, intrinsic_extent: float) -> float:
    """Return how much of a card's content is hidden when the card is open.

    Zero means the content fits inside the open card's visible window.
    """
    return max(0, intrinsic_extent - constants.visible_window)


def resolve_extents(provider: ContentExtentProvider, card_count: int) -> list[float]:
    """Ask the provider for every card's intrinsic content extent, in order."""
    return [provider.intrinsic_extent(i) for i in range(card_count)]


def scrollable_extents(
    constants: LayoutConstants, intrinsic_extents: Sequence[float]
) -> tuple[float, ...]:
    """Apply content_scrollable to every card."""
    return tuple(content_scrollable(constants, extent) for extent in intrinsic_extents)
