"""Entry point for previewing a card stack layout.

Builds a stack from environment configuration, sweeps the scroll offset from
0 past the end of the scrollable range and logs every frame. Useful for
checking a tab size / overlap combination against a container size before
wiring the engine into a UI.

Usage:
    CARDSTACK_CARD_COUNT=4 CARDSTACK_CONTAINER_EXTENT=480 \
    CARDSTACK_CARD_EXTENTS=0,900,120,600 python main.py
"""

import os

from cardstack.adapters import MemoryScrollSurface, StaticExtentProvider
from cardstack.core.controller import CardStackController
from cardstack.core.errors import ConfigurationError, ErrorCategory
from cardstack.core.geometry import configure_from_env
from cardstack.core.layout import LayoutFrame
from cardstack.core.logging import (
    bind_contextvars,
    clear_contextvars,
    configure_logging,
    get_logger,
)

# Configure structured logging (reads ENVIRONMENT and LOG_LEVEL from env)
configure_logging()

logger = get_logger(__name__)


def parse_extents(raw: str | None, card_count: int) -> list[float]:
    """Parse a comma separated list of content extents.

    Missing entries are treated as 0 (content that never overflows).

    Raises:
        ConfigurationError: If an entry is not a number or there are more
            entries than cards.
    """
    if not raw:
        return [0.0] * card_count
    try:
        extents = [float(part) for part in raw.split(",") if part.strip()]
    except ValueError as ex:
        raise ConfigurationError.from_exception(ex, ErrorCategory.CONFIGURATION) from ex
    if len(extents) > card_count:
        raise ConfigurationError(
            f"{len(extents)} content extents given for {card_count} cards",
            ErrorCategory.CONFIGURATION,
        )
    return extents + [0.0] * (card_count - len(extents))


def log_frame(frame: LayoutFrame) -> None:
    logger.info(
        "frame",
        offset=frame.offset,
        state=frame.state.value,
        active=frame.active_index,
        cards=[
            (card.index, round(card.position, 1), round(card.size, 1), card.z_order)
            for card in frame.cards
        ],
        inner=frame.inner_offset_updates,
    )


def main() -> None:
    """Build the stack described by the environment and log a scroll sweep."""
    try:
        card_count = int(os.getenv("CARDSTACK_CARD_COUNT", "3"))
        container_extent = float(os.getenv("CARDSTACK_CONTAINER_EXTENT", "400"))
        sweep_step = float(os.getenv("CARDSTACK_SWEEP_STEP", "68"))
    except ValueError as ex:
        raise ConfigurationError.from_exception(ex, ErrorCategory.CONFIGURATION) from ex

    if sweep_step <= 0:
        raise ConfigurationError(
            f"CARDSTACK_SWEEP_STEP must be positive, got {sweep_step}",
            ErrorCategory.INVALID_INPUT,
        )

    config = configure_from_env(card_count)
    provider = StaticExtentProvider(
        parse_extents(os.getenv("CARDSTACK_CARD_EXTENTS"), card_count)
    )
    surface = MemoryScrollSurface()
    controller = CardStackController(config, provider, surface)

    bind_contextvars(stack_id=os.getenv("CARDSTACK_STACK_ID", "preview"))
    try:
        log_frame(controller.relayout(container_extent))

        offset = 0.0
        while offset <= surface.content_length + sweep_step:
            log_frame(controller.on_scroll(offset))
            offset += sweep_step

        for index in range(card_count):
            logger.info(
                "card_target",
                card=index,
                offset=controller.scroll_to_card(index, smooth=False),
            )
    finally:
        clear_contextvars()


if __name__ == "__main__":
    main()
