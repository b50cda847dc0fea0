"""Tests for the in-memory surface adapters."""

from cardstack.adapters import MemoryScrollSurface, StaticExtentProvider


class TestStaticExtentProvider:
    def test_returns_extents(self) -> None:
        provider = StaticExtentProvider([5, 6])
        assert provider.intrinsic_extent(0) == 5
        assert provider.intrinsic_extent(1) == 6

    def test_set_extent(self) -> None:
        provider = StaticExtentProvider([5, 6])
        provider.set_extent(0, 50)
        assert provider.intrinsic_extent(0) == 50

    def test_copies_input(self) -> None:
        extents = [1, 2]
        provider = StaticExtentProvider(extents)
        provider.set_extent(0, 9)
        assert extents == [1, 2]


class TestMemoryScrollSurface:
    def test_records_requests(self) -> None:
        surface = MemoryScrollSurface()
        surface.set_content_length(300)
        surface.scroll_to(120, smooth=False)
        assert surface.offset == 120
        assert surface.history == [(120, False)]

    def test_clamps_offset(self) -> None:
        surface = MemoryScrollSurface()
        surface.set_content_length(300)
        surface.scroll_to(1000)
        assert surface.offset == 300
        surface.scroll_to(-5)
        assert surface.offset == 0
