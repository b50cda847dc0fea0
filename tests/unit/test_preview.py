"""Tests for the preview entry point."""

from unittest.mock import patch

import pytest

import main
from cardstack.core.errors import ConfigurationError, ErrorCategory


class TestParseExtents:
    """Tests for parse_extents function."""

    def test_empty_means_no_overflow(self) -> None:
        assert main.parse_extents(None, 3) == [0.0, 0.0, 0.0]
        assert main.parse_extents("", 2) == [0.0, 0.0]

    def test_pads_missing_cards(self) -> None:
        assert main.parse_extents("100, 200", 3) == [100.0, 200.0, 0.0]

    def test_rejects_non_numbers(self) -> None:
        with pytest.raises(ConfigurationError):
            main.parse_extents("100,tall", 3)

    def test_rejects_too_many_entries(self) -> None:
        with pytest.raises(ConfigurationError):
            main.parse_extents("1,2,3,4", 3)


class TestMain:
    """Tests for the scroll sweep."""

    @pytest.mark.parametrize("step", ["0", "-25"])
    def test_rejects_non_positive_sweep_step(self, step) -> None:
        with patch.dict("os.environ", {"CARDSTACK_SWEEP_STEP": step}):
            with pytest.raises(ConfigurationError) as exc_info:
                main.main()
        assert exc_info.value.category == ErrorCategory.INVALID_INPUT

    @pytest.mark.parametrize(
        "name", ["CARDSTACK_CARD_COUNT", "CARDSTACK_CONTAINER_EXTENT", "CARDSTACK_SWEEP_STEP"]
    )
    def test_non_numeric_settings_are_configuration_errors(self, name) -> None:
        with patch.dict("os.environ", {name: "lots"}):
            with pytest.raises(ConfigurationError) as exc_info:
                main.main()
        assert exc_info.value.category == ErrorCategory.CONFIGURATION
        assert isinstance(exc_info.value.original_error, ValueError)

    def test_logs_sweep_and_targets(self) -> None:
        env = {
            "CARDSTACK_CARD_COUNT": "3",
            "CARDSTACK_CONTAINER_EXTENT": "400",
            "CARDSTACK_CARD_EXTENTS": "400,500,0",
            "CARDSTACK_SWEEP_STEP": "100",
        }
        with patch.dict("os.environ", env), patch.object(main, "logger") as mock_logger:
            main.main()

        events = [call.args[0] for call in mock_logger.info.call_args_list]
        # relayout frame, offsets 0..1000, then one target per card
        assert events.count("frame") == 1 + 11
        assert events.count("card_target") == 3
