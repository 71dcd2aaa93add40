"""Unit tests for the cooldown timer handler."""

from unittest.mock import patch

import pytest

from avatargen.ui.handlers.cooldown import tick_cooldown
from avatargen.ui.models import GENERATE_LABEL, SubmissionState


@pytest.fixture(autouse=True)
def use_test_controller(controller):
    """Route handlers to the fixture controller."""
    with patch("avatargen.ui.handlers.cooldown.get_controller", return_value=controller):
        yield


class TestTickCooldown:
    """Tests for tick_cooldown handler."""

    def test_idle_tick(self, ui_state):
        button, countdown, toast, state = tick_cooldown(ui_state)

        assert button["interactive"] is True
        assert button["value"] == GENERATE_LABEL
        assert countdown == ""
        assert toast == ""
        assert state is ui_state

    def test_counts_down(self, ui_state, controller, valid_request):
        controller.submit(ui_state, valid_request)

        _, countdown, _, _ = tick_cooldown(ui_state)

        assert countdown == "19 seconds left"

    def test_reenables_after_twenty_ticks(self, ui_state, controller, valid_request):
        controller.submit(ui_state, valid_request)

        for _ in range(19):
            button, countdown, _, _ = tick_cooldown(ui_state)
            assert button["interactive"] is False

        button, countdown, _, state = tick_cooldown(ui_state)

        assert button["interactive"] is True
        assert countdown == ""
        assert state.submission_state is SubmissionState.IDLE

    def test_hides_toast_after_duration(self, ui_state, controller, fake_clock, valid_request):
        controller.submit(ui_state, valid_request)

        _, _, toast, _ = tick_cooldown(ui_state)
        assert "avatar-toast" in toast

        fake_clock.advance(3.0)
        _, _, toast, _ = tick_cooldown(ui_state)
        assert toast == ""

    def test_none_state_is_initialized(self):
        *_, state = tick_cooldown(None)

        assert state is not None
