"""Cooldown timer handler."""

import logging
from typing import Any

from ..components import format_countdown, format_toast, submit_button_update
from ..models import UIState
from ..state import get_controller, initialize_ui_state

logger = logging.getLogger(__name__)


def tick_cooldown(state: UIState) -> tuple[dict[str, Any], str, str, UIState]:
    """Advance the cooldown by one tick.

    Bound to a one-second ``gr.Timer``. Runs independently of the generation
    handler, so the readout keeps counting while a request is in flight.

    Args:
        state: UI state

    Returns:
        Tuple of (button update, countdown text, toast HTML, updated_state)
    """
    state = initialize_ui_state(state)
    get_controller().tick(state)

    return (
        submit_button_update(state),
        format_countdown(state.countdown),
        format_toast(state.toast),
        state,
    )
