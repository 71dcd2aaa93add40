"""Avatar submission and generation handlers."""

import logging
from typing import Any

from ..adapters import split_form_inputs, values_to_request
from ..components import (
    field_error_updates,
    format_countdown,
    format_image_preview,
    format_toast,
    reset_field_updates,
    submit_button_update,
    unchanged_field_updates,
)
from ..controller import SubmissionBlockedError
from ..models import UIState
from ..state import get_controller, initialize_ui_state
from ..validation import ValidationError, validate_avatar_request

logger = logging.getLogger(__name__)


def _status_outputs(state: UIState) -> list[Any]:
    """Button, countdown, preview and toast renders for a state."""
    return [
        submit_button_update(state),
        format_countdown(state.countdown),
        format_image_preview(state),
        format_toast(state.toast),
    ]


def submit_avatar(*values: Any) -> list[Any]:
    """Validate the form and accept a submission.

    On success the form is cleared right away, the button is disabled and
    the cooldown starts; the request itself is sent by
    :func:`generate_avatar`, chained after this handler.

    Args:
        *values: Nine form field values followed by the UI state

    Returns:
        List of (9 field updates, 9 error updates, button update,
        countdown text, preview HTML, toast HTML, updated_state)
    """
    field_values, state = split_form_inputs(list(values))
    state = initialize_ui_state(state)

    try:
        request = validate_avatar_request(values_to_request(*field_values))
        get_controller().begin(state, request)

    except ValidationError as e:
        logger.warning(f"Validation error: {e}")
        return [
            *unchanged_field_updates(),
            *field_error_updates(e.field_errors),
            *_status_outputs(state),
            state,
        ]

    except SubmissionBlockedError as e:
        logger.warning(str(e))
        return [
            *unchanged_field_updates(),
            *field_error_updates({}),
            *_status_outputs(state),
            state,
        ]

    return [
        *reset_field_updates(),
        *field_error_updates({}),
        *_status_outputs(state),
        state,
    ]


def generate_avatar(state: UIState) -> list[Any]:
    """Send the accepted prompt to the inference API.

    Does nothing if the preceding submit was rejected.

    Args:
        state: UI state

    Returns:
        List of (button update, countdown text, preview HTML, toast HTML,
        updated_state)
    """
    state = initialize_ui_state(state)
    controller = get_controller()

    try:
        controller.complete_pending(state)
    except Exception as e:
        # Unexpected error; the session must still leave the loading state
        logger.error(f"Error generating avatar: {e}", exc_info=True)
        controller.fail(state)

    return [*_status_outputs(state), state]
