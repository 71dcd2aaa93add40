"""State management utilities for the Avatar Generator UI.

This module handles creation and cleanup of per-session UI state and the
lazily built :class:`~avatargen.ui.controller.SubmissionController` shared
by all sessions.
"""

import logging

from avatargen.core.config import config
from avatargen.core.inference_client import InferenceClient

from .controller import SubmissionController
from .models import UIState

logger = logging.getLogger(__name__)

_controller: SubmissionController | None = None


def get_controller() -> SubmissionController:
    """Return the shared submission controller, creating it on first use.

    The controller carries no session data, only the inference client and
    the cooldown/toast settings from config.

    Returns:
        SubmissionController instance
    """
    global _controller
    if _controller is None:
        logger.info(f"Initializing SubmissionController for {config.inference_url}")
        _controller = SubmissionController(
            InferenceClient(config),
            cooldown_ticks=config.cooldown_seconds,
            toast_duration=config.toast_duration,
        )
    return _controller


def initialize_ui_state(state: UIState | None = None) -> UIState:
    """Initialize or ensure UI state is ready.

    Args:
        state: Existing UIState or None

    Returns:
        UIState instance
    """
    if state is None:
        logger.info("Creating new UIState")
        state = UIState()
    return state


def cleanup_ui_state(state: UIState | None) -> None:
    """Clean up UI state resources.

    Called when a session ends so the generated image bytes are released.

    Args:
        state: UI state to clean up
    """
    if state is None:
        return

    logger.info(f"Cleaning up UIState: {state!r}")
    get_controller().reset(state)
