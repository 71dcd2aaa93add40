"""Submission lifecycle for the avatar form.

:class:`SubmissionController` owns every transition of a session's
:class:`~avatargen.ui.models.UIState`::

    IDLE --begin--> SUBMITTING --success--> COOLING_DOWN --countdown 0--> IDLE
                               --failure--> ERROR        --countdown 0--> IDLE

The cooldown countdown starts when a submission is accepted and advances one
step per :meth:`SubmissionController.tick`, independent of how long the
inference request takes. If the countdown runs out while the request is still
in flight, the state settles straight to IDLE when the request finishes.

The submit button is enabled only when no request is loading and the
countdown is 0, so a session never has more than one request in flight.
"""

import logging
import time
from collections.abc import Callable

from avatargen.core.inference_client import GenerationError, InferenceClient
from avatargen.core.prompt_builder import build_avatar_prompt

from .models import (
    FAILURE_MESSAGE,
    SUCCESS_MESSAGE,
    AvatarRequest,
    GeneratedImage,
    SubmissionState,
    ToastKind,
    UIState,
)

logger = logging.getLogger(__name__)


class SubmissionBlockedError(Exception):
    """A submission was attempted while one is loading or cooling down."""


class SubmissionController:
    """Drives the request lifecycle for one or more sessions.

    The controller holds no session data itself; every method takes the
    session's UIState, so one controller can serve all sessions.
    """

    def __init__(
        self,
        client: InferenceClient,
        cooldown_ticks: int = 20,
        toast_duration: float = 3.0,
        clock: Callable[[], float] = time.monotonic,
    ):
        """Initialize the controller.

        Args:
            client: Client used to call the inference API
            cooldown_ticks: Number of ticks the submit button stays disabled
            toast_duration: Seconds a toast stays visible
            clock: Monotonic time source (tests pass a fake)
        """
        self.client = client
        self.cooldown_ticks = cooldown_ticks
        self.toast_duration = toast_duration
        self.clock = clock

    def can_submit(self, state: UIState) -> bool:
        """Check whether a new submission may start."""
        return state.submit_enabled

    def begin(self, state: UIState, request: AvatarRequest) -> str:
        """Accept a validated request and move the session to SUBMITTING.

        Args:
            state: Session state
            request: Validated avatar request

        Returns:
            The prompt to send

        Raises:
            SubmissionBlockedError: If a request is loading or the cooldown is running
        """
        if not self.can_submit(state):
            raise SubmissionBlockedError(
                f"Submission blocked (loading={state.loading}, countdown={state.countdown})"
            )

        state.submission_state = SubmissionState.SUBMITTING
        state.loading = True
        self._clear_image(state)

        prompt = build_avatar_prompt(request)
        state.last_prompt = prompt
        state.pending_prompt = prompt
        state.submissions += 1
        logger.info(f"Generated Prompt: {prompt}")

        state.countdown = self.cooldown_ticks
        return prompt

    def complete(self, state: UIState, prompt: str) -> None:
        """Send the prompt and record the outcome.

        Every GenerationError is reported through the same error toast; the
        countdown is left running either way.

        Args:
            state: Session state in SUBMITTING
            prompt: Prompt returned by :meth:`begin`
        """
        state.pending_prompt = None
        try:
            data, mime_type = self.client.generate(prompt)
        except GenerationError as e:
            logger.error(f"Error generating avatar: {e}", exc_info=True)
            self._finish(state, SubmissionState.ERROR)
            self._show_toast(state, FAILURE_MESSAGE, ToastKind.ERROR)
            return

        self._clear_image(state)
        state.image = GeneratedImage(data, mime_type)
        self._finish(state, SubmissionState.COOLING_DOWN)
        self._show_toast(state, SUCCESS_MESSAGE, ToastKind.SUCCESS)
        logger.info(f"Avatar generated: {state.image!r}")

    def submit(self, state: UIState, request: AvatarRequest) -> None:
        """Run a full submission: :meth:`begin` then :meth:`complete`."""
        prompt = self.begin(state, request)
        self.complete(state, prompt)

    def complete_pending(self, state: UIState) -> bool:
        """Send the pending prompt, if a submission was accepted.

        Returns:
            True if a request was issued
        """
        prompt = state.pending_prompt
        if prompt is None:
            return False
        self.complete(state, prompt)
        return True

    def fail(self, state: UIState) -> None:
        """Record an unexpected failure of an in-flight submission."""
        state.pending_prompt = None
        self._finish(state, SubmissionState.ERROR)
        self._show_toast(state, FAILURE_MESSAGE, ToastKind.ERROR)

    def tick(self, state: UIState) -> None:
        """Advance the cooldown by one second and expire the toast."""
        if state.countdown > 0:
            state.countdown -= 1
            if state.countdown == 0:
                logger.debug("Cooldown finished")
                if not state.loading:
                    state.submission_state = SubmissionState.IDLE

        state.toast.expire(self.clock())

    def reset(self, state: UIState) -> None:
        """Release the image and return the session to a fresh IDLE state."""
        self._clear_image(state)
        state.submission_state = SubmissionState.IDLE
        state.loading = False
        state.countdown = 0
        state.toast.hide()
        state.last_prompt = ""
        state.pending_prompt = None

    def _finish(self, state: UIState, outcome: SubmissionState) -> None:
        state.loading = False
        state.submission_state = outcome if state.countdown > 0 else SubmissionState.IDLE

    def _show_toast(self, state: UIState, message: str, kind: ToastKind) -> None:
        state.toast.show(message, kind, self.clock(), self.toast_duration)

    @staticmethod
    def _clear_image(state: UIState) -> None:
        if state.image is not None:
            state.image.release()
            state.image = None
