"""Data models for Avatar Generator UI state and form values."""

import base64
import logging
from dataclasses import dataclass, field, fields
from enum import Enum

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AvatarRequest:
    """Descriptive attributes of the person to render.

    A fresh instance is built from the form values on every submission
    attempt. It is frozen so the values that went into a prompt cannot change
    afterwards.
    """

    hair: str = ""
    eyes: str = ""
    face_shape: str = ""
    age: str = ""
    gender: str = ""
    nationality: str = ""
    occupation: str = ""
    dress: str = ""
    customer_type: str = ""

    @classmethod
    def field_names(cls) -> tuple[str, ...]:
        """Return the field names in form order."""
        return tuple(f.name for f in fields(cls))

    def to_dict(self) -> dict[str, str]:
        """Return the field values keyed by field name."""
        return {name: getattr(self, name) for name in self.field_names()}


class SubmissionState(Enum):
    """Lifecycle of a single submission within a session."""

    IDLE = "idle"
    SUBMITTING = "submitting"
    COOLING_DOWN = "cooling_down"
    ERROR = "error"


class ToastKind(Enum):
    """Visual style of a toast banner."""

    SUCCESS = "success"
    ERROR = "error"


@dataclass
class ToastNotification:
    """Transient banner shown at the bottom of the page.

    Attributes
    ----------
    message : str
        Text shown in the banner
    kind : ToastKind
        Success (green) or error (red)
    visible : bool
        Whether the banner is currently rendered
    expires_at : float
        Clock reading after which the banner hides
    """

    message: str = ""
    kind: ToastKind = ToastKind.SUCCESS
    visible: bool = False
    expires_at: float = 0.0

    def show(self, message: str, kind: ToastKind, now: float, duration: float) -> None:
        """Make the banner visible until ``now + duration``."""
        self.message = message
        self.kind = kind
        self.visible = True
        self.expires_at = now + duration

    def expire(self, now: float) -> bool:
        """Hide the banner if its deadline has passed.

        Returns:
            True if the banner was hidden by this call
        """
        if self.visible and now >= self.expires_at:
            self.hide()
            return True
        return False

    def hide(self) -> None:
        """Hide the banner immediately."""
        self.message = ""
        self.kind = ToastKind.SUCCESS
        self.visible = False


class GeneratedImage:
    """In-memory handle to an image returned by the inference API.

    The handle owns the encoded bytes until :meth:`release` is called. After
    release the handle can no longer be displayed.
    """

    def __init__(self, data: bytes, mime_type: str = "image/png"):
        self._data: bytes | None = data
        self.mime_type = mime_type

    @property
    def released(self) -> bool:
        """True once the underlying bytes have been dropped."""
        return self._data is None

    @property
    def size(self) -> int:
        """Number of encoded bytes held (0 after release)."""
        return len(self._data) if self._data is not None else 0

    def _require_data(self) -> bytes:
        if self._data is None:
            raise ValueError("Generated image has been released")
        return self._data

    def to_data_url(self) -> str:
        """Return a ``data:`` URL embedding the encoded image.

        Raises:
            ValueError: If the handle has been released
        """
        encoded = base64.b64encode(self._require_data()).decode("ascii")
        return f"data:{self.mime_type};base64,{encoded}"

    def release(self) -> None:
        """Drop the encoded bytes."""
        if self._data is not None:
            logger.debug(f"Releasing generated image ({len(self._data)} bytes)")
        self._data = None

    def __repr__(self) -> str:
        return f"GeneratedImage(mime_type={self.mime_type!r}, size={self.size})"


@dataclass
class UIState:
    """Session state for the Gradio UI.

    Each browser session gets its own UIState instance (via ``gr.State``), so
    the submission lifecycle of one user never affects another.

    Attributes
    ----------
    submission_state : SubmissionState
        Where the current submission is in its lifecycle
    loading : bool
        True while the inference request is in flight
    countdown : int
        Remaining cooldown ticks; the submit button is disabled while > 0
    image : GeneratedImage | None
        The most recent successfully generated image
    toast : ToastNotification
        The banner notification
    last_prompt : str
        Prompt of the most recent accepted submission
    pending_prompt : str | None
        Prompt accepted but not yet sent to the inference API
    submissions : int
        Number of accepted submissions in this session
    """

    submission_state: SubmissionState = SubmissionState.IDLE
    loading: bool = False
    countdown: int = 0
    image: GeneratedImage | None = None
    toast: ToastNotification = field(default_factory=ToastNotification)
    last_prompt: str = ""
    pending_prompt: str | None = None
    submissions: int = 0

    @property
    def submit_enabled(self) -> bool:
        """Whether the submit button accepts clicks."""
        return not self.loading and self.countdown == 0

    @property
    def has_image(self) -> bool:
        """Whether a displayable image is held."""
        return self.image is not None and not self.image.released

    def __repr__(self) -> str:
        """String representation for debugging."""
        return (
            f"UIState(state={self.submission_state.value}, "
            f"loading={self.loading}, "
            f"countdown={self.countdown}, "
            f"image={self.image!r})"
        )


# Form option sets as (label, value) pairs, the shape gr.Dropdown accepts
FACE_SHAPES = [
    ("Oval", "oval"),
    ("Round", "round"),
    ("Square", "square"),
    ("Heart", "heart"),
]

GENDERS = [
    ("Male", "male"),
    ("Female", "female"),
    ("Non-binary", "non-binary"),
]

CUSTOMER_TYPES = [
    ("Regular", "regular"),
    ("Premium", "premium"),
    ("VIP", "vip"),
]

# Labels and placeholders per field, in form order
FIELD_LABELS = {
    "hair": "Hair",
    "eyes": "Eyes",
    "face_shape": "Face Shape",
    "age": "Age",
    "gender": "Gender",
    "nationality": "Nationality",
    "occupation": "Occupation",
    "dress": "Dress Style",
    "customer_type": "Customer Type",
}

FIELD_PLACEHOLDERS = {
    "hair": "e.g., long brown",
    "eyes": "e.g., blue",
    "age": "e.g., 25",
    "nationality": "e.g., French",
    "occupation": "e.g., Designer",
    "dress": "e.g., Business casual",
}

# UI text
GENERATE_LABEL = "Generate Avatar"
REGENERATE_LABEL = "Regenerate Avatar"
LOADING_LABEL = "Generating..."
SUCCESS_MESSAGE = "Avatar generated successfully!"
FAILURE_MESSAGE = "Failed to generate avatar. Please try again."
