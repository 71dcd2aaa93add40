"""Avatar prompt compilation.

The prompt sent to the inference endpoint is a single sentence built by
interpolating the nine form fields into a fixed template.  Any empty field is
replaced by its entry in :data:`PROMPT_DEFAULTS`.

Template::

    A personalized avatar of a [gender person] with [hair] hair, [eyes] eyes,
    an [face_shape] face shape, aged around [age], of [nationality]
    nationality, working as a [occupation], dressed in [dress], and
    categorized as a [customer_type] customer.

The article in "an [face_shape]" is fixed regardless of the value ("an
round").  Generated prompts depend on this exact wording, so it is kept as-is.

Usage
-----
::

    prompt = build_avatar_prompt(request)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from avatargen.ui.models import AvatarRequest

# ---------------------------------------------------------------------------
# Substitutions for empty fields.  Validation normally prevents empty values,
# so these only appear when a request is built without it.
# ---------------------------------------------------------------------------

PROMPT_DEFAULTS: dict[str, str] = {
    "gender": "person",
    "hair": "short black",
    "eyes": "brown",
    "face_shape": "oval",
    "age": "30",
    "nationality": "unknown nationality",
    "occupation": "professional",
    "dress": "professional attire",
    "customer_type": "regular",
}

_TEMPLATE = (
    "A personalized avatar of a {subject} with {hair} hair, {eyes} eyes, "
    "an {face_shape} face shape, aged around {age}, of {nationality} nationality, "
    "working as a {occupation}, dressed in {dress}, "
    "and categorized as a {customer_type} customer."
)


def _value_or_default(value: str, field_name: str) -> str:
    """Return *value* unchanged, or the default phrase when it is empty.

    Args:
        value: Raw field value.
        field_name: Key into :data:`PROMPT_DEFAULTS`.

    Returns:
        The value to interpolate.
    """
    return value if value else PROMPT_DEFAULTS[field_name]


def build_avatar_prompt(request: AvatarRequest) -> str:
    """Compile the final prompt for an avatar request.

    Field values are interpolated verbatim; only empty strings are replaced.
    A given gender reads as "<gender> person", a missing one falls back to
    the bare "person".

    Args:
        request: The avatar attributes to describe.

    Returns:
        The single-sentence prompt.
    """
    subject = f"{request.gender} person" if request.gender else PROMPT_DEFAULTS["gender"]

    return _TEMPLATE.format(
        subject=subject,
        hair=_value_or_default(request.hair, "hair"),
        eyes=_value_or_default(request.eyes, "eyes"),
        face_shape=_value_or_default(request.face_shape, "face_shape"),
        age=_value_or_default(request.age, "age"),
        nationality=_value_or_default(request.nationality, "nationality"),
        occupation=_value_or_default(request.occupation, "occupation"),
        dress=_value_or_default(request.dress, "dress"),
        customer_type=_value_or_default(request.customer_type, "customer_type"),
    )
