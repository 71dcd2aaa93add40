"""Validation utilities for Avatar Generator form inputs."""

import logging
import re
from dataclasses import dataclass

from .models import CUSTOMER_TYPES, FACE_SHAPES, GENDERS, AvatarRequest

logger = logging.getLogger(__name__)

# Digits with at most one decimal point, e.g. "25" or "25.5"
_NUMERIC_PATTERN = re.compile(r"^\d+(\.\d+)?$")


class ValidationError(Exception):
    """User-friendly validation error.

    This exception is raised when one or more form fields fail validation.
    ``field_errors`` maps each failing field to the message shown under it.
    """

    def __init__(self, field_errors: dict[str, str]):
        self.field_errors = dict(field_errors)
        super().__init__("; ".join(self.field_errors.values()))


@dataclass(frozen=True)
class FieldRule:
    """Validation rule for a single form field.

    Attributes:
        min_length: Minimum number of characters after stripping whitespace
        length_message: Message shown when the value is too short
        choices: Allowed values, or None for free text
        numeric: Whether the value must look like a number
    """

    min_length: int
    length_message: str
    choices: tuple[str, ...] | None = None
    numeric: bool = False

    def check(self, label: str, value: str) -> str | None:
        """Check a value against this rule.

        Args:
            label: Human-readable field label for choice messages
            value: Raw field value

        Returns:
            Error message, or None if the value passes
        """
        text = (value or "").strip()

        if len(text) < self.min_length:
            return self.length_message

        if self.numeric and not _NUMERIC_PATTERN.match(text):
            return f"{label} must be a number."

        if self.choices is not None and text not in self.choices:
            return f"{label} must be one of: {', '.join(self.choices)}."

        return None


def _values(options: list[tuple[str, str]]) -> tuple[str, ...]:
    return tuple(value for _, value in options)


FIELD_RULES: dict[str, FieldRule] = {
    "hair": FieldRule(2, "Hair description must be at least 2 characters."),
    "eyes": FieldRule(2, "Eye color must be at least 2 characters."),
    "face_shape": FieldRule(
        2, "Face shape must be at least 2 characters.", choices=_values(FACE_SHAPES)
    ),
    "age": FieldRule(1, "Age is required.", numeric=True),
    "gender": FieldRule(1, "Gender is required.", choices=_values(GENDERS)),
    "nationality": FieldRule(2, "Nationality must be at least 2 characters."),
    "occupation": FieldRule(2, "Occupation must be at least 2 characters."),
    "dress": FieldRule(2, "Dress description must be at least 2 characters."),
    "customer_type": FieldRule(
        2, "Customer type must be at least 2 characters.", choices=_values(CUSTOMER_TYPES)
    ),
}

_RULE_LABELS = {
    "face_shape": "Face shape",
    "age": "Age",
    "gender": "Gender",
    "customer_type": "Customer type",
}


def collect_field_errors(request: AvatarRequest) -> dict[str, str]:
    """Check every field of a request.

    Args:
        request: Snapshot of the form values

    Returns:
        Mapping of failing field name to message (empty if all fields pass)
    """
    errors = {}
    for name, rule in FIELD_RULES.items():
        message = rule.check(_RULE_LABELS.get(name, name), getattr(request, name))
        if message is not None:
            errors[name] = message
    return errors


def validate_avatar_request(request: AvatarRequest) -> AvatarRequest:
    """Validate a request with user-friendly messages.

    Args:
        request: Snapshot of the form values

    Returns:
        The same request, if every field passes

    Raises:
        ValidationError: If any field fails, carrying every failing field
    """
    errors = collect_field_errors(request)
    if errors:
        logger.warning(f"Validation failed for fields: {', '.join(errors)}")
        raise ValidationError(errors)
    return request
