"""Adapter functions for converting between UI values and business objects."""

from typing import Any

from .models import AvatarRequest

FORM_FIELD_COUNT = len(AvatarRequest.field_names())


def values_to_request(*values: Any) -> AvatarRequest:
    """Convert raw form values to an AvatarRequest.

    Empty dropdowns arrive as None and numeric inputs may arrive as numbers;
    both are normalised to strings.

    Args:
        *values: Nine field values in form order

    Returns:
        AvatarRequest built from the values

    Raises:
        ValueError: If the number of values does not match the form
    """
    if len(values) != FORM_FIELD_COUNT:
        raise ValueError(f"Expected {FORM_FIELD_COUNT} form values, got {len(values)}")

    normalised = ["" if value is None else str(value) for value in values]
    return AvatarRequest(*normalised)


def split_form_inputs(values: list) -> tuple[tuple, Any]:
    """Split combined input list into form values and session state.

    Args:
        values: List of all UI input values (nine fields, then state)

    Returns:
        Tuple of (field_values, state)
    """
    field_values = tuple(values[:FORM_FIELD_COUNT])
    state = values[FORM_FIELD_COUNT]
    return field_values, state
