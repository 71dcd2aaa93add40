"""Reusable UI components for the Avatar Generator Gradio interface."""

import html
from typing import Any

import gradio as gr

from .models import (
    CUSTOMER_TYPES,
    FACE_SHAPES,
    FIELD_LABELS,
    FIELD_PLACEHOLDERS,
    GENDERS,
    GENERATE_LABEL,
    LOADING_LABEL,
    REGENERATE_LABEL,
    AvatarRequest,
    ToastNotification,
    UIState,
)

# Dropdown fields and their (label, value) choices; every other field is a textbox
DROPDOWN_CHOICES = {
    "face_shape": FACE_SHAPES,
    "gender": GENDERS,
    "customer_type": CUSTOMER_TYPES,
}

CUSTOM_CSS = """
.field-error p {
    color: #dc2626;
    font-size: 0.875rem;
    margin-top: 0.25rem;
}
.avatar-preview {
    text-align: center;
}
.avatar-preview img {
    width: 16rem;
    height: 16rem;
    object-fit: cover;
    border-radius: 0.5rem;
    box-shadow: 0 10px 15px rgba(0, 0, 0, 0.2);
}
.avatar-toast {
    position: fixed;
    bottom: 1.5rem;
    left: 50%;
    transform: translateX(-50%);
    padding: 0.75rem 1.5rem;
    border-radius: 0.5rem;
    color: #ffffff;
    z-index: 1000;
}
.avatar-toast--success {
    background-color: #22c55e;
}
.avatar-toast--error {
    background-color: #ef4444;
}
"""


class AvatarFormUI:
    """The nine-field avatar form.

    Each field gets an input (textbox or dropdown) and a hidden error line
    beneath it that validation handlers fill in.
    """

    def __init__(self):
        """Create the form components inside the current Blocks context."""
        self.inputs: dict[str, gr.components.Component] = {}
        self.errors: dict[str, gr.Markdown] = {}

        names = AvatarRequest.field_names()
        # Two fields per row, as in a two-column grid
        for row_start in range(0, len(names), 2):
            with gr.Row():
                for name in names[row_start : row_start + 2]:
                    with gr.Column():
                        self.inputs[name] = self._create_input(name)
                        self.errors[name] = gr.Markdown(
                            value="", visible=False, elem_classes="field-error"
                        )

    @staticmethod
    def _create_input(name: str) -> gr.components.Component:
        label = FIELD_LABELS[name]
        if name in DROPDOWN_CHOICES:
            return gr.Dropdown(
                label=label,
                choices=DROPDOWN_CHOICES[name],
                value=None,
                info=f"Select {label.lower()}",
            )
        return gr.Textbox(label=label, placeholder=FIELD_PLACEHOLDERS.get(name, ""), lines=1)

    def get_input_components(self) -> list[gr.components.Component]:
        """Return the field inputs in form order.

        Returns:
            List of components that should be passed as inputs to handlers
        """
        return [self.inputs[name] for name in AvatarRequest.field_names()]

    def get_error_components(self) -> list[gr.Markdown]:
        """Return the per-field error lines in form order."""
        return [self.errors[name] for name in AvatarRequest.field_names()]


def field_error_updates(field_errors: dict[str, str]) -> list[dict[str, Any]]:
    """Build updates for every error line from a validation error map.

    Args:
        field_errors: Mapping of failing field name to message

    Returns:
        One update per field, in form order
    """
    updates = []
    for name in AvatarRequest.field_names():
        message = field_errors.get(name)
        if message:
            updates.append(gr.update(value=message, visible=True))
        else:
            updates.append(gr.update(value="", visible=False))
    return updates


def reset_field_updates() -> list[dict[str, Any]]:
    """Build updates that clear every form input."""
    updates = []
    for name in AvatarRequest.field_names():
        empty = None if name in DROPDOWN_CHOICES else ""
        updates.append(gr.update(value=empty))
    return updates


def unchanged_field_updates() -> list[dict[str, Any]]:
    """Build no-op updates for every form input."""
    return [gr.update() for _ in AvatarRequest.field_names()]


def submit_button_update(state: UIState) -> dict[str, Any]:
    """Label and enable the submit button from the session state."""
    if state.loading:
        label = LOADING_LABEL
    elif state.has_image:
        label = REGENERATE_LABEL
    else:
        label = GENERATE_LABEL
    return gr.update(value=label, interactive=state.submit_enabled)


def format_countdown(countdown: int) -> str:
    """Format the cooldown readout (empty when not counting)."""
    if countdown > 0:
        return f"{countdown} seconds left"
    return ""


def format_toast(toast: ToastNotification) -> str:
    """Render the toast banner as HTML (empty when hidden)."""
    if not toast.visible:
        return ""
    return (
        f'<div class="avatar-toast avatar-toast--{toast.kind.value}" role="status">'
        f"{html.escape(toast.message)}</div>"
    )


def format_image_preview(state: UIState) -> str:
    """Render the generated avatar preview as HTML (empty without an image)."""
    if not state.has_image:
        return ""
    return (
        '<div class="avatar-preview">'
        "<h2>Generated Avatar</h2>"
        f'<img src="{state.image.to_data_url()}" alt="Generated Avatar" />'
        "</div>"
    )
