"""UI event handlers organized by feature area.

This package provides handlers for all Gradio UI events:
- generation: Form submission and the inference request
- cooldown: One-second timer driving the cooldown readout and toast expiry
"""

from .cooldown import tick_cooldown
from .generation import generate_avatar, submit_avatar

__all__ = [
    # Generation handlers
    "generate_avatar",
    "submit_avatar",
    # Cooldown handlers
    "tick_cooldown",
]
