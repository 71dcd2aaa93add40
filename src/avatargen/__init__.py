"""Avatar Generator - Personalized avatar images from a descriptive form."""

__version__ = "0.1.0"

from avatargen.core.config import AvatarGenConfig, config
from avatargen.core.inference_client import InferenceClient
from avatargen.core.prompt_builder import build_avatar_prompt

__all__ = [
    "AvatarGenConfig",
    "config",
    "InferenceClient",
    "build_avatar_prompt",
]
