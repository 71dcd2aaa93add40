"""Core functionality for avatar generation.

This module provides the non-UI building blocks of the Avatar Generator:

- **AvatarGenConfig / config**: Configuration management using Pydantic Settings
- **build_avatar_prompt**: Compiles the form fields into a single prompt sentence
- **InferenceClient**: Posts the prompt to the hosted inference API and returns
  the image bytes

Architecture Overview
---------------------
1. **Configuration Layer** (config.py):
   - Environment-based configuration using Pydantic Settings
   - All settings prefixed with AVATARGEN_ in .env files

2. **Prompt Layer** (prompt_builder.py):
   - Fixed sentence template with per-field default phrases

3. **Transport Layer** (inference_client.py):
   - One POST per generation, no retries
   - Failures classified as NetworkError or ResponseError

Usage Example
-------------
    from avatargen.core import InferenceClient, build_avatar_prompt, config

    client = InferenceClient(config)
    data, mime_type = client.generate(build_avatar_prompt(request))
"""

from avatargen.core.config import AvatarGenConfig, config
from avatargen.core.inference_client import (
    GenerationError,
    InferenceClient,
    NetworkError,
    ResponseError,
)
from avatargen.core.prompt_builder import PROMPT_DEFAULTS, build_avatar_prompt

__all__ = [
    "AvatarGenConfig",
    "config",
    "GenerationError",
    "InferenceClient",
    "NetworkError",
    "ResponseError",
    "PROMPT_DEFAULTS",
    "build_avatar_prompt",
]
