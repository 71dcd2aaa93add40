"""Configuration management for the Avatar Generator.

This module provides centralized configuration management using Pydantic Settings.
All configuration is loaded from environment variables with the AVATARGEN_ prefix,
allowing the inference credential and endpoint to be supplied by the hosting
environment instead of being hardcoded.

Environment Variable Loading
-----------------------------
Configuration values are loaded in the following priority order:
1. Environment variables (AVATARGEN_* prefix)
2. .env file in the project root
3. Default values defined in AvatarGenConfig

Example .env file:
    AVATARGEN_HF_TOKEN=hf_xxxxxxxxxxxxxxxxx
    AVATARGEN_MODEL_ID=black-forest-labs/FLUX.1-dev
    AVATARGEN_REQUEST_TIMEOUT=120

Global Configuration Instance
------------------------------
A global `config` instance is created automatically at module import time.

Usage Example
-------------
    from avatargen.core.config import config

    print(config.inference_url)
    print(config.cooldown_seconds)

Credential Handling
-------------------
The bearer token is stored as a ``SecretStr`` so that ``model_dump()`` and
``repr()`` never print it. A missing token is not rejected here: the
inference endpoint refuses the request and the UI shows the generic failure
toast.
"""

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class AvatarGenConfig(BaseSettings):
    """Main configuration for the Avatar Generator.

    Attributes
    ----------
    Inference Settings:
        hf_token : SecretStr
            Bearer token sent in the Authorization header
        inference_base_url : str
            Base URL of the hosted inference API
        model_id : str
            Model path appended to ``/models/`` on the inference host
        request_timeout : float
            Seconds to wait for the inference response

    Submission Settings:
        cooldown_seconds : int
            Number of one-second ticks the submit button stays disabled
        toast_duration : float
            Seconds a toast banner stays visible

    UI Settings:
        gradio_server_name : str
            Server bind address (0.0.0.0 for local network)
        gradio_server_port : int
            Server port (1024-65535)
        gradio_share : bool
            Create public gradio.live link (keep False for local-only)
        log_level : str
            Root logging level for the application

    Examples
    --------
        >>> custom_config = AvatarGenConfig(
        ...     hf_token="hf_test",
        ...     cooldown_seconds=5,
        ... )
        >>> custom_config.inference_url
        'https://api-inference.huggingface.co/models/black-forest-labs/FLUX.1-dev'
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="AVATARGEN_",
        case_sensitive=False,
    )

    # Inference settings
    hf_token: SecretStr = Field(
        default=SecretStr(""),
        description="Bearer token for the inference API",
    )
    inference_base_url: str = Field(
        default="https://api-inference.huggingface.co",
        description="Base URL of the hosted inference API",
    )
    model_id: str = Field(
        default="black-forest-labs/FLUX.1-dev",
        description="Text-to-image model served by the inference API",
    )
    request_timeout: float = Field(
        default=120.0,
        description="Seconds to wait for the inference response",
        gt=0,
    )

    # Submission settings
    cooldown_seconds: int = Field(
        default=20,
        description="Seconds the submit button stays disabled after a submission",
        ge=1,
        le=600,
    )
    toast_duration: float = Field(
        default=3.0,
        description="Seconds a toast notification stays visible",
        gt=0,
    )

    # UI settings
    gradio_server_name: str = Field(
        default="0.0.0.0",
        description="Server bind address (0.0.0.0 for local network)",
    )
    gradio_server_port: int = Field(
        default=7860,
        description="Server port",
        ge=1024,
        le=65535,
    )
    gradio_share: bool = Field(
        default=False,
        description="Create public gradio.live link (keep False for local-only)",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )

    @property
    def inference_url(self) -> str:
        """Full endpoint URL for the configured model."""
        return f"{self.inference_base_url.rstrip('/')}/models/{self.model_id}"


# Global configuration instance
# Loads values from environment variables (AVATARGEN_* prefix) and .env file.
config = AvatarGenConfig()
