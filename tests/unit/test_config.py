"""Tests for avatargen.core.config: configuration management.

Tests cover:
- Default values for all configuration fields.
- Environment variable overrides via the AVATARGEN_ prefix.
- Secret masking of the bearer token.
- Pydantic validation constraints (port range, positive timeouts, etc.).
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from avatargen.core.config import AvatarGenConfig


class TestConfigDefaults:
    """Verify that AvatarGenConfig provides sensible defaults."""

    def test_default_model(self, monkeypatch):
        """Default model should be FLUX.1-dev."""
        monkeypatch.delenv("AVATARGEN_MODEL_ID", raising=False)
        cfg = AvatarGenConfig(_env_file=None)
        assert cfg.model_id == "black-forest-labs/FLUX.1-dev"

    def test_default_inference_url(self, monkeypatch):
        """Default endpoint should point at the hosted inference API."""
        monkeypatch.delenv("AVATARGEN_MODEL_ID", raising=False)
        monkeypatch.delenv("AVATARGEN_INFERENCE_BASE_URL", raising=False)
        cfg = AvatarGenConfig(_env_file=None)
        assert cfg.inference_url == (
            "https://api-inference.huggingface.co/models/black-forest-labs/FLUX.1-dev"
        )

    def test_default_cooldown_and_toast(self, monkeypatch):
        """Cooldown should default to 20 ticks and toasts to 3 seconds."""
        monkeypatch.delenv("AVATARGEN_COOLDOWN_SECONDS", raising=False)
        monkeypatch.delenv("AVATARGEN_TOAST_DURATION", raising=False)
        cfg = AvatarGenConfig(_env_file=None)
        assert cfg.cooldown_seconds == 20
        assert cfg.toast_duration == 3.0

    def test_default_token_is_empty(self, monkeypatch):
        """A missing token is allowed and stays empty."""
        monkeypatch.delenv("AVATARGEN_HF_TOKEN", raising=False)
        cfg = AvatarGenConfig(_env_file=None)
        assert cfg.hf_token.get_secret_value() == ""

    def test_default_server_port(self, monkeypatch):
        """Default server port should be 7860."""
        monkeypatch.delenv("AVATARGEN_GRADIO_SERVER_PORT", raising=False)
        cfg = AvatarGenConfig(_env_file=None)
        assert cfg.gradio_server_port == 7860


class TestConfigEnvironment:
    """Verify that AVATARGEN_ environment variables override defaults."""

    def test_token_from_environment(self, monkeypatch):
        """The bearer token is read from AVATARGEN_HF_TOKEN."""
        monkeypatch.setenv("AVATARGEN_HF_TOKEN", "hf_from_env")
        cfg = AvatarGenConfig(_env_file=None)
        assert cfg.hf_token.get_secret_value() == "hf_from_env"

    def test_cooldown_from_environment(self, monkeypatch):
        """Cooldown length is read from AVATARGEN_COOLDOWN_SECONDS."""
        monkeypatch.setenv("AVATARGEN_COOLDOWN_SECONDS", "5")
        cfg = AvatarGenConfig(_env_file=None)
        assert cfg.cooldown_seconds == 5

    def test_case_insensitive(self, monkeypatch):
        """Variable names are matched case-insensitively."""
        monkeypatch.setenv("avatargen_model_id", "org/other-model")
        cfg = AvatarGenConfig(_env_file=None)
        assert cfg.model_id == "org/other-model"


class TestConfigSecrets:
    """Verify that the token never leaks through dumps."""

    def test_token_masked_in_dump(self, test_config: AvatarGenConfig):
        """model_dump() must not contain the raw token."""
        assert "hf_test_token" not in str(test_config.model_dump())

    def test_token_masked_in_repr(self, test_config: AvatarGenConfig):
        """repr() must not contain the raw token."""
        assert "hf_test_token" not in repr(test_config)


class TestConfigInferenceUrl:
    """Verify endpoint URL composition."""

    def test_url_from_fixture(self, test_config: AvatarGenConfig):
        """The model path is appended under /models/."""
        assert test_config.inference_url == "https://inference.example.com/models/test-org/test-model"

    def test_trailing_slash_stripped(self):
        """A trailing slash on the base URL does not double up."""
        cfg = AvatarGenConfig(
            _env_file=None, inference_base_url="https://host.example/", model_id="a/b"
        )
        assert cfg.inference_url == "https://host.example/models/a/b"


class TestConfigValidation:
    """Verify Pydantic constraints."""

    def test_port_below_range_rejected(self):
        """Ports below 1024 are rejected."""
        with pytest.raises(ValidationError):
            AvatarGenConfig(_env_file=None, gradio_server_port=80)

    def test_zero_cooldown_rejected(self):
        """The cooldown must be at least one tick."""
        with pytest.raises(ValidationError):
            AvatarGenConfig(_env_file=None, cooldown_seconds=0)

    def test_non_positive_timeout_rejected(self):
        """The request timeout must be positive."""
        with pytest.raises(ValidationError):
            AvatarGenConfig(_env_file=None, request_timeout=0)
