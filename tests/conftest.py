"""Shared pytest fixtures for Avatar Generator tests."""

import io
from unittest.mock import Mock

import pytest
from PIL import Image

from avatargen.core.config import AvatarGenConfig
from avatargen.core.inference_client import InferenceClient
from avatargen.ui.controller import SubmissionController
from avatargen.ui.models import AvatarRequest, UIState


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def test_config() -> AvatarGenConfig:
    """Create a test configuration that ignores the environment's .env file.

    Returns:
        AvatarGenConfig instance for testing
    """
    return AvatarGenConfig(
        _env_file=None,
        hf_token="hf_test_token",
        inference_base_url="https://inference.example.com",
        model_id="test-org/test-model",
        request_timeout=5.0,
    )


@pytest.fixture
def png_bytes() -> bytes:
    """Encoded 8x8 PNG image.

    Returns:
        PNG file contents
    """
    buffer = io.BytesIO()
    Image.new("RGB", (8, 8), color=(200, 100, 50)).save(buffer, format="PNG")
    return buffer.getvalue()


@pytest.fixture
def valid_request() -> AvatarRequest:
    """Create a request that passes validation.

    Returns:
        AvatarRequest with valid values
    """
    return AvatarRequest(
        hair="long brown",
        eyes="blue",
        face_shape="round",
        age="25",
        gender="female",
        nationality="French",
        occupation="Designer",
        dress="casual",
        customer_type="vip",
    )


@pytest.fixture
def empty_request() -> AvatarRequest:
    """Create a request with every field empty.

    Returns:
        AvatarRequest with default (empty) values
    """
    return AvatarRequest()


@pytest.fixture
def ui_state() -> UIState:
    """Create empty UI state for testing.

    Returns:
        UIState instance
    """
    return UIState()


@pytest.fixture
def fake_clock() -> FakeClock:
    """Create a manually advanced clock.

    Returns:
        FakeClock instance
    """
    return FakeClock()


@pytest.fixture
def mock_client(png_bytes: bytes) -> Mock:
    """Create an inference client mock that returns a PNG.

    Returns:
        Mock with the InferenceClient interface
    """
    client = Mock(spec=InferenceClient)
    client.generate.return_value = (png_bytes, "image/png")
    return client


@pytest.fixture
def controller(mock_client: Mock, fake_clock: FakeClock) -> SubmissionController:
    """Create a controller wired to the mock client and fake clock.

    Returns:
        SubmissionController instance
    """
    return SubmissionController(
        mock_client, cooldown_ticks=20, toast_duration=3.0, clock=fake_clock
    )
