"""HTTP client for the hosted text-to-image inference API.

This module provides :class:`InferenceClient`, the only component that talks
to the network.  One call to :meth:`InferenceClient.generate` issues exactly
one ``POST`` request; nothing is retried.

Wire Format
-----------
::

    POST {inference_base_url}/models/{model_id}
    Authorization: Bearer {hf_token}
    Content-Type: application/json

    {"inputs": "<prompt>"}

A successful response carries the raw image bytes (not JSON).  The body is
checked with Pillow before it is accepted, so a 200 response holding a JSON
error document or truncated data is treated as a failure.

Failure Taxonomy
----------------
- :class:`NetworkError`: the request never completed (DNS, connection,
  timeout).
- :class:`ResponseError`: a response arrived but was not a success status or
  did not contain a decodable image.

Both derive from :class:`GenerationError`, which is what callers catch.

Usage
-----
::

    from avatargen.core.config import config
    from avatargen.core.inference_client import InferenceClient

    client = InferenceClient(config)
    data, mime_type = client.generate("A personalized avatar of ...")
"""

from __future__ import annotations

import io
import logging

import requests
from PIL import Image, UnidentifiedImageError

from avatargen.core.config import AvatarGenConfig

logger = logging.getLogger(__name__)


class GenerationError(Exception):
    """Base class for failures while generating an avatar image."""


class NetworkError(GenerationError):
    """The inference request could not be completed."""


class ResponseError(GenerationError):
    """The inference API answered with an error or an unusable payload."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


def _detect_image_mime(data: bytes) -> str:
    """Return the MIME type of an encoded image.

    Args:
        data: Encoded image bytes.

    Returns:
        MIME type reported by Pillow (e.g. ``"image/png"``).

    Raises:
        ResponseError: If the bytes are empty or not a recognised image.
    """
    if not data:
        raise ResponseError("Inference API returned an empty body")

    try:
        with Image.open(io.BytesIO(data)) as image:
            image.verify()
            image_format = image.format
    except (UnidentifiedImageError, OSError, SyntaxError) as e:
        raise ResponseError(f"Inference API returned an unreadable image: {e}") from e

    return Image.MIME.get(image_format or "", "image/png")


class InferenceClient:
    """Issues text-to-image requests against the hosted inference API.

    Attributes:
        _config (AvatarGenConfig):
            Application configuration: endpoint, model, token and timeout.
        _session (requests.Session):
            HTTP session reused across calls.
    """

    def __init__(self, config: AvatarGenConfig, session: requests.Session | None = None) -> None:
        """Initialise the client.

        Args:
            config: Application configuration instance.
            session: Optional pre-built session (tests pass a mock).
        """
        self._config = config
        self._session = session if session is not None else requests.Session()

    @property
    def endpoint(self) -> str:
        """URL the generation request is posted to."""
        return self._config.inference_url

    def _headers(self) -> dict[str, str]:
        token = self._config.hf_token.get_secret_value()
        return {
            "Authorization": f"Bearer {token}",
            "Accept": "image/png",
        }

    def generate(self, prompt: str) -> tuple[bytes, str]:
        """Generate one image for *prompt*.

        Args:
            prompt: Natural-language description of the avatar.

        Returns:
            Tuple of (encoded image bytes, MIME type).

        Raises:
            NetworkError: If the request did not complete.
            ResponseError: If the response is not a successful image payload.
        """
        logger.info(f"Requesting image from {self.endpoint}")

        try:
            response = self._session.post(
                self.endpoint,
                headers=self._headers(),
                json={"inputs": prompt},
                timeout=self._config.request_timeout,
            )
        except requests.exceptions.RequestException as e:
            raise NetworkError(f"Request to inference API failed: {e}") from e

        if not response.ok:
            # Error bodies are small JSON documents; keep a short excerpt for the log.
            excerpt = response.text[:200] if response.text else ""
            raise ResponseError(
                f"Inference API returned HTTP {response.status_code}: {excerpt}",
                status_code=response.status_code,
            )

        data = response.content
        mime_type = _detect_image_mime(data)

        logger.info(f"Received {len(data)} bytes ({mime_type}) from inference API")
        return data, mime_type

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self._session.close()
