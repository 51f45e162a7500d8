"""Gemini image generation for the decorative image slots.

This module provides :class:`ImageFetchAdapter`, the only component that
talks to an external service.  It turns a short photography description
into an inline ``data:`` URI that the page can display directly.

Contract
--------
``await adapter.fetch(prompt)`` resolves to exactly one of:

- a non-empty ``data:<mime>;base64,...`` string, or
- ``None``.

Every failure (missing credential, transport error, service error, a
response without an inline image) is raised internally as
:class:`ExternalServiceUnavailable`, caught at the adapter boundary and
logged.  Callers treat ``None`` as terminal: there is no timeout, retry,
backoff or caching.

Prompt Template
---------------
Each prompt is wrapped in a fixed style prefix and sent with a fixed 16:9
aspect ratio::

    Professional high-end luxury fitness photography, dramatic lighting,
    cinematic, 8k: <prompt>

Usage
-----
::

    from sk27.core.config import config
    from sk27.core.image_fetch import ImageFetchAdapter

    adapter = ImageFetchAdapter(config)
    src = await adapter.fetch("Detail shot of an imported barbell")
"""

from __future__ import annotations

import base64
import logging
from dataclasses import dataclass
from typing import Any

from google import genai
from google.genai import types

from sk27.core.config import LandingConfig

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Fixed request shape.
# ---------------------------------------------------------------------------
STYLE_PREFIX = (
    "Professional high-end luxury fitness photography, dramatic lighting, cinematic, 8k: "
)
ASPECT_RATIO = "16:9"
DEFAULT_MIME_TYPE = "image/png"


class ExternalServiceUnavailable(Exception):
    """The image service could not produce an image.

    Raised only inside :class:`ImageFetchAdapter` and never propagated past
    :meth:`ImageFetchAdapter.fetch`.
    """

    pass


@dataclass(frozen=True)
class ImageRequest:
    """One outbound image request, created when a slot mounts."""

    prompt: str
    aspect_ratio: str = ASPECT_RATIO

    @property
    def styled_prompt(self) -> str:
        """The prompt wrapped in the fixed photography style prefix."""
        return f"{STYLE_PREFIX}{self.prompt}"


def to_data_uri(data: bytes, mime_type: str | None = None) -> str:
    """Encode raw image bytes as a ``data:`` URI usable as an ``<img src>``."""
    encoded = base64.b64encode(data).decode("ascii")
    return f"data:{mime_type or DEFAULT_MIME_TYPE};base64,{encoded}"


def extract_inline_image(response: Any) -> str:
    """Pull the first inline image out of a ``generate_content`` response.

    Only the first candidate is inspected.  Its parts are scanned in order
    and the first part carrying non-empty ``inline_data`` wins.

    Args:
        response: A ``GenerateContentResponse`` (or anything shaped like one).

    Returns:
        The image as a ``data:`` URI.

    Raises:
        ExternalServiceUnavailable: If the response has no inline image.
    """
    candidates = getattr(response, "candidates", None) or []
    if not candidates:
        raise ExternalServiceUnavailable("response contained no candidates")

    content = getattr(candidates[0], "content", None)
    parts = getattr(content, "parts", None) or []
    for part in parts:
        inline = getattr(part, "inline_data", None)
        if inline is not None and inline.data:
            return to_data_uri(inline.data, inline.mime_type)

    raise ExternalServiceUnavailable("response contained no inline image data")


class ImageFetchAdapter:
    """Async adapter around the Gemini image model.

    A single ``genai.Client`` is created lazily on first use and shared by
    every subsequent request.  A pre-built client may be injected, which is
    how the tests substitute a fake service.

    Attributes:
        _config (LandingConfig):
            Application configuration (credential and model id).
        _client:
            The ``genai.Client`` in use, or ``None`` before first use.
    """

    def __init__(self, config: LandingConfig, client: genai.Client | None = None) -> None:
        self._config = config
        self._client = client

    async def fetch(self, prompt: str) -> str | None:
        """Generate an image for *prompt*.

        Args:
            prompt: Business-specific photography description.  The style
                prefix is added here.

        Returns:
            A non-empty ``data:`` URI, or ``None`` if the service was
            unavailable for any reason.
        """
        request = ImageRequest(prompt=prompt)
        try:
            return await self._request(request)
        except ExternalServiceUnavailable as e:
            logger.error("Image generation failed for %r: %s", prompt, e)
        except Exception as e:
            logger.error("Image generation failed for %r: %s", prompt, e, exc_info=True)
        return None

    # -- Internals ----------------------------------------------------------

    def _get_client(self) -> genai.Client:
        """Return the shared client, creating it on first use."""
        if self._client is None:
            if self._config.api_key is None:
                raise ExternalServiceUnavailable("no API key configured for the image service")
            self._client = genai.Client(api_key=self._config.api_key.get_secret_value())
            logger.info("Gemini client initialised (model=%s).", self._config.image_model)
        return self._client

    async def _request(self, request: ImageRequest) -> str:
        """Issue the single outbound call and decode its payload."""
        client = self._get_client()
        response = await client.aio.models.generate_content(
            model=self._config.image_model,
            contents=request.styled_prompt,
            config=types.GenerateContentConfig(
                response_modalities=["IMAGE"],
                image_config=types.ImageConfig(aspect_ratio=request.aspect_ratio),
            ),
        )
        src = extract_inline_image(response)
        logger.debug("Image ready for %r (%d chars).", request.prompt, len(src))
        return src
