"""Client for the external text-to-image provider.

This module provides :class:`ImageProvider`, a thin wrapper around the
``openai`` SDK pointed at an OpenAI-compatible ``/images/generations``
endpoint.  It is the only place in Postercraft that performs network I/O.

Key Responsibilities
--------------------
- **Explicit construction**: the SDK client is built from a
  :class:`~postercraft.core.config.PostercraftConfig` passed in by the
  caller.  There is no module-level client.
- **Request shaping**: the provider-specific generation fields (dimensions,
  step count, negative prompt, seed, output encoding) travel in
  ``extra_body`` because the OpenAI schema does not define them.
- **No interpretation**: the SDK response is returned untouched.  Deciding
  whether it contains a usable image is the request handler's job.

Usage
-----
::

    from postercraft.core.config import config
    from postercraft.core.provider import ImageProvider

    provider = ImageProvider(config)
    response = provider.generate(
        "A jazz poster",
        width=1024,
        height=768,
        steps=32,
        negative_prompt="blurry",
    )
    b64 = response.data[0].b64_json

See Also
--------
- :mod:`postercraft.api.generation` for the handler that calls ``generate``
  exactly once per request.
"""

from __future__ import annotations

import logging
from typing import Any, Protocol

from openai import OpenAI

from postercraft.core.config import PostercraftConfig

logger = logging.getLogger(__name__)

# Seed value understood by the provider as "pick a random seed".
RANDOM_SEED = -1

# Sent in place of a blank POSTERCRAFT_PROVIDER_API_KEY.
MISSING_API_KEY = "not-configured"


class ImageGenerator(Protocol):
    """Anything the request handler can use to generate an image."""

    model: str

    def generate(
        self,
        prompt: str,
        *,
        width: int,
        height: int,
        steps: int,
        negative_prompt: str,
        seed: int = RANDOM_SEED,
    ) -> Any: ...


class ImageProvider:
    """OpenAI-compatible text-to-image client.

    Attributes:
        model (str):
            Model identifier sent with every request.
        response_extension (str):
            Image encoding requested from the provider (``png`` by default).
        _client (OpenAI):
            Underlying SDK client.  Holds no per-request state, so a single
            instance can serve concurrent requests.
    """

    def __init__(self, config: PostercraftConfig, client: OpenAI | None = None) -> None:
        """Build the provider from configuration.

        Args:
            config: Application configuration.  ``provider_base_url``,
                ``provider_api_key``, ``image_model``, ``response_extension``
                and ``request_timeout`` are read.
            client: Pre-built SDK client.  When omitted one is created from
                ``config`` with SDK retries disabled, so each ``generate``
                call sends exactly one HTTP request.
        """
        self.model = config.image_model
        self.response_extension = config.response_extension

        if client is None:
            # The SDK rejects an empty key at construction.
            api_key = config.provider_api_key if config.has_api_key else MISSING_API_KEY
            client_kwargs: dict[str, Any] = {
                "base_url": config.provider_base_url,
                "api_key": api_key,
                "max_retries": 0,
            }
            if config.request_timeout is not None:
                client_kwargs["timeout"] = config.request_timeout
            client = OpenAI(**client_kwargs)
        self._client = client

    def generate(
        self,
        prompt: str,
        *,
        width: int,
        height: int,
        steps: int,
        negative_prompt: str,
        seed: int = RANDOM_SEED,
    ) -> Any:
        """Request a single base64-encoded image from the provider.

        Args:
            prompt: Positive prompt text.
            width: Output width in pixels.
            height: Output height in pixels.
            steps: Number of inference steps.
            negative_prompt: Text describing what the image must avoid.
            seed: Provider seed.  ``-1`` lets the provider randomise it.

        Returns:
            The SDK ``ImagesResponse``.  Its ``data`` list is expected to
            hold at least one entry with a ``b64_json`` field.

        Raises:
            openai.OpenAIError: On network, authentication or provider-side
                failure.  Nothing is retried here.
        """
        logger.info(
            "Requesting %dx%d image from '%s' (steps=%d, seed=%d).",
            width,
            height,
            self.model,
            steps,
            seed,
        )
        return self._client.images.generate(
            model=self.model,
            prompt=prompt,
            response_format="b64_json",
            extra_body={
                "response_extension": self.response_extension,
                "width": width,
                "height": height,
                "num_inference_steps": steps,
                "negative_prompt": negative_prompt,
                "seed": seed,
            },
        )
