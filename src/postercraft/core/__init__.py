"""Core services for Postercraft.

- **PostercraftConfig** / **config**: settings loaded from ``POSTERCRAFT_*``
  environment variables using Pydantic Settings.
- **ImageProvider**: OpenAI-compatible text-to-image client, built
  explicitly from a config and injected into request handling.
- **PosterError** and subclasses: typed failures carrying an ``ErrorKind``.
"""

from postercraft.core.config import PostercraftConfig, config
from postercraft.core.errors import ErrorKind, PosterError, ProviderError, ValidationError
from postercraft.core.provider import ImageGenerator, ImageProvider

__all__ = [
    "ErrorKind",
    "ImageGenerator",
    "ImageProvider",
    "PosterError",
    "PostercraftConfig",
    "ProviderError",
    "ValidationError",
    "config",
]
