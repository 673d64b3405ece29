"""Configuration management for Postercraft.

This module provides centralized configuration management using Pydantic Settings.
All configuration is loaded from environment variables with the POSTERCRAFT_ prefix,
allowing easy customization without code changes.

Environment Variable Loading
-----------------------------
Configuration values are loaded in the following priority order:
1. Environment variables (POSTERCRAFT_* prefix)
2. .env file in the project root
3. Default values defined in PostercraftConfig

Example .env file:
    POSTERCRAFT_PROVIDER_API_KEY=sk-...
    POSTERCRAFT_IMAGE_MODEL=black-forest-labs/flux-dev
    POSTERCRAFT_SERVER_PORT=8000
    POSTERCRAFT_LOG_LEVEL=DEBUG

Global Configuration Instance
------------------------------
A global `config` instance is created automatically at module import time.
Only the application factory and the CLI read it.  Request handlers receive
their collaborators (the image provider in particular) explicitly, so tests
can build a :class:`PostercraftConfig` of their own and never touch the
global instance.

Provider Settings
-----------------
The image provider is any OpenAI-compatible ``/images/generations``
endpoint.  The defaults target Nebius AI Studio serving FLUX.1-dev, which
accepts the extra ``width``/``height``/``num_inference_steps``/
``negative_prompt``/``seed`` fields sent by
:class:`~postercraft.core.provider.ImageProvider`.
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class PostercraftConfig(BaseSettings):
    """Main configuration for Postercraft.

    Attributes
    ----------
    Provider Settings:
        provider_base_url : str
            Base URL of the OpenAI-compatible image generation API
        provider_api_key : str
            API key sent as a bearer token (empty means "not configured")
        image_model : str
            Model identifier passed to the provider on every call
        response_extension : Literal["png", "jpeg", "webp"]
            Image encoding requested from the provider
        request_timeout : float | None
            Transport timeout in seconds (None keeps the SDK default)

    Server Settings:
        server_host : str
            Bind address for uvicorn
        server_port : int
            Port for uvicorn (1024-65535)
        log_level : Literal["DEBUG", "INFO", "WARNING", "ERROR"]
            Root log level configured by the CLI

    Examples
    --------
        >>> cfg = PostercraftConfig(provider_api_key="test-key", _env_file=None)
        >>> cfg.image_model
        'black-forest-labs/flux-dev'
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="POSTERCRAFT_",
        case_sensitive=False,
        extra="ignore",
    )

    # Provider settings
    provider_base_url: str = Field(
        default="https://api.studio.nebius.com/v1/",
        description="Base URL of the OpenAI-compatible image generation API",
    )
    provider_api_key: str = Field(
        default="",
        description="API key for the image provider",
    )
    image_model: str = Field(
        default="black-forest-labs/flux-dev",
        description="Text-to-image model identifier",
    )
    response_extension: Literal["png", "jpeg", "webp"] = Field(
        default="png",
        description="Image encoding requested from the provider",
    )
    request_timeout: float | None = Field(
        default=None,
        description="Provider request timeout in seconds (None = SDK default)",
        gt=0,
    )

    # Server settings
    server_host: str = Field(
        default="0.0.0.0",
        description="Server bind address",
    )
    server_port: int = Field(
        default=8000,
        description="Server port",
        ge=1024,
        le=65535,
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Log level applied by the CLI entry point",
    )

    @property
    def has_api_key(self) -> bool:
        """Whether a non-blank provider API key is configured."""
        return bool(self.provider_api_key.strip())


# Global configuration instance, loaded from POSTERCRAFT_* variables and .env.
config = PostercraftConfig()
