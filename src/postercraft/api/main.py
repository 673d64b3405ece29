"""Postercraft — FastAPI Application.

This module is the single entry point for the web application.  It defines
the FastAPI ``app`` instance, the REST API routes, and the ``main()`` CLI
function that launches the uvicorn server.

Architecture
------------
The application is stateless apart from one immutable collaborator:

- **Configuration** is loaded once from ``POSTERCRAFT_*`` environment
  variables (see :mod:`postercraft.core.config`).
- **The image provider** is built in the lifespan handler and stored on
  ``app.state``.  Routes obtain it through the :func:`get_provider`
  dependency, which tests replace via ``app.dependency_overrides``.
- **Request handling** lives in :mod:`postercraft.api.generation`; routes
  only translate its results into HTTP status codes.
- **The gallery** is kept by the browser.  Nothing is persisted here.

Endpoints
---------
========  ========================  ==========================================
Method    Path                      Purpose
========  ========================  ==========================================
GET       ``/api/generate``         Describe the generation endpoint
POST      ``/api/generate``         Generate a poster image
POST      ``/api/prompt/compile``   Preview the composed prompt and settings
GET       ``/api/health``           Liveness and provider configuration
========  ========================  ==========================================

Usage
-----
CLI (installed entry point)::

    postercraft

Direct invocation::

    python -m postercraft.api.main
"""

from __future__ import annotations

import json
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from postercraft import __version__
from postercraft.api.generation import compile_prompt, failure_from_error, generate_poster
from postercraft.api.models import ApiInfo, GenerationFailure, GenerationSuccess
from postercraft.core.config import config
from postercraft.core.errors import ErrorKind, ValidationError
from postercraft.core.provider import ImageGenerator, ImageProvider

logger = logging.getLogger(__name__)

# Parameters accepted by POST /api/generate, in form order.
ACCEPTED_PARAMETERS = [
    "title",
    "description",
    "theme",
    "purpose",
    "colorScheme",
    "typographyStyle",
    "imageStyle",
    "designComplexity",
    "aiEnhancement",
    "orientation",
    "size",
    "tags",
]

_PROVIDER_ERROR_KINDS = {ErrorKind.PROVIDER_CALL_FAILED, ErrorKind.PROVIDER_EMPTY_RESPONSE}


# ---------------------------------------------------------------------------
# Application lifecycle.
# ---------------------------------------------------------------------------


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Build the image provider on startup and store it on ``app.state``.

    No network call is made here.  A missing API key only produces a
    warning; generation requests then fail with ``provider_call_failed``.
    """
    app.state.provider = ImageProvider(config)
    if not config.has_api_key:
        logger.warning("POSTERCRAFT_PROVIDER_API_KEY is not set; generation requests will fail.")
    logger.info(
        "Image provider ready (model=%s, base_url=%s).",
        config.image_model,
        config.provider_base_url,
    )

    yield


def get_provider(request: Request) -> ImageGenerator:
    """FastAPI dependency returning the application's image provider."""
    return request.app.state.provider


async def read_payload(request: Request) -> Any:
    """FastAPI dependency decoding the JSON request body.

    Returns:
        The decoded body, or ``None`` when the body is empty.

    Raises:
        ValidationError: ``missing_body`` when the body is not valid JSON.
    """
    body = await request.body()
    if not body.strip():
        return None
    try:
        return json.loads(body)
    except ValueError as e:
        raise ValidationError(
            ErrorKind.MISSING_BODY, "Request body must be valid JSON"
        ) from e


# ---------------------------------------------------------------------------
# FastAPI application instance.
# ---------------------------------------------------------------------------
app = FastAPI(
    title="Postercraft",
    description="Generate AI-powered poster designs from structured design parameters.",
    version=__version__,
    lifespan=lifespan,
)

# The browser UI may be served from a different origin during development.
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _respond(result: GenerationSuccess | GenerationFailure) -> JSONResponse:
    """Render a generation result with the matching HTTP status code."""
    if result.success:
        status_code = 200
    elif ErrorKind(result.kind) in _PROVIDER_ERROR_KINDS:
        status_code = 502
    else:
        status_code = 400
    return JSONResponse(status_code=status_code, content=result.model_dump(by_alias=True))


@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    """Render request rejections raised outside the handler as failure bodies."""
    logger.warning("Rejected %s (%s): %s", request.url.path, exc.kind.value, exc.message)
    return _respond(failure_from_error(exc))


# ---------------------------------------------------------------------------
# Routes.
# ---------------------------------------------------------------------------


@app.get("/api/generate")
async def describe_generate() -> ApiInfo:
    """Describe the poster generation endpoint and its parameters."""
    return ApiInfo(
        name="Poster Generator API",
        description="Generate AI-powered poster designs based on user parameters",
        version=__version__,
        endpoints={
            "post": {
                "description": "Generate a new poster design",
                "parameters": ACCEPTED_PARAMETERS,
            }
        },
    )


@app.post("/api/generate")
def generate(
    payload: Any = Depends(read_payload),
    provider: ImageGenerator = Depends(get_provider),
) -> JSONResponse:
    """Generate a poster image.

    Declared as a plain ``def`` so FastAPI runs the blocking provider call in
    its worker thread pool.

    Returns:
        200 with ``success``, ``image`` and ``metadata`` on success; 400
        with ``success: false`` for rejected input; 502 with
        ``success: false`` when the provider fails or returns no image.
    """
    return _respond(generate_poster(payload, provider))


@app.post("/api/prompt/compile")
async def preview_prompt(payload: Any = Depends(read_payload)) -> JSONResponse:
    """Return the prompt, negative prompt, dimensions and steps for a payload.

    Applies the same validation as ``POST /api/generate`` but never calls
    the provider.
    """
    try:
        compiled = compile_prompt(payload)
    except ValidationError as e:
        logger.warning("Rejected prompt preview (%s): %s", e.kind.value, e.message)
        return _respond(failure_from_error(e))
    return JSONResponse(content=compiled.model_dump(by_alias=True))


@app.get("/api/health")
async def health(provider: ImageGenerator = Depends(get_provider)) -> dict:
    """Report liveness and which model the provider is configured for."""
    return {
        "status": "ok",
        "version": __version__,
        "model": provider.model,
        "api_key_configured": config.has_api_key,
    }


# ---------------------------------------------------------------------------
# CLI entry point.
# ---------------------------------------------------------------------------


def main() -> None:
    """Launch the uvicorn ASGI server.

    Reads host, port and log level from :data:`~postercraft.core.config.config`
    (``POSTERCRAFT_SERVER_HOST``, ``POSTERCRAFT_SERVER_PORT``,
    ``POSTERCRAFT_LOG_LEVEL``).

    This function is registered as the ``postercraft`` console script in
    ``pyproject.toml``.
    """
    import uvicorn

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(
        "postercraft.api.main:app",
        host=config.server_host,
        port=config.server_port,
        log_level=config.log_level.lower(),
        reload=False,
    )


if __name__ == "__main__":
    main()
