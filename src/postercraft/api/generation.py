"""Poster generation request handling.

This module owns the request lifecycle between the HTTP layer and the image
provider:

1. Validate the raw JSON payload, failing fast in a fixed order.
2. Compose the prompt, dimensions and step count.
3. Call the provider exactly once.
4. Map the provider's response, or its failure, to a result model.

Validation Order
----------------
The first failing check wins and nothing after it runs:

1. body missing or not a JSON object        -> ``missing_body``
2. ``title`` missing or blank               -> ``missing_field``
3. ``description`` missing or blank         -> ``missing_field``
4. ``theme`` not recognized                 -> ``invalid_enum``
5. ``purpose`` not recognized               -> ``invalid_enum``
6. ``designComplexity`` not a whole number
   in [0, 100]                              -> ``out_of_range``
7. any other enum field not recognized      -> ``invalid_enum``
8. any remaining schema violation           -> ``invalid_type``

``null`` values are treated as absent and fall back to the form defaults
declared on :class:`~postercraft.api.models.PosterRequest`.

The provider is passed in by the caller, so tests drive this module with a
``MagicMock`` and count calls.
"""

from __future__ import annotations

import logging
from typing import Any

import pydantic

from postercraft.api.models import (
    ENUM_VALUES,
    CompiledPrompt,
    GenerationFailure,
    GenerationSuccess,
    PosterMetadata,
    PosterRequest,
)
from postercraft.api.prompt_builder import ComposedPrompt, build_prompt, inference_steps
from postercraft.core.errors import ErrorKind, PosterError, ProviderError, ValidationError
from postercraft.core.provider import RANDOM_SEED, ImageGenerator

logger = logging.getLogger(__name__)

_REQUIRED_TEXT_FIELDS = ("title", "description")
_LATE_ENUM_FIELDS = ("colorScheme", "typographyStyle", "imageStyle", "orientation", "size")


# ---------------------------------------------------------------------------
# Validation.
# ---------------------------------------------------------------------------


def _check_enum(payload: dict, field: str) -> None:
    value = payload.get(field)
    if value is None:
        return
    allowed = ENUM_VALUES[field]
    if value not in allowed:
        raise ValidationError(
            ErrorKind.INVALID_ENUM,
            f"Invalid {field}. Must be one of: {', '.join(allowed)}",
            field=field,
        )


def _check_complexity(payload: dict) -> None:
    value = payload.get("designComplexity")
    if value is None:
        return
    # Range first: huge JSON integers cannot be converted to float, and NaN
    # fails every comparison.
    valid = (
        isinstance(value, (int, float))
        and not isinstance(value, bool)
        and 0 <= value <= 100
        and float(value).is_integer()
    )
    if not valid:
        raise ValidationError(
            ErrorKind.OUT_OF_RANGE,
            "Design complexity must be a whole number between 0 and 100",
            field="designComplexity",
        )


def validate_payload(payload: Any) -> PosterRequest:
    """Validate a raw JSON payload and build a :class:`PosterRequest`.

    Args:
        payload: Decoded JSON body, or ``None`` when the body was empty.

    Returns:
        The validated request with form defaults applied.

    Raises:
        ValidationError: On the first failing check (see module docstring).
    """
    if not isinstance(payload, dict):
        if payload is None:
            message = "Missing request body"
        else:
            message = "Request body must be a JSON object"
        raise ValidationError(ErrorKind.MISSING_BODY, message)

    for field in _REQUIRED_TEXT_FIELDS:
        value = payload.get(field)
        if value is None or (isinstance(value, str) and not value.strip()):
            raise ValidationError(
                ErrorKind.MISSING_FIELD,
                f"{field.capitalize()} is required",
                field=field,
            )
        if not isinstance(value, str):
            raise ValidationError(
                ErrorKind.INVALID_TYPE,
                f"{field.capitalize()} must be a string",
                field=field,
            )

    _check_enum(payload, "theme")
    _check_enum(payload, "purpose")
    _check_complexity(payload)
    for field in _LATE_ENUM_FIELDS:
        _check_enum(payload, field)

    data = {key: value for key, value in payload.items() if value is not None}
    if "designComplexity" in data:
        data["designComplexity"] = int(data["designComplexity"])

    try:
        return PosterRequest.model_validate(data)
    except pydantic.ValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(part) for part in first["loc"]) or None
        raise ValidationError(
            ErrorKind.INVALID_TYPE,
            f"Invalid {field}: {first['msg']}",
            field=field,
        ) from e


# ---------------------------------------------------------------------------
# Provider call and response mapping.
# ---------------------------------------------------------------------------


def _request_image(provider: ImageGenerator, composed: ComposedPrompt, steps: int) -> str:
    """Call the provider once and extract the base64 image.

    Raises:
        ProviderError: If the call raises, or the response carries no image.
    """
    try:
        response = provider.generate(
            composed.prompt,
            width=composed.width,
            height=composed.height,
            steps=steps,
            negative_prompt=composed.negative_prompt,
            seed=RANDOM_SEED,
        )
    except Exception as e:
        raise ProviderError(
            ErrorKind.PROVIDER_CALL_FAILED,
            str(e) or type(e).__name__,
        ) from e

    results = getattr(response, "data", None)
    if not results:
        raise ProviderError(
            ErrorKind.PROVIDER_EMPTY_RESPONSE,
            "No image data received from the provider",
        )

    image = getattr(results[0], "b64_json", None)
    if not image:
        raise ProviderError(
            ErrorKind.PROVIDER_EMPTY_RESPONSE,
            "Missing b64_json in provider response",
        )
    return image


def failure_from_error(error: PosterError) -> GenerationFailure:
    """Convert a :class:`PosterError` into the failure response model."""
    return GenerationFailure(
        error=error.summary,
        message=error.message,
        kind=error.kind.value,
        field=error.field,
    )


# ---------------------------------------------------------------------------
# Public entry points.
# ---------------------------------------------------------------------------


def compile_prompt(payload: Any) -> CompiledPrompt:
    """Validate and compose without calling the provider.

    Raises:
        ValidationError: If the payload is rejected.
    """
    request = validate_payload(payload)
    composed = build_prompt(request)
    return CompiledPrompt(
        prompt=composed.prompt,
        negative_prompt=composed.negative_prompt,
        width=composed.width,
        height=composed.height,
        steps=inference_steps(request.design_complexity),
    )


def generate_poster(
    payload: Any, provider: ImageGenerator
) -> GenerationSuccess | GenerationFailure:
    """Run one poster generation request end to end.

    Args:
        payload: Decoded JSON body, or ``None`` when the body was empty.
        provider: Image provider.  Called at most once, and never when
            validation fails.

    Returns:
        :class:`GenerationSuccess` with the image and composition metadata,
        or :class:`GenerationFailure` describing the first error hit.
    """
    try:
        request = validate_payload(payload)
        composed = build_prompt(request)
        steps = inference_steps(request.design_complexity)
        logger.debug("Composed prompt for '%s':\n%s", request.title, composed.prompt)

        image = _request_image(provider, composed, steps)

    except ValidationError as e:
        logger.warning("Rejected poster request (%s): %s", e.kind.value, e.message)
        return failure_from_error(e)

    except ProviderError as e:
        logger.error(
            "Poster generation failed (%s): %s",
            e.kind.value,
            e.message,
            exc_info=e.__cause__ is not None,
        )
        return failure_from_error(e)

    logger.info("Generated %dx%d poster '%s'.", composed.width, composed.height, request.title)
    return GenerationSuccess(
        image=image,
        metadata=PosterMetadata(
            width=composed.width,
            height=composed.height,
            steps=steps,
            prompt=composed.prompt,
            negative_prompt=composed.negative_prompt,
            title=request.title,
            orientation=request.orientation,
            theme=request.theme,
            purpose=request.purpose,
            size=request.size,
            model=provider.model,
        ),
    )
