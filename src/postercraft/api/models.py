"""Pydantic request and response models for the Poster Generator API.

These models define the JSON schema for every API endpoint.  Request bodies
use the browser form's camelCase field names (``colorScheme``,
``designComplexity`` ...) while Python code uses snake_case attributes.

Models
------
PosterRequest
    Design parameters for ``POST /api/generate`` and
    ``POST /api/prompt/compile``.
PosterMetadata
    Composition details echoed back with a generated poster.
GenerationSuccess / GenerationFailure
    The two shapes of a generation result.
CompiledPrompt
    Response of ``POST /api/prompt/compile``.
ApiInfo
    Response of the ``GET /api/generate`` discovery endpoint.
"""

from __future__ import annotations

from typing import Literal, get_args

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr
from pydantic.alias_generators import to_camel

Theme = Literal["professional", "creative", "minimal", "bold", "elegant"]
Purpose = Literal["event", "promotion", "announcement", "advertisement", "educational"]
ColorScheme = Literal["auto", "vibrant", "pastel", "monochrome", "dark", "light"]
TypographyStyle = Literal["modern", "classic", "playful", "elegant", "bold"]
ImageStyle = Literal["photo", "illustration", "abstract", "minimal", "none"]
Orientation = Literal["portrait", "landscape", "square"]
PosterSize = Literal["standard", "a4", "a3", "social", "custom"]

# Recognized values per enum field, keyed by JSON field name.
ENUM_VALUES: dict[str, tuple[str, ...]] = {
    "theme": get_args(Theme),
    "purpose": get_args(Purpose),
    "colorScheme": get_args(ColorScheme),
    "typographyStyle": get_args(TypographyStyle),
    "imageStyle": get_args(ImageStyle),
    "orientation": get_args(Orientation),
    "size": get_args(PosterSize),
}


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PosterRequest(_CamelModel):
    """Request body describing the poster to generate.

    Optional fields default to the values the browser form starts with, so a
    partial body behaves exactly like an untouched form.

    Attributes:
        title: Poster headline.  Quoted verbatim in the prompt.
        description: Supporting copy.  Quoted verbatim in the prompt.
        theme: Overall visual theme.
        purpose: What the poster is for.
        color_scheme: Palette preference.  ``"auto"`` lets the composer
            derive the palette from theme and purpose.
        typography_style: Lettering style.
        image_style: Kind of imagery, or ``"none"`` for text-only designs.
        design_complexity: 0 (minimal) to 100 (rich).  Drives both the
            complexity descriptor and the inference step count.
        ai_enhancement: Adds a design-optimisation directive to the prompt.
        orientation: Page orientation; sets the base dimensions.
        size: Page size; ``social``, ``a4`` and ``a3`` override the
            orientation dimensions.
        tags: Free-text keywords.  Omitted from the prompt when empty.
    """

    title: StrictStr = Field(..., min_length=1, description="Poster title.")
    description: StrictStr = Field(..., min_length=1, description="Poster description.")
    theme: Theme = Field(default="professional", description="Visual theme.")
    purpose: Purpose = Field(default="event", description="Poster purpose.")
    color_scheme: ColorScheme = Field(default="auto", description="Colour scheme.")
    typography_style: TypographyStyle = Field(default="modern", description="Typography style.")
    image_style: ImageStyle = Field(default="photo", description="Image style.")
    design_complexity: int = Field(
        default=50,
        ge=0,
        le=100,
        description="Design complexity from 0 (simple) to 100 (complex).",
    )
    ai_enhancement: StrictBool = Field(
        default=True,
        description="Add the design-optimisation directive to the prompt.",
    )
    orientation: Orientation = Field(default="portrait", description="Page orientation.")
    size: PosterSize = Field(default="standard", description="Page size preset.")
    tags: StrictStr = Field(default="", description="Optional free-text keywords.")


class PosterMetadata(_CamelModel):
    """Composition details returned alongside a generated image."""

    width: int
    height: int
    steps: int
    prompt: str
    negative_prompt: str
    title: str
    orientation: str
    theme: str
    purpose: str
    size: str
    model: str


class GenerationSuccess(BaseModel):
    """Successful generation: the image plus its composition metadata.

    Attributes:
        success: Always ``True``.
        image: Base64-encoded image bytes as returned by the provider.
        metadata: Dimensions, step count and prompts used for the image.
    """

    success: Literal[True] = True
    image: str
    metadata: PosterMetadata


class GenerationFailure(BaseModel):
    """Failed generation.

    Attributes:
        success: Always ``False``.
        error: Short summary (``"Invalid poster request"`` or
            ``"Failed to generate poster"``).
        message: Human-readable detail.
        kind: Machine-readable error kind.
        field: JSON name of the offending field, when there is one.
    """

    success: Literal[False] = False
    error: str
    message: str
    kind: str
    field: str | None = None


class CompiledPrompt(_CamelModel):
    """Preview of the prompt and settings a request would be sent with."""

    prompt: str
    negative_prompt: str
    width: int
    height: int
    steps: int


class ApiInfo(BaseModel):
    """Self-description served by ``GET /api/generate``."""

    name: str
    description: str
    version: str
    endpoints: dict[str, dict]
