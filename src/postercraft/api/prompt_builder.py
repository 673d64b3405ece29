"""Poster prompt composition.

Turns a validated :class:`~postercraft.api.models.PosterRequest` into the
text prompt, negative prompt, pixel dimensions and inference step count
sent to the image provider.  Everything here is a pure function of the
request: composing the same request twice yields identical output.

Prompt Structure
----------------
::

    Create an eye-catching [theme] poster design for [purpose] purposes.

    POSTER CONTENT:
    - Title: "[title]"
    - Description: "[description]"
    - Key themes/tags: [tags]                      (only when tags given)

    VISUAL STYLE:
    - Overall theme: [theme descriptor]
    - Purpose-specific style: [purpose descriptor]
    - Image style: [image style descriptor]
    - Color scheme: [colour descriptor or theme/purpose fallback]
    - Typography: [typography descriptor]
    - Design complexity: [complexity descriptor]
    - Orientation: [orientation] format poster
    - [orientation composition line]
    - [AI enhancement directive]                   (only when enabled)

    Create a visually striking [purpose] poster ... [title] ... [typography].

    This should be a photorealistic render of a poster, ...

Optional lines are dropped entirely rather than left blank.

Usage
-----
::

    composed = build_prompt(request)
    steps = inference_steps(request.design_complexity)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from postercraft.api.models import PosterRequest

# ---------------------------------------------------------------------------
# Descriptor tables.
# ---------------------------------------------------------------------------

THEME_DESCRIPTORS: dict[str, str] = {
    "professional": "sleek, corporate, polished, sophisticated, structured",
    "creative": "artistic, imaginative, vibrant, expressive, dynamic",
    "minimal": "clean, simple, uncluttered, elegant, refined",
    "bold": "striking, dramatic, impactful, confident, powerful",
    "elegant": "graceful, sophisticated, tasteful, refined, delicate",
}

PURPOSE_DESCRIPTORS: dict[str, str] = {
    "event": "engaging, time-specific, celebratory, organized",
    "promotion": "persuasive, attention-grabbing, value-focused",
    "announcement": "clear, informative, eye-catching",
    "advertisement": "compelling, brand-focused, benefit-highlighting",
    "educational": "informative, structured, clear, organized",
}

# "auto" is empty on purpose: the composer falls back to a theme/purpose phrase.
COLOR_SCHEME_DESCRIPTORS: dict[str, str] = {
    "auto": "",
    "vibrant": "vibrant, high contrast, rich, saturated colors",
    "pastel": "soft, soothing pastel colors, gentle palette",
    "monochrome": "sophisticated monochromatic color scheme, variations of a single hue",
    "dark": "dark background, rich deep tones, dramatic lighting",
    "light": "light background, bright airy feel, crisp clean look",
}

TYPOGRAPHY_DESCRIPTORS: dict[str, str] = {
    "modern": "contemporary typography, clean sans-serif fonts, balanced sizing hierarchy",
    "classic": "traditional typography, elegant serif fonts, refined text layout",
    "playful": "fun varied typography, decorative fonts, dynamic text arrangement",
    "elegant": "sophisticated typography, refined fonts, graceful text placement",
    "bold": "strong impactful typography, heavy font weights, prominent text sizing",
}

IMAGE_STYLE_DESCRIPTORS: dict[str, str] = {
    "photo": "photographic elements, realistic imagery, high-quality photographs",
    "illustration": "illustrated elements, artistic drawings, hand-crafted graphic style",
    "abstract": "abstract geometric shapes, non-representational visual elements",
    "minimal": "simple iconic visuals, restrained use of imagery, essential elements only",
    "none": "typography-focused design, text-only layout, no imagery",
}

COMPLEXITY_DESCRIPTORS: dict[str, str] = {
    "simple": "clean minimalist design, essential elements only, uncluttered layout",
    "moderate": "balanced design with thoughtful elements, refined layout",
    "complex": "detailed rich design, sophisticated composition, multiple integrated elements",
}

COMPOSITION_LINES: dict[str, str] = {
    "portrait": "Portrait composition with vertical emphasis",
    "landscape": "Landscape composition with horizontal emphasis",
    "square": "Square composition with balanced layout",
}

AI_ENHANCEMENT_DIRECTIVE = (
    "Optimize the visual balance, color harmony, and overall design impact. "
    "Use advanced design principles to enhance aesthetic appeal."
)

PHOTOREALISM_DIRECTIVE = (
    "This should be a photorealistic render of a poster, not a cartoon or "
    "illustration of a poster."
)

NEGATIVE_PROMPT = (
    "poorly designed, amateurish, unreadable text, distorted, low quality, blurry, "
    "bad composition, poor typography, cluttered design, pixelated, unappealing colors, "
    "unprofessional, childish"
)

# ---------------------------------------------------------------------------
# Dimensions and steps.
# ---------------------------------------------------------------------------

ORIENTATION_DIMENSIONS: dict[str, tuple[int, int]] = {
    "portrait": (768, 1024),
    "landscape": (1024, 768),
    "square": (1024, 1024),
}

# Page sizes with fixed pixel dimensions.  "standard" and "custom" are absent
# and keep the orientation dimensions.
SIZE_DIMENSIONS: dict[str, tuple[int, int]] = {
    "social": (1080, 1080),
    "a4": (794, 1123),
    "a3": (1123, 1587),
}

DEFAULT_STEPS = 28
HIGH_DETAIL_STEPS = 32
HIGH_DETAIL_THRESHOLD = 70

ComplexityLevel = Literal["simple", "moderate", "complex"]


@dataclass(frozen=True)
class ComposedPrompt:
    """Provider-ready prompt and dimensions for one poster request."""

    prompt: str
    negative_prompt: str
    width: int
    height: int


def select_dimensions(orientation: str, size: str) -> tuple[int, int]:
    """Return ``(width, height)`` in pixels for an orientation and page size.

    A fixed page size (``social``, ``a4``, ``a3``) wins over the orientation.
    """
    if size in SIZE_DIMENSIONS:
        return SIZE_DIMENSIONS[size]
    return ORIENTATION_DIMENSIONS[orientation]


def complexity_level(design_complexity: int) -> ComplexityLevel:
    """Bucket a 0-100 complexity value into simple, moderate or complex."""
    if design_complexity <= 33:
        return "simple"
    if design_complexity <= 66:
        return "moderate"
    return "complex"


def inference_steps(design_complexity: int) -> int:
    """Number of provider inference steps for a complexity value."""
    if design_complexity > HIGH_DETAIL_THRESHOLD:
        return HIGH_DETAIL_STEPS
    return DEFAULT_STEPS


def build_prompt(request: PosterRequest) -> ComposedPrompt:
    """Compose the provider prompt for a poster request.

    Args:
        request: Validated poster parameters.

    Returns:
        The trimmed prompt text, the fixed negative prompt and the pixel
        dimensions selected from orientation and size.
    """
    theme = request.theme
    purpose = request.purpose
    level = complexity_level(request.design_complexity)

    color_descriptor = COLOR_SCHEME_DESCRIPTORS[request.color_scheme] or (
        f"colors appropriate for {theme} {purpose} design"
    )

    content_lines = [
        "POSTER CONTENT:",
        f'- Title: "{request.title}"',
        f'- Description: "{request.description}"',
    ]
    if request.tags.strip():
        content_lines.append(f"- Key themes/tags: {request.tags}")

    style_lines = [
        "VISUAL STYLE:",
        f"- Overall theme: {THEME_DESCRIPTORS[theme]}",
        f"- Purpose-specific style: {PURPOSE_DESCRIPTORS[purpose]}",
        f"- Image style: {IMAGE_STYLE_DESCRIPTORS[request.image_style]}",
        f"- Color scheme: {color_descriptor}",
        f"- Typography: {TYPOGRAPHY_DESCRIPTORS[request.typography_style]}",
        f"- Design complexity: {COMPLEXITY_DESCRIPTORS[level]}",
        f"- Orientation: {request.orientation} format poster",
        f"- {COMPOSITION_LINES[request.orientation]}",
    ]
    if request.ai_enhancement:
        style_lines.append(f"- {AI_ENHANCEMENT_DIRECTIVE}")

    summary = (
        f"Create a visually striking {purpose} poster with professional design elements, "
        f"clear information hierarchy, and {level} design complexity. "
        f'The title "{request.title}" should be prominently displayed with '
        f"{request.typography_style} typography."
    )

    sections = [
        f"Create an eye-catching {theme} poster design for {purpose} purposes.",
        "\n".join(content_lines),
        "\n".join(style_lines),
        summary,
        PHOTOREALISM_DIRECTIVE,
    ]

    width, height = select_dimensions(request.orientation, request.size)
    return ComposedPrompt(
        prompt="\n\n".join(sections).strip(),
        negative_prompt=NEGATIVE_PROMPT,
        width=width,
        height=height,
    )
