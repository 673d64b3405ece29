"""Tests for postercraft.api.prompt_builder — prompt composition.

Tests cover:
- Dimension selection from orientation and size.
- Complexity bucketing and inference step count thresholds.
- Descriptor lines, optional lines, and the colour fallback.
- Deterministic output for identical requests.
"""

from __future__ import annotations

import pytest

from postercraft.api.models import PosterRequest
from postercraft.api.prompt_builder import (
    AI_ENHANCEMENT_DIRECTIVE,
    COLOR_SCHEME_DESCRIPTORS,
    NEGATIVE_PROMPT,
    PHOTOREALISM_DIRECTIVE,
    TYPOGRAPHY_DESCRIPTORS,
    build_prompt,
    complexity_level,
    inference_steps,
    select_dimensions,
)


def _request(**overrides) -> PosterRequest:
    fields = {"title": "Spring Fair", "description": "Crafts and food on the green"}
    fields.update(overrides)
    return PosterRequest(**fields)


class TestSelectDimensions:
    """Test select_dimensions()."""

    @pytest.mark.parametrize(
        "orientation, expected",
        [
            ("portrait", (768, 1024)),
            ("landscape", (1024, 768)),
            ("square", (1024, 1024)),
        ],
    )
    def test_orientation_defaults(self, orientation, expected):
        """standard and custom sizes keep the orientation dimensions."""
        assert select_dimensions(orientation, "standard") == expected
        assert select_dimensions(orientation, "custom") == expected

    @pytest.mark.parametrize("orientation", ["portrait", "landscape", "square"])
    def test_fixed_sizes_override_orientation(self, orientation):
        """social, a4 and a3 ignore the orientation."""
        assert select_dimensions(orientation, "social") == (1080, 1080)
        assert select_dimensions(orientation, "a4") == (794, 1123)
        assert select_dimensions(orientation, "a3") == (1123, 1587)


class TestComplexity:
    """Test complexity_level() and inference_steps()."""

    def test_bucket_boundaries(self):
        assert complexity_level(0) == "simple"
        assert complexity_level(33) == "simple"
        assert complexity_level(34) == "moderate"
        assert complexity_level(66) == "moderate"
        assert complexity_level(67) == "complex"
        assert complexity_level(100) == "complex"

    def test_step_threshold(self):
        """Steps jump from 28 to 32 strictly above 70."""
        assert inference_steps(0) == 28
        assert inference_steps(70) == 28
        assert inference_steps(71) == 32
        assert inference_steps(100) == 32


class TestBuildPrompt:
    """Test build_prompt()."""

    def test_title_and_description_quoted(self):
        composed = build_prompt(_request())
        assert '- Title: "Spring Fair"' in composed.prompt
        assert '- Description: "Crafts and food on the green"' in composed.prompt

    def test_tags_line_only_when_tags_present(self):
        assert "Key themes/tags" not in build_prompt(_request()).prompt
        assert "Key themes/tags" not in build_prompt(_request(tags="   ")).prompt
        composed = build_prompt(_request(tags="crafts, food"))
        assert "- Key themes/tags: crafts, food" in composed.prompt

    def test_tags_emitted_verbatim(self):
        composed = build_prompt(_request(tags=" crafts ,food "))
        assert "- Key themes/tags:  crafts ,food \n" in composed.prompt

    def test_auto_colour_scheme_uses_theme_purpose_fallback(self):
        composed = build_prompt(_request(theme="bold", purpose="promotion", color_scheme="auto"))
        assert "- Color scheme: colors appropriate for bold promotion design" in composed.prompt

    def test_explicit_colour_scheme_descriptor(self):
        composed = build_prompt(_request(color_scheme="pastel"))
        assert f"- Color scheme: {COLOR_SCHEME_DESCRIPTORS['pastel']}" in composed.prompt
        assert "colors appropriate for" not in composed.prompt

    def test_ai_enhancement_directive_toggles(self):
        assert AI_ENHANCEMENT_DIRECTIVE in build_prompt(_request(ai_enhancement=True)).prompt
        assert AI_ENHANCEMENT_DIRECTIVE not in build_prompt(_request(ai_enhancement=False)).prompt

    @pytest.mark.parametrize(
        "orientation, line",
        [
            ("portrait", "- Portrait composition with vertical emphasis"),
            ("landscape", "- Landscape composition with horizontal emphasis"),
            ("square", "- Square composition with balanced layout"),
        ],
    )
    def test_orientation_composition_line(self, orientation, line):
        composed = build_prompt(_request(orientation=orientation))
        assert line in composed.prompt
        assert f"- Orientation: {orientation} format poster" in composed.prompt

    def test_complexity_descriptor_and_summary(self):
        composed = build_prompt(_request(design_complexity=10))
        assert "- Design complexity: clean minimalist design" in composed.prompt
        assert "and simple design complexity." in composed.prompt

    def test_ends_with_photorealism_directive(self):
        composed = build_prompt(_request())
        assert composed.prompt.endswith(PHOTOREALISM_DIRECTIVE)
        assert composed.prompt == composed.prompt.strip()

    def test_no_blank_placeholder_lines(self):
        """Omitted optional lines leave no empty bullet or triple newline."""
        composed = build_prompt(_request(tags="", ai_enhancement=False))
        assert "\n\n\n" not in composed.prompt
        assert "- \n" not in composed.prompt

    def test_no_descriptor_line_repeated(self):
        composed = build_prompt(_request(tags="x", ai_enhancement=True))
        bullet_lines = [line for line in composed.prompt.splitlines() if line.startswith("- ")]
        assert len(bullet_lines) == len(set(bullet_lines))

    def test_negative_prompt_is_fixed(self):
        assert build_prompt(_request()).negative_prompt == NEGATIVE_PROMPT
        assert build_prompt(_request(theme="creative")).negative_prompt == NEGATIVE_PROMPT
        assert "poor typography" in NEGATIVE_PROMPT

    def test_composition_is_deterministic(self):
        request = _request(tags="a,b", design_complexity=42, size="a4")
        assert build_prompt(request) == build_prompt(request)

    def test_jazz_night_scenario(self, poster_payload):
        request = PosterRequest.model_validate(poster_payload)
        composed = build_prompt(request)

        assert (composed.width, composed.height) == (1024, 768)
        assert inference_steps(request.design_complexity) == 32
        assert "Jazz Night" in composed.prompt
        assert "Live jazz every Friday" in composed.prompt
        assert COLOR_SCHEME_DESCRIPTORS["dark"] in composed.prompt
        assert TYPOGRAPHY_DESCRIPTORS["classic"] in composed.prompt
        assert AI_ENHANCEMENT_DIRECTIVE in composed.prompt
        assert "- Key themes/tags: music,live" in composed.prompt
        assert composed.negative_prompt == NEGATIVE_PROMPT
