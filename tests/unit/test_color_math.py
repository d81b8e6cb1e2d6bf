"""
Unit tests for the color palette synthesizer.
"""

from __future__ import annotations

import pytest

from vibesmith.core.errors import InvalidColorError
from vibesmith.harmony.color_math import (
    HSL,
    INDUSTRY_COLORS,
    Palette,
    PaletteMood,
    adjust_lightness,
    adjust_saturation,
    analogous,
    apply_vibe_modifier,
    contrast_ratio,
    contrast_text_color,
    ensure_contrast,
    generate_dark_palette,
    generate_palette,
    generate_palette_for_industry,
    generate_tinted_grays,
    hex_to_hsl,
    hsl_to_hex,
    normalize_hex,
    rotate_hue,
    split_complementary,
    triadic,
)

SEEDS = ["#1e5a8a", "#ff0000", "#00ff00", "#0000ff", "#808080", "#ffffff", "#000000", "#f59e0b"]


def _channels(color: str) -> tuple[int, int, int]:
    return int(color[1:3], 16), int(color[3:5], 16), int(color[5:7], 16)


def _hue_distance(a: float, b: float) -> float:
    diff = abs(a - b) % 360
    return min(diff, 360 - diff)


class TestConversions:
    """Tests for hex <-> HSL conversion."""

    @pytest.mark.parametrize("color", SEEDS + list(INDUSTRY_COLORS.values()))
    def test_round_trip_within_one_unit(self, color: str) -> None:
        original = _channels(color)
        restored = _channels(hsl_to_hex(hex_to_hsl(color)))
        for before, after in zip(original, restored, strict=True):
            assert abs(before - after) <= 1

    def test_achromatic_has_zero_saturation(self) -> None:
        hsl = hex_to_hsl("#808080")
        assert hsl.h == 0
        assert hsl.s == 0

    def test_pure_red(self) -> None:
        assert hex_to_hsl("#ff0000").rounded() == (0, 100, 50)

    def test_short_hex(self) -> None:
        assert normalize_hex("#ABC") == "#aabbcc"

    @pytest.mark.parametrize("bad", ["", "blue", "#12", "#gggggg", "#1234567"])
    def test_malformed_hex_raises(self, bad: str) -> None:
        with pytest.raises(InvalidColorError):
            hex_to_hsl(bad)


class TestTransforms:
    """Tests for channel transforms and clamping."""

    def test_rotate_hue_wraps(self) -> None:
        assert rotate_hue(HSL(350, 50, 50), 20).h == pytest.approx(10)
        assert rotate_hue(HSL(10, 50, 50), -20).h == pytest.approx(350)

    def test_saturation_clamped(self) -> None:
        assert adjust_saturation(HSL(0, 95, 50), 20).s == 100
        assert adjust_saturation(HSL(0, 5, 50), -20).s == 0

    def test_lightness_clamped(self) -> None:
        assert adjust_lightness(HSL(0, 50, 95), 20).l == 100
        assert adjust_lightness(HSL(0, 50, 5), -20).l == 0

    def test_tinted_grays_ramp(self) -> None:
        grays = generate_tinted_grays(210, 0.05)
        assert len(grays) == 10
        lightness = [hex_to_hsl(gray).l for gray in grays]
        assert lightness == sorted(lightness, reverse=True)

    def test_harmonies(self) -> None:
        assert len(analogous("#1e5a8a")) == 3
        assert len(triadic("#1e5a8a")) == 3
        assert len(split_complementary("#1e5a8a")) == 3


class TestContrast:
    """Tests for WCAG contrast helpers."""

    def test_black_on_white(self) -> None:
        assert contrast_ratio("#000000", "#ffffff") == pytest.approx(21.0)

    def test_ensure_contrast_keeps_passing_color(self) -> None:
        assert ensure_contrast("#111111", "#ffffff") == "#111111"

    def test_ensure_contrast_fixes_light_on_light(self) -> None:
        fixed = ensure_contrast("#dddddd", "#ffffff")
        assert contrast_ratio(fixed, "#ffffff") >= 4.5

    def test_ensure_contrast_lightens_on_dark(self) -> None:
        fixed = ensure_contrast("#333333", "#000000")
        assert contrast_ratio(fixed, "#000000") >= 4.5
        assert hex_to_hsl(fixed).l > hex_to_hsl("#333333").l

    def test_contrast_text_color(self) -> None:
        assert contrast_text_color("#ffffff") == "#000000"
        assert contrast_text_color("#1e5a8a") == "#ffffff"


class TestPalettes:
    """Tests for palette generation."""

    @pytest.mark.parametrize("seed", SEEDS)
    @pytest.mark.parametrize("mood", list(PaletteMood))
    def test_text_contrast(self, seed: str, mood: PaletteMood) -> None:
        for palette in (generate_palette(seed, mood), generate_dark_palette(seed, mood)):
            assert contrast_ratio(palette.text, palette.background) >= 4.5

    def test_muted_scenario(self) -> None:
        seed = hex_to_hsl("#1e5a8a")
        muted = generate_palette("#1e5a8a", "muted")
        vibrant = generate_palette("#1e5a8a", "vibrant")

        assert muted.primary == "#1e5a8a"
        assert muted == generate_palette("#1e5a8a", PaletteMood.MUTED)
        for role in ("secondary", "accent"):
            hsl = hex_to_hsl(getattr(muted, role))
            assert _hue_distance(hsl.h, seed.h) <= 31
            assert hsl.s < hex_to_hsl(getattr(vibrant, role)).s

    def test_monochrome_keeps_hue(self) -> None:
        seed = hex_to_hsl("#1e5a8a")
        palette = generate_palette("#1e5a8a", "monochrome")
        for role in ("secondary", "accent"):
            assert _hue_distance(hex_to_hsl(getattr(palette, role)).h, seed.h) <= 2

    def test_dark_palette_reuses_secondary_and_accent(self) -> None:
        light = generate_palette("#1e5a8a", "vibrant")
        dark = generate_dark_palette("#1e5a8a", "vibrant")
        assert dark.secondary == light.secondary
        assert dark.accent == light.accent
        assert hex_to_hsl(dark.background).l < 20

    def test_roles(self) -> None:
        palette = generate_palette("#1e5a8a")
        assert list(palette.roles()) == list(Palette.role_names())
        assert len(palette.grays) == 10

    def test_from_mapping_derives_ramp(self) -> None:
        palette = Palette.from_mapping(
            {
                "primary": "#123",
                "secondary": "#456",
                "accent": "#789",
                "background": "#fff",
                "text": "#000",
                "muted": "#666",
            }
        )
        assert palette.primary == "#112233"
        assert len(palette.grays) == 10

    def test_from_mapping_names_missing_roles(self) -> None:
        with pytest.raises(InvalidColorError, match="missing roles: accent, muted"):
            Palette.from_mapping(
                {
                    "primary": "#123",
                    "secondary": "#456",
                    "background": "#fff",
                    "text": "#000",
                }
            )


class TestIndustryPalettes:
    """Tests for industry seeds and vibe modulation."""

    def test_vibe_modifier_changes_seed(self) -> None:
        assert apply_vibe_modifier("#1e5a8a", "maverick") != "#1e5a8a"

    def test_unknown_vibe_leaves_seed(self) -> None:
        assert apply_vibe_modifier("#1E5A8A", "unknown") == "#1e5a8a"

    def test_modifier_clamps_lightness(self) -> None:
        assert 9.5 <= hex_to_hsl(apply_vibe_modifier("#fafafa", "minimalist")).l <= 90.5

    def test_same_industry_differs_by_vibe(self) -> None:
        executive = generate_palette_for_industry("plumber", vibe_id="executive")
        maverick = generate_palette_for_industry("plumber", vibe_id="maverick")
        assert executive.primary != maverick.primary

    def test_explicit_seed_wins(self) -> None:
        palette = generate_palette_for_industry("plumber", seed_color="#ff0000", vibe_id="unknown")
        assert palette.primary == "#ff0000"

    def test_dark_flag(self) -> None:
        palette = generate_palette_for_industry("plumber", dark=True)
        assert hex_to_hsl(palette.background).l < 20

    def test_unknown_industry_uses_default_seed(self) -> None:
        palette = generate_palette_for_industry("astronaut")
        assert palette.name == "astronaut palette"
