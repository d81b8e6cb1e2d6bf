"""
Unit tests for the scroll reveal, parallax and texture overlay effects.
"""

from __future__ import annotations

import math

import pytest

from vibesmith.effects.parallax import (
    ParallaxConfig,
    generate_parallax_css,
    generate_parallax_script,
    resolve_parallax_config,
)
from vibesmith.effects.scroll_reveal import (
    RevealEffect,
    ScrollRevealConfig,
    generate_scroll_reveal_css,
    generate_scroll_reveal_script,
    resolve_scroll_reveal_config,
)
from vibesmith.effects.texture_overlays import (
    TextureOverlayType,
    generate_texture_overlay_css,
    resolve_texture_overlay,
    svg_to_data_uri,
)


class TestScrollReveal:
    """Tests for scroll reveal configuration, CSS and script."""

    def test_defaults(self) -> None:
        config = ScrollRevealConfig()
        assert config.visible_class_name == "scroll-reveal--visible"
        assert config.resolved_selector == ".scroll-reveal"

    def test_custom_selector(self) -> None:
        config = ScrollRevealConfig(selector="[data-scroll-reveal]")
        assert config.resolved_selector == "[data-scroll-reveal]"

    @pytest.mark.parametrize(
        ("effect", "expected"),
        [("slide", RevealEffect.SLIDE), ("scale", RevealEffect.SCALE), ("spin", RevealEffect.FADE)],
    )
    def test_effect_resolution(self, effect: str, expected: RevealEffect) -> None:
        assert resolve_scroll_reveal_config(effect).effect is expected

    def test_ranges_are_clamped(self) -> None:
        config = resolve_scroll_reveal_config(
            duration_ms=-50, threshold=3.0, scale=0.1
        )
        assert config.duration_ms == 0
        assert config.threshold == 1.0
        assert config.scale == 0.5

    def test_non_finite_threshold(self) -> None:
        assert resolve_scroll_reveal_config(threshold=math.nan).threshold == 0.0

    def test_css(self) -> None:
        css = generate_scroll_reveal_css(ScrollRevealConfig(duration_ms=800))
        assert ".scroll-reveal {" in css
        assert "  animation: none;" in css
        assert "transition-duration: 800ms;" in css
        assert ".scroll-reveal--slide { transform: translateY(24px); }" in css
        assert "prefers-reduced-motion" in css

    def test_css_without_reduced_motion(self) -> None:
        css = generate_scroll_reveal_css(ScrollRevealConfig(prefer_reduced_motion=False))
        assert "prefers-reduced-motion" not in css

    def test_script(self) -> None:
        script = generate_scroll_reveal_script(
            ScrollRevealConfig(selector="[data-scroll-reveal]")
        )
        assert '"[data-scroll-reveal]"' in script
        assert "IntersectionObserver" in script
        assert "<script" not in script


class TestParallax:
    """Tests for parallax configuration, CSS and script."""

    def test_speed_clamped(self) -> None:
        assert resolve_parallax_config(speed=4.0).speed == 1.5
        assert resolve_parallax_config(speed=-4.0).speed == -1.5

    def test_swapped_bounds(self) -> None:
        config = resolve_parallax_config(speed=0.5, min_speed=1.0, max_speed=-1.0)
        assert (config.min_speed, config.max_speed) == (-1.0, 1.0)
        assert config.speed == 0.5

    def test_non_finite_values(self) -> None:
        config = resolve_parallax_config(speed=math.inf, offset=math.nan, min_speed=math.nan)
        assert config.speed == 0.2
        assert config.offset == 0.0
        assert (config.min_speed, config.max_speed) == (-1.5, 1.5)

    def test_css(self) -> None:
        css = generate_parallax_css()
        assert ".parallax-layer {" in css
        assert "will-change: transform;" in css
        assert "prefers-reduced-motion" in css

    def test_script(self) -> None:
        script = generate_parallax_script(ParallaxConfig(class_name="layer"))
        assert '".layer"' in script
        assert "requestAnimationFrame" in script
        assert '"data-parallax-speed"' in script


class TestTextureOverlays:
    """Tests for the page texture overlay."""

    def test_data_uri(self) -> None:
        uri = svg_to_data_uri("<svg   xmlns='x'>\n  <rect/>\n</svg>")
        assert uri.startswith("data:image/svg+xml,")
        assert "%0A" not in uri
        assert " " not in uri

    @pytest.mark.parametrize(
        ("vibe_id", "texture"),
        [
            ("maverick", TextureOverlayType.NOISE),
            ("executive", TextureOverlayType.PAPER),
            ("friendly", TextureOverlayType.FABRIC),
            ("unknown", TextureOverlayType.GRAIN),
            (None, TextureOverlayType.GRAIN),
        ],
    )
    def test_vibe_selection(self, vibe_id: str | None, texture: TextureOverlayType) -> None:
        assert resolve_texture_overlay(vibe_id).type is texture

    def test_opacity_scaled_by_vibe(self) -> None:
        assert resolve_texture_overlay("minimal").opacity == pytest.approx(0.032)

    def test_explicit_arguments_win(self) -> None:
        selection = resolve_texture_overlay("maverick", texture="paper", opacity=2.0)
        assert selection.type is TextureOverlayType.PAPER
        assert selection.opacity == 1.0

    def test_css(self) -> None:
        css = generate_texture_overlay_css("bold", class_name="page-texture")
        assert ".page-texture::before {" in css
        assert "position: fixed;" in css
        assert "mix-blend-mode: soft-light;" in css
        assert "pointer-events: none;" in css
