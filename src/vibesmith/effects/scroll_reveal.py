"""
Scroll reveal effect.

Elements matching the selector start hidden and gain the visible class when
an IntersectionObserver sees them. The base class cancels any keyframe
entrance animation on the same element, so markup can carry both. Reduced
motion users get everything revealed up front.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import StrEnum

from vibesmith.sections.renderer import render_fragment

DEFAULT_CLASS_NAME = "scroll-reveal"
DEFAULT_DATA_ATTRIBUTE = "data-scroll-reveal"
DEFAULT_THRESHOLD = 0.15
DEFAULT_DURATION_MS = 600
DEFAULT_EASING = "cubic-bezier(0.2, 0.6, 0.2, 1)"
DEFAULT_DISTANCE = "24px"
DEFAULT_SCALE = 0.96


class RevealEffect(StrEnum):
    FADE = "fade"
    SLIDE = "slide"
    SCALE = "scale"


@dataclass(frozen=True)
class ScrollRevealConfig:
    class_name: str = DEFAULT_CLASS_NAME
    effect: RevealEffect = RevealEffect.FADE
    selector: str | None = None
    threshold: float = DEFAULT_THRESHOLD
    root_margin: str = "0px"
    duration_ms: int = DEFAULT_DURATION_MS
    easing: str = DEFAULT_EASING
    distance: str = DEFAULT_DISTANCE
    scale: float = DEFAULT_SCALE
    once: bool = True
    data_attribute: str = DEFAULT_DATA_ATTRIBUTE
    prefer_reduced_motion: bool = True

    @property
    def visible_class_name(self) -> str:
        return f"{self.class_name}--visible"

    @property
    def resolved_selector(self) -> str:
        return self.selector or f".{self.class_name}"


def _clamp(value: float, low: float, high: float) -> float:
    if not math.isfinite(value):
        return low
    return min(high, max(low, value))


def resolve_scroll_reveal_config(
    effect: RevealEffect | str = RevealEffect.FADE,
    duration_ms: int = DEFAULT_DURATION_MS,
    threshold: float = DEFAULT_THRESHOLD,
    scale: float = DEFAULT_SCALE,
) -> ScrollRevealConfig:
    """Normalise user options: unknown effects fall back to fade, ranges are clamped."""
    try:
        resolved_effect = RevealEffect(effect)
    except ValueError:
        resolved_effect = RevealEffect.FADE
    return ScrollRevealConfig(
        effect=resolved_effect,
        duration_ms=max(0, int(duration_ms)),
        threshold=_clamp(threshold, 0.0, 1.0),
        scale=_clamp(scale, 0.5, 1.0),
    )


def generate_scroll_reveal_css(config: ScrollRevealConfig | None = None) -> str:
    config = config or ScrollRevealConfig()
    base = f".{config.class_name}"
    visible = f".{config.visible_class_name}"
    lines = [
        f"{base} {{",
        "  animation: none;",
        "  opacity: 0;",
        "  transform: none;",
        "  transition-property: opacity, transform;",
        f"  transition-duration: {config.duration_ms}ms;",
        f"  transition-timing-function: {config.easing};",
        "  will-change: opacity, transform;",
        "}",
        f"{base}--fade {{ transform: none; }}",
        f"{base}--slide {{ transform: translateY({config.distance}); }}",
        f"{base}--scale {{ transform: scale({config.scale}); }}",
        f"{visible} {{ opacity: 1; transform: none; }}",
    ]
    if config.prefer_reduced_motion:
        lines += [
            "@media (prefers-reduced-motion: reduce) {",
            f"  {base}, {visible} {{ opacity: 1; transform: none; transition: none; }}",
            "}",
        ]
    return "\n".join(lines)


def generate_scroll_reveal_script(config: ScrollRevealConfig | None = None) -> str:
    """Inline activation script (without the ``<script>`` tag)."""
    config = config or ScrollRevealConfig()
    return render_fragment(
        "scripts/scroll_reveal.js",
        selector=config.resolved_selector,
        base_class=config.class_name,
        visible_class=config.visible_class_name,
        data_attribute=config.data_attribute,
        default_effect=str(config.effect),
        effect_prefix=f"{config.class_name}--",
        effects=[str(effect) for effect in RevealEffect],
        once=config.once,
        threshold=config.threshold,
        root_margin=config.root_margin,
        prefer_reduced_motion=config.prefer_reduced_motion,
    ).strip()
