"""
Parallax scrolling for layered elements.

Layers move at ``scroll * speed + offset`` pixels on each animation frame.
Per-element speed and offset come from data attributes, clamped to the
configured speed range.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from vibesmith.sections.renderer import render_fragment

DEFAULT_CLASS_NAME = "parallax-layer"
DEFAULT_SPEED_ATTRIBUTE = "data-parallax-speed"
DEFAULT_OFFSET_ATTRIBUTE = "data-parallax-offset"
DEFAULT_SPEED = 0.2
DEFAULT_MIN_SPEED = -1.5
DEFAULT_MAX_SPEED = 1.5


@dataclass(frozen=True)
class ParallaxConfig:
    class_name: str = DEFAULT_CLASS_NAME
    speed: float = DEFAULT_SPEED
    min_speed: float = DEFAULT_MIN_SPEED
    max_speed: float = DEFAULT_MAX_SPEED
    offset: float = 0.0
    speed_attribute: str = DEFAULT_SPEED_ATTRIBUTE
    offset_attribute: str = DEFAULT_OFFSET_ATTRIBUTE
    prefer_reduced_motion: bool = True


def resolve_parallax_config(
    speed: float = DEFAULT_SPEED,
    min_speed: float = DEFAULT_MIN_SPEED,
    max_speed: float = DEFAULT_MAX_SPEED,
    offset: float = 0.0,
) -> ParallaxConfig:
    """Normalise the speed range (swapped bounds are reordered) and clamp the speed."""
    if not (math.isfinite(min_speed) and math.isfinite(max_speed)):
        min_speed, max_speed = DEFAULT_MIN_SPEED, DEFAULT_MAX_SPEED
    low, high = sorted((min_speed, max_speed))
    if not math.isfinite(speed):
        speed = DEFAULT_SPEED
    return ParallaxConfig(
        speed=min(high, max(low, speed)),
        min_speed=low,
        max_speed=high,
        offset=offset if math.isfinite(offset) else 0.0,
    )


def generate_parallax_css(config: ParallaxConfig | None = None) -> str:
    config = config or ParallaxConfig()
    selector = f".{config.class_name}"
    lines = [
        f"{selector} {{",
        "  transform: translate3d(0, 0, 0);",
        "  will-change: transform;",
        "  backface-visibility: hidden;",
        "}",
    ]
    if config.prefer_reduced_motion:
        lines += [
            "@media (prefers-reduced-motion: reduce) {",
            f"  {selector} {{ transform: none !important; will-change: auto; }}",
            "}",
        ]
    return "\n".join(lines)


def generate_parallax_script(config: ParallaxConfig | None = None) -> str:
    """Inline requestAnimationFrame loop (without the ``<script>`` tag)."""
    config = config or ParallaxConfig()
    return render_fragment(
        "scripts/parallax.js",
        selector=f".{config.class_name}",
        speed_attribute=config.speed_attribute,
        offset_attribute=config.offset_attribute,
        speed=config.speed,
        offset=config.offset,
        min_speed=config.min_speed,
        max_speed=config.max_speed,
        prefer_reduced_motion=config.prefer_reduced_motion,
    ).strip()
