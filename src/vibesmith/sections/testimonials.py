"""
Testimonial variants: grid, a single featured quote, and a scroll-snap slider.
"""

from __future__ import annotations

from vibesmith.core.genes import GeneCategory
from vibesmith.engine.layout_resolver import generate_layout_css, resolve_testimonials_layout
from vibesmith.engine.section_registry import (
    RenderFn,
    SectionCategory,
    SectionConfig,
    SectionOutput,
    SectionVariant,
)
from vibesmith.sections.renderer import render_section

_SHARED_CSS = [
    ".testimonials { background: var(--gray-50); }",
    ".testimonial blockquote { font-size: 18px; line-height: 1.7; margin: 12px 0 20px; }",
    ".testimonial cite { font-style: normal; font-weight: 600; }",
    ".stars { color: #f59e0b; letter-spacing: 2px; }",
]

_STYLE_CSS: dict[str, list[str]] = {
    "grid": [],
    "featured": [
        ".testimonial-featured { text-align: center; max-width: 820px; margin: 0 auto 48px; }",
        ".testimonial-featured blockquote { font-family: var(--font-heading); font-size: clamp(22px, 3vw, 32px); }",
    ],
    "slider": [
        ".testimonial-track { display: flex; gap: 24px; overflow-x: auto; scroll-snap-type: x mandatory; padding-bottom: 16px; }",
        ".testimonial-track > .testimonial { flex: 0 0 min(420px, 85%); scroll-snap-align: start; }",
    ],
}


def _testimonials_renderer(style: str) -> RenderFn:
    def render(config: SectionConfig) -> SectionOutput:
        testimonials = list(config.content.get("testimonials", []))
        featured = testimonials[0] if style == "featured" and testimonials else None
        rest = testimonials[1:] if featured else testimonials

        css = list(_SHARED_CSS) + _STYLE_CSS[style]
        layout = None
        if style != "slider" and rest:
            layout = resolve_testimonials_layout(len(rest), config.dna, config.chaos)
            css.insert(0, generate_layout_css(layout))

        html = render_section(
            "sections/testimonials.html",
            config,
            style=style,
            featured=featured,
            testimonials=rest,
            layout=layout,
        )
        return SectionOutput(html, "\n".join(css))

    return render


def _variant(
    id: str, name: str, layout: str, style: str, chaos_range: tuple[float, float]
) -> SectionVariant:
    return SectionVariant(
        id=id,
        name=name,
        category=SectionCategory.TESTIMONIALS,
        render=_testimonials_renderer(style),
        dna_match={GeneCategory.LAYOUT: layout},
        chaos_range=chaos_range,
        priority=1,
    )


VARIANTS: list[SectionVariant] = [
    _variant("testimonials-grid", "Testimonial Grid", "L3", "grid", (0.0, 0.5)),
    _variant("testimonials-featured", "Featured Testimonial", "L5", "featured", (0.0, 0.3)),
    _variant("testimonials-slider", "Testimonial Slider", "L12", "slider", (0.3, 0.7)),
]
