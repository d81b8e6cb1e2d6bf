"""
About section variants.
"""

from __future__ import annotations

from vibesmith.core.genes import GeneCategory
from vibesmith.core.thresholds import MOBILE_BREAKPOINT_PX
from vibesmith.engine.section_registry import (
    RenderFn,
    SectionCategory,
    SectionConfig,
    SectionOutput,
    SectionVariant,
)
from vibesmith.sections.renderer import render_section

_STYLE_CSS: dict[str, list[str]] = {
    "split": [
        ".about-split .about-inner { display: grid; grid-template-columns: 1fr 1fr; gap: 56px; align-items: center; }",
        ".about-mark { aspect-ratio: 4 / 3; display: grid; place-items: center; background: var(--gray-100); color: var(--primary); font-family: var(--font-heading); font-size: 64px; }",
        f"@media (max-width: {MOBILE_BREAKPOINT_PX}px) {{",
        "  .about-split .about-inner { grid-template-columns: 1fr; }",
        "  .about-mark { display: none; }",
        "}",
    ],
    "centered": [
        ".about-centered .about-inner { max-width: 720px; margin: 0 auto; text-align: center; }",
    ],
    "offset": [
        ".about-offset { background: var(--gray-50); }",
        ".about-offset .about-inner { max-width: 820px; margin-left: 12%; padding-left: 32px; border-left: 6px solid var(--accent); }",
        f"@media (max-width: {MOBILE_BREAKPOINT_PX}px) {{",
        "  .about-offset .about-inner { margin-left: 0; }",
        "}",
    ],
}

_SHARED_CSS = [
    ".about-lead { font-size: 20px; font-weight: 500; margin-bottom: 16px; }",
    ".about-body { color: var(--muted); font-size: 17px; }",
]


def _about_renderer(style: str) -> RenderFn:
    def render(config: SectionConfig) -> SectionOutput:
        content = config.content
        html = render_section(
            "sections/about.html",
            config,
            style=style,
            tagline=content.get("tagline"),
            description=content.get("description"),
        )
        return SectionOutput(html, "\n".join(_STYLE_CSS[style] + _SHARED_CSS))

    return render


VARIANTS: list[SectionVariant] = [
    SectionVariant(
        id="about-split",
        name="Story with Mark",
        category=SectionCategory.ABOUT,
        render=_about_renderer("split"),
        dna_match={GeneCategory.LAYOUT: "L1"},
        chaos_range=(0.0, 0.5),
        priority=1,
    ),
    SectionVariant(
        id="about-centered",
        name="Centred Story",
        category=SectionCategory.ABOUT,
        render=_about_renderer("centered"),
        dna_match={GeneCategory.DESIGN: "D4"},
        chaos_range=(0.0, 0.3),
        priority=1,
    ),
    SectionVariant(
        id="about-offset",
        name="Offset Story",
        category=SectionCategory.ABOUT,
        render=_about_renderer("offset"),
        dna_match={GeneCategory.LAYOUT: "L7"},
        chaos_range=(0.5, 1.0),
        priority=1,
    ),
]
