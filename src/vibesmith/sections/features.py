"""
"Why choose us" feature list variants.
"""

from __future__ import annotations

from vibesmith.core.genes import GeneCategory
from vibesmith.engine.section_registry import (
    RenderFn,
    SectionCategory,
    SectionConfig,
    SectionOutput,
    SectionVariant,
)
from vibesmith.sections.renderer import render_section

_CSS = [
    ".features-list { display: grid; grid-template-columns: repeat(auto-fit, minmax(220px, 1fr)); gap: 16px; list-style: none; }",
    ".feature { display: flex; gap: 12px; align-items: center; padding: 20px; font-weight: 500; }",
    ".feature-mark { flex: none; width: 32px; height: 32px; display: grid; place-items: center; border-radius: 50%; background: var(--primary); color: var(--on-primary); font-size: 14px; }",
]

_ICONS_CSS = [
    ".features-icons .feature { flex-direction: column; text-align: center; padding: 32px 20px; }",
    ".features-icons .feature-mark { width: 56px; height: 56px; border-radius: var(--radius-md); font-size: 20px; font-family: var(--font-heading); }",
]


def _features_renderer(style: str) -> RenderFn:
    def render(config: SectionConfig) -> SectionOutput:
        html = render_section(
            "sections/features.html",
            config,
            style=style,
            features=list(config.content.get("features", [])),
        )
        css = [*_CSS, *_ICONS_CSS] if style == "icons" else _CSS
        return SectionOutput(html, "\n".join(css))

    return render


VARIANTS: list[SectionVariant] = [
    SectionVariant(
        id="features-checklist",
        name="Checklist",
        category=SectionCategory.FEATURES,
        render=_features_renderer("checklist"),
        dna_match={GeneCategory.LAYOUT: "L3"},
        chaos_range=(0.0, 0.5),
        priority=1,
    ),
    SectionVariant(
        id="features-icons",
        name="Icon Tiles",
        category=SectionCategory.FEATURES,
        render=_features_renderer("icons"),
        dna_match={GeneCategory.LAYOUT: "L10"},
        chaos_range=(0.3, 1.0),
        priority=1,
    ),
]
