"""
Pricing table variants.
"""

from __future__ import annotations

from vibesmith.core.genes import GeneCategory
from vibesmith.engine.layout_resolver import generate_layout_css, resolve_pricing_layout
from vibesmith.engine.section_registry import (
    RenderFn,
    SectionCategory,
    SectionConfig,
    SectionOutput,
    SectionVariant,
)
from vibesmith.sections.renderer import render_section

_CSS = [
    ".pricing-tier { display: flex; flex-direction: column; gap: 16px; }",
    ".pricing-price { font-family: var(--font-heading); font-size: 40px; font-weight: var(--heading-weight); }",
    ".pricing-period { font-size: 16px; color: var(--muted); font-weight: 400; }",
    ".pricing-features { list-style: none; display: grid; gap: 8px; flex: 1; }",
    ".pricing-features li::before { content: '\\2713'; color: var(--primary); margin-right: 8px; }",
    ".pricing-tier.is-featured { outline: 3px solid var(--primary); }",
]

_HIGHLIGHT_CSS = [
    ".pricing-highlight .pricing-tier.is-featured { background: var(--primary); color: var(--on-primary); transform: translateY(-12px); }",
    ".pricing-highlight .pricing-tier.is-featured .pricing-period { color: inherit; opacity: 0.8; }",
    ".pricing-highlight .pricing-tier.is-featured li::before { color: inherit; }",
]


def featured_index(tiers: list[dict]) -> int | None:
    """Index of the tier to highlight: the flagged one, else the middle of three or more."""
    for index, tier in enumerate(tiers):
        if tier.get("featured"):
            return index
    if len(tiers) >= 3:
        return len(tiers) // 2
    return None


def _pricing_renderer(style: str) -> RenderFn:
    def render(config: SectionConfig) -> SectionOutput:
        tiers = list(config.content.get("pricing", []))
        layout = resolve_pricing_layout(len(tiers), config.dna, config.chaos)
        html = render_section(
            "sections/pricing.html",
            config,
            style=style,
            tiers=tiers,
            layout=layout,
            featured=featured_index(tiers),
        )
        css = [generate_layout_css(layout), *_CSS]
        if style == "highlight":
            css += _HIGHLIGHT_CSS
        return SectionOutput(html, "\n".join(css))

    return render


VARIANTS: list[SectionVariant] = [
    SectionVariant(
        id="pricing-cards",
        name="Pricing Cards",
        category=SectionCategory.PRICING,
        render=_pricing_renderer("cards"),
        dna_match={GeneCategory.LAYOUT: "L3"},
        chaos_range=(0.0, 0.5),
        priority=1,
    ),
    SectionVariant(
        id="pricing-highlight",
        name="Highlighted Tier",
        category=SectionCategory.PRICING,
        render=_pricing_renderer("highlight"),
        dna_match={GeneCategory.DESIGN: "D3"},
        chaos_range=(0.3, 0.8),
        priority=1,
    ),
]
