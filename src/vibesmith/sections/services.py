"""
Services section variants.

All variants lay items out through the layout resolver; the variant only
decides the card treatment.
"""

from __future__ import annotations

from vibesmith.core.genes import GeneCategory
from vibesmith.engine.layout_resolver import generate_layout_css, resolve_service_layout
from vibesmith.engine.section_registry import (
    RenderFn,
    SectionCategory,
    SectionConfig,
    SectionOutput,
    SectionVariant,
)
from vibesmith.sections.renderer import render_section

_CARD_CSS: dict[str, list[str]] = {
    "cards": [
        ".service-card { display: flex; flex-direction: column; gap: 12px; }",
        ".service-icon { width: 48px; height: 48px; display: grid; place-items: center; border-radius: var(--radius-sm); background: var(--primary); color: var(--on-primary); font-weight: 700; }",
    ],
    "single-column": [
        ".service-card { display: grid; grid-template-columns: 64px 1fr auto; gap: 24px; align-items: start; }",
        ".service-icon { width: 64px; height: 64px; display: grid; place-items: center; border-radius: 50%; background: var(--gray-100); color: var(--primary); font-weight: 700; }",
    ],
    "timeline": [
        ".layout-timeline { position: relative; padding-left: 40px; }",
        ".layout-timeline::before { content: ''; position: absolute; left: 11px; top: 0; bottom: 0; width: 2px; background: var(--gray-200); }",
        ".service-card { position: relative; }",
        ".service-card::before { content: ''; position: absolute; left: -36px; top: 36px; width: 16px; height: 16px; border-radius: 50%; background: var(--primary); }",
        ".service-icon { display: none; }",
    ],
    "bento": [
        ".service-card { min-height: 200px; display: flex; flex-direction: column; justify-content: flex-end; gap: 8px; }",
        ".service-card:nth-child(3n+1) { background: var(--primary); color: var(--on-primary); }",
        ".service-card:nth-child(3n+1) p { opacity: 0.9; }",
        ".service-icon { font-size: 28px; }",
    ],
}

_SHARED_CSS = [
    ".service-card h3 { font-size: 20px; }",
    ".service-card p { color: inherit; opacity: 0.8; }",
    ".service-price { font-weight: 700; color: var(--primary); }",
]


def _services_renderer(style: str) -> RenderFn:
    def render(config: SectionConfig) -> SectionOutput:
        services = config.content.get("services", [])
        layout = resolve_service_layout(
            services, config.dna, chaos=config.chaos, vibe_id=config.vibe_id
        )
        html = render_section(
            "sections/services.html",
            config,
            style=style,
            services=services,
            layout=layout,
        )
        css = "\n".join([generate_layout_css(layout), *_CARD_CSS.get(style, []), *_SHARED_CSS])
        return SectionOutput(html, css)

    return render


def _variant(
    id: str, name: str, layout: str, style: str, chaos_range: tuple[float, float]
) -> SectionVariant:
    return SectionVariant(
        id=id,
        name=name,
        category=SectionCategory.SERVICES,
        render=_services_renderer(style),
        dna_match={GeneCategory.LAYOUT: layout},
        chaos_range=chaos_range,
        priority=1,
    )


VARIANTS: list[SectionVariant] = [
    _variant("services-l3-cards", "Card Grid", "L3", "cards", (0.0, 0.4)),
    _variant("services-l5-single-column", "Single Column", "L5", "single-column", (0.0, 0.3)),
    _variant("services-l9-timeline", "Timeline", "L9", "timeline", (0.2, 0.6)),
    _variant("services-l10-bento", "Bento Box", "L10", "bento", (0.5, 1.0)),
    _variant("services-l1-grid", "Classic Grid", "L1", "cards", (0.0, 0.5)),
    _variant("services-l2-masonry", "Masonry", "L2", "cards", (0.3, 0.8)),
]
