"""
Stats ("by the numbers") variants.
"""

from __future__ import annotations

from vibesmith.core.genes import GeneCategory
from vibesmith.engine.layout_resolver import generate_layout_css, resolve_stats_layout
from vibesmith.engine.section_registry import (
    RenderFn,
    SectionCategory,
    SectionConfig,
    SectionOutput,
    SectionVariant,
)
from vibesmith.sections.renderer import render_section

_SHARED_CSS = [
    ".stat { text-align: center; }",
    ".stat-value { display: block; font-family: var(--font-heading); font-weight: var(--heading-weight); font-size: clamp(32px, 4vw, 48px); line-height: 1.1; }",
    ".stat-label { display: block; margin-top: 8px; font-size: 14px; text-transform: uppercase; letter-spacing: 0.06em; opacity: 0.8; }",
]

_STYLE_CSS: dict[str, list[str]] = {
    "grid": [
        ".stats-grid .stat-value { color: var(--primary); }",
    ],
    "cards": [
        ".stats-cards { background: var(--gray-50); }",
        ".stats-cards .stat { padding: 32px 24px; }",
        ".stats-cards .stat-value { color: var(--accent); }",
    ],
    "primary": [
        ".stats-primary { background: var(--primary); color: var(--on-primary); }",
        ".stats-primary .section-header p { color: inherit; opacity: 0.85; }",
    ],
}


def _stats_renderer(style: str) -> RenderFn:
    def render(config: SectionConfig) -> SectionOutput:
        stats = list(config.content.get("stats", []))
        layout = resolve_stats_layout(len(stats), config.dna)
        html = render_section(
            "sections/stats.html",
            config,
            style=style,
            stats=stats,
            layout=layout,
            card=style == "cards",
        )
        css = "\n".join([generate_layout_css(layout), *_SHARED_CSS, *_STYLE_CSS[style]])
        return SectionOutput(html, css)

    return render


def _variant(
    id: str,
    name: str,
    category: GeneCategory,
    code: str,
    style: str,
    chaos_range: tuple[float, float],
) -> SectionVariant:
    return SectionVariant(
        id=id,
        name=name,
        category=SectionCategory.STATS,
        render=_stats_renderer(style),
        dna_match={category: code},
        chaos_range=chaos_range,
        priority=1,
    )


VARIANTS: list[SectionVariant] = [
    _variant("stats-grid", "Stats Grid", GeneCategory.LAYOUT, "L3", "grid", (0.0, 0.5)),
    _variant("stats-cards", "Stat Cards", GeneCategory.LAYOUT, "L10", "cards", (0.3, 0.7)),
    _variant("stats-primary", "Primary Band", GeneCategory.DESIGN, "D2", "primary", (0.2, 0.6)),
]
