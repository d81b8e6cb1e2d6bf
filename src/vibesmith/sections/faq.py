"""
FAQ variants built on native ``<details>`` disclosure, so no script is needed.
"""

from __future__ import annotations

from vibesmith.core.genes import GeneCategory
from vibesmith.engine.layout_resolver import generate_layout_css, resolve_faq_layout
from vibesmith.engine.section_registry import (
    RenderFn,
    SectionCategory,
    SectionConfig,
    SectionOutput,
    SectionVariant,
)
from vibesmith.sections.renderer import render_section

_CSS = [
    ".faq .container { max-width: 880px; }",
    ".faq-item { padding: 20px 24px; }",
    ".faq-item summary { cursor: pointer; font-weight: 600; font-size: 18px; list-style: none; display: flex; justify-content: space-between; gap: 16px; }",
    ".faq-item summary::-webkit-details-marker { display: none; }",
    ".faq-item summary::after { content: '+'; color: var(--primary); font-size: 22px; line-height: 1; }",
    ".faq-item[open] summary::after { content: '\\2212'; }",
    ".faq-item p { margin-top: 12px; color: var(--muted); }",
    ".faq-two-column-wrap .container { max-width: 1200px; }",
]


def _faq_renderer(open_first: bool) -> RenderFn:
    def render(config: SectionConfig) -> SectionOutput:
        faqs = list(config.content.get("faqs", []))
        layout = resolve_faq_layout(len(faqs), config.dna)
        html = render_section(
            "sections/faq.html", config, faqs=faqs, layout=layout, open_first=open_first
        )
        return SectionOutput(html, "\n".join([generate_layout_css(layout), *_CSS]))

    return render


VARIANTS: list[SectionVariant] = [
    SectionVariant(
        id="faq-accordion",
        name="Accordion",
        category=SectionCategory.FAQ,
        render=_faq_renderer(open_first=True),
        dna_match={GeneCategory.LAYOUT: "L1"},
        chaos_range=(0.0, 0.6),
        priority=1,
    ),
    SectionVariant(
        id="faq-sidebar",
        name="Two Column",
        category=SectionCategory.FAQ,
        render=_faq_renderer(open_first=False),
        dna_match={GeneCategory.LAYOUT: "L6"},
        chaos_range=(0.0, 0.6),
        priority=1,
    ),
]
