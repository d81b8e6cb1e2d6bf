"""
Call-to-action band variants.
"""

from __future__ import annotations

from vibesmith.core.genes import GeneCategory
from vibesmith.engine.blueprints import DEFAULT_CTA
from vibesmith.engine.section_registry import (
    RenderFn,
    SectionCategory,
    SectionConfig,
    SectionOutput,
    SectionVariant,
)
from vibesmith.sections.renderer import phone_href, render_section

_CSS = [
    ".cta-band { background: var(--accent); color: var(--on-primary); }",
    ".cta-band .section-header p { color: inherit; opacity: 0.85; }",
    ".cta-band .btn-primary { background: var(--background); color: var(--text); }",
    ".cta-actions { display: flex; gap: 16px; flex-wrap: wrap; }",
]

_STYLE_CSS: dict[str, list[str]] = {
    "band": [
        ".cta-band-centered { text-align: center; }",
        ".cta-band-centered .cta-actions { justify-content: center; }",
    ],
    "split": [
        ".cta-band-split .container { display: flex; align-items: center; justify-content: space-between; gap: 32px; flex-wrap: wrap; }",
        ".cta-band-split .section-header { text-align: left; margin: 0; }",
    ],
}


def _cta_renderer(style: str) -> RenderFn:
    def render(config: SectionConfig) -> SectionOutput:
        ctas = list(config.content.get("ctas") or [])
        phone = config.content.get("phone")
        html = render_section(
            "sections/cta.html",
            config,
            style=style,
            cta_text=ctas[0] if ctas else DEFAULT_CTA,
            phone=phone,
            phone_link=phone_href(phone) if phone else None,
        )
        return SectionOutput(html, "\n".join([*_CSS, *_STYLE_CSS[style]]))

    return render


VARIANTS: list[SectionVariant] = [
    SectionVariant(
        id="cta-band",
        name="CTA Band",
        category=SectionCategory.CTA,
        render=_cta_renderer("band"),
        dna_match={GeneCategory.HERO: "H1"},
        chaos_range=(0.0, 0.5),
        priority=1,
        description="Centered accent band with a single action",
    ),
    SectionVariant(
        id="cta-split",
        name="Split CTA",
        category=SectionCategory.CTA,
        render=_cta_renderer("split"),
        dna_match={GeneCategory.HERO: "H2"},
        chaos_range=(0.2, 0.7),
        priority=1,
        description="Heading left, actions right",
    ),
]
