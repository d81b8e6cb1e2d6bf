"""
Footer variants.
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
from vibesmith.sections.contact import format_address
from vibesmith.sections.nav import DEFAULT_LINKS
from vibesmith.sections.renderer import render_section

_BASE_CSS = [
    ".site-footer { background: var(--gray-900); color: var(--gray-200); padding: 64px 0 32px; }",
    ".site-footer a { color: inherit; text-decoration: none; }",
    ".site-footer a:hover { color: #ffffff; }",
    ".footer-brand { font-family: var(--font-heading); font-size: 20px; color: #ffffff; }",
    ".footer-bottom { margin-top: 40px; padding-top: 24px; border-top: 1px solid var(--gray-700); font-size: 14px; opacity: 0.7; }",
]

_STYLE_CSS: dict[str, list[str]] = {
    "full": [
        ".footer-columns { display: grid; grid-template-columns: 2fr 1fr 1fr; gap: 40px; }",
        ".footer-columns ul { list-style: none; display: grid; gap: 8px; }",
        ".footer-columns h4 { color: #ffffff; font-size: 14px; text-transform: uppercase; letter-spacing: 0.08em; margin-bottom: 12px; }",
        f"@media (max-width: {MOBILE_BREAKPOINT_PX}px) {{",
        "  .footer-columns { grid-template-columns: 1fr; }",
        "}",
    ],
    "minimal": [
        ".footer-minimal { background: var(--background); color: var(--muted); padding: 32px 0; text-align: center; }",
        ".footer-minimal .footer-bottom { margin: 0; padding: 0; border: 0; }",
    ],
    "compact": [
        ".footer-compact { padding: 32px 0; }",
        ".footer-compact .footer-row { display: flex; justify-content: space-between; align-items: center; flex-wrap: wrap; gap: 16px; }",
        ".footer-compact .footer-bottom { margin-top: 16px; padding-top: 16px; }",
    ],
}


def _footer_renderer(style: str) -> RenderFn:
    def render(config: SectionConfig) -> SectionOutput:
        contact = config.content.get("contact") or {}
        html = render_section(
            "sections/footer.html",
            config,
            style=style,
            contact=contact,
            address=format_address(contact),
            links=config.content.get("links") or list(DEFAULT_LINKS),
        )
        return SectionOutput(html, "\n".join(_BASE_CSS + _STYLE_CSS[style]))

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
        category=SectionCategory.FOOTER,
        render=_footer_renderer(style),
        dna_match={category: code},
        chaos_range=chaos_range,
        priority=1,
    )


VARIANTS: list[SectionVariant] = [
    _variant("footer-full", "Full Footer", GeneCategory.LAYOUT, "L3", "full", (0.0, 0.5)),
    _variant("footer-minimal", "Minimal Footer", GeneCategory.DESIGN, "D4", "minimal", (0.0, 0.3)),
    _variant("footer-compact", "Compact Footer", GeneCategory.LAYOUT, "L5", "compact", (0.0, 0.4)),
]
