"""
Navigation variants.
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

DEFAULT_LINKS: tuple[dict[str, str], ...] = (
    {"text": "Services", "href": "#services"},
    {"text": "About", "href": "#about"},
    {"text": "Contact", "href": "#contact"},
)

_BASE_CSS = [
    ".site-nav { z-index: 100; font-weight: 500; }",
    ".site-nav .nav-inner { display: flex; align-items: center; justify-content: space-between; gap: 24px; }",
    ".nav-brand { font-family: var(--font-heading); font-weight: var(--heading-weight); font-size: 20px; text-decoration: none; }",
    ".nav-links { display: flex; gap: 28px; }",
    ".nav-links a { text-decoration: none; opacity: 0.85; transition: opacity 0.2s ease; }",
    ".nav-links a:hover { opacity: 1; color: var(--primary); }",
    ".nav-phone { font-weight: 600; text-decoration: none; }",
]

_STYLE_CSS: dict[str, list[str]] = {
    "fixed": [
        ".nav-fixed { position: sticky; top: 0; padding: 18px 0; background: var(--background); box-shadow: 0 1px 0 var(--gray-200); }",
    ],
    "transparent": [
        ".nav-transparent { position: absolute; top: 0; left: 0; right: 0; padding: 28px 0; color: #ffffff; background: transparent; }",
    ],
    "sidebar": [
        ".nav-sidebar { position: fixed; top: 0; left: 0; bottom: 0; width: 240px; padding: 40px 28px; background: var(--gray-900); color: #ffffff; }",
        ".nav-sidebar .nav-inner { flex-direction: column; align-items: flex-start; height: 100%; }",
        ".nav-sidebar .nav-links { flex-direction: column; gap: 16px; }",
        "body:has(.nav-sidebar) { padding-left: 240px; }",
        f"@media (max-width: {MOBILE_BREAKPOINT_PX}px) {{",
        "  .nav-sidebar { position: static; width: auto; padding: 20px 24px; }",
        "  .nav-sidebar .nav-inner { flex-direction: row; }",
        "  body:has(.nav-sidebar) { padding-left: 0; }",
        "}",
    ],
    "floating": [
        ".nav-floating { position: fixed; top: 16px; left: 50%; transform: translateX(-50%); width: min(960px, calc(100% - 32px)); padding: 12px 20px; background: var(--background); border-radius: var(--radius-lg); box-shadow: 0 12px 40px rgba(0, 0, 0, 0.12); }",
        ".nav-floating .container { padding: 0; }",
    ],
    "minimal": [
        ".nav-minimal { padding: 28px 0; background: var(--background); }",
        ".nav-minimal .nav-links { gap: 20px; font-size: 14px; text-transform: uppercase; letter-spacing: 0.08em; }",
    ],
}

_MOBILE_CSS = [
    f"@media (max-width: {MOBILE_BREAKPOINT_PX}px) {{",
    "  .nav-links { display: none; }",
    "}",
]


def generate_nav_css(style: str) -> str:
    return "\n".join(_BASE_CSS + _STYLE_CSS.get(style, []) + _MOBILE_CSS)


def _nav_renderer(style: str) -> RenderFn:
    def render(config: SectionConfig) -> SectionOutput:
        links = config.content.get("links") or list(DEFAULT_LINKS)
        html = render_section(
            "sections/nav.html",
            config,
            style=style,
            links=links,
            phone=config.content.get("phone"),
            show_phone=style in ("fixed", "sidebar"),
        )
        return SectionOutput(html, generate_nav_css(style))

    return render


def _variant(
    id: str, name: str, nav: str, style: str, chaos_range: tuple[float, float]
) -> SectionVariant:
    return SectionVariant(
        id=id,
        name=name,
        category=SectionCategory.NAV,
        render=_nav_renderer(style),
        dna_match={GeneCategory.NAV: nav},
        chaos_range=chaos_range,
        priority=1,
    )


VARIANTS: list[SectionVariant] = [
    _variant("nav-n1-fixed", "Fixed Top Bar", "N1", "fixed", (0.0, 0.5)),
    _variant("nav-n2-transparent", "Transparent Header", "N2", "transparent", (0.2, 0.7)),
    _variant("nav-n4-sidebar", "Sidebar Nav", "N4", "sidebar", (0.3, 0.8)),
    _variant("nav-n7-floating", "Floating Nav", "N7", "floating", (0.4, 1.0)),
    _variant("nav-n9-minimal", "Minimal Links", "N9", "minimal", (0.0, 0.4)),
]
