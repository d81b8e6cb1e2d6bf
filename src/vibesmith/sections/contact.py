"""
Contact section variants: details beside a form, a call-to-action band, and a
minimal details list.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

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
        ".contact-split .contact-inner { display: grid; grid-template-columns: 1fr 1.2fr; gap: 48px; }",
        ".contact-form { display: grid; gap: 16px; }",
        ".contact-form label { display: grid; gap: 6px; font-weight: 500; font-size: 14px; }",
        ".contact-form input, .contact-form textarea { font: inherit; padding: 12px 14px; border: 1px solid var(--gray-300); border-radius: var(--radius-sm); background: var(--background); color: var(--text); }",
        f"@media (max-width: {MOBILE_BREAKPOINT_PX}px) {{",
        "  .contact-split .contact-inner { grid-template-columns: 1fr; }",
        "}",
    ],
    "cta": [
        ".contact-cta { background: linear-gradient(135deg, var(--primary), var(--secondary)); color: var(--on-primary); text-align: center; }",
        ".contact-cta .section-header p { color: inherit; opacity: 0.9; }",
        ".contact-cta .contact-actions { display: flex; gap: 16px; justify-content: center; flex-wrap: wrap; }",
        ".contact-cta .btn-primary { background: var(--background); color: var(--primary); }",
    ],
    "minimal": [
        ".contact-minimal { text-align: center; }",
        ".contact-minimal .contact-details { justify-content: center; }",
    ],
}

_SHARED_CSS = [
    ".contact-details { display: flex; flex-direction: column; gap: 12px; list-style: none; }",
    ".contact-details a { text-decoration: none; font-weight: 600; }",
    ".contact-hours { margin-top: 24px; border-collapse: collapse; }",
    ".contact-hours td { padding: 4px 16px 4px 0; }",
]


def format_address(content: Mapping[str, Any]) -> str:
    """Single-line address from the contact block ("1 Main St, Austin, TX")."""
    parts = [content.get("address"), content.get("city"), content.get("state")]
    return ", ".join(part for part in parts if part)


def _contact_renderer(style: str) -> RenderFn:
    def render(config: SectionConfig) -> SectionOutput:
        content = config.content
        html = render_section(
            "sections/contact.html",
            config,
            style=style,
            phone=content.get("phone"),
            email=content.get("email"),
            address=format_address(content),
            hours=content.get("hours") or {},
        )
        return SectionOutput(html, "\n".join(_SHARED_CSS + _STYLE_CSS[style]))

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
        category=SectionCategory.CONTACT,
        render=_contact_renderer(style),
        dna_match={category: code},
        chaos_range=chaos_range,
        priority=1,
    )


VARIANTS: list[SectionVariant] = [
    _variant("contact-split", "Details and Form", GeneCategory.LAYOUT, "L3", "split", (0.0, 0.5)),
    _variant("contact-cta", "Call to Action", GeneCategory.HERO, "H9", "cta", (0.4, 0.8)),
    _variant("contact-minimal", "Minimal Details", GeneCategory.DESIGN, "D4", "minimal", (0.0, 0.3)),
]
