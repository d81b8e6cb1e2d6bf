"""
Team section variants.
"""

from __future__ import annotations

from vibesmith.core.genes import GeneCategory
from vibesmith.engine.layout_resolver import generate_layout_css, resolve_team_layout
from vibesmith.engine.section_registry import (
    RenderFn,
    SectionCategory,
    SectionConfig,
    SectionOutput,
    SectionVariant,
)
from vibesmith.sections.renderer import render_section

_SHARED_CSS = [
    ".team-member { text-align: center; }",
    ".team-avatar { width: 96px; height: 96px; margin: 0 auto 16px; display: grid; place-items: center; border-radius: 50%; background: var(--gray-100); color: var(--primary); font-family: var(--font-heading); font-size: 32px; }",
    ".team-role { color: var(--primary); font-weight: 600; font-size: 14px; }",
    ".team-bio { color: var(--muted); margin-top: 8px; font-size: 15px; }",
]

_STYLE_CSS: dict[str, list[str]] = {
    "grid": [],
    "featured": [
        ".team-featured .team-member:first-child { display: grid; grid-template-columns: 160px 1fr; gap: 32px; text-align: left; align-items: center; }",
        ".team-featured .team-member:first-child .team-avatar { width: 160px; height: 160px; margin: 0; font-size: 52px; }",
    ],
}


def _team_renderer(style: str) -> RenderFn:
    def render(config: SectionConfig) -> SectionOutput:
        team = list(config.content.get("team", []))
        layout = resolve_team_layout(len(team), config.dna, config.chaos)
        html = render_section(
            "sections/team.html", config, style=style, team=team, layout=layout
        )
        css = "\n".join([generate_layout_css(layout), *_SHARED_CSS, *_STYLE_CSS[style]])
        return SectionOutput(html, css)

    return render


VARIANTS: list[SectionVariant] = [
    SectionVariant(
        id="team-grid",
        name="Team Grid",
        category=SectionCategory.TEAM,
        render=_team_renderer("grid"),
        dna_match={GeneCategory.LAYOUT: "L3"},
        chaos_range=(0.0, 0.5),
        priority=1,
    ),
    SectionVariant(
        id="team-featured",
        name="Featured Lead",
        category=SectionCategory.TEAM,
        render=_team_renderer("featured"),
        dna_match={GeneCategory.LAYOUT: "L7"},
        chaos_range=(0.4, 1.0),
        priority=1,
    ),
]
