"""
Gallery variants. Items without an image render as titled colour tiles.
"""

from __future__ import annotations

from vibesmith.core.genes import GeneCategory
from vibesmith.engine.layout_resolver import generate_layout_css, resolve_gallery_layout
from vibesmith.engine.section_registry import (
    RenderFn,
    SectionCategory,
    SectionConfig,
    SectionOutput,
    SectionVariant,
)
from vibesmith.sections.renderer import render_section

_CSS = [
    ".gallery-item { position: relative; overflow: hidden; margin: 0; border-radius: var(--radius-md); }",
    ".gallery-item img { width: 100%; height: 100%; object-fit: cover; transition: transform 0.4s ease; }",
    ".gallery-item:hover img { transform: scale(1.04); }",
    ".gallery-tile { min-height: 220px; display: grid; place-items: center; padding: 24px; background: linear-gradient(135deg, var(--primary), var(--accent)); color: var(--on-primary); font-family: var(--font-heading); font-size: 22px; text-align: center; }",
    ".gallery-item:nth-child(3n+2) .gallery-tile { background: linear-gradient(135deg, var(--secondary), var(--primary)); }",
    ".gallery-item figcaption { position: absolute; left: 0; right: 0; bottom: 0; padding: 12px 16px; background: linear-gradient(transparent, rgba(0, 0, 0, 0.6)); color: #ffffff; font-size: 14px; }",
]


def _gallery_renderer(captions: bool) -> RenderFn:
    def render(config: SectionConfig) -> SectionOutput:
        items = list(config.content.get("gallery", []))
        layout = resolve_gallery_layout(len(items), config.dna, config.chaos)
        html = render_section(
            "sections/gallery.html", config, items=items, layout=layout, captions=captions
        )
        return SectionOutput(html, "\n".join([generate_layout_css(layout), *_CSS]))

    return render


VARIANTS: list[SectionVariant] = [
    SectionVariant(
        id="gallery-grid",
        name="Gallery Grid",
        category=SectionCategory.GALLERY,
        render=_gallery_renderer(captions=True),
        dna_match={GeneCategory.LAYOUT: "L3"},
        chaos_range=(0.0, 0.4),
        priority=1,
    ),
    SectionVariant(
        id="gallery-masonry",
        name="Masonry Wall",
        category=SectionCategory.GALLERY,
        render=_gallery_renderer(captions=False),
        dna_match={GeneCategory.LAYOUT: "L2"},
        chaos_range=(0.5, 1.0),
        priority=1,
    ),
    SectionVariant(
        id="gallery-bento",
        name="Bento Gallery",
        category=SectionCategory.GALLERY,
        render=_gallery_renderer(captions=True),
        dna_match={GeneCategory.LAYOUT: "L10"},
        chaos_range=(0.4, 0.8),
        priority=1,
    ),
]
