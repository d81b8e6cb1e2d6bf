"""
Hero section variants, one per supported hero gene.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

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

# Decorative shapes: (size px, top %, left %, parallax speed)
_SHAPES = (
    (320, -8, 62, 0.15),
    (180, 58, 80, 0.35),
    (120, 70, 8, -0.2),
    (64, 18, 44, 0.5),
)


def hero_ctas(content: Mapping[str, Any]) -> tuple[dict[str, str], dict[str, str] | None]:
    """Primary and secondary call-to-action links for the hero."""
    ctas = list(content.get("ctas") or [])
    primary = {"text": ctas[0] if ctas else DEFAULT_CTA, "href": "#contact"}

    phone = content.get("phone")
    if phone:
        return primary, {"text": f"Call {phone}", "href": phone_href(phone)}
    if len(ctas) > 1:
        return primary, {"text": ctas[1], "href": "#contact"}
    return primary, None


_BASE_CSS = [
    ".hero { position: relative; overflow: hidden; padding: 120px 0; }",
    ".hero-inner { position: relative; z-index: 1; }",
    ".hero h1 { font-size: clamp(36px, 5vw, 60px); margin-bottom: 20px; }",
    ".hero-tagline { font-size: 20px; opacity: 0.9; margin-bottom: 32px; max-width: 640px; }",
    ".hero-buttons { display: flex; gap: 16px; flex-wrap: wrap; }",
    ".trust-badges { display: flex; gap: 24px; flex-wrap: wrap; margin-top: 40px; list-style: none; font-weight: 500; }",
    ".hero-full { min-height: 100vh; display: flex; align-items: center; }",
    ".hero-full > .container { width: 100%; }",
]

_STYLE_CSS: dict[str, list[str]] = {
    "full-width": [
        ".hero-full-width { background: linear-gradient(135deg, var(--primary) 0%, var(--secondary) 100%); color: var(--on-primary); text-align: center; }",
        ".hero-full-width .hero-tagline { margin-left: auto; margin-right: auto; }",
        ".hero-full-width .hero-buttons, .hero-full-width .trust-badges { justify-content: center; }",
        ".hero-full-width .btn-primary { background: var(--background); color: var(--primary); }",
    ],
    "split": [
        ".hero-split { background: var(--gray-50); }",
        ".hero-split .hero-inner { display: grid; grid-template-columns: 1.1fr 1fr; gap: 64px; align-items: center; }",
    ],
    "minimal": [
        ".hero-minimal { padding: 96px 0 72px; text-align: center; background: var(--background); }",
        ".hero-minimal .hero-tagline { color: var(--muted); margin-left: auto; margin-right: auto; }",
        ".hero-minimal .hero-buttons, .hero-minimal .trust-badges { justify-content: center; }",
    ],
    "asymmetric": [
        ".hero-asymmetric { background: var(--gray-50); }",
        ".hero-asymmetric .hero-inner { display: grid; grid-template-columns: 1.4fr 0.8fr; gap: 48px; align-items: end; }",
        ".hero-asymmetric .hero-visual { transform: translateY(48px) rotate(-3deg); }",
    ],
    "text-only": [
        ".hero-text-only { padding: 160px 0 120px; background: var(--background); }",
        ".hero-text-only h1 { font-size: clamp(48px, 9vw, 120px); line-height: 0.95; max-width: 14ch; }",
        ".hero-text-only .hero-tagline { color: var(--muted); font-size: 22px; }",
    ],
    "geometric": [
        ".hero-geometric { background: var(--text); color: var(--background); }",
        ".hero-decor { position: absolute; inset: 0; pointer-events: none; }",
        ".hero-shape { position: absolute; border: 2px solid var(--accent); opacity: 0.5; }",
        ".hero-geometric .hero-shape:nth-child(odd) { border-radius: 50%; }",
        ".hero-geometric .hero-shape:nth-child(even) { transform: rotate(45deg); background: var(--primary); border: 0; opacity: 0.35; }",
    ],
    "video": [
        ".hero-video { color: #ffffff; background: linear-gradient(120deg, var(--gray-900), var(--primary), var(--gray-800)); background-size: 300% 300%; animation: hero-pan 18s ease infinite; }",
        ".hero-video::after { content: ''; position: absolute; inset: 0; background: rgba(0, 0, 0, 0.35); }",
        "@keyframes hero-pan { 0%, 100% { background-position: 0% 50%; } 50% { background-position: 100% 50%; } }",
    ],
    "gradient-overlay": [
        ".hero-gradient-overlay { color: #ffffff; background: radial-gradient(circle at 20% 20%, var(--accent), transparent 55%), linear-gradient(160deg, var(--primary), var(--gray-900)); }",
    ],
    "animated": [
        ".hero-animated { background: linear-gradient(135deg, var(--primary), var(--secondary)); color: var(--on-primary); }",
        ".hero-decor { position: absolute; inset: 0; pointer-events: none; }",
        ".hero-animated .hero-shape { position: absolute; border-radius: 50%; background: rgba(255, 255, 255, 0.12); animation: hero-float 9s ease-in-out infinite; }",
        ".hero-animated .hero-shape:nth-child(2n) { animation-duration: 12s; animation-direction: reverse; }",
        "@keyframes hero-float { 0%, 100% { translate: 0 0; } 50% { translate: 0 -24px; } }",
    ],
    "carousel": [
        ".hero-carousel { background: var(--primary); color: var(--on-primary); }",
        ".hero-slides { position: relative; min-height: 2em; margin-bottom: 32px; }",
        ".hero-slide { position: absolute; inset: 0; opacity: 0; font-size: 20px; animation: hero-slide var(--slide-total) infinite; }",
        "@keyframes hero-slide { 0%, 30% { opacity: 1; } 36%, 100% { opacity: 0; } }",
    ],
}

_SHARED_VISUAL_CSS = [
    ".hero-visual { min-height: 360px; display: flex; align-items: center; justify-content: center; background: linear-gradient(135deg, var(--primary), var(--accent)); color: var(--on-primary); font-size: 72px; font-family: var(--font-heading); }",
    "@media (max-width: 900px) {",
    "  .hero-split .hero-inner, .hero-asymmetric .hero-inner { grid-template-columns: 1fr; }",
    "  .hero-visual { display: none; }",
    "  .hero { padding: 80px 0; }",
    "}",
]


def generate_hero_css(style: str, slide_count: int = 0) -> str:
    lines = _BASE_CSS + _STYLE_CSS.get(style, []) + _SHARED_VISUAL_CSS
    if style == "carousel" and slide_count:
        lines.append(f".hero-carousel {{ --slide-total: {slide_count * 4}s; }}")
        lines += [
            f".hero-slide:nth-child({i + 1}) {{ animation-delay: {i * 4}s; }}" for i in range(slide_count)
        ]
    return "\n".join(lines)


def _hero_renderer(style: str) -> RenderFn:
    def render(config: SectionConfig) -> SectionOutput:
        content = config.content
        primary, secondary = hero_ctas(content)
        slides = [s for s in [content.get("tagline"), *content.get("trust_badges", [])] if s]
        shapes = [
            {"size": size, "top": top, "left": left, "speed": speed}
            for size, top, left, speed in _SHAPES
        ]
        html = render_section(
            "sections/hero.html",
            config,
            style=style,
            headline=content.get("headline") or content.get("business_name", ""),
            tagline=content.get("tagline", ""),
            trust_badges=content.get("trust_badges", []),
            primary_cta=primary,
            secondary_cta=secondary,
            shapes=shapes,
            slides=slides,
            full_height=bool(content.get("config", {}).get("full_height")),
        )
        return SectionOutput(html, generate_hero_css(style, len(slides)))

    return render


def _variant(
    id: str, name: str, hero: str, style: str, chaos_range: tuple[float, float], description: str
) -> SectionVariant:
    return SectionVariant(
        id=id,
        name=name,
        category=SectionCategory.HERO,
        render=_hero_renderer(style),
        dna_match={GeneCategory.HERO: hero},
        chaos_range=chaos_range,
        priority=1,
        description=description,
    )


VARIANTS: list[SectionVariant] = [
    _variant(
        "hero-h1-full-width",
        "Full-Width Impact",
        "H1",
        "full-width",
        (0.0, 0.5),
        "Full-screen gradient hero for service businesses",
    ),
    _variant(
        "hero-h2-split",
        "Split Screen",
        "H2",
        "split",
        (0.2, 0.6),
        "Copy on one side, brand panel on the other",
    ),
    _variant(
        "hero-h3-minimal",
        "Minimal Header",
        "H3",
        "minimal",
        (0.0, 0.3),
        "Quiet centred header on the page background",
    ),
    _variant(
        "hero-h8-asymmetric",
        "Asymmetric Split",
        "H8",
        "asymmetric",
        (0.4, 0.8),
        "Wide copy column with an offset, tilted panel",
    ),
    _variant(
        "hero-h9-text-only",
        "Text Only",
        "H9",
        "text-only",
        (0.5, 1.0),
        "Oversized editorial headline, no imagery",
    ),
    _variant(
        "hero-h12-geometric",
        "Geometric Shapes",
        "H12",
        "geometric",
        (0.3, 0.7),
        "Dark hero with floating parallax shapes",
    ),
    _variant(
        "hero-h4-video",
        "Video Background",
        "H4",
        "video",
        (0.4, 0.9),
        "Slow panning gradient backdrop standing in for footage",
    ),
    _variant(
        "hero-h5-gradient-overlay",
        "Gradient Overlay",
        "H5",
        "gradient-overlay",
        (0.3, 0.7),
        "Layered radial and linear gradients",
    ),
    _variant(
        "hero-h6-animated",
        "Particle Effect",
        "H6",
        "animated",
        (0.5, 1.0),
        "Gradient hero with drifting particles",
    ),
    _variant(
        "hero-h7-carousel",
        "Carousel Hero",
        "H7",
        "carousel",
        (0.3, 0.8),
        "Rotates the tagline and trust badges",
    ),
]
