"""
Site assembler.

Resolves a vibe, genes, palette and chaos for a business, rewrites the
industry blueprint through the director cut, renders every surviving section
through the variant registry and wraps the fragments into one self-contained
HTML document.

Usage:
    from vibesmith.engine.site_builder import BuildOptions, build_website

    html = build_website(content)
    html = build_website(content, BuildOptions(vibe="maverick", chaos=0.8))

Nothing here raises for sparse content: optional sections without content
are skipped, categories without a renderer get a placeholder, unknown
industries and vibes fall back to defaults. Only a structurally invalid
input (a DNA with unknown codes, malformed content) raises.
"""

from __future__ import annotations

import logging
import random
import re
from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import Any

from markupsafe import Markup, escape

from vibesmith.core.genes import DARK_COLOR_CODES, DNA, MOTION
from vibesmith.core.thresholds import DEFAULT_CHAOS, EFFECTS_ABOVE
from vibesmith.effects.parallax import (
    generate_parallax_css,
    generate_parallax_script,
    resolve_parallax_config,
)
from vibesmith.effects.scroll_reveal import (
    generate_scroll_reveal_css,
    generate_scroll_reveal_script,
    resolve_scroll_reveal_config,
)
from vibesmith.effects.texture_overlays import generate_texture_overlay_css
from vibesmith.engine.blueprints import DEFAULT_SECTIONS, BlueprintSection, blueprint_for_industry
from vibesmith.engine.content import SiteContent, extract_section_content, has_content
from vibesmith.engine.director_cut import director_cut
from vibesmith.engine.section_registry import (
    SectionCategory,
    SectionConfig,
    SectionOutput,
    SectionRegistry,
    SectionVariant,
    get_registry,
)
from vibesmith.engine.styles import (
    FONT_PRECONNECT_HOSTS,
    animation_class,
    fonts_url,
    generate_base_css,
    generate_entrance_animation_css,
    generate_gene_css,
)
from vibesmith.harmony.color_math import Palette, PaletteMood, generate_palette_for_industry
from vibesmith.harmony.vibes import Vibe, generate_constrained_dna, industry_to_vibe, vibe_by_id
from vibesmith.sections.renderer import render_fragment

logger = logging.getLogger(__name__)

TEXTURE_CLASS = "page-texture"
SCROLL_REVEAL_ATTRIBUTE = "data-scroll-reveal"

# Motion codes that turn on scroll reveal and the texture overlay
ACTIVE_MOTION_CODES = frozenset({"M2", "M3"})

# Sections that are on screen at load and keep the entrance animation
_ABOVE_FOLD = frozenset({SectionCategory.NAV, SectionCategory.HERO})

# Sections that never appear in the nav/footer link list
_UNLINKED = frozenset(
    {
        SectionCategory.NAV,
        SectionCategory.HERO,
        SectionCategory.FOOTER,
        SectionCategory.CTA,
        SectionCategory.STATS,
        SectionCategory.FEATURES,
    }
)

_LINK_LABELS: dict[SectionCategory, str] = {
    SectionCategory.FAQ: "FAQ",
}

_FIRST_TAG_RE = re.compile(r"<([a-zA-Z][\w-]*)([^>]*?)(/?)>")
_CLASS_ATTR_RE = re.compile(r'\sclass="([^"]*)"')


@dataclass(frozen=True)
class BuildOptions:
    """Caller overrides for one build. Every field left as None is resolved."""

    dna: DNA | None = None
    palette: Palette | None = None
    seed_color: str | None = None
    palette_mood: PaletteMood | str | None = None
    chaos: float | None = None
    vibe: str | None = None
    include_fonts: bool = True


@dataclass(frozen=True)
class _Effects:
    scroll_reveal: bool
    parallax: bool
    texture: bool


@dataclass(frozen=True)
class PlannedSection:
    section: BlueprintSection
    variant: SectionVariant | None


# =============================================================================
# Resolution
# =============================================================================


def _resolve_vibe(content: SiteContent, options: BuildOptions) -> Vibe:
    if options.vibe:
        return vibe_by_id(options.vibe)
    return industry_to_vibe(content.industry)


def _resolve_palette(content: SiteContent, options: BuildOptions, dna: DNA, vibe: Vibe) -> Palette:
    if options.palette is not None:
        return options.palette
    return generate_palette_for_industry(
        content.industry.lower(),
        seed_color=options.seed_color,
        mood=options.palette_mood,
        vibe_id=vibe.id,
        dark=dna.color in DARK_COLOR_CODES,
    )


def _resolve_chaos(options: BuildOptions, dna: DNA, vibe: Vibe) -> float:
    for candidate in (options.chaos, dna.chaos, vibe.chaos):
        if candidate is not None:
            return candidate
    return DEFAULT_CHAOS


def _resolve_effects(dna: DNA, chaos: float) -> _Effects:
    active_motion = dna.motion in ACTIVE_MOTION_CODES
    return _Effects(
        scroll_reveal=active_motion,
        parallax=chaos > EFFECTS_ABOVE,
        texture=chaos > EFFECTS_ABOVE or active_motion,
    )


def _blueprint_sections(industry: str) -> tuple[list[BlueprintSection], tuple[str, ...]]:
    blueprint = blueprint_for_industry(industry)
    if blueprint is None:
        logger.warning("No blueprint for industry '%s', using default sections", industry)
        return list(DEFAULT_SECTIONS), ()
    logger.debug("Using blueprint %s for industry %s", blueprint.id, industry)
    return list(blueprint.sections), blueprint.suggested_ctas


def _pick_variant(
    section: BlueprintSection, registry: SectionRegistry, dna: DNA, chaos: float
) -> SectionVariant | None:
    if section.variant:
        forced = registry.get(section.variant)
        if forced is not None and forced.category is section.category:
            return forced
        logger.debug("Forced variant %s is not registered, scoring instead", section.variant)
    return registry.find_best_variant(section.category, dna, chaos)


def plan_sections(
    content: SiteContent,
    sections: list[BlueprintSection],
    registry: SectionRegistry,
    dna: DNA,
    chaos: float,
) -> list[PlannedSection]:
    """Drop content-less optional sections and pick a variant for the rest.

    Required sections always survive. A section whose category has no
    registered variant is planned with ``variant=None`` and renders as a
    placeholder.
    """
    planned: list[PlannedSection] = []
    for section in sections:
        if not section.required and not has_content(section.category, content):
            logger.debug("Skipping %s: no content", section.category)
            continue
        planned.append(PlannedSection(section, _pick_variant(section, registry, dna, chaos)))
    return planned


def section_links(sections: list[BlueprintSection]) -> list[dict[str, str]]:
    """Anchor links for the nav and footer, one per linkable section."""
    links: list[dict[str, str]] = []
    seen: set[SectionCategory] = set()
    for section in sections:
        category = section.category
        if category in _UNLINKED or category in seen:
            continue
        seen.add(category)
        label = _LINK_LABELS.get(category, category.value.title())
        links.append({"text": label, "href": f"#{category.value}"})
    return links


# =============================================================================
# Rendering
# =============================================================================


def decorate_root(html: str, class_name: str, attributes: Mapping[str, str] | None = None) -> str:
    """Merge a class (and optional attributes) into the first tag of a fragment.

    An empty ``class_name`` leaves the class attribute untouched.
    """
    match = _FIRST_TAG_RE.search(html)
    if match is None:
        return f'<div class="{class_name}">{html}</div>'

    tag, attrs, closing = match.groups()
    class_match = _CLASS_ATTR_RE.search(attrs)
    if class_name and class_match is not None:
        merged = f"{class_match.group(1)} {class_name}".strip()
        attrs = f'{attrs[: class_match.start()]} class="{merged}"{attrs[class_match.end():]}'
    elif class_name:
        attrs = f' class="{class_name}"{attrs}'
    for name, value in (attributes or {}).items():
        attrs += f' {name}="{escape(value)}"'

    return f"{html[: match.start()]}<{tag}{attrs}{closing}>{html[match.end():]}"


def render_placeholder(category: SectionCategory | str) -> SectionOutput:
    """Minimal stand-in for a required section with no renderer."""
    html = render_fragment("sections/placeholder.html", category=str(category)).strip()
    return SectionOutput(html)


def _render_planned(
    planned: PlannedSection,
    content: SiteContent,
    ctas: tuple[str, ...],
    links: list[dict[str, str]],
    dna: DNA,
    palette: Palette,
    chaos: float,
    vibe: Vibe,
) -> SectionOutput:
    section = planned.section
    if planned.variant is None:
        logger.debug("Rendering placeholder for %s", section.category)
        return render_placeholder(section.category)

    data: dict[str, Any] = extract_section_content(section, content, ctas)
    if section.category in (SectionCategory.NAV, SectionCategory.FOOTER):
        data["links"] = links

    logger.debug("Rendering %s with %s", section.category, planned.variant.id)
    return planned.variant.render(
        SectionConfig(dna=dna, palette=palette, chaos=chaos, content=data, vibe_id=vibe.id)
    )


def _with_motion(
    output: SectionOutput, category: SectionCategory, dna: DNA, effects: _Effects
) -> SectionOutput:
    """Attach the entrance animation, plus the scroll reveal hook below the fold.

    Without scripts the entrance class animates as usual; the reveal script
    takes over once it tags the element.
    """
    attributes = None
    if effects.scroll_reveal and category not in _ABOVE_FOLD:
        attributes = {SCROLL_REVEAL_ATTRIBUTE: MOTION[dna.motion].entrance}
    html = decorate_root(output.html, animation_class(dna.motion), attributes)
    return replace(output, html=html)


def _unique(blocks: list[str]) -> list[str]:
    seen: set[str] = set()
    result = []
    for block in blocks:
        if block and block not in seen:
            seen.add(block)
            result.append(block)
    return result


def _effects_assets(dna: DNA, vibe: Vibe, effects: _Effects) -> tuple[list[str], list[str]]:
    css: list[str] = []
    scripts: list[str] = []
    if effects.scroll_reveal:
        config = resolve_scroll_reveal_config(
            effect=MOTION[dna.motion].entrance,
            duration_ms=800 if dna.motion == "M3" else 600,
        )
        config = replace(config, selector=f"[{SCROLL_REVEAL_ATTRIBUTE}]")
        css.append(generate_scroll_reveal_css(config))
        scripts.append(generate_scroll_reveal_script(config))
    if effects.parallax:
        config = resolve_parallax_config()
        css.append(generate_parallax_css(config))
        scripts.append(generate_parallax_script(config))
    if effects.texture:
        css.append(generate_texture_overlay_css(vibe.id, class_name=TEXTURE_CLASS))
    return css, scripts


def _page_title(content: SiteContent) -> str:
    if content.tagline:
        return f"{content.business_name} | {content.tagline}"
    return content.business_name


# =============================================================================
# Entry point
# =============================================================================


def build_website(
    content: SiteContent | Mapping[str, Any],
    options: BuildOptions | None = None,
    *,
    registry: SectionRegistry | None = None,
    rng: random.Random | None = None,
) -> str:
    """
    Build a complete HTML document for a business.

    Args:
        content: Site content, as a model or a plain mapping (camelCase or
            snake_case keys).
        options: Overrides; anything left unset is resolved from the vibe.
        registry: Section registry to render from (defaults to the built-in one).
        rng: Random source for DNA generation. Pass a seeded instance for
            reproducible output; unused when ``options.dna`` is given.

    Returns:
        The rendered document.

    Raises:
        pydantic.ValidationError: If ``content`` is a mapping that does not
            describe a site.
    """
    site = content if isinstance(content, SiteContent) else SiteContent.model_validate(content)
    options = options or BuildOptions()
    registry = registry if registry is not None else get_registry()

    vibe = _resolve_vibe(site, options)
    dna = options.dna or generate_constrained_dna(vibe, rng)
    palette = _resolve_palette(site, options, dna, vibe)
    chaos = _resolve_chaos(options, dna, vibe)
    effects = _resolve_effects(dna, chaos)
    logger.debug("Building %s: vibe=%s chaos=%.2f dna=%s", site.business_name, vibe.id, chaos, dna)

    sections, ctas = _blueprint_sections(site.industry)
    sections = director_cut(sections, vibe.id)
    planned = plan_sections(site, sections, registry, dna, chaos)
    links = section_links([p.section for p in planned])

    outputs = [
        _with_motion(
            _render_planned(p, site, ctas, links, dna, palette, chaos, vibe),
            p.section.category,
            dna,
            effects,
        )
        for p in planned
    ]

    effect_css, scripts = _effects_assets(dna, vibe, effects)
    css = _unique(
        [
            generate_base_css(dna, palette),
            generate_entrance_animation_css(),
            generate_gene_css(dna, palette),
            *(output.css for output in outputs),
            *effect_css,
        ]
    )

    return render_fragment(
        "document.html",
        title=_page_title(site),
        description=site.description or site.tagline,
        fonts_url=fonts_url(dna.typography) if options.include_fonts else None,
        preconnect_hosts=FONT_PRECONNECT_HOSTS,
        css=Markup("\n".join(css)),
        body=Markup("\n".join(output.html for output in outputs)),
        body_class=TEXTURE_CLASS if effects.texture else "",
        scripts=[Markup(script) for script in scripts],
    )
