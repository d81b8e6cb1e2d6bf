"""
Director cut: opinionated, per-vibe rewrites of a section list.

A vibe may drop optional sections, force a hero or nav variant, reorder
sections or inject ones it considers essential. The rewrite is a pure
function of (vibe id, sections); the input sequence is never mutated.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import replace

from vibesmith.engine.blueprints import BlueprintSection
from vibesmith.engine.section_registry import SectionCategory

CORE_CATEGORIES = frozenset(
    {SectionCategory.NAV, SectionCategory.HERO, SectionCategory.CONTACT, SectionCategory.FOOTER}
)

# Non-core sections kept by the minimal cut
MINIMAL_MAX_OTHER = 2


def _force_variant(
    sections: list[BlueprintSection], category: SectionCategory, variant_id: str
) -> list[BlueprintSection]:
    return [replace(s, variant=variant_id) if s.category is category else s for s in sections]


def _without(sections: list[BlueprintSection], category: SectionCategory) -> list[BlueprintSection]:
    return [s for s in sections if s.category is not category]


def _index_of(sections: list[BlueprintSection], category: SectionCategory) -> int:
    return next((i for i, s in enumerate(sections) if s.category is category), -1)


def _insert(
    sections: list[BlueprintSection], index: int, section: BlueprintSection
) -> list[BlueprintSection]:
    return sections[:index] + [section] + sections[index:]


def director_cut(sections: Sequence[BlueprintSection], vibe_id: str | None) -> list[BlueprintSection]:
    """Apply the vibe's structural overrides and return a new section list.

    Unknown or empty vibe ids leave the list unchanged.
    """
    result = list(sections)

    match (vibe_id or "").lower():
        case "maverick":
            result = _without(result, SectionCategory.STATS)
            result = _force_variant(result, SectionCategory.HERO, "hero-h9-text-only")
            index = _index_of(result, SectionCategory.TESTIMONIALS)
            if index > 2:
                testimonials = result[index]
                result = _insert(result[:index] + result[index + 1 :], 2, testimonials)

        case "executive":
            result = _force_variant(result, SectionCategory.HERO, "hero-h2-split")
            if _index_of(result, SectionCategory.STATS) == -1:
                result = _insert(
                    result, 2, BlueprintSection(SectionCategory.STATS, False, "By the Numbers")
                )

        case "creative":
            result = _force_variant(result, SectionCategory.HERO, "hero-h1-full-width")
            result = _force_variant(result, SectionCategory.NAV, "nav-n7-floating")

        case "minimal":
            result = _without(result, SectionCategory.STATS)
            result = _force_variant(result, SectionCategory.HERO, "hero-h3-minimal")
            core = [s for s in result if s.category in CORE_CATEGORIES]
            other = [s for s in result if s.category not in CORE_CATEGORIES]
            result = core[:2] + other[:MINIMAL_MAX_OTHER] + core[2:]

        case "bold":
            result = _force_variant(result, SectionCategory.HERO, "hero-h1-full-width")

        case "elegant":
            result = _force_variant(result, SectionCategory.HERO, "hero-h2-split")

        case "trustworthy":
            has_stats = _index_of(result, SectionCategory.STATS) != -1
            has_testimonials = _index_of(result, SectionCategory.TESTIMONIALS) != -1
            if not has_stats:
                result = _insert(
                    result, 2, BlueprintSection(SectionCategory.STATS, False, "Our Track Record")
                )
            if not has_testimonials:
                contact = _index_of(result, SectionCategory.CONTACT)
                if contact != -1:
                    result = _insert(
                        result,
                        contact,
                        BlueprintSection(SectionCategory.TESTIMONIALS, False, "What Our Clients Say"),
                    )

        case _:
            # friendly and unknown vibes keep the blueprint as-is
            pass

    return result
