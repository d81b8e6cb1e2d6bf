"""
Section variant registry.

Renderers register the gene values and chaos range they suit; a scoring
function picks the best renderer for a section category given the resolved
DNA. Variants are plain tagged records with a render callable. Selection is
a data-driven lookup, not a class hierarchy.

The default registry is populated once on first use and treated as read-only
afterwards. Tests build isolated ``SectionRegistry`` instances instead.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

from vibesmith.core.genes import DNA, GeneCategory
from vibesmith.core.thresholds import VARIANT_MATCH_THRESHOLD
from vibesmith.harmony.color_math import Palette

logger = logging.getLogger(__name__)


class SectionCategory(StrEnum):
    NAV = "nav"
    HERO = "hero"
    SERVICES = "services"
    ABOUT = "about"
    TEAM = "team"
    FEATURES = "features"
    TESTIMONIALS = "testimonials"
    STATS = "stats"
    FAQ = "faq"
    GALLERY = "gallery"
    PRICING = "pricing"
    CTA = "cta"
    CONTACT = "contact"
    FOOTER = "footer"


@dataclass(frozen=True)
class SectionConfig:
    """Render input for one section."""

    dna: DNA
    palette: Palette
    chaos: float
    content: Mapping[str, Any] = field(default_factory=dict)
    vibe_id: str | None = None


@dataclass(frozen=True)
class SectionOutput:
    html: str
    css: str = ""


RenderFn = Callable[[SectionConfig], SectionOutput]


@dataclass(frozen=True)
class SectionVariant:
    """A registered renderer and the genes/chaos it is tuned for."""

    id: str
    name: str
    category: SectionCategory
    render: RenderFn
    dna_match: Mapping[GeneCategory, str] = field(default_factory=dict)
    chaos_range: tuple[float, float] | None = None
    priority: float = 0.0
    description: str = ""


def match_score(variant: SectionVariant, dna: DNA, chaos: float = 0.0) -> float:
    """Normalised fit of a variant to a DNA and chaos level, in [0, 1].

    +1 per matching gene requirement; up to 0.5 for the chaos range (full
    inside it, decaying linearly with distance outside); a priority bonus
    of ``priority * 0.1`` against a fixed 0.5 of headroom.
    """
    score = 0.0
    max_score = 0.0

    for category, code in variant.dna_match.items():
        if not code:
            continue
        max_score += 1
        if dna.get(category) == code:
            score += 1

    if variant.chaos_range is not None:
        low, high = variant.chaos_range
        max_score += 0.5
        if low <= chaos <= high:
            score += 0.5
        elif chaos < low:
            score += 0.25 * (1 - (low - chaos))
        else:
            score += 0.25 * (1 - (chaos - high))

    if variant.priority:
        score += variant.priority * 0.1
        max_score += 0.5

    return score / max_score if max_score > 0 else 0.0


class SectionRegistry:
    """Category-indexed collection of section variants."""

    def __init__(self, variants: Iterable[SectionVariant] = ()) -> None:
        self._variants: dict[SectionCategory, list[SectionVariant]] = {}
        self.register_all(variants)

    def register(self, variant: SectionVariant) -> None:
        """Add a variant; a duplicate id replaces the earlier entry in place."""
        existing = self._variants.setdefault(variant.category, [])
        for index, current in enumerate(existing):
            if current.id == variant.id:
                logger.warning("Section variant '%s' already registered, replacing", variant.id)
                existing[index] = variant
                return
        existing.append(variant)

    def register_all(self, variants: Iterable[SectionVariant]) -> None:
        for variant in variants:
            self.register(variant)

    def variants(self, category: SectionCategory | str) -> list[SectionVariant]:
        try:
            return list(self._variants.get(SectionCategory(category), []))
        except ValueError:
            return []

    def get(self, variant_id: str) -> SectionVariant | None:
        for variants in self._variants.values():
            for variant in variants:
                if variant.id == variant_id:
                    return variant
        return None

    def categories(self) -> list[SectionCategory]:
        return [category for category, variants in self._variants.items() if variants]

    def __len__(self) -> int:
        return sum(len(variants) for variants in self._variants.values())

    def find_best_variant(
        self, category: SectionCategory | str, dna: DNA, chaos: float = 0.0
    ) -> SectionVariant | None:
        """Highest-scoring variant for a category; ties keep the first registered."""
        best: SectionVariant | None = None
        best_score = -1.0
        for variant in self.variants(category):
            score = match_score(variant, dna, chaos)
            if score > best_score:
                best, best_score = variant, score
        return best

    def find_matching_variants(
        self,
        category: SectionCategory | str,
        dna: DNA,
        chaos: float = 0.0,
        threshold: float = VARIANT_MATCH_THRESHOLD,
    ) -> list[SectionVariant]:
        """All variants scoring at least ``threshold``, best first."""
        scored = [(match_score(v, dna, chaos), v) for v in self.variants(category)]
        matching = [(score, v) for score, v in scored if score >= threshold]
        matching.sort(key=lambda pair: pair[0], reverse=True)
        return [variant for _, variant in matching]


# Global registry instance
_registry: SectionRegistry | None = None


def get_registry() -> SectionRegistry:
    """
    Get the default section registry.

    Populates the built-in sections on first call.
    """
    global _registry
    if _registry is None:
        from vibesmith.sections import builtin_variants

        _registry = SectionRegistry(builtin_variants())
        logger.debug("Section registry initialised with %d variants", len(_registry))
    return _registry
