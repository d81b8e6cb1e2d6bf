"""
Unit tests for the section variant registry.
"""

from __future__ import annotations

import logging

import pytest

from vibesmith.core.genes import DNA, GeneCategory
from vibesmith.engine.section_registry import (
    SectionCategory,
    SectionConfig,
    SectionOutput,
    SectionRegistry,
    SectionVariant,
    get_registry,
    match_score,
)
from vibesmith.sections import builtin_variants


def _render(config: SectionConfig) -> SectionOutput:
    return SectionOutput("<section></section>")


def _variant(
    id: str,
    category: SectionCategory = SectionCategory.HERO,
    dna_match: dict[GeneCategory, str] | None = None,
    chaos_range: tuple[float, float] | None = None,
    priority: float = 0.0,
) -> SectionVariant:
    return SectionVariant(
        id=id,
        name=id.title(),
        category=category,
        render=_render,
        dna_match=dna_match or {},
        chaos_range=chaos_range,
        priority=priority,
    )


class TestMatchScore:
    """Tests for the scoring function."""

    def test_no_criteria_scores_zero(self) -> None:
        assert match_score(_variant("bare"), DNA()) == 0.0

    def test_full_gene_match(self) -> None:
        variant = _variant("h1", dna_match={GeneCategory.HERO: "H1"})
        assert match_score(variant, DNA(hero="H1")) == 1.0
        assert match_score(variant, DNA(hero="H2")) == 0.0

    def test_chaos_inside_range(self) -> None:
        variant = _variant("calm", chaos_range=(0.0, 0.5))
        assert match_score(variant, DNA(), 0.3) == 1.0

    def test_chaos_outside_range_decays(self) -> None:
        variant = _variant("calm", chaos_range=(0.0, 0.5))
        near = match_score(variant, DNA(), 0.6)
        far = match_score(variant, DNA(), 1.0)
        assert near == pytest.approx(0.45)
        assert far < near

    def test_priority_adds_to_score_only(self) -> None:
        variant = _variant(
            "h1", dna_match={GeneCategory.HERO: "H1"}, chaos_range=(0, 1), priority=1
        )
        # (1 + 0.5 + 0.1) / (1 + 0.5 + 0.5)
        assert match_score(variant, DNA(hero="H1"), 0.5) == pytest.approx(0.8)

    def test_empty_requirement_is_ignored(self) -> None:
        variant = _variant("h", dna_match={GeneCategory.HERO: ""}, chaos_range=(0, 1))
        assert match_score(variant, DNA(), 0.5) == 1.0


class TestRegistry:
    """Tests for registration and lookup."""

    def test_register_and_get(self) -> None:
        registry = SectionRegistry([_variant("a")])
        assert registry.get("a") is not None
        assert registry.get("missing") is None
        assert len(registry) == 1

    def test_duplicate_replaces_in_place(self, caplog: pytest.LogCaptureFixture) -> None:
        first = _variant("a", priority=1)
        second = _variant("b")
        replacement = _variant("a", priority=2)
        registry = SectionRegistry([first, second])

        with caplog.at_level(logging.WARNING, logger="vibesmith.engine.section_registry"):
            registry.register(replacement)

        variants = registry.variants(SectionCategory.HERO)
        assert [v.id for v in variants] == ["a", "b"]
        assert variants[0].priority == 2
        assert "already registered" in caplog.text

    def test_variants_for_unknown_category(self) -> None:
        assert SectionRegistry().variants("sparkles") == []

    def test_categories(self) -> None:
        registry = SectionRegistry([_variant("a"), _variant("n", SectionCategory.NAV)])
        assert set(registry.categories()) == {SectionCategory.HERO, SectionCategory.NAV}


class TestFindBestVariant:
    """Tests for best-variant selection."""

    def test_empty_category_returns_none(self) -> None:
        registry = SectionRegistry([_variant("a")])
        assert registry.find_best_variant(SectionCategory.FAQ, DNA()) is None

    def test_never_crosses_category(self) -> None:
        registry = SectionRegistry(
            [
                _variant("nav", SectionCategory.NAV, {GeneCategory.HERO: "H1"}),
                _variant("hero", SectionCategory.HERO, {GeneCategory.HERO: "H2"}),
            ]
        )
        best = registry.find_best_variant(SectionCategory.HERO, DNA(hero="H1"))
        assert best is not None
        assert best.category is SectionCategory.HERO

    def test_highest_score_wins(self) -> None:
        registry = SectionRegistry(
            [
                _variant("h1", dna_match={GeneCategory.HERO: "H1"}),
                _variant("h2", dna_match={GeneCategory.HERO: "H2"}),
            ]
        )
        best = registry.find_best_variant("hero", DNA(hero="H2"))
        assert best is not None and best.id == "h2"

    def test_tie_keeps_first_registered(self) -> None:
        registry = SectionRegistry([_variant("first"), _variant("second")])
        best = registry.find_best_variant(SectionCategory.HERO, DNA())
        assert best is not None and best.id == "first"

    def test_find_matching_sorted_and_thresholded(self) -> None:
        registry = SectionRegistry(
            [
                _variant("miss", dna_match={GeneCategory.HERO: "H9"}),
                _variant("partial", dna_match={GeneCategory.HERO: "H1", GeneCategory.NAV: "N9"}),
                _variant("full", dna_match={GeneCategory.HERO: "H1"}),
            ]
        )
        matching = registry.find_matching_variants(SectionCategory.HERO, DNA(hero="H1"))
        assert [v.id for v in matching] == ["full", "partial"]


class TestDefaultRegistry:
    """Tests for the built-in registry."""

    def test_is_singleton(self) -> None:
        assert get_registry() is get_registry()

    @pytest.mark.parametrize("category", list(SectionCategory))
    def test_every_category_has_a_variant(self, category: SectionCategory) -> None:
        assert get_registry().variants(category)

    def test_builtin_ids_are_unique(self) -> None:
        ids = [variant.id for variant in builtin_variants()]
        assert len(ids) == len(set(ids))
        assert len(get_registry()) == len(ids)
