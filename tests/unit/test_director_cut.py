"""
Unit tests for blueprints and the per-vibe director cut.
"""

from __future__ import annotations

import pytest

from vibesmith.engine.blueprints import (
    BLUEPRINTS,
    DEFAULT_SECTIONS,
    SERVICE_BUSINESS,
    BlueprintSection,
    blueprint_for_industry,
)
from vibesmith.engine.director_cut import director_cut
from vibesmith.engine.section_registry import SectionCategory as C


def _categories(sections: list[BlueprintSection]) -> list[C]:
    return [section.category for section in sections]


def _variant_for(sections: list[BlueprintSection], category: C) -> str | None:
    return next(section.variant for section in sections if section.category is category)


class TestBlueprints:
    """Tests for the industry blueprint lookup."""

    @pytest.mark.parametrize(
        ("industry", "blueprint_id"),
        [
            ("plumber", "service-business"),
            ("lawyer", "professional-services"),
            ("Dentist", "health-wellness"),
            ("photographer", "creative-visual"),
        ],
    )
    def test_lookup(self, industry: str, blueprint_id: str) -> None:
        blueprint = blueprint_for_industry(industry)
        assert blueprint is not None
        assert blueprint.id == blueprint_id

    @pytest.mark.parametrize("industry", ["astronaut", "", None])
    def test_unknown_industry(self, industry: str | None) -> None:
        assert blueprint_for_industry(industry) is None

    @pytest.mark.parametrize("blueprint_id", sorted(BLUEPRINTS))
    def test_blueprints_frame_the_page(self, blueprint_id: str) -> None:
        sections = BLUEPRINTS[blueprint_id].sections
        assert sections[0].category is C.NAV
        assert sections[-1].category is C.FOOTER
        assert all(s.required for s in sections if s.category in (C.NAV, C.HERO, C.FOOTER))

    def test_default_sections(self) -> None:
        assert _categories(list(DEFAULT_SECTIONS)) == [
            C.NAV,
            C.HERO,
            C.SERVICES,
            C.ABOUT,
            C.TESTIMONIALS,
            C.CONTACT,
            C.FOOTER,
        ]


class TestDirectorCut:
    """Tests for the vibe-specific structural rewrites."""

    def test_maverick_drops_stats_and_promotes_testimonials(self) -> None:
        result = director_cut(SERVICE_BUSINESS.sections, "maverick")
        assert C.STATS not in _categories(result)
        assert _categories(result)[2] is C.TESTIMONIALS
        assert _variant_for(result, C.HERO) == "hero-h9-text-only"
        assert len(result) == len(SERVICE_BUSINESS.sections) - 1

    def test_executive_forces_split_hero_and_adds_stats(self) -> None:
        result = director_cut(DEFAULT_SECTIONS, "executive")
        assert _variant_for(result, C.HERO) == "hero-h2-split"
        assert result[2].category is C.STATS
        assert result[2].title == "By the Numbers"

    def test_executive_keeps_existing_stats(self) -> None:
        result = director_cut(SERVICE_BUSINESS.sections, "executive")
        assert _categories(result).count(C.STATS) == 1

    def test_creative_forces_hero_and_nav(self) -> None:
        result = director_cut(DEFAULT_SECTIONS, "creative")
        assert _variant_for(result, C.HERO) == "hero-h1-full-width"
        assert _variant_for(result, C.NAV) == "nav-n7-floating"

    def test_minimal_caps_sections(self) -> None:
        result = director_cut(SERVICE_BUSINESS.sections, "minimal")
        assert _categories(result) == [
            C.NAV,
            C.HERO,
            C.SERVICES,
            C.TESTIMONIALS,
            C.CONTACT,
            C.FOOTER,
        ]
        assert _variant_for(result, C.HERO) == "hero-h3-minimal"

    @pytest.mark.parametrize(
        ("vibe_id", "variant"), [("bold", "hero-h1-full-width"), ("elegant", "hero-h2-split")]
    )
    def test_hero_only_cuts(self, vibe_id: str, variant: str) -> None:
        result = director_cut(DEFAULT_SECTIONS, vibe_id)
        assert _variant_for(result, C.HERO) == variant
        assert _categories(result) == _categories(list(DEFAULT_SECTIONS))

    def test_trustworthy_injects_stats_and_testimonials(self) -> None:
        sections = [
            BlueprintSection(C.NAV, True),
            BlueprintSection(C.HERO, True),
            BlueprintSection(C.CONTACT, True),
            BlueprintSection(C.FOOTER, True),
        ]
        result = director_cut(sections, "trustworthy")
        assert _categories(result) == [
            C.NAV,
            C.HERO,
            C.STATS,
            C.TESTIMONIALS,
            C.CONTACT,
            C.FOOTER,
        ]
        assert result[2].title == "Our Track Record"
        assert result[3].title == "What Our Clients Say"
        assert not result[2].required

    def test_trustworthy_without_contact_skips_testimonials(self) -> None:
        sections = [BlueprintSection(C.NAV, True), BlueprintSection(C.HERO, True)]
        assert C.TESTIMONIALS not in _categories(director_cut(sections, "trustworthy"))

    @pytest.mark.parametrize("vibe_id", ["friendly", "unknown", "", None])
    def test_other_vibes_unchanged(self, vibe_id: str | None) -> None:
        assert director_cut(DEFAULT_SECTIONS, vibe_id) == list(DEFAULT_SECTIONS)

    def test_vibe_id_is_case_insensitive(self) -> None:
        result = director_cut(DEFAULT_SECTIONS, "Maverick")
        assert _variant_for(result, C.HERO) == "hero-h9-text-only"

    def test_input_is_not_mutated(self) -> None:
        sections = list(SERVICE_BUSINESS.sections)
        snapshot = list(sections)
        director_cut(sections, "maverick")
        director_cut(sections, "trustworthy")
        assert sections == snapshot
