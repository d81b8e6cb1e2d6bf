"""
Unit tests for content models and per-section extraction.
"""

from __future__ import annotations

from typing import Any

import pytest
from pydantic import ValidationError

from vibesmith.engine.blueprints import BlueprintSection
from vibesmith.engine.content import SiteContent, extract_section_content, has_content
from vibesmith.engine.section_registry import SectionCategory as C


class TestSiteContent:
    """Tests for parsing content documents."""

    def test_camel_case_keys(self, site_content: SiteContent) -> None:
        assert site_content.business_name == "Bluewater Plumbing"
        assert site_content.trust_badges == ["Licensed", "Insured", "24/7 Emergency"]
        assert site_content.contact.city == "Springfield"

    def test_snake_case_keys(self) -> None:
        content = SiteContent.model_validate(
            {"business_name": "Acme", "industry": "lawyer", "trust_badges": ["Bar certified"]}
        )
        assert content.trust_badges == ["Bar certified"]

    def test_unknown_keys_ignored(self) -> None:
        content = SiteContent.model_validate(
            {"businessName": "Acme", "industry": "plumber", "mascot": "Otter"}
        )
        assert not hasattr(content, "mascot")

    @pytest.mark.parametrize("missing", ["businessName", "industry"])
    def test_required_fields(self, content_data: dict[str, Any], missing: str) -> None:
        del content_data[missing]
        with pytest.raises(ValidationError):
            SiteContent.model_validate(content_data)

    def test_rating_bounds(self) -> None:
        with pytest.raises(ValidationError):
            SiteContent.model_validate(
                {
                    "businessName": "Acme",
                    "industry": "plumber",
                    "testimonials": [{"text": "Meh", "author": "X", "rating": 9}],
                }
            )

    def test_defaults(self, minimal_content: SiteContent) -> None:
        assert minimal_content.services == []
        assert minimal_content.contact.phone is None
        assert minimal_content.hours == {}


class TestHasContent:
    """Tests for deciding whether optional sections have something to show."""

    @pytest.mark.parametrize(
        "category",
        [C.SERVICES, C.TESTIMONIALS, C.STATS, C.ABOUT, C.FEATURES],
    )
    def test_backed_sections(self, site_content: SiteContent, category: C) -> None:
        assert has_content(category, site_content)

    @pytest.mark.parametrize(
        "category",
        [
            C.SERVICES,
            C.TESTIMONIALS,
            C.TEAM,
            C.FAQ,
            C.STATS,
            C.GALLERY,
            C.PRICING,
            C.ABOUT,
            C.FEATURES,
        ],
    )
    def test_empty_content(self, minimal_content: SiteContent, category: C) -> None:
        assert not has_content(category, minimal_content)

    @pytest.mark.parametrize("category", [C.NAV, C.HERO, C.CONTACT, C.FOOTER, C.CTA])
    def test_structural_sections_always_render(
        self, minimal_content: SiteContent, category: C
    ) -> None:
        assert has_content(category, minimal_content)

    def test_about_from_tagline_alone(self) -> None:
        content = SiteContent(business_name="Acme", industry="plumber", tagline="Since 1990")
        assert has_content(C.ABOUT, content)


class TestExtractSectionContent:
    """Tests for slicing content per section."""

    def test_shared_keys(self, site_content: SiteContent) -> None:
        section = BlueprintSection(C.SERVICES, True, "Our Services", "What we do", {"columns": 3})
        data = extract_section_content(section, site_content)
        assert data["title"] == "Our Services"
        assert data["subtitle"] == "What we do"
        assert data["config"] == {"columns": 3}
        assert data["business_name"] == "Bluewater Plumbing"
        assert [s["name"] for s in data["services"]] == [
            "Leak Repair",
            "Drain Cleaning",
            "Water Heaters",
        ]

    def test_hero(self, site_content: SiteContent) -> None:
        data = extract_section_content(
            BlueprintSection(C.HERO, True), site_content, ("Call Now", "Get a Quote")
        )
        assert data["headline"] == "Bluewater Plumbing"
        assert data["tagline"] == "Fast, friendly plumbing since 1998"
        assert data["phone"] == "(555) 123-4567"
        assert data["ctas"] == ["Call Now", "Get a Quote"]
        assert data["trust_badges"] == ["Licensed", "Insured", "24/7 Emergency"]

    def test_hero_headline_override(self) -> None:
        content = SiteContent(
            business_name="Acme", industry="plumber", headline="Pipes, sorted", description="D"
        )
        data = extract_section_content(BlueprintSection(C.HERO, True), content)
        assert data["headline"] == "Pipes, sorted"
        assert data["tagline"] == "D"

    def test_contact_flattens_contact_info(self, site_content: SiteContent) -> None:
        data = extract_section_content(BlueprintSection(C.CONTACT, True), site_content)
        assert data["email"] == "hello@bluewater.example"
        assert data["hours"] == {"Mon-Fri": "8am - 6pm", "Sat": "9am - 1pm"}

    def test_footer_nests_contact_info(self, site_content: SiteContent) -> None:
        data = extract_section_content(BlueprintSection(C.FOOTER, True), site_content)
        assert data["contact"]["phone"] == "(555) 123-4567"

    def test_features_prefer_trust_badges(self, site_content: SiteContent) -> None:
        data = extract_section_content(BlueprintSection(C.FEATURES, False), site_content)
        assert data["features"] == ["Licensed", "Insured", "24/7 Emergency"]

    def test_features_fall_back_to_service_names(self) -> None:
        content = SiteContent.model_validate(
            {"businessName": "Acme", "industry": "plumber", "services": [{"name": "Repairs"}]}
        )
        data = extract_section_content(BlueprintSection(C.FEATURES, False), content)
        assert data["features"] == ["Repairs"]

    def test_config_is_copied(self, site_content: SiteContent) -> None:
        section = BlueprintSection(C.NAV, True, config={"sticky": True})
        data = extract_section_content(section, site_content)
        data["config"]["sticky"] = False
        assert section.config["sticky"] is True
