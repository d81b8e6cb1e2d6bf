"""
Industry blueprints: ordered section lists with required flags and titles.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from vibesmith.engine.section_registry import SectionCategory

_EMPTY: Mapping[str, Any] = MappingProxyType({})


@dataclass(frozen=True)
class BlueprintSection:
    """One slot in a page: its category, whether it must render, and its copy."""

    category: SectionCategory
    required: bool = False
    title: str | None = None
    subtitle: str | None = None
    config: Mapping[str, Any] = field(default_factory=lambda: _EMPTY)
    variant: str | None = None  # Forced variant id, set by the director cut


@dataclass(frozen=True)
class Blueprint:
    id: str
    name: str
    description: str
    industries: tuple[str, ...]
    sections: tuple[BlueprintSection, ...]
    suggested_ctas: tuple[str, ...] = ()


def _section(
    category: str,
    required: bool = False,
    title: str | None = None,
    subtitle: str | None = None,
    **config: Any,
) -> BlueprintSection:
    return BlueprintSection(
        SectionCategory(category), required, title, subtitle, MappingProxyType(config)
    )


SERVICE_BUSINESS = Blueprint(
    id="service-business",
    name="Service Business",
    description="Service trades that need trust, availability and quick contact options",
    industries=("plumber", "electrician", "hvac", "roofer", "contractor", "handyman", "landscaper"),
    sections=(
        _section("nav", True),
        _section("hero", True, show_phone=True, show_emergency=True),
        _section("services", True, "Our Services", "Professional solutions for your home"),
        _section("stats", False, "Why Choose Us"),
        _section("testimonials", True, "What Our Customers Say"),
        _section("about", False, "About Us"),
        _section("faq", False, "Frequently Asked Questions"),
        _section("contact", True, "Contact Us", show_phone=True),
        _section("footer", True),
    ),
    suggested_ctas=("Call Now", "Get a Free Quote", "Schedule Service"),
)

PROFESSIONAL_SERVICES = Blueprint(
    id="professional-services",
    name="Professional Services",
    description="Professionals who need to convey expertise, credibility and trust",
    industries=("lawyer", "accountant", "realtor", "financial-advisor", "consultant", "insurance"),
    sections=(
        _section("nav", True),
        _section("hero", True, show_credentials=True),
        _section("services", True, "Practice Areas", "How we can help you"),
        _section("about", True, "About", "Experience you can trust"),
        _section("team", False, "Our Team"),
        _section("testimonials", True, "Client Testimonials"),
        _section("faq", False, "Common Questions"),
        _section("cta", False, "Ready to Get Started?"),
        _section("contact", True, "Schedule a Consultation"),
        _section("footer", True),
    ),
    suggested_ctas=("Schedule Consultation", "Free Case Review", "Get Started"),
)

HEALTH_WELLNESS = Blueprint(
    id="health-wellness",
    name="Health & Wellness",
    description="Healthcare providers who need to convey care, comfort and expertise",
    industries=(
        "dentist",
        "chiropractor",
        "veterinarian",
        "therapist",
        "gym",
        "yoga",
        "spa",
        "medspa",
    ),
    sections=(
        _section("nav", True),
        _section("hero", True, show_booking=True),
        _section("services", True, "Our Services", "Comprehensive care for your needs"),
        _section("team", False, "Meet Our Team"),
        _section("about", True, "About Our Practice"),
        _section("features", False, "Why Choose Us"),
        _section("testimonials", True, "Patient Reviews"),
        _section("faq", False, "Frequently Asked Questions"),
        _section("contact", True, "Book an Appointment", show_hours=True),
        _section("footer", True),
    ),
    suggested_ctas=("Book Appointment", "Schedule Your Visit", "Contact Us"),
)

CREATIVE_VISUAL = Blueprint(
    id="creative-visual",
    name="Creative & Visual",
    description="Visual businesses that need to showcase work and create atmosphere",
    industries=(
        "photographer",
        "restaurant",
        "cafe",
        "bakery",
        "bar",
        "studio",
        "artist",
        "designer",
    ),
    sections=(
        _section("nav", True),
        _section("hero", True, full_height=True),
        _section("gallery", True, "Our Work"),
        _section("services", False, "Services", "What we offer"),
        _section("about", True, "About"),
        _section("testimonials", False, "Reviews"),
        _section("pricing", False, "Packages"),
        _section("contact", True, "Get in Touch"),
        _section("footer", True),
    ),
    suggested_ctas=("View Portfolio", "Book a Session", "Get Pricing"),
)

BLUEPRINTS: dict[str, Blueprint] = {
    blueprint.id: blueprint
    for blueprint in (SERVICE_BUSINESS, PROFESSIONAL_SERVICES, HEALTH_WELLNESS, CREATIVE_VISUAL)
}

DEFAULT_SECTIONS: tuple[BlueprintSection, ...] = (
    _section("nav", True),
    _section("hero", True),
    _section("services", False, "Our Services"),
    _section("about", False, "About Us"),
    _section("testimonials", False, "Testimonials"),
    _section("contact", True, "Contact Us"),
    _section("footer", True),
)

DEFAULT_CTA = "Contact Us"


def blueprint_for_industry(industry: str | None) -> Blueprint | None:
    """First blueprint listing the industry, or None."""
    key = (industry or "").lower()
    for blueprint in BLUEPRINTS.values():
        if key in blueprint.industries:
            return blueprint
    return None
