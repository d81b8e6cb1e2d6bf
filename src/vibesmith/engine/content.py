"""
Site content models and per-section content extraction.

Content files use camelCase keys (``businessName``, ``trustBadges``); the
models accept either that or the snake_case field names.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from vibesmith.engine.blueprints import BlueprintSection
from vibesmith.engine.section_registry import SectionCategory


class ContentModel(BaseModel):
    """Base for content records: frozen, camelCase aliases, unknown keys ignored."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class Service(ContentModel):
    name: str
    description: str = ""
    icon: str | None = None
    price: str | None = None


class Testimonial(ContentModel):
    text: str
    author: str
    rating: int | None = Field(default=None, ge=1, le=5)


class TeamMember(ContentModel):
    name: str
    title: str = ""
    bio: str | None = None


class Faq(ContentModel):
    question: str
    answer: str


class Stat(ContentModel):
    value: str
    label: str


class GalleryItem(ContentModel):
    title: str
    caption: str | None = None
    image_url: str | None = None


class PricingTier(ContentModel):
    name: str
    price: str
    period: str | None = None
    features: list[str] = Field(default_factory=list)
    featured: bool = False


class ContactInfo(ContentModel):
    phone: str | None = None
    email: str | None = None
    address: str | None = None
    city: str | None = None
    state: str | None = None


class SiteContent(ContentModel):
    """
    Everything known about the business being rendered.

    Only ``business_name`` and ``industry`` are required. Missing optional
    lists make the matching optional sections drop out of the page.
    """

    business_name: str
    industry: str
    tagline: str | None = None
    headline: str | None = None
    description: str | None = None
    services: list[Service] = Field(default_factory=list)
    testimonials: list[Testimonial] = Field(default_factory=list)
    team: list[TeamMember] = Field(default_factory=list)
    faqs: list[Faq] = Field(default_factory=list)
    stats: list[Stat] = Field(default_factory=list)
    gallery: list[GalleryItem] = Field(default_factory=list)
    pricing: list[PricingTier] = Field(default_factory=list)
    contact: ContactInfo = Field(default_factory=ContactInfo)
    hours: dict[str, str] = Field(default_factory=dict)
    trust_badges: list[str] = Field(default_factory=list)


def has_content(category: SectionCategory, content: SiteContent) -> bool:
    """Whether the content backs a section of this category."""
    match category:
        case SectionCategory.SERVICES:
            return bool(content.services)
        case SectionCategory.TESTIMONIALS:
            return bool(content.testimonials)
        case SectionCategory.TEAM:
            return bool(content.team)
        case SectionCategory.FAQ:
            return bool(content.faqs)
        case SectionCategory.STATS:
            return bool(content.stats)
        case SectionCategory.GALLERY:
            return bool(content.gallery)
        case SectionCategory.PRICING:
            return bool(content.pricing)
        case SectionCategory.ABOUT:
            return bool(content.description or content.tagline)
        case SectionCategory.FEATURES:
            return bool(content.trust_badges or content.services)
        case _:
            # nav, hero, contact, footer and generic sections always render
            return True


def _dump(items: Sequence[BaseModel]) -> list[dict[str, Any]]:
    return [item.model_dump() for item in items]


def extract_section_content(
    section: BlueprintSection, content: SiteContent, ctas: tuple[str, ...] = ()
) -> dict[str, Any]:
    """Render input for one section: shared keys plus the category's own slice."""
    data: dict[str, Any] = {
        "title": section.title,
        "subtitle": section.subtitle,
        "config": dict(section.config),
        "business_name": content.business_name,
    }
    contact = content.contact.model_dump()

    match section.category:
        case SectionCategory.NAV:
            data["phone"] = content.contact.phone
        case SectionCategory.HERO:
            data.update(
                headline=content.headline or content.business_name,
                tagline=content.tagline or content.description or "",
                phone=content.contact.phone,
                trust_badges=list(content.trust_badges),
                ctas=list(ctas),
            )
        case SectionCategory.SERVICES:
            data["services"] = _dump(content.services)
        case SectionCategory.TESTIMONIALS:
            data["testimonials"] = _dump(content.testimonials)
        case SectionCategory.TEAM:
            data["team"] = _dump(content.team)
        case SectionCategory.FAQ:
            data["faqs"] = _dump(content.faqs)
        case SectionCategory.STATS:
            data["stats"] = _dump(content.stats)
        case SectionCategory.GALLERY:
            data["gallery"] = _dump(content.gallery)
        case SectionCategory.PRICING:
            data["pricing"] = _dump(content.pricing)
        case SectionCategory.ABOUT:
            data.update(description=content.description, tagline=content.tagline)
        case SectionCategory.CONTACT:
            data.update(contact, hours=dict(content.hours))
        case SectionCategory.FOOTER:
            data["contact"] = contact
        case SectionCategory.CTA:
            data.update(phone=content.contact.phone, ctas=list(ctas))
        case SectionCategory.FEATURES:
            data["features"] = list(content.trust_badges) or [s.name for s in content.services]

    return data
