"""Shared pytest fixtures for vibesmith tests."""

from __future__ import annotations

import random
from typing import Any

import pytest

from vibesmith.core.genes import DNA
from vibesmith.engine.content import SiteContent
from vibesmith.engine.section_registry import SectionConfig
from vibesmith.harmony.color_math import Palette, generate_palette


@pytest.fixture
def content_data() -> dict[str, Any]:
    """Content for a plumbing business, camelCase as in content JSON files."""
    return {
        "businessName": "Bluewater Plumbing",
        "industry": "plumber",
        "tagline": "Fast, friendly plumbing since 1998",
        "description": "Family-run plumbers serving the whole county.",
        "services": [
            {"name": "Leak Repair", "description": "Find and fix leaks fast."},
            {"name": "Drain Cleaning", "description": "Clear blocked drains."},
            {"name": "Water Heaters", "description": "Install and service."},
        ],
        "testimonials": [
            {"text": "Fixed our leak in an hour.", "author": "Sam P.", "rating": 5},
            {"text": "Great service.", "author": "Alex R.", "rating": 4},
            {"text": "Would call again.", "author": "Jo M."},
        ],
        "stats": [
            {"value": "25+", "label": "Years"},
            {"value": "4,000", "label": "Jobs done"},
        ],
        "contact": {
            "phone": "(555) 123-4567",
            "email": "hello@bluewater.example",
            "address": "12 Harbour Rd",
            "city": "Springfield",
            "state": "IL",
        },
        "hours": {"Mon-Fri": "8am - 6pm", "Sat": "9am - 1pm"},
        "trustBadges": ["Licensed", "Insured", "24/7 Emergency"],
    }


@pytest.fixture
def site_content(content_data: dict[str, Any]) -> SiteContent:
    return SiteContent.model_validate(content_data)


@pytest.fixture
def minimal_content() -> SiteContent:
    """Only the required fields."""
    return SiteContent(business_name="Acme", industry="plumber")


@pytest.fixture
def dna() -> DNA:
    """A fixed, fully explicit gene combination."""
    return DNA(
        hero="H1",
        layout="L3",
        color="C1",
        nav="N1",
        design="D1",
        typography="T1",
        motion="M1",
        texture="X4",
        radius="R3",
        border="B1",
        hover="V1",
        chaos=0.2,
    )


@pytest.fixture
def palette() -> Palette:
    return generate_palette("#1e5a8a", "muted")


@pytest.fixture
def rng() -> random.Random:
    return random.Random(42)


@pytest.fixture
def make_config(dna: DNA, palette: Palette):
    """Factory for section render input."""

    def _make(content: dict[str, Any] | None = None, chaos: float = 0.2, **overrides: Any):
        return SectionConfig(
            dna=overrides.pop("dna", dna),
            palette=overrides.pop("palette", palette),
            chaos=chaos,
            content=content or {},
            vibe_id=overrides.pop("vibe_id", None),
        )

    return _make
