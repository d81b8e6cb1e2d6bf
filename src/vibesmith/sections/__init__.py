"""
Built-in section renderers.

Each module exposes a ``VARIANTS`` list; ``builtin_variants`` gathers them
for the default registry.
"""

from __future__ import annotations

from vibesmith.engine.section_registry import SectionVariant


def builtin_variants() -> list[SectionVariant]:
    """All built-in variants, in registration order."""
    from vibesmith.sections import (
        about,
        contact,
        cta,
        faq,
        features,
        footer,
        gallery,
        hero,
        nav,
        pricing,
        services,
        stats,
        team,
        testimonials,
    )

    modules = (
        nav,
        hero,
        services,
        about,
        team,
        features,
        testimonials,
        stats,
        faq,
        gallery,
        pricing,
        cta,
        contact,
        footer,
    )
    return [variant for module in modules for variant in module.VARIANTS]
