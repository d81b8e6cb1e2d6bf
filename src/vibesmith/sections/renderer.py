"""
Jinja2 template renderer for section fragments, scripts and the page shell.

Sets up the Jinja2 environment with custom filters and template loading
from the package's templates/ directory.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, select_autoescape
from markupsafe import Markup

from vibesmith.engine.section_registry import SectionConfig

# Template directory
TEMPLATES_DIR = Path(__file__).parent.parent / "templates"

_NON_DIGIT_RE = re.compile(r"[^\d+]")
_SLUG_RE = re.compile(r"[^a-z0-9]+")


def phone_href(value: Any) -> str:
    """Turn a display phone number into a ``tel:`` href."""
    if not value:
        return ""
    return "tel:" + _NON_DIGIT_RE.sub("", str(value))


def _initials_filter(value: Any, limit: int = 2) -> str:
    """Initials for an avatar placeholder ("Jane Q. Doe" -> "JQ")."""
    if not value:
        return ""
    return "".join(word[0].upper() for word in str(value).split() if word)[:limit]


def _stars_filter(value: Any, out_of: int = 5) -> Markup:
    """Render a 1-5 rating as filled and empty stars."""
    try:
        rating = max(0, min(out_of, int(value)))
    except (TypeError, ValueError):
        rating = out_of
    return Markup(
        '<span class="stars" aria-label="{} out of {} stars">{}{}</span>'.format(
            rating, out_of, "&#9733;" * rating, "&#9734;" * (out_of - rating)
        )
    )


def _slugify_filter(value: Any) -> str:
    """Slugify a string for use as an HTML id attribute."""
    if value is None:
        return ""
    return _SLUG_RE.sub("-", str(value).lower().strip()).strip("-")


def create_jinja_env() -> Environment:
    """Create and configure the Jinja2 environment."""
    env = Environment(
        loader=FileSystemLoader(str(TEMPLATES_DIR)),
        autoescape=select_autoescape(["html"]),
        trim_blocks=True,
        lstrip_blocks=True,
    )

    env.filters["phone_href"] = phone_href
    env.filters["initials"] = _initials_filter
    env.filters["stars"] = _stars_filter
    env.filters["slugify"] = _slugify_filter

    return env


# Module-level singleton
_env: Environment | None = None


def get_jinja_env() -> Environment:
    """Get the shared Jinja2 environment (lazy singleton)."""
    global _env
    if _env is None:
        _env = create_jinja_env()
    return _env


def render_fragment(template_name: str, **kwargs: Any) -> str:
    """
    Render a template to a string.

    Args:
        template_name: Template path relative to templates/.
        **kwargs: Template variables.

    Returns:
        Rendered text.
    """
    env = get_jinja_env()
    template = env.get_template(template_name)
    return template.render(**kwargs)


def render_section(template_name: str, config: SectionConfig, **kwargs: Any) -> str:
    """Render a section template with the shared section context.

    Every section template sees ``content`` (the extracted content mapping),
    ``title``/``subtitle``/``business_name`` lifted out of it, ``dna``,
    ``palette`` and ``chaos``.
    """
    content = config.content
    return render_fragment(
        template_name,
        content=content,
        title=content.get("title"),
        subtitle=content.get("subtitle"),
        business_name=content.get("business_name", ""),
        dna=config.dna,
        palette=config.palette,
        chaos=config.chaos,
        **kwargs,
    ).strip()
