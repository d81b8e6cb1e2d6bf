"""
Gene catalogue and the DNA value type.

A gene is one categorical style dimension with a closed set of codes. A DNA
is one concrete code per category plus an optional chaos scalar. The
catalogue metadata below is what the document style generator reads when it
turns codes into CSS.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields, replace
from enum import StrEnum
from typing import Any

from vibesmith.core.errors import InvalidGeneError


class GeneCategory(StrEnum):
    """Gene categories, in DNA field order."""

    HERO = "hero"
    LAYOUT = "layout"
    COLOR = "color"
    NAV = "nav"
    DESIGN = "design"
    TYPOGRAPHY = "typography"
    MOTION = "motion"
    TEXTURE = "texture"
    RADIUS = "radius"
    BORDER = "border"
    HOVER = "hover"


# Categories picked directly from a vibe; the rest derive from design
PRIMARY_CATEGORIES: tuple[GeneCategory, ...] = (
    GeneCategory.HERO,
    GeneCategory.LAYOUT,
    GeneCategory.COLOR,
    GeneCategory.NAV,
    GeneCategory.DESIGN,
    GeneCategory.TYPOGRAPHY,
    GeneCategory.MOTION,
)

SECONDARY_CATEGORIES: tuple[GeneCategory, ...] = (
    GeneCategory.TEXTURE,
    GeneCategory.RADIUS,
    GeneCategory.BORDER,
    GeneCategory.HOVER,
)


# =============================================================================
# Catalogue metadata
# =============================================================================


@dataclass(frozen=True)
class DesignStyle:
    """Visual design language for a D code."""

    name: str
    border_radius: str
    shadow: str
    style: str


@dataclass(frozen=True)
class Typography:
    """Font pairing for a T code."""

    name: str
    heading_font: str
    body_font: str
    heading_weight: str
    letter_spacing: str
    fonts_url: str


@dataclass(frozen=True)
class Motion:
    name: str
    entrance: str  # fade | slide | scale
    intensity: str
    duration: str


@dataclass(frozen=True)
class Texture:
    name: str
    type: str  # grain | mesh-gradient | dots | clean
    intensity: float


@dataclass(frozen=True)
class Radius:
    name: str
    value: str
    multiplier: int


@dataclass(frozen=True)
class Border:
    name: str
    style: str  # none | solid | double-offset
    width: str


@dataclass(frozen=True)
class Hover:
    name: str
    transform: str
    effect: str  # shadow | glow | none


HERO_NAMES: dict[str, str] = {
    "H1": "Full-Width Impact",
    "H2": "Split Screen",
    "H3": "Minimal Header",
    "H4": "Video Background",
    "H5": "Gradient Overlay",
    "H6": "Particle Effect",
    "H7": "Carousel Hero",
    "H8": "Asymmetric Split",
    "H9": "Text Only",
    "H10": "Product Showcase",
    "H11": "Illustration Style",
    "H12": "Geometric Shapes",
}

LAYOUT_NAMES: dict[str, str] = {
    "L1": "Classic Grid",
    "L2": "Masonry",
    "L3": "Card Grid",
    "L4": "Magazine",
    "L5": "Single Column",
    "L6": "Sidebar Layout",
    "L7": "Asymmetric Grid",
    "L8": "Full-Width Sections",
    "L9": "Timeline",
    "L10": "Bento Box",
    "L11": "Alternating Rows",
    "L12": "Horizontal Scroll",
}

COLOR_NAMES: dict[str, str] = {
    "C1": "Light Modern",
    "C2": "Dark Mode",
    "C3": "Warm Earth",
    "C4": "Cool Ocean",
    "C5": "Forest Green",
    "C6": "Royal Purple",
    "C7": "Sunset Gradient",
    "C8": "Monochrome",
    "C9": "Neon Cyber",
    "C10": "Pastel Soft",
    "C11": "Corporate Blue",
    "C12": "Vintage Sepia",
}

# Color schemes rendered against the dark palette
DARK_COLOR_CODES = frozenset({"C2", "C9"})

NAV_NAMES: dict[str, str] = {
    "N1": "Fixed Top Bar",
    "N2": "Transparent Header",
    "N3": "Hamburger Menu",
    "N4": "Sidebar Nav",
    "N5": "Bottom Tab Bar",
    "N6": "Mega Menu",
    "N7": "Floating Nav",
    "N8": "Split Logo",
    "N9": "Minimal Links",
}

DESIGN_STYLES: dict[str, DesignStyle] = {
    "D1": DesignStyle("Rounded Soft", "16px", "0 4px 20px rgba(0,0,0,0.1)", "soft"),
    "D2": DesignStyle("Sharp Edges", "0", "none", "sharp"),
    "D3": DesignStyle("Heavy Shadow", "8px", "0 25px 50px rgba(0,0,0,0.25)", "elevated"),
    "D4": DesignStyle("Flat Minimal", "4px", "none", "flat"),
    "D5": DesignStyle(
        "Neumorphic", "20px", "8px 8px 16px #d1d1d1, -8px -8px 16px #ffffff", "neumorphic"
    ),
    "D6": DesignStyle("Glassmorphism", "16px", "0 8px 32px rgba(0,0,0,0.1)", "glass"),
    "D7": DesignStyle("Brutalist", "0", "8px 8px 0 #000", "brutalist"),
    "D8": DesignStyle("Pill Shapes", "9999px", "0 4px 12px rgba(0,0,0,0.15)", "pill"),
    "D9": DesignStyle("Outlined", "8px", "none", "outlined"),
    "D10": DesignStyle("Gradient Borders", "12px", "0 4px 15px rgba(0,0,0,0.1)", "gradient-border"),
    "D11": DesignStyle(
        "Layered Cards",
        "12px",
        "0 1px 3px rgba(0,0,0,0.1), 0 4px 12px rgba(0,0,0,0.05)",
        "layered",
    ),
    "D12": DesignStyle("Retro Pixel", "0", "4px 4px 0 #000", "retro"),
}

_FONTS_BASE = "https://fonts.googleapis.com/css2?family="

TYPOGRAPHY: dict[str, Typography] = {
    "T1": Typography(
        "Modern Sans",
        "Inter",
        "Inter",
        "800",
        "-0.02em",
        f"{_FONTS_BASE}Inter:wght@400;500;600;700;800&display=swap",
    ),
    "T2": Typography(
        "Elegant Serif",
        "Playfair Display",
        "Source Sans Pro",
        "700",
        "0",
        f"{_FONTS_BASE}Playfair+Display:wght@400;500;600;700"
        "&family=Source+Sans+Pro:wght@400;600&display=swap",
    ),
    "T3": Typography(
        "Brutalist Mono",
        "Space Mono",
        "IBM Plex Sans",
        "700",
        "0.05em",
        f"{_FONTS_BASE}Space+Mono:wght@400;700"
        "&family=IBM+Plex+Sans:wght@400;500;600&display=swap",
    ),
    "T4": Typography(
        "Playful Rounded",
        "Nunito",
        "Nunito",
        "800",
        "0",
        f"{_FONTS_BASE}Nunito:wght@400;500;600;700;800&display=swap",
    ),
}

MOTION: dict[str, Motion] = {
    "M1": Motion("Subtle", "fade", "subtle", "0.2s"),
    "M2": Motion("Dynamic", "slide", "moderate", "0.3s"),
    "M3": Motion("Dramatic", "scale", "dramatic", "0.4s"),
}

TEXTURE: dict[str, Texture] = {
    "X1": Texture("Film Grain", "grain", 0.15),
    "X2": Texture("Mesh Gradient", "mesh-gradient", 0.8),
    "X3": Texture("Dot Pattern", "dots", 0.1),
    "X4": Texture("Clean", "clean", 0.0),
}

RADIUS: dict[str, Radius] = {
    "R1": Radius("Sharp", "0px", 0),
    "R2": Radius("Smooth", "8px", 1),
    "R3": Radius("Playful", "24px", 3),
    "R4": Radius("Pill", "9999px", 999),
}

BORDER: dict[str, Border] = {
    "B1": Border("None", "none", "0"),
    "B2": Border("Subtle", "solid", "1px"),
    "B3": Border("Brutalist", "solid", "3px"),
    "B4": Border("Double Offset", "double-offset", "2px"),
}

HOVER: dict[str, Hover] = {
    "V1": Hover("Lift", "translateY(-4px)", "shadow"),
    "V2": Hover("Glow", "translateY(-2px)", "glow"),
    "V3": Hover("Skew", "skewY(-2deg)", "none"),
    "V4": Hover("Scale", "scale(1.02)", "none"),
}

_CATALOGUE: dict[GeneCategory, dict[str, Any]] = {
    GeneCategory.HERO: HERO_NAMES,
    GeneCategory.LAYOUT: LAYOUT_NAMES,
    GeneCategory.COLOR: COLOR_NAMES,
    GeneCategory.NAV: NAV_NAMES,
    GeneCategory.DESIGN: DESIGN_STYLES,
    GeneCategory.TYPOGRAPHY: TYPOGRAPHY,
    GeneCategory.MOTION: MOTION,
    GeneCategory.TEXTURE: TEXTURE,
    GeneCategory.RADIUS: RADIUS,
    GeneCategory.BORDER: BORDER,
    GeneCategory.HOVER: HOVER,
}

# Secondary presentation genes implied by each design language
DESIGN_DERIVED: dict[str, dict[GeneCategory, str]] = {
    "D1": {GeneCategory.RADIUS: "R3", GeneCategory.HOVER: "V1", GeneCategory.TEXTURE: "X4", GeneCategory.BORDER: "B1"},
    "D2": {GeneCategory.RADIUS: "R1", GeneCategory.HOVER: "V4", GeneCategory.TEXTURE: "X4", GeneCategory.BORDER: "B2"},
    "D3": {GeneCategory.RADIUS: "R2", GeneCategory.HOVER: "V1", GeneCategory.TEXTURE: "X1", GeneCategory.BORDER: "B1"},
    "D4": {GeneCategory.RADIUS: "R2", GeneCategory.HOVER: "V4", GeneCategory.TEXTURE: "X4", GeneCategory.BORDER: "B2"},
    "D5": {GeneCategory.RADIUS: "R3", GeneCategory.HOVER: "V1", GeneCategory.TEXTURE: "X4", GeneCategory.BORDER: "B1"},
    "D6": {GeneCategory.RADIUS: "R3", GeneCategory.HOVER: "V2", GeneCategory.TEXTURE: "X2", GeneCategory.BORDER: "B2"},
    "D7": {GeneCategory.RADIUS: "R1", GeneCategory.HOVER: "V3", GeneCategory.TEXTURE: "X1", GeneCategory.BORDER: "B3"},
    "D8": {GeneCategory.RADIUS: "R4", GeneCategory.HOVER: "V1", GeneCategory.TEXTURE: "X3", GeneCategory.BORDER: "B1"},
    "D9": {GeneCategory.RADIUS: "R2", GeneCategory.HOVER: "V4", GeneCategory.TEXTURE: "X4", GeneCategory.BORDER: "B2"},
    "D10": {GeneCategory.RADIUS: "R2", GeneCategory.HOVER: "V2", GeneCategory.TEXTURE: "X2", GeneCategory.BORDER: "B4"},
    "D11": {GeneCategory.RADIUS: "R2", GeneCategory.HOVER: "V1", GeneCategory.TEXTURE: "X3", GeneCategory.BORDER: "B1"},
    "D12": {GeneCategory.RADIUS: "R1", GeneCategory.HOVER: "V3", GeneCategory.TEXTURE: "X1", GeneCategory.BORDER: "B3"},
}  # fmt: skip


def allowed_codes(category: GeneCategory | str) -> frozenset[str]:
    """Return the global code set for a gene category."""
    return frozenset(_CATALOGUE[GeneCategory(category)])


def gene_name(category: GeneCategory | str, code: str) -> str:
    """Human-readable name for a code, or the code itself if unknown."""
    entry = _CATALOGUE[GeneCategory(category)].get(code)
    if entry is None:
        return code
    return entry if isinstance(entry, str) else entry.name


def derive_secondary(design: str) -> dict[GeneCategory, str]:
    """Secondary genes implied by a design code (D1 defaults when unknown)."""
    return dict(DESIGN_DERIVED.get(design, DESIGN_DERIVED["D1"]))


# =============================================================================
# DNA
# =============================================================================


@dataclass(frozen=True)
class DNA:
    """One code per gene category plus an optional chaos level.

    Construction validates every code against the global catalogue; an
    out-of-range code is a caller bug and raises ``InvalidGeneError``.
    """

    hero: str = "H1"
    layout: str = "L1"
    color: str = "C1"
    nav: str = "N1"
    design: str = "D1"
    typography: str = "T1"
    motion: str = "M1"
    texture: str = "X4"
    radius: str = "R2"
    border: str = "B1"
    hover: str = "V1"
    chaos: float | None = None

    def __post_init__(self) -> None:
        for category in GeneCategory:
            code = getattr(self, category.value)
            if code not in _CATALOGUE[category]:
                raise InvalidGeneError(
                    f"'{code}' is not a valid {category.value} code",
                    context="DNA",
                )
        if self.chaos is not None and not 0.0 <= self.chaos <= 1.0:
            raise InvalidGeneError(f"chaos {self.chaos} is outside [0, 1]", context="DNA")

    def get(self, category: GeneCategory | str) -> str:
        return str(getattr(self, GeneCategory(category).value))

    def genes(self) -> dict[GeneCategory, str]:
        """Mapping of every category to its code (chaos excluded)."""
        return {category: self.get(category) for category in GeneCategory}

    def with_overrides(self, **codes: Any) -> DNA:
        """Return a copy where the given codes replace the current ones."""
        return replace(self, **{k: v for k, v in codes.items() if v is not None})

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_mapping(cls, data: dict[str, Any]) -> DNA:
        """Build a DNA from a plain mapping such as parsed JSON."""
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise InvalidGeneError(
                f"unknown gene categories: {', '.join(sorted(unknown))}", context="DNA"
            )
        values = dict(data)
        if values.get("chaos") is not None:
            try:
                values["chaos"] = float(values["chaos"])
            except (TypeError, ValueError) as e:
                raise InvalidGeneError(
                    f"chaos must be a number, got {values['chaos']!r}", context="DNA"
                ) from e
        return cls(**values)


def describe_dna(dna: DNA) -> str:
    """One-line description of a DNA for logs and the CLI."""
    parts = [
        f"{gene_name(GeneCategory.HERO, dna.hero)} hero",
        f"{gene_name(GeneCategory.LAYOUT, dna.layout)} layout",
        f"{gene_name(GeneCategory.COLOR, dna.color)} colors",
        f"{gene_name(GeneCategory.NAV, dna.nav)} nav",
        f"{gene_name(GeneCategory.DESIGN, dna.design)} design",
        f"{gene_name(GeneCategory.TYPOGRAPHY, dna.typography)} typography",
        f"{gene_name(GeneCategory.MOTION, dna.motion)} motion",
    ]
    text = ", ".join(parts)
    if dna.chaos is not None:
        text += f" (chaos {round(dna.chaos * 100)}%)"
    return text
