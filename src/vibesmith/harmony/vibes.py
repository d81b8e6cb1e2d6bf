"""
Gene/Vibe constraint store.

Random gene combinations mostly look bad together. A vibe is a curated
subset of codes per category plus a fixed chaos level; generating DNA from a
vibe keeps the combination coherent. Everything here is static table data
and pure lookups.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Mapping
from dataclasses import dataclass, replace
from enum import StrEnum

from vibesmith.core.genes import (
    DNA,
    PRIMARY_CATEGORIES,
    SECONDARY_CATEGORIES,
    GeneCategory,
    allowed_codes,
    derive_secondary,
)

logger = logging.getLogger(__name__)

DEFAULT_VIBE_ID = "trustworthy"


@dataclass(frozen=True)
class Vibe:
    """A named aesthetic preset.

    Only the primary categories are listed explicitly; the allowed texture,
    radius, border and hover codes are the ones the allowed design codes
    derive.
    """

    id: str
    name: str
    description: str
    typography: tuple[str, ...]
    color: tuple[str, ...]
    layout: tuple[str, ...]
    design: tuple[str, ...]
    hero: tuple[str, ...]
    nav: tuple[str, ...]
    motion: tuple[str, ...]
    chaos: float

    def allowed(self, category: GeneCategory | str) -> tuple[str, ...]:
        """Codes this vibe permits for a category, in declaration order."""
        category = GeneCategory(category)
        if category in SECONDARY_CATEGORIES:
            derived: list[str] = []
            for design in self.design:
                code = derive_secondary(design)[category]
                if code not in derived:
                    derived.append(code)
            return tuple(derived)
        return tuple(getattr(self, category.value))


def _vibe(
    id: str,
    name: str,
    description: str,
    *,
    typography: str,
    color: str,
    layout: str,
    design: str,
    hero: str,
    nav: str,
    motion: str,
    chaos: float,
) -> Vibe:
    def codes(text: str) -> tuple[str, ...]:
        return tuple(text.split())

    return Vibe(
        id=id,
        name=name,
        description=description,
        typography=codes(typography),
        color=codes(color),
        layout=codes(layout),
        design=codes(design),
        hero=codes(hero),
        nav=codes(nav),
        motion=codes(motion),
        chaos=chaos,
    )


_BASE_VIBES: dict[str, Vibe] = {
    "executive": _vibe(
        "executive",
        "Executive",
        "Professional, trustworthy, corporate. Suits B2B, finance and law.",
        typography="T1 T2",
        color="C1 C8 C11",
        layout="L1 L3 L5",
        design="D1 D4 D11",
        hero="H1 H3 H8",
        nav="N1 N2 N9",
        motion="M1",
        chaos=0.0,
    ),
    "maverick": _vibe(
        "maverick",
        "Maverick",
        "Bold, disruptive, attention-grabbing. Suits startups and creatives.",
        typography="T3 T4",
        color="C7 C9",
        layout="L7 L10",
        design="D7 D10 D12",
        hero="H9 H12",
        nav="N3 N7",
        motion="M2 M3",
        chaos=0.8,
    ),
    "elegant": _vibe(
        "elegant",
        "Elegant",
        "Sophisticated, refined, luxurious. Suits high-end services.",
        typography="T2",
        color="C1 C3 C8",
        layout="L1 L5",
        design="D1 D5 D6",
        hero="H2 H3 H9",
        nav="N1 N2 N9",
        motion="M1 M2",
        chaos=0.2,
    ),
    "bold": _vibe(
        "bold",
        "Bold",
        "Strong, confident, impactful. Suits fitness, trades and emergency services.",
        typography="T1 T3",
        color="C2 C6 C9",
        layout="L3 L10",
        design="D2 D3 D7",
        hero="H1 H9 H12",
        nav="N1 N7",
        motion="M2 M3",
        chaos=0.5,
    ),
    "friendly": _vibe(
        "friendly",
        "Friendly",
        "Warm, approachable, inviting. Suits local and family services.",
        typography="T1 T4",
        color="C1 C3 C5 C10",
        layout="L3 L5",
        design="D1 D8",
        hero="H1 H2 H3",
        nav="N1 N7",
        motion="M1 M2",
        chaos=0.3,
    ),
    "minimal": _vibe(
        "minimal",
        "Minimal",
        "Clean, focused, uncluttered. Suits portfolios, tech and design.",
        typography="T1",
        color="C1 C2 C8",
        layout="L1 L5",
        design="D2 D4",
        hero="H3 H9",
        nav="N9",
        motion="M1",
        chaos=0.1,
    ),
    "creative": _vibe(
        "creative",
        "Creative",
        "Artistic, expressive, unique. Suits photographers, restaurants and studios.",
        typography="T2 T3 T4",
        color="C3 C6 C7 C12",
        layout="L2 L7 L10",
        design="D6 D10 D11",
        hero="H2 H8 H12",
        nav="N2 N7",
        motion="M2 M3",
        chaos=0.6,
    ),
    "trustworthy": _vibe(
        "trustworthy",
        "Trustworthy",
        "Reliable, established, dependable. Suits healthcare, insurance and trades.",
        typography="T1 T2",
        color="C1 C4 C5 C11",
        layout="L1 L3",
        design="D1 D4 D11",
        hero="H1 H2 H3",
        nav="N1 N2",
        motion="M1",
        chaos=0.1,
    ),
}

# Aliases share their base vibe's constraints under their own identity
_ALIASES: dict[str, tuple[str, str, str]] = {
    "artisan": (
        "creative",
        "Artisan",
        "Handcrafted, warm, bespoke. Suits makers, studios and premium local services.",
    ),
    "minimalist": (
        "minimal",
        "Minimalist",
        "Ultra clean, focused, uncluttered. Suits premium and modern brands.",
    ),
    "classic": (
        "elegant",
        "Classic",
        "Timeless, traditional, refined. Suits established professional services.",
    ),
    "modern": (
        "executive",
        "Modern",
        "Contemporary, crisp, confident. Suits forward-looking service businesses.",
    ),
    "playful": (
        "friendly",
        "Playful",
        "Light, upbeat, approachable. Suits family-friendly local services.",
    ),
}

VIBES: dict[str, Vibe] = {
    **_BASE_VIBES,
    **{
        alias: replace(_BASE_VIBES[base], id=alias, name=name, description=description)
        for alias, (base, name, description) in _ALIASES.items()
    },
}

INDUSTRY_VIBES: dict[str, str] = {
    # Service trades
    "plumber": "trustworthy",
    "electrician": "trustworthy",
    "hvac": "trustworthy",
    "roofer": "bold",
    "contractor": "bold",
    # Professional services
    "lawyer": "executive",
    "accountant": "executive",
    "financial-advisor": "executive",
    "realtor": "elegant",
    # Healthcare
    "dentist": "friendly",
    "chiropractor": "friendly",
    "veterinarian": "friendly",
    "therapist": "elegant",
    "gym": "bold",
    # Creative
    "restaurant": "creative",
    "photographer": "creative",
}


class VibeCategory(StrEnum):
    SERVICE = "service"
    PROFESSIONAL = "professional"
    HEALTH = "health"
    CREATIVE = "creative"


CATEGORY_VIBES: dict[VibeCategory, tuple[str, ...]] = {
    VibeCategory.SERVICE: ("trustworthy", "bold", "friendly"),
    VibeCategory.PROFESSIONAL: ("executive", "elegant", "minimal"),
    VibeCategory.HEALTH: ("friendly", "trustworthy", "elegant"),
    VibeCategory.CREATIVE: ("creative", "maverick", "bold"),
}


def _check_vibes() -> None:
    """Every code a vibe allows must exist in the global catalogue."""
    for vibe in VIBES.values():
        for category in GeneCategory:
            unknown = set(vibe.allowed(category)) - allowed_codes(category)
            if unknown:
                raise RuntimeError(f"vibe '{vibe.id}' allows unknown {category} codes {unknown}")


_check_vibes()


# =============================================================================
# Lookups
# =============================================================================


def vibe_by_id(vibe_id: str | None) -> Vibe:
    """Vibe for an id, or the default vibe when unknown."""
    return VIBES.get((vibe_id or "").lower(), VIBES[DEFAULT_VIBE_ID])


def industry_to_vibe(industry: str | None) -> Vibe:
    """Vibe for an industry key, or the default vibe when unknown."""
    return VIBES[INDUSTRY_VIBES.get((industry or "").lower(), DEFAULT_VIBE_ID)]


def all_vibe_ids() -> list[str]:
    return list(VIBES)


def vibes_for_category(category: VibeCategory | str) -> list[Vibe]:
    try:
        ids = CATEGORY_VIBES[VibeCategory(category)]
    except ValueError:
        ids = (DEFAULT_VIBE_ID,)
    return [VIBES[vibe_id] for vibe_id in ids]


def is_valid(genes: DNA | Mapping[str, str], vibe: Vibe) -> bool:
    """True if every populated category is inside the vibe's allowed subset.

    Categories missing from a partial mapping are ignored; a key that is not
    a gene category makes the mapping invalid.
    """
    populated = genes.genes() if isinstance(genes, DNA) else genes
    for category, code in populated.items():
        if code is None or category == "chaos":
            continue
        try:
            allowed = vibe.allowed(category)
        except ValueError:
            return False
        if code not in allowed:
            return False
    return True


# =============================================================================
# Generation
# =============================================================================


def generate_constrained_dna(vibe: Vibe, rng: random.Random | None = None) -> DNA:
    """Uniform random pick from each allowed list, secondary genes derived.

    Pass a seeded ``random.Random`` for reproducible output. The vibe's
    chaos is carried on the DNA.
    """
    rng = rng or random.Random()
    picks = {category.value: rng.choice(vibe.allowed(category)) for category in PRIMARY_CATEGORIES}
    secondary = derive_secondary(picks[GeneCategory.DESIGN.value])
    picks.update({category.value: code for category, code in secondary.items()})
    dna = DNA(**picks, chaos=vibe.chaos)
    logger.debug("Generated DNA for vibe %s: %s", vibe.id, picks)
    return dna


def generate_dna_with_vibe(vibe_id: str, rng: random.Random | None = None) -> DNA:
    return generate_constrained_dna(vibe_by_id(vibe_id), rng)


def suggest_vibe_compliant_dna(dna: DNA, vibe: Vibe, rng: random.Random | None = None) -> DNA:
    """Closest vibe-compliant DNA: keep compliant codes, repick the rest.

    Secondary genes are re-derived whenever the design code changes or the
    current ones fall outside the vibe.
    """
    rng = rng or random.Random()
    picks: dict[str, str] = {}
    for category in PRIMARY_CATEGORIES:
        allowed = vibe.allowed(category)
        current = dna.get(category)
        picks[category.value] = current if current in allowed else rng.choice(allowed)

    derived = derive_secondary(picks[GeneCategory.DESIGN.value])
    for category in SECONDARY_CATEGORIES:
        current = dna.get(category)
        picks[category.value] = current if current in vibe.allowed(category) else derived[category]

    return DNA(**picks, chaos=dna.chaos)
