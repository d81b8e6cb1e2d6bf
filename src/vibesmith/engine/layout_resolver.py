"""
Layout resolver.

Maps a content category, an item count and a chaos level to a concrete
layout: kind, column count, span pattern and gap band. Most categories go
through the grid pattern library; a few layout genes bypass it (single
column, timeline, masonry).
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

from vibesmith.core.genes import DNA
from vibesmith.core.thresholds import (
    BENTO_MIN_CHAOS,
    DEFAULT_CHAOS,
    DISPLACEMENT_ABOVE,
    DISPLACEMENT_RANGE,
    GALLERY_BENTO_ABOVE,
    GALLERY_MASONRY_ABOVE,
    GAP_LARGE_ABOVE,
    GAP_MEDIUM_ABOVE,
    MASONRY_WIDE_GAP_ABOVE,
    MOBILE_BREAKPOINT_PX,
    PRICING_FEATURED_ABOVE,
    TEAM_FEATURED_ABOVE,
    TESTIMONIAL_PATTERN_ABOVE,
    WIDE_BREAKPOINT_PX,
)
from vibesmith.harmony.grid_patterns import (
    GridPattern,
    LayoutType,
    layout_pattern,
    pattern_column_count,
    select_pattern,
)
from vibesmith.harmony.vibes import VIBES


class LayoutKind(StrEnum):
    GRID = "grid"
    FLEX = "flex"  # wrapping row of equal items
    MASONRY = "masonry"  # CSS column flow
    STACK = "stack"  # vertical


class GapSize(StrEnum):
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


GAP_SIZES: dict[GapSize, str] = {
    GapSize.SMALL: "1rem",
    GapSize.MEDIUM: "1.5rem",
    GapSize.LARGE: "2rem",
}

DNA_TO_LAYOUT: dict[str, LayoutType] = {
    "L1": LayoutType.EQUAL,  # Classic grid
    "L2": LayoutType.MASONRY,
    "L3": LayoutType.EQUAL,  # Card grid
    "L4": LayoutType.ALTERNATING,  # Magazine
    "L5": LayoutType.EQUAL,  # Single column
    "L6": LayoutType.EQUAL,  # Sidebar
    "L7": LayoutType.BENTO,  # Asymmetric
    "L8": LayoutType.EQUAL,
    "L9": LayoutType.EQUAL,  # Timeline
    "L10": LayoutType.BENTO,
    "L11": LayoutType.ALTERNATING,
    "L12": LayoutType.EQUAL,
}

# Chaos implied by a design language when nothing else provides one
DESIGN_CHAOS: dict[str, float] = {
    "D1": 0.1,
    "D2": 0.3,
    "D3": 0.4,
    "D4": 0.1,
    "D5": 0.2,
    "D6": 0.3,
    "D7": 0.8,
    "D8": 0.3,
    "D9": 0.2,
    "D10": 0.5,
    "D11": 0.2,
    "D12": 0.7,
}


@dataclass(frozen=True)
class LayoutConfig:
    """Resolved layout for one content block."""

    kind: LayoutKind
    columns: int
    spans: GridPattern
    gap: GapSize
    class_name: str
    enable_displacement: bool = False
    chaos: float | None = None

    @property
    def container_classes(self) -> str:
        """Classes for the item container, including the broken-grid hook."""
        if self.enable_displacement:
            return f"{self.class_name} broken-grid"
        return self.class_name

    def slots(self, items: Sequence[Any]) -> list[Any]:
        """Children of the item container in grid order.

        Each zero span becomes a ``None`` spacer, so content only lands in
        visible slots. Items left once the pattern is used up follow with
        the default span.
        """
        remaining = list(items)
        placed: list[Any] = []
        for span in self.spans:
            if not remaining:
                break
            placed.append(None if span == 0 else remaining.pop(0))
        placed.extend(remaining)
        return placed


@dataclass(frozen=True)
class Displacement:
    """Offsets applied to alternating items in a broken grid.

    Magnitudes grow with chaos above the displacement threshold.
    """

    odd_y_px: int
    odd_x_pct: int
    even_y_px: int
    even_x_pct: int
    overlap_pct: float = field(default=0.0)


MAX_OVERLAP_PCT = 15.0


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def gene_chaos(dna: DNA) -> float:
    """Chaos carried by the DNA, else implied by its design gene."""
    if dna.chaos is not None:
        return dna.chaos
    return DESIGN_CHAOS.get(dna.design, DEFAULT_CHAOS)


def effective_chaos(dna: DNA, chaos: float | None = None, vibe_id: str | None = None) -> float:
    """Explicit chaos, then the vibe's chaos, then the gene-derived chaos."""
    if chaos is not None:
        return chaos
    vibe = VIBES.get(vibe_id or "")
    if vibe is not None:
        return vibe.chaos
    return gene_chaos(dna)


def gap_for_chaos(chaos: float) -> GapSize:
    if chaos > GAP_LARGE_ABOVE:
        return GapSize.LARGE
    if chaos > GAP_MEDIUM_ABOVE:
        return GapSize.MEDIUM
    return GapSize.SMALL


def _count(items: Sequence[Any] | int) -> int:
    return items if isinstance(items, int) else len(items)


# =============================================================================
# Displacement
# =============================================================================


def displacement_offsets(chaos: float) -> Displacement | None:
    """Offsets for a chaos level, or None at or below the threshold."""
    if chaos <= DISPLACEMENT_ABOVE:
        return None
    intensity = min(1.0, (chaos - DISPLACEMENT_ABOVE) / DISPLACEMENT_RANGE)
    return Displacement(
        odd_y_px=_round_half_up(-8 - intensity * 16),
        odd_x_pct=_round_half_up(intensity * 5),
        even_y_px=_round_half_up(4 + intensity * 8),
        even_x_pct=_round_half_up(-intensity * 3),
        overlap_pct=min(MAX_OVERLAP_PCT, intensity * MAX_OVERLAP_PCT),
    )


def generate_displacement_css(chaos: float, class_name: str) -> str:
    """Broken-grid offsets for ``.class_name.broken-grid`` children.

    Empty at or below the displacement threshold; disabled below the mobile
    breakpoint.
    """
    offsets = displacement_offsets(chaos)
    if offsets is None:
        return ""

    selector = f".{class_name}.broken-grid"
    lines = [
        f"/* Broken grid displacement, chaos {chaos:.2f} */",
        f"{selector} > * {{ position: relative; transition: transform 0.3s ease-out, z-index 0s; }}",
        f"{selector} > *:nth-child(odd) {{",
        f"  transform: translateY({offsets.odd_y_px}px) translateX({offsets.odd_x_pct}%);",
        "  z-index: 2;",
        "}",
        f"{selector} > *:nth-child(even) {{",
        f"  transform: translateY({offsets.even_y_px}px) translateX({offsets.even_x_pct}%);",
        "  z-index: 1;",
        "}",
        f"{selector} > *:hover {{ z-index: 10; transform: translateY(-2px) scale(1.02); }}",
        f"@media (max-width: {MOBILE_BREAKPOINT_PX}px) {{",
        f"  {selector} > * {{ transform: none !important; z-index: auto !important; }}",
        "}",
    ]
    return "\n".join(lines)


# =============================================================================
# Resolvers
# =============================================================================


def resolve_service_layout(
    items: Sequence[Any] | int,
    dna: DNA,
    chaos: float | None = None,
    vibe_id: str | None = None,
) -> LayoutConfig:
    """Layout for the services block, driven by the layout gene."""
    count = _count(items)
    actual = effective_chaos(dna, chaos, vibe_id)
    code = dna.layout
    ones = [1] * count

    if code == "L5":
        return LayoutConfig(LayoutKind.STACK, 1, ones, GapSize.LARGE, "layout-single-column")

    if code == "L9":
        return LayoutConfig(LayoutKind.STACK, 1, ones, GapSize.MEDIUM, "layout-timeline")

    if code == "L2":
        columns = 2 if count <= 4 else 3 if count <= 6 else 4
        gap = GapSize.LARGE if actual > MASONRY_WIDE_GAP_ABOVE else GapSize.MEDIUM
        return LayoutConfig(LayoutKind.MASONRY, columns, ones, gap, "layout-masonry")

    layout_type = DNA_TO_LAYOUT.get(code, LayoutType.EQUAL)
    if layout_type is LayoutType.BENTO:
        pattern = select_pattern(count, max(BENTO_MIN_CHAOS, actual))
    elif layout_type is LayoutType.ALTERNATING:
        pattern = layout_pattern(LayoutType.ALTERNATING, count)
    else:
        pattern = select_pattern(count, actual)

    return LayoutConfig(
        kind=LayoutKind.GRID,
        columns=pattern_column_count(pattern),
        spans=pattern,
        gap=gap_for_chaos(actual),
        class_name=f"layout-{code.lower()}",
        enable_displacement=actual > DISPLACEMENT_ABOVE,
        chaos=actual,
    )


def resolve_testimonials_layout(count: int, dna: DNA, chaos: float | None = None) -> LayoutConfig:
    actual = gene_chaos(dna) if chaos is None else chaos

    if count == 1:
        return LayoutConfig(LayoutKind.STACK, 1, [1], GapSize.LARGE, "testimonials-single")
    if count == 2:
        return LayoutConfig(LayoutKind.GRID, 2, [1, 1], GapSize.MEDIUM, "testimonials-pair")

    busy = actual > TESTIMONIAL_PATTERN_ABOVE
    pattern = select_pattern(count, actual) if busy else [1] * count
    return LayoutConfig(
        kind=LayoutKind.GRID,
        columns=max(1, min(3, count)),
        spans=pattern,
        gap=GapSize.LARGE if busy else GapSize.MEDIUM,
        class_name="testimonials-grid",
    )


def resolve_stats_layout(count: int, dna: DNA) -> LayoutConfig:
    """Stats read best at equal width; more than four wrap as a flex row."""
    kind = LayoutKind.FLEX if count > 4 else LayoutKind.GRID
    return LayoutConfig(kind, max(1, min(4, count)), [1] * count, GapSize.MEDIUM, "stats-layout")


def resolve_team_layout(count: int, dna: DNA, chaos: float | None = None) -> LayoutConfig:
    actual = gene_chaos(dna) if chaos is None else chaos

    if count <= 4:
        return LayoutConfig(LayoutKind.GRID, max(count, 1), [1] * count, GapSize.MEDIUM, "team-grid")

    featured = actual > TEAM_FEATURED_ABOVE
    pattern = layout_pattern(LayoutType.FEATURED, count) if featured else [1] * count
    return LayoutConfig(
        LayoutKind.GRID, min(4, pattern_column_count(pattern)), pattern, GapSize.MEDIUM, "team-grid"
    )


def resolve_gallery_layout(count: int, dna: DNA, chaos: float | None = None) -> LayoutConfig:
    actual = gene_chaos(dna) if chaos is None else chaos
    code = dna.layout
    columns = 2 if count <= 4 else 3 if count <= 9 else 4

    if code == "L2" or actual > GALLERY_MASONRY_ABOVE:
        gap = GapSize.SMALL if actual > MASONRY_WIDE_GAP_ABOVE else GapSize.MEDIUM
        return LayoutConfig(LayoutKind.MASONRY, columns, [1] * count, gap, "gallery-masonry")

    if code == "L10" or actual > GALLERY_BENTO_ABOVE:
        pattern = select_pattern(count, actual)
        return LayoutConfig(
            LayoutKind.GRID, pattern_column_count(pattern), pattern, GapSize.SMALL, "gallery-bento"
        )

    return LayoutConfig(LayoutKind.GRID, columns, [1] * count, GapSize.SMALL, "gallery-grid")


def resolve_faq_layout(count: int, dna: DNA) -> LayoutConfig:
    """FAQs stay single column except for long lists under the sidebar layout."""
    if dna.layout == "L6" and count >= 6:
        return LayoutConfig(LayoutKind.GRID, 2, [1] * count, GapSize.MEDIUM, "faq-two-column")
    return LayoutConfig(LayoutKind.STACK, 1, [1] * count, GapSize.SMALL, "faq-list")


def resolve_pricing_layout(count: int, dna: DNA, chaos: float | None = None) -> LayoutConfig:
    actual = gene_chaos(dna) if chaos is None else chaos

    if count <= 3:
        return LayoutConfig(
            LayoutKind.GRID, max(count, 1), [1] * count, GapSize.MEDIUM, "pricing-grid"
        )

    if actual > PRICING_FEATURED_ABOVE:
        pattern = [1, 2, 1] + [1] * (count - 3)
    else:
        pattern = [1] * count
    return LayoutConfig(
        LayoutKind.GRID, min(4, pattern_column_count(pattern)), pattern, GapSize.MEDIUM, "pricing-grid"
    )


# =============================================================================
# CSS
# =============================================================================


def _span_rules(selector: str, spans: GridPattern, indent: str) -> list[str]:
    lines = []
    for i, span in enumerate(spans, start=1):
        if span == 0:
            lines.append(
                f"{indent}{selector} > *:nth-child({i}) "
                "{ visibility: hidden; grid-column: span 1; pointer-events: none; }"
            )
        else:
            lines.append(f"{indent}{selector} > *:nth-child({i}) {{ grid-column: span {span}; }}")
    return lines


def generate_layout_css(config: LayoutConfig) -> str:
    """Mobile-first CSS for a resolved layout."""
    selector = f".{config.class_name}"
    gap = GAP_SIZES[config.gap]

    if config.kind is LayoutKind.STACK:
        return f"{selector} {{ display: flex; flex-direction: column; gap: {gap}; }}"

    if config.kind is LayoutKind.MASONRY:
        return "\n".join(
            [
                f"{selector} {{ column-count: {config.columns}; column-gap: {gap}; }}",
                f"{selector} > * {{ break-inside: avoid; margin-bottom: {gap}; }}",
                f"@media (max-width: {MOBILE_BREAKPOINT_PX}px) {{",
                f"  {selector} {{ column-count: 1; }}",
                "}",
            ]
        )

    if config.kind is LayoutKind.FLEX:
        return "\n".join(
            [
                f"{selector} {{ display: flex; flex-wrap: wrap; gap: {gap}; }}",
                f"{selector} > * {{ flex: 1 1 calc({100 / config.columns:.4g}% - {gap}); }}",
                f"@media (max-width: {MOBILE_BREAKPOINT_PX}px) {{",
                f"  {selector} > * {{ flex-basis: 100%; }}",
                "}",
            ]
        )

    lines = [
        f"{selector} {{ display: flex; flex-direction: column; gap: {gap}; }}",
        f"@media (min-width: {MOBILE_BREAKPOINT_PX}px) {{",
        f"  {selector} {{ display: grid; grid-template-columns: repeat({config.columns}, 1fr); gap: {gap}; }}",
        *_span_rules(selector, config.spans, "  "),
        "}",
        f"@media (max-width: {MOBILE_BREAKPOINT_PX - 1}px) {{",
        f"  {selector} > .grid-spacer {{ display: none; }}",
        "}",
        f"@media (min-width: {WIDE_BREAKPOINT_PX}px) {{",
        f"  {selector} {{ gap: calc({gap} * 1.25); }}",
        "}",
    ]

    if config.enable_displacement and config.chaos is not None:
        displacement = generate_displacement_css(config.chaos, config.class_name)
        if displacement:
            lines.append(displacement)

    return "\n".join(lines)
