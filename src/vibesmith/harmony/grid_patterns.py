"""
Grid pattern library.

A pattern is one column span per content item. Patterns for each item count
are ordered from uniform to asymmetric, and chaos picks a position along
that order. Above the broken-grid threshold, "broken" patterns with
zero-span (hidden) slots add deliberate whitespace.
"""

from __future__ import annotations

import math
from enum import StrEnum

from vibesmith.core.thresholds import (
    BROKEN_GRID_ABOVE,
    BROKEN_GRID_RANGE,
    MOBILE_BREAKPOINT_PX,
)

GridPattern = list[int]

PATTERNS: dict[int, list[GridPattern]] = {
    2: [
        [1, 1],
        [2, 1],
        [1, 2],
    ],
    3: [
        [1, 1, 1],
        [2, 1, 1],
        [1, 2, 1],
        [1, 1, 2],
        [2, 2, 2],
    ],
    4: [
        [1, 1, 1, 1],
        [2, 1, 1, 2],
        [2, 2, 1, 1],
        [3, 1, 1, 1],
        [2, 1, 1, 2],
        [1, 2, 2, 1],
    ],
    5: [
        [1, 1, 1, 1, 1],
        [2, 1, 1, 1, 1],
        [2, 2, 1, 1, 1],
        [2, 2, 2, 1, 1],
        [3, 2, 2, 2, 1],
        [3, 3, 2, 2, 2],
        [4, 1, 1, 1, 1],
    ],
    6: [
        [1, 1, 1, 1, 1, 1],
        [2, 2, 2, 2, 2, 2],
        [2, 1, 1, 2, 1, 1],
        [2, 2, 1, 1, 2, 2],
        [3, 3, 2, 2, 1, 1],
        [4, 2, 2, 2, 2, 2],
        [3, 3, 3, 3, 3, 3],
    ],
    7: [
        [1, 1, 1, 1, 1, 1, 1],
        [2, 1, 1, 1, 1, 1, 1],
        [2, 2, 2, 1, 1, 1, 1],
        [3, 3, 2, 2, 2, 2, 2],
        [4, 2, 2, 2, 2, 2, 2],
    ],
    8: [
        [1, 1, 1, 1, 1, 1, 1, 1],
        [2, 2, 2, 2, 2, 2, 2, 2],
        [3, 3, 2, 2, 2, 2, 2, 2],
        [4, 4, 2, 2, 2, 2, 2, 2],
    ],
}

# Zero spans are invisible slots
BROKEN_PATTERNS: dict[int, list[GridPattern]] = {
    3: [
        [2, 0, 1],
        [1, 0, 2],
        [0, 2, 1],
    ],
    4: [
        [2, 1, 0, 1],
        [1, 0, 1, 2],
        [0, 2, 2, 0],
    ],
    5: [
        [2, 1, 0, 1, 1],
        [1, 0, 2, 0, 1],
        [0, 1, 2, 1, 0],
    ],
    6: [
        [2, 1, 0, 1, 1, 1],
        [1, 0, 2, 2, 0, 1],
    ],
}

TWO_ROW_PATTERNS: dict[int, list[tuple[GridPattern, GridPattern]]] = {
    4: [
        ([1, 1], [1, 1]),
        ([2, 1], [1, 2]),
    ],
    5: [
        ([1, 1, 1], [1, 1]),
        ([2, 1], [1, 1, 1]),
    ],
    6: [
        ([1, 1, 1], [1, 1, 1]),
        ([2, 1, 1], [1, 1, 2]),
        ([2, 2], [1, 1, 1, 1]),
    ],
}


class LayoutType(StrEnum):
    """Named pattern shapes, independent of chaos."""

    EQUAL = "equal"
    FEATURED = "featured"
    BENTO = "bento"
    MASONRY = "masonry"
    ALTERNATING = "alternating"


def _clamp_chaos(chaos: float) -> float:
    return max(0.0, min(1.0, chaos))


def _index_for(position: float, length: int) -> int:
    return min(max(math.floor(position * (length - 1)), 0), length - 1)


def adjust_pattern_length(pattern: GridPattern, count: int) -> GridPattern:
    """Truncate, or pad with neutral 1-spans, to exactly ``count`` entries."""
    if len(pattern) >= count:
        return list(pattern[:count])
    return list(pattern) + [1] * (count - len(pattern))


def _nearest_count(count: int) -> int | None:
    nearest: int | None = None
    for candidate in sorted(PATTERNS):
        if nearest is None or abs(candidate - count) < abs(nearest - count):
            nearest = candidate
    return nearest


def select_pattern(count: int, chaos: float) -> GridPattern:
    """Pick a span pattern of length ``count`` for a chaos level.

    The returned list is a fresh copy; callers may mutate it.
    """
    count = max(count, 0)
    chaos = _clamp_chaos(chaos)

    broken = BROKEN_PATTERNS.get(count)
    if chaos > BROKEN_GRID_ABOVE and broken:
        position = (chaos - BROKEN_GRID_ABOVE) / BROKEN_GRID_RANGE
        return list(broken[_index_for(position, len(broken))])

    nearest = _nearest_count(count)
    patterns = PATTERNS.get(nearest, []) if nearest is not None else []
    if not patterns:
        return [1] * count

    return adjust_pattern_length(patterns[_index_for(chaos, len(patterns))], count)


def pattern_column_count(pattern: GridPattern) -> int:
    """Grid columns needed for a pattern: the widest non-zero span."""
    spans = [span for span in pattern if span > 0]
    return max(spans) if spans else 1


def select_pattern_for_grid(count: int, grid_columns: int, chaos: float) -> GridPattern:
    """Like ``select_pattern`` but scaled down to fit ``grid_columns``."""
    pattern = select_pattern(count, chaos)
    widest = max(pattern, default=0)
    if widest > grid_columns:
        return [0 if span == 0 else max(1, round(span / widest * grid_columns)) for span in pattern]
    return pattern


def layout_pattern(layout_type: LayoutType | str, count: int) -> GridPattern:
    match LayoutType(layout_type):
        case LayoutType.FEATURED:
            return [2] + [1] * (count - 1) if count > 0 else []
        case LayoutType.BENTO:
            if count <= 3:
                return select_pattern(count, 0.6)
            if count <= 5:
                return select_pattern(count, 0.7)
            return select_pattern(count, 0.8)
        case LayoutType.ALTERNATING:
            return [2 if i % 3 == 0 else 1 for i in range(count)]
        case _:
            # equal and masonry share widths; masonry varies height
            return [1] * count


def select_two_row_pattern(count: int, chaos: float) -> tuple[GridPattern, GridPattern]:
    patterns = TWO_ROW_PATTERNS.get(count)
    if not patterns:
        half = math.ceil(count / 2)
        return [1] * half, [1] * (count - half)
    row1, row2 = patterns[_index_for(_clamp_chaos(chaos), len(patterns))]
    return list(row1), list(row2)


def generate_pattern_css(pattern: GridPattern, class_name: str) -> str:
    """CSS placing each child according to its span.

    Zero-span children are empty spacers that stay in the flow but are
    hidden; everything stacks below the mobile breakpoint.
    """
    selector = f".{class_name}"
    lines = [
        f"{selector} {{",
        "  display: grid;",
        f"  grid-template-columns: repeat({pattern_column_count(pattern)}, 1fr);",
        "  gap: 1.5rem;",
        "}",
    ]

    for i, span in enumerate(pattern, start=1):
        lines.append(f"{selector} > *:nth-child({i}) {{")
        if span == 0:
            lines.append("  visibility: hidden;")
            lines.append("  grid-column: span 1;")
            lines.append("  pointer-events: none;")
        else:
            lines.append(f"  grid-column: span {span};")
        lines.append("}")

    lines.extend(
        [
            f"@media (max-width: {MOBILE_BREAKPOINT_PX}px) {{",
            f"  {selector} {{ grid-template-columns: 1fr; }}",
            f"  {selector} > * {{ grid-column: span 1 !important; visibility: visible !important; }}",
            "}",
        ]
    )
    return "\n".join(lines)
