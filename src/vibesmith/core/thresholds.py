"""
Chaos thresholds and breakpoints shared across the engine.

Every component that gates behaviour on chaos reads from here so that the
palette, grid, layout and effects layers stay visually consistent.
"""

from __future__ import annotations

# Fallback chaos when neither options, DNA nor vibe provide one
DEFAULT_CHAOS = 0.3

# Gap banding (layout resolver)
GAP_MEDIUM_ABOVE = 0.3
GAP_LARGE_ABOVE = 0.6

# Supplementary parallax / texture effects in the assembled document
EFFECTS_ABOVE = 0.5

# Overlapping "broken grid" offsets
DISPLACEMENT_ABOVE = 0.6
DISPLACEMENT_RANGE = 1.0 - DISPLACEMENT_ABOVE

# Broken patterns with zero-span slots
BROKEN_GRID_ABOVE = 0.7
BROKEN_GRID_RANGE = 1.0 - BROKEN_GRID_ABOVE

# Category heuristics in the layout resolver
TESTIMONIAL_PATTERN_ABOVE = 0.5
TEAM_FEATURED_ABOVE = 0.4
PRICING_FEATURED_ABOVE = 0.4
GALLERY_MASONRY_ABOVE = 0.6
GALLERY_BENTO_ABOVE = 0.4
MASONRY_WIDE_GAP_ABOVE = 0.5
BENTO_MIN_CHAOS = 0.5

# Registry matching
VARIANT_MATCH_THRESHOLD = 0.3

# Viewport widths (px)
MOBILE_BREAKPOINT_PX = 768
WIDE_BREAKPOINT_PX = 1200

# Contrast
WCAG_AA_RATIO = 4.5
CONTRAST_FIX_ITERATIONS = 20
CONTRAST_FIX_STEP = 5
