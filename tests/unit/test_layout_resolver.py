"""
Unit tests for the layout resolver.
"""

from __future__ import annotations

import pytest

from vibesmith.core.genes import DNA
from vibesmith.engine.layout_resolver import (
    GapSize,
    LayoutConfig,
    LayoutKind,
    displacement_offsets,
    effective_chaos,
    gap_for_chaos,
    gene_chaos,
    generate_displacement_css,
    generate_layout_css,
    resolve_faq_layout,
    resolve_gallery_layout,
    resolve_pricing_layout,
    resolve_service_layout,
    resolve_stats_layout,
    resolve_team_layout,
    resolve_testimonials_layout,
)


class TestChaos:
    """Tests for chaos resolution and gap banding."""

    def test_explicit_chaos_wins(self) -> None:
        assert effective_chaos(DNA(chaos=0.9), 0.2, "maverick") == 0.2

    def test_vibe_chaos_before_gene_chaos(self) -> None:
        assert effective_chaos(DNA(chaos=0.9), None, "minimal") == 0.1

    def test_gene_chaos_from_dna(self) -> None:
        assert effective_chaos(DNA(chaos=0.9)) == 0.9

    def test_gene_chaos_from_design(self) -> None:
        assert gene_chaos(DNA(design="D7")) == 0.8

    @pytest.mark.parametrize(
        ("chaos", "gap"),
        [(0.0, GapSize.SMALL), (0.3, GapSize.SMALL), (0.31, GapSize.MEDIUM), (0.61, GapSize.LARGE)],
    )
    def test_gap_bands(self, chaos: float, gap: GapSize) -> None:
        assert gap_for_chaos(chaos) is gap


class TestDisplacement:
    """Tests for broken-grid displacement."""

    @pytest.mark.parametrize("chaos", [0.0, 0.3, 0.59, 0.6])
    def test_empty_at_or_below_threshold(self, chaos: float) -> None:
        assert generate_displacement_css(chaos, "layout-l3") == ""

    def test_present_above_threshold(self) -> None:
        css = generate_displacement_css(0.8, "layout-l3")
        assert ".layout-l3.broken-grid > *:nth-child(odd)" in css
        assert "@media (max-width: 768px)" in css
        assert "transform: none !important" in css

    def test_magnitude_non_decreasing(self) -> None:
        previous = None
        for step in range(61, 101):
            offsets = displacement_offsets(step / 100)
            assert offsets is not None
            magnitude = (
                abs(offsets.odd_y_px),
                abs(offsets.odd_x_pct),
                abs(offsets.even_y_px),
                abs(offsets.even_x_pct),
                offsets.overlap_pct,
            )
            if previous is not None:
                assert all(a >= b for a, b in zip(magnitude, previous, strict=True))
            previous = magnitude

    def test_alternating_sign(self) -> None:
        offsets = displacement_offsets(1.0)
        assert offsets is not None
        assert offsets.odd_y_px < 0 < offsets.even_y_px


class TestServiceLayout:
    """Tests for the services resolver."""

    def test_single_column(self) -> None:
        layout = resolve_service_layout(4, DNA(layout="L5"), chaos=0.9)
        assert layout.kind is LayoutKind.STACK
        assert layout.columns == 1

    def test_timeline(self) -> None:
        layout = resolve_service_layout(4, DNA(layout="L9"))
        assert layout.class_name == "layout-timeline"

    @pytest.mark.parametrize(("count", "columns"), [(3, 2), (6, 3), (9, 4)])
    def test_masonry_columns(self, count: int, columns: int) -> None:
        layout = resolve_service_layout(count, DNA(layout="L2"), chaos=0.2)
        assert layout.kind is LayoutKind.MASONRY
        assert layout.columns == columns

    def test_accepts_item_sequence(self) -> None:
        layout = resolve_service_layout([{}, {}, {}], DNA(layout="L3"), chaos=0.0)
        assert layout.spans == [1, 1, 1]

    def test_grid_uses_pattern_library(self) -> None:
        layout = resolve_service_layout(6, DNA(layout="L1"), chaos=1.0)
        assert 0 in layout.spans
        assert layout.enable_displacement
        assert "broken-grid" in layout.container_classes

    def test_bento_has_minimum_chaos(self) -> None:
        calm = resolve_service_layout(4, DNA(layout="L10"), chaos=0.0)
        assert calm.spans != [1, 1, 1, 1]

    def test_low_chaos_no_displacement(self) -> None:
        layout = resolve_service_layout(3, DNA(layout="L3"), chaos=0.2)
        assert not layout.enable_displacement
        assert layout.container_classes == "layout-l3"


class TestCategoryLayouts:
    """Tests for the dedicated category resolvers."""

    def test_testimonials_single_and_pair(self) -> None:
        assert resolve_testimonials_layout(1, DNA()).kind is LayoutKind.STACK
        assert resolve_testimonials_layout(2, DNA(), chaos=1.0).spans == [1, 1]

    def test_testimonials_pattern_only_when_busy(self) -> None:
        assert resolve_testimonials_layout(4, DNA(), chaos=0.2).spans == [1, 1, 1, 1]
        assert resolve_testimonials_layout(4, DNA(), chaos=1.0).spans != [1, 1, 1, 1]

    def test_stats_flex_above_four(self) -> None:
        assert resolve_stats_layout(4, DNA()).kind is LayoutKind.GRID
        assert resolve_stats_layout(6, DNA()).kind is LayoutKind.FLEX

    def test_team_featured(self) -> None:
        assert resolve_team_layout(6, DNA(), chaos=0.8).spans[0] == 2
        assert resolve_team_layout(3, DNA(), chaos=0.8).spans == [1, 1, 1]

    def test_gallery_masonry(self) -> None:
        assert resolve_gallery_layout(6, DNA(layout="L2"), chaos=0.1).kind is LayoutKind.MASONRY

    def test_gallery_bento(self) -> None:
        assert resolve_gallery_layout(6, DNA(layout="L10"), chaos=0.1).class_name == "gallery-bento"

    def test_gallery_plain(self) -> None:
        layout = resolve_gallery_layout(6, DNA(layout="L3"), chaos=0.1)
        assert layout.class_name == "gallery-grid"
        assert layout.columns == 3

    def test_faq_single_column_by_default(self) -> None:
        assert resolve_faq_layout(10, DNA(layout="L3")).kind is LayoutKind.STACK

    def test_faq_two_column_for_sidebar(self) -> None:
        assert resolve_faq_layout(6, DNA(layout="L6")).columns == 2

    @pytest.mark.parametrize("count", [1, 2, 3])
    def test_pricing_small_counts_equal(self, count: int) -> None:
        layout = resolve_pricing_layout(count, DNA(), chaos=1.0)
        assert layout.spans == [1] * count

    def test_pricing_featured_middle(self) -> None:
        assert resolve_pricing_layout(4, DNA(), chaos=0.8).spans == [1, 2, 1, 1]


class TestLayoutCss:
    """Tests for layout CSS generation."""

    def test_stack(self) -> None:
        css = generate_layout_css(resolve_service_layout(3, DNA(layout="L5")))
        assert "flex-direction: column" in css

    def test_masonry(self) -> None:
        css = generate_layout_css(resolve_service_layout(6, DNA(layout="L2"), chaos=0.2))
        assert "column-count: 3" in css

    def test_grid_is_mobile_first(self) -> None:
        css = generate_layout_css(resolve_service_layout(3, DNA(layout="L3"), chaos=0.0))
        assert "@media (min-width: 768px)" in css
        assert "grid-template-columns: repeat(1, 1fr)" in css
        assert "@media (min-width: 1200px)" in css

    def test_grid_includes_displacement_when_enabled(self) -> None:
        css = generate_layout_css(resolve_service_layout(6, DNA(layout="L1"), chaos=0.9))
        assert "broken-grid" in css
        assert "visibility: hidden" in css


class TestSlots:
    """Tests for placing items around zero-span slots."""

    def test_zero_span_becomes_spacer(self) -> None:
        layout = resolve_service_layout(4, DNA(layout="L3"), chaos=0.8)
        assert layout.spans == [2, 1, 0, 1]
        assert layout.slots(["a", "b", "c", "d"]) == ["a", "b", None, "c", "d"]

    def test_plain_pattern_keeps_items(self) -> None:
        layout = resolve_service_layout(3, DNA(layout="L3"), chaos=0.0)
        assert layout.slots(["a", "b", "c"]) == ["a", "b", "c"]

    def test_no_spacer_after_last_item(self) -> None:
        layout = LayoutConfig(LayoutKind.GRID, 2, [0, 2, 2, 0], GapSize.SMALL, "grid")
        assert layout.slots(["a", "b"]) == [None, "a", "b"]

    def test_every_item_placed(self) -> None:
        layout = resolve_testimonials_layout(5, DNA(), chaos=0.9)
        assert 0 in layout.spans
        placed = layout.slots(list(range(5)))
        assert [item for item in placed if item is not None] == list(range(5))
        for index, span in enumerate(layout.spans):
            if span == 0 and index < len(placed):
                assert placed[index] is None

    def test_spacers_hidden_on_mobile(self) -> None:
        css = generate_layout_css(resolve_service_layout(4, DNA(layout="L3"), chaos=0.8))
        assert ".layout-l3 > *:nth-child(3) { visibility: hidden;" in css
        assert ".layout-l3 > .grid-spacer { display: none; }" in css
