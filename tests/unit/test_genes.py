"""
Unit tests for the gene catalogue and the DNA value type.
"""

from __future__ import annotations

import pytest

from vibesmith.core.errors import InvalidGeneError, VibesmithError
from vibesmith.core.genes import (
    DESIGN_DERIVED,
    DNA,
    GeneCategory,
    allowed_codes,
    derive_secondary,
    describe_dna,
    gene_name,
)


class TestCatalogue:
    """Tests for the closed code sets."""

    @pytest.mark.parametrize(
        ("category", "size"),
        [
            (GeneCategory.HERO, 12),
            (GeneCategory.LAYOUT, 12),
            (GeneCategory.COLOR, 12),
            (GeneCategory.NAV, 9),
            (GeneCategory.DESIGN, 12),
            (GeneCategory.TYPOGRAPHY, 4),
            (GeneCategory.MOTION, 3),
            (GeneCategory.TEXTURE, 4),
            (GeneCategory.RADIUS, 4),
            (GeneCategory.BORDER, 4),
            (GeneCategory.HOVER, 4),
        ],
    )
    def test_category_sizes(self, category: GeneCategory, size: int) -> None:
        assert len(allowed_codes(category)) == size

    def test_allowed_codes_accepts_string_category(self) -> None:
        assert "D7" in allowed_codes("design")

    def test_gene_name_for_metadata_entry(self) -> None:
        assert gene_name(GeneCategory.DESIGN, "D7") == "Brutalist"

    def test_gene_name_unknown_code_returns_code(self) -> None:
        assert gene_name(GeneCategory.HERO, "H99") == "H99"


class TestDeriveSecondary:
    """Tests for the design -> presentation gene table."""

    def test_every_design_code_has_derivation(self) -> None:
        assert set(DESIGN_DERIVED) == allowed_codes(GeneCategory.DESIGN)

    def test_brutalist_derivation(self) -> None:
        derived = derive_secondary("D7")
        assert derived[GeneCategory.RADIUS] == "R1"
        assert derived[GeneCategory.BORDER] == "B3"
        assert derived[GeneCategory.TEXTURE] == "X1"

    def test_unknown_design_falls_back_to_d1(self) -> None:
        assert derive_secondary("D99") == derive_secondary("D1")

    def test_returns_copy(self) -> None:
        derived = derive_secondary("D1")
        derived[GeneCategory.RADIUS] = "R4"
        assert derive_secondary("D1")[GeneCategory.RADIUS] == "R3"


class TestDNA:
    """Tests for DNA construction and validation."""

    def test_defaults_are_valid(self) -> None:
        dna = DNA()
        assert dna.hero == "H1"
        assert dna.chaos is None

    def test_invalid_code_raises(self) -> None:
        with pytest.raises(InvalidGeneError, match="H13"):
            DNA(hero="H13")

    def test_invalid_gene_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            DNA(motion="M0")

    @pytest.mark.parametrize("chaos", [-0.1, 1.5])
    def test_chaos_out_of_range_raises(self, chaos: float) -> None:
        with pytest.raises(VibesmithError):
            DNA(chaos=chaos)

    def test_is_frozen(self) -> None:
        dna = DNA()
        with pytest.raises(AttributeError):
            dna.hero = "H2"  # type: ignore[misc]

    def test_get_by_category(self) -> None:
        dna = DNA(layout="L10")
        assert dna.get(GeneCategory.LAYOUT) == "L10"
        assert dna.get("layout") == "L10"

    def test_genes_excludes_chaos(self) -> None:
        genes = DNA(chaos=0.5).genes()
        assert set(genes) == set(GeneCategory)

    def test_with_overrides_explicit_codes_win(self) -> None:
        dna = DNA(hero="H1", nav="N1")
        updated = dna.with_overrides(hero="H9", nav=None)
        assert updated.hero == "H9"
        assert updated.nav == "N1"
        assert dna.hero == "H1"

    def test_with_overrides_validates(self) -> None:
        with pytest.raises(InvalidGeneError):
            DNA().with_overrides(color="C13")

    def test_from_mapping(self) -> None:
        dna = DNA.from_mapping({"hero": "H2", "design": "D7", "chaos": "0.4"})
        assert dna.hero == "H2"
        assert dna.chaos == 0.4

    def test_from_mapping_rejects_unknown_category(self) -> None:
        with pytest.raises(InvalidGeneError, match="sparkle"):
            DNA.from_mapping({"sparkle": "S1"})

    def test_from_mapping_rejects_non_numeric_chaos(self) -> None:
        with pytest.raises(InvalidGeneError, match="chaos must be a number"):
            DNA.from_mapping({"hero": "H2", "chaos": "wild"})

    def test_to_dict_round_trip(self) -> None:
        dna = DNA(hero="H8", chaos=0.7)
        assert DNA.from_mapping(dna.to_dict()) == dna


class TestDescribeDNA:
    def test_mentions_names_and_chaos(self) -> None:
        text = describe_dna(DNA(hero="H9", chaos=0.8))
        assert "Text Only hero" in text
        assert "chaos 80%" in text

    def test_without_chaos(self) -> None:
        assert "chaos" not in describe_dna(DNA())
