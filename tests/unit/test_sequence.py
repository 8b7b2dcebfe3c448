"""
Unit tests for kmersketch sequence module.
"""

import itertools

import pytest

from kmersketch.errors import InvalidCharacterError, MinHashError
from kmersketch.sequence import CODON_TABLE, STOP_MARKER, reverse_complement, translate


class TestCodonTable:
    """Tests for the standard genetic code table."""

    def test_covers_all_codons(self):
        """Test that every ACGT triplet has an entry."""
        codons = {"".join(c) for c in itertools.product("ACGT", repeat=3)}
        assert set(CODON_TABLE) == codons
        assert len(CODON_TABLE) == 64

    def test_stop_codons(self):
        """Test the three stop codons map to the stop marker."""
        stops = {codon for codon, aa in CODON_TABLE.items() if aa == STOP_MARKER}
        assert stops == {"TAA", "TAG", "TGA"}

    def test_single_letter_values(self):
        """Test every value is a single amino acid symbol."""
        assert all(len(aa) == 1 for aa in CODON_TABLE.values())
        assert CODON_TABLE["ATG"] == "M"
        assert CODON_TABLE["TGG"] == "W"

    def test_read_only(self):
        """Test the table cannot be modified."""
        with pytest.raises(TypeError):
            CODON_TABLE["ATG"] = "X"


class TestReverseComplement:
    """Tests for reverse_complement."""

    def test_simple(self):
        """Test complement and reversal."""
        assert reverse_complement("AAAC") == "GTTT"
        assert reverse_complement("AAATTTCCC") == "GGGAAATTT"

    def test_palindrome(self):
        """Test a sequence that is its own reverse complement."""
        assert reverse_complement("ACGT") == "ACGT"

    def test_empty(self):
        """Test empty input gives empty output."""
        assert reverse_complement("") == ""

    @pytest.mark.parametrize("seq", ["A", "GATTACA", "CCCGGGTTTAAA", "TGCATGCAAGT"])
    def test_involution(self, seq):
        """Test applying twice returns the original."""
        assert reverse_complement(reverse_complement(seq)) == seq

    def test_invalid_character(self):
        """Test a non-ACGT character aborts with its position."""
        with pytest.raises(InvalidCharacterError) as exc_info:
            reverse_complement("ACGTX")
        assert exc_info.value.character == "X"
        assert exc_info.value.position == 4
        assert isinstance(exc_info.value, MinHashError)

    def test_lowercase_is_invalid(self):
        """Test lower-case bases are rejected."""
        with pytest.raises(InvalidCharacterError):
            reverse_complement("acgt")


class TestTranslate:
    """Tests for translate."""

    def test_codons(self):
        """Test codon-by-codon translation."""
        assert translate("ATGGCC") == "MA"
        assert translate("ATGTAA") == "M*"

    def test_truncates_partial_codon(self):
        """Test trailing 1-2 bases are dropped."""
        assert translate("ATGGC") == "M"
        assert translate("ATGG") == "M"
        assert translate("AT") == ""

    def test_empty(self):
        """Test empty input."""
        assert translate("") == ""
