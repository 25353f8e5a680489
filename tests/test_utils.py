"""Tests for alnsite.utils and coordinate helpers."""

import pytest
from alnsite.core.coordinates import SignedPosition, Strand, magnitude, strand_of
from alnsite.utils.sequence import (
    AMBIGUITY_CODES,
    distinct_bases,
    is_ambiguity_code,
    is_ambiguous,
    is_gap,
    is_variable_column,
)


class TestSymbols:
    """Test gap and ambiguity symbol checks."""

    def test_is_gap(self):
        """Test the default gap symbol."""
        assert is_gap('-')
        assert not is_gap('A')

    def test_custom_gap(self):
        """Test a custom gap symbol."""
        assert is_gap('.', gap_char='.')
        assert not is_gap('-', gap_char='.')

    def test_ambiguity_codes_both_cases(self):
        """Test every IUPAC code is recognised in upper and lower case."""
        for code in AMBIGUITY_CODES:
            assert is_ambiguity_code(code)
            assert is_ambiguity_code(code.lower())

    def test_plain_bases_not_ambiguous(self):
        """Test A, C, G, T are not ambiguity codes."""
        for base in 'ACGTacgt':
            assert not is_ambiguity_code(base)
            assert not is_ambiguous(base)

    def test_gap_not_ambiguity_code_but_ambiguous(self):
        """Test the gap is ambiguous without being an IUPAC code."""
        assert not is_ambiguity_code('-')
        assert is_ambiguous('-')


class TestColumns:
    """Test alignment column classification."""

    def test_distinct_bases(self):
        """Test gaps are dropped and case is folded."""
        assert distinct_bases("Aa-C") == {'A', 'C'}

    def test_variable_column(self):
        """Test two distinct bases make a variable column."""
        assert is_variable_column("ACA")

    def test_invariant_column(self):
        """Test identical bases are not variable."""
        assert not is_variable_column("AAA")

    def test_case_only_difference(self):
        """Test case differences are not variants."""
        assert not is_variable_column("Aa")

    def test_gapped_column(self):
        """Test a gap next to one base is only variable on request."""
        assert not is_variable_column("A-A")
        assert is_variable_column("A-A", include_gapped=True)

    def test_all_gap_column(self):
        """Test an all-gap column is never variable."""
        assert not is_variable_column("---", include_gapped=True)


class TestSignedPositions:
    """Test signed coordinate helpers."""

    def test_strand_of(self):
        """Test sign maps to strand."""
        assert strand_of(5) is Strand.FORWARD
        assert strand_of(-5) is Strand.REVERSE
        assert strand_of(0) is Strand.ABSENT

    def test_magnitude(self):
        """Test magnitude drops the sign."""
        assert magnitude(-1235) == 1235
        assert magnitude(1090) == 1090

    def test_strand_symbols(self):
        """Test strand symbols."""
        assert Strand.FORWARD.symbol == '+'
        assert Strand.REVERSE.symbol == '-'
        assert Strand.ABSENT.symbol == '.'

    def test_signed_position_round_trip(self):
        """Test conversion to and from int preserves the value."""
        for value in (1, -1, 0, 1090, -1235):
            assert SignedPosition.from_int(value).to_int() == value

    def test_signed_position_fields(self):
        """Test a reverse position splits into strand and coordinate."""
        pos = SignedPosition.from_int(-1235)
        assert pos.strand is Strand.REVERSE
        assert pos.coordinate == 1235
        assert pos.is_reverse
        assert str(pos) == "-1235"

    def test_inconsistent_position(self):
        """Test absent strand with a coordinate is rejected."""
        with pytest.raises(ValueError, match="Inconsistent"):
            SignedPosition(Strand.ABSENT, 10)
        with pytest.raises(ValueError, match="Inconsistent"):
            SignedPosition(Strand.FORWARD, 0)

    def test_negative_coordinate(self):
        """Test coordinates must be unsigned."""
        with pytest.raises(ValueError, match="unsigned"):
            SignedPosition(Strand.REVERSE, -5)
