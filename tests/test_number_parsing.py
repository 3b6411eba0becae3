"""Tests for numeric literal and unit word parsing."""

import math

import pytest

from servinglabel.quantities import ParseError, ParseErrorKind, number, unit_word


class TestNumber:
    """Tests for the number parser."""

    def test_parse_decimal(self):
        """Test parsing plain decimals and keeping the remainder."""
        assert number("1.123 blah") == (" blah", 1.123)
        assert number("1.123blah") == ("blah", 1.123)
        assert number("83.1512gal") == ("gal", 83.1512)

    def test_parse_integer(self):
        """Test parsing integers."""
        assert number("2 cups") == (" cups", 2.0)
        assert number("10") == ("", 10.0)

    def test_parse_leading_or_trailing_point(self):
        """Test decimals written without one side of the point."""
        assert number(".5 cup") == (" cup", 0.5)
        assert number("5. cup") == (" cup", 5.0)

    def test_parse_exponent(self):
        """Test scientific notation."""
        assert number("1e3 mg") == (" mg", 1000.0)
        assert number("2.5E-1g") == ("g", 0.25)

    def test_exponent_marker_without_digits(self):
        """Test that a word starting with 'e' is not read as an exponent."""
        assert number("2eggs") == ("eggs", 2.0)

    def test_parse_fraction(self):
        """Test simple fractions, which consume trailing whitespace."""
        assert number("1/2.") == (".", 0.5)
        assert number("3/4 cup") == ("cup", 0.75)
        assert number("1 / 4 tsp") == ("tsp", 0.25)

    def test_parse_compound_fraction(self):
        """Test mixed numbers like '1 1/2'."""
        assert number("1 1/2.") == (".", 1.5)
        assert number("2 1/4 cups") == ("cups", 2.25)
        assert number("1   3 /4") == ("", 1.75)

    @pytest.mark.parametrize("numerator", [0, 1, 3, 7, 12])
    @pytest.mark.parametrize("denominator", [1, 2, 3, 8, 16])
    def test_fraction_values(self, numerator, denominator):
        """Test that fractions evaluate to numerator / denominator."""
        _, value = number(f"{numerator}/{denominator}")
        assert value == pytest.approx(numerator / denominator)

        _, value = number(f"4 {numerator}/{denominator}")
        assert value == pytest.approx(4 + numerator / denominator)

    def test_zero_denominator_is_not_a_fraction(self):
        """Test that '1/0' falls back to the plain number '1'."""
        assert number("1/0 cup") == ("/0 cup", 1.0)

    def test_huge_fraction_digits(self):
        """Test that very long digit strings give inf or zero instead of crashing."""
        assert number("1" + "0" * 400 + "/3 cups") == ("cups", math.inf)
        assert number("1/" + "1" * 5000 + " cup") == ("cup", 0.0)
        assert number("2 " + "9" * 400 + "/7 cups") == ("cups", math.inf)

    def test_no_number(self):
        """Test that text without a leading number fails."""
        with pytest.raises(ParseError) as exc_info:
            number("some amount of stuff")
        assert exc_info.value.kind == ParseErrorKind.NUMBER_EXPECTED
        assert exc_info.value.remaining == "some amount of stuff"

    def test_signed_numbers_rejected(self):
        """Test that signs are not part of a number."""
        with pytest.raises(ParseError):
            number("-2 cups")

    def test_empty_input(self):
        """Test that empty input reports exhausted input."""
        with pytest.raises(ParseError) as exc_info:
            number("")
        assert exc_info.value.kind == ParseErrorKind.INPUT_EXHAUSTED


class TestUnitWord:
    """Tests for the unit word tokenizer."""

    def test_plain_word(self):
        """Test splitting a plain word."""
        assert unit_word("cups of rice") == (" of rice", "cups")

    def test_word_runs_to_end(self):
        """Test a word that consumes all input."""
        assert unit_word("k-cups") == ("", "k-cups")

    def test_periods_and_hyphens(self):
        """Test that inner and trailing periods or hyphens stay in the word."""
        assert unit_word("fl.oz. of rice") == (" of rice", "fl.oz.")
        assert unit_word("oz.)") == (")", "oz.")
        assert unit_word("k-cups, 12") == (", 12", "k-cups")

    def test_case_preserved(self):
        """Test that the tokenizer does not change case."""
        assert unit_word("Tbsp (15g)") == (" (15g)", "Tbsp")

    def test_stops_at_digit(self):
        """Test that digits end a word."""
        assert unit_word("g2") == ("2", "g")

    @pytest.mark.parametrize("text", ["-gallons", ".oz", " cups", "(3 pounds)", "12g"])
    def test_leading_non_letter_fails(self, text):
        """Test that a word must start with a letter."""
        with pytest.raises(ParseError) as exc_info:
            unit_word(text)
        assert exc_info.value.kind == ParseErrorKind.UNIT_WORD_EXPECTED

    def test_empty_input(self):
        """Test that empty input reports exhausted input."""
        with pytest.raises(ParseError) as exc_info:
            unit_word("")
        assert exc_info.value.kind == ParseErrorKind.INPUT_EXHAUSTED
