#
# Dispkit - Unicode Tests
#

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from dispkit.unicode import GlyphConf, from_sub, from_sup, to_sub, to_sup


# Tests ----------------------------------------------------------------------------------------------------------------

class TestSuperscript:

    @pytest.mark.parametrize(
        "value, signs, expected",
        [
            pytest.param(1234567890, False, "¹²³⁴⁵⁶⁷⁸⁹⁰", id="all-digits"),
            pytest.param(-6, False, "-⁶", id="minus-kept"),
            pytest.param(-6, True, "⁻⁶", id="minus-raised"),
            pytest.param("+3", True, "⁺³", id="plus-raised"),
            pytest.param("x2", False, "x²", id="mixed-text"),
            pytest.param("", False, "", id="empty"),
        ],
    )
    def test_to_sup(self, value, signs, expected):
        assert to_sup(value, signs=signs) == expected

    def test_from_sup(self):
        assert from_sup("10⁻⁶ m²") == "10-6 m2"

    @pytest.mark.parametrize("text", ["0", "0123456789", "-42", "+7"])
    def test_round_trip(self, text):
        assert from_sup(to_sup(text, signs=True)) == text

    def test_glyph_table_order(self):
        """Index the glyph table by digit."""
        for digit, glyph in enumerate(GlyphConf.SUPERSCRIPT_DIGITS):
            assert to_sup(digit) == glyph


class TestSubscript:

    def test_to_sub(self):
        assert to_sub("H2O") == "H₂O"
        assert to_sub(-10, signs=True) == "₋₁₀"

    def test_from_sub(self):
        assert from_sub("x₁₂") == "x12"

    @pytest.mark.parametrize("text", ["0123456789", "-5"])
    def test_round_trip(self, text):
        assert from_sub(to_sub(text, signs=True)) == text
