"""
Unicode superscript and subscript digit glyphs.

Used to render exponents ("×10⁵") and indices in display strings, and to map
such glyphs back to plain ASCII digits.
"""

# Standard library -----------------------------------------------------------------------------------------------------
from typing import Any


# @formatter:off

class GlyphConf:
    """
    Glyph tables for digit raising and lowering.

    Attributes:
        SUPERSCRIPT_DIGITS: Superscript glyphs for 0-9, indexed by digit.
        SUBSCRIPT_DIGITS: Subscript glyphs for 0-9, indexed by digit.
        SUPERSCRIPT_SIGNS: Superscript plus and minus, applied only on request.
        SUBSCRIPT_SIGNS: Subscript plus and minus, applied only on request.
    """
    SUPERSCRIPT_DIGITS = "⁰¹²³⁴⁵⁶⁷⁸⁹"
    SUBSCRIPT_DIGITS   = "₀₁₂₃₄₅₆₇₈₉"
    SUPERSCRIPT_SIGNS  = {"+": "⁺", "-": "⁻"}
    SUBSCRIPT_SIGNS    = {"+": "₊", "-": "₋"}

# @formatter:on

_DIGITS = "0123456789"

_TO_SUP = str.maketrans(_DIGITS, GlyphConf.SUPERSCRIPT_DIGITS)
_TO_SUP_SIGNED = str.maketrans({**dict(zip(_DIGITS, GlyphConf.SUPERSCRIPT_DIGITS)), **GlyphConf.SUPERSCRIPT_SIGNS})
_FROM_SUP = str.maketrans({
    **dict(zip(GlyphConf.SUPERSCRIPT_DIGITS, _DIGITS)),
    **{glyph: sign for sign, glyph in GlyphConf.SUPERSCRIPT_SIGNS.items()},
})

_TO_SUB = str.maketrans(_DIGITS, GlyphConf.SUBSCRIPT_DIGITS)
_TO_SUB_SIGNED = str.maketrans({**dict(zip(_DIGITS, GlyphConf.SUBSCRIPT_DIGITS)), **GlyphConf.SUBSCRIPT_SIGNS})
_FROM_SUB = str.maketrans({
    **dict(zip(GlyphConf.SUBSCRIPT_DIGITS, _DIGITS)),
    **{glyph: sign for sign, glyph in GlyphConf.SUBSCRIPT_SIGNS.items()},
})


# Methods --------------------------------------------------------------------------------------------------------------

def to_sup(value: Any, *, signs: bool = False) -> str:
    """
    Raise every ASCII digit of str(value) to its superscript glyph.

    Other characters pass through unchanged, unless signs=True in which case
    '+' and '-' are raised as well.

    Examples:
        >>> to_sup(123)
        '¹²³'
        >>> to_sup(-6)
        '-⁶'
        >>> to_sup(-6, signs=True)
        '⁻⁶'
    """
    return str(value).translate(_TO_SUP_SIGNED if signs else _TO_SUP)


def from_sup(text: str) -> str:
    """
    Map superscript digit and sign glyphs back to ASCII; other characters pass through.

    Examples:
        >>> from_sup("10⁻⁶")
        '10-6'
    """
    return text.translate(_FROM_SUP)


def to_sub(value: Any, *, signs: bool = False) -> str:
    """Lower every ASCII digit of str(value) to its subscript glyph."""
    return str(value).translate(_TO_SUB_SIGNED if signs else _TO_SUB)


def from_sub(text: str) -> str:
    """Map subscript digit and sign glyphs back to ASCII."""
    return text.translate(_FROM_SUB)
