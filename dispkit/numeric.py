"""
Numeric display formatting for UI labels and range controls.

Turns numbers and numeric strings into short human-readable text, and derives
precision and step parameters for range-input controls such as sliders and spin boxes.

Non-numeric input is not an error for any formatter in this module: it is
returned unchanged, so callers can pipe arbitrary model values through them.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import math
import re
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP, localcontext
from typing import Any, Protocol, runtime_checkable

# Local ----------------------------------------------------------------------------------------------------------------
from .unicode import to_sup


@runtime_checkable
class SupportsFloat(Protocol):
    """Protocol for duck-typed numeric conversion."""

    def __float__(self) -> float: ...


# @formatter:off

class FormatConf:
    """
    Default configuration constants for numeric display formatting.

    Tiers are (inclusive upper bound, result) pairs, evaluated in ascending order;
    the first bound that is >= the magnitude wins, otherwise the fallback applies.

    Attributes:
        DECIMAL_TIERS: Decimal places by magnitude of a value or a range.
        DECIMAL_FALLBACK: Decimal places above the last tier.
        INCREMENT_TIERS: Step size by magnitude of a range.
        INCREMENT_FALLBACK: Step size above the last tier.
        SCIENTIFIC_DIGITS: Default threshold exponent; |value| >= 10**SCIENTIFIC_DIGITS goes scientific.
        MANTISSA_PLACES: Decimal places of the scientific mantissa before simplification.
        MULT_SYMBOL: Symbol between mantissa and power of ten.
        SI_POSTFIXES: (scale, symbol) pairs, largest first.
        SI_MIN_MANTISSA: Smallest scaled value for which an SI postfix is used.
    """
    DECIMAL_TIERS = (
        (0.001,  5),
        (0.01,   4),
        (1.0,    3),
        (100.0,  2),
        (1000.0, 1),
    )
    DECIMAL_FALLBACK = 0

    INCREMENT_TIERS = (
        (0.001,    0.0001),
        (0.01,     0.001),
        (1.0,      0.01),
        (100.0,    0.1),
        (1000.0,   10.0),
        (10000.0,  100.0),
        (100000.0, 1000.0),
    )
    INCREMENT_FALLBACK = 100000.0

    SCIENTIFIC_DIGITS = 5
    MANTISSA_PLACES   = 2
    MULT_SYMBOL       = "×"

    SI_POSTFIXES = (
        (1e9, "G"),
        (1e6, "M"),
        (1e3, "k"),
    )
    SI_MIN_MANTISSA = 100

# @formatter:on

# Plain decimal literal: sign, digits, optional fraction, optional exponent
_NUMBER_LITERAL = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)

# 2500.0 -> 2500, 2.5 stays
_TRAILING_ZEROS = re.compile(r"\.?0+$")

# Fixed notation is used for magnitudes below this, exponent notation at and above
_FIXED_NOTATION_LIMIT = 1e21


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True)
class NumberParse:
    """
    Outcome of an attempt to read a value as a finite number.

    Truthy iff parsing succeeded; value is None on failure.

    Example:
        >>> parsed = parse_number("3.14")
        >>> if parsed:
        ...     parsed.value
        3.14
    """
    ok: bool
    value: float | None = None

    def __bool__(self) -> bool:
        return self.ok


_FAILED = NumberParse(ok=False)


# Methods --------------------------------------------------------------------------------------------------------------

def parse_number(value: Any) -> NumberParse:
    """
    Attempt to read value as a finite float.

    Accepted input:
        - int and float (bool is rejected even though it subclasses int);
        - objects implementing __float__, e.g. Decimal, Fraction, NumPy scalars;
        - str holding a plain decimal literal, surrounding whitespace allowed.

    Strings like "inf", "nan", "1_000", "0x1F", "" or "3abc" are not numbers here,
    and neither is anything that converts to an infinite or NaN float.

    Returns:
        NumberParse with ok=True and the float value, or ok=False.
    """
    if isinstance(value, bool):
        return _FAILED

    if isinstance(value, str):
        text = value.strip()
        if not _NUMBER_LITERAL.fullmatch(text):
            return _FAILED
        number = float(text)
    elif isinstance(value, SupportsFloat):
        try:
            number = float(value)
        except (OverflowError, ValueError, TypeError):
            return _FAILED
    else:
        return _FAILED

    if not math.isfinite(number):
        return _FAILED
    return NumberParse(ok=True, value=number)


def is_numeric(value: Any) -> bool:
    """True iff value parses as a finite number."""
    return parse_number(value).ok


def is_integer(value: Any) -> bool:
    """
    True iff value parses as a number equal to its signed 32-bit integer image.

    Fractional values and integral values outside [-2**31, 2**31 - 1] are not integers.

    Examples:
        >>> is_integer(3.0), is_integer("42"), is_integer(3.5), is_integer(2**31)
        (True, True, False, False)
    """
    parsed = parse_number(value)
    if not parsed:
        return False
    return _to_int32(parsed.value) == parsed.value


def decimal_points_for_value(value: Any) -> int:
    """
    Number of decimal places suitable for displaying a value of this magnitude.

    | |value|        | places |
    |----------------|--------|
    | <= 0.001       | 5      |
    | <= 0.01        | 4      |
    | <= 1.0         | 3      |
    | <= 100.0       | 2      |
    | <= 1000.0      | 1      |
    | > 1000.0       | 0      |

    Non-numeric input matches no tier and gets the fallback of 0.
    """
    parsed = parse_number(value)
    if not parsed:
        return FormatConf.DECIMAL_FALLBACK
    return _tier(abs(parsed.value), FormatConf.DECIMAL_TIERS, FormatConf.DECIMAL_FALLBACK)


def decimal_points_for_range(min_value: Any, max_value: Any) -> int:
    """Decimal places for a control spanning [min_value, max_value]; see decimal_points_for_value()."""
    span = _span(min_value, max_value)
    if span is None:
        return FormatConf.DECIMAL_FALLBACK
    return decimal_points_for_value(span)


def increment_for_range(min_value: Any, max_value: Any) -> float:
    """
    Step size for a range-input control spanning [min_value, max_value].

    Examples:
        >>> increment_for_range(0, 0.5)
        0.01
        >>> increment_for_range(0, 50_000)
        1000.0
    """
    span = _span(min_value, max_value)
    if span is None:
        return FormatConf.INCREMENT_FALLBACK
    return _tier(abs(span), FormatConf.INCREMENT_TIERS, FormatConf.INCREMENT_FALLBACK)


def number_to_string(value: float) -> str:
    """
    Render a float the way a JavaScript/QML front end prints a Number.

    Shortest round-trip digits, no trailing ".0" on integral values, fixed notation
    for magnitudes in [1e-6, 1e21) and "1.5e+21" style exponent notation outside it.

    Examples:
        >>> number_to_string(1.0)
        '1'
        >>> number_to_string(1.1)
        '1.1'
        >>> number_to_string(1e21)
        '1e+21'
        >>> number_to_string(1.5e-7)
        '1.5e-7'
    """
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    sign, digit_tuple, exponent = Decimal(repr(value)).as_tuple()
    coefficient = "".join(map(str, digit_tuple))
    digits = coefficient.rstrip("0")
    exponent += len(coefficient) - len(digits)

    k = len(digits)
    n = k + exponent  # value == 0.<digits> * 10**n

    if k <= n <= 21:
        body = digits + "0" * (n - k)
    elif 0 < n <= 21:
        body = digits[:n] + "." + digits[n:]
    elif -6 < n <= 0:
        body = "0." + "0" * -n + digits
    else:
        e = n - 1
        body = digits[0] + ("." + digits[1:] if k > 1 else "") + "e" + ("+" if e >= 0 else "-") + str(abs(e))

    return ("-" if sign else "") + body


def superscript_value(value: Any) -> Any:
    """
    Render a number's decimal digits as Unicode superscript glyphs.

    Signs, decimal points and any other non-digit characters pass through unchanged.
    Non-numeric input is returned as is.

    Examples:
        >>> superscript_value(123)
        '¹²³'
        >>> superscript_value(-4)
        '-⁴'
        >>> superscript_value("n/a")
        'n/a'
    """
    parsed = parse_number(value)
    if not parsed:
        return value

    if isinstance(value, str):
        text = value
    elif isinstance(value, int):
        text = str(value)
    else:
        text = number_to_string(parsed.value)

    return to_sup(text)


def format_for_display(
        value: Any,
        max_decimal_places: int | None = None,
        scientific_threshold_digits: int = FormatConf.SCIENTIFIC_DIGITS,
) -> Any:
    """
    Format a number for display in a label.

    Values with |value| >= 10**scientific_threshold_digits are shown in scientific
    form with a two-decimal mantissa and a superscript exponent ("1.23×10⁵").
    Smaller values are rounded to max_decimal_places and shown without trailing
    zeros ("1.1", never "1.100"; "3", never "3.0").

    Args:
        value: Number or numeric string. Anything else is returned unchanged.
        max_decimal_places: Decimal places to round to. Defaults to
            decimal_points_for_value(value).
        scientific_threshold_digits: Power of ten at which scientific form starts.

    Returns:
        The display string, or value itself when it is not numeric.

    Examples:
        >>> format_for_display(1.1, 3)
        '1.1'
        >>> format_for_display(123456)
        '1.23×10⁵'
        >>> format_for_display(-0.123456)
        '-0.123'
        >>> format_for_display("not a number")
        'not a number'

    Notes:
        Rounding acts on the exact binary value with ties away from zero, so
        format_for_display(2.5, 0) is '3' and format_for_display(-2.5, 0) is '-3'.
    """
    parsed = parse_number(value)
    if not parsed:
        return value

    number = parsed.value
    if max_decimal_places is None:
        max_decimal_places = decimal_points_for_value(number)

    try:
        threshold = 10.0 ** scientific_threshold_digits
    except OverflowError:
        threshold = math.inf

    if abs(number) >= threshold:
        mantissa, exponent = _to_exponential(number, FormatConf.MANTISSA_PLACES)
        return f"{number_to_string(mantissa)}{FormatConf.MULT_SYMBOL}10{superscript_value(exponent)}"

    # 1.234567 -> 1.235 -> 1.235; 1.100 -> 1.1
    return number_to_string(float(_to_fixed(number, max_decimal_places)))


def format_using_si_postfix(value: Any) -> Any:
    """
    Abbreviate large numbers with an SI postfix: k, M or G.

    The largest postfix whose scaled value is at least 100 is used, and the scaled
    value is shown with at most one decimal place.

    Values below 100 000, negative values and non-numeric input are returned
    unmodified: a number stays a number, it is NOT converted to str.

    Examples:
        >>> format_using_si_postfix(250_000_000_000)
        '250G'
        >>> format_using_si_postfix(2_500_000_000)
        '2500M'
        >>> format_using_si_postfix(123_456)
        '123.5k'
        >>> format_using_si_postfix(250_000_000)
        '250M'
        >>> format_using_si_postfix(50)
        50
    """
    parsed = parse_number(value)
    if not parsed:
        return value

    for scale, symbol in FormatConf.SI_POSTFIXES:
        if parsed.value >= scale * FormatConf.SI_MIN_MANTISSA:
            scaled = _to_fixed(parsed.value / scale, 1)
            return _TRAILING_ZEROS.sub("", scaled) + symbol

    return value


# Private Methods ------------------------------------------------------------------------------------------------------

def _tier(magnitude: float, tiers: tuple, fallback):
    for upper_bound, result in tiers:
        if magnitude <= upper_bound:
            return result
    return fallback


def _span(min_value: Any, max_value: Any) -> float | None:
    lo, hi = parse_number(min_value), parse_number(max_value)
    if not (lo and hi):
        return None
    return hi.value - lo.value


def _to_int32(number: float) -> int:
    """Truncate toward zero and wrap into the signed 32-bit range."""
    n = int(number) & 0xFFFFFFFF
    return n - 0x100000000 if n >= 0x80000000 else n


def _to_fixed(number: float, places: int) -> str:
    """
    Fixed-point text of number with exactly `places` decimals.

    The exact binary value is rounded half away from zero. Magnitudes at or
    above 1e21 fall back to number_to_string().
    """
    if abs(number) >= _FIXED_NOTATION_LIMIT:
        return number_to_string(number)

    with localcontext() as ctx:
        ctx.prec = 24 + max(places, 0)
        rounded = Decimal(number).quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)
    return format(rounded, "f")


def _to_exponential(number: float, places: int) -> tuple[float, int]:
    """
    Split number into (mantissa, exponent) with mantissa rounded to `places` decimals.

    1 <= |mantissa| < 10, ties rounded away from zero.
    """
    exact = Decimal(number)
    exponent = exact.adjusted()

    with localcontext() as ctx:
        ctx.prec = places + 4
        mantissa = exact.quantize(Decimal(1).scaleb(exponent - places), rounding=ROUND_HALF_UP)
        if mantissa.adjusted() > exponent:
            # 9.995e5 -> 10.00e5 -> 1.00e6
            exponent += 1
            mantissa = exact.quantize(Decimal(1).scaleb(exponent - places), rounding=ROUND_HALF_UP)
        mantissa = mantissa.scaleb(-exponent)

    return float(mantissa), exponent
