"""
Dispkit Colors

Parsing of hex colour strings and HSL adjustments for themed UI elements.
HSL maths is delegated to the standard library colorsys module.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import colorsys
import re
import warnings
from dataclasses import dataclass
from numbers import Real
from typing import Self

# Local ----------------------------------------------------------------------------------------------------------------
from .tools import fmt_type, fmt_value

_HEX_COLOR = re.compile(r"#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})")


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True)
class Color:
    """
    RGBA colour with float channels in [0, 1].

    Example:
        >>> c = parse_color("#80ff0000")
        >>> c.red, c.alpha > 0.5
        (1.0, True)
        >>> c.name()
        '#80ff0000'
    """
    red: float
    green: float
    blue: float
    alpha: float = 1.0

    def __post_init__(self):
        for channel in ("red", "green", "blue", "alpha"):
            v = getattr(self, channel)
            if not isinstance(v, Real) or isinstance(v, bool):
                raise TypeError(f"{channel} must be a real number, but found {fmt_type(v)}")
            if not 0.0 <= v <= 1.0:
                raise ValueError(f"{channel} must be in [0, 1], but found {fmt_value(v)}")

    @classmethod
    def from_hsla(cls, hue: float, saturation: float, lightness: float, alpha: float = 1.0) -> Self:
        """Create a colour from HSL components and alpha, all in [0, 1]."""
        red, green, blue = colorsys.hls_to_rgb(hue, lightness, saturation)
        return cls(_clamp(red), _clamp(green), _clamp(blue), alpha)

    @property
    def hsla(self) -> tuple[float, float, float, float]:
        """(hue, saturation, lightness, alpha), all in [0, 1]."""
        hue, lightness, saturation = colorsys.rgb_to_hls(self.red, self.green, self.blue)
        return hue, saturation, lightness, self.alpha

    def name(self) -> str:
        """Hex name: '#rrggbb' when opaque, '#aarrggbb' otherwise."""
        rgb = "".join(f"{_to_byte(c):02x}" for c in (self.red, self.green, self.blue))
        if _to_byte(self.alpha) == 255:
            return "#" + rgb
        return f"#{_to_byte(self.alpha):02x}" + rgb


# Methods --------------------------------------------------------------------------------------------------------------

def parse_color(text: str) -> Color:
    """
    Parse '#rgb', '#rrggbb' or '#aarrggbb' into a Color.

    Raises:
        TypeError: If text is not a str.
        ValueError: If text is not one of the supported hex forms.
    """
    if not isinstance(text, str):
        raise TypeError(f"color must be str, but found {fmt_type(text)}")

    stripped = text.strip()
    if not _HEX_COLOR.fullmatch(stripped):
        raise ValueError(f"color expected as '#rgb', '#rrggbb' or '#aarrggbb', but found {fmt_value(text)}")

    digits = stripped[1:]
    if len(digits) == 3:
        digits = "".join(d * 2 for d in digits)
    if len(digits) == 6:
        digits = "ff" + digits

    alpha, red, green, blue = (int(digits[i:i + 2], 16) / 255 for i in range(0, 8, 2))
    return Color(red, green, blue, alpha)


def desaturate(color: str | Color, factor: float) -> str:
    """
    Scale the HSL saturation of a colour by factor.

    Hue, lightness and alpha are preserved. A factor of 0 gives grey, 1 leaves
    the colour as is. Saturation pushed outside [0, 1] is clamped with a RuntimeWarning.

    Returns:
        Hex name of the adjusted colour.

    Examples:
        >>> desaturate("#ff0000", 0.0)
        '#808080'
        >>> desaturate("#ff0000", 0.5)
        '#bf4040'
    """
    if not isinstance(factor, Real) or isinstance(factor, bool):
        raise TypeError(f"factor must be a real number, but found {fmt_type(factor)}")

    c = color if isinstance(color, Color) else parse_color(color)
    hue, saturation, lightness, alpha = c.hsla

    saturation *= factor
    if not 0.0 <= saturation <= 1.0:
        warnings.warn(
            f"saturation {saturation:g} out of range after factor {factor:g}, clamped to [0, 1]",
            RuntimeWarning,
            stacklevel=2
        )
        saturation = _clamp(saturation)

    return Color.from_hsla(hue, saturation, lightness, alpha).name()


# Private Methods ------------------------------------------------------------------------------------------------------

def _clamp(v: float) -> float:
    return min(max(v, 0.0), 1.0)


def _to_byte(v: float) -> int:
    return int(v * 255 + 0.5)
