"""
Value formatters for exception and warning messages.

Small, robust type-value renderers used across dispkit so that error messages
look the same everywhere: ``<int: 42>``, ``<type: str>``.
"""

# Standard library -----------------------------------------------------------------------------------------------------
from typing import Any, Literal

# Local ----------------------------------------------------------------------------------------------------------------
from .utils import class_name

# Classes --------------------------------------------------------------------------------------------------------------

Style = Literal["ascii", "unicode-angle"]


# Methods --------------------------------------------------------------------------------------------------------------


def fmt_type(obj: Any, *, style: Style = "ascii", show_module: bool = False) -> str:
    """Format type information of an object or a type for exception messages.

    Args:
        obj: Any Python object or type.
        style: "ascii" (default) gives angle brackets, "unicode-angle" gives ⟨⟩.
        show_module: Whether to include the module name for non-builtin types.

    Returns:
        Formatted string like "<type: int>".

    Examples:
        >>> fmt_type(42)
        '<type: int>'
        >>> fmt_type(int)
        '<type: int>'
    """
    name = class_name(obj, fully_qualified=show_module)
    return _fmt_format_pair("type", name, style)


def fmt_value(x: Any, *, style: Style = "ascii", max_repr: int = 120) -> str:
    """
    Format a single value as a type–value pair for exception messages.

    Broken ``__repr__`` methods and very long representations are handled gracefully.

    Args:
        x: Any Python object to format.
        style: "ascii" (default) or "unicode-angle".
        max_repr: Maximum length of the value's repr before truncation.

    Returns:
        Formatted string like "<int: 42>" or "⟨str: 'hello'⟩".

    Examples:
        >>> fmt_value(42)
        '<int: 42>'
        >>> fmt_value("hello world", max_repr=8)
        "<str: 'hello'...>"
    """
    t = type(x).__name__

    try:
        base_repr = repr(x)
    except Exception as e:
        base_repr = f"<{t} object (repr failed: {type(e).__name__})>"

    if style == "ascii":
        base_repr = base_repr.replace(">", "\\>")
        ellipsis = "..."
    else:
        ellipsis = "…"

    return _fmt_format_pair(t, _fmt_truncate(base_repr, max_repr, ellipsis=ellipsis), style)


# Private Methods ------------------------------------------------------------------------------------------------------

def _fmt_format_pair(type_name: str, value_repr: str, style: Style) -> str:
    if style == "unicode-angle":
        return f"⟨{type_name}: {value_repr}⟩"
    return f"<{type_name}: {value_repr}>"


def _fmt_truncate(s: str, limit: int, *, ellipsis: str) -> str:
    """Truncate to limit chars, keeping the closing quote of quoted reprs outside the ellipsis."""
    if limit <= 0 or len(s) <= limit:
        return s
    if len(s) >= 2 and s[0] == s[-1] and s[0] in ("'", '"'):
        quote = s[0]
        keep = max(limit - 2, 1)
        return s[:keep] + quote + ellipsis
    return s[:max(limit, 1)] + ellipsis
