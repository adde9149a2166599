"""
Dispkit Text Tools

String helpers for labels and editable text fields: pluralisation, quoting
and whitespace clean-up.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import re

# Local ----------------------------------------------------------------------------------------------------------------
from .numeric import number_to_string
from .tools import fmt_type

_WHITESPACE = re.compile(r"\s+")
_QUOTED = re.compile(r'\s*"(.*)"\s*', re.DOTALL)


# Methods --------------------------------------------------------------------------------------------------------------

def pluralise(count: int | float, singular: str, plural: str) -> str:
    """
    Prefix a count to the singular or plural noun.

    Examples:
        >>> pluralise(1, "node", "nodes")
        '1 node'
        >>> pluralise(0, "node", "nodes")
        '0 nodes'
        >>> pluralise(2.0, "edge", "edges")
        '2 edges'
    """
    if count == 1:
        return f"1 {singular}"

    if isinstance(count, float):
        return f"{number_to_string(count)} {plural}"
    return f"{count} {plural}"


def escape_quotes(text: str) -> str:
    """
    Escape double quotes with a backslash and wrap the result in double quotes.

    Example:
        >>> escape_quotes('say "hi"')
        '"say \\\\"hi\\\\""'
    """
    _check_str(text)
    return '"' + text.replace('"', '\\"') + '"'


def unescape_quotes(text: str) -> str:
    """
    Reverse escape_quotes().

    Text that is not wrapped in double quotes (surrounding whitespace ignored)
    is returned unchanged. Line breaks inside the quotes are kept.
    """
    _check_str(text)
    match = _QUOTED.fullmatch(text)
    if not match:
        return text
    return match.group(1).replace('\\"', '"')


def normalise_whitespace(text: str) -> str:
    """Collapse every run of whitespace, line breaks included, into a single space."""
    _check_str(text)
    return _WHITESPACE.sub(" ", text)


# Private Methods ------------------------------------------------------------------------------------------------------

def _check_str(text):
    if not isinstance(text, str):
        raise TypeError(f"text must be str, but found {fmt_type(text)}")
