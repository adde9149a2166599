"""
Dispkit Casting

Coercion of loosely typed values coming from settings, bindings and UI models.
"""

# Standard library -----------------------------------------------------------------------------------------------------
from decimal import Decimal
from numbers import Real
from typing import Any


# Methods --------------------------------------------------------------------------------------------------------------

def cast_to_bool(value: Any) -> bool:
    """
    Interpret a loosely typed value as a boolean.

    Rules by kind:
        - bool: returned as is;
        - str: True only for "true" in any letter case, everything else is False;
        - real number: True when non-zero, NaN included;
        - anything else, None included: False.

    Examples:
        >>> cast_to_bool("TRUE"), cast_to_bool("yes"), cast_to_bool(0.0), cast_to_bool([1])
        (True, False, False, False)
    """
    match value:
        case bool():
            return value
        case str():
            return value.lower() == "true"
        case Real() | Decimal():
            return value != 0
        case _:
            return False
