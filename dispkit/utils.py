"""
Dispkit utilities shared across the package.

Contains functions used by multiple modules to avoid circular imports.
"""

# Standard library -----------------------------------------------------------------------------------------------------
from typing import Any


# Methods --------------------------------------------------------------------------------------------------------------


def class_name(
    obj: Any,
    fully_qualified: bool = False,
    fully_qualified_builtins: bool = False,
) -> str:
    """
    Get the class name of an object or a class.

    Both `class_name(10)` and `class_name(int)` return 'int'.

    Parameters:
        obj (Any): An object or a class.
        fully_qualified (bool): If true, returns the module-qualified name for user objects or classes.
        fully_qualified_builtins (bool): If true, returns the module-qualified name for builtins.

    Returns:
        str: The class name.

    Examples:
        >>> class_name(10)
        'int'
        >>> class_name(10, fully_qualified_builtins=True)
        'builtins.int'
        >>> from dispkit.colors import Color
        >>> class_name(Color, fully_qualified=True)
        'dispkit.colors.Color'
    """
    cls = obj if isinstance(obj, type) else obj.__class__

    if cls.__module__ == "builtins":
        qualified = fully_qualified_builtins
    else:
        qualified = fully_qualified

    if qualified:
        return cls.__module__ + "." + cls.__name__
    return cls.__name__
