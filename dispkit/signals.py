"""
Dispkit Signals

Property-change watching for objects that expose change-notification signals
named like ``valueChanged`` or ``textChanged``.

Any signal-like member providing ``connect(handler)`` qualifies, so objects
from GUI bindings work as they are. ``Signal`` is a minimal in-process
stand-in for plain Python objects.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import warnings
from typing import Any, Callable

# Local ----------------------------------------------------------------------------------------------------------------
from .tools import fmt_type, fmt_value

CHANGED_SUFFIX = "Changed"


# Classes --------------------------------------------------------------------------------------------------------------

class Signal:
    """
    A list of handlers called in connection order on emit().

    Example:
        >>> seen = []
        >>> s = Signal()
        >>> s.connect(seen.append)
        >>> s.emit(42)
        >>> seen
        [42]
    """

    def __init__(self) -> None:
        self._handlers: list[Callable[..., Any]] = []

    def __len__(self) -> int:
        return len(self._handlers)

    def connect(self, handler: Callable[..., Any]) -> None:
        if not callable(handler):
            raise TypeError(f"handler must be callable, but found {fmt_type(handler)}")
        self._handlers.append(handler)

    def disconnect(self, handler: Callable[..., Any]) -> None:
        """Remove the first connection of handler; raises ValueError if not connected."""
        try:
            self._handlers.remove(handler)
        except ValueError:
            raise ValueError(f"handler is not connected: {fmt_value(handler)}") from None

    def emit(self, *args: Any) -> None:
        for handler in list(self._handlers):
            handler(*args)


# Methods --------------------------------------------------------------------------------------------------------------

def watch_property_changes(obj: Any, handler: Callable[..., Any]) -> list[str]:
    """
    Connect handler to every change-notification signal of obj.

    A change-notification signal is any attribute whose name ends in 'Changed'.
    All matching attributes are checked before anything is connected, so a bad
    member leaves obj untouched.

    Args:
        obj: Object exposing signals such as ``valueChanged``.
        handler: Callable to connect.

    Returns:
        Names of the connected signals, in dir() order.

    Raises:
        TypeError: If handler is not callable, or a '*Changed' attribute has no callable connect().

    Warns:
        RuntimeWarning: If obj has no '*Changed' attributes at all.
    """
    if not callable(handler):
        raise TypeError(f"handler must be callable, but found {fmt_type(handler)}")

    signals = []
    for name in dir(obj):
        if not name.endswith(CHANGED_SUFFIX):
            continue
        member = getattr(obj, name)
        connect = getattr(member, "connect", None)
        if not callable(connect):
            raise TypeError(f"'{name}' is not a signal with connect(), found {fmt_type(member)}")
        signals.append((name, connect))

    if not signals:
        warnings.warn(
            f"no '*{CHANGED_SUFFIX}' signals found on {fmt_type(obj)}, handler not connected",
            RuntimeWarning,
            stacklevel=2
        )

    for _, connect in signals:
        connect(handler)

    return [name for name, _ in signals]
