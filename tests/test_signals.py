#
# Dispkit - Signals Tests
#

# Standard library -----------------------------------------------------------------------------------------------------
import warnings
from unittest.mock import Mock

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from dispkit.signals import Signal, watch_property_changes


# Helpers --------------------------------------------------------------------------------------------------------------

class Slider:
    def __init__(self):
        self.valueChanged = Signal()
        self.rangeChanged = Signal()
        self.pressed = Signal()
        self.value = 0


class Broken:
    def __init__(self):
        self.valueChanged = Signal()
        self.labelChanged = "not a signal"


# Tests ----------------------------------------------------------------------------------------------------------------

class TestSignal:

    def test_emit_in_connection_order(self):
        calls = []
        s = Signal()
        s.connect(lambda v: calls.append(("first", v)))
        s.connect(lambda v: calls.append(("second", v)))
        s.emit(7)
        assert calls == [("first", 7), ("second", 7)]

    def test_disconnect(self):
        handler = Mock()
        s = Signal()
        s.connect(handler)
        s.disconnect(handler)
        s.emit()
        handler.assert_not_called()
        assert len(s) == 0

    def test_disconnect_unknown_raises(self):
        with pytest.raises(ValueError, match=r"(?i).*not connected.*"):
            Signal().disconnect(print)

    def test_connect_non_callable_raises(self):
        with pytest.raises(TypeError, match=r"(?i).*handler must be callable.*"):
            Signal().connect(42)


class TestWatchPropertyChanges:

    def test_connects_changed_signals_only(self):
        """Connect *Changed members, leave others alone."""
        slider = Slider()
        handler = Mock()

        names = watch_property_changes(slider, handler)

        assert names == ["rangeChanged", "valueChanged"]
        assert len(slider.valueChanged) == 1
        assert len(slider.rangeChanged) == 1
        assert len(slider.pressed) == 0

        slider.valueChanged.emit()
        slider.rangeChanged.emit()
        slider.pressed.emit()
        assert handler.call_count == 2

    def test_duck_typed_signal(self):
        """Accept any member with a callable connect()."""

        class Model:
            pass

        model = Model()
        model.sizeChanged = Mock()
        handler = Mock()

        assert watch_property_changes(model, handler) == ["sizeChanged"]
        model.sizeChanged.connect.assert_called_once_with(handler)

    def test_non_signal_raises_before_connecting(self):
        """Leave the object untouched if any *Changed member is not a signal."""
        obj = Broken()
        with pytest.raises(TypeError, match=r"(?i).*labelChanged.*not a signal.*"):
            watch_property_changes(obj, Mock())
        assert len(obj.valueChanged) == 0

    def test_no_signals_warns(self):
        with pytest.warns(RuntimeWarning, match=r"(?i).*no '\*Changed' signals.*"):
            assert watch_property_changes(object(), Mock()) == []

    def test_signals_found_no_warning(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            watch_property_changes(Slider(), Mock())

    def test_non_callable_handler_raises(self):
        with pytest.raises(TypeError, match=r"(?i).*handler must be callable.*"):
            watch_property_changes(Slider(), "handler")
