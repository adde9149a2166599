#
# Dispkit - Casting Tests
#

# Standard library -----------------------------------------------------------------------------------------------------
import math
from decimal import Decimal
from fractions import Fraction

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from dispkit.casting import cast_to_bool


# Tests ----------------------------------------------------------------------------------------------------------------

class TestCastToBool:

    @pytest.mark.parametrize(
        "value, expected",
        [
            pytest.param(True, True, id="bool-true"),
            pytest.param(False, False, id="bool-false"),
            pytest.param("true", True, id="str-true"),
            pytest.param("TRUE", True, id="str-upper"),
            pytest.param("false", False, id="str-false"),
            pytest.param("yes", False, id="str-other"),
            pytest.param(" true", False, id="str-padded"),
            pytest.param("", False, id="str-empty"),
            pytest.param(1, True, id="int-one"),
            pytest.param(0, False, id="int-zero"),
            pytest.param(-2.5, True, id="float-negative"),
            pytest.param(0.0, False, id="float-zero"),
            pytest.param(math.nan, True, id="nan"),
            pytest.param(Decimal("0"), False, id="decimal-zero"),
            pytest.param(Fraction(1, 3), True, id="fraction"),
            pytest.param(None, False, id="none"),
            pytest.param([1], False, id="list"),
            pytest.param(object(), False, id="object"),
        ],
    )
    def test_cast(self, value, expected):
        assert cast_to_bool(value) is expected
