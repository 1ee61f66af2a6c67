import math

import pytest

from starling.core.errors import InvalidInput
from starling.core.utils import format_signed, hill_fraction, lerp, require_finite


def test_lerp():
    assert lerp(180, 220, 0.0) == 180
    assert lerp(180, 220, 1.0) == 220
    assert lerp(180, 220, 0.25) == 190


def test_hill_fraction_half_at_k():
    assert hill_fraction(90.0, 90.0, 2.8) == 0.5
    assert hill_fraction(45.0, 90.0, 1.0) == pytest.approx(1 / 3)
    assert hill_fraction(180.0, 90.0, 1.0) == pytest.approx(2 / 3)


def test_hill_fraction_zero_denominator():
    assert hill_fraction(0.0, 0.0, 2.8) == 0.0


def test_require_finite():
    assert require_finite("x", 3.5) == 3.5
    for bad in (math.nan, math.inf, -math.inf, "12"):
        with pytest.raises(InvalidInput):
            require_finite("x", bad)


@pytest.mark.parametrize("value, expected", [(40, "+40"), (-25, "-25"), (0, "0")])
def test_format_signed(value, expected):
    assert format_signed(value) == expected
