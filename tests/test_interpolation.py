import math

import pytest

from starling.core.errors import InvalidInput
from starling.core.params import (
    BASELINE,
    DECREASED_AFTERLOAD,
    INCREASED_AFTERLOAD,
    NEGATIVE_INOTROPY,
    POSITIVE_INOTROPY,
    CardiacParams,
)
from starling.physiology.interpolation import (
    interpolate_bidirectional,
    interpolate_toward_target,
)


class TestTowardTarget:

    @pytest.mark.parametrize("intensity", [0, -0.3, -5])
    def test_at_or_below_zero_returns_base(self, intensity):
        assert interpolate_toward_target(BASELINE, POSITIVE_INOTROPY, intensity) == BASELINE

    @pytest.mark.parametrize("intensity", [1, 1.5, 10])
    def test_at_or_above_one_returns_target(self, intensity):
        assert interpolate_toward_target(BASELINE, POSITIVE_INOTROPY, intensity) == POSITIVE_INOTROPY

    def test_midpoint(self):
        mid = interpolate_toward_target(BASELINE, POSITIVE_INOTROPY, 0.5)
        assert mid.sv_max == pytest.approx((BASELINE.sv_max + POSITIVE_INOTROPY.sv_max) / 2)
        assert mid.km_effective == pytest.approx(80.0)
        assert mid.hill_coefficient == pytest.approx(2.8)

    def test_hill_coefficient_interpolated(self):
        steep = CardiacParams(hill_coefficient=4.8)
        result = interpolate_toward_target(BASELINE, steep, 0.25)
        assert result.hill_coefficient == pytest.approx(3.3)

    def test_threshold_and_heart_rate_come_from_base(self):
        target = CardiacParams(min_edv_for_ejection=80.0, sv_max=100.0, heart_rate=120.0)
        result = interpolate_toward_target(BASELINE, target, 0.5)
        assert result.min_edv_for_ejection == BASELINE.min_edv_for_ejection
        assert result.heart_rate == BASELINE.heart_rate
        assert result.sv_max == pytest.approx(140.0)

    def test_nan_intensity_rejected(self):
        with pytest.raises(InvalidInput):
            interpolate_toward_target(BASELINE, POSITIVE_INOTROPY, math.nan)


class TestBidirectional:

    def test_zero_returns_base(self):
        result = interpolate_bidirectional(BASELINE, POSITIVE_INOTROPY, NEGATIVE_INOTROPY, 0)
        assert result == BASELINE

    def test_full_positive_and_negative(self):
        assert interpolate_bidirectional(
            BASELINE, POSITIVE_INOTROPY, NEGATIVE_INOTROPY, 1) == POSITIVE_INOTROPY
        assert interpolate_bidirectional(
            BASELINE, POSITIVE_INOTROPY, NEGATIVE_INOTROPY, -1) == NEGATIVE_INOTROPY

    def test_negative_intensity_uses_negative_target(self):
        result = interpolate_bidirectional(
            BASELINE, INCREASED_AFTERLOAD, DECREASED_AFTERLOAD, -0.4)
        expected = interpolate_toward_target(BASELINE, DECREASED_AFTERLOAD, 0.4)
        assert result == expected
        assert result.sv_max == pytest.approx(180 + (210 - 180) * 0.4)

    def test_out_of_range_is_clamped(self):
        assert interpolate_bidirectional(
            BASELINE, POSITIVE_INOTROPY, NEGATIVE_INOTROPY, 2.5) == POSITIVE_INOTROPY
        assert interpolate_bidirectional(
            BASELINE, POSITIVE_INOTROPY, NEGATIVE_INOTROPY, -3) == NEGATIVE_INOTROPY

    def test_is_deterministic(self):
        a = interpolate_bidirectional(BASELINE, POSITIVE_INOTROPY, NEGATIVE_INOTROPY, 0.37)
        b = interpolate_bidirectional(BASELINE, POSITIVE_INOTROPY, NEGATIVE_INOTROPY, 0.37)
        assert a == b

    def test_infinite_intensity_rejected(self):
        with pytest.raises(InvalidInput):
            interpolate_bidirectional(BASELINE, POSITIVE_INOTROPY, NEGATIVE_INOTROPY, math.inf)
