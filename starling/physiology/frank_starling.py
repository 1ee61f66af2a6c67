"""
Frank-Starling curve: stroke volume and cardiac output as a function of
end-diastolic volume (EDV).

Stroke volume follows a Hill equation on the effective filling volume
(EDV above the ejection threshold):

    SV = SVmax * Veff^h / (Km^h + Veff^h),   Veff = EDV - EDVmin

so SV is 0 at or below EDVmin, exactly SVmax / 2 at Veff == Km, and
approaches SVmax asymptotically. Cardiac output is SV * HR / 1000 (L/min).

All evaluation is at full float precision; values are only rounded when a
DataPoint is built for display or export.
"""

import operator
from dataclasses import dataclass
from typing import List

import numpy as np

from starling.core.constants import CO_DECIMALS, EDV_DECIMALS, ML_PER_LITER, SV_DECIMALS
from starling.core.errors import InvalidArgument
from starling.core.params import CardiacParams
from starling.core.utils import hill_fraction, require_finite


@dataclass(frozen=True)
class CardiacOutput:
    """Cardiac output (L/min) and the stroke volume (mL) it was derived from."""
    co: float
    sv: float


@dataclass(frozen=True)
class DataPoint:
    """One display-rounded sample of the curve."""
    edv: float  # mL
    sv: float   # mL
    co: float   # L/min

    @classmethod
    def from_values(cls, edv: float, result: CardiacOutput) -> "DataPoint":
        return cls(
            edv=round(edv, EDV_DECIMALS),
            sv=round(result.sv, SV_DECIMALS),
            co=round(result.co, CO_DECIMALS),
        )


def stroke_volume(edv: float, params: CardiacParams) -> float:
    """
    Stroke volume (mL) at the given EDV (mL).

    Returns 0.0 when EDV does not exceed the ejection threshold.
    """
    require_finite("edv", edv)
    if edv <= params.min_edv_for_ejection:
        return 0.0
    effective_edv = edv - params.min_edv_for_ejection
    if effective_edv <= 0:
        return 0.0

    fraction = hill_fraction(effective_edv, params.km_effective, params.hill_coefficient)
    return params.sv_max * fraction


def cardiac_output(edv: float, params: CardiacParams) -> CardiacOutput:
    """Cardiac output (L/min) and stroke volume (mL) at the given EDV."""
    sv = stroke_volume(edv, params)
    co = sv * params.heart_rate / ML_PER_LITER
    return CardiacOutput(co=co, sv=sv)


def generate_curve(params: CardiacParams, min_edv: float, max_edv: float,
                   steps: int) -> List[DataPoint]:
    """
    Sample the curve at ``steps + 1`` evenly spaced EDVs from ``min_edv`` to
    ``max_edv`` inclusive.

    Reversed bounds are accepted and give a descending sequence.
    Raises InvalidArgument if ``steps`` is not a positive integer.
    """
    try:
        steps = operator.index(steps)
    except TypeError:
        raise InvalidArgument(f"steps must be an integer, got {steps!r}") from None
    if steps <= 0:
        raise InvalidArgument(f"steps must be >= 1, got {steps}")
    require_finite("min_edv", min_edv)
    require_finite("max_edv", max_edv)

    step_size = (max_edv - min_edv) / steps
    edvs = min_edv + np.arange(steps + 1) * step_size
    return [DataPoint.from_values(edv, cardiac_output(edv, params)) for edv in edvs.tolist()]
