"""
Interpolation of Frank-Starling parameter sets between physiological regimes.

An intensity of 0 is the baseline regime and 1 is the full target regime.
Only the curve-shape parameters (sv_max, km_effective, hill_coefficient)
move; the ejection threshold and heart rate always come from the baseline,
since neither depends on contractility or afterload in this model.
"""

import logging
from dataclasses import replace

from starling.core.params import CardiacParams
from starling.core.utils import lerp, require_finite

logger = logging.getLogger(__name__)


def interpolate_toward_target(base: CardiacParams, target: CardiacParams,
                              intensity: float) -> CardiacParams:
    """
    Parameter set a fraction ``intensity`` of the way from ``base`` to ``target``.

    Intensities at or below 0 return ``base``; at or above 1 return ``target``.
    """
    require_finite("intensity", intensity)
    if intensity <= 0:
        return base
    if intensity >= 1:
        return target

    return replace(
        base,
        sv_max=lerp(base.sv_max, target.sv_max, intensity),
        km_effective=lerp(base.km_effective, target.km_effective, intensity),
        hill_coefficient=lerp(base.hill_coefficient, target.hill_coefficient, intensity),
    )


def interpolate_bidirectional(base: CardiacParams, positive_target: CardiacParams,
                              negative_target: CardiacParams,
                              intensity: float) -> CardiacParams:
    """
    Signed interpolation: positive intensities move toward ``positive_target``,
    negative ones toward ``negative_target`` by ``abs(intensity)``.

    Intensity is conceptually in [-1, 1]; values beyond are clamped by
    interpolate_toward_target.
    """
    require_finite("intensity", intensity)
    if intensity == 0:
        return base

    if intensity > 0:
        params = interpolate_toward_target(base, positive_target, intensity)
    else:
        params = interpolate_toward_target(base, negative_target, -intensity)
    logger.debug("Interpolated params at intensity %.3f: %s", intensity, params)
    return params
