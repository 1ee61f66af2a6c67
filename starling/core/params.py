from dataclasses import dataclass, fields, replace
from types import MappingProxyType

from starling.core.errors import InvalidArgument
from starling.core.utils import require_finite


@dataclass(frozen=True)
class CardiacParams:
    """Parameters of the Hill-equation Frank-Starling curve."""
    min_edv_for_ejection: float = 50.0  # mL, no ejection at or below this EDV
    sv_max: float = 180.0               # mL, asymptotic maximum stroke volume
    km_effective: float = 90.0          # mL, effective EDV giving 50% of sv_max
    hill_coefficient: float = 2.8       # Dimensionless steepness
    heart_rate: float = 72.0            # bpm

    def __post_init__(self):
        for f in fields(self):
            value = require_finite(f.name, getattr(self, f.name))
            if value < 0:
                raise InvalidArgument(f"{f.name} must be non-negative, got {value!r}")


# Baseline: 50% of sv_max reached at EDV = 90 + 50 = 140 mL.
BASELINE = CardiacParams()

# Contractility shifts the curve up and to the left (or down and to the right).
POSITIVE_INOTROPY = replace(BASELINE, sv_max=220.0, km_effective=70.0)
NEGATIVE_INOTROPY = replace(BASELINE, sv_max=150.0, km_effective=110.0)

# Afterload shifts it the opposite way: more resistance, less ejection.
INCREASED_AFTERLOAD = replace(BASELINE, sv_max=150.0, km_effective=100.0)
DECREASED_AFTERLOAD = replace(BASELINE, sv_max=210.0, km_effective=80.0)

PRESETS = MappingProxyType({
    "baseline": BASELINE,
    "positive_inotropy": POSITIVE_INOTROPY,
    "negative_inotropy": NEGATIVE_INOTROPY,
    "increased_afterload": INCREASED_AFTERLOAD,
    "decreased_afterload": DECREASED_AFTERLOAD,
})


def get_preset(name: str) -> CardiacParams:
    """
    Look up a preset by name (case and separator insensitive).

    Raises InvalidArgument for unknown names.
    """
    key = name.strip().lower().replace("-", "_").replace(" ", "_")
    try:
        return PRESETS[key]
    except KeyError:
        raise InvalidArgument(
            f"Unknown parameter preset: {name!r} (expected one of {', '.join(PRESETS)})"
        ) from None
