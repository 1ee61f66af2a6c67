import operator
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from starling.core.constants import (
    CURVE_STEPS,
    EDV_SLIDER_MAX,
    EDV_SLIDER_MIN,
    INITIAL_EDV,
)
from starling.core.errors import InvalidArgument
from starling.core.params import (
    BASELINE,
    DECREASED_AFTERLOAD,
    INCREASED_AFTERLOAD,
    NEGATIVE_INOTROPY,
    POSITIVE_INOTROPY,
    CardiacParams,
    get_preset,
)
from starling.physiology.frank_starling import CardiacOutput

_PRESET_FIELDS = (
    "baseline",
    "positive_inotropy",
    "negative_inotropy",
    "increased_afterload",
    "decreased_afterload",
)


@dataclass
class SimulatorConfig:
    """Configuration for the simulator engine."""
    edv_min: float = EDV_SLIDER_MIN  # mL
    edv_max: float = EDV_SLIDER_MAX  # mL
    initial_edv: float = INITIAL_EDV  # mL
    curve_steps: int = CURVE_STEPS

    # Regimes. Positive afterload intensity means increased afterload.
    baseline: CardiacParams = BASELINE
    positive_inotropy: CardiacParams = POSITIVE_INOTROPY
    negative_inotropy: CardiacParams = NEGATIVE_INOTROPY
    increased_afterload: CardiacParams = INCREASED_AFTERLOAD
    decreased_afterload: CardiacParams = DECREASED_AFTERLOAD

    def __post_init__(self):
        if self.edv_min >= self.edv_max:
            raise InvalidArgument(
                f"edv_min ({self.edv_min}) must be below edv_max ({self.edv_max})"
            )
        if not self.edv_min <= self.initial_edv <= self.edv_max:
            raise InvalidArgument(
                f"initial_edv {self.initial_edv} outside [{self.edv_min}, {self.edv_max}]"
            )
        if isinstance(self.curve_steps, bool):
            raise InvalidArgument(f"curve_steps must be an integer, got {self.curve_steps!r}")
        try:
            self.curve_steps = operator.index(self.curve_steps)
        except TypeError:
            raise InvalidArgument(f"curve_steps must be an integer, got {self.curve_steps!r}") from None
        if self.curve_steps < 1:
            raise InvalidArgument(f"curve_steps must be >= 1, got {self.curve_steps}")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SimulatorConfig":
        """
        Build a config from a JSON-style mapping.

        Regime entries may be a preset name ("positive_inotropy") or a mapping
        of CardiacParams fields.
        """
        kwargs = {}
        for key in ("edv_min", "edv_max", "initial_edv"):
            if key in data:
                kwargs[key] = float(data[key])
        if "curve_steps" in data:
            kwargs["curve_steps"] = data["curve_steps"]
        for key in _PRESET_FIELDS:
            if key not in data:
                continue
            value = data[key]
            if isinstance(value, str):
                kwargs[key] = get_preset(value)
            elif isinstance(value, dict):
                kwargs[key] = CardiacParams(**value)
            else:
                raise InvalidArgument(f"{key} must be a preset name or a mapping")
        unknown = set(data) - set(kwargs)
        if unknown:
            raise InvalidArgument(f"Unknown config keys: {', '.join(sorted(unknown))}")
        return cls(**kwargs)


@dataclass(frozen=True)
class SimulatorState:
    """Immutable snapshot of the simulator inputs and computed results."""
    edv: float = INITIAL_EDV
    inotropy_pct: float = 0.0
    afterload_pct: float = 0.0

    heart_rate: float = BASELINE.heart_rate

    baseline: CardiacOutput = field(default_factory=lambda: CardiacOutput(co=0.0, sv=0.0))
    # None when the corresponding slider is at 0.
    inotropy: Optional[CardiacOutput] = None
    afterload: Optional[CardiacOutput] = None
