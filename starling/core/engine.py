import logging
from typing import Dict, List, Optional, Tuple

from .state import SimulatorConfig, SimulatorState
from starling.core.constants import INTENSITY_PERCENT_MAX, INTENSITY_PERCENT_MIN
from starling.core.errors import InvalidArgument
from starling.core.params import CardiacParams
from starling.core.utils import require_finite
from starling.physiology.frank_starling import DataPoint, cardiac_output, generate_curve
from starling.physiology.interpolation import interpolate_bidirectional

logger = logging.getLogger(__name__)


class StarlingEngine:
    """
    Holds the three simulator inputs (EDV, inotropy %, afterload %) and
    derives adjusted parameter sets, point values and curves from them.

    The engine is the only stateful piece; every number it reports comes
    from the pure functions in ``starling.physiology``. Curves depend only on
    the parameter set, so the last curve of each role (baseline, inotropy,
    afterload) is cached and reused while the user drags the EDV slider.
    """

    def __init__(self, config: Optional[SimulatorConfig] = None):
        self.config = config or SimulatorConfig()
        self.edv = self.config.initial_edv
        self.inotropy_pct = 0.0
        self.afterload_pct = 0.0
        self._curve_cache: Dict[str, Tuple[CardiacParams, List[DataPoint]]] = {}

    def reset(self):
        """Return all inputs to their initial values."""
        self.edv = self.config.initial_edv
        self.inotropy_pct = 0.0
        self.afterload_pct = 0.0

    # --- Inputs ---

    def set_edv(self, edv_ml: float):
        require_finite("edv", edv_ml)
        cfg = self.config
        if not cfg.edv_min <= edv_ml <= cfg.edv_max:
            raise InvalidArgument(f"EDV {edv_ml} mL outside [{cfg.edv_min}, {cfg.edv_max}]")
        self.edv = float(edv_ml)

    def set_inotropy(self, percent: float):
        self.inotropy_pct = self._validate_percent("inotropy", percent)

    def set_afterload(self, percent: float):
        self.afterload_pct = self._validate_percent("afterload", percent)

    @staticmethod
    def _validate_percent(name: str, percent: float) -> float:
        require_finite(name, percent)
        if not INTENSITY_PERCENT_MIN <= percent <= INTENSITY_PERCENT_MAX:
            raise InvalidArgument(
                f"{name} {percent}% outside [{INTENSITY_PERCENT_MIN:.0f}, {INTENSITY_PERCENT_MAX:.0f}]"
            )
        return float(percent)

    # --- Derived parameter sets ---

    @property
    def baseline_params(self) -> CardiacParams:
        return self.config.baseline

    @property
    def inotropy_params(self) -> CardiacParams:
        cfg = self.config
        return interpolate_bidirectional(
            cfg.baseline, cfg.positive_inotropy, cfg.negative_inotropy,
            self.inotropy_pct / 100.0,
        )

    @property
    def afterload_params(self) -> CardiacParams:
        cfg = self.config
        return interpolate_bidirectional(
            cfg.baseline, cfg.increased_afterload, cfg.decreased_afterload,
            self.afterload_pct / 100.0,
        )

    # --- Curves ---

    def curve_for(self, role: str, params: CardiacParams) -> List[DataPoint]:
        """
        Sampled curve over the configured EDV range for ``params``.

        Only the most recent curve per ``role`` is kept; it is resampled
        when that role's parameter set changes.
        """
        cached_params, cached = self._curve_cache.get(role, (None, None))
        if cached is None or cached_params != params:
            cfg = self.config
            cached = generate_curve(params, cfg.edv_min, cfg.edv_max, cfg.curve_steps)
            self._curve_cache[role] = (params, cached)
            logger.debug("Sampled %d %s curve points for %s", len(cached), role, params)
        return list(cached)

    def baseline_curve(self) -> List[DataPoint]:
        return self.curve_for("baseline", self.baseline_params)

    def inotropy_curve(self) -> Optional[List[DataPoint]]:
        """Inotropy-adjusted curve, or None while inotropy is 0."""
        if self.inotropy_pct == 0:
            return None
        return self.curve_for("inotropy", self.inotropy_params)

    def afterload_curve(self) -> Optional[List[DataPoint]]:
        """Afterload-adjusted curve, or None while afterload is 0."""
        if self.afterload_pct == 0:
            return None
        return self.curve_for("afterload", self.afterload_params)

    def curves(self) -> Dict[str, List[DataPoint]]:
        """All visible curves keyed by name ('baseline', 'inotropy', 'afterload')."""
        result = {"baseline": self.baseline_curve()}
        inotropy = self.inotropy_curve()
        if inotropy is not None:
            result["inotropy"] = inotropy
        afterload = self.afterload_curve()
        if afterload is not None:
            result["afterload"] = afterload
        return result

    # --- Snapshot ---

    def get_state(self) -> SimulatorState:
        edv = self.edv
        return SimulatorState(
            edv=edv,
            inotropy_pct=self.inotropy_pct,
            afterload_pct=self.afterload_pct,
            heart_rate=self.baseline_params.heart_rate,
            baseline=cardiac_output(edv, self.baseline_params),
            inotropy=cardiac_output(edv, self.inotropy_params) if self.inotropy_pct != 0 else None,
            afterload=cardiac_output(edv, self.afterload_params) if self.afterload_pct != 0 else None,
        )
