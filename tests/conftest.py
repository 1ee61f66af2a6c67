from pathlib import Path
import os
import sys

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

# Qt widgets in tests render without a display.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from starling.core.engine import StarlingEngine
from starling.core.params import BASELINE


@pytest.fixture
def baseline():
    """Baseline Frank-Starling parameter set."""
    return BASELINE


@pytest.fixture
def engine():
    """Engine at its initial inputs (EDV 120 mL, no inotropy/afterload shift)."""
    return StarlingEngine()
