import logging
import os
import time
from dataclasses import asdict
from typing import Dict, List, Optional

import pandas as pd

from starling.physiology.frank_starling import DataPoint

logger = logging.getLogger(__name__)

CURVE_COLUMNS = ["curve", "edv", "sv", "co"]


def curves_to_frame(curves: Dict[str, List[DataPoint]]) -> pd.DataFrame:
    """Long-format table with one row per sampled point: curve, edv, sv, co."""
    rows = [
        {"curve": name, **asdict(point)}
        for name, points in curves.items()
        for point in points
    ]
    return pd.DataFrame(rows, columns=CURVE_COLUMNS)


class CurveRecorder:
    """
    Records sampled Frank-Starling curves to CSV.
    """
    def __init__(self, output_dir: str = ".", filename: Optional[str] = None):
        self.output_dir = output_dir
        self.filename = filename or f"starling_curves_{int(time.time())}.csv"
        self.file_path = os.path.join(output_dir, self.filename)
        self.curves: Dict[str, List[DataPoint]] = {}

    def add(self, name: str, points: List[DataPoint]):
        self.curves[name] = list(points)

    def add_all(self, curves: Dict[str, List[DataPoint]]):
        for name, points in curves.items():
            self.add(name, points)

    def to_frame(self) -> pd.DataFrame:
        return curves_to_frame(self.curves)

    def save(self) -> str:
        """Write the recorded curves and return the file path."""
        try:
            os.makedirs(self.output_dir, exist_ok=True)
            self.to_frame().to_csv(self.file_path, index=False)
        except OSError as e:
            logger.error("Failed to write curve CSV %s: %s", self.file_path, e)
            raise
        logger.info("Wrote %d curve(s) to %s", len(self.curves), self.file_path)
        return self.file_path
