"""
Plain-text simulation report: the current inputs, the computed cardiac
output and stroke volume for each visible regime, and the heart rate.
"""

import logging
import os
from datetime import datetime
from typing import List, Optional

from starling.core.constants import CO_DECIMALS, HR_DECIMALS, SV_DECIMALS
from starling.core.state import SimulatorState
from starling.core.utils import format_signed
from starling.physiology.frank_starling import CardiacOutput

logger = logging.getLogger(__name__)

REPORT_TITLE = "Cardiac Simulation Report"


def _result_line(label: str, result: CardiacOutput) -> str:
    return (
        f"- {label}: CO {result.co:.{CO_DECIMALS}f} L/min, "
        f"SV {result.sv:.{SV_DECIMALS}f} mL/beat."
    )


def build_report(state: SimulatorState, generated_at: Optional[datetime] = None) -> str:
    generated_at = generated_at or datetime.now()
    lines: List[str] = [
        REPORT_TITLE,
        f"Generated: {generated_at:%Y-%m-%d %H:%M:%S}",
        "",
        "Simulation Parameters",
        f"- End-Diastolic Volume (EDV): {state.edv:.0f} mL",
        f"- Inotropy level: {format_signed(state.inotropy_pct)} %",
        f"- Afterload level: {format_signed(state.afterload_pct)} %",
        "",
        "Computed Results",
        _result_line("Baseline", state.baseline),
    ]
    if state.inotropy is not None:
        lines.append(_result_line("With inotropy", state.inotropy))
    if state.afterload is not None:
        lines.append(_result_line("With afterload", state.afterload))
    lines.append(f"- Heart rate: {state.heart_rate:.{HR_DECIMALS}f} beats/min.")
    return "\n".join(lines) + "\n"


def write_report(state: SimulatorState, path: str,
                 generated_at: Optional[datetime] = None) -> str:
    """Write the report to ``path`` (parent directories are created)."""
    text = build_report(state, generated_at)
    directory = os.path.dirname(path)
    try:
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            f.write(text)
    except OSError as e:
        logger.error("Failed to write report %s: %s", path, e)
        raise
    logger.info("Wrote report to %s", path)
    return path
