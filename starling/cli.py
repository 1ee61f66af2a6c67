import argparse
import json
import logging
import os
import sys

from starling.core.constants import CURVE_STEPS, INITIAL_EDV
from starling.core.engine import StarlingEngine
from starling.core.recorder import CurveRecorder
from starling.core.report import build_report, write_report
from starling.core.state import SimulatorConfig


def load_config(path, steps=None):
    """Load a SimulatorConfig from a JSON file (or defaults when path is None)."""
    config_data = {}
    if path:
        with open(path, 'r') as f:
            config_data = json.load(f)
    if steps is not None:
        config_data['curve_steps'] = steps
    return SimulatorConfig.from_dict(config_data)


def run_headless(args):
    """Evaluate the current point and curves, print the report, optionally export."""
    try:
        config = load_config(args.config, args.steps)
        engine = StarlingEngine(config)
        engine.set_edv(args.edv if args.edv is not None else config.initial_edv)
        engine.set_inotropy(args.inotropy)
        engine.set_afterload(args.afterload)
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    state = engine.get_state()
    print(build_report(state), end="")

    if args.export_dir:
        recorder = CurveRecorder(output_dir=args.export_dir)
        recorder.add_all(engine.curves())
        csv_path = recorder.save()
        report_path = write_report(state, os.path.join(args.export_dir, "starling_report.txt"))
        print(f"Curves written to {csv_path}")
        print(f"Report written to {report_path}")


def run_ui():
    """Run the simulator with UI."""
    from starling.ui.main_window import main as run_window
    run_window()


def build_parser():
    parser = argparse.ArgumentParser(description="Starling - Frank-Starling Curve Simulator")
    parser.add_argument("--mode", choices=["ui", "headless"], default="ui", help="Run mode (default: ui)")
    parser.add_argument("--edv", type=float, default=None,
                        help=f"End-diastolic volume in mL (default: {INITIAL_EDV:.0f})")
    parser.add_argument("--inotropy", type=float, default=0.0, help="Inotropy level in %% (-100 to 100)")
    parser.add_argument("--afterload", type=float, default=0.0, help="Afterload level in %% (-100 to 100)")
    parser.add_argument("--steps", type=int, default=None,
                        help=f"Curve sampling intervals (default: {CURVE_STEPS})")
    parser.add_argument("--config", type=str, help="Path to JSON configuration file")
    parser.add_argument("--export-dir", type=str, default=None,
                        help="Write curve CSV and report to this directory (headless only)")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    if args.mode == "headless":
        run_headless(args)
    else:
        run_ui()


if __name__ == "__main__":
    main()
