# File: scripts/example_layout.py
"""
Example driver for the solar mounting calculator.

Runs the reference ten-panel layout (or panel positions loaded from a JSON
file), prints the mounts and joints, and saves them as JSON.

Usage:
    python scripts/example_layout.py
    python scripts/example_layout.py --input panels.json --rafter-spacing 24
"""

import argparse
import json
import os
import sys
from typing import Dict, List

# Ensure project root is on sys.path for package imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from src.solar_mounting import (
    ConfigurationError,
    InvalidInputError,
    MountingConfig,
    calculate_layout,
)
from src.solar_mounting.utils.logging_config import SolarMountingLogger


EXAMPLE_PANELS = [
    {"x": 0, "y": 0},
    {"x": 45.05, "y": 0},
    {"x": 90.1, "y": 0},
    {"x": 0, "y": 71.6},
    {"x": 135.15, "y": 0},
    {"x": 135.15, "y": 71.6},
    {"x": 0, "y": 143.2},
    {"x": 45.05, "y": 143.2},
    {"x": 135.15, "y": 143.2},
    {"x": 90.1, "y": 143.2},
]


def parse_arguments():
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Solar panel mount and joint calculator"
    )
    parser.add_argument(
        "--input",
        help="JSON file with a list of {\"x\": .., \"y\": ..} panel positions "
             "(default: built-in example layout)"
    )
    parser.add_argument(
        "--rafter-spacing",
        type=float,
        default=16,
        help="Distance between rafters (default: 16)"
    )
    parser.add_argument(
        "--first-rafter-x",
        type=float,
        default=0,
        help="X-coordinate of the first rafter (default: 0)"
    )
    parser.add_argument(
        "--output",
        default="output.json",
        help="Path of the JSON result file (default: output.json)"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging"
    )
    return parser.parse_args()


def load_panels(path: str) -> List[Dict]:
    """Load panel positions from a JSON file."""
    with open(path, "r") as f:
        return json.load(f)


def print_points(title: str, points: List[Dict[str, float]]) -> None:
    """Print points sorted by (y, x)."""
    print(f"\n{title} ({len(points)} total)")
    print("-" * 50)
    for index, point in enumerate(sorted(points, key=lambda p: (p["y"], p["x"])), start=1):
        print(f"  {index}. x: {point['x']:.2f}, y: {point['y']:.2f}")


def main():
    args = parse_arguments()
    SolarMountingLogger.configure(debug_mode=args.debug)

    panels_data = load_panels(args.input) if args.input else EXAMPLE_PANELS
    config = MountingConfig(
        rafter_spacing=args.rafter_spacing,
        first_rafter_x=args.first_rafter_x,
    )

    print("Solar Panel Mount and Joint Calculator")
    print("=" * 50)
    print(f"\nInput: {len(panels_data)} panels")
    print(f"Panel dimensions: {config.panel_width} x {config.panel_height}")
    print(f"Rafter spacing: {config.rafter_spacing} units")
    print(f"First rafter at: x = {config.first_rafter_x}")

    try:
        result = calculate_layout(panels_data, config)
    except (InvalidInputError, ConfigurationError) as e:
        print(f"\nError: {e}", file=sys.stderr)
        return 1

    payload = result.to_dict()
    print_points("MOUNTS", payload["mounts"])
    print_points("JOINTS", payload["joints"])

    with open(args.output, "w") as f:
        json.dump(payload, f, indent=2)
    print(f"\nResults saved to {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
