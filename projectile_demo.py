#!/usr/bin/env python3
#
# PROJECT: raytracer-core
# MODULE: projectile_demo.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import argparse
import logging
import sys
import os

# Ensure local package is importable
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from raytracer_core.config import SimulationConfig
from raytracer_core.logging_config import setup_logging
from raytracer_core.simulation import run_simulation

logger = logging.getLogger("raytracer_core.demo")


def parse_args(argv=None):
    """CLI argument parser for the projectile trajectory demo."""
    epilog = """\
examples:
  %(prog)s                                       Default launch, writes projectile.ppm
  %(prog)s arc.ppm --speed 8 --wind 0            Slower launch, no wind
  %(prog)s arc.ppm --width 300 --height 200      Smaller image
  %(prog)s arc.ppm --color #00FFFF -v            Cyan trajectory, debug logging
"""
    parser = argparse.ArgumentParser(
        description="Plot a projectile's trajectory into a PPM image",
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument("output", nargs='?', default="projectile.ppm",
                        help="Output .ppm path (default: projectile.ppm)")
    parser.add_argument("--width", type=int, default=900,
                        help="Canvas width in pixels (default: 900)")
    parser.add_argument("--height", type=int, default=550,
                        help="Canvas height in pixels (default: 550)")
    parser.add_argument("--speed", type=float, default=11.25,
                        help="Launch speed in pixels per tick (default: 11.25)")
    parser.add_argument("--gravity", type=float, default=0.1,
                        help="Downward acceleration per tick (default: 0.1)")
    parser.add_argument("--wind", type=float, default=-0.01,
                        help="Horizontal acceleration per tick (default: -0.01)")
    parser.add_argument("--max-ticks", type=int, default=10000,
                        help="Upper bound on simulated ticks (default: 10000)")
    parser.add_argument("--color", default="#FFCC99",
                        help="Trajectory color in hex #RRGGBB (default: #FFCC99)")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Enable debug logging")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.INFO)

    try:
        config = SimulationConfig.from_args(args)
    except ValueError as e:
        logger.error("Invalid arguments: %s", e)
        return 2

    canvas = run_simulation(config)
    try:
        canvas.to_ppm(config.output, config.ppm)
    except OSError as e:
        logger.error("Could not write '%s': %s", config.output, e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
