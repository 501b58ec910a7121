#!/usr/bin/env python3
"""
Solve an image maze with A*.
Pure white pixels are walkable, any other colour is a wall. The path is drawn
in red and written to solution.png in the working directory.

Usage:
    solve_image.py filename x1 y1 x2 y2

A 100x100 image has pixel coordinates in [0, 99].
"""

import os
import sys
import argparse
import logging

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from pixel_astar.app import ImagePathSolver
from pixel_astar.imaging import show_image
from pixel_astar.planning.exceptions import PathPlanningError
from pixel_astar.utils import load_config, log_exceptions, setup_logging, validate_config


@log_exceptions("pixel_astar.cli")
def run(args: argparse.Namespace) -> int:
    config = load_config(args.config)

    if args.heuristic:
        config.planning['heuristic_type'] = args.heuristic

    system_logger = setup_logging(config.logging)
    logger = logging.getLogger(__name__)

    errors = validate_config(config)
    if errors:
        for section, messages in errors.items():
            for message in messages:
                logger.error(f"{section}: {message}")
        return 2

    solver = ImagePathSolver(config)

    try:
        report = solver.solve(
            args.filename,
            (args.x1, args.y1),
            (args.x2, args.y2),
            output_path=args.output,
        )
    except PathPlanningError as e:
        system_logger.log_error_with_context(
            "planning", e,
            {"image": args.filename, "start": (args.x1, args.y1), "goal": (args.x2, args.y2)},
        )
        return 2

    # Timing and path size are logged by the solver
    if args.show:
        show_image(report.solution)

    return 0 if report.success else 1


def main():
    parser = argparse.ArgumentParser(
        description="Find a path between two pixels of an image with A*"
    )
    parser.add_argument("filename", type=str, help="Image file (png, jpg, bmp, ...)")
    parser.add_argument("x1", type=int, help="Start pixel x")
    parser.add_argument("y1", type=int, help="Start pixel y")
    parser.add_argument("x2", type=int, help="Goal pixel x")
    parser.add_argument("y2", type=int, help="Goal pixel y")
    parser.add_argument(
        "--config", type=str, default=None, help="Configuration file path"
    )
    parser.add_argument(
        "--output", type=str, default=None, help="Solution image (default solution.png)"
    )
    parser.add_argument(
        "--heuristic", type=str, default=None, help="Override planning.heuristic_type"
    )
    parser.add_argument(
        "--show", action="store_true", help="Display the solution in a window"
    )

    args = parser.parse_args()

    sys.exit(run(args))


if __name__ == "__main__":
    main()
