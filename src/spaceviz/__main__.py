"""Command-line entry point: load, generate or sample points and show them."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from spaceviz.config import load_config
from spaceviz.expr import ExprError, FunctionEvaluator
from spaceviz.geom import distance, manhattan_distance
from spaceviz.io import FormatError, load_points_csv, save_points_csv
from spaceviz.logging_config import setup_logging
from spaceviz.sampler import default_cloud, sample, sample_cloud

logger = logging.getLogger("spaceviz.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="spaceviz",
                                     description="Interactive 3D point cloud viewer.")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--csv", type=Path, metavar="PATH", help="Path to CSV file with 3D points.")
    mode.add_argument("--generate", type=Path, metavar="PATH",
                      help="Generate a sample CSV file at PATH and exit.")
    mode.add_argument("--function", metavar="EXPR",
                      help="Function z = f(x, y) to visualize (e.g. 'sin(x) * cos(y)').")
    parser.add_argument("--xmin", type=float, help="Minimum x value for function sampling.")
    parser.add_argument("--xmax", type=float, help="Maximum x value for function sampling.")
    parser.add_argument("--ymin", type=float, help="Minimum y value for function sampling.")
    parser.add_argument("--ymax", type=float, help="Maximum y value for function sampling.")
    parser.add_argument("--step", type=float, help="Step size for function sampling.")
    parser.add_argument("--config", type=Path, metavar="PATH", help="YAML viewer configuration.")
    parser.add_argument("--log-level", default="warning",
                        choices=["debug", "info", "warning", "error"], help="Logging verbosity.")
    parser.add_argument("--log-file", metavar="PATH", help="Also write logs to PATH.")
    parser.add_argument("--no-window", action="store_true",
                        help="Load or sample the points, report, and exit without a window.")
    return parser


def _pick(value, default):
    return default if value is None else value


def _load(args, config):
    if args.function:
        x_min = _pick(args.xmin, config.x_min)
        x_max = _pick(args.xmax, config.x_max)
        y_min = _pick(args.ymin, config.y_min)
        y_max = _pick(args.ymax, config.y_max)
        step = _pick(args.step, config.step)
        print(f"Generating points from function: {args.function}")
        print(f"Range: x=[{x_min:.2f}, {x_max:.2f}], y=[{y_min:.2f}, {y_max:.2f}], step={step:.2f}")
        evaluator = FunctionEvaluator(args.function)
        evaluator.tree  # force the parse; sampling skips failing cells
        cloud = sample(evaluator, x_min, x_max, y_min, y_max, step)
        print(f"Generated {len(cloud)} points from function")
        return cloud

    if args.csv:
        print(f"Loading points from CSV file: {args.csv}")
        cloud = load_points_csv(args.csv)
        print(f"Loaded {len(cloud)} points from CSV")
        return cloud

    print("No function or CSV file specified, using default points")
    cloud = default_cloud()
    p1, p2, p3 = cloud[0], cloud[1], cloud[2]
    print(f"Distance p1 to p2: {distance(p1, p2):.2f}")
    print(f"Distance p2 to p3: {p2.distance_to(p3):.2f}")
    print(f"Manhattan distance p1 to p3: {manhattan_distance(p1, p3):.2f}")
    return cloud


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        setup_logging(args.log_level, args.log_file)
        config = load_config(args.config)

        if args.generate:
            print(f"Generating sample CSV file at {args.generate}")
            save_points_csv(sample_cloud(), args.generate)
            print("Sample CSV file generated successfully")
            return 0

        cloud = _load(args, config)
    except (FormatError, OSError, ValueError, ExprError) as exc:
        print(f"spaceviz: error: {exc}", file=sys.stderr)
        return 1

    logger.debug("cloud bounds: %s", cloud.bounds())
    if args.no_window:
        return 0

    from spaceviz.viewer import view_points

    view_points(cloud, config)
    return 0


if __name__ == "__main__":
    sys.exit(main())
