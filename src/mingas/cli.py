"""Plot the minimum gas reserve of several cylinders over a depth range."""

import argparse
import dataclasses
import logging
import math
from pathlib import Path
from typing import Sequence

from mingas.config import MinGasConfig, default_config
from mingas.errors import InputParseError, MinGasError
from mingas.plot import plot_mingas, save_figure
from mingas.series import DepthRange, build_series, mingas_table

logger = logging.getLogger(__name__)


def parse_breathing_rate(value: str) -> float:
    try:
        rate = float(value)
    except ValueError as e:
        raise InputParseError(f"breathing rate is not a number: {value!r}") from e
    if not math.isfinite(rate):
        raise InputParseError(f"breathing rate must be finite: {value!r}")
    return rate


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="mingas", description=__doc__)
    parser.add_argument(
        "amv",
        nargs="?",
        help=f"breathing rate in l/min (default {default_config.breathing_rate:g})",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=default_config.output,
        help="chart file, .html for an interactive chart (default %(default)s)",
    )
    parser.add_argument(
        "-c",
        "--cylinders",
        nargs="+",
        type=int,
        default=default_config.cylinder_volumes,
        metavar="LITERS",
        help="cylinder volumes in legend order",
    )
    depth_range = default_config.depth_range
    parser.add_argument(
        "--max-depth",
        type=float,
        default=depth_range.start,
        help="deepest charted depth in m (default %(default)s)",
    )
    parser.add_argument(
        "--min-depth",
        type=float,
        default=depth_range.end,
        help="shallowest depth in m, not charted itself (default %(default)s)",
    )
    parser.add_argument(
        "--step",
        type=float,
        default=depth_range.step,
        help="depth step in m (default %(default)s)",
    )
    parser.add_argument(
        "--table", action="store_true", help="print the mingas table as markdown"
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser.parse_args(argv)


def config_from_args(args: argparse.Namespace) -> MinGasConfig:
    config = dataclasses.replace(
        default_config,
        cylinder_volumes=tuple(args.cylinders),
        depth_range=DepthRange(args.max_depth, args.min_depth, args.step),
        output=args.output,
    )
    if args.amv is not None:
        config = dataclasses.replace(
            config, breathing_rate=parse_breathing_rate(args.amv)
        )
    return config


def run(config: MinGasConfig, table: bool = False) -> Path:
    series = build_series(
        config.depth_range, config.breathing_rate, config.cylinder_volumes
    )
    fig = plot_mingas(
        series, config.breathing_rate, config.cylinder_volumes, config.depth_range
    )
    path = save_figure(fig, config.output, config.width_px, config.height_px)
    if table:
        print(mingas_table(series).to_markdown(floatfmt=".0f"))
    return path


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        config = config_from_args(args)
        path = run(config, table=args.table)
    except MinGasError as e:
        logger.error(e)
        return 1
    logger.info(f"mingas for AMV = {config.breathing_rate:g} l/min written to {path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
