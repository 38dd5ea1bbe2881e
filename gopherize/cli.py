"""Command-line entry point: flags in, JPEG out, exit status back."""

from pathlib import Path
import sys
import logging
import argparse

from .compositor import PlacementParams
from .config import (
    DEFAULT_MAX_SIZE,
    DEFAULT_MIN_NEIGHBOURS,
    DEFAULT_MIN_SIZE,
    DEFAULT_OUTPUT,
    DEFAULT_SCALE,
    DEFAULT_SIZE_COEFF,
    DEFAULT_X_COEFF,
    DEFAULT_Y_COEFF,
    LOG_FORMAT,
)
from .detectors import DetectionParams
from .errors import GopherizeError, MissingRequiredFlag
from .pipeline import RunConfig, run

logger = logging.getLogger(__package__)

REQUIRED_FLAGS = ("classifier", "photo", "gopher")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Detect faces in a photo and draw a gopher over each one", allow_abbrev=False)

    def flag(name, **kwargs):
        # accept both -name and --name
        p.add_argument(f"-{name}", f"--{name}", **kwargs)

    flag("classifier", help="Path to classifier file (required)")
    flag("photo", help="Path to photo image file (required)")
    flag("photo-detect-scale", type=float, default=DEFAULT_SCALE, help=f"Photo face detection scale parameter (default: {DEFAULT_SCALE})")
    flag("photo-detect-min-neighbours", type=int, default=DEFAULT_MIN_NEIGHBOURS, help=f"Photo face detection min neighbours parameter (default: {DEFAULT_MIN_NEIGHBOURS})")
    flag("photo-detect-min-size", type=int, default=DEFAULT_MIN_SIZE, help=f"Photo face detection min size parameter (default: {DEFAULT_MIN_SIZE})")
    flag("photo-detect-max-size", type=int, default=DEFAULT_MAX_SIZE, help=f"Photo face detection max size parameter (default: {DEFAULT_MAX_SIZE})")
    flag("gopher", help="Path to gopher image file (required)")
    flag("gopher-size-coeff", type=float, default=DEFAULT_SIZE_COEFF, help=f"Coefficient for gopher size (default: {DEFAULT_SIZE_COEFF})")
    flag("gopher-x-coeff", type=float, default=DEFAULT_X_COEFF, help=f"Coefficient for gopher X axis adjustment (default: {DEFAULT_X_COEFF})")
    flag("gopher-y-coeff", type=float, default=DEFAULT_Y_COEFF, help=f"Coefficient for gopher Y axis adjustment (default: {DEFAULT_Y_COEFF})")
    flag("out", default=DEFAULT_OUTPUT, help=f"Path to output image (default: {DEFAULT_OUTPUT})")
    p.add_argument("-v", "--verbose", action="store_true", help="Log detection parameters and per-face geometry")
    return p


def config_from_args(args: argparse.Namespace) -> RunConfig:
    for name in REQUIRED_FLAGS:
        if not getattr(args, name):
            raise MissingRequiredFlag(f"Flag -{name} value is required")
    return RunConfig(
        classifier=Path(args.classifier),
        photo=Path(args.photo),
        gopher=Path(args.gopher),
        detection=DetectionParams(
            scale=args.photo_detect_scale,
            min_neighbours=args.photo_detect_min_neighbours,
            min_size=args.photo_detect_min_size,
            max_size=args.photo_detect_max_size,
        ),
        placement=PlacementParams(
            size_coeff=args.gopher_size_coeff,
            x_coeff=args.gopher_x_coeff,
            y_coeff=args.gopher_y_coeff,
        ),
        output=Path(args.out),
    )


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format=LOG_FORMAT, stream=sys.stderr)

    try:
        cfg = config_from_args(args)
    except MissingRequiredFlag as exc:
        parser.print_usage(sys.stderr)
        logger.error("%s", exc)
        return 1

    try:
        run(cfg)
    except GopherizeError as exc:
        logger.error("%s", exc)
        return 1
    return 0
