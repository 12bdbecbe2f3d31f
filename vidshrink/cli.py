# File: vidshrink/cli.py

import sys
import logging
import argparse
from importlib.metadata import version, PackageNotFoundError
from typing import List, Optional

from vidshrink.core.config.settings import settings
from vidshrink.core.common.errors import ShrinkError
from vidshrink.features.encoding.domain.models import EncodingRequest
from vidshrink.features.encoding.service.api import plan_shrink, encode_planned

logger = logging.getLogger(__name__)


def _package_version() -> str:
    try:
        return version("vidshrink")
    except PackageNotFoundError:
        return "unknown"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="vidshrink",
        description="Reduce MP4 video quality to fit within a target size (50MB or 100MB) using FFMPEG"
    )
    parser.add_argument("input", help="Input video file (MP4)")
    parser.add_argument("output", help="Output video file")
    # Validated by TargetSize, not argparse choices, so the error stays in our taxonomy
    parser.add_argument(
        "-s", "--size",
        type=int,
        default=settings.DEFAULT_SIZE_MB,
        help="Target size in MB (must be either 50 or 100)"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every executed command")
    parser.add_argument("--version", action="version", version=f"%(prog)s {_package_version()}")
    return parser


def configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else settings.LOG_LEVEL
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    try:
        request = EncodingRequest.from_user_input(args.input, args.output, args.size)
        report = plan_shrink(request)

        # Printed before ffmpeg starts
        print(f"Video duration: {report.duration_seconds:.2f} seconds")
        print(f"Target size: {report.target_mb} MB")
        print(f"Using video bitrate: {report.video_bitrate_arg} ({report.video_bitrate_bps} bps)", flush=True)

        encode_planned(request, report)
    except (ShrinkError, ValueError) as e:
        logger.debug("Shrink failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"Saved: {report.output_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
