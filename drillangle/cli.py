"""Command-line interface for drillangle."""

import argparse
from pathlib import Path

from . import __version__
from .config import RunConfig
from .core.io import IMAGE_EXTENSIONS, VIDEO_EXTENSIONS, is_image_file, is_video_file

EPILOG = """\
Examples:
  drillangle tip.png
  drillangle tip.png -o tip_annotated.png
  drillangle recording.mp4 -o annotated.mp4 --epsilon-factor 0.03
  drillangle 0 --camera --max-frames 100

Pipeline:
  grayscale -> Gaussian blur -> adaptive threshold -> Canny -> contours
  -> largest contour -> Douglas-Peucker -> near-vertex filter (4 points)
  -> angle at the topmost vertex
"""


def parse_args(args=None) -> RunConfig:
    """Parse command-line arguments.

    Args:
        args: Arguments to parse (defaults to sys.argv).

    Returns:
        RunConfig with parsed options.
    """
    parser = argparse.ArgumentParser(
        prog="drillangle",
        description="Measure the opening angle of a drill tip or V-notch in images and videos.",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parser.add_argument(
        "input",
        type=str,
        help="Input image (.png, .jpg, .bmp), video (.mp4, .avi) or camera index with --camera",
    )

    parser.add_argument(
        "-o", "--output",
        type=str,
        default=None,
        help="Write annotated output to this file (image for image input, video otherwise)",
    )

    parser.add_argument(
        "--camera",
        action="store_true",
        help="Read from the camera with index INPUT",
    )

    parser.add_argument(
        "--max-frames",
        type=int,
        default=None,
        help="Stop after this many frames (default: all)",
    )

    parser.add_argument(
        "--blur-sigma",
        type=float,
        default=1.5,
        help="Standard deviation of the 5x5 Gaussian blur (default: 1.5)",
    )

    parser.add_argument(
        "--block-size",
        type=int,
        default=21,
        help="Neighbourhood size of the adaptive threshold; odd, > 1 (default: 21)",
    )

    parser.add_argument(
        "--offset",
        type=float,
        default=5.0,
        help="Constant subtracted from the neighbourhood mean (default: 5)",
    )

    parser.add_argument(
        "--canny-low",
        type=float,
        default=50.0,
        help="Lower Canny threshold; the upper one is 3x (default: 50)",
    )

    parser.add_argument(
        "--epsilon-factor",
        type=float,
        default=0.02,
        help="Polygon simplification tolerance as a fraction of the perimeter (default: 0.02)",
    )

    parser.add_argument(
        "--min-vertex-distance",
        type=float,
        default=20.0,
        help="Merge vertices of 4-point polygons closer than this many pixels (default: 20)",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log per-stage diagnostics",
    )

    parsed = parser.parse_args(args)

    if parsed.camera:
        if not parsed.input.isdigit():
            parser.error(f"Camera index must be a non-negative integer: {parsed.input}")
    elif not Path(parsed.input).exists():
        parser.error(f"Input file not found: {parsed.input}")
    if parsed.max_frames is not None and parsed.max_frames < 1:
        parser.error("--max-frames must be at least 1")
    if parsed.block_size < 3 or parsed.block_size % 2 == 0:
        parser.error("--block-size must be an odd number greater than 1")
    if parsed.blur_sigma <= 0:
        parser.error("--blur-sigma must be positive")
    if not 0.0 < parsed.epsilon_factor < 1.0:
        parser.error("--epsilon-factor must be between 0.0 and 1.0")
    if parsed.min_vertex_distance < 0:
        parser.error("--min-vertex-distance must not be negative")
    if parsed.canny_low < 0:
        parser.error("--canny-low must not be negative")
    if not -255.0 < parsed.offset < 255.0:
        parser.error("--offset must be between -255 and 255")
    if parsed.output:
        if parsed.camera or is_video_file(parsed.input):
            if not is_video_file(parsed.output):
                parser.error(
                    f"Output for video or camera input must be one of {sorted(VIDEO_EXTENSIONS)}: "
                    f"{parsed.output}"
                )
        elif not is_image_file(parsed.output):
            parser.error(
                f"Output for image input must be one of {sorted(IMAGE_EXTENSIONS)}: {parsed.output}"
            )

    return RunConfig.from_args(
        input_path=parsed.input,
        output_path=parsed.output,
        camera=parsed.camera,
        max_frames=parsed.max_frames,
        verbose=parsed.verbose,
        blur_sigma=parsed.blur_sigma,
        block_size=parsed.block_size,
        offset=parsed.offset,
        canny_low=parsed.canny_low,
        epsilon_factor=parsed.epsilon_factor,
        min_vertex_distance=parsed.min_vertex_distance,
    )
