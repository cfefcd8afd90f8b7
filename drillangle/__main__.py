"""Entry point for python -m drillangle."""

import logging
import sys

from .cli import parse_args
from .core.frame import FrameFormatError
from .runners.headless import run_headless


def main(args=None):
    """Main entry point."""
    config = parse_args(args)
    logging.basicConfig(
        level=logging.DEBUG if config.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )
    try:
        run_headless(config)
    except (IOError, FrameFormatError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
