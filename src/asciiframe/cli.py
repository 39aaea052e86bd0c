import argparse
import logging
import sys
from pathlib import Path

from asciiframe.config import JobConfig, JobKind
from asciiframe.errors import AsciiFrameError, InvalidArgument
from asciiframe.job import run


class _Parser(argparse.ArgumentParser):
    def error(self, message):
        raise InvalidArgument(message)


def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="[%(levelname)s] %(name)s: %(message)s",
    )


def parse_scale(value: str | None) -> int:
    """Parse the scale argument, falling back to 1 when it is not an integer.

    Negative values also become 1. Zero is kept so the job can reject it.
    """
    if value is None:
        return 1
    try:
        scale = int(value)
    except ValueError:
        return 1
    return scale if scale >= 0 else 1


def build_parser() -> argparse.ArgumentParser:
    parser = _Parser(prog="asciiframe", description="Render an image or every frame of a video as ASCII art")
    parser.add_argument("path", type=Path, help="Path to the input image or video")
    parser.add_argument("kind", choices=[kind.value for kind in JobKind], help="Input type")
    parser.add_argument("scale", nargs="?", default=None, help="Sampling stride in pixels (default: 1)")
    parser.add_argument(
        "output",
        nargs="?",
        type=Path,
        default=None,
        help="Output file (default: output.txt for images, output.mp4 for videos; '-' prints an image to stdout)",
    )
    parser.add_argument("--font", type=Path, default=None, help="Monospace font file used to draw video frames")
    parser.add_argument("--workers", type=int, default=None, help="Frame worker threads (default: CPU count)")
    parser.add_argument("-v", "--verbose", action="store_true", default=False, help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except InvalidArgument as exc:
        parser.print_usage()
        print(f"{parser.prog}: {exc}")
        return 0

    if not args.path.exists():
        parser.print_usage()
        print(f"File not found: {args.path}")
        return 0

    configure_logging(args.verbose)
    config = JobConfig(
        source=args.path,
        kind=JobKind(args.kind),
        scale=parse_scale(args.scale),
        output=args.output,
        font_path=args.font,
        workers=args.workers,
    )
    try:
        run(config)
    except AsciiFrameError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
