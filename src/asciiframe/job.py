"""Image and video job drivers."""

from __future__ import annotations

import logging

from asciiframe import media
from asciiframe.config import JobConfig, JobKind
from asciiframe.converter import image_to_ascii
from asciiframe.errors import InvalidArgument, InvalidScale, PathNotFound
from asciiframe.fonts import load_font
from asciiframe.pipeline import BatchReport, make_pool, process_frames

logger = logging.getLogger(__name__)


def _validate(config: JobConfig) -> None:
    if not config.source.exists():
        raise PathNotFound(config.source)
    if isinstance(config.scale, bool) or not isinstance(config.scale, int) or config.scale <= 0:
        raise InvalidScale(config.scale)
    if config.workers is not None and config.workers < 1:
        raise InvalidArgument(f"Worker count must be at least 1, got {config.workers}")


def run_image(config: JobConfig) -> str:
    """Convert a still image and write its grid as UTF-8 text."""
    _validate(config)
    text = image_to_ascii(config.source, config.scale)
    if config.to_stdout:
        print(text, end="")
    else:
        config.output_path.write_text(text, encoding="utf-8")
        logger.info("Wrote %s", config.output_path)
    return text


def run_video(config: JobConfig, progress: bool = True) -> BatchReport:
    """Convert every frame of a video and re-encode the result.

    The font is loaded and frames extracted before any rendering starts; a
    failure in either ends the job without scheduling frame work.
    """
    _validate(config)
    font = load_font(config.font_path)
    framerate = media.probe_framerate(config.source)

    with media.working_directories(config.work_dir) as (extract_dir, render_dir):
        frames = media.extract_frames(config.source, extract_dir, framerate)
        with make_pool(config.workers) as pool:
            report = process_frames(frames, render_dir, config.scale, font, pool, progress=progress)
        if not report.ok:
            first_gap = report.failures[0].index
            logger.warning(
                "%s frames failed; the encoded video stops before frame %s",
                len(report.failures),
                first_gap,
            )
        media.encode_frames(render_dir, framerate, config.output_path)
    return report


def run(config: JobConfig):
    if config.kind is JobKind.IMAGE:
        return run_image(config)
    return run_video(config)
