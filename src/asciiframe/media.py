"""Thin wrappers around the ffprobe and ffmpeg command-line tools."""

from __future__ import annotations

import logging
import shutil
import subprocess
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from asciiframe.errors import EncodingError, ExtractionError, MediaToolError, ProbeError
from asciiframe.pipeline import FRAME_PATTERN, FrameSet, discover_frames

logger = logging.getLogger(__name__)

FFMPEG = "ffmpeg"
FFPROBE = "ffprobe"

EXTRACT_DIR = "temp_frames"
RENDER_DIR = "ascii_frames"


def _run(cmd: list[str], error: type[MediaToolError]) -> subprocess.CompletedProcess:
    logger.debug("Running %s", " ".join(cmd))
    try:
        result = subprocess.run(cmd, capture_output=True, text=True)
    except FileNotFoundError as exc:
        raise error(cmd[0], None) from exc
    if result.returncode != 0:
        raise error(cmd[0], result.returncode, result.stderr)
    return result


def probe_framerate(path: Path) -> str:
    """Return the first video stream's frame rate as ffprobe reports it (e.g. ``30000/1001``)."""
    cmd = [
        FFPROBE,
        "-v", "error",
        "-select_streams", "v:0",
        "-show_entries", "stream=r_frame_rate",
        "-of", "csv=p=0",
        str(path),
    ]
    result = _run(cmd, ProbeError)
    framerate = result.stdout.strip().split(",")[0].strip()
    if not framerate:
        raise ProbeError(FFPROBE, result.returncode, result.stderr, reason="returned no frame rate")
    logger.info("Probed frame rate %s for %s", framerate, path)
    return framerate


def extract_frames(path: Path, output_dir: Path, framerate: str) -> FrameSet:
    """Split a video into 0001.png, 0002.png, ... at the given frame rate."""
    cmd = [
        FFMPEG, "-y",
        "-i", str(path),
        "-vf", f"fps={framerate}",
        str(output_dir / FRAME_PATTERN),
    ]
    _run(cmd, ExtractionError)
    frames = discover_frames(output_dir)
    if not frames.frames:
        raise ExtractionError(FFMPEG, 0, reason="produced no frames")
    logger.info("Extracted %s frames from %s", len(frames), path)
    return frames


def encode_frames(frame_dir: Path, framerate: str, output_path: Path) -> None:
    """Join sequentially numbered frames back into an H.264 video."""
    cmd = [
        FFMPEG, "-y",
        "-framerate", framerate,
        "-i", str(frame_dir / FRAME_PATTERN),
        "-c:v", "libx264",
        "-preset", "ultrafast",
        "-pix_fmt", "yuv420p",
        str(output_path),
    ]
    _run(cmd, EncodingError)
    logger.info("Wrote %s", output_path)


def _remove_directory(path: Path) -> None:
    try:
        shutil.rmtree(path)
    except FileNotFoundError:
        pass
    except OSError as exc:
        logger.warning("Could not remove working directory %s: %s", path, exc)


def _clear_stale(path: Path) -> None:
    if not path.exists():
        return
    logger.warning("Removing existing working directory %s", path)
    try:
        shutil.rmtree(path)
    except OSError as exc:
        raise ExtractionError(path.name, None, reason=f"could not be cleared ({exc})") from exc


@contextmanager
def working_directories(base: Path) -> Iterator[tuple[Path, Path]]:
    """Create fresh extraction and render directories, removing both afterwards.

    Leftover directories from an earlier run are deleted first; if that fails
    the job stops rather than mixing old frames into the new ones.

    The names are fixed, so two jobs sharing `base` will collide.
    """
    extract_dir = base / EXTRACT_DIR
    render_dir = base / RENDER_DIR
    for stale in (extract_dir, render_dir):
        _clear_stale(stale)
    extract_dir.mkdir(parents=True, exist_ok=True)
    render_dir.mkdir(parents=True, exist_ok=True)
    try:
        yield extract_dir, render_dir
    finally:
        _remove_directory(extract_dir)
        _remove_directory(render_dir)
