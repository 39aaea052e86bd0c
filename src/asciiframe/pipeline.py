"""Parallel frame-to-ASCII-bitmap pipeline."""

from __future__ import annotations

import logging
import os
import re
from concurrent.futures import Executor, ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from pathlib import Path

from tqdm import tqdm

from asciiframe.converter import open_image, rasterize
from asciiframe.fonts import MonospaceFont
from asciiframe.renderer import render

logger = logging.getLogger(__name__)

DEFAULT_WORKERS = 8
FRAME_EXTENSION = ".png"
FRAME_PATTERN = "%04d" + FRAME_EXTENSION

_SEQUENTIAL_NAME = re.compile(r"^\d{4,}$")


@dataclass(frozen=True)
class FrameSet:
    """Extracted frame files in the order they will be numbered."""

    frames: tuple[Path, ...]

    def __len__(self) -> int:
        return len(self.frames)

    def __iter__(self):
        return iter(self.frames)


@dataclass
class FrameFailure:
    index: int
    source: Path
    error: BaseException


@dataclass
class BatchReport:
    total: int
    outputs: list[Path] = field(default_factory=list)
    failures: list[FrameFailure] = field(default_factory=list)

    @property
    def succeeded(self) -> int:
        return len(self.outputs)

    @property
    def ok(self) -> bool:
        return not self.failures

    def summary(self) -> str:
        return f"{self.succeeded}/{self.total} frames rendered"


def output_name(index: int) -> str:
    """File name for the frame at 1-based position `index`."""
    return FRAME_PATTERN % index


def discover_frames(directory: Path, extension: str = FRAME_EXTENSION) -> FrameSet:
    """Collect extracted frames, checking they follow the 0001, 0002, ... naming.

    Frames are ordered by name. Names that are not a gap-free sequence
    starting at 1 are reported, since output numbering follows this order
    whether or not it matches the video's timeline.
    """
    files = sorted(p for p in directory.iterdir() if p.is_file() and p.suffix.lower() == extension)
    for position, path in enumerate(files, start=1):
        if not _SEQUENTIAL_NAME.match(path.stem) or int(path.stem) != position:
            logger.warning(
                "Frame %s does not follow sequential naming (expected %s); order may not match the video",
                path.name,
                output_name(position),
            )
            break
    logger.debug("Discovered %s frames in %s", len(files), directory)
    return FrameSet(frames=tuple(files))


def make_pool(workers: int | None = None) -> ThreadPoolExecutor:
    """Worker pool for one job, one thread per logical CPU by default."""
    if workers is None:
        workers = os.cpu_count() or DEFAULT_WORKERS
    logger.debug("Starting frame pool with %s workers", workers)
    return ThreadPoolExecutor(max_workers=workers, thread_name_prefix="asciiframe")


def process_frame(source: Path, destination: Path, scale: int, font: MonospaceFont) -> Path:
    frame = open_image(source)
    grid = rasterize(frame, scale)
    image = render(grid, frame.width, frame.height, font)
    image.save(destination)
    return destination


def process_frames(
    frames: FrameSet,
    output_dir: Path,
    scale: int,
    font: MonospaceFont,
    pool: Executor,
    progress: bool = True,
) -> BatchReport:
    """Render every frame on `pool`, one output file per input frame.

    A frame that fails is logged and recorded in the report; the rest of the
    batch keeps running and its index is left unused.
    """
    output_dir.mkdir(parents=True, exist_ok=True)
    report = BatchReport(total=len(frames))

    futures = {}
    for index, source in enumerate(frames, start=1):
        destination = output_dir / output_name(index)
        futures[pool.submit(process_frame, source, destination, scale, font)] = (index, source)

    with tqdm(total=report.total, desc="Rendering", unit="frame", disable=not progress) as bar:
        for future in as_completed(futures):
            index, source = futures[future]
            try:
                report.outputs.append(future.result())
            except Exception as exc:
                logger.warning("Frame %s (%s) failed: %s", index, source.name, exc)
                report.failures.append(FrameFailure(index=index, source=source, error=exc))
            bar.update(1)

    report.outputs.sort()
    report.failures.sort(key=lambda failure: failure.index)
    logger.info("%s", report.summary())
    return report
