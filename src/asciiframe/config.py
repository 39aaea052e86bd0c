from __future__ import annotations

import enum
from dataclasses import dataclass, field
from pathlib import Path


class JobKind(str, enum.Enum):
    IMAGE = "image"
    VIDEO = "video"


DEFAULT_OUTPUTS = {
    JobKind.IMAGE: Path("output.txt"),
    JobKind.VIDEO: Path("output.mp4"),
}

# Writes an image job's grid to stdout instead of a file
STDOUT = "-"


@dataclass(frozen=True)
class JobConfig:
    """Settings for one conversion, fixed for the job's lifetime."""

    source: Path
    kind: JobKind
    scale: int = 1
    output: Path | None = None
    font_path: Path | None = None
    workers: int | None = None
    work_dir: Path = field(default_factory=Path.cwd)

    @property
    def output_path(self) -> Path:
        return self.output if self.output is not None else DEFAULT_OUTPUTS[self.kind]

    @property
    def to_stdout(self) -> bool:
        return self.kind is JobKind.IMAGE and self.output is not None and str(self.output) == STDOUT
