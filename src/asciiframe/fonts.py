"""Monospace font resolution and the font resource shared by render workers."""

from __future__ import annotations

import io
import logging
import shutil
import subprocess
import sys
import threading
from pathlib import Path

from PIL import ImageFont

from asciiframe.errors import FontLoadError

logger = logging.getLogger(__name__)

FONT_PATHS = {
    "linux": Path("/usr/share/fonts/truetype/dejavu/DejaVuSansMono.ttf"),
    "darwin": Path("/System/Library/Fonts/Menlo.ttc"),
    "win32": Path("C:/Windows/Fonts/consola.ttf"),
}

# Size used to check that a font file is usable at load time
_PROBE_SIZE = 12


def platform_family(platform: str = sys.platform) -> str:
    if platform.startswith("linux"):
        return "linux"
    if platform.startswith(("win", "cygwin")):
        return "win32"
    return platform


def _find_fontconfig_monospace() -> Path | None:
    """Ask fontconfig for the system's default monospace font."""
    if shutil.which("fc-match") is None:
        return None
    result = subprocess.run(["fc-match", "-f", "%{file}", "monospace"], capture_output=True, text=True)
    if result.returncode == 0 and result.stdout.strip():
        return Path(result.stdout.strip())
    return None


def resolve_font_path(override: str | Path | None = None, platform: str = sys.platform) -> Path:
    """Pick the font file for this job.

    An explicit override always wins and must exist. Otherwise the platform's
    entry in FONT_PATHS is used, falling back to fontconfig where available.
    """
    if override is not None:
        path = Path(override)
        if not path.is_file():
            raise FontLoadError(f"Font file not found: {path}")
        return path

    family = platform_family(platform)
    candidate = FONT_PATHS.get(family)
    if candidate is not None and candidate.is_file():
        return candidate

    fallback = _find_fontconfig_monospace()
    if fallback is not None and fallback.is_file():
        logger.debug("Using fontconfig monospace font %s", fallback)
        return fallback

    raise FontLoadError(f"No monospace font found for platform {family!r} (looked for {candidate})")


class MonospaceFont:
    """A font file read once and shared read-only between worker threads.

    FreeType faces are not safe to share across threads, so each thread gets
    its own sized face built from the same immutable bytes.
    """

    def __init__(self, path: Path, data: bytes):
        self.path = path
        self._data = data
        self._local = threading.local()

    @classmethod
    def load(cls, path: str | Path) -> "MonospaceFont":
        path = Path(path)
        try:
            data = path.read_bytes()
            ImageFont.truetype(io.BytesIO(data), _PROBE_SIZE)
        except OSError as exc:
            raise FontLoadError(f"Could not load font {path}: {exc}") from exc
        logger.info("Loaded font %s", path)
        return cls(path, data)

    def sized(self, size: float) -> ImageFont.FreeTypeFont:
        cache: dict[float, ImageFont.FreeTypeFont] | None = getattr(self._local, "cache", None)
        if cache is None:
            cache = self._local.cache = {}
        font = cache.get(size)
        if font is None:
            font = cache[size] = ImageFont.truetype(io.BytesIO(self._data), size)
        return font


def load_font(override: str | Path | None = None) -> MonospaceFont:
    return MonospaceFont.load(resolve_font_path(override))
