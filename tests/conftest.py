import shutil
import subprocess

import pytest
from PIL import Image, ImageFont

_FONT_CANDIDATES = [
    "/usr/share/fonts/truetype/dejavu/DejaVuSansMono.ttf",
    "/usr/share/fonts/truetype/liberation/LiberationMono-Regular.ttf",
    "/usr/share/fonts/TTF/DejaVuSansMono.ttf",
    "/usr/share/fonts/dejavu-sans-mono-fonts/DejaVuSansMono.ttf",
]


def _find_monospace_font():
    """Find a monospace font on the system."""
    for path in _FONT_CANDIDATES:
        if shutil.os.path.exists(path):
            return path
    result = shutil.which("fc-match")
    if result:
        out = subprocess.run(["fc-match", "-f", "%{file}", "monospace"], capture_output=True, text=True)
        if out.returncode == 0 and out.stdout.strip():
            return out.stdout.strip()
    return None


FONT_PATH = _find_monospace_font()
needs_font = pytest.mark.skipif(FONT_PATH is None, reason="No monospace font found on system")


class DefaultFont:
    """Stand-in for MonospaceFont backed by Pillow's built-in font."""

    def __init__(self):
        self.sizes = []

    def sized(self, size):
        self.sizes.append(size)
        return ImageFont.load_default()


@pytest.fixture
def default_font():
    return DefaultFont()


def write_frames(directory, count, size=(8, 8), colour=(255, 255, 255, 255)):
    """Write `count` solid frames named 0001.png, 0002.png, ..."""
    directory.mkdir(parents=True, exist_ok=True)
    paths = []
    for i in range(1, count + 1):
        path = directory / f"{i:04d}.png"
        Image.new("RGBA", size, colour).save(path)
        paths.append(path)
    return paths
