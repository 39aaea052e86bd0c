from pathlib import Path

import numpy as np
from PIL import Image, UnidentifiedImageError

from asciiframe.charsets import RAMP
from asciiframe.engine import CharacterGrid
from asciiframe.errors import DecodeError, InvalidScale, PathNotFound
from asciiframe.quantizer import quantize_array

_RAMP_ARRAY = np.array(list(RAMP))


def _check_scale(scale) -> int:
    if isinstance(scale, bool) or not isinstance(scale, int) or scale <= 0:
        raise InvalidScale(scale)
    return scale


def open_image(path: str | Path) -> Image.Image:
    """Open and fully decode an image file."""
    path = Path(path)
    if not path.exists():
        raise PathNotFound(path)
    try:
        with Image.open(path) as image:
            image.load()
            return image.convert("RGBA")
    except (UnidentifiedImageError, OSError) as exc:
        raise DecodeError(path, reason=str(exc)) from exc


def rasterize(frame: Image.Image, scale: int = 1) -> CharacterGrid:
    """Sample a frame every `scale` columns and `2 * scale` rows.

    Character cells are about twice as tall as they are wide, so the vertical
    stride is doubled to keep the output visually square.
    """
    scale = _check_scale(scale)
    if frame.mode != "RGBA":
        frame = frame.convert("RGBA")
    pixels = np.asarray(frame)
    if pixels.size == 0:
        return CharacterGrid(lines=())

    sampled = pixels[:: scale * 2, ::scale]
    chars = _RAMP_ARRAY[quantize_array(sampled)]
    return CharacterGrid(lines=tuple("".join(row) for row in chars))


def image_to_ascii(image: Image.Image | str | Path, scale: int = 1) -> str:
    scale = _check_scale(scale)
    if not isinstance(image, Image.Image):
        image = open_image(image)
    return rasterize(image, scale).text
