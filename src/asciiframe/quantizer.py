import numpy as np

from asciiframe.charsets import LEVEL_WIDTH, RAMP


def intensity(r: int, g: int, b: int, a: int = 255) -> int:
    """Brightness of one RGBA pixel, 0-255.

    Each channel is divided by three before summing, so (2, 2, 2) gives 0
    rather than 2. Fully transparent pixels are 0.
    """
    if a == 0:
        return 0
    return r // 3 + g // 3 + b // 3


def level(value: int) -> int:
    """Ramp index for an intensity."""
    return value // LEVEL_WIDTH


def quantize(pixel: tuple[int, ...]) -> str:
    """Map an (r, g, b, a) pixel to its ramp character."""
    r, g, b, a = pixel
    return RAMP[level(intensity(r, g, b, a))]


def quantize_array(rgba: np.ndarray) -> np.ndarray:
    """Ramp indices for an (h, w, 4) uint8 array. Matches quantize() exactly."""
    channels = rgba.astype(np.uint16)
    values = channels[..., 0] // 3 + channels[..., 1] // 3 + channels[..., 2] // 3
    values[channels[..., 3] == 0] = 0
    return (values // LEVEL_WIDTH).astype(np.uint8)
