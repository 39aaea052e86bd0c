import logging

from PIL import Image, ImageDraw

from asciiframe.engine import CharacterGrid
from asciiframe.fonts import MonospaceFont

logger = logging.getLogger(__name__)

BACKGROUND = (0, 0, 0)
FOREGROUND = (255, 255, 255)

# Glyphs are roughly half as wide as they are tall
GLYPH_ASPECT = 2.0
# Leaves a margin so neighbouring glyphs do not touch
FONT_FILL = 0.9
# Smallest size handed to FreeType
MIN_FONT_SIZE = 1.0


def font_size_for(grid: CharacterGrid, target_width: int, target_height: int) -> float:
    """Largest font size that keeps a glyph inside one grid cell."""
    char_width = target_width / grid.line_length
    char_height = target_height / grid.line_count
    return min(char_height, char_width * GLYPH_ASPECT) * FONT_FILL


def render(grid: CharacterGrid, target_width: int, target_height: int, font: MonospaceFont) -> Image.Image:
    """Draw a character grid as white text on a black bitmap of the given size."""
    image = Image.new("RGB", (target_width, target_height), BACKGROUND)
    if grid.is_empty:
        logger.warning("Empty character grid, rendering blank %sx%s frame", target_width, target_height)
        return image

    char_height = target_height / grid.line_count
    size = max(MIN_FONT_SIZE, font_size_for(grid, target_width, target_height))
    face = font.sized(size)

    draw = ImageDraw.Draw(image)
    for i, line in enumerate(grid.lines):
        draw.text((0, i * char_height), line, fill=FOREGROUND, font=face)
    return image
