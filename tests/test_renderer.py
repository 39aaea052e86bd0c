from pathlib import Path

import numpy as np
import pytest
from PIL import Image

from asciiframe.converter import rasterize
from asciiframe.engine import CharacterGrid
from asciiframe.fonts import MonospaceFont
from asciiframe.renderer import MIN_FONT_SIZE, font_size_for, render
from tests.conftest import FONT_PATH, needs_font


def test_empty_grid_renders_black_frame(caplog):
    font = MonospaceFont(Path("unused.ttf"), b"")
    image = render(CharacterGrid(lines=()), 40, 30, font)
    assert image.size == (40, 30)
    assert np.asarray(image).sum() == 0
    assert "Empty character grid" in caplog.text


def test_zero_width_grid_renders_black_frame():
    font = MonospaceFont(Path("unused.ttf"), b"")
    image = render(CharacterGrid(lines=("", "")), 10, 10, font)
    assert np.asarray(image).sum() == 0


def test_font_size_limited_by_height():
    grid = CharacterGrid(lines=("@@", "@@"))
    # char_width 50, char_height 10 -> min(10, 100) * 0.9
    assert font_size_for(grid, 100, 20) == pytest.approx(9.0)


def test_font_size_limited_by_width():
    grid = CharacterGrid(lines=("@@@@",))
    # char_width 10, char_height 100 -> min(100, 20) * 0.9
    assert font_size_for(grid, 40, 100) == pytest.approx(18.0)


def test_output_matches_target_size(default_font):
    grid = CharacterGrid(lines=("@@", "@@"))
    image = render(grid, 64, 48, default_font)
    assert image.size == (64, 48)
    assert image.mode == "RGB"
    assert default_font.sizes == [pytest.approx(21.6)]


def test_tiny_target_uses_minimum_font_size(default_font):
    grid = CharacterGrid(lines=("@" * 10,))
    render(grid, 2, 2, default_font)
    assert default_font.sizes == [MIN_FONT_SIZE]


@needs_font
def test_glyphs_drawn_in_white():
    font = MonospaceFont.load(FONT_PATH)
    frame = Image.new("RGBA", (80, 80), (255, 255, 255, 255))
    grid = rasterize(frame, 8)
    image = render(grid, frame.width, frame.height, font)
    pixels = np.asarray(image)
    assert pixels.max() > 0
    # white text on black keeps channels equal
    assert (pixels[..., 0] == pixels[..., 1]).all()


@needs_font
def test_blank_grid_draws_nothing():
    font = MonospaceFont.load(FONT_PATH)
    grid = CharacterGrid(lines=("    ", "    "))
    image = render(grid, 40, 40, font)
    assert np.asarray(image).sum() == 0


@needs_font
def test_fractional_font_size_is_kept():
    font = MonospaceFont.load(FONT_PATH)
    face = font.sized(9.7)
    assert face.size == pytest.approx(9.7)
    assert font.sized(9.7) is face
