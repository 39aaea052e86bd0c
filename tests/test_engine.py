from asciiframe.engine import CharacterGrid


def test_empty_grid():
    grid = CharacterGrid(lines=())
    assert grid.is_empty
    assert grid.line_count == 0
    assert grid.line_length == 0
    assert grid.text == ""


def test_zero_width_lines_count_as_empty():
    assert CharacterGrid(lines=("", "")).is_empty


def test_line_length_uses_longest_line():
    grid = CharacterGrid(lines=("@@@", "@@"))
    assert grid.line_length == 3
    assert grid.line_count == 2
    assert not grid.is_empty
