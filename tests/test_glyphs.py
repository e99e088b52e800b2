import string

import pytest

from star_pattern_renderer.canvas import Canvas
from star_pattern_renderer.glyphs import GLYPHS, render_letter
from star_pattern_renderer.rasterizer import draw_box, draw_dot, draw_line


def _cells(rows):
    return {(x, y) for y, row in enumerate(rows) for x, ch in enumerate(row) if ch == '*'}


def test_space_is_blank_block():
    assert render_letter(' ', 7, 1) == [' ' * 7] * 7


@pytest.mark.parametrize("letter", string.ascii_uppercase)
def test_every_letter_is_square_and_inked(letter):
    rows = render_letter(letter, 9, 1)
    assert len(rows) == 9
    assert all(len(row) == 9 for row in rows)
    assert any('*' in row for row in rows)


def test_all_letters_defined():
    assert sorted(GLYPHS) == list(string.ascii_uppercase)


def test_glyph_table_is_read_only():
    with pytest.raises(TypeError):
        GLYPHS['A'] = None


def test_lowercase_is_normalised():
    assert render_letter('k', 7) == render_letter('K', 7)


def test_size_is_clamped_to_five():
    rows = render_letter('A', 3)
    assert len(rows) == 5 and all(len(row) == 5 for row in rows)


def test_letter_a():
    assert render_letter('A', 5) == [
        "  *  ",
        "  *  ",
        " *** ",
        " * * ",
        "*   *",
    ]


def test_letter_t_and_h():
    assert render_letter('T', 5) == ["*****"] + ["  *  "] * 4
    assert render_letter('H', 5) == ["*   *", "*   *", "*****", "*   *", "*   *"]


def test_q_is_o_plus_tail():
    o = _cells(render_letter('O', 9))
    q = _cells(render_letter('Q', 9))
    assert o < q
    assert (8, 8) in q


def test_thick_strokes():
    rows = render_letter('I', 5, 3)
    assert rows[0] == rows[1] == "*****"
    assert rows[2] == " *** "


def test_unknown_character_uses_placeholder():
    rows = render_letter('7', 5, 1)
    assert rows == ["*****", "*   *", "* 7 *", "*   *", "*****"]


def test_bresenham_endpoints_and_continuity():
    g = Canvas(9)
    draw_line(g, 0, 8, 6, 1)
    cells = _cells(g.rows())
    assert (0, 8) in cells and (6, 1) in cells
    # 8-connected: every row between the ends is hit
    assert {y for _, y in cells} == set(range(1, 9))


def test_dot_is_clipped_to_canvas():
    g = Canvas(5)
    draw_dot(g, 0, 0, 3)
    assert _cells(g.rows()) == {(0, 0), (1, 0), (0, 1), (1, 1)}


def test_box_outline():
    g = Canvas(5)
    draw_box(g, 1, 1, 3, 3)
    assert g.rows() == ["     ", " *** ", " * * ", " *** ", "     "]


def test_set_pixel_clips_out_of_range_writes():
    g = Canvas(3)
    g.set_pixel(-1, 0)
    g.set_pixel(3, 3)
    g.set_pixel(2, 1, '#')
    assert g.get_pixel(2, 1) == '#'
    assert g.rows() == ["   ", "  #", "   "]
