import pytest

from star_pattern_renderer.errors import InvalidInput
from star_pattern_renderer.renderer import (MARK, RenderMode, centered_row,
                                            clamp_odd, clamp_size, is_edge,
                                            render_grid)
from star_pattern_renderer.shapes import Circle

from .helpers import marks


def _all(r, c, h, w):
    return True


@pytest.mark.parametrize("height,width", [(1, 1), (3, 4), (5, 2), (7, 7), (2, 9)])
def test_grid_dimensions(height, width):
    for mode in ("solid", "hollow"):
        lines = render_grid(height, width, mode, _all)
        assert len(lines) == height
        assert all(len(line) == 2 * width for line in lines)


def test_width_defaults_to_height():
    lines = render_grid(4, None, "solid", _all)
    assert lines == [MARK * 4] * 4


def test_sizes_are_floored_and_clamped():
    assert render_grid(0, 2.7, "solid", _all) == ["* * "]
    assert render_grid(-3, -1, "solid", _all) == ["* "]


def test_solid_ignores_border_predicate():
    fill = Circle(3).fill
    never = lambda r, c, h, w: False
    assert (render_grid(7, 7, "solid", fill, never) ==
            render_grid(7, 7, "solid", fill, _all) ==
            render_grid(7, 7, "solid", fill))


def test_hollow_marks_are_subset_of_fill():
    circle = Circle(4)
    hollow = marks(render_grid(9, 9, "hollow", circle.fill, circle.border))
    solid = marks(render_grid(9, 9, "solid", circle.fill))
    assert hollow
    assert hollow < solid


def test_default_border_is_bounding_box():
    lines = render_grid(3, 3, "hollow", _all)
    assert lines == ["* * * ", "*   * ", "* * * "]
    assert is_edge(0, 1, 3, 3) and not is_edge(1, 1, 3, 3)


@pytest.mark.parametrize("bad", ["Solid", "square", "", None, 1])
def test_invalid_mode_raises(bad):
    with pytest.raises(InvalidInput):
        render_grid(3, 3, bad, _all)


def test_mode_parse_accepts_enum_and_exact_strings():
    assert RenderMode.parse("solid") is RenderMode.SOLID
    assert RenderMode.parse("hollow") is RenderMode.HOLLOW
    assert RenderMode.parse(RenderMode.HOLLOW) is RenderMode.HOLLOW


def test_clamp_helpers():
    assert clamp_size(None) == 1
    assert clamp_size(4.9) == 4
    assert clamp_size(2, 3) == 3
    assert clamp_odd(4) == 5
    assert clamp_odd(1) == 3
    assert clamp_odd(7, 5) == 7


def test_centered_row_solid():
    assert centered_row(2, 3, "solid") == "    * * * "


def test_centered_row_hollow_interior():
    assert centered_row(1, 4, "hollow") == "  " + "* " + "  " * 2 + "* "


@pytest.mark.parametrize("count", [0, 1, 2])
def test_centered_row_small_rows_always_solid(count):
    for allow in (True, False):
        assert centered_row(0, count, "hollow", allow, False) == MARK * count


def test_centered_row_boundary_and_disallowed_are_solid():
    assert centered_row(0, 5, "hollow", True, True) == MARK * 5
    assert centered_row(0, 5, "hollow", False, False) == MARK * 5


def test_centered_row_rejects_bad_mode():
    with pytest.raises(InvalidInput):
        centered_row(0, 3, "HOLLOW")
