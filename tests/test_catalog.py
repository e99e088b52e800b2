import logging

import pytest

from star_pattern_renderer import catalog
from star_pattern_renderer.catalog import (INVALID_INPUT_MESSAGE, PRESETS,
                                           get_preset, preset_names,
                                           print_name, render_preset,
                                           run_preset)
from star_pattern_renderer.errors import InvalidInput
from star_pattern_renderer.renderer import RenderMode
from star_pattern_renderer.shapes import hourglass

from .helpers import marks


def test_catalog_has_one_hundred_presets_in_order():
    names = preset_names()
    assert len(names) == 100
    assert len(set(names)) == 100
    assert names[0] == 'triangle'
    assert names[-1] == 'kite_wide'


def test_catalog_is_read_only():
    with pytest.raises(TypeError):
        PRESETS['triangle'] = None


def test_unknown_preset():
    with pytest.raises(KeyError):
        get_preset('dodecahedron')


@pytest.mark.parametrize("name", preset_names())
def test_every_preset_renders_both_modes(name):
    solid = render_preset(name, 'solid')
    hollow = render_preset(name, 'hollow')
    assert solid and any('*' in line for line in solid)
    for lines in (solid, hollow):
        assert all(len(line) % 2 == 0 for line in lines)
    # hollow never marks a cell the solid form leaves blank
    assert marks(hollow) <= marks(solid)


def test_run_preset_emits_lines():
    out = []
    assert run_preset('triangle', 'solid', 3, emit=out.append) is True
    assert out == ["* ", "* * ", "* * * "]


@pytest.mark.parametrize("bad", ["Solid", "square", "HOLLOW"])
def test_invalid_mode_emits_single_diagnostic(bad, caplog):
    out = []
    with caplog.at_level(logging.WARNING, logger="star_pattern_renderer"):
        assert run_preset('diamond', bad, 5, emit=out.append) is False
    assert out == [INVALID_INPUT_MESSAGE]
    assert any(bad in record.getMessage() for record in caplog.records)


def test_render_preset_raises_for_bad_mode():
    with pytest.raises(InvalidInput):
        render_preset('circle', 'square')


def test_defaults_and_partial_params():
    assert len(render_preset('rectangle')) == 5
    assert len(render_preset('rectangle')[0]) == 20
    lines = render_preset('rectangle', 'solid', 3)
    assert len(lines) == 3 and len(lines[0]) == 20
    lines = render_preset('rectangle', 'solid', None, 4)
    assert len(lines) == 5 and len(lines[0]) == 8


def test_extra_params_are_ignored():
    assert render_preset('square', 'solid', 3, 99) == render_preset('square', 'solid', 3)


def test_star_outline_is_always_hollow():
    assert get_preset('star_outline').default_mode is RenderMode.HOLLOW
    assert render_preset('star_outline', 'solid') == render_preset('star_outline')


def test_composite_presets():
    assert render_preset('double_hourglass', 'solid', 4) == hourglass('solid', 4) * 2
    assert len(render_preset('diamond_tall', 'solid', 9)) == 2 * 11 - 1
    assert len(render_preset('kite_tall', 'solid', 11)) == 2 * 15 - 1
    assert render_preset('torch', 'hollow', 7) == render_preset('up_arrow', 'hollow', 7)
    assert render_preset('ripple', 'solid', 5) == render_preset('wave', 'solid', 5, 15)


def test_aliases_share_rendering():
    assert render_preset('pyramid', 'hollow', 6) == render_preset('isosceles', 'hollow', 6)
    assert render_preset('net') == render_preset('weave') == render_preset('mesh')
    assert render_preset('sun') == render_preset('star_burst')


def test_print_name_defaults():
    out = []
    print_name(emit=out.append)
    assert len(out) == 9
    assert all(len(line) == 5 * 9 + 4 * 2 for line in out)


def test_print_name_uses_given_layout():
    out = []
    print_name("AT", 5, 1, 1, emit=out.append)
    assert out == catalog.render_name("AT", 5, 1, 1)
