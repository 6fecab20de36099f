"""Test ANSI emission and color maps."""

import pytest

from colorseq.config import Scheme
from colorseq.draw.colors import Colors
from colorseq.draw.colormap import get_color_map


def test_set_color_codes():
    assert Colors.set_color(True, "red") == "\x1b[1;31m"
    assert Colors.set_color(False, "black") == "\x1b[30m"
    assert Colors.set_color(True, "White") == "\x1b[1;37m"
    assert Colors.reset_color() == "\x1b[0m"


def test_unknown_color_name():
    with pytest.raises(ValueError):
        Colors.set_color(True, "orange")


def test_format_char():
    clr = Colors(bold = True)
    assert clr.format_char("A", "green") == "\x1b[1;32mA"
    assert clr.format_char("X", None) == "X"


def test_scrub_codes():
    line = "\x1b[0m\x1b[1;32mA\x1b[1;31mC\x1b[0m xyz"
    assert Colors.scrub_codes(line) == "AC xyz"
    assert Colors.visible_len(line) == 6


def test_default_map():
    cmap = get_color_map(Scheme.DEFAULT)
    assert cmap == {
        'A': 'green', 'C': 'red', 'G': 'blue', 'T': 'yellow',
        'IUB': 'red', 'Non-IUB': 'cyan', 'BackGrd': 'white',
    }


def test_abi_and_gc_maps():
    abi = get_color_map(Scheme.ABI)
    assert [abi[b] for b in "ACGT"] == ['red', 'blue', 'green', 'black']
    gc = get_color_map(Scheme.GC)
    assert [gc[b] for b in "ACGT"] == ['cyan', 'red', 'magenta', 'blue']


def test_window_map():
    cmap = get_color_map(Scheme.WINDOW)
    assert cmap['High'] == 'red'
    assert cmap['Low'] == 'cyan'
    assert cmap['Mid'] == 'white'
    assert 'A' not in cmap


def test_nonstandard_uses_default_table():
    assert get_color_map(Scheme.NONSTANDARD) == get_color_map(Scheme.DEFAULT)


@pytest.mark.parametrize("scheme", list(Scheme) + [99])
def test_every_map_has_background(scheme):
    cmap = get_color_map(scheme)
    assert cmap['BackGrd'] == 'white'
    for color in cmap.values():
        assert color in Colors.NAMES


def test_maps_are_fresh():
    cmap = get_color_map(Scheme.DEFAULT)
    cmap['A'] = 'black'
    assert get_color_map(Scheme.DEFAULT)['A'] == 'green'
