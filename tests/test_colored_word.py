"""Test per-character color resolution for direct and window schemes."""

import pytest

from colorseq.config import ColorSeqConfig
from colorseq.draw.colors import Colors
from colorseq.draw.colormap import get_color_map
from colorseq.draw.colored_word import ColoredWord, color_word, color_word_windows


def resolve(word, **kwargs):
    config = ColorSeqConfig.from_args(**kwargs)
    cmap = get_color_map(config.scheme)
    if config.window_mode:
        return color_word_windows(word, cmap, config)
    return color_word(word, cmap, config)


@pytest.mark.parametrize("word", ["ACGT", "acgt", "GattACA", "TTTTT", "cCgGaAtT"])
def test_canonical_bases_get_map_colors(word):
    cmap = get_color_map(ColorSeqConfig().scheme)
    cw = resolve(word)
    assert cw.colors == [cmap[c.upper()] for c in word]
    assert Colors.scrub_codes(cw.render()) == word


def test_abi_scheme():
    assert resolve("ACGT", cabi = True).colors == ['red', 'blue', 'green', 'black']


def test_lowercase_white():
    cw = resolve("ACGTacgt", lw = True)
    assert cw.colors == ['green', 'red', 'blue', 'yellow', 'white', 'white', 'white', 'white']


def test_nacgt_highlights_iub():
    assert resolve("ACGTN", nacgt = True).colors == ['white'] * 4 + ['red']


def test_nacgt_non_iub_symbols():
    assert resolve("AxR-", nacgt = True).colors == ['white', 'cyan', 'red', 'cyan']


def test_nacgt_lowercase_white_still_applies():
    # lowercase override is applied after background suppression
    cw = resolve("Acn", nacgt = True, lw = True)
    assert cw.colors == ['white', 'white', 'red']


def test_non_bases_get_no_color():
    cw = resolve("ACNT")
    assert cw.colors == ['green', 'red', None, 'yellow']
    out = cw.render()
    assert "N" in out
    assert Colors.scrub_codes(out) == "ACNT"
    # the bare char follows the previous char directly, with no code in front
    assert "\x1b[1;31mCN" in out


def test_run_mode_keeps_runs():
    cw = resolve("AAAACGT", run = True, run_size = 3)
    assert cw.colors == ['green'] * 4 + ['white'] * 3


def test_run_mode_inverted():
    cw = resolve("AAAACGT", run = True, run_size = 3, rnot = True)
    assert cw.colors == ['white'] * 4 + ['red', 'blue', 'yellow']


def test_run_mode_uncolored_positions():
    # N has no color in the default scheme; outside a run it becomes background
    cw = resolve("NNNA", run = True, run_size = 3)
    assert cw.colors == [None, None, None, 'white']
    cw = resolve("NA", run = True, run_size = 3)
    assert cw.colors == ['white', 'white']


def test_window_scheme():
    cw = resolve("GGCGGAT", col_win = "s", win_size = 3)
    assert cw.colors == ['red'] * 5 + ['white'] * 2


def test_window_scheme_high_low_mid():
    cw = resolve("SSAAG", col_win = "S", win_size = 2)
    assert cw.colors == ['red', 'red', 'cyan', 'cyan', 'white']


def test_window_scheme_ignores_run_flags():
    plain = resolve("GGGGGAAAAA", col_win = "G")
    runs = resolve("GGGGGAAAAA", col_win = "G", run = True, rnot = True)
    assert plain.colors == runs.colors == ['red'] * 5 + ['cyan'] * 5


def test_render_direct():
    cw = ColoredWord("AC", ['green', None], lead_reset = True)
    assert cw.render() == "\x1b[0m\x1b[1;32mAC\x1b[0m"


def test_render_always_ends_reset():
    for cw in [resolve("ACGT"), resolve("NNNN"), resolve("GGGGG", col_win = "G")]:
        assert cw.render().endswith(Colors.RESET)


def test_pairs():
    cw = resolve("AN")
    assert cw.pairs == [('A', 'green'), ('N', None)]
    assert len(cw) == 2


def test_mismatched_colors():
    with pytest.raises(ValueError):
        ColoredWord("ACGT", ['red'])
