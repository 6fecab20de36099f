
from .colors import Colors
from .colormap import get_color_map
from .runs import run_tally, backfill, score_windows, run_mask
from .colored_word import ColoredWord, get_char_colors, color_word, color_word_windows

__all__ = [

    "Colors",
    "get_color_map",

    "run_tally", "backfill", "score_windows", "run_mask",
    "ColoredWord", "get_char_colors", "color_word", "color_word_windows",

]
