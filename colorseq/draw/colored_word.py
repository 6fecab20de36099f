"""
ColoredWord: one token with a resolved color (or none) per character.

Resolution is pure; rendering to ANSI happens separately so the colors can
be inspected without parsing escape codes.
"""

from typing import Dict, List, Optional, Tuple

from colorseq.config import ColorSeqConfig
from colorseq.seqs.bio import VOCAB_DNA, degeneracy_count
from .colors import Colors
from .runs import run_mask, score_windows


class ColoredWord:
    """
    A word and its per-character colors.

    A color of None means the character is written as-is, with no color
    command in front of it.
    """

    def __init__(self, word: str, colors: List[Optional[str]], lead_reset: bool = False):
        if len(word) != len(colors):
            raise ValueError(f"Got {len(colors)} colors for word of length {len(word)}")
        self.word = word
        self.colors = colors
        self.lead_reset = lead_reset

    def __len__(self) -> int:
        return len(self.word)

    def __iter__(self):
        return iter(zip(self.word, self.colors))

    @property
    def pairs(self) -> List[Tuple[str, Optional[str]]]:
        return list(zip(self.word, self.colors))

    def render(self, emitter: Optional[Colors] = None) -> str:
        """
        ANSI string for the word, always ending in a reset.

        Colored characters each get their own color-set command.
        """
        if emitter is None:
            emitter = Colors()
        parts = []
        if self.lead_reset:
            parts.append(emitter.reset_color())
        for char, color in self:
            parts.append(emitter.format_char(char, color))
        parts.append(emitter.reset_color())
        return "".join(parts)


def get_char_colors(word: str, colormap: Dict[str, str], config: ColorSeqConfig) -> List[Optional[str]]:
    """Per-base colors for the direct schemes, before any run masking."""
    colors = []
    for char in word:
        colkey = char.upper()
        # explicit color for key == normal DNA base
        if colkey in VOCAB_DNA and colkey in colormap:
            curcol = colormap[colkey]
            if config.nacgt:
                curcol = colormap['BackGrd']
            if char.islower() and config.lw:
                curcol = 'white'
        # non-normal DNA base
        elif config.nacgt:
            if degeneracy_count(char) > 0:
                curcol = colormap['IUB']
            else:
                curcol = colormap['Non-IUB']
        else:
            curcol = None
        colors.append(curcol)
    return colors


def color_word(word: str, colormap: Dict[str, str], config: ColorSeqConfig) -> ColoredWord:
    """
    Resolve a word under a direct (per-base) scheme.

    In run mode, positions outside runs are pushed to the background color
    (or positions inside runs, when inverted).
    """
    colors = get_char_colors(word, colormap, config)

    if config.run:
        mask = run_mask(word, config.run_size)
        for n, in_run in enumerate(mask):
            if bool(in_run) == config.rnot:
                colors[n] = colormap['BackGrd']

    return ColoredWord(word, colors, lead_reset = True)


def color_word_windows(word: str, colormap: Dict[str, str], config: ColorSeqConfig) -> ColoredWord:
    """Resolve a word by windows of the configured IUB pattern: High, Low or Mid per character."""
    hscore, lscore = score_windows(word, config.col_win, config.win_size)

    colors = []
    for n in range(1, len(word) + 1):
        if hscore[n] > 0:
            colors.append(colormap['High'])
        elif lscore[n] > 0:
            colors.append(colormap['Low'])
        else:
            colors.append(colormap['Mid'])

    return ColoredWord(word, colors)
