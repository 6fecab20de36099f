"""Line dispatch: split lines into tokens and route sequence-like tokens to a resolver."""

import logging
import sys
from typing import Dict, Iterable, List, Optional, TextIO

import regex

from colorseq.config import ColorSeqConfig
from colorseq.seqs.bio import frac_sequence_chars
from colorseq.draw.colors import Colors
from colorseq.draw.colormap import get_color_map
from colorseq.draw.colored_word import ColoredWord, color_word, color_word_windows

logger = logging.getLogger(__name__)

SEQ_FRAC_THRESHOLD = 0.5

_split_re = regex.compile(r"(\s+)")
_comment_re = regex.compile(r"^\s*#")
_header_re = regex.compile(r"^\s*>")


def split_tokens(line: str) -> List[str]:
    """
    Split a line into alternating tokens and whitespace separators.

    Even indices hold tokens (possibly empty at the ends), odd indices hold
    the whitespace between them; "".join() gives back the line.
    """
    return _split_re.split(line)


def is_sequence_token(token: str) -> bool:
    return frac_sequence_chars(token) > SEQ_FRAC_THRESHOLD


def is_passthrough_line(line: str) -> bool:
    """Comment ('#') and FASTA header ('>') lines."""
    return bool(_comment_re.match(line) or _header_re.match(line))


class LineColorizer:
    """
    Colors lines of text and writes them to an output stream.

    Holds the read-only config and color map for a run; each token is
    resolved independently.
    """

    def __init__(self, config: ColorSeqConfig, out: Optional[TextIO] = None,
                 colormap: Optional[Dict[str, str]] = None, emitter: Optional[Colors] = None):
        self.config = config
        self.out = out if out is not None else sys.stdout
        self.colormap = colormap if colormap is not None else get_color_map(config.scheme)
        self.emitter = emitter if emitter is not None else Colors(bold = True)

    def color_token(self, token: str) -> ColoredWord:
        if self.config.window_mode:
            return color_word_windows(token, self.colormap, self.config)
        return color_word(token, self.colormap, self.config)

    def color_line(self, line: str) -> str:
        """The line with every sequence-like token colored; other text is untouched."""
        if not self.config.all and is_passthrough_line(line):
            return line

        parts = []
        for n, part in enumerate(split_tokens(line)):
            # odd parts are whitespace
            if n % 2 or not is_sequence_token(part):
                parts.append(part)
                continue
            logger.debug(f"coloring token {part!r}")
            parts.append(self.color_token(part).render(self.emitter))
        return "".join(parts)

    def write_line(self, line: str):
        self.out.write(self.color_line(line))

    def process(self, lines: Iterable[str]) -> int:
        """Color and write lines one at a time; returns the number of lines written."""
        nlines = 0
        for line in lines:
            self.write_line(line)
            nlines += 1
        self.out.flush()
        logger.debug(f"processed {nlines} lines")
        return nlines
