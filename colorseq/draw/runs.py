"""
Run detection for window and run coloring.

Both schemes use the same two passes:
    1. forward: length of the run ending at each position (run_tally)
    2. backward: spread membership over the whole span of any run whose
       length reaches the threshold (backfill)

so a run is marked from its first character, not only after enough
characters have accumulated.
"""

import logging
from typing import Iterable, Tuple

import numpy as np

from colorseq.seqs.bio import iub_match

logger = logging.getLogger(__name__)


def run_tally(flags: Iterable[bool]) -> np.ndarray:
    """
    Length of the run of True flags ending at each position.

    The result is padded with a leading 0, so tally[n] belongs to flags[n-1].
    """
    flags = list(flags)
    tally = np.zeros(len(flags) + 1, dtype=int)
    for n, flag in enumerate(flags, start=1):
        if flag:
            tally[n] = tally[n - 1] + 1
    return tally


def backfill(tally: np.ndarray, threshold: int, fill: int = 1) -> np.ndarray:
    """
    Right-to-left sweep turning run lengths into uniform membership.

    A position whose tally reaches threshold marks itself and the (tally - 1)
    positions before it with fill, and the cursor jumps past them. Anything
    not covered is 0.
    """
    mask = np.zeros_like(tally)
    n = len(tally) - 1
    while n >= 0:
        t = int(tally[n])
        if t > 0 and t >= threshold:
            start = max(n - t + 1, 0)
            mask[start:n + 1] = fill
            n = start - 1
        else:
            n -= 1
    return mask


def score_windows(word: str, pattern: str, win_size: int) -> Tuple[np.ndarray, np.ndarray]:
    """
    High (match) and Low (anti-match) masks for windows of an IUB pattern.

    Both masks have len(word) + 1 entries with a leading pad; entry n is
    win_size if word[n-1] lies in a run of at least win_size matches
    (or non-matches for the low mask), else 0.
    """
    matches = [iub_match(c, pattern) for c in word]
    hscore = backfill(run_tally(matches), win_size, fill = win_size)
    lscore = backfill(run_tally(not m for m in matches), win_size, fill = win_size)
    return hscore, lscore


def run_mask(word: str, run_size: int) -> np.ndarray:
    """
    0/1 mask of positions inside a run of at least run_size identical characters.

    Characters compare case-insensitively.
    """
    upper = word.upper()
    same = [n > 0 and c == upper[n - 1] for n, c in enumerate(upper)]
    # repeats-after-first plus the first character itself
    lengths = run_tally(same)[1:] + 1
    mask = backfill(lengths, run_size)
    logger.debug(f"run mask for {word!r} (size {run_size}): {mask.tolist()}")
    return mask
