
VOCAB_DNA = "ACGT"

# IUB code -> bases it may stand for
ALIASES = {
    'A':'A',
    'T':'T',
    'G':'G',
    'C':'C',
    'U':'T',
    'R': 'AG',   # puRine
    'Y': 'TC',   # pYrimidine
    'S': 'GC',   # Strong (3 H bonds)
    'W': 'AT',   # Weak (2 H bonds)
    'K': 'TG',   # Keto
    'M': 'AC',   # aMino
    'B': 'TGC',  # not A
    'D': 'ATG',  # not C
    'H': 'ATC',  # not G
    'V': 'AGC',  # not T
    'N': 'ATGC', # aNy
}

SEQUENCE_CHARS = frozenset(ALIASES.keys())


def is_sequence_char(c):
    return c.upper() in SEQUENCE_CHARS

def frac_sequence_chars(word):
    """Fraction of characters in word that are IUB codes (case-insensitive); 0 for empty."""
    if not word:
        return 0.0
    nseq = sum(1 for c in word if is_sequence_char(c))
    return nseq / len(word)

def degeneracy_count(c):
    """
    Number of bases an IUB code stands for; 0 if c is not an IUB code.

    e.g. A -> 1, R -> 2, N -> 4, X -> 0
    """
    if len(c) != 1:
        return 0
    return len(ALIASES.get(c.upper(), ""))

def iub_match(c, pattern):
    """
    True if every base c may stand for is allowed by the pattern code.

    iub_match('G', 'S') -> True, iub_match('N', 'S') -> False
    """
    bases = ALIASES.get(c.upper())
    allowed = ALIASES.get(pattern.upper())
    if not bases or not allowed:
        return False
    return all(b in allowed for b in bases)
