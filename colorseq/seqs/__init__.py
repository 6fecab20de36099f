
from .bio import ALIASES, VOCAB_DNA, is_sequence_char, frac_sequence_chars, degeneracy_count, iub_match

__all__ = [
    "ALIASES", "VOCAB_DNA",
    "is_sequence_char", "frac_sequence_chars", "degeneracy_count", "iub_match",
]
