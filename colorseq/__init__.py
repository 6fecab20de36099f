"""Sequence coloring for the terminal.

Re-emits text (typically DNA/RNA, optionally FASTA) with ANSI colors applied
per character: per-base schemes, IUB window highlighting, run highlighting,
or non-ACGT highlighting.
"""

import logging

__version__ = "0.6.0"

from colorseq.config import ColorSeqConfig, Scheme, load_config_file
from colorseq.seqs.bio import is_sequence_char, frac_sequence_chars, degeneracy_count, iub_match
from colorseq.draw.colormap import get_color_map
from colorseq.dispatch import LineColorizer, split_tokens

__all__ = ['logger', '__version__',
            'ColorSeqConfig', 'Scheme', 'load_config_file',
            'is_sequence_char', 'frac_sequence_chars', 'degeneracy_count', 'iub_match',
            'get_color_map', 'LineColorizer', 'split_tokens']

# Configure logging
logger = logging.getLogger(__name__)
