"""Scheme tables and color map construction.

Allowed colors are the eight named terminal colors in Colors.NAMES.
"""

from typing import Dict

from colorseq.config import Scheme

# Value-based colors, not alphabet
WINDOW_COLORS = {
    'Low': 'cyan',
    'Mid': 'white',
    'High': 'red',
}

# ABI trace style
ABI_COLORS = {
    'A': 'red',
    'C': 'blue',
    'G': 'green',
    'T': 'black',
}

# GC warm, AT cool
GC_COLORS = {
    'A': 'cyan',
    'C': 'red',
    'G': 'magenta',
    'T': 'blue',
}

DEFAULT_COLORS = {
    'A': 'green',
    'C': 'red',
    'G': 'blue',
    'T': 'yellow',
}

# shared non-base colors
EXTRA_COLORS = {
    'IUB': 'red',
    'Non-IUB': 'cyan',
    'BackGrd': 'white',
}

_SCHEME_TABLES = {
    Scheme.WINDOW: WINDOW_COLORS,
    Scheme.ABI: ABI_COLORS,
    Scheme.GC: GC_COLORS,
}


def get_color_map(scheme) -> Dict[str, str]:
    """
    Fresh color map for a scheme; unknown schemes get the default table.

    Every map carries IUB, Non-IUB and BackGrd on top of the scheme table.
    """
    colormap = dict(_SCHEME_TABLES.get(scheme, DEFAULT_COLORS))
    colormap.update(EXTRA_COLORS)
    return colormap
