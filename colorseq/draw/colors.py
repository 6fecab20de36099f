
import re


class Colors:
    """
    Named 8-color ANSI emitter.

    Color names follow the classic terminal palette (black, red, green, yellow,
    blue, magenta, cyan, white). No state is kept between calls; the writer
    decides where the codes go.
    """

    RESET = '\x1b[0m'
    BOLD = '\x1b[1m'

    NAMES = ["black", "red", "green", "yellow", "blue", "magenta", "cyan", "white"]

    _color_frm = '\x1b[{c}m'
    _fgi = 30

    _ansi_re = re.compile(r"\x1b(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])")

    def __init__(self, bold = True):
        self.bold = bold

    @classmethod
    def get_code(cls, color_name):
        """SGR number for a named foreground color, e.g. 'red' -> 31."""
        name = color_name.lower()
        if not name in cls.NAMES:
            raise ValueError(f"Unknown color name: {color_name}")
        return cls._fgi + cls.NAMES.index(name)

    @classmethod
    def set_color(cls, bold, color_name):
        codes = []
        if bold:
            codes.append("1")
        codes.append(str(cls.get_code(color_name)))
        return cls._color_frm.format(c=";".join(codes))

    @classmethod
    def reset_color(cls):
        return cls.RESET

    def format_char(self, char, color_name):
        """Color-set command then the char; a None color leaves the char bare."""
        if color_name is None:
            return char
        return self.set_color(self.bold, color_name) + char

    @classmethod
    def scrub_codes(cls, line):
        return cls._ansi_re.sub("", line)

    @classmethod
    def visible_len(cls, line):
        return len(cls.scrub_codes(line))
