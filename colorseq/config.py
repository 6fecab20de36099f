import os
import logging
from dataclasses import dataclass, fields
from enum import IntEnum
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from colorseq.seqs.bio import degeneracy_count

logger = logging.getLogger(__name__)

DEF_WINSIZE = 5
DEF_RUNSIZE = 3

CONFIG_ENV = "COLORSEQ_CONFIG"
LOCAL_CONFIG = "./colorseq.yaml"

# keys a config file may set, with the type each must have
_FILE_KEYS = {
    "win_size": int,
    "run_size": int,
    "lw": bool,
    "all": bool,
}


class Scheme(IntEnum):
    DEFAULT = 0
    ABI = 1
    GC = 2
    WINDOW = 3
    NONSTANDARD = 4


def find_config_path(path = None):
    """Explicit path, then $COLORSEQ_CONFIG, then ./colorseq.yaml; None if none apply."""
    if path:
        return Path(path)
    env_path = os.environ.get(CONFIG_ENV)
    if env_path:
        return Path(env_path)
    if os.path.exists(LOCAL_CONFIG):
        return Path(LOCAL_CONFIG)
    return None


def load_config_file(path = None) -> Dict[str, Any]:
    """
    Read option defaults from a YAML file.

    Unknown keys are ignored with a warning. A file that does not hold a
    mapping, or a key holding the wrong type (e.g. lw: "false"), raises
    ValueError; a missing explicit path raises OSError.
    """
    cfg_path = find_config_path(path)
    if cfg_path is None:
        return {}

    with open(cfg_path) as f:
        cfg = yaml.safe_load(f)

    if cfg is None:
        return {}
    if not isinstance(cfg, dict):
        raise ValueError(f"Config file {cfg_path} must hold a mapping, got {type(cfg).__name__}")

    unknown = set(cfg) - set(_FILE_KEYS)
    if unknown:
        logger.warning(f"ignoring unknown config keys in {cfg_path}: {sorted(unknown)}")
    logger.debug(f"loaded config defaults from {cfg_path}")
    defaults = {}
    for key, kind in _FILE_KEYS.items():
        if key not in cfg:
            continue
        value = cfg[key]
        # bool is an int subclass, so check it both ways
        if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
            raise ValueError(f"Config key '{key}' in {cfg_path} must be {kind.__name__}, got {value!r}")
        defaults[key] = value
    return defaults


@dataclass(frozen=True)
class ColorSeqConfig:
    """Resolved options for one run; read-only once built."""
    scheme: Scheme = Scheme.DEFAULT
    col_win: str = ""
    win_size: int = DEF_WINSIZE
    run_size: int = DEF_RUNSIZE
    nacgt: bool = False
    lw: bool = False
    run: bool = False
    rnot: bool = False
    all: bool = False
    verbose: bool = False

    @property
    def window_mode(self):
        return self.scheme == Scheme.WINDOW

    @classmethod
    def from_args(cls, cabi = False, cgc = False, col_win = None, win_size = None,
                  run_size = None, nacgt = False, lw = None, run = False, rnot = False,
                  all = None, verbose = False, defaults: Optional[Dict[str, Any]] = None):
        """
        Validate options and pick the coloring scheme.

        None means "not given on the command line"; those fall back to the
        defaults mapping, then to the built-in values.
        """
        defaults = defaults or {}

        def pick(value, key, fallback):
            if value is not None:
                return value
            return defaults.get(key, fallback)

        win_size = int(pick(win_size, "win_size", DEF_WINSIZE))
        run_size = int(pick(run_size, "run_size", DEF_RUNSIZE))
        if win_size < 1:
            raise ValueError(f"Window size must be positive, got {win_size}")
        if run_size < 1:
            raise ValueError(f"Run size must be positive, got {run_size}")

        col_win = (col_win or "").upper()
        if col_win and not degeneracy_count(col_win):
            raise ValueError(f"Bad window arg '{col_win}'; Must be IUB code")

        if nacgt:
            scheme = Scheme.NONSTANDARD
        elif col_win:
            scheme = Scheme.WINDOW
        elif cabi:
            scheme = Scheme.ABI
        elif cgc:
            scheme = Scheme.GC
        else:
            scheme = Scheme.DEFAULT

        return cls(
            scheme = scheme,
            col_win = col_win if scheme == Scheme.WINDOW else "",
            win_size = win_size,
            run_size = run_size,
            nacgt = bool(nacgt),
            lw = bool(pick(lw, "lw", False)),
            run = bool(run),
            rnot = bool(rnot),
            all = bool(pick(all, "all", False)),
            verbose = bool(verbose),
        )

    def describe(self):
        return ", ".join(f"{f.name}={getattr(self, f.name)!r}" for f in fields(self))
