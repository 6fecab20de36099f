#!/usr/bin/env python3
"""
Command line front end: color sequence text for the terminal.

    colorseq seqs.fa -cgc
    cat seqs.fa | colorseq - -win S -ws 8
"""

import os
import sys
import argparse
import logging

import yaml

from colorseq import __version__
from colorseq.config import ColorSeqConfig, DEF_WINSIZE, DEF_RUNSIZE, load_config_file
from colorseq.draw.colormap import get_color_map
from colorseq.dispatch import LineColorizer

logger = logging.getLogger(__name__)


def get_parser():
    parser = argparse.ArgumentParser(
        prog='colorseq',
        description='Simple text coloring (e.g. for sequences)',
    )
    parser.add_argument('infile',
                        help="Sequence file; '-' for stdin")
    parser.add_argument('-cabi', action='store_true',
                        help="Color scheme 'ABI' style")
    parser.add_argument('-cgc', action='store_true',
                        help='Color scheme GC-warm / AT-cool style')
    parser.add_argument('-win', dest='col_win', metavar='X',
                        help='Color by windows of base type X (IUB is OK)')
    parser.add_argument('-ws', dest='win_size', type=int, metavar='#',
                        help=f'Window size #; Default is {DEF_WINSIZE}')
    parser.add_argument('-nacgt', action='store_true',
                        help='Only color non-ACGT bases; IUB = red; Other = cyan')
    parser.add_argument('-run', action='store_true',
                        help='Only color runs of bases')
    parser.add_argument('-rs', dest='run_size', type=int, metavar='#',
                        help=f'Run size #; Default is {DEF_RUNSIZE}')
    parser.add_argument('-rnot', action='store_true',
                        help='Run NOT; Invert run coloring so non-runs are colored')
    parser.add_argument('-lw', action='store_true', default=None,
                        help='Lowercase white (i.e. upper = color, lower no)')
    parser.add_argument('-all', action='store_true', default=None,
                        help="Color all lines; Default ignores fasta '>' and comment '#'")
    parser.add_argument('-verb', action='store_true',
                        help='Verbose; log settings and color mapping to stderr')
    parser.add_argument('-config', metavar='PATH',
                        help='YAML file with defaults (win_size, run_size, lw, all)')
    parser.add_argument('-version', action='version', version=f'%(prog)s {__version__}')
    return parser


def report_settings(config, colormap):
    if config.window_mode:
        logger.info(f"Windows of '{config.col_win}'")
        logger.info(f" Size {config.win_size}")
        logger.info(f" High (match) color =     {colormap['High']}")
        logger.info(f" Low (anti-match) color = {colormap['Low']}")
        logger.info(f" Otherwise, color =       {colormap['Mid']}")
    else:
        logger.info("Color mapping:")
        for key in sorted(colormap):
            logger.info(f" {key} => {colormap[key]}")
    logger.debug(f"settings: {config.describe()}")


def build_config(args):
    defaults = load_config_file(args.config)
    return ColorSeqConfig.from_args(
        cabi = args.cabi,
        cgc = args.cgc,
        col_win = args.col_win,
        win_size = args.win_size,
        run_size = args.run_size,
        nacgt = args.nacgt,
        lw = args.lw,
        run = args.run,
        rnot = args.rnot,
        all = args.all,
        verbose = args.verb,
        defaults = defaults,
    )


def set_stream_errors(stream):
    """Let undecodable bytes pass through as surrogates instead of raising."""
    if hasattr(stream, "reconfigure"):
        stream.reconfigure(errors = "surrogateescape")


def silence_stdout():
    # stdout's reader went away; send the interpreter's final flush to devnull
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, sys.stdout.fileno())


def run(args, out = None):
    """Color the input named by args; returns the exit code."""
    try:
        config = build_config(args)
    except (ValueError, OSError, yaml.YAMLError) as e:
        logger.error(str(e))
        return 1

    colormap = get_color_map(config.scheme)
    report_settings(config, colormap)

    if out is None:
        out = sys.stdout
        set_stream_errors(out)
    colorizer = LineColorizer(config, out = out, colormap = colormap)

    if args.infile == '-':
        infile = sys.stdin
        set_stream_errors(infile)
    else:
        try:
            infile = open(args.infile, encoding = "utf-8", errors = "surrogateescape")
        except OSError as e:
            logger.error(f"Failed to open {args.infile}: {e}")
            return 1

    try:
        colorizer.process(infile)
    except BrokenPipeError:
        logger.debug("output closed early")
        if out is sys.__stdout__:
            silence_stdout()
        return 0
    except OSError as e:
        logger.error(f"I/O error while coloring {args.infile}: {e}")
        return 1
    finally:
        if infile is not sys.stdin:
            infile.close()
    return 0


def main(argv = None):
    parser = get_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit as e:
        # argparse exits 2 on usage errors
        return 1 if e.code else 0

    logging.basicConfig(level = logging.INFO if args.verb else logging.WARNING,
                        format = "# %(message)s" if args.verb else "%(levelname)s: %(message)s")
    return run(args)


if __name__ == "__main__":
    sys.exit(main())
