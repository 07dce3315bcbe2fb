"""
Command-line driver: expands path arguments, converts each config file and
prints one labelled document per file to stdout.
"""

import argparse
import logging
import sys
from typing import List, Optional

from pydantic import ValidationError

from . import __version__
from .errors import ConfigKeyError, ConfigReadError
from .files import expand_paths
from .options import ConverterOptions
from .properties import read_properties
from .serializer import dumps

logger = logging.getLogger("prop2json")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="prop2json",
        description="Convert dotted key = value config files to JSON.",
    )
    p.add_argument(
        "paths",
        nargs="+",
        metavar="PATH",
        help="Config file, or directory whose files are all converted.",
    )
    p.add_argument("--indent", type=int, default=2, help="Indentation width (default: 2).")
    p.add_argument(
        "--format",
        choices=["json", "yaml"],
        default="json",
        help="Output format (default: json).",
    )
    p.add_argument(
        "--on-conflict",
        dest="on_conflict",
        choices=["error", "overwrite"],
        default="error",
        help="What to do when a key descends through an existing value: "
             "skip the file with an error, or replace the value with a namespace.",
    )

    verbosity = p.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Log debug details.")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Only log errors.")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return p


def setup_logging(verbose: bool = False, quiet: bool = False):
    # Replace handlers left by an earlier call
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
    ch = logging.StreamHandler(sys.stderr)
    ch.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    logger.addHandler(ch)

    if verbose:
        logger.setLevel(logging.DEBUG)
    elif quiet:
        logger.setLevel(logging.ERROR)
    else:
        logger.setLevel(logging.WARNING)


def convert_file(path: str, options: ConverterOptions) -> Optional[str]:
    """Render one file, or log why it could not be and return None"""
    try:
        tree = read_properties(path, on_conflict=options.on_conflict)
    except ConfigReadError as e:
        logger.error("Failed to read file %s (%s)", e.path, e.cause)
        return None
    except ConfigKeyError as e:
        logger.error("%s", e)
        return None
    return dumps(tree, indent=options.indent, fmt=options.format)


def run(paths: List[str], options: ConverterOptions) -> int:
    files = expand_paths(paths)
    converted = 0
    for path in files:
        output = convert_file(path, options)
        if output is None:
            continue
        print(f"=== File: {path} ===")
        print(output)
        converted += 1

    logger.debug("Converted %d of %d files", converted, len(files))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(verbose=args.verbose, quiet=args.quiet)

    try:
        options = ConverterOptions(
            indent=args.indent,
            format=args.format,
            on_conflict=args.on_conflict,
        )
    except ValidationError as e:
        error = e.errors()[0]
        parser.error(f"argument --{error['loc'][0]}: {error['msg']}")

    try:
        return run(args.paths, options)
    except KeyboardInterrupt:
        logger.error("Interrupt detected, stopping")
        return 130
