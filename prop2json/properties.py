import logging
import re
from typing import Iterable, Iterator, Optional, Tuple

from .errors import ConfigReadError
from .tree import Assignment, ConflictPolicy, Node, build_tree

logger = logging.getLogger(__name__)

# key = value, keys limited to letters, digits, '.', '_' and '-'
CONFIG_PATTERN = re.compile(r"^\s*([A-Za-z0-9._-]+)\s*=\s*(.+?)\s*$")
COMMENT_PATTERN = re.compile(r"^\s*#")


def parse_line(line: str) -> Optional[Tuple[str, str]]:
    """Return (key, value) for an assignment line, None for anything else"""
    stripped = line.strip()
    if not stripped or COMMENT_PATTERN.match(stripped):
        return None

    match = CONFIG_PATTERN.match(stripped)
    if match is None:
        logger.debug("Skipping unparseable line: %r", line)
        return None
    return match.group(1), match.group(2).strip()


def parse_lines(lines: Iterable[str]) -> Iterator[Assignment]:
    """Yield an Assignment, numbered from 1, for each key = value line"""
    for line_no, line in enumerate(lines, start=1):
        pair = parse_line(line.rstrip("\r\n"))
        if pair is not None:
            yield Assignment(*pair, line_no=line_no)


def read_properties(path, on_conflict: ConflictPolicy = "error") -> Node:
    """Parse a config file into a fresh tree.

    Read and decode failures are raised as ConfigReadError. Keys that cannot
    be placed raise a ConfigKeyError carrying the file path and line number.
    """
    try:
        with open(path, encoding="utf-8") as f:
            tree = build_tree(parse_lines(f), on_conflict, source=path)
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigReadError(path, e) from e

    logger.debug("Parsed %d top-level keys from %s", len(tree.entries), path)
    return tree
