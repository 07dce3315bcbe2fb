import logging
import os
from typing import Iterable, List

from .errors import PathNotFoundError

logger = logging.getLogger(__name__)


def collect_files(path: str) -> List[str]:
    """Resolve one argument to the config files it names.

    A directory yields the regular files directly inside it, sorted by name.
    Subdirectories are not descended into.
    """
    if os.path.isfile(path):
        return [path]
    if os.path.isdir(path):
        entries = sorted(os.listdir(path))
        return [os.path.join(path, name) for name in entries
                if os.path.isfile(os.path.join(path, name))]
    raise PathNotFoundError(path)


def expand_paths(args: Iterable[str]) -> List[str]:
    files = []
    for arg in args:
        try:
            files.extend(collect_files(arg))
        except PathNotFoundError as e:
            logger.error("%s", e)
        except OSError as e:
            logger.error("Could not list directory '%s': %s", arg, e)
    return files
