import logging
from typing import Dict, Iterable, Literal, NamedTuple, Optional, Union

from pydantic import BaseModel, Field

from .errors import ConfigConflictError, ConfigKeyError, KeyTooDeepError

logger = logging.getLogger(__name__)

ConflictPolicy = Literal["error", "overwrite"]

# Serialization recurses once per level
MAX_DEPTH = 100


class Leaf(BaseModel):
    """Raw string value, never type-converted"""
    value: str


class Node(BaseModel):
    """Namespace of keys; entry order follows insertion"""
    entries: Dict[str, Union[Leaf, "Node"]] = Field(default_factory=dict)


ConfigValue = Union[Leaf, Node]


class Assignment(NamedTuple):
    key: str
    value: str
    line_no: Optional[int] = None


def insert(tree: Node, dotted_key: str, value: str, on_conflict: ConflictPolicy = "error") -> None:
    """Bind value under dotted_key, creating intermediate namespaces.

    The final segment always wins over whatever was there before. An
    intermediate segment that already holds a Leaf is a conflict: with the
    "error" policy ConfigConflictError is raised, with "overwrite" the leaf is
    discarded and replaced by an empty Node. Keys with more than MAX_DEPTH
    segments raise KeyTooDeepError and leave the tree untouched.
    """
    segments = dotted_key.split(".")
    if len(segments) > MAX_DEPTH:
        raise KeyTooDeepError(dotted_key, len(segments), MAX_DEPTH)
    node = tree

    for depth, segment in enumerate(segments[:-1]):
        match node.entries.get(segment):
            case None:
                child = Node()
                node.entries[segment] = child
            case Node() as child:
                pass
            case Leaf():
                prefix = ".".join(segments[:depth + 1])
                if on_conflict != "overwrite":
                    raise ConfigConflictError(dotted_key, prefix)
                logger.warning("Discarding value at '%s' to make room for '%s'", prefix, dotted_key)
                child = Node()
                node.entries[segment] = child
        node = child

    node.entries[segments[-1]] = Leaf(value=value)


def build_tree(assignments: Iterable[Assignment], on_conflict: ConflictPolicy = "error", source=None) -> Node:
    """Insert assignments in order into a fresh tree.

    Key errors are tagged with source and the assignment's line number.
    """
    tree = Node()
    for assignment in assignments:
        try:
            insert(tree, assignment.key, assignment.value, on_conflict)
        except ConfigKeyError as e:
            e.locate(source, assignment.line_no)
            raise
    return tree
