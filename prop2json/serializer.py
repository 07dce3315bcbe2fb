import json
from typing import Literal

import yaml

from .tree import ConfigValue, Leaf, Node

OutputFormat = Literal["json", "yaml"]


def to_data(value: ConfigValue):
    """Convert a tree into plain dicts and strings"""
    match value:
        case Leaf(value=raw):
            return raw
        case Node(entries=entries):
            return {key: to_data(child) for key, child in entries.items()}
    raise TypeError(f"Unexpected config value: {value!r}")


def dumps(tree: Node, indent: int = 2, fmt: OutputFormat = "json") -> str:
    data = to_data(tree)
    match fmt:
        case "json":
            return json.dumps(data, indent=indent, ensure_ascii=False)
        case "yaml":
            text = yaml.safe_dump(data, indent=max(indent, 2), sort_keys=False,
                                  allow_unicode=True, default_flow_style=False)
            return text.rstrip("\n")
    raise ValueError(f"Unsupported output format: {fmt}")
