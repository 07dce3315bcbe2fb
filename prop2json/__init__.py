from .errors import (ConfigConflictError, ConfigKeyError, ConfigReadError, KeyTooDeepError,
                     PathNotFoundError, Prop2JsonError)
from .properties import parse_line, parse_lines, read_properties
from .serializer import dumps, to_data
from .tree import Assignment, ConfigValue, Leaf, Node, build_tree, insert

__version__ = "0.1.0"
