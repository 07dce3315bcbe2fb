class Prop2JsonError(Exception):
    """Base class for errors raised while converting config files"""


class PathNotFoundError(Prop2JsonError):
    def __init__(self, path):
        self.path = path
        super().__init__(f"Path '{path}' is neither a file nor a directory")


class ConfigReadError(Prop2JsonError):
    def __init__(self, path, cause: Exception):
        self.path = path
        self.cause = cause
        super().__init__(f"Could not read '{path}': {cause}")


class ConfigKeyError(Prop2JsonError):
    """A parsed key that cannot be placed in the tree"""

    def __init__(self, key: str, path=None, line_no=None):
        self.key = key
        self.path = path
        self.line_no = line_no
        super().__init__(self._describe())

    def _reason(self) -> str:
        return f"Key '{self.key}' cannot be inserted"

    def _describe(self) -> str:
        message = self._reason()
        if self.path is not None:
            location = f"{self.path}:{self.line_no}" if self.line_no else str(self.path)
            message = f"{location}: {message}"
        return message

    def locate(self, path, line_no=None):
        """Record the file and line the key came from"""
        self.path = path
        self.line_no = line_no
        self.args = (self._describe(),)


class ConfigConflictError(ConfigKeyError):
    """A dotted key descends through a prefix that already holds a value"""

    def __init__(self, key: str, prefix: str, path=None, line_no=None):
        self.prefix = prefix
        super().__init__(key, path=path, line_no=line_no)

    def _reason(self) -> str:
        return f"Key '{self.key}' conflicts with value already set at '{self.prefix}'"


class KeyTooDeepError(ConfigKeyError):
    def __init__(self, key: str, depth: int, limit: int, path=None, line_no=None):
        self.depth = depth
        self.limit = limit
        super().__init__(key, path=path, line_no=line_no)

    def _reason(self) -> str:
        shown = self.key if len(self.key) <= 60 else self.key[:57] + "..."
        return f"Key '{shown}' has {self.depth} segments, more than the limit of {self.limit}"
