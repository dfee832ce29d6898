"""
pomless.errors - Errors raised while synthesizing project models

Every error raised by the reader derives from ModelError. Plain I/O
failures (unreadable files, a missing .project file) surface as the
built-in OSError family instead.
"""

from pathlib import Path
from typing import Optional, Union

PathLike = Union[str, Path]


class ModelError(Exception):
    """Base class for descriptor reading failures."""

    def __init__(self, message: str, path: Optional[PathLike] = None):
        super().__init__(message)
        self.path = Path(path) if path is not None else None


class NoDescriptorFound(ModelError):
    """No recognized descriptor file exists in a project directory."""

    def __init__(self, directory: PathLike):
        super().__init__(
            "Neither META-INF/MANIFEST.MF, feature.xml, .product nor category.xml "
            f"file found in {directory}",
            directory,
        )


class MissingRequiredField(ModelError):
    """A required header, attribute or element is absent or empty."""

    def __init__(self, field: str, path: PathLike, message: Optional[str] = None):
        if message is None:
            message = f"Required field {field} missing in {path}"
        super().__init__(message, path)
        self.field = field


class ParentNotFound(ModelError):
    """No ancestor descriptor exists in the parent directory."""

    def __init__(self, directory: PathLike):
        super().__init__(f"No parent descriptor found in {directory}", directory)


class ParentChainTooDeep(ModelError):
    """The parent walk went past the configured depth limit."""

    def __init__(self, directory: PathLike, limit: int):
        super().__init__(
            f"Parent chain exceeds {limit} levels while resolving {directory}",
            directory,
        )
        self.limit = limit


class MalformedDescriptor(ModelError):
    """A descriptor could not be parsed."""

    def __init__(
        self,
        message: str,
        path: PathLike,
        line: Optional[int] = None,
        column: Optional[int] = None,
    ):
        location = ""
        if line is not None:
            location = f" at line {line}"
            if column is not None:
                location += f", column {column}"
        super().__init__(f"Failed to parse {path}{location}: {message}", path)
        self.line = line
        self.column = column
