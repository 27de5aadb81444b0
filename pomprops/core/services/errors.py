"""
Write errors — typed failures of a materialize call.

Every error names the path it concerns. The underlying I/O error is
chained as ``__cause__`` and kept on ``.cause``.
"""

from __future__ import annotations


class WriteError(Exception):
    """Base class for all materialize failures."""

    kind = "write"

    def __init__(self, message: str, path: str = "", cause: BaseException | None = None):
        super().__init__(message)
        self.path = path
        self.cause = cause

    def to_dict(self) -> dict:
        return {
            "kind": self.kind,
            "message": str(self),
            "path": self.path,
            "cause": repr(self.cause) if self.cause else None,
        }


class FolderCreationError(WriteError):
    """The destination folder could not be created. Nothing was written."""

    kind = "folder"


class SerializationError(WriteError):
    """pom.properties content could not be serialized."""

    kind = "serialization"


class FileWriteError(WriteError):
    """A generated file could not be created or replaced."""

    kind = "file"

    def __init__(self, file: str, path: str, cause: BaseException | None = None):
        super().__init__(f"Cannot write {file} at {path}: {cause}", path=path, cause=cause)
        self.file = file

    def to_dict(self) -> dict:
        data = super().to_dict()
        data["file"] = self.file
        return data


class StreamReadError(WriteError):
    """The descriptor stream could not be read."""

    kind = "stream"
