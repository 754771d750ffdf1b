"""Error kinds raised while resolving the bundled document.

Both are caught by the loader, which logs them and falls through to the
next source. Nothing here reaches the rendering layer.
"""

from __future__ import annotations


class ReaderError(Exception):
    """Base exception for document loading failures."""


class ResourceNotFound(ReaderError):
    """The resource bundle has no entry under the requested logical name."""

    def __init__(self, name: str, where: str | None = None):
        msg = f"resource not found: {name}"
        if where:
            msg += f" (in {where})"
        super().__init__(msg)
        self.name = name
        self.where = where


class MalformedDocument(ReaderError):
    """Bytes were present but did not decode into a Document."""

    def __init__(self, message: str, source: str | None = None):
        super().__init__(f"{source}: {message}" if source else message)
        self.source = source
