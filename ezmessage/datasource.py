"""Binary content sources for attachments and embedded images."""

from dataclasses import dataclass
from mimetypes import guess_type
from os.path import basename
from typing import Protocol, runtime_checkable

from .utils import validate_path

DEFAULT_CONTENT_TYPE = "application/octet-stream"


@runtime_checkable
class DataSource(Protocol):
    """Self-describing binary content.

    Anything exposing `content`, `content_type` and `name` can be passed to
    `EmailBuilder.embed_image` and `EmailBuilder.add_attachment`.
    """

    @property
    def content(self) -> bytes: ...

    @property
    def content_type(self) -> str: ...

    @property
    def name(self) -> str | None: ...


@dataclass(frozen=True)
class ByteArrayDataSource:
    """In-memory buffer with a declared MIME type and an optional name."""

    content: bytes
    content_type: str
    name: str | None = None


class FileDataSource:
    """Wraps a file on disk.

    The name is the file's basename and the content type is guessed from its
    extension, falling back to `application/octet-stream`. Content is read
    each time it is accessed.

    Args:
        path (str): Path to an existing file.
        content_type (str, optional): Overrides the guessed MIME type.

    Raises:
        ValueError: If `path` is not a non-empty string.
        FileNotFoundError: If the file does not exist.

    Example:
        builder.add_attachment(None, FileDataSource("reports/monthly.pdf"))
    """

    def __init__(self, path: str, content_type: str | None = None):
        validate_path(path)
        self.path = path
        if content_type is None:
            content_type, _ = guess_type(path)
        self._content_type = content_type or DEFAULT_CONTENT_TYPE

    @property
    def name(self) -> str:
        return basename(self.path)

    @property
    def content_type(self) -> str:
        return self._content_type

    @property
    def content(self) -> bytes:
        with open(self.path, "rb") as f:
            return f.read()

    def __repr__(self) -> str:
        return f"<FileDataSource path={self.path!r} content_type={self._content_type!r}>"


__all__ = ["DataSource", "ByteArrayDataSource", "FileDataSource", "DEFAULT_CONTENT_TYPE"]
