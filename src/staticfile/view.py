"""Read-only file view over decoded static file contents.

A ``View`` is what ``Registry.open()`` hands back: a seekable binary
reader over an immutable ``bytes`` object with its own cursor.  It
holds no registry state and no OS resources, so views can be shared
out freely and need no locking.
"""

import os
from collections.abc import Iterator
from typing import Any, Protocol


class Writer(Protocol):
    """Anything ``View.write_to`` can write to (files, sockets, hashes)."""

    def write(self, data: bytes, /) -> Any: ...


class View:
    """A read-only, seekable view of one static file.

    Supports the read side of the binary file protocol, so most code
    that accepts ``open(path, "rb")`` accepts a ``View`` as well::

        with staticfile.open("templates/base.html") as f:
            head = f.read(64)
            f.seek(0)
            f.write_to(out)

    ``close()`` releases nothing and never fails; a closed view keeps
    working.
    """

    __slots__ = ("_data", "_pos")

    def __init__(self, data: bytes) -> None:
        self._data = data
        self._pos = 0

    def size(self) -> int:
        """Total decoded size of the file contents, in bytes."""
        return len(self._data)

    def tell(self) -> int:
        return self._pos

    def read(self, size: int | None = -1) -> bytes:
        """Read up to *size* bytes from the cursor; ``b""`` at the end."""
        if self._pos >= len(self._data):
            return b""
        if size is None or size < 0:
            end = len(self._data)
        else:
            end = min(self._pos + size, len(self._data))
        chunk = self._data[self._pos : end]
        self._pos = end
        return chunk

    def readinto(self, buffer: Any) -> int:
        """Copy bytes from the cursor into a writable buffer.

        Returns the number of bytes copied, ``0`` at the end.
        """
        out = memoryview(buffer).cast("B")
        chunk = self.read(len(out))
        out[: len(chunk)] = chunk
        return len(chunk)

    def read_at(self, size: int, offset: int) -> bytes:
        """Read up to *size* bytes at *offset* without moving the cursor.

        Mirrors ``os.pread``: an offset at or past the end yields ``b""``.
        """
        if offset < 0:
            msg = f"negative offset: {offset}"
            raise ValueError(msg)
        if size < 0:
            msg = f"negative size: {size}"
            raise ValueError(msg)
        return self._data[offset : offset + size]

    def readline(self, size: int | None = -1) -> bytes:
        if self._pos >= len(self._data):
            return b""
        end = self._data.find(b"\n", self._pos)
        end = len(self._data) if end < 0 else end + 1
        if size is not None and size >= 0:
            end = min(end, self._pos + size)
        chunk = self._data[self._pos : end]
        self._pos = end
        return chunk

    def seek(self, offset: int, whence: int = os.SEEK_SET) -> int:
        """Move the cursor and return its new absolute position.

        Seeking past the end is allowed; reads there return ``b""``.
        """
        if whence == os.SEEK_SET:
            pos = offset
        elif whence == os.SEEK_CUR:
            pos = self._pos + offset
        elif whence == os.SEEK_END:
            pos = len(self._data) + offset
        else:
            msg = f"invalid whence: {whence}"
            raise ValueError(msg)
        if pos < 0:
            msg = f"negative seek position: {pos}"
            raise ValueError(msg)
        self._pos = pos
        return pos

    def write_to(self, sink: Writer) -> int:
        """Write everything from the cursor to the end into *sink*.

        Leaves the cursor at the end and returns the byte count.
        """
        chunk = self.read()
        if chunk:
            sink.write(chunk)
        return len(chunk)

    def close(self) -> None:
        """No-op; a view holds no resources."""

    @property
    def closed(self) -> bool:
        return False

    def readable(self) -> bool:
        return True

    def seekable(self) -> bool:
        return True

    def writable(self) -> bool:
        return False

    def __iter__(self) -> Iterator[bytes]:
        while line := self.readline():
            yield line

    def __enter__(self) -> "View":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"<View size={len(self._data)} pos={self._pos}>"
