"""Static file registry — canonical path to lazily decoded payload.

Generated data modules call ``must_register()`` at import time to add
their compressed payloads to the process default registry.  The first
``open()`` or ``read()`` of a path decodes its payload in place; every
later access reuses the decoded bytes.

Free-threading safety:
    - ``Registry._lock`` guards the path table; registration is a
      single check-then-insert under it, so two racing registrations
      of one path cannot both succeed
    - Each ``Entry`` has its own lock guarding the encoded -> decoded
      transition, so exactly one racer decodes and first opens of
      different files do not wait on each other
    - Payloads are immutable ``bytes``; views share nothing mutable
"""

import logging
import os
import threading
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum

from staticfile.codec import decode
from staticfile.errors import (
    ConfigurationError,
    DuplicatePath,
    InvalidPath,
    NotFound,
    StaticFileError,
)
from staticfile.view import View

logger = logging.getLogger("staticfile")

_SEPARATORS = os.sep + (os.altsep or "")


def clean_path(path: str) -> str:
    """Return the canonical registry key for *path*.

    Lexical cleanup only (no filesystem access): redundant separators,
    ``.`` and ``..`` segments are collapsed, then leading separators
    are dropped so the key is always relative.
    """
    return os.path.normpath(path).lstrip(_SEPARATORS)


class EntryState(Enum):
    ENCODED = "encoded"
    DECODED = "decoded"


@dataclass(slots=True, eq=False)
class Entry:
    """One registered file.

    ``payload`` holds the compressed bytes while ``state`` is
    ``ENCODED`` and the raw bytes once it is ``DECODED``.  The
    transition happens at most once, under ``lock``.
    """

    path: str
    payload: bytes
    state: EntryState = EntryState.ENCODED
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def contents(self, decoder: Callable[[bytes], bytes]) -> bytes:
        """Return the raw bytes, decoding them on first use.

        A failed decode leaves the entry encoded and propagates.
        """
        with self.lock:
            if self.state is EntryState.ENCODED:
                self.payload = decoder(self.payload)
                self.state = EntryState.DECODED
                logger.debug("decoded %r (%d bytes)", self.path, len(self.payload))
            return self.payload


class Registry:
    """Table of registered static files.

    Most programs only use the process default instance, through the
    module-level functions and ``staticfile.open()``.  Separate
    instances are useful for tests and isolated namespaces::

        registry = Registry()
        registry.register("a/b.txt", encode(b"hello"))
        with registry.open("a/b.txt") as f:
            assert f.read() == b"hello"

    *decoder* turns a stored payload into raw bytes; it must raise
    ``DecodeError`` for payloads it cannot decode.
    """

    __slots__ = ("_decoder", "_entries", "_lock")

    def __init__(self, decoder: Callable[[bytes], bytes] = decode) -> None:
        self._entries: dict[str, Entry] = {}
        self._lock = threading.Lock()
        self._decoder = decoder

    def register(self, path: str, payload: bytes | bytearray | memoryview) -> None:
        """Register encoded *payload* under the canonical form of *path*.

        Raises ``InvalidPath`` if *path* is empty and ``DuplicatePath`` if
        its canonical form is already registered.
        """
        if path == "":
            raise InvalidPath(path)
        if not isinstance(payload, (bytes, bytearray, memoryview)):
            msg = f"payload must be bytes-like, not {type(payload).__name__}"
            raise TypeError(msg)

        clean = clean_path(path)
        entry = Entry(path=clean, payload=bytes(payload))
        with self._lock:
            if clean in self._entries:
                raise DuplicatePath(clean)
            self._entries[clean] = entry

    def must_register(self, path: str, payload: bytes | bytearray | memoryview) -> None:
        """Like ``register()``, but a failure is a fatal configuration error.

        Meant for generated data modules: the error is logged and raised
        as ``ConfigurationError`` so the import that triggered it fails.
        """
        try:
            self.register(path, payload)
        except StaticFileError as exc:
            logger.critical("registering static file failed: %s", exc)
            msg = f"registering {path!r}: {exc}"
            raise ConfigurationError(msg) from exc

    def read(self, path: str) -> bytes:
        """Return the raw contents registered under exactly *path*.

        The lookup does not clean *path*.  Raises ``NotFound`` if nothing
        is registered there and ``DecodeError`` if the payload is corrupt.
        """
        with self._lock:
            entry = self._entries.get(path)
        if entry is None:
            raise NotFound(path)
        return entry.contents(self._decoder)

    def open(self, path: str) -> View:
        """Open the file registered under exactly *path* for reading.

        Same lookup and errors as ``read()``.
        """
        return View(self.read(path))

    def must_read(self, path: str) -> bytes:
        """Like ``read()``, but a failure is a fatal configuration error.

        Intended for program initialization.  Never falls back to the
        real filesystem.
        """
        try:
            return self.read(path)
        except StaticFileError as exc:
            logger.critical("reading static file failed: %s", exc)
            msg = f"reading {path!r}: {exc}"
            raise ConfigurationError(msg) from exc

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, path: object) -> bool:
        with self._lock:
            return path in self._entries


_default = Registry()


def get_registry() -> Registry:
    """Return the process default registry."""
    return _default


def register(path: str, payload: bytes | bytearray | memoryview) -> None:
    """Register *payload* under *path* in the default registry."""
    _default.register(path, payload)


def must_register(path: str, payload: bytes | bytearray | memoryview) -> None:
    """Register *payload* under *path* in the default registry or fail hard.

    This is the call generated data modules make; it is not normally
    used directly.
    """
    _default.must_register(path, payload)


def must_read_file(path: str) -> bytes:
    """Return the contents of a registered static file or fail hard.

    Unlike ``read_file()``, this never delegates to the real filesystem.
    """
    return _default.must_read(path)
