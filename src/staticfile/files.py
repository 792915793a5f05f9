"""Filesystem-delegating entry points.

``open()`` and ``read_file()`` try the registry first and fall back to
the real filesystem only when the path is not registered there.  The
registry itself stays purely in-memory; the fallback lives here.
"""

import io
from pathlib import Path
from typing import BinaryIO

from staticfile.errors import NotFound
from staticfile.registry import Registry, get_registry
from staticfile.view import View


def open(path: str, *, registry: Registry | None = None) -> View | BinaryIO:  # noqa: A001
    """Open *path* for binary reading.

    Returns a ``View`` if *path* is a registered static file path, and
    otherwise the result of ``open(path, "rb")``.  A corrupt payload
    raises ``DecodeError``; it does not fall back.
    """
    if registry is None:
        registry = get_registry()
    try:
        return registry.open(path)
    except NotFound:
        pass
    return io.open(path, "rb")  # noqa: SIM115


def read_file(path: str, *, registry: Registry | None = None) -> bytes:
    """Read the complete contents of *path*.

    Registered static files are served from the registry; any other
    path is read from disk.
    """
    if registry is None:
        registry = get_registry()
    try:
        return registry.read(path)
    except NotFound:
        pass
    return Path(path).read_bytes()
