"""staticfile exception hierarchy.

Shared across the registry, codec, file helpers and compiler so every
module raises and catches the same types.  Lookup and path errors also
subclass the matching builtin, so ``except FileNotFoundError`` keeps
working for callers that treat embedded files like real ones.
"""


class StaticFileError(Exception):
    """Base for all staticfile-specific errors."""


class PathError(StaticFileError):
    """An error tied to one registry path."""

    def __init__(self, path: str, detail: str = "") -> None:
        self.path = path
        self.detail = detail
        super().__init__(path, detail)

    def __str__(self) -> str:
        if self.detail:
            return f"{self.detail}: {self.path!r}"
        return repr(self.path)


class InvalidPath(PathError, ValueError):  # noqa: N818
    """Registration with an empty path."""

    def __init__(self, path: str = "") -> None:
        super().__init__(path, "registered empty path")


class DuplicatePath(PathError, ValueError):  # noqa: N818
    """A second registration under an already-registered canonical path.

    The entry from the first registration is left in place.
    """

    def __init__(self, path: str) -> None:
        super().__init__(path, "duplicate path registered")


class NotFound(PathError, FileNotFoundError):  # noqa: N818
    """No entry is registered under the exact path given."""

    def __init__(self, path: str) -> None:
        super().__init__(path, "no static file registered")


class DecodeError(StaticFileError):
    """A stored payload could not be decompressed.

    Indicates corrupted data or a mismatch between the code that
    generated the payload and the code reading it.
    """


class EncodeError(StaticFileError):
    """The compressor rejected its input or its settings."""


class ConfigurationError(StaticFileError):
    """Raised by the ``must_*`` helpers when embedded data is unusable.

    Typically raised while a generated data module is being imported,
    which aborts program start-up.
    """


class CompileError(StaticFileError):
    """Raised when ``staticfile compile`` cannot produce its output."""
