"""staticfile — Static files embedded in Python programs.

Ship templates, stylesheets and fixtures inside a generated module and
read them through the same interface as files on disk.

Compile assets into a data module::

    staticfile compile --pkg assets --out myapp/assets.py --trim static/ 'static/**/*.css'

Then import it once and open files by their registered path::

    import staticfile
    import myapp.assets  # noqa: F401

    with staticfile.open("site.css") as f:
        css = f.read()

Paths that are not registered fall through to the real filesystem.
"""

# Declare free-threading support (PEP 703)
_Py_mod_gil = 0

__version__ = "0.1.0.dev0"
__all__ = [
    "CompileConfig",
    "ConfigurationError",
    "DecodeError",
    "DuplicatePath",
    "InvalidPath",
    "NotFound",
    "Registry",
    "StaticFileError",
    "View",
    "decode",
    "encode",
    "get_registry",
    "must_read_file",
    "must_register",
    "open",
    "read_file",
    "register",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import staticfile`` fast while providing a clean top-level API.
    """
    if name in ("Registry", "get_registry", "register", "must_register", "must_read_file"):
        from staticfile import registry as _registry

        return getattr(_registry, name)

    if name in ("open", "read_file"):
        from staticfile import files as _files

        return getattr(_files, name)

    if name == "View":
        from staticfile.view import View

        return View

    if name in ("encode", "decode"):
        from staticfile import codec as _codec

        return getattr(_codec, name)

    if name == "CompileConfig":
        from staticfile.config import CompileConfig

        return CompileConfig

    if name in (
        "StaticFileError",
        "ConfigurationError",
        "DecodeError",
        "DuplicatePath",
        "InvalidPath",
        "NotFound",
    ):
        from staticfile import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
