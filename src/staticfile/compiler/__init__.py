"""Static file compiler — files on disk to a generated Python data module.

Reads every regular file matched by the configured glob patterns,
compresses it, renders it as bytes literals and writes a module whose
import registers each file with the default registry::

    config = CompileConfig(package="assets", output="app/assets.py",
                           patterns=("static/*.css",), trim="static/")
    files = compile_files(config)
    write_module(config, files)

Payloads are deterministic, so regenerating from unchanged inputs and
options yields byte-identical data.
"""

import glob
import logging
import os
import shlex
import stat
from dataclasses import dataclass
from pathlib import Path

from kida import Environment

from staticfile.codec import MIN_WIDTH, encode, source_literal
from staticfile.compiler._template import MODULE_TEMPLATE
from staticfile.config import CompileConfig
from staticfile.errors import CompileError, EncodeError
from staticfile.registry import clean_path

logger = logging.getLogger("staticfile.compiler")


@dataclass(frozen=True, slots=True)
class CompiledFile:
    """One input file, encoded and rendered for the data module."""

    source: str
    name: str
    var: str
    size: int
    data: str

    @property
    def name_literal(self) -> str:
        return repr(self.name)

    @property
    def source_text(self) -> str:
        return repr(self.source)


def is_package_name(name: str) -> bool:
    """Return True if *name* is a (possibly dotted) Python module name."""
    return bool(name) and all(part.isidentifier() for part in name.split("."))


def expand_globs(patterns: tuple[str, ...] | list[str]) -> list[str]:
    """Return the regular files matched by *patterns*.

    Matches of each pattern are sorted; a file matched by more than
    one pattern is kept once, at its first position.  ``**`` matches
    across directories and wildcards match leading dots.  Directories
    and other non-regular files are skipped.
    """
    inputs: list[str] = []
    seen: set[str] = set()
    for pattern in patterns:
        for match in sorted(glob.glob(pattern, recursive=True, include_hidden=True)):
            match = os.path.normpath(match)
            try:
                mode = os.stat(match).st_mode
            except OSError as exc:
                msg = f"checking input {match!r}: {exc}"
                raise CompileError(msg) from exc
            if not stat.S_ISREG(mode):
                logger.debug("skipping non-regular file %s", match)
                continue
            if match in seen:
                continue
            seen.add(match)
            inputs.append(match)
    return inputs


def registered_name(path: str, config: CompileConfig) -> str:
    """Return the registry path *path* is compiled under.

    Applies ``trim``, then ``base_only``, then ``add``, and cleans the
    result the way the registry does.  Empty parts are ignored, so the
    result is ``""`` when nothing is left.
    """
    name = path.removeprefix(config.trim) if config.trim else path
    if config.base_only:
        name = os.path.basename(name)
    parts = [part for part in (config.add, name) if part]
    if not parts:
        return ""
    return clean_path(os.sep.join(parts))


def compile_files(config: CompileConfig) -> list[CompiledFile]:
    """Read, encode and render every input file matched by *config*.

    Raises ``CompileError`` if no file matches, a file cannot be read
    or compressed, or two files would register under one path.
    """
    if not is_package_name(config.package):
        msg = f"invalid package name: {config.package!r}"
        raise CompileError(msg)
    if config.width < MIN_WIDTH:
        msg = f"line width must be at least {MIN_WIDTH}, got {config.width}"
        raise CompileError(msg)

    inputs = expand_globs(config.patterns)
    if not inputs:
        msg = f"no input files matched {', '.join(config.patterns)}"
        raise CompileError(msg)

    files: list[CompiledFile] = []
    owners: dict[str, str] = {}
    for i, path in enumerate(inputs, start=1):
        name = registered_name(path, config)
        if not name:
            msg = f"{path!r} maps to an empty registered path"
            raise CompileError(msg)
        if name in owners:
            msg = f"{owners[name]!r} and {path!r} both register as {name!r}"
            raise CompileError(msg)
        owners[name] = path

        try:
            raw = Path(path).read_bytes()
        except OSError as exc:
            msg = f"reading file contents: {exc}"
            raise CompileError(msg) from exc
        try:
            packed = encode(raw, config.level)
        except EncodeError as exc:
            msg = f"encoding {path!r}: {exc}"
            raise CompileError(msg) from exc

        files.append(
            CompiledFile(
                source=path,
                name=name,
                var=f"_file_data_{i}",
                size=len(raw),
                data=source_literal(packed, config.width),
            )
        )
        logger.debug("compiled %s as %r (%d -> %d bytes)", path, name, len(raw), len(packed))

    return files


def render_module(config: CompileConfig, files: list[CompiledFile]) -> str:
    """Render the source text of the data module for *files*."""
    env = Environment(autoescape=False)
    template = env.from_string(MODULE_TEMPLATE)
    command = shlex.join(config.argv).encode("unicode_escape").decode("ascii")
    text = template.render(
        {
            "package": config.package,
            "command": command,
            "count": len(files),
            "files": files,
        }
    )
    return text if text.endswith("\n") else text + "\n"


def write_module(config: CompileConfig, files: list[CompiledFile]) -> Path:
    """Render the data module and write it to ``config.output``.

    Creates missing parent directories.  Returns the output path.
    """
    output = Path(config.output)
    text = render_module(config, files)
    try:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(text, encoding="utf-8")
    except OSError as exc:
        msg = f"writing {output}: {exc}"
        raise CompileError(msg) from exc
    logger.info("wrote %s (%d files)", output, len(files))
    return output
