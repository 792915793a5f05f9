"""``staticfile compile`` — data module generation command.

Builds a ``CompileConfig`` from the parsed arguments, compiles the
matched files and writes the module.  Exits with code 1 on failure.
"""

import argparse
import logging
import sys

from staticfile.compiler import compile_files, write_module
from staticfile.config import CompileConfig
from staticfile.errors import CompileError


def run_compile(args: argparse.Namespace, argv: list[str]) -> None:
    """Compile ``args.globs`` into the module at ``args.out``."""
    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )

    config = CompileConfig(
        package=args.pkg,
        output=args.out,
        patterns=tuple(args.globs),
        trim=args.trim,
        base_only=args.base,
        add=args.add,
        width=args.width,
        argv=tuple(argv[1:] if argv[:1] == ["compile"] else argv),
    )

    try:
        files = compile_files(config)
        output = write_module(config, files)
    except CompileError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    print(f"Compiled {len(files)} files into {output}")
