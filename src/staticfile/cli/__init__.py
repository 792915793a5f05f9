"""staticfile CLI — compile files on disk into a Python data module.

Entry point registered as ``staticfile`` in ``pyproject.toml``::

    [project.scripts]
    staticfile = "staticfile.cli:main"
"""

import argparse
import sys

from staticfile.codec import MAX_WIDTH


def _package_name(value: str) -> str:
    from staticfile.compiler import is_package_name

    if not is_package_name(value):
        msg = f"not a valid Python package name: {value!r}"
        raise argparse.ArgumentTypeError(msg)
    return value


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``staticfile`` command."""
    parser = argparse.ArgumentParser(
        prog="staticfile",
        description="staticfile — embed static files in Python programs.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- staticfile compile -----------------------------------------------
    compile_parser = subparsers.add_parser(
        "compile",
        help="Compile files into a generated data module",
        description=(
            "Compile the files matched by the glob patterns into a Python module. "
            "Importing the module registers each file with staticfile under its "
            "original path, less any leading path separators. Use --trim to drop "
            "a common prefix and --add to join a prefix before each path."
        ),
    )
    compile_parser.add_argument("globs", nargs="+", metavar="GLOB", help="Input file glob")
    compile_parser.add_argument(
        "--pkg",
        required=True,
        type=_package_name,
        help="Package name recorded in the generated module",
    )
    compile_parser.add_argument("--out", required=True, help="Output module path")
    compile_parser.add_argument("--trim", default="", help="Trim this prefix from each input path")
    compile_parser.add_argument("--add", default="", help="Join this prefix to each registered path")
    compile_parser.add_argument(
        "--base",
        action="store_true",
        help="Take only the base name of each input path",
    )
    compile_parser.add_argument(
        "--width",
        type=int,
        default=MAX_WIDTH,
        help=f"Widest line of generated data (default {MAX_WIDTH})",
    )
    compile_parser.add_argument(
        "--log-level",
        default="warning",
        choices=["debug", "info", "warning", "error", "critical"],
        help="Logging level",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "compile":
        from staticfile.cli._compile import run_compile

        run_compile(args, argv if argv is not None else sys.argv[1:])
