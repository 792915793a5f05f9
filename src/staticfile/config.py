"""Compiler configuration.

CompileConfig is a frozen dataclass — immutable after creation, built
once from the command line (or directly, when compiling from Python).
"""

from dataclasses import dataclass
from pathlib import Path

from staticfile.codec import BEST_COMPRESSION, MAX_WIDTH


@dataclass(frozen=True, slots=True)
class CompileConfig:
    """Settings for one ``staticfile compile`` run.

    Only the package name, output path and input patterns are required::

        config = CompileConfig(
            package="assets",
            output="myapp/assets.py",
            patterns=("static/**/*.css",),
            trim="static/",
        )
    """

    # Output
    package: str
    output: str | Path
    patterns: tuple[str, ...]

    # Registered path transforms, applied in this order
    trim: str = ""  # Prefix removed from each input path
    base_only: bool = False  # Keep only the file's base name
    add: str = ""  # Prefix joined before each registered path

    # Encoding
    width: int = MAX_WIDTH  # Widest line of generated literal data
    level: int = BEST_COMPRESSION

    # Recorded in the generated module header
    argv: tuple[str, ...] = ()
