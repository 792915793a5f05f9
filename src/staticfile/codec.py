"""Payload codec — zlib compression and bytes-literal rendering.

``encode`` / ``decode`` are the storage transform for registered files.
``to_source`` renders encoded bytes as Python source text for the
modules written by ``staticfile compile``.

Compression is deterministic for a given input and zlib build, so
regenerating a data module from unchanged inputs yields byte-identical
payloads.
"""

import io
import zlib
from typing import TextIO

from staticfile.errors import DecodeError, EncodeError

BEST_COMPRESSION = zlib.Z_BEST_COMPRESSION

# Widest line emitted by to_source, closing quote included.
MAX_WIDTH = 120

_OPEN = 'b"'
_CLOSE = '"'
MIN_WIDTH = len(_OPEN) + len("\\xff") + len(_CLOSE) + 1


def encode(raw: bytes, level: int = BEST_COMPRESSION) -> bytes:
    """Compress raw file contents into their stored form."""
    try:
        return zlib.compress(raw, level)
    except zlib.error as exc:
        msg = f"staticfile: encoding error: {exc}"
        raise EncodeError(msg) from exc


def decode(data: bytes) -> bytes:
    """Restore raw file contents from their stored form.

    Raises ``DecodeError`` for a bad header, a corrupt or truncated
    stream, or bytes trailing the end of the stream.
    """
    decompressor = zlib.decompressobj()
    try:
        raw = decompressor.decompress(data)
        raw += decompressor.flush()
    except zlib.error as exc:
        msg = f"staticfile: decoding error: {exc}"
        raise DecodeError(msg) from exc

    if not decompressor.eof:
        msg = "staticfile: decoding error: truncated stream"
        raise DecodeError(msg)
    if decompressor.unused_data:
        msg = f"staticfile: decoding error: {len(decompressor.unused_data)} trailing bytes"
        raise DecodeError(msg)
    return raw


def _escape(b: int) -> str:
    if b < 0x20 or b > 0x7E:
        return f"\\x{b:02x}"
    if b in (0x22, 0x5C):  # '"' and '\'
        return "\\" + chr(b)
    return chr(b)


def to_source(sink: TextIO, data: bytes, width: int = MAX_WIDTH) -> None:
    """Write *data* to *sink* as a Python bytes literal.

    Long data is split across lines by closing the literal and opening
    a new one, so the result is a run of adjacent literals that Python
    concatenates.  It must sit inside parentheses in the generated
    module.  No line written is wider than *width*.
    """
    if width < MIN_WIDTH:
        msg = f"width must be at least {MIN_WIDTH}, got {width}"
        raise ValueError(msg)

    buf = io.StringIO()
    buf.write(_OPEN)
    pos = len(_OPEN)
    for b in data:
        token = _escape(b)
        if pos + len(token) + len(_CLOSE) > width:
            buf.write(_CLOSE + "\n" + _OPEN)
            pos = len(_OPEN)
        buf.write(token)
        pos += len(token)
    buf.write(_CLOSE)
    sink.write(buf.getvalue())


def source_literal(data: bytes, width: int = MAX_WIDTH) -> str:
    """Return *data* rendered by ``to_source`` as a string."""
    buf = io.StringIO()
    to_source(buf, data, width)
    return buf.getvalue()
