"""Reading and writing small binary and text files.

Binary values use fixed little-endian layouts: a float is four bytes, a time
stamp eight signed bytes, an RGB colour three bytes and an RGBA colour four.
Missing or unreadable files raise the usual ``OSError`` subclasses.
"""

from __future__ import annotations

import os
import struct
from dataclasses import dataclass, field
from typing import Union

from askit.base64codec import decode, encode
from askit.color import Color, ColorRGB

PathLike = Union[str, "os.PathLike[str]"]

WORD_SIZE = 8
_HEADER_FIELD = 4
_HEADER_MIN = 13

_FLOAT = struct.Struct("<f")
_TIME = struct.Struct("<q")


@dataclass
class ArrayHeader:
    """Dimensions and element size read from an array file, with its cells."""

    x: int = 0
    y: int = 0
    s: int = 0
    values: list[int] = field(default_factory=list)


def read_bytes(path: PathLike, size: int) -> bytes:
    """Read at most ``size`` bytes from the start of a binary file."""
    if size < 0:
        raise ValueError(f"size must not be negative: {size}")
    with open(path, "rb") as handle:
        return handle.read(size)


def write_bytes(path: PathLike, data: bytes | bytearray) -> None:
    """Replace the file's content with ``data``."""
    with open(path, "wb") as handle:
        handle.write(bytes(data))


def write_text(path: PathLike, text: str) -> None:
    """Replace the file's content with ``text``."""
    with open(path, "w", encoding="utf-8", newline="") as handle:
        handle.write(text)


def append_text(path: PathLike, text: str) -> None:
    """Append ``text`` to the file, creating it if needed."""
    with open(path, "a", encoding="utf-8", newline="") as handle:
        handle.write(text)


def read_all(path: PathLike) -> str:
    """Return the whole content of a text file."""
    with open(path, encoding="utf-8", newline="") as handle:
        return handle.read()


def read_all_base64(path: PathLike) -> bytes:
    """Read a base64 text file and return the decoded bytes."""
    return decode(read_all(path))


def write_base64(path: PathLike, text: str | bytes) -> None:
    """Write ``text`` base64-encoded, replacing the file's content."""
    write_text(path, encode(text))


def append_base64(path: PathLike, text: str | bytes) -> None:
    """Append ``text`` base64-encoded to the file."""
    append_text(path, encode(text))


def bytes_to_words(data: bytes | bytearray | str) -> list[int]:
    """Split ``data`` into big-endian 8-byte unsigned words.

    A short final group is padded with zero bytes.
    """
    raw = data.encode("utf-8") if isinstance(data, str) else bytes(data)
    words = []
    for start in range(0, len(raw), WORD_SIZE):
        chunk = raw[start:start + WORD_SIZE].ljust(WORD_SIZE, b"\0")
        words.append(int.from_bytes(chunk, "big"))
    return words


def read_word_array(path: PathLike) -> list[int]:
    """Read a file as a sequence of big-endian 8-byte words."""
    with open(path, "rb") as handle:
        return bytes_to_words(handle.read())


def read_base64_word_array(path: PathLike) -> list[int]:
    """Read a base64 file and split the decoded bytes into 8-byte words."""
    return bytes_to_words(read_all_base64(path))


def parse_array_header(data: bytes | bytearray | str) -> ArrayHeader:
    """Parse three big-endian 32-bit fields (x, y, element size).

    The returned header holds ``x * y`` zeroed cells. Data shorter than
    13 bytes is rejected.
    """
    raw = data.encode("utf-8") if isinstance(data, str) else bytes(data)
    if len(raw) < _HEADER_MIN:
        raise ValueError(f"array data too short: {len(raw)} bytes")
    x, y, s = (
        int.from_bytes(raw[i * _HEADER_FIELD:(i + 1) * _HEADER_FIELD], "big")
        for i in range(3)
    )
    return ArrayHeader(x=x, y=y, s=s, values=[0] * (x * y))


def _read_exact(path: PathLike, size: int) -> bytes:
    raw = read_bytes(path, size)
    if len(raw) < size:
        raise ValueError(f"{os.fspath(path)!s}: expected {size} bytes, got {len(raw)}")
    return raw


def read_float(path: PathLike) -> float:
    """Read a four-byte float."""
    return _FLOAT.unpack(_read_exact(path, _FLOAT.size))[0]


def write_float(path: PathLike, value: float) -> None:
    """Write a four-byte float."""
    write_bytes(path, _FLOAT.pack(value))


def read_time(path: PathLike) -> int:
    """Read an eight-byte signed time stamp."""
    return _TIME.unpack(_read_exact(path, _TIME.size))[0]


def write_time(path: PathLike, value: int) -> None:
    """Write an eight-byte signed time stamp."""
    write_bytes(path, _TIME.pack(value))


def read_rgb(path: PathLike) -> ColorRGB:
    """Read a three-byte RGB colour."""
    r, g, b = _read_exact(path, 3)
    return ColorRGB(r, g, b)


def write_rgb(path: PathLike, color: ColorRGB) -> None:
    """Write a three-byte RGB colour."""
    write_bytes(path, bytes((color.r, color.g, color.b)))


def read_rgba(path: PathLike) -> Color:
    """Read a four-byte RGBA colour."""
    r, g, b, a = _read_exact(path, 4)
    return Color(r, g, b, a)


def write_rgba(path: PathLike, color: Color) -> None:
    """Write a four-byte RGBA colour."""
    write_bytes(path, bytes((color.r, color.g, color.b, color.a)))