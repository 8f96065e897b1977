"""Base64 encoding with a standard and a URL-safe alphabet.

The URL-safe variant writes no padding. Decoding treats characters outside
the alphabet as the digit zero, stops at the padding character of the
standard alphabet, and ends the result at its first zero byte.
"""

from __future__ import annotations

import base64

STANDARD_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
URL_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-_"
PAD = "="


def _as_bytes(data: bytes | bytearray | str) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


def encode(data: bytes | bytearray | str, url: bool = False) -> str:
    """Encode ``data``; with ``url`` the URL-safe alphabet is used unpadded."""
    raw = _as_bytes(data)
    if url:
        return base64.urlsafe_b64encode(raw).decode("ascii").rstrip(PAD)
    return base64.b64encode(raw).decode("ascii")


def encode_url(data: bytes | bytearray | str) -> str:
    """Encode ``data`` with the URL-safe alphabet and no padding."""
    return encode(data, url=True)


def _lookup(url: bool) -> dict[int, int]:
    alphabet = URL_ALPHABET if url else STANDARD_ALPHABET
    return {ord(ch) & 127: value for value, ch in enumerate(alphabet)}


def decode(text: bytes | bytearray | str, url: bool = False) -> bytes:
    """Decode base64 ``text`` leniently and return the bytes before any zero byte."""
    table = _lookup(url)
    pad = None if url else ord(PAD)
    out = bytearray()
    pending = 0
    for index, code in enumerate(_as_bytes(text)):
        if code == pad:
            break
        value = table.get(code & 127, 0)
        phase = index % 4
        if phase == 0:
            pending = value << 2 & 0xFC
        elif phase == 1:
            out.append(pending | (value >> 4 & 0x03))
            pending = value << 4 & 0xF0
        elif phase == 2:
            out.append(pending | (value >> 2 & 0x0F))
            pending = value << 6 & 0xC0
        else:
            out.append(pending | (value & 0x3F))
    return bytes(out).split(b"\0", 1)[0]