"""Low-level helpers for reading and writing OpenPGP wire data."""

from __future__ import annotations

import io
from typing import Protocol


class ParseError(ValueError):
    """Raised when input bytes do not match the expected format."""


class IncompleteError(ParseError):
    """Raised when more input is needed to finish parsing."""

    def __init__(self, needed: int | None = None) -> None:
        self.needed = needed
        if needed is None:
            message = "incomplete input"
        else:
            message = f"incomplete input: {needed} bytes needed"
        super().__init__(message)


class _Hasher(Protocol):
    def update(self, data: bytes, /) -> object: ...


_BASE64_EXTRA = frozenset(b"/+=\n\r")


def is_base64_token(c: int) -> bool:
    """Tell whether the byte ``c`` may appear in a base64 body."""
    return (
        0x30 <= c <= 0x39
        or 0x41 <= c <= 0x5A
        or 0x61 <= c <= 0x7A
        or c in _BASE64_EXTRA
    )


def _token_end(data: bytes) -> int:
    return next(
        (idx for idx, c in enumerate(data) if not is_base64_token(c)),
        len(data),
    )


def base64_token(data: bytes) -> tuple[bytes, bytes]:
    """Split off one or more base64 body bytes; return ``(rest, token)``."""
    data = bytes(data)
    if not data:
        raise IncompleteError()
    end = _token_end(data)
    if end == 0:
        raise ParseError("expected a base64 token")
    return data[end:], data[:end]


def prefixed(data: bytes) -> tuple[bytes, bytes]:
    """Skip leading line endings, then take base64 bytes; return ``(rest, token)``."""
    data = bytes(data)
    pos = 0
    while True:
        if data.startswith(b"\n", pos):
            pos += 1
        elif data.startswith(b"\r\n", pos):
            pos += 2
        else:
            break
    body = data[pos:]
    end = _token_end(body)
    if end == 0:
        raise ParseError("expected a base64 token")
    return body[end:], body[:end]


def bit_size(val: bytes) -> int:
    """Return the number of significant bits in a big-endian byte string."""
    if not val:
        return 0
    return len(val) * 8 - (8 - val[0].bit_length())


def strip_leading_zeros(data: bytes) -> bytes:
    """Drop leading zero bytes; input made only of zeros is returned unchanged."""
    data = bytes(data)
    stripped = data.lstrip(b"\x00")
    return stripped if stripped else data


def _take(data: bytes, count: int) -> tuple[bytes, bytes]:
    if len(data) < count:
        raise IncompleteError(count)
    return data[count:], data[:count]


def packet_length(data: bytes) -> tuple[bytes, int]:
    """Parse a new-format packet length; return ``(rest, length)``."""
    rest, head = _take(bytes(data), 1)
    olen = head[0]
    if olen < 192:
        return rest, olen
    if olen < 255:
        rest, second = _take(rest, 1)
        return rest, ((olen - 192) << 8) + 192 + second[0]
    rest, word = _take(rest, 4)
    return rest, int.from_bytes(word, "big")


def write_packet_length(length: int, writer: io.RawIOBase | io.BufferedIOBase) -> None:
    """Write a packet length including the five-octet prefix where needed."""
    if length >= 8384:
        writer.write(b"\xff")
    write_packet_len(length, writer)


def write_packet_len(length: int, writer: io.RawIOBase | io.BufferedIOBase) -> None:
    """Write the raw packet length without the five-octet prefix."""
    if length < 0:
        raise ValueError("packet length must not be negative")
    if length < 192:
        writer.write(bytes([length]))
    elif length < 8384:
        writer.write(bytes([(length - 192) // 256 + 192, (length - 192) % 256]))
    else:
        writer.write(length.to_bytes(4, "big"))


def write_string(val: str) -> bytes:
    """Encode each character as a single byte, keeping its low eight bits."""
    return bytes(ord(c) & 0xFF for c in val)


def read_string(raw: bytes) -> str:
    """Decode each byte as the character with the same code point."""
    return bytes(raw).decode("latin-1")


def write_all(writer, data: bytes) -> None:
    """Write all of ``data``, retrying on short or interrupted writes."""
    view = memoryview(bytes(data))
    while view:
        try:
            written = writer.write(view)
        except InterruptedError:
            continue
        if written is None:
            written = len(view)
        view = view[written:]


class TeeWriter:
    """A writer that feeds everything to a hasher and to another writer."""

    def __init__(self, hasher: _Hasher, writer) -> None:
        self.hasher = hasher
        self.writer = writer

    def write(self, data: bytes) -> int:
        data = bytes(data)
        self.hasher.update(data)
        write_all(self.writer, data)
        return len(data)

    def flush(self) -> None:
        flush = getattr(self.writer, "flush", None)
        if flush is not None:
            flush()