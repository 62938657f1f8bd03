"""OpenPGP packet records, tags, format versions and header encoding."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from enum import IntEnum

_log = logging.getLogger(__name__)

_MAX_U32 = 0xFFFFFFFF


class Tag(IntEnum):
    """Packet tags."""

    PUBLIC_KEY_ENCRYPTED_SESSION_KEY = 1
    SIGNATURE = 2
    SYM_KEY_ENCRYPTED_SESSION_KEY = 3
    ONE_PASS_SIGNATURE = 4
    SECRET_KEY = 5
    PUBLIC_KEY = 6
    SECRET_SUBKEY = 7
    COMPRESSED_DATA = 8
    SYM_ENCRYPTED_DATA = 9
    MARKER = 10
    LITERAL_DATA = 11
    TRUST = 12
    USER_ID = 13
    PUBLIC_SUBKEY = 14
    USER_ATTRIBUTE = 17
    SYM_ENCRYPTED_PROTECTED_DATA = 18
    MOD_DETECTION_CODE = 19


class Version(IntEnum):
    """Packet header format."""

    OLD = 0
    NEW = 1

    def write_header(self, writer, tag: int, length: int) -> None:
        """Write a packet header for ``tag`` with a body of ``length`` bytes."""
        _log.debug("write_header %r %s %s", self, tag, length)
        tag = int(tag)
        if not 0 <= tag <= 0xFF:
            raise ValueError(f"invalid packet tag: {tag}")
        if not 0 <= length <= _MAX_U32:
            raise ValueError(f"invalid packet length: {length}")

        if self is Version.OLD:
            shifted = (tag << 2) & 0xFF
            if length < 256:
                writer.write(bytes([0x80 | shifted, length]))
            elif length < 65536:
                writer.write(bytes([0x81 | shifted]) + length.to_bytes(2, "big"))
            else:
                writer.write(bytes([0x82 | shifted]) + length.to_bytes(4, "big"))
        else:
            writer.write(bytes([0xC0 | tag]))
            if length < 192:
                writer.write(bytes([length]))
            elif length < 8384:
                writer.write(
                    bytes([((length - 192) >> 8) + 192, (length - 192) & 0xFF])
                )
            else:
                writer.write(b"\xff" + length.to_bytes(4, "big"))


class KeyVersion(IntEnum):
    """Key packet versions."""

    V2 = 2
    V3 = 3
    V4 = 4
    V5 = 5


class PacketLengthKind(enum.Enum):
    FIXED = "fixed"
    INDETERMINATE = "indeterminate"
    PARTIAL = "partial"


@dataclass(frozen=True)
class PacketLength:
    """A packet length: fixed, partial (with a chunk size) or indeterminate."""

    kind: PacketLengthKind
    length: int | None = None

    def __post_init__(self) -> None:
        if self.kind is PacketLengthKind.INDETERMINATE:
            if self.length is not None:
                raise ValueError("an indeterminate length carries no size")
        elif self.length is None or self.length < 0:
            raise ValueError(f"{self.kind.value} length needs a non-negative size")

    @classmethod
    def fixed(cls, length: int) -> PacketLength:
        return cls(PacketLengthKind.FIXED, length)


@dataclass(frozen=True)
class Packet:
    """A raw packet: header format, tag and body bytes."""

    version: Version
    tag: Tag
    body: bytes

    def __post_init__(self) -> None:
        object.__setattr__(self, "version", Version(self.version))
        object.__setattr__(self, "tag", Tag(self.tag))
        object.__setattr__(self, "body", bytes(self.body))