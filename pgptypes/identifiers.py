"""Key identifiers, compression algorithms and revocation keys."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

KEY_ID_LENGTH = 8


@dataclass(frozen=True)
class KeyId:
    """An eight-byte OpenPGP key ID."""

    value: bytes

    def __post_init__(self) -> None:
        value = bytes(self.value)
        if len(value) != KEY_ID_LENGTH:
            raise ValueError(
                f"invalid input length: expected {KEY_ID_LENGTH}, got {len(value)}"
            )
        object.__setattr__(self, "value", value)

    @classmethod
    def from_slice(cls, data: bytes) -> KeyId:
        return cls(bytes(data))

    def to_bytes(self) -> bytes:
        return self.value

    def __bytes__(self) -> bytes:
        return self.value

    def __repr__(self) -> str:
        return f"KeyId({self.value.hex()})"


class CompressionAlgorithm(IntEnum):
    """Compression algorithm identifiers."""

    UNCOMPRESSED = 0
    ZIP = 1
    ZLIB = 2
    BZIP2 = 3
    # Only for compatibility with GnuPG; do not use.
    PRIVATE10 = 110


class RevocationKeyClass(IntEnum):
    DEFAULT = 0x80
    SENSITIVE = 0x80 | 0x40


@dataclass(frozen=True)
class RevocationKey:
    """A designated revocation key: its class, algorithm id and fingerprint."""

    key_class: RevocationKeyClass
    algorithm: int
    fingerprint: bytes

    def __post_init__(self) -> None:
        object.__setattr__(self, "key_class", RevocationKeyClass(self.key_class))
        object.__setattr__(self, "fingerprint", bytes(self.fingerprint))