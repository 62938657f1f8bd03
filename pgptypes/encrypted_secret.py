"""Encrypted secret key material and its checksum handling."""

from __future__ import annotations

import io
from dataclasses import dataclass

from .s2k import StringToKey


class ChecksumError(ValueError):
    """Raised when a secret-key checksum is missing, unexpected or wrong."""


def calculate_simple_checksum(data: bytes) -> int:
    """Sum of all octets modulo 65536."""
    return sum(bytes(data)) & 0xFFFF


@dataclass(frozen=True)
class EncryptedSecretParams:
    """Encrypted secret key parameters together with how they were encrypted."""

    data: bytes
    iv: bytes
    encryption_algorithm: int
    string_to_key: StringToKey
    string_to_key_id: int

    def __post_init__(self) -> None:
        if self.string_to_key_id == 0:
            raise ValueError("invalid string to key id")
        if not 0 < self.string_to_key_id <= 0xFF:
            raise ValueError(f"string to key id out of range: {self.string_to_key_id}")
        if not 0 <= self.encryption_algorithm <= 0xFF:
            raise ValueError(f"invalid encryption algorithm: {self.encryption_algorithm}")
        object.__setattr__(self, "data", bytes(self.data))
        object.__setattr__(self, "iv", bytes(self.iv))

    @property
    def _has_checksum(self) -> bool:
        return self.string_to_key_id < 254

    def compare_checksum(self, other: bytes | None) -> None:
        """Check a stored checksum against the data; raise ChecksumError on mismatch."""
        if self._has_checksum:
            if other is None:
                raise ChecksumError("Missing checksum")
            if len(other) < 2:
                raise ChecksumError("Invalid checksum")
            if int.from_bytes(other[:2], "big") != calculate_simple_checksum(self.data):
                raise ChecksumError("Invalid checksum")
        elif other is not None:
            raise ChecksumError("Expected no checksum, but found one")

    def checksum(self) -> bytes | None:
        if not self._has_checksum:
            return None
        return calculate_simple_checksum(self.data).to_bytes(2, "big")

    def to_writer(self, writer) -> None:
        writer.write(bytes([self.string_to_key_id]))
        if self._has_checksum:
            writer.write(self.iv)
        else:
            writer.write(bytes([self.encryption_algorithm]))
            self.string_to_key.to_writer(writer)
            writer.write(self.iv)
        writer.write(self.data)
        checksum = self.checksum()
        if checksum is not None:
            writer.write(checksum)

    def to_bytes(self) -> bytes:
        buf = io.BytesIO()
        self.to_writer(buf)
        return buf.getvalue()

    def __repr__(self) -> str:
        checksum = self.checksum()
        return (
            "EncryptedSecretParams("
            f"data={self.data.hex()}, "
            f"checksum={checksum.hex() if checksum is not None else None}, "
            f"iv={self.iv.hex()}, "
            f"encryption_algorithm={self.encryption_algorithm}, "
            f"string_to_key={self.string_to_key!r}, "
            f"string_to_key_id={self.string_to_key_id})"
        )