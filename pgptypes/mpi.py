"""Multi-precision integers as stored in OpenPGP packets."""

from __future__ import annotations

import io
from dataclasses import dataclass

from .util import IncompleteError, ParseError, bit_size, strip_leading_zeros

MAX_EXTERN_MPI_BITS = 16384
"""Upper bound on MPI size accepted when reading."""


def mpi(data: bytes) -> tuple[bytes, Mpi]:
    """Parse an MPI with its two-octet bit count; return ``(rest, value)``."""
    data = bytes(data)
    if len(data) < 2:
        raise IncompleteError(2)
    bits = int.from_bytes(data[:2], "big")
    length = (bits + 7) >> 3
    if length > MAX_EXTERN_MPI_BITS:
        raise ParseError("MPI is too long")
    body = data[2:]
    if len(body) < length:
        raise IncompleteError(length)
    return body[length:], Mpi(strip_leading_zeros(body[:length]))


@dataclass(frozen=True)
class Mpi:
    """An MPI value, held as big-endian bytes ready to be written."""

    data: bytes = b""

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", bytes(self.data))

    @classmethod
    def from_raw(cls, data: bytes) -> Mpi:
        """Build a value from raw bytes, dropping leading zeros."""
        return cls(strip_leading_zeros(data))

    @classmethod
    def from_int(cls, value: int) -> Mpi:
        """Build a value from a non-negative integer."""
        if value < 0:
            raise ValueError("MPI values must not be negative")
        return cls(value.to_bytes(max(1, (value.bit_length() + 7) // 8), "big"))

    @classmethod
    def parse(cls, data: bytes) -> tuple[bytes, Mpi]:
        """Parse an encoded MPI; return ``(rest, value)``."""
        return mpi(data)

    def to_int(self) -> int:
        return int.from_bytes(self.data, "big")

    def to_writer(self, writer) -> None:
        """Write the bit count and the value bytes."""
        size = bit_size(self.data)
        if size > 0xFFFF:
            raise ValueError("MPI is too long to encode")
        writer.write(size.to_bytes(2, "big"))
        writer.write(self.data)

    def to_bytes(self) -> bytes:
        """Return the encoded form: bit count followed by the value bytes."""
        buf = io.BytesIO()
        self.to_writer(buf)
        return buf.getvalue()

    def __len__(self) -> int:
        return len(self.data)

    def __repr__(self) -> str:
        return f"Mpi({self.data.hex()})"