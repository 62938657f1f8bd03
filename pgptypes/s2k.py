"""String-to-key specifiers: parsing, encoding and key derivation."""

from __future__ import annotations

import hashlib
import io
import math
import secrets
from dataclasses import dataclass
from enum import IntEnum

from .util import IncompleteError, ParseError

EXPBIAS = 6
DEFAULT_HASH = 8
SALT_LENGTH = 8

_HASH_NAMES = {
    1: "md5",
    2: "sha1",
    3: "ripemd160",
    8: "sha256",
    9: "sha384",
    10: "sha512",
    11: "sha224",
    12: "sha3_256",
    14: "sha3_512",
}
_KNOWN_HASH_IDS = frozenset(_HASH_NAMES) | {0, 110}


def _new_hasher(hash_id: int):
    name = _HASH_NAMES.get(hash_id)
    if name is None:
        raise ValueError(f"hash algorithm {hash_id} is not available")
    try:
        return hashlib.new(name)
    except ValueError as exc:
        raise ValueError(f"hash algorithm {hash_id} is not available") from exc


class StringToKeyType(IntEnum):
    SIMPLE = 0
    SALTED = 1
    RESERVED = 2
    ITERATED_AND_SALTED = 3
    PRIVATE100 = 100
    PRIVATE101 = 101
    PRIVATE102 = 102
    PRIVATE103 = 103
    PRIVATE104 = 104
    PRIVATE105 = 105
    PRIVATE106 = 106
    PRIVATE107 = 107
    PRIVATE108 = 108
    PRIVATE109 = 109
    PRIVATE110 = 110

    def param_len(self) -> int:
        """Number of parameter octets following the type octet."""
        return {
            StringToKeyType.SIMPLE: 1,
            StringToKeyType.SALTED: 9,
            StringToKeyType.ITERATED_AND_SALTED: 10,
        }.get(self, 0)

    @property
    def has_salt(self) -> bool:
        return self in (StringToKeyType.SALTED, StringToKeyType.ITERATED_AND_SALTED)

    @property
    def has_count(self) -> bool:
        return self is StringToKeyType.ITERATED_AND_SALTED


@dataclass(frozen=True)
class StringToKey:
    """A string-to-key specifier; ``count`` holds the coded one-octet count."""

    typ: StringToKeyType
    hash_id: int
    salt: bytes | None = None
    count: int | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "typ", StringToKeyType(self.typ))
        if self.salt is not None:
            object.__setattr__(self, "salt", bytes(self.salt))
        if self.count is not None and not 0 <= self.count <= 0xFF:
            raise ValueError(f"coded count out of range: {self.count}")

    @classmethod
    def new_default(cls, rng=None) -> StringToKey:
        """Iterated and salted with the default hash and a coded count of 224."""
        return cls.new_iterated(DEFAULT_HASH, 224, rng)

    @classmethod
    def new_iterated(cls, hash_id: int, count: int, rng=None) -> StringToKey:
        """Iterated and salted with a fresh random salt.

        ``rng`` may be any object with ``randbytes``; the system source is used
        when it is omitted.
        """
        salt = rng.randbytes(SALT_LENGTH) if rng is not None else secrets.token_bytes(SALT_LENGTH)
        return cls(StringToKeyType.ITERATED_AND_SALTED, hash_id, salt, count)

    def iteration_count(self) -> int | None:
        """Decode the coded count into the number of octets to hash."""
        if self.count is None:
            return None
        c = self.count
        return (16 + (c & 15)) << ((c >> 4) + EXPBIAS)

    def _require_salt(self) -> bytes:
        if self.salt is None:
            raise ValueError("missing salt")
        return self.salt

    def derive_key(self, passphrase: str, key_size: int) -> bytes:
        """Derive ``key_size`` bytes of key material from ``passphrase``."""
        if key_size < 0:
            raise ValueError("key size must not be negative")
        pw = passphrase.encode("utf-8")
        digest_size = _new_hasher(self.hash_id).digest_size
        rounds = math.ceil(key_size / digest_size)
        key = bytearray()

        for round_no in range(rounds):
            hasher = _new_hasher(self.hash_id)
            if round_no:
                hasher.update(bytes(round_no))

            if self.typ is StringToKeyType.SIMPLE:
                hasher.update(pw)
            elif self.typ is StringToKeyType.SALTED:
                hasher.update(self._require_salt())
                hasher.update(pw)
            elif self.typ is StringToKeyType.ITERATED_AND_SALTED:
                salt = self._require_salt()
                count = self.iteration_count()
                if count is None:
                    raise ValueError("missing count")
                data_size = len(salt) + len(pw)
                count = max(count, data_size)
                while count > data_size:
                    hasher.update(salt)
                    hasher.update(pw)
                    count -= data_size
                if count < len(salt):
                    hasher.update(salt[:count])
                else:
                    hasher.update(salt)
                    hasher.update(pw[: count - len(salt)])
            else:
                raise ValueError(f"S2K {self.typ.name} is not available")

            key.extend(hasher.digest()[: key_size - len(key)])

        return bytes(key)

    def to_writer(self, writer) -> None:
        writer.write(bytes([int(self.typ), self.hash_id]))
        if self.salt is not None:
            writer.write(self.salt)
        if self.count is not None:
            writer.write(bytes([self.count]))

    def to_bytes(self) -> bytes:
        buf = io.BytesIO()
        self.to_writer(buf)
        return buf.getvalue()


def _take(data: bytes, count: int) -> tuple[bytes, bytes]:
    if len(data) < count:
        raise IncompleteError(count)
    return data[count:], data[:count]


def s2k_parser(data: bytes) -> tuple[bytes, StringToKey]:
    """Parse a string-to-key specifier; return ``(rest, specifier)``."""
    rest, head = _take(bytes(data), 1)
    try:
        typ = StringToKeyType(head[0])
    except ValueError as exc:
        raise ParseError(f"unknown S2K type {head[0]}") from exc
    rest, head = _take(rest, 1)
    hash_id = head[0]
    if hash_id not in _KNOWN_HASH_IDS:
        raise ParseError(f"unknown hash algorithm {hash_id}")
    salt = None
    count = None
    if typ.has_salt:
        rest, salt = _take(rest, SALT_LENGTH)
    if typ.has_count:
        rest, head = _take(rest, 1)
        count = head[0]
    return rest, StringToKey(typ, hash_id, salt, count)