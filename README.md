# pgptypes

Low-level OpenPGP (RFC 4880) data types in pure Python, with no
dependencies outside the standard library.

## Modules

- `pgptypes.util` – wire helpers:
  - `packet_length()` parses a new-format packet length (one, two or
    five octets) and returns `(rest, length)`;
    `write_packet_len()` writes the raw length and `write_packet_length()`
    also writes the `0xFF` prefix for lengths of 8384 and above.
  - `is_base64_token()`, `base64_token()` and `prefixed()` scan base64
    body bytes (`prefixed()` first skips leading `\n` / `\r\n`).
  - `bit_size()` and `strip_leading_zeros()` for big-endian numbers.
  - `write_string()` / `read_string()` map characters to single bytes
    and back (Latin-1 style).
  - `write_all()` writes a whole buffer, retrying on short or interrupted
    writes; `TeeWriter` sends every write both to a hasher (any object
    with `update()`) and to another writer.
  - `ParseError` for malformed input and its subclass `IncompleteError`
    (with a `needed` attribute) for input that ends too early.
- `pgptypes.mpi` – multi-precision integers. `mpi()` / `Mpi.parse()`
  read the two-octet bit count and the value (rejecting values longer
  than `MAX_EXTERN_MPI_BITS` octets); `Mpi.from_int()`, `Mpi.from_raw()`,
  `Mpi.to_int()`, `Mpi.to_bytes()` and `Mpi.to_writer()` build and encode
  values.
- `pgptypes.identifiers` – `KeyId` (exactly eight octets, otherwise
  `ValueError`), `CompressionAlgorithm`, `RevocationKeyClass` and
  `RevocationKey`.
- `pgptypes.packet` – packet `Tag`s, header formats `Version.OLD` /
  `Version.NEW` with `Version.write_header()`, `KeyVersion`,
  `PacketLength` (with `PacketLengthKind` and `PacketLength.fixed()`) and
  the raw `Packet` record.
- `pgptypes.s2k` – string-to-key specifiers: `StringToKeyType`,
  `s2k_parser()`, `StringToKey.new_default()` /
  `StringToKey.new_iterated()` (random salt, from an optional `rng` with
  `randbytes()`), `iteration_count()` to decode the coded count,
  `derive_key()` for the simple, salted and iterated-and-salted methods,
  and `to_bytes()` / `to_writer()`. Hash algorithm ids map to `hashlib`
  (1 MD5, 2 SHA-1, 3 RIPEMD-160, 8 SHA-256, 9 SHA-384, 10 SHA-512,
  11 SHA-224, 12 SHA3-256, 14 SHA3-512).
- `pgptypes.encrypted_secret` – `EncryptedSecretParams`, its two-octet
  checksum (`calculate_simple_checksum()`, the sum of all octets modulo
  65536), `compare_checksum()` raising `ChecksumError`, and encoding with
  `to_bytes()` / `to_writer()`. String-to-key ids below 254 carry a
  checksum; ids 254 and 255 write the algorithm and the S2K specifier.

## Installation

```
pip install pgptypes
```

To run the test suite:

```
pip install "pgptypes[test]"
pytest
```

## Examples

Writing packet lengths:

```python
import io
from pgptypes.util import write_packet_len, write_packet_length

buf = io.BytesIO()
write_packet_len(1173, buf)
assert buf.getvalue() == bytes.fromhex("c3d5")

buf = io.BytesIO()
write_packet_length(12870, buf)
assert buf.getvalue() == bytes.fromhex("ff00003246")
```

Writing a packet header:

```python
import io
from pgptypes.packet import Tag, Version

buf = io.BytesIO()
Version.NEW.write_header(buf, Tag.SIGNATURE, 302)
assert buf.getvalue() == bytes.fromhex("c2c06e")
```

Encoding and decoding an MPI:

```python
from pgptypes.mpi import Mpi

encoded = Mpi.from_int(511).to_bytes()
assert encoded == bytes([0x00, 0x09, 0x01, 0xFF])
rest, value = Mpi.parse(encoded)
assert rest == b"" and value.to_int() == 511
```

Deriving key material with a string-to-key specifier:

```python
from pgptypes.s2k import StringToKey, s2k_parser

s2k = StringToKey.new_default()
rest, parsed = s2k_parser(s2k.to_bytes())
assert parsed == s2k

passphrase = "password"
key = s2k.derive_key(passphrase, 32)
assert len(key) == 32
```

Key IDs are exactly eight octets; anything else is rejected:

```python
from pgptypes.identifiers import KeyId

key_id = KeyId.from_slice(bytes(range(8)))
assert key_id.to_bytes() == bytes(range(8))
```

## What this package does not do

It handles encodings and key derivation only. It does not decrypt or
encrypt secret key material, does not parse or build whole keys,
signatures or messages, and does not sign or verify anything.