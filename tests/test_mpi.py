import io

import pytest
from hypothesis import given
from hypothesis import strategies as st

from pgptypes.mpi import Mpi, mpi
from pgptypes.util import IncompleteError

RAW_1 = (
    "b4a71b058ac8aa1ddc453ab2663331c38f7645542815ac189a9af56d0e07a615469d3e08849650e03026d4"
    "9259423cf00d089931cd700fd3a6e940bf83c81406e142a4b0a86f00738c7e1a9ff1b709f6bccc6cf900d0"
    "113a8e62e53d63be0a05105755b9efc6a4098c362c73fb422d40187d8e2382e88624d72caffceb13cec8fa"
    "0079c7d17883a46a1336471ab5be8cbb555c5d330d7fadb43318fa73b584edac312fa3302886bb5d04a05d"
    "a3be2676c1fb94b3cf5c19d598659c3a7728ebab95f71721b662ac46aa9910726fe576d438f789c5ce2448"
    "f54546f254da814bcae1c35ee44b171e870ffa6403167a10e68573bdf155549274b431ff8e2418b627"
)

RAW_2_BODY = (
    "e57192fa7bd6abd7d01331f0411eebff4651290af1329369cc3bb3b8ccbd7ba6e352400c3f64f637967e24"
    "524921ee04f1e0a79168781f0bec9029e34c8a1fb1c328a4b8d74c31429616a6ff4707bb56b71ab6664324"
    "3087c8ff0d0c4883b3473c56deece9a83dbd06eef09fac3558003ae45f8898b8a9490aa79672eebdd7d985"
    "d051d62698f2da7eee33ba740e30fc5a93c3f16ca1490dfd62b84ba016c9da7c087a28a4e97d8af79c6b63"
    "8bc22f20a8b5953bb83caa3dddaaf1d0dc15a3f7ed47870174af74e5308b856138771a10019fe4374389eb"
    "89d2280776e33fa2dd3526cec35cd86a9cf6c94253fe00c4b8a87a36451745116456833bb1a237"
)

FIXTURES = [
    (RAW_1, "0800" + RAW_1),
    ("00" + RAW_2_BODY, "07f0" + RAW_2_BODY),
]


def test_mpi_decode_one():
    assert mpi(bytes([0x00, 0x01, 0x01])) == (b"", Mpi(b"\x01"))


def test_mpi_decode_511():
    assert mpi(bytes([0x00, 0x09, 0x01, 0xFF])) == (b"", Mpi(bytes([0x01, 0xFF])))


def test_mpi_decode_large():
    value = bytes([0x80]) + bytes(30) + bytes([0x07])
    assert mpi(b"\x01\x00" + value) == (b"", Mpi(value))


@pytest.mark.parametrize("raw, encoded", FIXTURES)
def test_bignum_mpi(raw, encoded):
    n_big = int.from_bytes(bytes.fromhex(raw), "big")
    n_mpi = Mpi.from_int(n_big)
    n_encoded = n_mpi.to_bytes()
    assert n_encoded == bytes.fromhex(encoded)

    rest, n_big2 = mpi(n_encoded)
    assert rest == b""
    assert n_big2.to_int() == n_big


def test_mpi_strips_leading_zeros_when_parsing():
    assert mpi(b"\x00\x10\x00\x05rest") == (b"rest", Mpi(b"\x05"))


def test_parse_classmethod_matches_function():
    data = bytes([0x00, 0x09, 0x01, 0xFF, 0xAA])
    assert Mpi.parse(data) == mpi(data)


@pytest.mark.parametrize("data", [b"", b"\x00", b"\x00\x09\x01"])
def test_mpi_incomplete(data):
    with pytest.raises(IncompleteError):
        mpi(data)


def test_from_raw_strips():
    assert Mpi.from_raw(b"\x00\x00\x01\x02").data == b"\x01\x02"


def test_constructor_keeps_bytes():
    assert Mpi(bytearray(b"\x00\x01")).data == b"\x00\x01"


def test_from_int_zero_and_negative():
    assert Mpi.from_int(0).data == b"\x00"
    with pytest.raises(ValueError):
        Mpi.from_int(-1)


def test_to_writer_writes_encoding():
    buf = io.BytesIO()
    Mpi(bytes([0x01, 0xFF])).to_writer(buf)
    assert buf.getvalue() == bytes([0x00, 0x09, 0x01, 0xFF])


def test_repr_is_hex():
    assert repr(Mpi(bytes([0x01, 0xFF]))) == "Mpi(01ff)"


@given(st.integers(min_value=1, max_value=2**4096))
def test_int_round_trip(value):
    encoded = Mpi.from_int(value).to_bytes()
    rest, parsed = mpi(encoded)
    assert rest == b""
    assert parsed.to_int() == value