import pytest

from nbtcodec.serialization import BadDataError, Deserializer, OutOfDataError, Serializer
from nbtcodec.serialization.compound_encoding.array import decode_count
from nbtcodec.serialization.encoding.bytes import decode_bytes, encode_bytes


def test_bytes_round_trip() -> None:
    se = Serializer.build_bytes_serializer()
    encode_bytes(se, b'\x00\x01\xff')
    data = bytes(se.finalize())
    assert data == b'\x00\x00\x00\x03\x00\x01\xff'

    de = Deserializer.build_bytes_deserializer(data)
    assert decode_bytes(de) == b'\x00\x01\xff'
    de.finalize()


def test_bytes_negative_length() -> None:
    de = Deserializer.build_bytes_deserializer(b'\xff\xff\xff\xfe')
    with pytest.raises(BadDataError):
        decode_bytes(de)


def test_bytes_truncated() -> None:
    de = Deserializer.build_bytes_deserializer(b'\x00\x00\x00\x04ab')
    with pytest.raises(OutOfDataError, match='wanted 4, got 2'):
        decode_bytes(de)


def test_count_clamping() -> None:
    de = Deserializer.build_bytes_deserializer(b'\x80\x00\x00\x00')
    assert decode_count(de) == 0

    de = Deserializer.build_bytes_deserializer(b'\x80\x00\x00\x00')
    with pytest.raises(BadDataError, match='negative length'):
        decode_count(de, clamp=False)
