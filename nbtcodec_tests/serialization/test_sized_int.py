import struct

import pytest

from nbtcodec.serialization import Deserializer, Serializer
from nbtcodec.serialization.encoding.int import decode_int, encode_int
from nbtcodec.types import Byte, Int, Long, Short


@pytest.mark.parametrize('cls,length,signed,fmt', [
    (Byte, 1, False, '>B'),
    (Short, 2, True, '>h'),
    (Int, 4, True, '>i'),
    (Long, 8, True, '>q'),
])
def test_sized_int_bounds(cls, length, signed, fmt) -> None:
    for value in (cls.lower_bound(), cls.upper_bound()):
        se = Serializer.build_bytes_serializer()
        encode_int(se, cls(value), length=length, signed=signed)
        data = bytes(se.finalize())
        assert data == struct.pack(fmt, value)

        de = Deserializer.build_bytes_deserializer(data)
        assert decode_int(de, length=length, signed=signed) == value
        de.finalize()

    with pytest.raises(ValueError):
        cls(cls.upper_bound() + 1)
    with pytest.raises(ValueError):
        cls(cls.lower_bound() - 1)


def test_int_overflow() -> None:
    se = Serializer.build_bytes_serializer()
    with pytest.raises(ValueError, match='does not fit in 1 unsigned byte'):
        encode_int(se, 256, length=1, signed=False)
    with pytest.raises(ValueError, match='does not fit in 2 signed byte'):
        encode_int(se, -2**15 - 1, length=2, signed=True)


def test_sized_int_is_int() -> None:
    assert Short(3) + 1 == 4
    assert hash(Long(7)) == hash(7)
    assert {Int(1): 'a'}[1] == 'a'
    assert repr(Byte(255)) == 'Byte(255)'
