import math

import pytest

from nbtcodec.serialization import Deserializer, Serializer
from nbtcodec.serialization.encoding.float import decode_float, encode_float
from nbtcodec.types import Double, Float


@pytest.mark.parametrize('length', [4, 8])
@pytest.mark.parametrize('value', [0.0, -0.0, 1.5, -2.25, math.inf, -math.inf])
def test_float_exact_values(length: int, value: float) -> None:
    se = Serializer.build_bytes_serializer()
    encode_float(se, value, length=length)
    data = bytes(se.finalize())
    assert len(data) == length

    de = Deserializer.build_bytes_deserializer(data)
    result = decode_float(de, length=length)
    de.finalize()
    assert result == value
    assert math.copysign(1.0, result) == math.copysign(1.0, value)


def test_float_nan() -> None:
    se = Serializer.build_bytes_serializer()
    encode_float(se, math.nan, length=4)
    de = Deserializer.build_bytes_deserializer(bytes(se.finalize()))
    assert math.isnan(decode_float(de, length=4))


def test_float_is_rounded_on_construction() -> None:
    value = Float(0.1)
    assert value != 0.1
    assert value == Float(float(value))

    se = Serializer.build_bytes_serializer()
    encode_float(se, value, length=4)
    de = Deserializer.build_bytes_deserializer(bytes(se.finalize()))
    assert decode_float(de, length=4) == value


def test_float_out_of_range() -> None:
    with pytest.raises(ValueError):
        Float(1e39)

    se = Serializer.build_bytes_serializer()
    with pytest.raises(ValueError, match='does not fit in a 4-byte float'):
        encode_float(se, 1e39, length=4)


def test_double_is_float() -> None:
    assert Double(0.1) == 0.1
    assert repr(Double(2.0)) == 'Double(2.0)'
