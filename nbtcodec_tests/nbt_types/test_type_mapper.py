from collections.abc import Sequence
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, NewType, Optional, OrderedDict

import pytest

from nbtcodec import tag_type_of
from nbtcodec.exception import InvalidKeyTypeError, UnsupportedTypeError
from nbtcodec.nbt_types import (
    ByteArrayNBTType,
    IntArrayNBTType,
    ListNBTType,
    make_nbt_type_for_type,
    make_nbt_type_for_value,
)
from nbtcodec.tag_type import TagType
from nbtcodec.types import Byte, Double, Float, Int, IntArray, Long, LongArray, Short

ItemId = NewType('ItemId', str)


class Color(IntEnum):
    RED = 1
    GREEN = 2


@dataclass
class Point:
    x: Int
    y: Int


@pytest.mark.parametrize('type_,tag_type', [
    (Byte, TagType.BYTE),
    (bool, TagType.BYTE),
    (Short, TagType.SHORT),
    (Int, TagType.INT),
    (int, TagType.INT),
    (Color, TagType.INT),
    (Long, TagType.LONG),
    (Float, TagType.FLOAT),
    (Double, TagType.DOUBLE),
    (float, TagType.DOUBLE),
    (str, TagType.STRING),
    (ItemId, TagType.STRING),
    (bytes, TagType.BYTE_ARRAY),
    (bytearray, TagType.BYTE_ARRAY),
    (list[Byte], TagType.BYTE_ARRAY),
    (IntArray, TagType.INT_ARRAY),
    (list[Int], TagType.INT_ARRAY),
    (list[int], TagType.INT_ARRAY),
    (tuple[int, ...], TagType.INT_ARRAY),
    (Sequence[Int], TagType.INT_ARRAY),
    (LongArray, TagType.LONG_ARRAY),
    (list[Long], TagType.LONG_ARRAY),
    (list[bool], TagType.LIST),
    (list[Short], TagType.LIST),
    (list[Color], TagType.LIST),
    (list[str], TagType.LIST),
    (list[list[int]], TagType.LIST),
    (tuple[str, str], TagType.LIST),
    (list, TagType.LIST),
    (dict, TagType.COMPOUND),
    (dict[str, int], TagType.COMPOUND),
    (dict[ItemId, Any], TagType.COMPOUND),
    (OrderedDict[str, str], TagType.COMPOUND),
    (Point, TagType.COMPOUND),
    (Any, TagType.COMPOUND),
    # not supported:
    (complex, TagType.UNKNOWN),
    (set[int], TagType.UNKNOWN),
    (dict[int, str], TagType.UNKNOWN),
    (tuple[int, str], TagType.UNKNOWN),
    (Optional[int], TagType.UNKNOWN),
    (int | str, TagType.UNKNOWN),
    ('int', TagType.UNKNOWN),
])
def test_tag_type_of(type_: Any, tag_type: TagType) -> None:
    assert tag_type_of(type_) is tag_type


def test_unsupported_types_raise() -> None:
    with pytest.raises(UnsupportedTypeError):
        make_nbt_type_for_type(complex)
    with pytest.raises(UnsupportedTypeError):
        make_nbt_type_for_type(tuple[int, str])
    with pytest.raises(InvalidKeyTypeError):
        make_nbt_type_for_type(dict[int, str])


def test_prefer_arrays() -> None:
    assert isinstance(make_nbt_type_for_type(list[Int]), IntArrayNBTType)
    assert isinstance(make_nbt_type_for_type(list[Int], prefer_arrays=False), ListNBTType)
    # only the outer sequence is affected
    nbt_type = make_nbt_type_for_type(list[list[Byte]], prefer_arrays=False)
    assert isinstance(nbt_type, ListNBTType)
    assert isinstance(nbt_type.item, ByteArrayNBTType)


def test_fixed_size_tuple() -> None:
    nbt_type = make_nbt_type_for_type(tuple[Short, Short, Short])
    assert isinstance(nbt_type, ListNBTType)
    assert nbt_type.size == 3
    assert nbt_type.zero() == (0, 0, 0)


def test_nbt_type_cache() -> None:
    assert make_nbt_type_for_type(list[str]) is make_nbt_type_for_type(list[str])


def test_value_types() -> None:
    assert make_nbt_type_for_value(Short(1)).get_tag_type(Short(1)) is TagType.SHORT
    assert make_nbt_type_for_value(1).get_tag_type(1) is TagType.INT
    assert make_nbt_type_for_value(True).get_tag_type(True) is TagType.BYTE
    assert make_nbt_type_for_value(1.0).get_tag_type(1.0) is TagType.DOUBLE
    assert make_nbt_type_for_value(b'').get_tag_type(b'') is TagType.BYTE_ARRAY
    assert make_nbt_type_for_value(IntArray()).get_tag_type(IntArray()) is TagType.INT_ARRAY
    # a plain list is dynamically typed, it's always a List
    assert make_nbt_type_for_value([1, 2]).get_tag_type([1, 2]) is TagType.LIST
    assert make_nbt_type_for_value(Point(Int(0), Int(0))).tag_type is TagType.COMPOUND
    with pytest.raises(UnsupportedTypeError):
        make_nbt_type_for_value(object())
