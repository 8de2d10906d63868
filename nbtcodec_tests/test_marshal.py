import io
from dataclasses import dataclass
from typing import Any

import pytest

from nbtcodec import (
    Byte,
    Int,
    IntArray,
    InvalidKeyTypeError,
    Long,
    Serializer,
    Short,
    TypeMismatchError,
    UnsupportedTypeError,
    dump,
    dumps,
    loads,
    marshal,
    nbt_field,
)

# a compound with a Byte and a String, the classic example from the format description
HELLO_WORLD = (
    b'\x0a\x00\x00'
    b'\x01\x00\x07ByteTag\xff'
    b'\x08\x00\x09StringTag\x00\x0chello, world'
    b'\x00'
)


@dataclass
class HelloWorld:
    byte_tag: Byte = nbt_field(name='ByteTag')
    string_tag: str = nbt_field(name='StringTag')


@dataclass
class Scores:
    values: list[Int] = nbt_field(default_factory=list)
    values_as_list: list[Int] = nbt_field(default_factory=list, as_list=True)


@dataclass
class RawData:
    data: bytes = nbt_field(default=b'', as_list=True)
    ids: IntArray = nbt_field(default_factory=IntArray, as_list=True)


def test_marshal_record() -> None:
    assert dumps('', HelloWorld(Byte(0xff), 'hello, world')) == HELLO_WORLD


def test_marshal_dict() -> None:
    assert dumps('', {'ByteTag': Byte(0xff), 'StringTag': 'hello, world'}) == HELLO_WORLD


def test_marshal_scalars() -> None:
    assert dumps('a', Byte(1)) == b'\x01\x00\x01a\x01'
    assert dumps('a', True) == b'\x01\x00\x01a\x01'
    assert dumps('a', Short(-1)) == b'\x02\x00\x01a\xff\xff'
    assert dumps('a', 1) == b'\x03\x00\x01a\x00\x00\x00\x01'
    assert dumps('a', Long(1)) == b'\x04\x00\x01a' + b'\x00' * 7 + b'\x01'
    assert dumps('a', 1.0) == b'\x06\x00\x01a\x3f\xf0' + b'\x00' * 6
    assert dumps('a', 'b') == b'\x08\x00\x01a\x00\x01b'
    assert dumps('a', b'b') == b'\x07\x00\x01a\x00\x00\x00\x01b'


def test_marshal_with_type() -> None:
    assert dumps('a', 1, type_=Short) == b'\x02\x00\x01a\x00\x01'
    assert dumps('a', [1, 2], type_=list[Int]) == b'\x0b\x00\x01a\x00\x00\x00\x02\x00\x00\x00\x01\x00\x00\x00\x02'
    assert dumps('a', [1, 2], type_=list[Short]) == b'\x09\x00\x01a\x02\x00\x00\x00\x02\x00\x01\x00\x02'
    with pytest.raises(ValueError):
        dumps('a', 300, type_=Byte)
    with pytest.raises(TypeMismatchError):
        dumps('a', 'text', type_=int)


def test_marshal_empty_list() -> None:
    assert dumps('list', [], type_=list[str]) == b'\x09\x00\x04list\x00\x00\x00\x00\x00'
    assert dumps('list', []) == b'\x09\x00\x04list\x00\x00\x00\x00\x00'


def test_marshal_dynamic_list() -> None:
    # a plain list is a List even if it only holds Int values
    assert dumps('', [Int(1)])[0] == 0x09
    assert dumps('', IntArray([Int(1)]))[0] == 0x0b


def test_marshal_as_list() -> None:
    data = dumps('', Scores([Int(1)], [Int(1)]))
    assert data == (
        b'\x0a\x00\x00'
        b'\x0b\x00\x06values\x00\x00\x00\x01\x00\x00\x00\x01'
        b'\x09\x00\x0evalues_as_list\x03\x00\x00\x00\x01\x00\x00\x00\x01'
        b'\x00'
    )


def test_marshal_array_classes_as_list() -> None:
    data = dumps('', RawData(b'\x01\x02', IntArray([Int(7)])))
    assert data == (
        b'\x0a\x00\x00'
        b'\x09\x00\x04data\x01\x00\x00\x00\x02\x01\x02'
        b'\x09\x00\x03ids\x03\x00\x00\x00\x01\x00\x00\x00\x07'
        b'\x00'
    )
    name, value = loads(data, RawData)
    assert value == RawData(b'\x01\x02', IntArray([Int(7)]))
    assert type(value.data) is bytes
    assert type(value.ids) is IntArray

    # without the option the same classes are written as arrays
    assert dumps('', {'data': b'\x01\x02'}) == b'\x0a\x00\x00\x07\x00\x04data\x00\x00\x00\x02\x01\x02\x00'


def test_marshal_none() -> None:
    assert dumps('', None) == b'\x0a\x00\x00\x00'
    assert dumps('', None, type_=dict[str, Any]) == b'\x0a\x00\x00\x00'
    assert dumps('', {'a': None}) == b'\x0a\x00\x00\x0a\x00\x01a\x00\x00'


def test_marshal_invalid_keys() -> None:
    with pytest.raises(InvalidKeyTypeError):
        dumps('', {1: 'a'})
    with pytest.raises(InvalidKeyTypeError):
        dumps('', {}, type_=dict[int, str])


def test_marshal_unsupported() -> None:
    with pytest.raises(UnsupportedTypeError):
        dumps('', object())
    with pytest.raises(UnsupportedTypeError):
        dumps('', {'a': {1, 2}})
    with pytest.raises(TypeMismatchError):
        dumps('', [1, 'a'])


def test_marshal_to_serializer() -> None:
    se = Serializer.build_bytes_serializer()
    marshal(se, 'a', Byte(1))
    marshal(se, 'b', Byte(2))
    assert bytes(se.finalize()) == b'\x01\x00\x01a\x01\x01\x00\x01b\x02'


def test_dump() -> None:
    fp = io.BytesIO()
    dump(fp, '', HelloWorld(Byte(0xff), 'hello, world'))
    assert fp.getvalue() == HELLO_WORLD
