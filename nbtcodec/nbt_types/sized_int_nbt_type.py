# Copyright 2025 Hathor Labs
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

from __future__ import annotations

from typing import Any, Callable, ClassVar

from typing_extensions import Self, override

from nbtcodec.exception import TypeMismatchError, UnsupportedTypeError
from nbtcodec.nbt_types.nbt_type import NBTType
from nbtcodec.serialization import Deserializer, Serializer
from nbtcodec.serialization.encoding.int import decode_int, encode_int
from nbtcodec.tag_type import TagType
from nbtcodec.types import Byte, Int, Long, Short
from nbtcodec.utils.typing import is_subclass

# (byte size, signed) of each integer tag type
INT_TAG_FORMATS: dict[TagType, tuple[int, bool]] = {
    TagType.BYTE: (1, False),
    TagType.SHORT: (2, True),
    TagType.INT: (4, True),
    TagType.LONG: (8, True),
}


def decode_int_payload(deserializer: Deserializer, tag_type: TagType) -> int:
    """ Decode the payload of any integer tag type."""
    length, signed = INT_TAG_FORMATS[tag_type]
    return decode_int(deserializer, length=length, signed=signed)


class _SizedIntNBTType(NBTType[int]):
    """ Base class for classes that represent `int` values written with one of the integer tag types.

    Decoding accepts any integer tag type that is not wider than this one, and the result is built with the class the
    instance was made from: `Short` for `Short`, plain `int` for `int`, the enum for an `IntEnum`, ... A plain `int`
    target takes every integer tag type, `Long` included, but is still written as an Int.
    """
    __slots__ = ('_class',)

    # XXX: subclass must define these values:
    _tag_type: ClassVar[TagType]
    _default_class: ClassVar[type[int]]

    _class: Callable[[int], int]

    def __init__(self, class_: Callable[[int], int] | None = None) -> None:
        self._class = class_ if class_ is not None else self._default_class

    @classmethod
    def _byte_size(cls) -> int:
        return INT_TAG_FORMATS[cls._tag_type][0]

    @classmethod
    def _signed(cls) -> bool:
        return INT_TAG_FORMATS[cls._tag_type][1]

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, type_map: NBTType.TypeMap) -> Self:
        if not is_subclass(type_, int):
            raise UnsupportedTypeError('expected int type')
        return cls(type_)

    @override
    def accepts(self, tag_type: TagType, /) -> bool:
        if not tag_type.is_integer():
            return False
        # the builtin int is unbounded, it can hold any integer tag
        return self._class is int or tag_type <= self._tag_type

    @override
    def zero(self) -> int:
        return self._class(0)

    @override
    def _check_value(self, value: int, /, *, deep: bool) -> None:
        if not isinstance(value, int):
            raise TypeMismatchError(f'expected integer, got {type(value).__name__}')

    @override
    def _serialize(self, serializer: Serializer, value: int, /) -> None:
        encode_int(serializer, value, length=self._byte_size(), signed=self._signed())

    @override
    def _deserialize(self, deserializer: Deserializer, tag_type: TagType, /) -> int:
        return self._class(decode_int_payload(deserializer, tag_type))

    @override
    def __repr__(self) -> str:
        return f'{type(self).__name__}({getattr(self._class, "__name__", self._class)})'


class ByteNBTType(_SizedIntNBTType):
    _tag_type = TagType.BYTE
    _default_class = Byte


class ShortNBTType(_SizedIntNBTType):
    _tag_type = TagType.SHORT
    _default_class = Short


class IntNBTType(_SizedIntNBTType):
    _tag_type = TagType.INT
    _default_class = Int


class LongNBTType(_SizedIntNBTType):
    _tag_type = TagType.LONG
    _default_class = Long
