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

from collections.abc import Sequence
from typing import Any, ClassVar

from typing_extensions import override

from nbtcodec.exception import UnsupportedTypeError
from nbtcodec.nbt_types.nbt_type import NBTType
from nbtcodec.nbt_types.sequence_nbt_type import _SequenceNBTType
from nbtcodec.nbt_types.sized_int_nbt_type import ByteNBTType, IntNBTType, LongNBTType, _SizedIntNBTType
from nbtcodec.nbt_types.utils import unwrap_new_type
from nbtcodec.serialization import Deserializer, Serializer
from nbtcodec.serialization.compound_encoding.array import encode_array
from nbtcodec.serialization.encoding.bytes import decode_bytes, encode_bytes
from nbtcodec.tag_type import ARRAY_ITEM_TAG_TYPE, TagType
from nbtcodec.types import Byte, Int, Long


class _ArrayNBTType(_SequenceNBTType[int]):
    """ Base class for the ByteArray, IntArray and LongArray tag types.

    The item type is one of the sized int types, it defines the class of each decoded item. The builder defines the
    class of the whole sequence.
    """

    # XXX: subclass must define these values:
    _tag_type: ClassVar[TagType]
    _item_nbt_type_class: ClassVar[type[_SizedIntNBTType]]

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, type_map: NBTType.TypeMap) -> NBTType:
        # this is only reached for the array classes themselves (bytes, IntArray, ...), `list[Int]` and alike are
        # built by ListNBTType
        if not isinstance(type_, type):
            raise UnsupportedTypeError(f'expected an array class, got {type_}')
        if not type_map.prefer_arrays:
            # a field with `as_list=True`, the items are written in a List but still decode into the array class
            from nbtcodec.nbt_types.list_nbt_type import ListNBTType
            return ListNBTType(cls._item_nbt_type_class(), type_)
        return cls(cls._item_nbt_type_class(), type_)

    @override
    def accepts(self, tag_type: TagType, /) -> bool:
        if tag_type is TagType.LIST:
            return True
        return tag_type.is_array() and self._item.accepts(ARRAY_ITEM_TAG_TYPE[tag_type])

    @override
    def _serialize(self, serializer: Serializer, value: Sequence[int], /) -> None:
        encode_array(serializer, value, self._item.serialize)

    @override
    def _deserialize(self, deserializer: Deserializer, tag_type: TagType, /) -> Sequence[int]:
        return self._build(self._read_items(deserializer, tag_type))


class ByteArrayNBTType(_ArrayNBTType):
    """ Represents `bytes`, `bytearray` and sequences of `Byte`.
    """
    _tag_type = TagType.BYTE_ARRAY
    _item_nbt_type_class = ByteNBTType

    @override
    def _serialize(self, serializer: Serializer, value: Sequence[int], /) -> None:
        if isinstance(value, (bytes, bytearray)):
            encode_bytes(serializer, value)
        else:
            super()._serialize(serializer, value)

    @override
    def _deserialize(self, deserializer: Deserializer, tag_type: TagType, /) -> Sequence[int]:
        if tag_type is TagType.BYTE_ARRAY and self._size is None and self._builder in (bytes, bytearray):
            return self._builder(decode_bytes(deserializer))
        return super()._deserialize(deserializer, tag_type)


class IntArrayNBTType(_ArrayNBTType):
    _tag_type = TagType.INT_ARRAY
    _item_nbt_type_class = IntNBTType


class LongArrayNBTType(_ArrayNBTType):
    _tag_type = TagType.LONG_ARRAY
    _item_nbt_type_class = LongNBTType


_ARRAY_NBT_TYPE_FOR_ITEM: dict[Any, type[_ArrayNBTType]] = {
    Byte: ByteArrayNBTType,
    Int: IntArrayNBTType,
    int: IntArrayNBTType,
    Long: LongArrayNBTType,
}


def get_array_nbt_type_class(item_type: Any) -> type[_ArrayNBTType] | None:
    """ The array type used for a sequence of the given item type, `None` if it has to be a List.

    Only exactly `Byte`, `Int` (or `int`) and `Long` items make an array, subclasses and `bool` don't.

    >>> get_array_nbt_type_class(Int).__name__
    'IntArrayNBTType'
    >>> get_array_nbt_type_class(bool) is None
    True
    """
    item_type = unwrap_new_type(item_type)
    try:
        return _ARRAY_NBT_TYPE_FOR_ITEM.get(item_type)
    except TypeError:
        # unhashable hint
        return None
