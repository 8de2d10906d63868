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

from functools import cache
from typing import Any

from typing_extensions import Self, override

from nbtcodec.exception import UnsupportedTypeError
from nbtcodec.nbt_types.nbt_type import NBTType
from nbtcodec.serialization import Deserializer, Serializer
from nbtcodec.serialization.compound_encoding.compound import encode_compound
from nbtcodec.tag_type import TagType
from nbtcodec.types import Byte, Double, Float, Int, IntArray, Long, LongArray, Short

# the class each tag type decodes into when the target is `Any`
NATIVE_TYPES: dict[TagType, Any] = {
    TagType.BYTE: Byte,
    TagType.SHORT: Short,
    TagType.INT: Int,
    TagType.LONG: Long,
    TagType.FLOAT: Float,
    TagType.DOUBLE: Double,
    TagType.BYTE_ARRAY: bytes,
    TagType.STRING: str,
    TagType.LIST: list,
    TagType.COMPOUND: dict,
    TagType.INT_ARRAY: IntArray,
    TagType.LONG_ARRAY: LongArray,
}


@cache
def _get_native_nbt_type(tag_type: TagType) -> NBTType:
    from nbtcodec.nbt_types import make_nbt_type_for_type
    return make_nbt_type_for_type(NATIVE_TYPES[tag_type])


class AnyNBTType(NBTType[Any]):
    """ Represents a dynamically typed value.

    Values are written according to their runtime type, `None` is written as an empty compound. When reading, the
    value is built with the class that matches the tag type (see `NATIVE_TYPES`), so every value keeps its size:

    >>> from nbtcodec.serialization import Deserializer
    >>> nbt_type = AnyNBTType()
    >>> nbt_type.deserialize(Deserializer.build_bytes_deserializer(bytes.fromhex('04d2')), TagType.SHORT)
    Short(1234)
    >>> nbt_type.get_tag_type(Long(1)).name
    'LONG'
    """

    # XXX: this is only the static tag type, the tag type of an actual value comes from `get_tag_type(value)`
    _tag_type = TagType.COMPOUND

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, type_map: NBTType.TypeMap) -> Self:
        if type_ is not Any:
            raise UnsupportedTypeError('expected Any')
        return cls()

    @override
    def get_tag_type(self, value: Any, /) -> TagType:
        if value is None:
            return TagType.COMPOUND
        from nbtcodec.nbt_types import make_nbt_type_for_value
        return make_nbt_type_for_value(value).get_tag_type(value)

    @override
    def accepts(self, tag_type: TagType, /) -> bool:
        return tag_type in NATIVE_TYPES

    @override
    def zero(self) -> Any:
        return None

    @override
    def _check_value(self, value: Any, /, *, deep: bool) -> None:
        if value is None:
            return
        from nbtcodec.nbt_types import make_nbt_type_for_value
        nbt_type = make_nbt_type_for_value(value)
        if deep:
            nbt_type._check_value(value, deep=True)

    @override
    def _serialize(self, serializer: Serializer, value: Any, /) -> None:
        if value is None:
            encode_compound(serializer, (), self.serialize)
            return
        from nbtcodec.nbt_types import make_nbt_type_for_value
        make_nbt_type_for_value(value).serialize(serializer, value)

    @override
    def _deserialize(self, deserializer: Deserializer, tag_type: TagType, /) -> Any:
        return _get_native_nbt_type(tag_type).deserialize(deserializer, tag_type)
