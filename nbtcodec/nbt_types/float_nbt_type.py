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
from nbtcodec.serialization.encoding.float import decode_float, encode_float
from nbtcodec.tag_type import TagType
from nbtcodec.types import Double, Float
from nbtcodec.utils.typing import is_subclass

_FLOAT_TAG_LENGTHS = {
    TagType.FLOAT: 4,
    TagType.DOUBLE: 8,
}


class _FloatNBTType(NBTType[float]):
    """ Base class for the Float and Double tag types.
    """
    __slots__ = ('_class',)

    # XXX: subclass must define these values:
    _tag_type: ClassVar[TagType]
    _accepted_tag_types: ClassVar[frozenset[TagType]]
    _default_class: ClassVar[type[float]]

    _class: Callable[[float], float]

    def __init__(self, class_: Callable[[float], float] | None = None) -> None:
        self._class = class_ if class_ is not None else self._default_class

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, type_map: NBTType.TypeMap) -> Self:
        if not is_subclass(type_, float):
            raise UnsupportedTypeError('expected float type')
        return cls(type_)

    @override
    def accepts(self, tag_type: TagType, /) -> bool:
        return tag_type in self._accepted_tag_types

    @override
    def zero(self) -> float:
        return self._class(0.0)

    @override
    def _check_value(self, value: float, /, *, deep: bool) -> None:
        # int is fine, bool is not
        if not isinstance(value, (float, int)) or isinstance(value, bool):
            raise TypeMismatchError(f'expected float, got {type(value).__name__}')

    @override
    def _serialize(self, serializer: Serializer, value: float, /) -> None:
        encode_float(serializer, value, length=_FLOAT_TAG_LENGTHS[self._tag_type])

    @override
    def _deserialize(self, deserializer: Deserializer, tag_type: TagType, /) -> float:
        return self._class(decode_float(deserializer, length=_FLOAT_TAG_LENGTHS[tag_type]))


class FloatNBTType(_FloatNBTType):
    """ 32-bit float, a Double payload is also accepted and rounded when decoding."""
    _tag_type = TagType.FLOAT
    _accepted_tag_types = frozenset({TagType.FLOAT, TagType.DOUBLE})
    _default_class = Float


class DoubleNBTType(_FloatNBTType):
    _tag_type = TagType.DOUBLE
    _accepted_tag_types = frozenset({TagType.DOUBLE})
    _default_class = Double
