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

from typing import Any, Callable

from typing_extensions import Self, override

from nbtcodec.exception import TypeMismatchError, UnsupportedTypeError
from nbtcodec.nbt_types.nbt_type import NBTType
from nbtcodec.serialization import Deserializer, Serializer
from nbtcodec.serialization.encoding.utf8 import decode_utf8, encode_utf8
from nbtcodec.tag_type import TagType
from nbtcodec.utils.typing import is_subclass


class StrNBTType(NBTType[str]):
    """ Represents `str` values and subclasses of it, for example an identifier type that is a `str` subclass.
    """
    __slots__ = ('_class',)

    _tag_type = TagType.STRING
    _class: Callable[[str], str]

    def __init__(self, class_: Callable[[str], str] = str) -> None:
        self._class = class_

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, type_map: NBTType.TypeMap) -> Self:
        if not is_subclass(type_, str):
            raise UnsupportedTypeError('expected str type')
        return cls(type_)

    @override
    def zero(self) -> str:
        return self._class('')

    @override
    def _check_value(self, value: str, /, *, deep: bool) -> None:
        if not isinstance(value, str):
            raise TypeMismatchError(f'expected str, got {type(value).__name__}')

    @override
    def _serialize(self, serializer: Serializer, value: str, /) -> None:
        encode_utf8(serializer, value)

    @override
    def _deserialize(self, deserializer: Deserializer, tag_type: TagType, /) -> str:
        value = decode_utf8(deserializer)
        return value if self._class is str else self._class(value)
