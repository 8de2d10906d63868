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

from typing import Any

from typing_extensions import Self, override

from nbtcodec.exception import TypeMismatchError, UnsupportedTypeError
from nbtcodec.nbt_types.nbt_type import NBTType
from nbtcodec.serialization import Deserializer, Serializer
from nbtcodec.serialization.encoding.bool import decode_bool, encode_bool
from nbtcodec.tag_type import TagType


class BoolNBTType(NBTType[bool]):
    """ Represents builtin `bool` values, they are a Byte tag that holds 1 or 0.
    """

    _tag_type = TagType.BYTE

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, type_map: NBTType.TypeMap) -> Self:
        if type_ is not bool:
            raise UnsupportedTypeError('expected bool type')
        return cls()

    @override
    def zero(self) -> bool:
        return False

    @override
    def _check_value(self, value: bool, /, *, deep: bool) -> None:
        if not isinstance(value, bool):
            raise TypeMismatchError(f'expected bool, got {type(value).__name__}')

    @override
    def _serialize(self, serializer: Serializer, value: bool, /) -> None:
        encode_bool(serializer, value)

    @override
    def _deserialize(self, deserializer: Deserializer, tag_type: TagType, /) -> bool:
        return decode_bool(deserializer)
