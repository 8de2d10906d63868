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

from collections.abc import Iterable, Mapping, MutableMapping
from typing import Any, Callable

from typing_extensions import Self, override

from nbtcodec.exception import InvalidKeyTypeError, TypeMismatchError, UnsupportedTypeError
from nbtcodec.nbt_types.nbt_type import NBTType
from nbtcodec.nbt_types.utils import pretty_type, unwrap_new_type
from nbtcodec.serialization import Deserializer, Serializer
from nbtcodec.serialization.compound_encoding.compound import decode_compound, encode_compound
from nbtcodec.tag_type import TagType
from nbtcodec.utils.typing import get_args, get_origin, is_subclass


class MapNBTType(NBTType[Mapping[str, Any]]):
    """ Represents a mapping with `str` keys as a Compound tag, each item is a named tag.

    A bare `dict` is the same as `dict[str, Any]`, with `Any` values the tag type of each item is taken from the value
    itself. Iteration order is kept when writing, but it isn't significant.
    """
    __slots__ = ('_value', '_builder')

    _tag_type = TagType.COMPOUND
    _value: NBTType[Any]
    _builder: Callable[[Iterable[tuple[str, Any]]], Mapping[str, Any]]

    def __init__(
        self,
        value: NBTType[Any],
        builder: Callable[[Iterable[tuple[str, Any]]], Mapping[str, Any]] = dict,
    ) -> None:
        self._value = value
        self._builder = builder

    @property
    def value(self) -> NBTType[Any]:
        return self._value

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, type_map: NBTType.TypeMap) -> Self:
        origin_type = get_origin(type_) or type_
        args = get_args(type_)
        if not args:
            key_type, value_type = str, Any
        elif len(args) == 2:
            key_type, value_type = args
        else:
            raise UnsupportedTypeError(f'expected {pretty_type(origin_type)}[<key type>, <value type>]')
        if not is_subclass(unwrap_new_type(key_type), str):
            raise InvalidKeyTypeError(f'compound keys must be str, not {pretty_type(key_type)}')
        if isinstance(origin_type, type) and issubclass(origin_type, dict):
            builder = origin_type
        else:
            builder = dict
        value = NBTType.from_type(value_type, type_map=type_map._replace(prefer_arrays=True))
        return cls(value, builder)

    @override
    def zero(self) -> Mapping[str, Any]:
        return self._builder(())

    @override
    def _check_value(self, value: Mapping[str, Any], /, *, deep: bool) -> None:
        if not isinstance(value, Mapping):
            raise TypeMismatchError(f'expected a mapping, got {type(value).__name__}')
        for key, item in value.items():
            if not isinstance(key, str):
                raise InvalidKeyTypeError(f'compound keys must be str, not {type(key).__name__}')
            if deep:
                self._value._check_value(item, deep=True)

    @override
    def _serialize(self, serializer: Serializer, value: Mapping[str, Any], /) -> None:
        entries = ((self._value.get_tag_type(item), key, item) for key, item in value.items())
        encode_compound(serializer, entries, self._value.serialize)

    @override
    def _deserialize(self, deserializer: Deserializer, tag_type: TagType, /) -> Mapping[str, Any]:
        return self._builder(self._decode_entries(deserializer))

    @override
    def deserialize_into(self, deserializer: Deserializer, tag_type: TagType, target: Mapping[str, Any], /) -> None:
        """ Decode the items of a compound into an existing mapping, keys that are already present are overwritten."""
        if not isinstance(target, MutableMapping):
            raise UnsupportedTypeError(f'cannot decode into a {type(target).__name__}, it is not a mutable mapping')
        self.check_tag_type(tag_type)
        target.update(self._decode_entries(deserializer))

    def _decode_entries(self, deserializer: Deserializer) -> list[tuple[str, Any]]:
        return decode_compound(deserializer, self._decode_entry)

    def _decode_entry(self, deserializer: Deserializer, tag_type: TagType, name: str) -> Any:
        return self._value.deserialize(deserializer, tag_type)

    @override
    def __repr__(self) -> str:
        return f'{type(self).__name__}({self._value!r})'
