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

from dataclasses import is_dataclass
from typing import TYPE_CHECKING, Any, Iterator, TypeVar

from typing_extensions import Self, override

from nbtcodec.exception import TypeMismatchError, UnknownFieldError, UnsupportedTypeError
from nbtcodec.fields import RecordFields, get_record_fields
from nbtcodec.nbt_types.nbt_type import NBTType
from nbtcodec.serialization import Deserializer, Serializer
from nbtcodec.serialization.compound_encoding.compound import decode_compound, encode_compound
from nbtcodec.tag_type import TagType

if TYPE_CHECKING:
    from _typeshed import DataclassInstance

D = TypeVar('D', bound='DataclassInstance')


def _serialize_entry(serializer: Serializer, entry: tuple[NBTType, Any], /) -> None:
    nbt_type, value = entry
    nbt_type.serialize(serializer, value)


class RecordNBTType(NBTType[D]):
    """ Represents a dataclass as a Compound tag, each field is a named tag.

    Fields are written in declaration order and matched by name when reading, so their order on the wire doesn't
    matter. A tag with a name that doesn't match any field is an error (UnknownFieldError). Fields that are not in
    the compound get their default value, or the zero value of their type when they have no default.

    The field table is resolved the first time it's needed, not when the instance is created, this allows records
    that refer to themselves (`children: list['Node']`).
    """
    __slots__ = ('_class',)

    _tag_type = TagType.COMPOUND
    _class: type[D]

    def __init__(self, class_: type[D]) -> None:
        self._class = class_

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, type_map: NBTType.TypeMap) -> Self:
        if not isinstance(type_, type) or not is_dataclass(type_):
            raise UnsupportedTypeError('expected a dataclass')
        return cls(type_)

    @property
    def record_fields(self) -> RecordFields:
        return get_record_fields(self._class)

    @override
    def zero(self) -> D:
        return self._build({})

    @override
    def _check_value(self, value: D, /, *, deep: bool) -> None:
        if not isinstance(value, self._class):
            raise TypeMismatchError(f'expected {self._class.__name__} instance, got {type(value).__name__}')
        if deep:
            for _, _, (nbt_type, field_value) in self._iter_entries(value):
                nbt_type._check_value(field_value, deep=True)

    def _iter_entries(self, value: D) -> Iterator[tuple[TagType, str, tuple[NBTType, Any]]]:
        for record_field in self.record_fields.fields:
            nbt_type = record_field.nbt_type
            if nbt_type is None:
                continue
            present_if = record_field.options.present_if
            if present_if is not None and not getattr(value, present_if):
                continue
            field_value = getattr(value, record_field.attr_name)
            if field_value is None and record_field.optional:
                continue
            yield nbt_type.get_tag_type(field_value), record_field.wire_name, (nbt_type, field_value)

    @override
    def _serialize(self, serializer: Serializer, value: D, /) -> None:
        encode_compound(serializer, self._iter_entries(value), _serialize_entry)

    @override
    def _deserialize(self, deserializer: Deserializer, tag_type: TagType, /) -> D:
        return self._build(self._decode_values(deserializer))

    @override
    def deserialize_into(self, deserializer: Deserializer, tag_type: TagType, target: D, /) -> None:
        """ Decode a compound by setting the fields of an existing instance, fields that are absent are untouched."""
        if not isinstance(target, self._class):
            raise TypeMismatchError(f'expected {self._class.__name__} instance, got {type(target).__name__}')
        self.check_tag_type(tag_type)
        for attr_name, value in self._decode_values(deserializer).items():
            setattr(target, attr_name, value)

    def _decode_values(self, deserializer: Deserializer) -> dict[str, Any]:
        by_wire_name = self.record_fields.by_wire_name

        def decode_entry(deserializer: Deserializer, tag_type: TagType, name: str) -> Any:
            record_field = by_wire_name.get(name)
            if record_field is None:
                raise UnknownFieldError(name, self._class)
            assert record_field.nbt_type is not None
            return record_field.nbt_type.deserialize(deserializer, tag_type)

        return {
            by_wire_name[name].attr_name: value
            for name, value in decode_compound(deserializer, decode_entry)
        }

    def _build(self, values: dict[str, Any]) -> D:
        kwargs: dict[str, Any] = {}
        not_init: dict[str, Any] = {}
        for record_field in self.record_fields.fields:
            attr_name = record_field.attr_name
            if attr_name in values:
                value = values[attr_name]
            elif record_field.has_default():
                continue
            elif record_field.nbt_type is None or record_field.optional:
                value = None
            else:
                value = record_field.nbt_type.zero()
            if record_field.field.init:
                kwargs[attr_name] = value
            else:
                not_init[attr_name] = value
        instance = self._class(**kwargs)
        for attr_name, value in not_init.items():
            # XXX: works for frozen dataclasses too
            object.__setattr__(instance, attr_name, value)
        return instance

    @override
    def __repr__(self) -> str:
        return f'{type(self).__name__}({self._class.__name__})'
