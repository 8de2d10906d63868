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

"""
Field options of records and the resolution of a record's fields into a table.

Records are dataclasses, by default each field is written as a named tag named after the attribute. `nbt_field` is a
drop-in replacement for `dataclasses.field` that adds options for the codec:

- `name`: the tag name to use instead of the attribute name;
- `skip`: the field is never written and never read;
- `as_list`: a sequence of Byte/Int/Long (`bytes`, `IntArray`, ... included) is written as a List instead of an
  array tag;
- `present_if`: name of a sibling `bool` field, the field is only written when that field is true, a missing field
  is not an error when reading.

The table of a record class (`get_record_fields`) is built once, under a lock, and shared afterwards.
"""

from __future__ import annotations

import dataclasses
import threading
from types import MappingProxyType, NoneType
from typing import TYPE_CHECKING, Any, Mapping, NamedTuple, get_type_hints

from structlog import get_logger

from nbtcodec.exception import UnsupportedTypeError
from nbtcodec.utils.typing import get_args, is_union

if TYPE_CHECKING:
    from nbtcodec.nbt_types.nbt_type import NBTType

logger = get_logger()

_METADATA_KEY = 'nbtcodec'


class FieldOptions(NamedTuple):
    name: str | None = None
    skip: bool = False
    as_list: bool = False
    present_if: str | None = None


_DEFAULT_OPTIONS = FieldOptions()


def nbt_field(
    *,
    name: str | None = None,
    skip: bool = False,
    as_list: bool = False,
    present_if: str | None = None,
    **kwargs: Any,
) -> Any:
    """ Same as `dataclasses.field` with the codec options, any other argument is forwarded to it.
    """
    metadata = dict(kwargs.pop('metadata', None) or {})
    metadata[_METADATA_KEY] = FieldOptions(name=name, skip=skip, as_list=as_list, present_if=present_if)
    return dataclasses.field(metadata=metadata, **kwargs)


def get_field_options(field: dataclasses.Field) -> FieldOptions:
    return field.metadata.get(_METADATA_KEY, _DEFAULT_OPTIONS)


class RecordField(NamedTuple):
    field: dataclasses.Field
    options: FieldOptions
    wire_name: str
    # `None` for skipped fields
    nbt_type: NBTType | None
    # annotated as `T | None`, a `None` value is not written
    optional: bool

    @property
    def attr_name(self) -> str:
        return self.field.name

    def has_default(self) -> bool:
        return self.field.default is not dataclasses.MISSING or self.field.default_factory is not dataclasses.MISSING


class RecordFields(NamedTuple):
    # all fields, including skipped ones, in declaration order
    fields: tuple[RecordField, ...]
    # non-skipped fields by tag name
    by_wire_name: Mapping[str, RecordField]


_record_fields_cache: dict[type, RecordFields] = {}
_record_fields_lock = threading.Lock()


def get_record_fields(record_class: type) -> RecordFields:
    """ Get the field table of a record class, it is resolved on first use and cached.
    """
    record_fields = _record_fields_cache.get(record_class)
    if record_fields is not None:
        return record_fields
    with _record_fields_lock:
        record_fields = _record_fields_cache.get(record_class)
        if record_fields is None:
            record_fields = _resolve_record_fields(record_class)
            _record_fields_cache[record_class] = record_fields
            logger.debug(
                'record fields resolved',
                record=record_class.__name__,
                fields=list(record_fields.by_wire_name),
            )
    return record_fields


def _resolve_record_fields(record_class: type) -> RecordFields:
    from nbtcodec.nbt_types import make_nbt_type_for_type

    if not dataclasses.is_dataclass(record_class):
        raise UnsupportedTypeError(f'{record_class.__name__} is not a dataclass')

    try:
        hints = get_type_hints(record_class)
    except NameError as e:
        raise UnsupportedTypeError(f'cannot resolve the annotations of {record_class.__name__}: {e}') from e

    dataclass_fields = {field.name: field for field in dataclasses.fields(record_class)}
    fields: list[RecordField] = []
    by_wire_name: dict[str, RecordField] = {}

    for field in dataclass_fields.values():
        options = get_field_options(field)
        if options.skip:
            fields.append(RecordField(field, options, field.name, None, False))
            continue

        wire_name = options.name if options.name is not None else field.name
        if wire_name in by_wire_name:
            raise UnsupportedTypeError(f'{record_class.__name__} has more than one field named {wire_name!r}')

        if options.present_if is not None:
            gate = dataclass_fields.get(options.present_if)
            if gate is None:
                raise UnsupportedTypeError(
                    f'{record_class.__name__}.{field.name} depends on {options.present_if!r}, which is not a field'
                )
            if hints.get(gate.name) is not bool:
                raise UnsupportedTypeError(
                    f'{record_class.__name__}.{field.name} depends on {options.present_if!r}, which is not a bool'
                )

        field_type, optional = _unwrap_optional(hints[field.name])
        nbt_type = make_nbt_type_for_type(field_type, prefer_arrays=not options.as_list)
        record_field = RecordField(field, options, wire_name, nbt_type, optional)
        fields.append(record_field)
        by_wire_name[wire_name] = record_field

    return RecordFields(tuple(fields), MappingProxyType(by_wire_name))


def _unwrap_optional(type_: Any) -> tuple[Any, bool]:
    """ Turn `T | None` into `(T, True)` and any other type into `(type, False)`.

    >>> _unwrap_optional(int | None)
    (<class 'int'>, True)
    >>> _unwrap_optional(str)
    (<class 'str'>, False)
    """
    if not is_union(type_):
        return type_, False
    args = get_args(type_)
    not_none = [arg for arg in args if arg is not NoneType]
    if len(not_none) != 1 or len(not_none) == len(args):
        raise UnsupportedTypeError(f'only `T | None` unions are supported, got {type_}')
    return not_none[0], True
