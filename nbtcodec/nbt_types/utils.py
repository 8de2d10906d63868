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

from dataclasses import dataclass, is_dataclass
from typing import TYPE_CHECKING, Any, Mapping, TypeAlias

from structlog import get_logger

from nbtcodec.exception import UnsupportedTypeError
from nbtcodec.utils.typing import get_origin, is_union

if TYPE_CHECKING:
    from nbtcodec.nbt_types.nbt_type import NBTType


logger = get_logger()

TypeAliasMap: TypeAlias = Mapping[Any, type]
TypeToNBTTypeMap: TypeAlias = Mapping[Any, type['NBTType']]


def unwrap_new_type(type_: Any) -> Any:
    """ Replace a `NewType` by its supertype, recursively.

    >>> from typing import NewType
    >>> ResourceId = NewType('ResourceId', str)
    >>> Alias = NewType('Alias', ResourceId)
    >>> unwrap_new_type(Alias)
    <class 'str'>
    >>> unwrap_new_type(list[int])
    list[int]
    """
    while hasattr(type_, '__supertype__'):
        type_ = type_.__supertype__
    return type_


def pretty_type(type_: Any) -> str:
    """ Shows a cleaner string representation for a type.
    """
    if hasattr(type_, '__args__') or not hasattr(type_, '__name__'):
        return str(type_)
    return type_.__name__


def get_usable_origin_type(type_: Any, /, *, type_map: 'NBTType.TypeMap', _verbose: bool = True) -> Any:
    """ The purpose of this function is to map a given type into a key that is usable in a NBTType.TypeMap.

    The origin of the type is looked up (`list` for `list[int]`), after applying `type_map.alias_map`. Dataclasses map
    to the `dataclass` key. Classes that aren't in the map directly are looked up by their bases, so a `str` subclass
    or an `IntEnum` are usable. If nothing matches an UnsupportedTypeError is raised.

    >>> from collections.abc import Sequence
    >>> from nbtcodec.nbt_types import DEFAULT_TYPE_MAP as type_map
    >>> get_usable_origin_type(Sequence[int], type_map=type_map, _verbose=False)
    <class 'list'>
    >>> from enum import IntEnum
    >>> class Color(IntEnum):
    ...     RED = 1
    >>> get_usable_origin_type(Color, type_map=type_map)
    <class 'int'>
    >>> get_usable_origin_type(complex, type_map=type_map)
    Traceback (most recent call last):
    ...
    nbtcodec.exception.UnsupportedTypeError: type complex is not supported by any NBTType class
    """
    if isinstance(type_, str):
        raise UnsupportedTypeError(f'string annotation {type_!r} must be resolved before use')

    if is_union(type_):
        raise UnsupportedTypeError(f'union {type_} is only supported as `T | None` in record fields')

    origin_type = get_origin(type_) or type_
    if origin_type in type_map.alias_map:
        aliased_type = type_map.alias_map[origin_type]
        if _verbose:
            logger.debug('type replaced', old=pretty_type(origin_type), new=pretty_type(aliased_type))
        origin_type = aliased_type

    if isinstance(origin_type, type) and is_dataclass(origin_type) and dataclass in type_map.nbt_types_map:
        return dataclass

    if origin_type in type_map.nbt_types_map:
        return origin_type

    if isinstance(origin_type, type):
        for base in origin_type.__mro__[1:]:
            if base is object:
                break
            base = type_map.alias_map.get(base, base)
            if base in type_map.nbt_types_map:
                return base

    raise UnsupportedTypeError(f'type {pretty_type(type_)} is not supported by any NBTType class')


