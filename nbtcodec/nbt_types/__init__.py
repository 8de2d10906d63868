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

from collections import OrderedDict
from collections.abc import Mapping, MutableMapping, MutableSequence, Sequence
from dataclasses import dataclass
from functools import cache
from typing import Any, TypeVar

from nbtcodec.exception import InvalidKeyTypeError, UnsupportedTypeError
from nbtcodec.nbt_types.any_nbt_type import AnyNBTType
from nbtcodec.nbt_types.array_nbt_type import ByteArrayNBTType, IntArrayNBTType, LongArrayNBTType
from nbtcodec.nbt_types.bool_nbt_type import BoolNBTType
from nbtcodec.nbt_types.float_nbt_type import DoubleNBTType, FloatNBTType
from nbtcodec.nbt_types.list_nbt_type import ListNBTType
from nbtcodec.nbt_types.map_nbt_type import MapNBTType
from nbtcodec.nbt_types.nbt_type import NBTType
from nbtcodec.nbt_types.record_nbt_type import RecordNBTType
from nbtcodec.nbt_types.sized_int_nbt_type import ByteNBTType, IntNBTType, LongNBTType, ShortNBTType
from nbtcodec.nbt_types.str_nbt_type import StrNBTType
from nbtcodec.nbt_types.utils import TypeAliasMap, TypeToNBTTypeMap
from nbtcodec.tag_type import TagType
from nbtcodec.types import Byte, Double, Float, Int, IntArray, Long, LongArray, Short

__all__ = [
    'DEFAULT_TYPE_ALIAS_MAP',
    'DEFAULT_TYPE_MAP',
    'TYPE_TO_NBT_TYPE_MAP',
    'AnyNBTType',
    'BoolNBTType',
    'ByteArrayNBTType',
    'ByteNBTType',
    'DoubleNBTType',
    'FloatNBTType',
    'IntArrayNBTType',
    'IntNBTType',
    'ListNBTType',
    'LongArrayNBTType',
    'LongNBTType',
    'MapNBTType',
    'NBTType',
    'RecordNBTType',
    'ShortNBTType',
    'StrNBTType',
    'TypeAliasMap',
    'TypeToNBTTypeMap',
    'make_nbt_type_for_type',
    'make_nbt_type_for_value',
    'tag_type_of',
]

T = TypeVar('T')

# abstract collection types are used as the concrete type that they are built as
DEFAULT_TYPE_ALIAS_MAP: TypeAliasMap = {
    Sequence: list,
    MutableSequence: list,
    Mapping: dict,
    MutableMapping: dict,
}

# Mapping between types and NBTType classes.
TYPE_TO_NBT_TYPE_MAP: TypeToNBTTypeMap = {
    # builtin types:
    bool: BoolNBTType,
    bytearray: ByteArrayNBTType,
    bytes: ByteArrayNBTType,
    dict: MapNBTType,
    float: DoubleNBTType,
    int: IntNBTType,
    list: ListNBTType,
    str: StrNBTType,
    tuple: ListNBTType,
    # other Python types:
    Any: AnyNBTType,
    OrderedDict: MapNBTType,
    # XXX: this is the key used for any dataclass
    dataclass: RecordNBTType,
    # sized types:
    Byte: ByteNBTType,
    Short: ShortNBTType,
    Int: IntNBTType,
    Long: LongNBTType,
    Float: FloatNBTType,
    Double: DoubleNBTType,
    IntArray: IntArrayNBTType,
    LongArray: LongArrayNBTType,
}

DEFAULT_TYPE_MAP = NBTType.TypeMap(DEFAULT_TYPE_ALIAS_MAP, TYPE_TO_NBT_TYPE_MAP)
_LIST_TYPE_MAP = DEFAULT_TYPE_MAP._replace(prefer_arrays=False)


def make_nbt_type_for_type(type_: Any, /, *, prefer_arrays: bool = True) -> NBTType:
    """ Like NBTType.from_type, but with the default maps, the result is cached.

    With `prefer_arrays=False` a sequence of Byte/Int/Long is a List instead of an array, this only applies to the
    given type, not to inner types.

    If you need to customize the mapping use `NBTType.from_type` instead.
    """
    try:
        hash(type_)
    except TypeError:
        return NBTType.from_type(type_, type_map=DEFAULT_TYPE_MAP if prefer_arrays else _LIST_TYPE_MAP)
    return _make_nbt_type_for_type(type_, prefer_arrays)


@cache
def _make_nbt_type_for_type(type_: Any, prefer_arrays: bool) -> NBTType:
    return NBTType.from_type(type_, type_map=DEFAULT_TYPE_MAP if prefer_arrays else _LIST_TYPE_MAP)


def make_nbt_type_for_value(value: Any, /) -> NBTType:
    """ Get the NBTType for the runtime type of a value, used for dynamically typed values.

    Containers have `Any` items, so a plain `list` is always written as a List (`IntArray`, `LongArray` and `bytes`
    values are arrays).
    """
    return _make_nbt_type_for_type(type(value), True)


def tag_type_of(type_: Any, /) -> TagType:
    """ The tag type a type is written as, `TagType.UNKNOWN` when the type is not supported.

    >>> from typing import Any
    >>> tag_type_of(int).name
    'INT'
    >>> tag_type_of(list[Long]).name
    'LONG_ARRAY'
    >>> tag_type_of(list[bool]).name
    'LIST'
    >>> tag_type_of(dict[str, Any]).name
    'COMPOUND'
    >>> tag_type_of(complex).name
    'UNKNOWN'
    """
    try:
        return make_nbt_type_for_type(type_).tag_type
    except (UnsupportedTypeError, InvalidKeyTypeError):
        return TagType.UNKNOWN
