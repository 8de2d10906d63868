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

from collections.abc import Iterable, Sequence
from typing import Any, Callable, TypeVar

from nbtcodec.exception import SizeMismatchError, TypeMismatchError, UnsupportedTypeError
from nbtcodec.nbt_types.nbt_type import NBTType
from nbtcodec.serialization import Deserializer
from nbtcodec.serialization.compound_encoding.array import decode_count
from nbtcodec.serialization.compound_encoding.list import decode_list_header
from nbtcodec.tag_type import ARRAY_ITEM_TAG_TYPE, TagType

T = TypeVar('T')


class _SequenceNBTType(NBTType[Sequence[T]]):
    """ Base class for the types that decode into a sequence, both the List tag and the array tags.

    The payload of an array tag is the same as the payload of a List minus the element tag type, so both readers go
    through `_read_items`, which lets List targets decode arrays and array targets decode Lists.

    A sequence is either dynamic (any number of items) or fixed-size, in which case more items than its size are
    rejected with SizeMismatchError and fewer items are completed with the item type's zero value.
    """
    __slots__ = ('_item', '_builder', '_size')

    _item: NBTType[T]
    _builder: Callable[[Iterable[T]], Sequence[T]]
    _size: int | None

    def __init__(
        self,
        item: NBTType[T],
        builder: Callable[[Iterable[T]], Sequence[T]] = list,
        size: int | None = None,
    ) -> None:
        self._item = item
        self._builder = builder
        self._size = size

    @property
    def item(self) -> NBTType[T]:
        return self._item

    @property
    def size(self) -> int | None:
        return self._size

    def zero(self) -> Sequence[T]:
        return self._build([])

    def _check_value(self, value: Sequence[T], /, *, deep: bool) -> None:
        if not isinstance(value, Sequence) or isinstance(value, str):
            raise TypeMismatchError(f'expected a sequence, got {type(value).__name__}')
        if self._size is not None and len(value) != self._size:
            raise TypeMismatchError(f'expected exactly {self._size} items, got {len(value)}')
        if deep:
            for item in value:
                self._item._check_value(item, deep=True)

    def _build(self, items: list[T]) -> Sequence[T]:
        if self._size is not None:
            items.extend(self._item.zero() for _ in range(self._size - len(items)))
        return self._builder(items)

    def _read_items(self, deserializer: Deserializer, tag_type: TagType) -> list[T]:
        if tag_type is TagType.LIST:
            with deserializer.nested():
                item_tag_type, count = decode_list_header(deserializer)
                return self._read_n_items(deserializer, item_tag_type, count)
        item_tag_type = ARRAY_ITEM_TAG_TYPE[tag_type]
        # XXX: ByteArray lengths are not clamped, IntArray and LongArray counts are
        count = decode_count(deserializer, clamp=tag_type is not TagType.BYTE_ARRAY)
        return self._read_n_items(deserializer, item_tag_type, count)

    def _read_n_items(self, deserializer: Deserializer, item_tag_type: TagType, count: int) -> list[T]:
        if self._size is not None and count > self._size:
            raise SizeMismatchError('too many items for a fixed-size sequence', capacity=self._size, count=count)
        if count:
            self._item.check_tag_type(item_tag_type)
        return [self._item.deserialize(deserializer, item_tag_type) for _ in range(count)]

    def __repr__(self) -> str:
        size = '' if self._size is None else f', size={self._size}'
        return f'{type(self).__name__}({self._item!r}{size})'


def get_sequence_item_type(type_: Any, origin_type: Any, args: tuple[Any, ...]) -> tuple[Any, int | None]:
    """ Get the item type and fixed size (`None` for dynamic) of a sequence hint.

    >>> from typing import Any
    >>> get_sequence_item_type(list[int], list, (int,))
    (<class 'int'>, None)
    >>> get_sequence_item_type(tuple[int, ...], tuple, (int, ...))
    (<class 'int'>, None)
    >>> get_sequence_item_type(tuple[int, int, int], tuple, (int, int, int))
    (<class 'int'>, 3)
    >>> get_sequence_item_type(list, list, ()) == (Any, None)
    True
    """
    if not args:
        return Any, None
    if isinstance(origin_type, type) and issubclass(origin_type, tuple):
        if len(args) == 2 and args[1] is Ellipsis:
            return args[0], None
        first = args[0]
        if any(arg != first for arg in args[1:]):
            raise UnsupportedTypeError(f'{type_} is not supported, fixed-size tuples must have one item type')
        return first, len(args)
    if len(args) != 1:
        raise UnsupportedTypeError(f'expected {getattr(origin_type, "__name__", origin_type)}[<type>]')
    return args[0], None


def get_sequence_builder(origin_type: Any) -> Callable[[Iterable[Any]], Sequence[Any]]:
    """ The class that decoded items are collected into, abstract origins like `Sequence` build a `list`.
    """
    if not isinstance(origin_type, type):
        return list
    if issubclass(origin_type, tuple):
        # named tuples take one argument per field
        return tuple if hasattr(origin_type, '_fields') else origin_type
    if issubclass(origin_type, list):
        return origin_type
    return list
