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

from collections.abc import Sequence
from typing import Any

from typing_extensions import override

from nbtcodec.exception import TypeMismatchError
from nbtcodec.nbt_types.array_nbt_type import get_array_nbt_type_class
from nbtcodec.nbt_types.nbt_type import NBTType
from nbtcodec.nbt_types.sequence_nbt_type import _SequenceNBTType, get_sequence_builder, get_sequence_item_type
from nbtcodec.serialization import Deserializer, Serializer
from nbtcodec.serialization.compound_encoding.list import encode_list
from nbtcodec.tag_type import ARRAY_ITEM_TAG_TYPE, TagType
from nbtcodec.utils.typing import get_args, get_origin


class ListNBTType(_SequenceNBTType[Any]):
    """ Represents `list`, `tuple` and other sequences as a List tag.

    All items of a List share one tag type, when the items are dynamically typed (`list[Any]`) the tag type is taken
    from the items themselves and they must all agree. An empty list is always written with `END` as item tag type.
    """

    _tag_type = TagType.LIST

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, type_map: NBTType.TypeMap) -> NBTType:
        origin_type = get_origin(type_) or type_
        item_type, size = get_sequence_item_type(type_, origin_type, get_args(type_))
        builder = get_sequence_builder(origin_type)
        item_type_map = type_map._replace(prefer_arrays=True)
        item = NBTType.from_type(item_type, type_map=item_type_map)
        if type_map.prefer_arrays:
            array_class = get_array_nbt_type_class(item_type)
            if array_class is not None:
                return array_class(item, builder, size)
        return cls(item, builder, size)

    @override
    def accepts(self, tag_type: TagType, /) -> bool:
        if tag_type is TagType.LIST:
            return True
        return tag_type.is_array() and self._item.accepts(ARRAY_ITEM_TAG_TYPE[tag_type])

    def get_item_tag_type(self, value: Sequence[Any], /) -> TagType:
        """ The tag type of the items, for an empty sequence it is the static tag type of the item type."""
        item_tag_types = {self._item.get_tag_type(item) for item in value}
        if len(item_tag_types) > 1:
            names = ', '.join(sorted(tag_type.name for tag_type in item_tag_types))
            raise TypeMismatchError(f'list items must all have the same tag type, got: {names}')
        if item_tag_types:
            return item_tag_types.pop()
        return self._item.tag_type

    @override
    def _serialize(self, serializer: Serializer, value: Sequence[Any], /) -> None:
        encode_list(serializer, self.get_item_tag_type(value), value, self._item.serialize)

    @override
    def _deserialize(self, deserializer: Deserializer, tag_type: TagType, /) -> Sequence[Any]:
        return self._build(self._read_items(deserializer, tag_type))
