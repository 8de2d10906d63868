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

from enum import IntEnum, unique


@unique
class TagType(IntEnum):
    """ Wire value of each kind of payload.

    `END` terminates a compound and is written as the element type of empty lists, it is never a named tag.
    `UNKNOWN` is a sentinel used by the type mapper for host types that have no mapping, it never goes on the wire.
    """

    END = 0
    BYTE = 1
    SHORT = 2
    INT = 3
    LONG = 4
    FLOAT = 5
    DOUBLE = 6
    BYTE_ARRAY = 7
    STRING = 8
    LIST = 9
    COMPOUND = 10
    INT_ARRAY = 11
    LONG_ARRAY = 12
    UNKNOWN = 0xFF

    def is_integer(self) -> bool:
        return self in _INTEGER_TAG_TYPES

    def is_array(self) -> bool:
        return self in _ARRAY_TAG_TYPES


_INTEGER_TAG_TYPES = frozenset({TagType.BYTE, TagType.SHORT, TagType.INT, TagType.LONG})
_ARRAY_TAG_TYPES = frozenset({TagType.BYTE_ARRAY, TagType.INT_ARRAY, TagType.LONG_ARRAY})

# element tag type implied by each array tag type
ARRAY_ITEM_TAG_TYPE: dict[TagType, TagType] = {
    TagType.BYTE_ARRAY: TagType.BYTE,
    TagType.INT_ARRAY: TagType.INT,
    TagType.LONG_ARRAY: TagType.LONG,
}
