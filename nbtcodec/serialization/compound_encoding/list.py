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

r"""
A list is an element tag type followed by an array of unnamed payloads of that tag type.

Layout: [tag type: 1 byte][N: signed int32][payload_0]...[payload_N]

An empty list always has `END` as its element tag type, whatever the type of the elements would be.

>>> from nbtcodec.serialization.encoding.utf8 import decode_utf8, encode_utf8
>>> se = Serializer.build_bytes_serializer()
>>> encode_list(se, TagType.STRING, ['a', 'bc'], encode_utf8)
>>> encode_list(se, TagType.STRING, [], encode_utf8)
>>> bytes(se.finalize()).hex()
'0800000002000161000262630000000000'

Breakdown of the result:

    08: String, the element tag type
    00000002: 2, the count
    000161: 'a'
    00026263: 'bc'
    00: End, the element tag type of the empty list
    00000000: 0, the count

When decoding, the header is read first, the caller then reads `count` payloads of the element tag type:

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('0800000002000161000262630000000000'))
>>> item_tag_type, count = decode_list_header(de)
>>> item_tag_type.name, [decode_utf8(de) for _ in range(count)]
('STRING', ['a', 'bc'])
>>> decode_list_header(de)
(<TagType.END: 0>, 0)
>>> de.finalize()
"""

from collections.abc import Collection
from typing import TypeVar

from nbtcodec.serialization import Deserializer, Serializer
from nbtcodec.serialization.encoding.tag import decode_tag_type, encode_tag_type
from nbtcodec.tag_type import TagType

from . import Encoder
from .array import decode_count, encode_count

T = TypeVar('T')


def encode_list_header(serializer: Serializer, item_tag_type: TagType, count: int) -> None:
    """ Writes the element tag type and the count, the tag type is replaced by `END` when the list is empty."""
    encode_tag_type(serializer, item_tag_type if count else TagType.END)
    encode_count(serializer, count)


def decode_list_header(deserializer: Deserializer) -> tuple[TagType, int]:
    """ Reads the element tag type and the count, a negative count is read as zero."""
    item_tag_type = decode_tag_type(deserializer)
    count = decode_count(deserializer)
    return item_tag_type, count


def encode_list(serializer: Serializer, item_tag_type: TagType, values: Collection[T], encoder: Encoder[T]) -> None:
    with serializer.nested():
        encode_list_header(serializer, item_tag_type, len(values))
        for value in values:
            encoder(serializer, value)
